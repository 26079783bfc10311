"""Shared fixtures: a reference filter catalog, actor roster and builders."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

import pytest

from car_backoffice.adapters.in_memory_actor_directory import InMemoryActorDirectory
from car_backoffice.domain.actors import Actor, Role
from car_backoffice.domain.car import Car, ListingDraft, ListingStatus
from car_backoffice.domain.filter_catalog import FilterCatalog

FIXED_NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

ROSTER = [
    Actor(id="admin-1", role=Role.ADMIN),
    Actor(id="manager-1", role=Role.MANAGER),
    Actor(id="editor-1", role=Role.CONTENT_EDITOR),
    Actor(id="editor-2", role=Role.CONTENT_EDITOR),
    Actor(id="agent-1", role=Role.SALES_AGENT),
    Actor(id="agent-2", role=Role.SALES_AGENT),
    Actor(id="customer-1", role=Role.CUSTOMER),
]


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def catalog() -> FilterCatalog:
    """Reference catalog used across listing tests."""
    return FilterCatalog(
        brands=frozenset({"Tata", "Hyundai", "Maruti Suzuki"}),
        models={
            "Tata": frozenset({"Nexon", "Punch"}),
            "Hyundai": frozenset({"Creta", "i20"}),
            "Maruti Suzuki": frozenset({"Swift"}),
        },
        years=(2024, 2023, 2022, 2021, 2020),
    )


@pytest.fixture()
def actor_directory() -> InMemoryActorDirectory:
    return InMemoryActorDirectory(list(ROSTER))


@pytest.fixture()
def make_draft() -> Callable[..., ListingDraft]:
    """Builder for a valid Tata Nexon draft; override any field by keyword."""

    def _make(**overrides: Any) -> ListingDraft:
        fields: dict[str, Any] = {
            "brand": "Tata",
            "model": "Nexon",
            "year": 2021,
            "price": 850_000,
            "km_run": 32_000,
            "fuel": "Petrol",
            "transmission": "Manual",
            "ownership": 1,
            "color": "White",
            "engine_cc": 1199,
            "images": ("https://cdn.example.com/cars/nexon-1.jpg",),
        }
        fields.update(overrides)
        return ListingDraft(**fields)

    return _make


@pytest.fixture()
def make_car(make_draft: Callable[..., ListingDraft]) -> Callable[..., Car]:
    """
    Builder for stored listings.

    Car ids are UUID-shaped so the same builder serves the SQL adapters.
    ``n`` picks the id and staggers ``created_at`` (higher n = newer).
    """

    def _make(
        n: int = 1,
        status: ListingStatus = ListingStatus.APPROVED,
        submitted_by: str = "editor-1",
        **draft_overrides: Any,
    ) -> Car:
        car = Car.from_draft(
            make_draft(**draft_overrides),
            car_id=f"00000000-0000-0000-0000-{n:012d}",
            submitted_by=submitted_by,
            created_at=FIXED_NOW + timedelta(minutes=n),
        )
        return replace(car, status=status)

    return _make
