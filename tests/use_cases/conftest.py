"""Fixtures for use case tests: in-memory repositories and deterministic clock/ids."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterator

import pytest

from car_backoffice.adapters.in_memory_car_catalog_repository import InMemoryCarCatalogRepository
from car_backoffice.adapters.in_memory_filter_catalog_repository import (
    InMemoryFilterCatalogRepository,
)
from car_backoffice.adapters.in_memory_inquiry_repository import InMemoryInquiryRepository
from car_backoffice.domain.filter_catalog import FilterCatalog
from car_backoffice.domain.inquiry import CustomerContact, Inquiry, open_inquiry


@pytest.fixture()
def car_repo() -> InMemoryCarCatalogRepository:
    return InMemoryCarCatalogRepository()


@pytest.fixture()
def inquiry_repo() -> InMemoryInquiryRepository:
    return InMemoryInquiryRepository()


@pytest.fixture()
def filter_catalog_repo(catalog: FilterCatalog) -> InMemoryFilterCatalogRepository:
    """Repository already holding the reference catalog at version 1."""
    repo = InMemoryFilterCatalogRepository()
    repo.replace(catalog, expected_version=0)
    return repo


@pytest.fixture()
def clock(fixed_now: datetime) -> Callable[[], datetime]:
    return lambda: fixed_now


@pytest.fixture()
def id_factory() -> Callable[[], str]:
    """Sequential UUID-shaped ids: ...-a00000000001, ...-a00000000002, ..."""

    def _ids() -> Iterator[str]:
        n = 0
        while True:
            n += 1
            yield f"00000000-0000-0000-0000-a{n:011d}"

    sequence = _ids()
    return lambda: next(sequence)


@pytest.fixture()
def make_inquiry(make_car, fixed_now) -> Callable[..., Inquiry]:
    """Builder for stored inquiries against ``make_car(1)``."""
    car = make_car(1)

    def _make(inquiry_id: str = "inq-1", **overrides: object) -> Inquiry:
        inquiry = open_inquiry(
            car,
            CustomerContact(name="Ramesh", phone="9000000000"),
            inquiry_id=inquiry_id,
            submitted_at=fixed_now,
        )
        return replace(inquiry, **overrides)  # type: ignore[arg-type]

    return _make
