"""
Contract test suite for InquiryRepository.

Runs against the in-memory repository and the SQLAlchemy repository on
SQLite. Covers persistence, list filters and ordering, and the idempotent
cascade delete used when a listing is removed.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from car_backoffice.domain.car import Car
from car_backoffice.domain.inquiry import (
    CallPreference,
    Inquiry,
    InquiryQuery,
    InquiryStatus,
)
from car_backoffice.domain.search import Paging
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository
from car_backoffice.ports.inquiry_repository import InquiryRepository

RepoFactory = Callable[[list[Car], list[Inquiry]], InquiryRepository]
CarRepoFactory = Callable[[list[Car]], CarCatalogRepository]

ALL = Paging(offset=0, limit=50)

SUBMITTED = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _inquiry(n: int, car: Car, **overrides: object) -> Inquiry:
    fields: dict[str, object] = {
        "id": f"10000000-0000-0000-0000-{n:012d}",
        "car_id": car.id,
        "car_summary": car.summary,
        "customer_name": f"Customer {n}",
        "customer_phone": f"+91 98000 0000{n}",
        "submitted_at": SUBMITTED + timedelta(hours=n),
    }
    fields.update(overrides)
    return Inquiry(**fields)  # type: ignore[arg-type]


def _numbers(inquiries: list[Inquiry]) -> list[int]:
    return [int(i.id.rsplit("-", 1)[1]) for i in inquiries]


@pytest.fixture()
def cars(make_car) -> list[Car]:
    return [make_car(1), make_car(2, brand="Hyundai", model="Creta")]


@pytest.fixture()
def inquiries(cars: list[Car]) -> list[Inquiry]:
    nexon, creta = cars
    return [
        _inquiry(1, nexon),
        _inquiry(2, nexon, status=InquiryStatus.CONTACTED, assigned_to="agent-1"),
        _inquiry(
            3,
            creta,
            status=InquiryStatus.CLOSED,
            assigned_to="agent-1",
            remarks="Booked a test drive",
            is_serious_customer=True,
        ),
        _inquiry(4, creta, status=InquiryStatus.CONTACTED, assigned_to="agent-2"),
    ]


@pytest.fixture()
def repo(
    inquiry_repository_factory: RepoFactory, cars: list[Car], inquiries: list[Inquiry]
) -> InquiryRepository:
    return inquiry_repository_factory(cars, inquiries)


# ==============================================================================
# Persistence
# ==============================================================================


def test_get_by_id_round_trips_fields(repo: InquiryRepository, inquiries: list[Inquiry]) -> None:
    stored = repo.get_by_id(inquiries[2].id)

    assert stored is not None
    assert stored.car_id == inquiries[2].car_id
    assert stored.car_summary == "Hyundai Creta 2021"
    assert stored.status is InquiryStatus.CLOSED
    assert stored.assigned_to == "agent-1"
    assert stored.remarks == "Booked a test drive"
    assert stored.is_serious_customer is True
    assert stored.call_preference is CallPreference.NOW


def test_get_by_id_unknown_or_malformed(repo: InquiryRepository) -> None:
    assert repo.get_by_id("10000000-0000-0000-0000-000000000999") is None
    assert repo.get_by_id("inquiry-1") is None


def test_save_overwrites(repo: InquiryRepository, inquiries: list[Inquiry]) -> None:
    repo.save(replace(inquiries[0], private_notes="Prefers evening calls", assigned_to="agent-2"))

    stored = repo.get_by_id(inquiries[0].id)
    assert stored is not None
    assert stored.private_notes == "Prefers evening calls"
    assert stored.assigned_to == "agent-2"


def test_delete(repo: InquiryRepository, inquiries: list[Inquiry]) -> None:
    assert repo.delete(inquiries[0].id) is True
    assert repo.get_by_id(inquiries[0].id) is None
    assert repo.delete(inquiries[0].id) is False


def test_car_summary_survives_an_edit_of_the_car(
    repo: InquiryRepository,
    car_repository_factory: CarRepoFactory,
    cars: list[Car],
    inquiries: list[Inquiry],
) -> None:
    car_repository_factory([]).save(replace(cars[0], model="Punch", year=2020))

    stored = repo.get_by_id(inquiries[0].id)
    assert stored is not None
    assert stored.car_summary == "Tata Nexon 2021"


# ==============================================================================
# Cascade delete
# ==============================================================================


def test_delete_by_car_id_removes_only_that_cars_inquiries(
    repo: InquiryRepository, cars: list[Car]
) -> None:
    assert repo.delete_by_car_id(cars[0].id) == 2

    assert _numbers(repo.list_inquiries(InquiryQuery(), ALL).inquiries) == [4, 3]


def test_delete_by_car_id_is_idempotent(repo: InquiryRepository, cars: list[Car]) -> None:
    repo.delete_by_car_id(cars[1].id)

    assert repo.delete_by_car_id(cars[1].id) == 0


def test_delete_by_car_id_for_car_without_inquiries(
    inquiry_repository_factory: RepoFactory, make_car
) -> None:
    repo = inquiry_repository_factory([make_car(7)], [])

    assert repo.delete_by_car_id(make_car(7).id) == 0


# ==============================================================================
# Listing
# ==============================================================================


def test_list_newest_first(repo: InquiryRepository) -> None:
    page = repo.list_inquiries(InquiryQuery(), ALL)

    assert _numbers(page.inquiries) == [4, 3, 2, 1]
    assert page.total_count == 4


def test_list_filters(repo: InquiryRepository, cars: list[Car]) -> None:
    assert _numbers(repo.list_inquiries(InquiryQuery(assigned_to="agent-1"), ALL).inquiries) == [3, 2]
    assert _numbers(
        repo.list_inquiries(InquiryQuery(status=InquiryStatus.CONTACTED), ALL).inquiries
    ) == [4, 2]
    assert _numbers(repo.list_inquiries(InquiryQuery(car_id=cars[0].id), ALL).inquiries) == [2, 1]
    assert _numbers(repo.list_inquiries(InquiryQuery(serious_only=True), ALL).inquiries) == [3]


def test_list_filters_combine(repo: InquiryRepository, cars: list[Car]) -> None:
    query = InquiryQuery(assigned_to="agent-1", car_id=cars[1].id, status=InquiryStatus.CONTACTED)

    page = repo.list_inquiries(query, ALL)

    assert page.inquiries == []
    assert page.total_count == 0


def test_list_paging_counts_before_paging(repo: InquiryRepository) -> None:
    page = repo.list_inquiries(InquiryQuery(), Paging(offset=1, limit=2))

    assert _numbers(page.inquiries) == [3, 2]
    assert page.total_count == 4


def test_same_submission_time_falls_back_to_id(
    inquiry_repository_factory: RepoFactory, make_car
) -> None:
    car = make_car(1)
    repo = inquiry_repository_factory(
        [car], [_inquiry(n, car, submitted_at=SUBMITTED) for n in (3, 1, 2)]
    )

    assert _numbers(repo.list_inquiries(InquiryQuery(), ALL).inquiries) == [1, 2, 3]
