"""
Fixtures for adapter tests.

The SQLAlchemy adapters run against an in-memory SQLite database built from
the ORM metadata, so the same contract tests cover both implementations.
"""

from __future__ import annotations

from typing import Callable, Iterator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from car_backoffice.adapters.in_memory_car_catalog_repository import InMemoryCarCatalogRepository
from car_backoffice.adapters.in_memory_inquiry_repository import InMemoryInquiryRepository
from car_backoffice.adapters.postgres_car_catalog_repository import PostgresCarCatalogRepository
from car_backoffice.adapters.postgres_inquiry_repository import PostgresInquiryRepository
from car_backoffice.domain.car import Car
from car_backoffice.domain.inquiry import Inquiry
from car_backoffice.infra.db.models import Base
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository
from car_backoffice.ports.inquiry_repository import InquiryRepository


@pytest.fixture()
def sqlite_session() -> Iterator[Session]:
    engine = create_engine("sqlite+pysqlite:///:memory:")
    Base.metadata.create_all(engine)
    session = Session(engine, expire_on_commit=False)
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture(params=["in_memory", "sql"])
def car_repository_factory(
    request: pytest.FixtureRequest,
) -> Callable[[list[Car]], CarCatalogRepository]:
    """Builds a car repository pre-loaded with the given listings, once per implementation."""
    if request.param == "in_memory":
        return lambda cars: InMemoryCarCatalogRepository(list(cars))

    session = request.getfixturevalue("sqlite_session")

    def _build(cars: list[Car]) -> CarCatalogRepository:
        repo = PostgresCarCatalogRepository(session)
        for car in cars:
            repo.add(car)
        return repo

    return _build


@pytest.fixture(params=["in_memory", "sql"])
def inquiry_repository_factory(
    request: pytest.FixtureRequest,
) -> Callable[[list[Car], list[Inquiry]], InquiryRepository]:
    """Builds an inquiry repository; the SQL variant stores the referenced cars first."""
    if request.param == "in_memory":
        return lambda cars, inquiries: InMemoryInquiryRepository(list(inquiries))

    session = request.getfixturevalue("sqlite_session")

    def _build(cars: list[Car], inquiries: list[Inquiry]) -> InquiryRepository:
        car_repo = PostgresCarCatalogRepository(session)
        for car in cars:
            car_repo.add(car)
        repo = PostgresInquiryRepository(session)
        for inquiry in inquiries:
            repo.add(inquiry)
        return repo

    return _build
