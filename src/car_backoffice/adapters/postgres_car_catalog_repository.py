"""PostgreSQL implementation of CarCatalogRepository."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import String, cast, delete, func, select
from sqlalchemy.orm import Session

from car_backoffice.domain.car import Badge, Car, FuelType, ListingStatus, Transmission
from car_backoffice.domain.search import Paging, SearchFilters, SortOrder
from car_backoffice.infra.db.models.car import CarRow
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository, SearchResult

if TYPE_CHECKING:
    from sqlalchemy.sql import Select


def _as_uuid(value: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(value)
    except ValueError:  # Invalid UUID format
        return None


class PostgresCarCatalogRepository(CarCatalogRepository):
    """
    PostgreSQL implementation of CarCatalogRepository.

    - Uses SQLAlchemy ORM for database access
    - Applies filters using SQL WHERE clauses
    - Returns total_count via COUNT(*) query
    - Converts CarRow (infrastructure) to Car (domain)
    - Flushes every write so later reads in the same session see it
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def add(self, car: Car) -> None:
        row = CarRow(id=uuid.UUID(car.id))
        self._apply(row, car)
        self._session.add(row)
        self._session.flush()

    def save(self, car: Car) -> None:
        row = self._session.get(CarRow, uuid.UUID(car.id))
        if row is None:
            self.add(car)
            return
        self._apply(row, car)
        self._session.flush()

    def get_by_id(self, car_id: str) -> Car | None:
        """
        Get car by ID.

        Args:
            car_id: Car ID (expected to be a valid UUID string)

        Returns:
            Car entity if found, None otherwise
        """
        key = _as_uuid(car_id)
        if key is None:
            return None
        row = self._session.get(CarRow, key)
        return self._to_domain(row) if row else None

    def delete(self, car_id: str) -> bool:
        key = _as_uuid(car_id)
        if key is None:
            return False
        result = self._session.execute(delete(CarRow).where(CarRow.id == key))
        return bool(result.rowcount)

    def search(
        self,
        filters: SearchFilters,
        paging: Paging,
        sort: SortOrder = SortOrder.NEWEST,
    ) -> SearchResult:
        """
        Search approved listings.

        Executes two queries:
        1. COUNT(*) to get total matching cars (before paging)
        2. SELECT with ORDER BY/OFFSET/LIMIT to get the page

        Note:
            Assumes inputs are validated by UseCase (contract programming).
        """
        query = self._build_query(filters).where(
            CarRow.status == ListingStatus.APPROVED.value
        )
        return self._page(query, paging, sort)

    def list_listings(
        self,
        paging: Paging,
        status: ListingStatus | None = None,
        submitted_by: str | None = None,
    ) -> SearchResult:
        query = select(CarRow)
        if status is not None:
            query = query.where(CarRow.status == status.value)
        if submitted_by is not None:
            query = query.where(CarRow.submitted_by == submitted_by)
        return self._page(query, paging, SortOrder.NEWEST)

    def _page(self, query: Select[tuple[CarRow]], paging: Paging, sort: SortOrder) -> SearchResult:
        count_query = select(func.count()).select_from(query.subquery())
        total_count = self._session.execute(count_query).scalar() or 0

        query = query.order_by(*self._ordering(sort)).offset(paging.offset).limit(paging.limit)

        rows = self._session.execute(query).scalars().all()
        cars = [self._to_domain(row) for row in rows]

        return SearchResult(cars=cars, total_count=total_count)

    def _ordering(self, sort: SortOrder) -> tuple:
        if sort is SortOrder.OLDEST:
            return (CarRow.created_at.asc(), CarRow.id.asc())
        if sort is SortOrder.PRICE_ASC:
            return (CarRow.price.asc(), CarRow.id.asc())
        if sort is SortOrder.PRICE_DESC:
            return (CarRow.price.desc(), CarRow.id.asc())
        return (CarRow.created_at.desc(), CarRow.id.asc())

    def _build_query(self, filters: SearchFilters) -> Select[tuple[CarRow]]:
        """
        Build SQLAlchemy query with filters applied.

        Args:
            filters: Filter criteria to apply

        Returns:
            SQLAlchemy select statement with WHERE clauses
        """
        query = select(CarRow)

        # Case-insensitive IN over the selected brands
        if filters.brands:
            query = query.where(
                func.lower(CarRow.brand).in_(sorted(b.lower() for b in filters.brands))
            )

        # Model only counts when a single brand is selected
        model = filters.active_model
        if model:
            query = query.where(func.lower(CarRow.model) == model.lower())

        if filters.year is not None:
            query = query.where(CarRow.year == filters.year)
        if filters.registration_year is not None:
            query = query.where(CarRow.registration_year == filters.registration_year)

        # Inclusive ranges
        if filters.price_min is not None:
            query = query.where(CarRow.price >= filters.price_min)
        if filters.price_max is not None:
            query = query.where(CarRow.price <= filters.price_max)
        if filters.km_min is not None:
            query = query.where(CarRow.km_run >= filters.km_min)
        if filters.km_max is not None:
            query = query.where(CarRow.km_run <= filters.km_max)

        if filters.color:
            color = func.lower(CarRow.color, type_=String)
            query = query.where(color.contains(filters.color.lower(), autoescape=True))

        if filters.text:
            search_text = func.lower(
                CarRow.brand
                + " "
                + CarRow.model
                + " "
                + cast(CarRow.year, String)
                + " "
                + CarRow.color,
                type_=String,
            )
            query = query.where(search_text.contains(filters.text.lower(), autoescape=True))

        if filters.reel_url:
            query = query.where(CarRow.instagram_media_id == filters.reel_media_id)

        return query

    def _apply(self, row: CarRow, car: Car) -> None:
        row.brand = car.brand
        row.model = car.model
        row.year = car.year
        row.registration_year = car.registration_year
        row.price = car.price
        row.km_run = car.km_run
        row.fuel = car.fuel.value
        row.transmission = car.transmission.value
        row.ownership = car.ownership
        row.color = car.color
        row.engine_cc = car.engine_cc
        row.additional_details = car.additional_details
        row.images = list(car.images)
        row.badges = sorted(badge.value for badge in car.badges)
        row.instagram_reel_url = car.instagram_reel_url
        row.instagram_media_id = car.instagram_media_id
        row.status = car.status.value
        row.submitted_by = car.submitted_by
        row.created_at = car.created_at

    def _to_domain(self, row: CarRow) -> Car:
        """
        Convert database model (CarRow) to domain entity (Car).

        Args:
            row: SQLAlchemy CarRow model

        Returns:
            Car domain entity
        """
        return Car(
            id=str(row.id),  # Convert UUID to string
            brand=row.brand,
            model=row.model,
            year=row.year,
            registration_year=row.registration_year,
            price=row.price,
            km_run=row.km_run,
            fuel=FuelType(row.fuel),
            transmission=Transmission(row.transmission),
            ownership=row.ownership,
            color=row.color,
            engine_cc=row.engine_cc,
            additional_details=row.additional_details,
            images=tuple(row.images or ()),
            badges=frozenset(Badge(b) for b in row.badges or ()),
            instagram_reel_url=row.instagram_reel_url,
            status=ListingStatus(row.status),
            submitted_by=row.submitted_by,
            created_at=row.created_at,
        )
