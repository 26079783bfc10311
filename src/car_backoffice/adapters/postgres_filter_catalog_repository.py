"""PostgreSQL implementation of FilterCatalogRepository."""

from __future__ import annotations

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from car_backoffice.domain.filter_catalog import FilterCatalog, StaleCatalog
from car_backoffice.infra.db.models.filter_catalog import SINGLETON_ID, FilterCatalogRow
from car_backoffice.ports.filter_catalog_repository import FilterCatalogRepository


class PostgresFilterCatalogRepository(FilterCatalogRepository):
    """
    Stores the catalog as a single row with a version column.

    The compare-and-swap is one ``UPDATE ... WHERE version = :expected``;
    zero affected rows means another writer got there first. The very first
    write (expected version 0, no row yet) is an INSERT instead.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self) -> FilterCatalog:
        row = self._session.execute(
            select(FilterCatalogRow).where(FilterCatalogRow.id == SINGLETON_ID)
        ).scalar_one_or_none()
        if row is None:
            return FilterCatalog()
        return self._to_domain(row)

    def replace(self, catalog: FilterCatalog, expected_version: int) -> FilterCatalog:
        values = self._to_values(catalog)
        new_version = expected_version + 1

        result = self._session.execute(
            update(FilterCatalogRow)
            .where(FilterCatalogRow.id == SINGLETON_ID)
            .where(FilterCatalogRow.version == expected_version)
            .values(version=new_version, **values)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            if expected_version != 0 or self._current_version() is not None:
                raise StaleCatalog(
                    expected_version=expected_version,
                    current_version=self._current_version() or 0,
                )
            try:
                self._session.execute(
                    insert(FilterCatalogRow).values(id=SINGLETON_ID, version=new_version, **values)
                )
            except IntegrityError as exc:
                # Another writer created the row between our UPDATE and INSERT;
                # the transaction is aborted so the stored version is unknown
                raise StaleCatalog(expected_version=expected_version) from exc

        self._session.expire_all()
        return self.get()

    def _current_version(self) -> int | None:
        return self._session.execute(
            select(FilterCatalogRow.version).where(FilterCatalogRow.id == SINGLETON_ID)
        ).scalar_one_or_none()

    def _to_values(self, catalog: FilterCatalog) -> dict[str, object]:
        return {
            "brands": catalog.sorted_brands(),
            "models": {brand: sorted(names) for brand, names in catalog.models.items()},
            "years": list(catalog.years),
        }

    def _to_domain(self, row: FilterCatalogRow) -> FilterCatalog:
        return FilterCatalog(
            brands=frozenset(row.brands or ()),
            models={brand: frozenset(names) for brand, names in (row.models or {}).items()},
            years=tuple(row.years or ()),
            version=row.version,
        )
