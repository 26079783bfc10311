from __future__ import annotations

import threading
from dataclasses import replace

from car_backoffice.domain.filter_catalog import FilterCatalog, StaleCatalog
from car_backoffice.ports.filter_catalog_repository import FilterCatalogRepository


class InMemoryFilterCatalogRepository(FilterCatalogRepository):
    """Single catalog document guarded by a lock for the compare-and-swap."""

    def __init__(self, catalog: FilterCatalog | None = None) -> None:
        self._catalog = catalog or FilterCatalog()
        self._lock = threading.Lock()

    def get(self) -> FilterCatalog:
        return self._catalog

    def replace(self, catalog: FilterCatalog, expected_version: int) -> FilterCatalog:
        with self._lock:
            current = self._catalog.version
            if current != expected_version:
                raise StaleCatalog(expected_version=expected_version, current_version=current)
            self._catalog = replace(catalog, version=current + 1)
            return self._catalog
