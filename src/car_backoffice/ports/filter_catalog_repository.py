from __future__ import annotations

from abc import ABC, abstractmethod

from car_backoffice.domain.filter_catalog import FilterCatalog


class FilterCatalogRepository(ABC):
    """
    Port for the single global filter catalog document.

    Writes are whole-document compare-and-swap replacements.
    """

    @abstractmethod
    def get(self) -> FilterCatalog:
        """Current catalog. An empty catalog with version 0 if none was stored."""
        ...

    @abstractmethod
    def replace(self, catalog: FilterCatalog, expected_version: int) -> FilterCatalog:
        """
        Store ``catalog`` if the stored version still equals ``expected_version``.

        Returns:
            The stored catalog, carrying ``expected_version + 1``

        Raises:
            StaleCatalog: If the stored version changed since it was read
        """
        ...
