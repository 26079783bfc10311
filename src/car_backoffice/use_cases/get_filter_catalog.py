from __future__ import annotations

from dataclasses import dataclass

from car_backoffice.domain.filter_catalog import FilterCatalog
from car_backoffice.ports.filter_catalog_repository import FilterCatalogRepository


@dataclass(frozen=True, slots=True)
class GetFilterCatalogResponse:
    catalog: FilterCatalog


class GetFilterCatalog:
    """Public read of the brand/model/year vocabulary that drives search and forms."""

    def __init__(self, filter_catalog_repository: FilterCatalogRepository) -> None:
        self._repository = filter_catalog_repository

    def execute(self) -> GetFilterCatalogResponse:
        return GetFilterCatalogResponse(catalog=self._repository.get().snapshot())
