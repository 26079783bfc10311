from __future__ import annotations

from dataclasses import dataclass

from car_backoffice.domain.car import Car
from car_backoffice.domain.search import Paging, SearchFilters, SortOrder
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository


@dataclass(frozen=True, slots=True)
class SearchListingsRequest:
    filters: SearchFilters
    paging: Paging
    sort: SortOrder = SortOrder.NEWEST


@dataclass(frozen=True, slots=True)
class SearchListingsResponse:
    cars: list[Car]
    total_count: int | None = None  # Total matching cars before paging (None if not calculated)


class SearchListings:
    """
    Public catalog search over approved listings with filters, ordering and
    pagination.

    This use case validates filter and paging parameters and delegates
    filtering to the repository adapter. No filtering logic exists in the
    use case.
    """

    def __init__(self, car_catalog_repository: CarCatalogRepository) -> None:
        self._repository = car_catalog_repository

    def execute(self, request: SearchListingsRequest) -> SearchListingsResponse:
        """
        Execute catalog search.

        Validates request parameters before delegating to repository.
        This is the single source of validation (contract programming).

        Args:
            request: Search parameters (filters, paging and sort order)

        Returns:
            Response containing matching cars and the total count before paging

        Raises:
            PagingValidationError: If paging parameters are invalid
            FilterValidationError: If filter parameters are invalid
        """
        request.filters.validate()
        request.paging.validate()

        result = self._repository.search(
            filters=request.filters,
            paging=request.paging,
            sort=request.sort,
        )

        return SearchListingsResponse(
            cars=result.cars,
            total_count=result.total_count,
        )
