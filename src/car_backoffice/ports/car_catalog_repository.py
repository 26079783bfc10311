from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from car_backoffice.domain.car import Car, ListingStatus
from car_backoffice.domain.search import Paging, SearchFilters, SortOrder


@dataclass(frozen=True)
class SearchResult:
    """Result from catalog search including pagination metadata."""

    cars: list[Car]
    total_count: int | None = None  # Total matching cars before paging (None if not calculated)


class CarCatalogRepository(ABC):
    """
    Port for listing persistence and catalog search.

    Writes are last-write-wins. A write must be visible to the next read
    made through the same repository instance (read-your-own-writes), so an
    edit that moves a listing out of ``approved`` hides it from the very
    next search.

    Contract (Preconditions):
        - filters and paging parameters must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def add(self, car: Car) -> None: ...

    @abstractmethod
    def save(self, car: Car) -> None:
        """Overwrite the stored listing with the same id."""
        ...

    @abstractmethod
    def get_by_id(self, car_id: str) -> Car | None: ...

    @abstractmethod
    def delete(self, car_id: str) -> bool:
        """Delete a listing. Returns False if it did not exist."""
        ...

    @abstractmethod
    def search(
        self,
        filters: SearchFilters,
        paging: Paging,
        sort: SortOrder = SortOrder.NEWEST,
    ) -> SearchResult:
        """
        Search approved listings with filters, ordering and paging.

        Precondition: filters and paging must be validated by caller (UseCase).

        Args:
            filters: Filter criteria (AND semantics) - pre-validated
            paging: Pagination parameters - pre-validated
            sort: Ordering applied before paging

        Returns:
            SearchResult containing matching cars and total count
        """
        ...

    @abstractmethod
    def list_listings(
        self,
        paging: Paging,
        status: ListingStatus | None = None,
        submitted_by: str | None = None,
    ) -> SearchResult:
        """Back office view over every status, newest first."""
        ...
