from __future__ import annotations

from car_backoffice.domain.car import Car, ListingStatus
from car_backoffice.domain.search import Paging, SearchFilters, SortOrder
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository, SearchResult


class InMemoryCarCatalogRepository(CarCatalogRepository):
    """
    Canonical contract implementation for tests.

    - Keeps listings keyed by id; writes are visible immediately
    - Searches approved listings only, AND-semantics filtering
    - Sorts, then applies paging AFTER filtering
    - Returns total_count of matching cars before paging
    """

    def __init__(self, cars: list[Car] | None = None) -> None:
        self._cars: dict[str, Car] = {car.id: car for car in cars or []}

    def add(self, car: Car) -> None:
        self._cars[car.id] = car

    def save(self, car: Car) -> None:
        self._cars[car.id] = car

    def get_by_id(self, car_id: str) -> Car | None:
        return self._cars.get(car_id)

    def delete(self, car_id: str) -> bool:
        return self._cars.pop(car_id, None) is not None

    def search(
        self,
        filters: SearchFilters,
        paging: Paging,
        sort: SortOrder = SortOrder.NEWEST,
    ) -> SearchResult:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [
            car
            for car in self._cars.values()
            if car.status is ListingStatus.APPROVED and self._matches(car, filters)
        ]
        return self._page(self._sorted(matches, sort), paging)

    def list_listings(
        self,
        paging: Paging,
        status: ListingStatus | None = None,
        submitted_by: str | None = None,
    ) -> SearchResult:
        matches = [
            car
            for car in self._cars.values()
            if (status is None or car.status is status)
            and (submitted_by is None or car.submitted_by == submitted_by)
        ]
        return self._page(self._sorted(matches, SortOrder.NEWEST), paging)

    def _page(self, cars: list[Car], paging: Paging) -> SearchResult:
        total_count = len(cars)  # Count BEFORE paging
        start = paging.offset
        end = paging.offset + paging.limit
        return SearchResult(cars=cars[start:end], total_count=total_count)

    def _sorted(self, cars: list[Car], sort: SortOrder) -> list[Car]:
        # Stable sorts: the id tie-breaker runs first so equal keys stay deterministic
        cars = sorted(cars, key=lambda car: car.id)
        if sort is SortOrder.OLDEST:
            return sorted(cars, key=lambda car: car.created_at)
        if sort is SortOrder.PRICE_ASC:
            return sorted(cars, key=lambda car: car.price)
        if sort is SortOrder.PRICE_DESC:
            return sorted(cars, key=lambda car: car.price, reverse=True)
        return sorted(cars, key=lambda car: car.created_at, reverse=True)

    def _matches(self, car: Car, filters: SearchFilters) -> bool:
        if filters.brands and car.brand.lower() not in {b.lower() for b in filters.brands}:
            return False
        model = filters.active_model
        if model and car.model.lower() != model.lower():
            return False
        if filters.year is not None and car.year != filters.year:
            return False
        if (
            filters.registration_year is not None
            and car.registration_year != filters.registration_year
        ):
            return False
        if filters.price_min is not None and car.price < filters.price_min:
            return False
        if filters.price_max is not None and car.price > filters.price_max:
            return False
        if filters.km_min is not None and car.km_run < filters.km_min:
            return False
        if filters.km_max is not None and car.km_run > filters.km_max:
            return False
        if filters.color and filters.color.lower() not in car.color.lower():
            return False
        if filters.text and filters.text.lower() not in car.search_text:
            return False
        if filters.reel_url and car.instagram_media_id != filters.reel_media_id:
            return False
        return True
