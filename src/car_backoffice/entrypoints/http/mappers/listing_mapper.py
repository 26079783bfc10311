from __future__ import annotations

from car_backoffice.domain.car import Car, ListingDraft
from car_backoffice.domain.search import Paging, SearchFilters
from car_backoffice.entrypoints.http.dtos.listings import (
    BackOfficeListingsQueryDTO,
    ListingPageResponseDTO,
    ListingPayloadDTO,
    ListingResponseDTO,
    ListingSearchQueryDTO,
)
from car_backoffice.use_cases.search_listings import SearchListingsRequest


class ListingMapper:
    """Maps between REST DTOs and domain models for listings and catalog search."""

    @staticmethod
    def to_draft(dto: ListingPayloadDTO) -> ListingDraft:
        return ListingDraft(
            brand=dto.brand,
            model=dto.model,
            year=dto.year,
            registration_year=dto.registration_year,
            price=dto.price,
            km_run=dto.km_run,
            fuel=dto.fuel,
            transmission=dto.transmission,
            ownership=dto.ownership,
            color=dto.color,
            engine_cc=dto.engine_cc,
            additional_details=dto.additional_details,
            images=tuple(dto.images),
            badges=frozenset(dto.badges),
            instagram_reel_url=dto.instagram_reel_url,
        )

    @staticmethod
    def to_domain_filters(dto: ListingSearchQueryDTO, brands: list[str]) -> SearchFilters:
        """
        Converts query params to domain filters.

        Blank strings count as "not given" so an empty form field does not
        turn into a filter.
        """
        return SearchFilters(
            brands=frozenset(b.strip() for b in brands if b and b.strip()),
            model=dto.model or None,
            year=dto.year,
            registration_year=dto.registration_year,
            price_min=dto.price_min,
            price_max=dto.price_max,
            km_min=dto.km_min,
            km_max=dto.km_max,
            color=dto.color or None,
            text=dto.q or None,
            reel_url=dto.reel_url or None,
        )

    @staticmethod
    def to_search_request(dto: ListingSearchQueryDTO, brands: list[str]) -> SearchListingsRequest:
        return SearchListingsRequest(
            filters=ListingMapper.to_domain_filters(dto, brands),
            paging=Paging(offset=dto.offset, limit=dto.limit),
            sort=dto.sort,
        )

    @staticmethod
    def to_paging(dto: BackOfficeListingsQueryDTO) -> Paging:
        return Paging(offset=dto.offset, limit=dto.limit)

    @staticmethod
    def to_response(car: Car) -> ListingResponseDTO:
        return ListingResponseDTO(
            id=car.id,
            brand=car.brand,
            model=car.model,
            year=car.year,
            registration_year=car.registration_year,
            price=car.price,
            km_run=car.km_run,
            fuel=car.fuel.value,
            transmission=car.transmission.value,
            ownership=car.ownership,
            color=car.color,
            engine_cc=car.engine_cc,
            additional_details=car.additional_details,
            images=list(car.images),
            badges=sorted(badge.value for badge in car.badges),
            instagram_reel_url=car.instagram_reel_url,
            status=car.status,
            submitted_by=car.submitted_by,
            created_at=car.created_at,
        )

    @staticmethod
    def to_page(
        cars: list[Car],
        total_count: int | None,
        offset: int,
        limit: int,
    ) -> ListingPageResponseDTO:
        """
        Converts a page of listings to REST response with pagination metadata.

        Args:
            cars: Listings on this page
            total_count: Matches before paging (None from repository counts as 0)
            offset: Current offset (echoed from request)
            limit: Current limit (echoed from request)
        """
        return ListingPageResponseDTO(
            cars=[ListingMapper.to_response(car) for car in cars],
            total=total_count or 0,
            offset=offset,
            limit=limit,
        )
