from __future__ import annotations

from car_backoffice.domain.filter_catalog import FilterCatalog
from car_backoffice.entrypoints.http.dtos.filter_catalog import (
    FilterCatalogResponseDTO,
    FilterCatalogUpdateDTO,
)
from car_backoffice.use_cases.update_filter_catalog import UpdateFilterCatalogRequest


class FilterCatalogMapper:
    @staticmethod
    def to_response(catalog: FilterCatalog) -> FilterCatalogResponseDTO:
        """Sets become sorted lists so responses are stable."""
        return FilterCatalogResponseDTO(
            brands=catalog.sorted_brands(),
            models={
                brand: sorted(catalog.models_for(brand), key=str.lower)
                for brand in catalog.sorted_brands()
                if brand in catalog.models
            },
            years=list(catalog.years),
            version=catalog.version,
        )

    @staticmethod
    def to_update_request(
        dto: FilterCatalogUpdateDTO, actor_id: str | None
    ) -> UpdateFilterCatalogRequest:
        return UpdateFilterCatalogRequest(
            actor_id=actor_id,
            expected_version=dto.expected_version,
            brands=dto.brands,
            models=dto.models,
            years=dto.years,
        )
