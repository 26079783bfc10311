"""Tests for FilterCatalogMapper."""

from __future__ import annotations

from car_backoffice.domain.filter_catalog import FilterCatalog
from car_backoffice.entrypoints.http.dtos.filter_catalog import FilterCatalogUpdateDTO
from car_backoffice.entrypoints.http.mappers.filter_catalog_mapper import FilterCatalogMapper


def test_to_response_sorts_sets_case_insensitively() -> None:
    catalog = FilterCatalog(
        brands=frozenset({"tata", "Hyundai", "Kia"}),
        models={"Hyundai": frozenset({"i20", "Creta", "Alcazar"})},
        years=(2021, 2023),
        version=5,
    )

    dto = FilterCatalogMapper.to_response(catalog)

    assert dto.brands == ["Hyundai", "Kia", "tata"]
    assert dto.models == {"Hyundai": ["Alcazar", "Creta", "i20"]}
    assert dto.years == [2023, 2021]
    assert dto.version == 5


def test_to_response_for_empty_catalog() -> None:
    dto = FilterCatalogMapper.to_response(FilterCatalog())

    assert dto.model_dump() == {"brands": [], "models": {}, "years": [], "version": 0}


def test_to_update_request() -> None:
    dto = FilterCatalogUpdateDTO(
        expected_version=3,
        brands=["Tata"],
        models={"Tata": ["Nexon"]},
        years=[2024],
    )

    request = FilterCatalogMapper.to_update_request(dto, "admin-1")

    assert request.actor_id == "admin-1"
    assert request.expected_version == 3
    assert request.brands == ["Tata"]
    assert request.models == {"Tata": ["Nexon"]}
    assert request.years == [2024]
