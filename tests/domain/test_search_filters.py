"""Tests for SearchFilters and Paging validation."""

from __future__ import annotations

import pytest

from car_backoffice.domain.errors import ValidationError
from car_backoffice.domain.search import (
    MAX_PAGE_SIZE,
    FilterValidationError,
    Paging,
    PagingValidationError,
    SearchFilters,
)


# ==============================================================================
# SearchFilters
# ==============================================================================


def test_empty_filters_are_valid() -> None:
    SearchFilters().validate()


def test_model_applies_only_with_exactly_one_brand() -> None:
    assert SearchFilters(brands=frozenset({"Tata"}), model="Nexon").active_model == "Nexon"
    assert SearchFilters(model="Nexon").active_model is None
    assert SearchFilters(brands=frozenset({"Tata", "Hyundai"}), model="Nexon").active_model is None


def test_brand_spelled_twice_is_still_a_single_brand() -> None:
    filters = SearchFilters(brands=frozenset({"Tata", "tata"}), model="Nexon")

    assert filters.active_model == "Nexon"


def test_open_ended_ranges_are_valid() -> None:
    SearchFilters(price_min=500_000).validate()
    SearchFilters(km_max=10_000).validate()


def test_equal_bounds_are_valid() -> None:
    SearchFilters(price_min=10, price_max=10, km_min=5, km_max=5).validate()


@pytest.mark.parametrize(
    "filters",
    [
        SearchFilters(price_min=900_000, price_max=100_000),
        SearchFilters(km_min=50_000, km_max=10_000),
    ],
)
def test_inverted_ranges_are_rejected(filters: SearchFilters) -> None:
    with pytest.raises(FilterValidationError):
        filters.validate()


@pytest.mark.parametrize("field", ["year", "price_min", "km_max", "registration_year"])
def test_negative_bounds_are_rejected(field: str) -> None:
    with pytest.raises(FilterValidationError, match=f"{field} must be >= 0"):
        SearchFilters(**{field: -1}).validate()


@pytest.mark.parametrize("value", [1.5, True, "100"])
def test_non_integer_bounds_are_rejected(value: object) -> None:
    with pytest.raises(FilterValidationError):
        SearchFilters(price_min=value).validate()  # type: ignore[arg-type]


def test_reel_url_needs_a_media_code() -> None:
    SearchFilters(reel_url="https://www.instagram.com/reel/Cz123/").validate()

    with pytest.raises(FilterValidationError):
        SearchFilters(reel_url="https://www.instagram.com/explore/").validate()


def test_filter_errors_are_validation_errors() -> None:
    assert issubclass(FilterValidationError, ValidationError)
    assert issubclass(PagingValidationError, ValidationError)


# ==============================================================================
# Paging
# ==============================================================================


def test_default_paging() -> None:
    paging = Paging()

    assert (paging.offset, paging.limit) == (0, 20)
    paging.validate()


@pytest.mark.parametrize(
    ("paging", "message"),
    [
        (Paging(offset=-1), "offset must be >= 0"),
        (Paging(limit=0), "limit must be > 0"),
        (Paging(limit=MAX_PAGE_SIZE + 1), f"limit must be <= {MAX_PAGE_SIZE}"),
    ],
)
def test_invalid_paging(paging: Paging, message: str) -> None:
    with pytest.raises(PagingValidationError, match=message):
        paging.validate()


def test_max_page_size_is_allowed() -> None:
    Paging(limit=MAX_PAGE_SIZE).validate()
