"""
Contract test suite for CarCatalogRepository.

Every test runs against InMemoryCarCatalogRepository (the canonical
implementation) and PostgresCarCatalogRepository on in-memory SQLite, so
the SQL query building is held to exactly the in-memory semantics.

Test sections:
- Persistence: add/get/save/delete, read-your-own-writes
- Filter semantics: brands IN, single-brand model, ranges, substrings, reel lookup
- Ordering and paging, total_count before paging
- Back office listing board
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable

import pytest

from car_backoffice.domain.car import Car, ListingStatus
from car_backoffice.domain.search import Paging, SearchFilters, SortOrder
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository, SearchResult

RepoFactory = Callable[[list[Car]], CarCatalogRepository]

ALL = Paging(offset=0, limit=50)


@pytest.fixture()
def cars(make_car) -> list[Car]:
    """Four approved listings (1-4, created in that order) plus one pending and one rejected."""
    return [
        make_car(1, brand="Tata", model="Nexon", year=2021, price=850_000, km_run=32_000, color="White"),
        make_car(2, brand="Tata", model="Punch", year=2022, price=650_000, km_run=12_000, color="Red"),
        make_car(
            3,
            brand="Hyundai",
            model="Creta",
            year=2020,
            registration_year=2021,
            price=1_200_000,
            km_run=45_000,
            color="Grey",
        ),
        make_car(
            4,
            brand="Hyundai",
            model="i20",
            year=2023,
            price=750_000,
            km_run=8_000,
            color="Pearl White",
            instagram_reel_url="https://www.instagram.com/reel/Cz123/",
        ),
        make_car(
            5,
            status=ListingStatus.PENDING,
            submitted_by="editor-2",
            brand="Maruti Suzuki",
            model="Swift",
            price=600_000,
        ),
        make_car(6, status=ListingStatus.REJECTED, submitted_by="editor-2", year=2022, color="White"),
    ]


@pytest.fixture()
def repo(car_repository_factory: RepoFactory, cars: list[Car]) -> CarCatalogRepository:
    return car_repository_factory(cars)


def _ids(result: SearchResult) -> list[int]:
    return [int(car.id.rsplit("-", 1)[1]) for car in result.cars]


def _search(repo: CarCatalogRepository, **filters: object) -> list[int]:
    return _ids(repo.search(filters=SearchFilters(**filters), paging=ALL))  # type: ignore[arg-type]


# ==============================================================================
# Persistence
# ==============================================================================


def test_get_by_id_round_trips_fields(repo: CarCatalogRepository, cars: list[Car]) -> None:
    stored = repo.get_by_id(cars[3].id)

    assert stored is not None
    assert stored.id == cars[3].id
    assert stored.summary == "Hyundai i20 2023"
    assert stored.images == cars[3].images
    assert stored.badges == cars[3].badges
    assert stored.status is ListingStatus.APPROVED
    assert stored.instagram_media_id == "Cz123"
    assert stored.submitted_by == "editor-1"


def test_get_by_id_unknown_or_malformed(repo: CarCatalogRepository) -> None:
    assert repo.get_by_id("00000000-0000-0000-0000-000000000999") is None
    assert repo.get_by_id("not-a-uuid") is None


def test_image_order_is_preserved(car_repository_factory: RepoFactory, make_car) -> None:
    images = tuple(f"https://cdn.example.com/{name}.jpg" for name in ("front", "back", "side"))
    repo = car_repository_factory([make_car(1, images=images)])

    stored = repo.get_by_id(make_car(1).id)

    assert stored is not None
    assert stored.images == images


def test_save_is_visible_to_the_next_search(repo: CarCatalogRepository, cars: list[Car]) -> None:
    """An edit that moves a listing back to pending hides it immediately."""
    repo.save(replace(cars[0], status=ListingStatus.PENDING, price=700_000))

    assert 1 not in _search(repo)
    stored = repo.get_by_id(cars[0].id)
    assert stored is not None
    assert stored.price == 700_000
    assert stored.status is ListingStatus.PENDING


def test_delete(repo: CarCatalogRepository, cars: list[Car]) -> None:
    assert repo.delete(cars[0].id) is True
    assert repo.get_by_id(cars[0].id) is None
    assert repo.delete(cars[0].id) is False
    assert repo.delete("not-a-uuid") is False


# ==============================================================================
# Filter semantics
# ==============================================================================


def test_search_returns_only_approved(repo: CarCatalogRepository) -> None:
    assert sorted(_search(repo)) == [1, 2, 3, 4]


def test_brands_are_case_insensitive_in(repo: CarCatalogRepository) -> None:
    assert _search(repo, brands=frozenset({"tata"})) == [2, 1]
    assert _search(repo, brands=frozenset({"TATA", "hyundai"})) == [4, 3, 2, 1]


def test_model_applies_with_a_single_brand(repo: CarCatalogRepository) -> None:
    assert _search(repo, brands=frozenset({"Tata"}), model="nexon") == [1]


def test_model_applies_when_one_brand_is_given_in_two_cases(repo: CarCatalogRepository) -> None:
    assert _search(repo, brands=frozenset({"Tata", "tata"}), model="Nexon") == [1]


def test_model_ignored_without_a_single_brand(repo: CarCatalogRepository) -> None:
    assert _search(repo, model="Nexon") == [4, 3, 2, 1]
    assert _search(repo, brands=frozenset({"Tata", "Hyundai"}), model="Nexon") == [4, 3, 2, 1]


def test_exact_years(repo: CarCatalogRepository) -> None:
    assert _search(repo, year=2021) == [1]
    assert _search(repo, registration_year=2021) == [3]


def test_price_range_is_inclusive(repo: CarCatalogRepository) -> None:
    assert _search(repo, price_min=650_000, price_max=750_000) == [4, 2]


def test_open_ended_ranges(repo: CarCatalogRepository) -> None:
    assert _search(repo, price_min=1_000_000) == [3]
    assert _search(repo, km_max=12_000) == [4, 2]
    assert _search(repo, km_min=32_000) == [3, 1]


def test_color_is_case_insensitive_substring(repo: CarCatalogRepository) -> None:
    assert _search(repo, color="WHITE") == [4, 1]


def test_text_matches_brand_model_year_color(repo: CarCatalogRepository) -> None:
    assert _search(repo, text="creta 2020") == [3]
    assert _search(repo, text="HYUNDAI") == [4, 3]
    assert _search(repo, text="2022 red") == [2]


def test_text_wildcards_are_literal(repo: CarCatalogRepository) -> None:
    assert _search(repo, text="%") == []
    assert _search(repo, text="t_ta") == []


def test_reel_url_matches_on_media_code(repo: CarCatalogRepository) -> None:
    assert _search(repo, reel_url="https://instagram.com/reel/Cz123?utm_source=ig") == [4]
    assert _search(repo, reel_url="https://instagram.com/p/Other/") == []


def test_filters_combine_with_and(repo: CarCatalogRepository) -> None:
    assert _search(repo, brands=frozenset({"Hyundai"}), color="white", km_max=10_000) == [4]
    assert _search(repo, brands=frozenset({"Tata"}), color="grey") == []


# ==============================================================================
# Ordering and paging
# ==============================================================================


@pytest.mark.parametrize(
    ("sort", "expected"),
    [
        (SortOrder.NEWEST, [4, 3, 2, 1]),
        (SortOrder.OLDEST, [1, 2, 3, 4]),
        (SortOrder.PRICE_ASC, [2, 4, 1, 3]),
        (SortOrder.PRICE_DESC, [3, 1, 4, 2]),
    ],
)
def test_sort_orders(repo: CarCatalogRepository, sort: SortOrder, expected: list[int]) -> None:
    assert _ids(repo.search(filters=SearchFilters(), paging=ALL, sort=sort)) == expected


def test_equal_sort_keys_fall_back_to_id(car_repository_factory: RepoFactory, make_car) -> None:
    repo = car_repository_factory([make_car(n, price=500_000) for n in (3, 1, 2)])

    result = repo.search(filters=SearchFilters(), paging=ALL, sort=SortOrder.PRICE_ASC)

    assert _ids(result) == [1, 2, 3]


def test_paging_applies_after_filtering_and_counts_before(repo: CarCatalogRepository) -> None:
    result = repo.search(filters=SearchFilters(), paging=Paging(offset=1, limit=2))

    assert _ids(result) == [3, 2]
    assert result.total_count == 4


def test_offset_beyond_results_is_an_empty_page(repo: CarCatalogRepository) -> None:
    result = repo.search(filters=SearchFilters(), paging=Paging(offset=10, limit=5))

    assert result.cars == []
    assert result.total_count == 4


def test_no_matches(repo: CarCatalogRepository) -> None:
    result = repo.search(filters=SearchFilters(brands=frozenset({"Kia"})), paging=ALL)

    assert result == SearchResult(cars=[], total_count=0)


def test_empty_repository(car_repository_factory: RepoFactory) -> None:
    result = car_repository_factory([]).search(filters=SearchFilters(), paging=ALL)

    assert result.cars == []
    assert result.total_count == 0


# ==============================================================================
# Back office listing board
# ==============================================================================


def test_list_listings_covers_every_status(repo: CarCatalogRepository) -> None:
    result = repo.list_listings(paging=ALL)

    assert _ids(result) == [6, 5, 4, 3, 2, 1]
    assert result.total_count == 6


def test_list_listings_by_status_and_submitter(repo: CarCatalogRepository) -> None:
    assert _ids(repo.list_listings(paging=ALL, status=ListingStatus.PENDING)) == [5]
    assert _ids(repo.list_listings(paging=ALL, submitted_by="editor-2")) == [6, 5]
    assert (
        _ids(
            repo.list_listings(
                paging=ALL, status=ListingStatus.APPROVED, submitted_by="editor-2"
            )
        )
        == []
    )


def test_list_listings_paging(repo: CarCatalogRepository) -> None:
    result = repo.list_listings(paging=Paging(offset=4, limit=10))

    assert _ids(result) == [2, 1]
    assert result.total_count == 6
