from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from car_backoffice.domain.car import instagram_media_id
from car_backoffice.domain.errors import ValidationError


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class FilterValidationError(ValidationError):
    """Raised when filter parameters are invalid."""

    pass


MAX_PAGE_SIZE = 200


class SortOrder(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"


@dataclass(frozen=True, slots=True)
class SearchFilters:
    """
    Predicates over approved listings, combined with AND semantics.

    ``brands`` is an IN set. ``model`` only applies when exactly one brand
    is selected; with zero or several brands it is ignored.
    Range bounds are inclusive, and an omitted bound means unbounded.
    """

    brands: frozenset[str] = frozenset()
    model: str | None = None
    year: int | None = None
    registration_year: int | None = None
    price_min: int | None = None
    price_max: int | None = None
    km_min: int | None = None
    km_max: int | None = None
    color: str | None = None
    text: str | None = None
    reel_url: str | None = None

    @property
    def active_model(self) -> str | None:
        # Brands compare case-insensitively, so Tata and tata are one brand
        if len({brand.lower() for brand in self.brands}) == 1 and self.model:
            return self.model
        return None

    @property
    def reel_media_id(self) -> str | None:
        return instagram_media_id(self.reel_url)

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        for name in ("year", "registration_year", "price_min", "price_max", "km_min", "km_max"):
            value = getattr(self, name)
            if value is None:
                continue
            # bool is an int subclass; floats must not leak past the boundary
            if isinstance(value, bool) or not isinstance(value, int):
                raise FilterValidationError(f"{name} must be an integer or None")
            if value < 0:
                raise FilterValidationError(f"{name} must be >= 0")

        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise FilterValidationError("price_min cannot be greater than price_max")
        if self.km_min is not None and self.km_max is not None and self.km_min > self.km_max:
            raise FilterValidationError("km_min cannot be greater than km_max")

        if self.reel_url and self.reel_media_id is None:
            raise FilterValidationError("reel_url must be an Instagram post or reel URL")


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 20

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > MAX_PAGE_SIZE:
            raise PagingValidationError(f"limit must be <= {MAX_PAGE_SIZE}")
