from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from urllib.parse import urlparse

from car_backoffice.domain.errors import InvalidTransition, ValidationError
from car_backoffice.domain.filter_catalog import MIN_MANUFACTURE_YEAR, FilterCatalog


# ==============================================================================
# Enumerations
# ==============================================================================


class ListingStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class FuelType(str, Enum):
    PETROL = "Petrol"
    DIESEL = "Diesel"
    ELECTRIC = "Electric"


class Transmission(str, Enum):
    AUTOMATIC = "Automatic"
    MANUAL = "Manual"


class Badge(str, Enum):
    NEW = "new"
    FEATURED = "featured"
    PRICE_DROP = "price_drop"


# ==============================================================================
# Domain Exceptions
# ==============================================================================


class InvalidListing(ValidationError):
    """Raised when a listing submission breaks one or more field rules."""

    pass


# ==============================================================================
# Helpers
# ==============================================================================


def is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def instagram_media_id(url: str | None) -> str | None:
    """
    Extract the media code from an Instagram post or reel URL.

    ``https://www.instagram.com/reel/Cz123/`` -> ``"Cz123"``. Returns None for
    anything that is not a ``/p/<code>`` or ``/reel/<code>`` URL.
    """
    if not url:
        return None
    parsed = urlparse(url.strip())
    if not parsed.scheme or not parsed.netloc:
        return None
    segments = [s for s in parsed.path.split("/") if s]
    if len(segments) >= 2 and segments[0] in ("p", "reel"):
        return segments[1]
    return None


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ==============================================================================
# Submission payload
# ==============================================================================


@dataclass(frozen=True, slots=True)
class ListingDraft:
    """Editor-supplied listing fields, as received for create and update."""

    brand: str
    model: str
    year: int
    price: int
    km_run: int
    fuel: str
    transmission: str
    ownership: int
    color: str
    engine_cc: int
    registration_year: int | None = None
    additional_details: str | None = None
    images: tuple[str, ...] = ()
    badges: frozenset[str] = frozenset()
    instagram_reel_url: str | None = None

    def validate(self, catalog: FilterCatalog, current_year: int) -> None:
        """
        Validate every field against its rule and the catalog snapshot.

        All failures are collected, so the caller sees the complete
        field-keyed error list at once.

        Raises:
            InvalidListing: If any field rule fails
        """
        errors: list[dict[str, str]] = []

        def fail(field: str, message: str, code: str) -> None:
            errors.append({"field": field, "message": message, "code": code})

        if not catalog.has_brand(self.brand):
            fail("brand", f"Unknown brand '{self.brand}'", "UNKNOWN_BRAND")
        elif not catalog.has_model(self.brand, self.model):
            fail("model", f"Unknown model '{self.model}' for '{self.brand}'", "UNKNOWN_MODEL")

        for field, value, required in (
            ("year", self.year, True),
            ("registration_year", self.registration_year, False),
        ):
            if value is None and not required:
                continue
            if not _is_int(value) or not MIN_MANUFACTURE_YEAR <= value <= current_year:
                fail(
                    field,
                    f"Must be between {MIN_MANUFACTURE_YEAR} and {current_year}",
                    "INVALID_YEAR",
                )

        for field, value in (
            ("price", self.price),
            ("km_run", self.km_run),
            ("engine_cc", self.engine_cc),
        ):
            if not _is_int(value) or value <= 0:
                fail(field, "Must be a positive integer", "NOT_POSITIVE")

        if not _is_int(self.ownership) or self.ownership < 1:
            fail("ownership", "Must be at least 1", "INVALID_OWNERSHIP")

        if self.fuel not in {f.value for f in FuelType}:
            fail("fuel", f"Must be one of {[f.value for f in FuelType]}", "INVALID_CHOICE")
        if self.transmission not in {t.value for t in Transmission}:
            fail(
                "transmission",
                f"Must be one of {[t.value for t in Transmission]}",
                "INVALID_CHOICE",
            )

        if not self.color or not self.color.strip():
            fail("color", "Color is required", "REQUIRED")

        for image in self.images:
            if not is_http_url(image):
                fail("images", f"Not a valid URL: {image}", "INVALID_URL")

        unknown_badges = set(self.badges) - {b.value for b in Badge}
        if unknown_badges:
            fail("badges", f"Unknown badges: {sorted(unknown_badges)}", "INVALID_CHOICE")

        if self.instagram_reel_url and not is_http_url(self.instagram_reel_url):
            fail("instagram_reel_url", "Must be a valid URL", "INVALID_URL")

        if errors:
            raise InvalidListing(errors=errors)


# ==============================================================================
# Entity
# ==============================================================================


@dataclass(frozen=True, slots=True)
class Car:
    id: str
    brand: str
    model: str
    year: int
    price: int
    km_run: int
    fuel: FuelType
    transmission: Transmission
    ownership: int
    color: str
    engine_cc: int
    status: ListingStatus
    submitted_by: str
    created_at: datetime
    registration_year: int | None = None
    additional_details: str | None = None
    images: tuple[str, ...] = ()
    badges: frozenset[Badge] = frozenset()
    instagram_reel_url: str | None = None

    @classmethod
    def from_draft(
        cls,
        draft: ListingDraft,
        *,
        car_id: str,
        submitted_by: str,
        created_at: datetime,
    ) -> Car:
        """Build a new pending listing. The draft must already be validated."""
        return cls(
            id=car_id,
            status=ListingStatus.PENDING,
            submitted_by=submitted_by,
            created_at=created_at,
            **_draft_fields(draft),
        )

    def resubmit(self, draft: ListingDraft) -> Car:
        """Apply an edit. Any edit sends the listing back for review."""
        return replace(self, status=ListingStatus.PENDING, **_draft_fields(draft))

    @property
    def summary(self) -> str:
        return f"{self.brand} {self.model} {self.year}"

    @property
    def search_text(self) -> str:
        return f"{self.brand} {self.model} {self.year} {self.color}".lower()

    @property
    def instagram_media_id(self) -> str | None:
        return instagram_media_id(self.instagram_reel_url)


def _draft_fields(draft: ListingDraft) -> dict[str, object]:
    return {
        "brand": draft.brand,
        "model": draft.model,
        "year": draft.year,
        "registration_year": draft.registration_year,
        "price": draft.price,
        "km_run": draft.km_run,
        "fuel": FuelType(draft.fuel),
        "transmission": Transmission(draft.transmission),
        "ownership": draft.ownership,
        "color": draft.color.strip(),
        "engine_cc": draft.engine_cc,
        "additional_details": draft.additional_details or None,
        "images": tuple(draft.images),
        "badges": frozenset(Badge(b) for b in draft.badges),
        "instagram_reel_url": draft.instagram_reel_url or None,
    }


# ==============================================================================
# State machine
# ==============================================================================

# Review decisions only; the way back to pending is Car.resubmit.
LISTING_TRANSITIONS: dict[ListingStatus, frozenset[ListingStatus]] = {
    ListingStatus.PENDING: frozenset({ListingStatus.APPROVED, ListingStatus.REJECTED}),
    ListingStatus.APPROVED: frozenset(),
    ListingStatus.REJECTED: frozenset(),
}


def apply_listing_transition(car: Car, target: ListingStatus) -> Car:
    """
    Apply a review decision to a listing.

    This is the single entry point for review status changes. Writes are
    last-write-wins; version checks would be added here.

    Raises:
        InvalidTransition: If the state machine has no such edge
        InvalidListing: If approving a listing without images
    """
    if target not in LISTING_TRANSITIONS[car.status]:
        raise InvalidTransition("Listing", car.status.value, target.value, car_id=car.id)

    if target is ListingStatus.APPROVED and not car.images:
        raise InvalidListing(
            errors=[
                {
                    "field": "images",
                    "message": "At least one image is required before approval",
                    "code": "IMAGES_REQUIRED",
                }
            ]
        )

    return replace(car, status=target)
