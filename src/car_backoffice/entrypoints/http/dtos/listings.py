from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from car_backoffice.domain.car import ListingStatus
from car_backoffice.domain.search import MAX_PAGE_SIZE, SortOrder


class ListingPayloadDTO(BaseModel):
    """Body for creating or editing a listing.

    Only shapes are checked here; field rules (catalog membership, year
    range, positive amounts) are enforced by the domain so every failure is
    reported at once.
    """

    brand: str
    model: str
    year: int
    price: int = Field(description="Price in the smallest currency unit")
    km_run: int
    fuel: str = Field(examples=["Petrol"])
    transmission: str = Field(examples=["Manual"])
    ownership: int = Field(description="Number of previous owners, at least 1")
    color: str
    engine_cc: int
    registration_year: int | None = None
    additional_details: str | None = None
    images: list[str] = Field(default_factory=list, description="Display order")
    badges: list[str] = Field(default_factory=list, examples=[["featured"]])
    instagram_reel_url: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "brand": "Tata",
                "model": "Nexon",
                "year": 2021,
                "price": 850000,
                "km_run": 32000,
                "fuel": "Petrol",
                "transmission": "Manual",
                "ownership": 1,
                "color": "White",
                "engine_cc": 1199,
                "images": ["https://cdn.example.com/cars/nexon-1.jpg"],
                "badges": ["featured"],
            }
        }
    )


class ListingResponseDTO(BaseModel):
    id: str
    brand: str
    model: str
    year: int
    registration_year: int | None
    price: int
    km_run: int
    fuel: str
    transmission: str
    ownership: int
    color: str
    engine_cc: int
    additional_details: str | None
    images: list[str]
    badges: list[str]
    instagram_reel_url: str | None
    status: ListingStatus
    submitted_by: str
    created_at: datetime


class ListingStatusChangeDTO(BaseModel):
    status: ListingStatus = Field(description="Review decision: approved or rejected")


class ListingSearchQueryDTO(BaseModel):
    """Scalar query parameters for the public catalog search.

    Brands are passed as repeated ``brand`` parameters next to these.
    """

    model: str | None = Field(
        default=None,
        description="Only applied when exactly one brand is selected",
        examples=["Nexon"],
    )
    year: int | None = Field(default=None, examples=[2021])
    registration_year: int | None = Field(default=None, examples=[2021])
    price_min: int | None = Field(default=None, description="Minimum price (inclusive)")
    price_max: int | None = Field(default=None, description="Maximum price (inclusive)")
    km_min: int | None = Field(default=None, description="Minimum km run (inclusive)")
    km_max: int | None = Field(default=None, description="Maximum km run (inclusive)")
    color: str | None = Field(default=None, description="Case-insensitive substring")
    q: str | None = Field(
        default=None,
        description="Free text matched against 'brand model year color'",
        examples=["nexon white"],
    )
    reel_url: str | None = Field(
        default=None,
        description="Instagram post or reel URL; matches listings sharing its media code",
    )
    sort: SortOrder = Field(default=SortOrder.NEWEST)
    offset: int = Field(default=0, description="Number of results to skip", ge=0)
    limit: int = Field(
        default=20,
        description="Maximum number of results to return",
        ge=1,
        le=MAX_PAGE_SIZE,
    )


class BackOfficeListingsQueryDTO(BaseModel):
    status: ListingStatus | None = Field(default=None, description="Only this status")
    mine: bool = Field(default=False, description="Only listings submitted by the caller")
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=20, ge=1, le=MAX_PAGE_SIZE)


class ListingPageResponseDTO(BaseModel):
    cars: list[ListingResponseDTO]
    total: int
    offset: int
    limit: int


class ListingSummaryResponseDTO(BaseModel):
    car_id: str
    summary: str
