from pydantic import BaseModel, ConfigDict, Field


class FilterCatalogResponseDTO(BaseModel):
    brands: list[str]
    models: dict[str, list[str]]
    years: list[int] = Field(description="Newest first")
    version: int


class FilterCatalogUpdateDTO(BaseModel):
    """Whole-document replacement carrying the version the caller read."""

    expected_version: int = Field(ge=0)
    brands: list[str]
    models: dict[str, list[str]] = Field(default_factory=dict)
    years: list[int] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "expected_version": 3,
                "brands": ["Tata", "Maruti Suzuki"],
                "models": {"Tata": ["Nexon", "Punch"], "Maruti Suzuki": ["Swift"]},
                "years": [2024, 2023, 2022],
            }
        }
    )


class CatalogEntryDTO(BaseModel):
    name: str
    expected_version: int | None = Field(
        default=None, description="Fail with 409 if the catalog moved past this version"
    )


class CatalogRenameDTO(BaseModel):
    new_name: str
    expected_version: int | None = None


class CatalogYearDTO(BaseModel):
    year: int
    expected_version: int | None = None
