from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterable, Mapping

from car_backoffice.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)

MIN_MANUFACTURE_YEAR = 1980


class UnknownBrand(NotFoundError):
    def __init__(self, brand: str) -> None:
        super().__init__(resource="Brand", identifier=brand)


class UnknownModel(NotFoundError):
    def __init__(self, brand: str, model: str) -> None:
        super().__init__(resource="Model", identifier=model, brand=brand)


class StaleCatalog(ConflictError):
    """The stored catalog version moved on since the caller read it."""

    def __init__(self, expected_version: int, current_version: int | None = None) -> None:
        super().__init__(
            "Filter catalog was modified by another request; reload and retry",
            expected_version=expected_version,
            current_version=current_version,
        )


def _clean_name(value: str, field_name: str) -> str:
    name = value.strip() if isinstance(value, str) else ""
    if not name:
        raise ValidationError(
            errors=[
                {
                    "field": field_name,
                    "message": "Must be a non-empty string",
                    "code": "REQUIRED",
                }
            ]
        )
    return name


def _check_year(year: int) -> int:
    if isinstance(year, bool) or not isinstance(year, int) or year < MIN_MANUFACTURE_YEAR:
        raise ValidationError(
            errors=[
                {
                    "field": "years",
                    "message": f"Must be an integer >= {MIN_MANUFACTURE_YEAR}",
                    "code": "INVALID_YEAR",
                }
            ]
        )
    return year


@dataclass(frozen=True, slots=True)
class FilterCatalog:
    """
    Authoritative brand/model/year vocabulary.

    Instances are immutable: every edit returns a new catalog with the same
    version. Only the repository bumps the version, on a successful
    compare-and-swap write.

    Invariants:
    - every key of ``models`` is a member of ``brands``
    - ``years`` is unique and strictly descending
    """

    brands: frozenset[str] = frozenset()
    models: Mapping[str, frozenset[str]] = field(default_factory=dict)
    years: tuple[int, ...] = ()
    version: int = 0

    def __post_init__(self) -> None:
        brands = frozenset(_clean_name(b, "brands") for b in self.brands)
        models: dict[str, frozenset[str]] = {}
        for brand, names in self.models.items():
            brand = _clean_name(brand, "models")
            if brand not in brands:
                raise ValidationError(
                    errors=[
                        {
                            "field": "models",
                            "message": f"Models listed for unknown brand '{brand}'",
                            "code": "UNKNOWN_BRAND",
                        }
                    ]
                )
            models[brand] = frozenset(_clean_name(n, "models") for n in names)
        years = tuple(sorted({_check_year(y) for y in self.years}, reverse=True))

        object.__setattr__(self, "brands", brands)
        object.__setattr__(self, "models", MappingProxyType(models))
        object.__setattr__(self, "years", years)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def snapshot(self) -> FilterCatalog:
        return self

    def has_brand(self, brand: str) -> bool:
        return brand in self.brands

    def models_for(self, brand: str) -> frozenset[str]:
        return self.models.get(brand, frozenset())

    def has_model(self, brand: str, model: str) -> bool:
        return model in self.models_for(brand)

    def sorted_brands(self) -> list[str]:
        return sorted(self.brands, key=str.lower)

    # ------------------------------------------------------------------
    # Brand edits
    # ------------------------------------------------------------------

    def add_brand(self, name: str) -> FilterCatalog:
        name = _clean_name(name, "brand")
        return replace(self, brands=self.brands | {name})

    def rename_brand(self, old: str, new: str) -> FilterCatalog:
        new = _clean_name(new, "brand")
        if old not in self.brands:
            raise UnknownBrand(old)
        if new == old:
            return self
        if new in self.brands:
            raise ConflictError(f"Brand '{new}' already exists", brand=new)

        models = {k: v for k, v in self.models.items() if k != old}
        if old in self.models:
            models[new] = self.models[old]
        return replace(self, brands=(self.brands - {old}) | {new}, models=models)

    def remove_brand(self, name: str) -> FilterCatalog:
        if name not in self.brands:
            raise UnknownBrand(name)
        models = {k: v for k, v in self.models.items() if k != name}
        return replace(self, brands=self.brands - {name}, models=models)

    # ------------------------------------------------------------------
    # Model edits
    # ------------------------------------------------------------------

    def add_model(self, brand: str, name: str) -> FilterCatalog:
        if brand not in self.brands:
            raise UnknownBrand(brand)
        name = _clean_name(name, "model")
        return self._with_models(brand, self.models_for(brand) | {name})

    def rename_model(self, brand: str, old: str, new: str) -> FilterCatalog:
        if brand not in self.brands:
            raise UnknownBrand(brand)
        current = self.models_for(brand)
        if old not in current:
            raise UnknownModel(brand, old)
        new = _clean_name(new, "model")
        if new == old:
            return self
        if new in current:
            raise ConflictError(f"Model '{new}' already exists for '{brand}'", brand=brand)
        return self._with_models(brand, (current - {old}) | {new})

    def remove_model(self, brand: str, name: str) -> FilterCatalog:
        if brand not in self.brands:
            raise UnknownBrand(brand)
        current = self.models_for(brand)
        if name not in current:
            raise UnknownModel(brand, name)
        return self._with_models(brand, current - {name})

    # ------------------------------------------------------------------
    # Year edits
    # ------------------------------------------------------------------

    def add_year(self, year: int) -> FilterCatalog:
        return replace(self, years=self.years + (_check_year(year),))

    def remove_year(self, year: int) -> FilterCatalog:
        if year not in self.years:
            raise NotFoundError(resource="Year", identifier=str(year))
        return replace(self, years=tuple(y for y in self.years if y != year))

    def _with_models(self, brand: str, names: Iterable[str]) -> FilterCatalog:
        models = dict(self.models)
        models[brand] = frozenset(names)
        return replace(self, models=models)
