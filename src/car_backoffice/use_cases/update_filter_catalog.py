from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Mapping

from car_backoffice.domain.actors import Capability, authorize
from car_backoffice.domain.errors import ValidationError
from car_backoffice.domain.filter_catalog import FilterCatalog
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.filter_catalog_repository import FilterCatalogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateFilterCatalogRequest:
    actor_id: str | None
    expected_version: int
    brands: list[str]
    models: Mapping[str, list[str]] = field(default_factory=dict)
    years: list[int] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class UpdateFilterCatalogResponse:
    catalog: FilterCatalog


class UpdateFilterCatalog:
    """
    Replace the whole catalog document.

    The caller sends back the version it read; a concurrent edit in between
    fails the write with StaleCatalog instead of being overwritten.
    """

    def __init__(
        self,
        filter_catalog_repository: FilterCatalogRepository,
        actor_directory: ActorDirectory,
    ) -> None:
        self._repository = filter_catalog_repository
        self._actors = actor_directory

    def execute(self, request: UpdateFilterCatalogRequest) -> UpdateFilterCatalogResponse:
        """
        Raises:
            UnauthorizedError: If the actor is unknown
            ForbiddenError: If the actor cannot edit the catalog
            ValidationError: If brands are empty or the document is inconsistent
            StaleCatalog: If the stored version moved on
        """
        actor = self._actors.require(request.actor_id)
        authorize(actor, Capability.EDIT_FILTER_CATALOG)

        if not request.brands:
            raise ValidationError(
                errors=[
                    {
                        "field": "brands",
                        "message": "At least one brand is required",
                        "code": "REQUIRED",
                    }
                ]
            )

        catalog = FilterCatalog(
            brands=frozenset(request.brands),
            models={brand: frozenset(names) for brand, names in request.models.items()},
            years=tuple(request.years),
        )
        stored = self._repository.replace(catalog, expected_version=request.expected_version)

        logger.info(
            "filter_catalog.replaced",
            extra={"version": stored.version, "updated_by": actor.id},
        )
        return UpdateFilterCatalogResponse(catalog=stored)
