from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from car_backoffice.domain.actors import Capability, authorize
from car_backoffice.domain.filter_catalog import FilterCatalog, StaleCatalog
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.filter_catalog_repository import FilterCatalogRepository

logger = logging.getLogger(__name__)

CatalogEdit = Callable[[FilterCatalog], FilterCatalog]


@dataclass(frozen=True, slots=True)
class EditFilterCatalogRequest:
    """
    ``edit`` is one catalog operation, e.g. ``lambda c: c.add_brand("Tata")``.
    ``description`` names it in the log record.
    """

    actor_id: str | None
    edit: CatalogEdit
    description: str
    expected_version: int | None = None


@dataclass(frozen=True, slots=True)
class EditFilterCatalogResponse:
    catalog: FilterCatalog


class EditFilterCatalog:
    """
    Apply a single brand/model/year edit to the current catalog.

    The edit is computed on the version just read and written with
    compare-and-swap, so two concurrent edits never silently drop one
    another: the loser gets StaleCatalog.
    """

    def __init__(
        self,
        filter_catalog_repository: FilterCatalogRepository,
        actor_directory: ActorDirectory,
    ) -> None:
        self._repository = filter_catalog_repository
        self._actors = actor_directory

    def execute(self, request: EditFilterCatalogRequest) -> EditFilterCatalogResponse:
        """
        Raises:
            UnauthorizedError: If the actor is unknown
            ForbiddenError: If the actor cannot edit the catalog
            UnknownBrand / UnknownModel / NotFoundError: If the edit targets a missing entry
            ConflictError: If a rename collides with an existing name
            StaleCatalog: If expected_version is given and outdated, or a concurrent write won
        """
        actor = self._actors.require(request.actor_id)
        authorize(actor, Capability.EDIT_FILTER_CATALOG)

        current = self._repository.get()
        if request.expected_version is not None and request.expected_version != current.version:
            raise StaleCatalog(
                expected_version=request.expected_version, current_version=current.version
            )

        edited = request.edit(current)
        stored = self._repository.replace(edited, expected_version=current.version)

        logger.info(
            "filter_catalog.edited",
            extra={
                "edit": request.description,
                "version": stored.version,
                "updated_by": actor.id,
            },
        )
        return EditFilterCatalogResponse(catalog=stored)
