from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from car_backoffice.domain.actors import Capability, authorize
from car_backoffice.domain.car import Car, ListingDraft
from car_backoffice.domain.errors import NotFoundError
from car_backoffice.domain.ids import utc_now
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository
from car_backoffice.ports.filter_catalog_repository import FilterCatalogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateListingRequest:
    actor_id: str | None
    car_id: str
    draft: ListingDraft


@dataclass(frozen=True, slots=True)
class UpdateListingResponse:
    car: Car


class UpdateListing:
    """
    Replace a listing's editable fields.

    Any successful edit sends the listing back to ``pending`` for re-review,
    whatever its previous status. Identity, submitter and creation time are
    preserved.
    """

    def __init__(
        self,
        car_catalog_repository: CarCatalogRepository,
        filter_catalog_repository: FilterCatalogRepository,
        actor_directory: ActorDirectory,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._cars = car_catalog_repository
        self._catalog = filter_catalog_repository
        self._actors = actor_directory
        self._clock = clock

    def execute(self, request: UpdateListingRequest) -> UpdateListingResponse:
        """
        Raises:
            UnauthorizedError: If the actor is unknown
            NotFoundError: If the listing does not exist
            ForbiddenError: If the actor is neither the submitter nor an editor of any listing
            InvalidListing: If any field fails validation (nothing is written)
        """
        actor = self._actors.require(request.actor_id)

        car = self._cars.get_by_id(request.car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        if not (car.submitted_by == actor.id and actor.can(Capability.EDIT_OWN_LISTING)):
            authorize(actor, Capability.EDIT_ANY_LISTING)

        request.draft.validate(self._catalog.get().snapshot(), current_year=self._clock().year)

        previous_status = car.status
        updated = car.resubmit(request.draft)
        self._cars.save(updated)

        logger.info(
            "listing.resubmitted",
            extra={
                "car_id": updated.id,
                "edited_by": actor.id,
                "previous_status": previous_status.value,
            },
        )
        return UpdateListingResponse(car=updated)
