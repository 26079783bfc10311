from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from car_backoffice.domain.actors import Capability, authorize
from car_backoffice.domain.car import Car, ListingDraft
from car_backoffice.domain.ids import new_id, utc_now
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository
from car_backoffice.ports.filter_catalog_repository import FilterCatalogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateListingRequest:
    actor_id: str | None
    draft: ListingDraft


@dataclass(frozen=True, slots=True)
class CreateListingResponse:
    car: Car


class CreateListing:
    """
    Submit a new listing for review.

    The draft is validated against the filter catalog snapshot taken at the
    moment of the call; a valid listing is stored as ``pending``.
    """

    def __init__(
        self,
        car_catalog_repository: CarCatalogRepository,
        filter_catalog_repository: FilterCatalogRepository,
        actor_directory: ActorDirectory,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._cars = car_catalog_repository
        self._catalog = filter_catalog_repository
        self._actors = actor_directory
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, request: CreateListingRequest) -> CreateListingResponse:
        """
        Raises:
            UnauthorizedError: If the actor is unknown
            ForbiddenError: If the actor cannot submit listings
            InvalidListing: If any field fails validation (nothing is written)
        """
        actor = self._actors.require(request.actor_id)
        authorize(actor, Capability.SUBMIT_LISTING)

        now = self._clock()
        request.draft.validate(self._catalog.get().snapshot(), current_year=now.year)

        car = Car.from_draft(
            request.draft,
            car_id=self._id_factory(),
            submitted_by=actor.id,
            created_at=now,
        )
        self._cars.add(car)

        logger.info(
            "listing.submitted",
            extra={"car_id": car.id, "submitted_by": actor.id, "summary": car.summary},
        )
        return CreateListingResponse(car=car)
