from __future__ import annotations

import logging
from dataclasses import dataclass

from car_backoffice.domain.actors import Capability, authorize
from car_backoffice.domain.car import Car, ListingStatus, apply_listing_transition
from car_backoffice.domain.errors import NotFoundError
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TransitionListingRequest:
    actor_id: str | None
    car_id: str
    status: ListingStatus


@dataclass(frozen=True, slots=True)
class TransitionListingResponse:
    car: Car


class TransitionListing:
    """Record a review decision (approve or reject) on a pending listing."""

    def __init__(
        self,
        car_catalog_repository: CarCatalogRepository,
        actor_directory: ActorDirectory,
    ) -> None:
        self._cars = car_catalog_repository
        self._actors = actor_directory

    def execute(self, request: TransitionListingRequest) -> TransitionListingResponse:
        """
        Raises:
            UnauthorizedError: If the actor is unknown
            ForbiddenError: If the actor cannot review listings
            NotFoundError: If the listing does not exist
            InvalidTransition: If the listing is not pending or the target is not a decision
            InvalidListing: If approving a listing without images
        """
        actor = self._actors.require(request.actor_id)
        authorize(actor, Capability.REVIEW_LISTING)

        car = self._cars.get_by_id(request.car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        updated = apply_listing_transition(car, request.status)
        self._cars.save(updated)

        # The hook a notification service would consume
        logger.info(
            f"listing.{updated.status.value}",
            extra={
                "car_id": updated.id,
                "reviewed_by": actor.id,
                "submitted_by": updated.submitted_by,
            },
        )
        return TransitionListingResponse(car=updated)
