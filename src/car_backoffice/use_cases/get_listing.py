"""Get listing by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from car_backoffice.domain.actors import Actor, Capability
from car_backoffice.domain.car import Car, ListingStatus
from car_backoffice.domain.errors import NotFoundError
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository


@dataclass(frozen=True, slots=True)
class GetListingRequest:
    """Request to get a listing by ID. ``actor_id`` is None for anonymous readers."""

    car_id: str
    actor_id: str | None = None


@dataclass(frozen=True, slots=True)
class GetListingResponse:
    car: Car


def can_see_unpublished(actor: Actor | None, car: Car) -> bool:
    if actor is None:
        return False
    if actor.id == car.submitted_by:
        return True
    return actor.can(Capability.REVIEW_LISTING) or actor.can(Capability.EDIT_ANY_LISTING)


class GetListing:
    """
    Use case for retrieving a single listing by ID.

    Responsibilities:
    - Approved listings are public
    - Pending and rejected listings are visible to reviewers, admins and
      their submitter; for everyone else they do not exist
    """

    def __init__(
        self,
        car_catalog_repository: CarCatalogRepository,
        actor_directory: ActorDirectory,
    ) -> None:
        self._repository = car_catalog_repository
        self._actors = actor_directory

    def execute(self, request: GetListingRequest) -> GetListingResponse:
        """
        Raises:
            UnauthorizedError: If an actor id is given but does not resolve
            NotFoundError: If the listing does not exist or is hidden from the caller
        """
        actor = self._actors.require(request.actor_id) if request.actor_id else None

        car = self._repository.get_by_id(request.car_id)
        if car is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        if car.status is not ListingStatus.APPROVED and not can_see_unpublished(actor, car):
            raise NotFoundError(resource="Car", identifier=request.car_id)

        return GetListingResponse(car=car)
