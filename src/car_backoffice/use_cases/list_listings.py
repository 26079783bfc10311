from __future__ import annotations

from dataclasses import dataclass

from car_backoffice.domain.actors import Capability, authorize
from car_backoffice.domain.car import Car, ListingStatus
from car_backoffice.domain.search import Paging
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository


@dataclass(frozen=True, slots=True)
class ListListingsRequest:
    actor_id: str | None
    paging: Paging
    status: ListingStatus | None = None
    mine: bool = False


@dataclass(frozen=True, slots=True)
class ListListingsResponse:
    cars: list[Car]
    total_count: int | None = None


class ListListings:
    """
    Back office listing board: the review queue and "my listings".

    Covers every status, newest first. Actors that cannot review only ever
    see their own submissions.
    """

    def __init__(
        self,
        car_catalog_repository: CarCatalogRepository,
        actor_directory: ActorDirectory,
    ) -> None:
        self._repository = car_catalog_repository
        self._actors = actor_directory

    def execute(self, request: ListListingsRequest) -> ListListingsResponse:
        """
        Raises:
            UnauthorizedError: If the actor is unknown
            ForbiddenError: If the actor has no back office access
            PagingValidationError: If paging parameters are invalid
        """
        actor = self._actors.require(request.actor_id)
        authorize(actor, Capability.VIEW_BACK_OFFICE_LISTINGS)
        request.paging.validate()

        own_only = request.mine or not actor.can(Capability.REVIEW_LISTING)
        result = self._repository.list_listings(
            paging=request.paging,
            status=request.status,
            submitted_by=actor.id if own_only else None,
        )
        return ListListingsResponse(cars=result.cars, total_count=result.total_count)
