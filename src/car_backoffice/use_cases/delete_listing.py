from __future__ import annotations

import logging
from dataclasses import dataclass

from car_backoffice.domain.actors import Capability, authorize
from car_backoffice.domain.errors import CascadeFailedError, NotFoundError
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository
from car_backoffice.ports.inquiry_repository import InquiryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteListingRequest:
    actor_id: str | None
    car_id: str


@dataclass(frozen=True, slots=True)
class DeleteListingResponse:
    car_id: str
    deleted_inquiries: int


class DeleteListing:
    """
    Delete a listing together with every inquiry that references it.

    Two phases, always in this order:
    1. delete the car's inquiries
    2. delete the car

    If phase 1 fails the car is left untouched and CascadeFailedError is
    raised. A crash between the phases leaves a car without inquiries, which
    is safe; inquiries pointing at a missing car can never be produced.
    Retrying is safe because phase 1 is idempotent.
    """

    def __init__(
        self,
        car_catalog_repository: CarCatalogRepository,
        inquiry_repository: InquiryRepository,
        actor_directory: ActorDirectory,
    ) -> None:
        self._cars = car_catalog_repository
        self._inquiries = inquiry_repository
        self._actors = actor_directory

    def execute(self, request: DeleteListingRequest) -> DeleteListingResponse:
        """
        Raises:
            UnauthorizedError: If the actor is unknown
            ForbiddenError: If the actor cannot delete listings
            NotFoundError: If the listing does not exist
            CascadeFailedError: If the listing's inquiries could not be deleted
        """
        actor = self._actors.require(request.actor_id)
        authorize(actor, Capability.DELETE_LISTING)

        if self._cars.get_by_id(request.car_id) is None:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        try:
            deleted = self._inquiries.delete_by_car_id(request.car_id)
        except Exception as exc:
            logger.error(
                "listing.cascade_failed",
                exc_info=exc,
                extra={"car_id": request.car_id, "deleted_by": actor.id},
            )
            raise CascadeFailedError(
                "Inquiries for the listing could not be deleted; the listing was kept",
                car_id=request.car_id,
            ) from exc

        if not self._cars.delete(request.car_id):
            # Removed by a concurrent request after our existence check
            raise NotFoundError(resource="Car", identifier=request.car_id)

        logger.info(
            "listing.deleted",
            extra={
                "car_id": request.car_id,
                "deleted_by": actor.id,
                "deleted_inquiries": deleted,
            },
        )
        return DeleteListingResponse(car_id=request.car_id, deleted_inquiries=deleted)
