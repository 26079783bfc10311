from __future__ import annotations

import logging
from dataclasses import dataclass

from car_backoffice.domain.actors import Capability, authorize
from car_backoffice.domain.errors import NotFoundError
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.inquiry_repository import InquiryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteInquiryRequest:
    actor_id: str | None
    inquiry_id: str


class DeleteInquiry:
    def __init__(
        self,
        inquiry_repository: InquiryRepository,
        actor_directory: ActorDirectory,
    ) -> None:
        self._inquiries = inquiry_repository
        self._actors = actor_directory

    def execute(self, request: DeleteInquiryRequest) -> None:
        """
        Raises:
            UnauthorizedError: If the actor is unknown
            ForbiddenError: If the actor cannot delete inquiries
            NotFoundError: If the inquiry does not exist
        """
        actor = self._actors.require(request.actor_id)
        authorize(actor, Capability.DELETE_INQUIRY)

        if not self._inquiries.delete(request.inquiry_id):
            raise NotFoundError(resource="Inquiry", identifier=request.inquiry_id)

        logger.info(
            "inquiry.deleted",
            extra={"inquiry_id": request.inquiry_id, "deleted_by": actor.id},
        )
