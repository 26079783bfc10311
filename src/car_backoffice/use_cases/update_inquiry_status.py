from __future__ import annotations

import logging
from dataclasses import dataclass

from car_backoffice.domain.actors import Actor, Capability, authorize
from car_backoffice.domain.errors import NotFoundError
from car_backoffice.domain.inquiry import Inquiry, InquiryStatus, apply_status
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.inquiry_repository import InquiryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateInquiryStatusRequest:
    actor_id: str | None
    inquiry_id: str
    status: InquiryStatus
    remarks: str | None = None
    private_notes: str | None = None
    is_serious_customer: bool | None = None


@dataclass(frozen=True, slots=True)
class UpdateInquiryStatusResponse:
    inquiry: Inquiry


def authorize_inquiry_work(actor: Actor, inquiry: Inquiry) -> None:
    """The assigned agent works the inquiry; an admin may step in on any of them."""
    if actor.can(Capability.MANAGE_ANY_INQUIRY):
        return
    if actor.can(Capability.WORK_INQUIRIES) and inquiry.assigned_to == actor.id:
        return
    authorize(actor, Capability.MANAGE_ANY_INQUIRY)


class UpdateInquiryStatus:
    """
    Move an inquiry along ``new -> contacted -> closed``.

    Closing requires the closure report in ``remarks`` and is the only call
    that may set ``is_serious_customer``.
    """

    def __init__(
        self,
        inquiry_repository: InquiryRepository,
        actor_directory: ActorDirectory,
    ) -> None:
        self._inquiries = inquiry_repository
        self._actors = actor_directory

    def execute(self, request: UpdateInquiryStatusRequest) -> UpdateInquiryStatusResponse:
        """
        Raises:
            UnauthorizedError: If the actor is unknown
            NotFoundError: If the inquiry does not exist
            ForbiddenError: If the actor is neither the assignee nor an admin
            InvalidTransition: If the inquiry is already closed
            MissingClosureReport: If closing without remarks
            ValidationError: If the serious flag is sent without closing
        """
        actor = self._actors.require(request.actor_id)

        inquiry = self._inquiries.get_by_id(request.inquiry_id)
        if inquiry is None:
            raise NotFoundError(resource="Inquiry", identifier=request.inquiry_id)

        authorize_inquiry_work(actor, inquiry)

        updated = apply_status(
            inquiry,
            request.status,
            remarks=request.remarks,
            private_notes=request.private_notes,
            is_serious_customer=request.is_serious_customer,
        )
        self._inquiries.save(updated)

        logger.info(
            f"inquiry.{updated.status.value}",
            extra={
                "inquiry_id": updated.id,
                "previous_status": inquiry.status.value,
                "updated_by": actor.id,
                "is_serious_customer": updated.is_serious_customer,
            },
        )
        return UpdateInquiryStatusResponse(inquiry=updated.visible_to(actor.id))
