from __future__ import annotations

from dataclasses import dataclass

from car_backoffice.domain.actors import Capability, authorize
from car_backoffice.domain.errors import NotFoundError
from car_backoffice.domain.inquiry import Inquiry
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.inquiry_repository import InquiryRepository


@dataclass(frozen=True, slots=True)
class GetInquiryRequest:
    actor_id: str | None
    inquiry_id: str


@dataclass(frozen=True, slots=True)
class GetInquiryResponse:
    inquiry: Inquiry


class GetInquiry:
    """
    Read one inquiry.

    Managers and admins read any inquiry; an agent reads the ones assigned
    to them. Private notes are blanked for everyone but the assignee.
    """

    def __init__(
        self,
        inquiry_repository: InquiryRepository,
        actor_directory: ActorDirectory,
    ) -> None:
        self._inquiries = inquiry_repository
        self._actors = actor_directory

    def execute(self, request: GetInquiryRequest) -> GetInquiryResponse:
        actor = self._actors.require(request.actor_id)

        inquiry = self._inquiries.get_by_id(request.inquiry_id)
        if inquiry is None:
            raise NotFoundError(resource="Inquiry", identifier=request.inquiry_id)

        if inquiry.assigned_to != actor.id:
            authorize(actor, Capability.VIEW_ALL_INQUIRIES)

        return GetInquiryResponse(inquiry=inquiry.visible_to(actor.id))
