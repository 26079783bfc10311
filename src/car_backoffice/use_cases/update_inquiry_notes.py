from __future__ import annotations

from dataclasses import dataclass

from car_backoffice.domain.errors import ForbiddenError, NotFoundError
from car_backoffice.domain.inquiry import Inquiry, with_private_notes
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.inquiry_repository import InquiryRepository


@dataclass(frozen=True, slots=True)
class UpdateInquiryNotesRequest:
    actor_id: str | None
    inquiry_id: str
    private_notes: str


@dataclass(frozen=True, slots=True)
class UpdateInquiryNotesResponse:
    inquiry: Inquiry


class UpdateInquiryNotes:
    """Private notes belong to the assignee, at any status including closed."""

    def __init__(
        self,
        inquiry_repository: InquiryRepository,
        actor_directory: ActorDirectory,
    ) -> None:
        self._inquiries = inquiry_repository
        self._actors = actor_directory

    def execute(self, request: UpdateInquiryNotesRequest) -> UpdateInquiryNotesResponse:
        actor = self._actors.require(request.actor_id)

        inquiry = self._inquiries.get_by_id(request.inquiry_id)
        if inquiry is None:
            raise NotFoundError(resource="Inquiry", identifier=request.inquiry_id)

        if inquiry.assigned_to != actor.id:
            raise ForbiddenError(
                "Only the assigned agent can edit private notes",
                actor_id=actor.id,
                inquiry_id=inquiry.id,
            )

        updated = with_private_notes(inquiry, request.private_notes)
        self._inquiries.save(updated)
        return UpdateInquiryNotesResponse(inquiry=updated)
