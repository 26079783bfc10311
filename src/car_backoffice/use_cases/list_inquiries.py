from __future__ import annotations

from dataclasses import dataclass

from car_backoffice.domain.actors import Capability, authorize
from car_backoffice.domain.inquiry import Inquiry, InquiryQuery, InquiryStatus
from car_backoffice.domain.search import Paging
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.inquiry_repository import InquiryRepository


@dataclass(frozen=True, slots=True)
class ListInquiriesRequest:
    actor_id: str | None
    paging: Paging
    status: InquiryStatus | None = None
    car_id: str | None = None
    assigned_to: str | None = None
    serious_only: bool = False


@dataclass(frozen=True, slots=True)
class ListInquiriesResponse:
    inquiries: list[Inquiry]
    total_count: int


class ListInquiries:
    """
    Inquiry boards: everything for managers and admins, the own queue for
    agents, and the serious-customers view through ``serious_only``.
    """

    def __init__(
        self,
        inquiry_repository: InquiryRepository,
        actor_directory: ActorDirectory,
    ) -> None:
        self._inquiries = inquiry_repository
        self._actors = actor_directory

    def execute(self, request: ListInquiriesRequest) -> ListInquiriesResponse:
        """
        Raises:
            UnauthorizedError: If the actor is unknown
            ForbiddenError: If the actor can neither view all nor work inquiries
            PagingValidationError: If paging parameters are invalid
        """
        actor = self._actors.require(request.actor_id)
        if actor.can(Capability.VIEW_ALL_INQUIRIES):
            assigned_to = request.assigned_to
        elif actor.can(Capability.WORK_INQUIRIES):
            # Agents only ever see their own queue, whatever they ask for
            assigned_to = actor.id
        else:
            authorize(actor, Capability.VIEW_ALL_INQUIRIES)
        request.paging.validate()

        page = self._inquiries.list_inquiries(
            InquiryQuery(
                assigned_to=assigned_to,
                status=request.status,
                car_id=request.car_id,
                serious_only=request.serious_only,
            ),
            request.paging,
        )
        return ListInquiriesResponse(
            inquiries=[i.visible_to(actor.id) for i in page.inquiries],
            total_count=page.total_count,
        )
