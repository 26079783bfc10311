from __future__ import annotations

import logging
from dataclasses import dataclass

from car_backoffice.domain.actors import Capability, authorize
from car_backoffice.domain.errors import NotFoundError
from car_backoffice.domain.inquiry import Inquiry, UnknownAgent, assign
from car_backoffice.ports.actor_directory import ActorDirectory
from car_backoffice.ports.inquiry_repository import InquiryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AssignInquiryRequest:
    actor_id: str | None
    inquiry_id: str
    agent_id: str


@dataclass(frozen=True, slots=True)
class AssignInquiryResponse:
    inquiry: Inquiry


class AssignInquiry:
    """Route an inquiry to a sales agent. Re-assignment is allowed until closure."""

    def __init__(
        self,
        inquiry_repository: InquiryRepository,
        actor_directory: ActorDirectory,
    ) -> None:
        self._inquiries = inquiry_repository
        self._actors = actor_directory

    def execute(self, request: AssignInquiryRequest) -> AssignInquiryResponse:
        """
        Raises:
            UnauthorizedError: If the actor is unknown
            ForbiddenError: If the actor cannot assign inquiries
            NotFoundError: If the inquiry does not exist
            UnknownAgent: If agent_id is not an actor who works inquiries
            InvalidTransition: If the inquiry is closed
        """
        actor = self._actors.require(request.actor_id)
        authorize(actor, Capability.ASSIGN_INQUIRY)

        inquiry = self._inquiries.get_by_id(request.inquiry_id)
        if inquiry is None:
            raise NotFoundError(resource="Inquiry", identifier=request.inquiry_id)

        agent = self._actors.get(request.agent_id)
        if agent is None or not agent.can(Capability.WORK_INQUIRIES):
            raise UnknownAgent(request.agent_id)

        previous = inquiry.assigned_to
        updated = assign(inquiry, agent.id)
        self._inquiries.save(updated)

        logger.info(
            "inquiry.assigned",
            extra={
                "inquiry_id": updated.id,
                "assigned_to": agent.id,
                "previous_assignee": previous,
                "assigned_by": actor.id,
            },
        )
        return AssignInquiryResponse(inquiry=updated.visible_to(actor.id))
