"""Actors, roles and the capability table.

Every use case authorizes through ``authorize`` against ``CAPABILITIES``;
there are no per-endpoint role conditionals.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from car_backoffice.domain.errors import ForbiddenError


class Role(str, Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    CONTENT_EDITOR = "content-editor"
    SALES_AGENT = "sales-agent"
    CUSTOMER = "customer"


class Capability(str, Enum):
    SUBMIT_LISTING = "submit_listing"
    EDIT_OWN_LISTING = "edit_own_listing"
    EDIT_ANY_LISTING = "edit_any_listing"
    REVIEW_LISTING = "review_listing"
    DELETE_LISTING = "delete_listing"
    VIEW_BACK_OFFICE_LISTINGS = "view_back_office_listings"
    ASSIGN_INQUIRY = "assign_inquiry"
    WORK_INQUIRIES = "work_inquiries"
    MANAGE_ANY_INQUIRY = "manage_any_inquiry"
    DELETE_INQUIRY = "delete_inquiry"
    VIEW_ALL_INQUIRIES = "view_all_inquiries"
    EDIT_FILTER_CATALOG = "edit_filter_catalog"


CAPABILITIES: dict[Role, frozenset[Capability]] = {
    Role.ADMIN: frozenset(
        {
            Capability.SUBMIT_LISTING,
            Capability.EDIT_OWN_LISTING,
            Capability.EDIT_ANY_LISTING,
            Capability.REVIEW_LISTING,
            Capability.DELETE_LISTING,
            Capability.VIEW_BACK_OFFICE_LISTINGS,
            Capability.ASSIGN_INQUIRY,
            Capability.MANAGE_ANY_INQUIRY,
            Capability.DELETE_INQUIRY,
            Capability.VIEW_ALL_INQUIRIES,
            Capability.EDIT_FILTER_CATALOG,
        }
    ),
    Role.MANAGER: frozenset(
        {
            Capability.REVIEW_LISTING,
            Capability.VIEW_BACK_OFFICE_LISTINGS,
            Capability.ASSIGN_INQUIRY,
            Capability.VIEW_ALL_INQUIRIES,
        }
    ),
    Role.CONTENT_EDITOR: frozenset(
        {
            Capability.SUBMIT_LISTING,
            Capability.EDIT_OWN_LISTING,
            Capability.VIEW_BACK_OFFICE_LISTINGS,
        }
    ),
    Role.SALES_AGENT: frozenset({Capability.WORK_INQUIRIES}),
    Role.CUSTOMER: frozenset(),
}


@dataclass(frozen=True, slots=True)
class Actor:
    id: str
    role: Role

    def can(self, capability: Capability) -> bool:
        return capability in CAPABILITIES[self.role]


def authorize(actor: Actor, capability: Capability) -> None:
    """
    Raise ForbiddenError unless the actor's role grants the capability.

    Raises:
        ForbiddenError: If the role lacks the capability
    """
    if not actor.can(capability):
        raise ForbiddenError(
            f"Role '{actor.role.value}' is not allowed to {capability.value.replace('_', ' ')}",
            actor_id=actor.id,
            capability=capability.value,
        )
