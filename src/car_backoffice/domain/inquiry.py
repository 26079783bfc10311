from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum

from car_backoffice.domain.car import Car
from car_backoffice.domain.errors import InvalidTransition, ValidationError


class InquiryStatus(str, Enum):
    NEW = "new"
    CONTACTED = "contacted"
    CLOSED = "closed"


class CallPreference(str, Enum):
    NOW = "now"
    SCHEDULE = "schedule"


class MissingClosureReport(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            errors=[
                {
                    "field": "remarks",
                    "message": "A closure report is required to close an inquiry",
                    "code": "CLOSURE_REPORT_REQUIRED",
                }
            ]
        )


class UnknownAgent(ValidationError):
    def __init__(self, agent_id: str) -> None:
        super().__init__(
            errors=[
                {
                    "field": "agent_id",
                    "message": f"'{agent_id}' is not a sales agent",
                    "code": "UNKNOWN_AGENT",
                }
            ]
        )


@dataclass(frozen=True, slots=True)
class CustomerContact:
    name: str
    phone: str
    customer_id: str | None = None
    call_preference: CallPreference = CallPreference.NOW
    scheduled_call_time: datetime | None = None

    def validate(self) -> None:
        errors: list[dict[str, str]] = []
        if not self.name or not self.name.strip():
            errors.append(
                {"field": "customer_name", "message": "Name is required", "code": "REQUIRED"}
            )
        if not self.phone or not self.phone.strip():
            errors.append(
                {"field": "customer_phone", "message": "Phone is required", "code": "REQUIRED"}
            )
        if self.call_preference is CallPreference.SCHEDULE and self.scheduled_call_time is None:
            errors.append(
                {
                    "field": "scheduled_call_time",
                    "message": "A call time is required when scheduling a call",
                    "code": "REQUIRED",
                }
            )
        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class Inquiry:
    id: str
    car_id: str
    car_summary: str
    customer_name: str
    customer_phone: str
    submitted_at: datetime
    status: InquiryStatus = InquiryStatus.NEW
    customer_id: str | None = None
    assigned_to: str | None = None
    remarks: str = ""
    private_notes: str = ""
    is_serious_customer: bool = False
    call_preference: CallPreference = CallPreference.NOW
    scheduled_call_time: datetime | None = None

    @property
    def is_closed(self) -> bool:
        return self.status is InquiryStatus.CLOSED

    def visible_to(self, actor_id: str | None) -> Inquiry:
        """Private notes are only shown to the current assignee."""
        if actor_id is not None and actor_id == self.assigned_to:
            return self
        return replace(self, private_notes="")


@dataclass(frozen=True, slots=True)
class InquiryQuery:
    assigned_to: str | None = None
    status: InquiryStatus | None = None
    car_id: str | None = None
    serious_only: bool = False


def open_inquiry(
    car: Car,
    contact: CustomerContact,
    *,
    inquiry_id: str,
    submitted_at: datetime,
) -> Inquiry:
    """Create a new inquiry; the car summary is frozen at this moment."""
    return Inquiry(
        id=inquiry_id,
        car_id=car.id,
        car_summary=car.summary,
        customer_name=contact.name.strip(),
        customer_phone=contact.phone.strip(),
        customer_id=contact.customer_id,
        submitted_at=submitted_at,
        call_preference=contact.call_preference,
        scheduled_call_time=contact.scheduled_call_time,
    )


# ==============================================================================
# State machine
# ==============================================================================
# All inquiry mutations go through the functions below. Closed is terminal
# for assignment and status; private notes stay editable.


def assign(inquiry: Inquiry, agent_id: str) -> Inquiry:
    """
    Hand the inquiry to an agent. A new inquiry becomes contacted;
    re-assignment keeps status, remarks and notes.

    Raises:
        InvalidTransition: If the inquiry is closed
    """
    if inquiry.is_closed:
        raise InvalidTransition(
            "Inquiry", inquiry.status.value, InquiryStatus.CONTACTED.value, inquiry_id=inquiry.id
        )
    status = InquiryStatus.CONTACTED if inquiry.status is InquiryStatus.NEW else inquiry.status
    return replace(inquiry, assigned_to=agent_id, status=status)


def apply_status(
    inquiry: Inquiry,
    target: InquiryStatus,
    *,
    remarks: str | None = None,
    private_notes: str | None = None,
    is_serious_customer: bool | None = None,
) -> Inquiry:
    """
    Move an open inquiry to ``target``.

    Closing requires a non-blank closure report and is the only moment the
    serious-customer flag can be set.

    Raises:
        InvalidTransition: If the inquiry is already closed
        MissingClosureReport: If closing without remarks
        ValidationError: If the serious flag is sent without closing
    """
    if inquiry.is_closed:
        raise InvalidTransition(
            "Inquiry", inquiry.status.value, target.value, inquiry_id=inquiry.id
        )

    notes = inquiry.private_notes if private_notes is None else private_notes

    if target is InquiryStatus.CLOSED:
        report = (remarks or "").strip()
        if not report:
            raise MissingClosureReport()
        return replace(
            inquiry,
            status=InquiryStatus.CLOSED,
            remarks=report,
            private_notes=notes,
            is_serious_customer=bool(is_serious_customer),
        )

    if is_serious_customer is not None:
        raise ValidationError(
            errors=[
                {
                    "field": "is_serious_customer",
                    "message": "Can only be set when closing an inquiry",
                    "code": "CLOSURE_ONLY",
                }
            ]
        )

    return replace(
        inquiry,
        status=target,
        remarks=inquiry.remarks if remarks is None else remarks,
        private_notes=notes,
    )


def with_private_notes(inquiry: Inquiry, notes: str) -> Inquiry:
    return replace(inquiry, private_notes=notes)
