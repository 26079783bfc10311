"""Test suite for GetInquiry, ListInquiries, UpdateInquiryNotes and DeleteInquiry."""

from __future__ import annotations

from datetime import timedelta

import pytest

from car_backoffice.adapters.in_memory_inquiry_repository import InMemoryInquiryRepository
from car_backoffice.domain.errors import ForbiddenError, NotFoundError
from car_backoffice.domain.inquiry import InquiryStatus
from car_backoffice.domain.search import Paging
from car_backoffice.use_cases.delete_inquiry import DeleteInquiry, DeleteInquiryRequest
from car_backoffice.use_cases.get_inquiry import GetInquiry, GetInquiryRequest
from car_backoffice.use_cases.list_inquiries import ListInquiries, ListInquiriesRequest
from car_backoffice.use_cases.update_inquiry_notes import (
    UpdateInquiryNotes,
    UpdateInquiryNotesRequest,
)


@pytest.fixture()
def inquiry_repo(make_inquiry, fixed_now) -> InMemoryInquiryRepository:
    return InMemoryInquiryRepository(
        [
            make_inquiry("inq-1", submitted_at=fixed_now),
            make_inquiry(
                "inq-2",
                submitted_at=fixed_now + timedelta(hours=1),
                status=InquiryStatus.CONTACTED,
                assigned_to="agent-1",
                private_notes="Call after 6pm",
            ),
            make_inquiry(
                "inq-3",
                submitted_at=fixed_now + timedelta(hours=2),
                status=InquiryStatus.CLOSED,
                assigned_to="agent-2",
                remarks="Booked",
                is_serious_customer=True,
                private_notes="Paid deposit",
            ),
        ]
    )


def _ids(response) -> list[str]:
    return [i.id for i in response.inquiries]


# ==============================================================================
# GetInquiry
# ==============================================================================


def test_assignee_reads_own_inquiry_with_notes(inquiry_repo, actor_directory) -> None:
    result = GetInquiry(inquiry_repo, actor_directory).execute(
        GetInquiryRequest(actor_id="agent-1", inquiry_id="inq-2")
    )

    assert result.inquiry.private_notes == "Call after 6pm"


def test_manager_reads_any_inquiry_without_notes(inquiry_repo, actor_directory) -> None:
    result = GetInquiry(inquiry_repo, actor_directory).execute(
        GetInquiryRequest(actor_id="manager-1", inquiry_id="inq-2")
    )

    assert result.inquiry.id == "inq-2"
    assert result.inquiry.private_notes == ""


def test_agent_cannot_read_other_agents_inquiry(inquiry_repo, actor_directory) -> None:
    with pytest.raises(ForbiddenError):
        GetInquiry(inquiry_repo, actor_directory).execute(
            GetInquiryRequest(actor_id="agent-1", inquiry_id="inq-3")
        )


def test_get_unknown_inquiry(inquiry_repo, actor_directory) -> None:
    with pytest.raises(NotFoundError):
        GetInquiry(inquiry_repo, actor_directory).execute(
            GetInquiryRequest(actor_id="admin-1", inquiry_id="missing")
        )


# ==============================================================================
# ListInquiries
# ==============================================================================


def test_admin_board_lists_everything_redacted(inquiry_repo, actor_directory) -> None:
    result = ListInquiries(inquiry_repo, actor_directory).execute(
        ListInquiriesRequest(actor_id="admin-1", paging=Paging())
    )

    assert _ids(result) == ["inq-3", "inq-2", "inq-1"]
    assert result.total_count == 3
    assert all(i.private_notes == "" for i in result.inquiries)


def test_manager_filters_by_assignee(inquiry_repo, actor_directory) -> None:
    result = ListInquiries(inquiry_repo, actor_directory).execute(
        ListInquiriesRequest(actor_id="manager-1", paging=Paging(), assigned_to="agent-2")
    )

    assert _ids(result) == ["inq-3"]


def test_serious_customers_board(inquiry_repo, actor_directory) -> None:
    result = ListInquiries(inquiry_repo, actor_directory).execute(
        ListInquiriesRequest(actor_id="admin-1", paging=Paging(), serious_only=True)
    )

    assert _ids(result) == ["inq-3"]


def test_agent_only_sees_own_queue(inquiry_repo, actor_directory) -> None:
    """Asking for another agent's queue still returns the caller's own."""
    result = ListInquiries(inquiry_repo, actor_directory).execute(
        ListInquiriesRequest(actor_id="agent-1", paging=Paging(), assigned_to="agent-2")
    )

    assert _ids(result) == ["inq-2"]
    assert result.inquiries[0].private_notes == "Call after 6pm"


@pytest.mark.parametrize("actor_id", ["editor-1", "customer-1"])
def test_list_forbidden_without_inquiry_access(inquiry_repo, actor_directory, actor_id: str) -> None:
    with pytest.raises(ForbiddenError):
        ListInquiries(inquiry_repo, actor_directory).execute(
            ListInquiriesRequest(actor_id=actor_id, paging=Paging())
        )


# ==============================================================================
# UpdateInquiryNotes
# ==============================================================================


def test_assignee_edits_notes_after_closure(inquiry_repo, actor_directory) -> None:
    result = UpdateInquiryNotes(inquiry_repo, actor_directory).execute(
        UpdateInquiryNotesRequest(actor_id="agent-2", inquiry_id="inq-3", private_notes="Delivered")
    )

    assert result.inquiry.private_notes == "Delivered"
    assert result.inquiry.status is InquiryStatus.CLOSED
    assert inquiry_repo.get_by_id("inq-3").private_notes == "Delivered"


@pytest.mark.parametrize("actor_id", ["agent-1", "admin-1"])
def test_only_the_assignee_edits_notes(inquiry_repo, actor_directory, actor_id: str) -> None:
    with pytest.raises(ForbiddenError):
        UpdateInquiryNotes(inquiry_repo, actor_directory).execute(
            UpdateInquiryNotesRequest(actor_id=actor_id, inquiry_id="inq-3", private_notes="x")
        )


def test_notes_on_unknown_inquiry(inquiry_repo, actor_directory) -> None:
    with pytest.raises(NotFoundError):
        UpdateInquiryNotes(inquiry_repo, actor_directory).execute(
            UpdateInquiryNotesRequest(actor_id="agent-1", inquiry_id="missing", private_notes="x")
        )


# ==============================================================================
# DeleteInquiry
# ==============================================================================


def test_admin_deletes_inquiry(inquiry_repo, actor_directory) -> None:
    assert DeleteInquiry(inquiry_repo, actor_directory).execute(
        DeleteInquiryRequest(actor_id="admin-1", inquiry_id="inq-1")
    ) is None

    assert inquiry_repo.get_by_id("inq-1") is None


def test_delete_unknown_inquiry(inquiry_repo, actor_directory) -> None:
    with pytest.raises(NotFoundError):
        DeleteInquiry(inquiry_repo, actor_directory).execute(
            DeleteInquiryRequest(actor_id="admin-1", inquiry_id="missing")
        )


@pytest.mark.parametrize("actor_id", ["manager-1", "agent-1"])
def test_delete_inquiry_forbidden(inquiry_repo, actor_directory, actor_id: str) -> None:
    with pytest.raises(ForbiddenError):
        DeleteInquiry(inquiry_repo, actor_directory).execute(
            DeleteInquiryRequest(actor_id=actor_id, inquiry_id="inq-1")
        )
