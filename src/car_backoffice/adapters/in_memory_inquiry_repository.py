from __future__ import annotations

from car_backoffice.domain.inquiry import Inquiry, InquiryQuery
from car_backoffice.domain.search import Paging
from car_backoffice.ports.inquiry_repository import InquiryPage, InquiryRepository


class InMemoryInquiryRepository(InquiryRepository):
    """
    Canonical contract implementation for tests.

    - Keeps inquiries keyed by id
    - Lists newest ``submitted_at`` first, paging after filtering
    """

    def __init__(self, inquiries: list[Inquiry] | None = None) -> None:
        self._inquiries: dict[str, Inquiry] = {i.id: i for i in inquiries or []}

    def add(self, inquiry: Inquiry) -> None:
        self._inquiries[inquiry.id] = inquiry

    def save(self, inquiry: Inquiry) -> None:
        self._inquiries[inquiry.id] = inquiry

    def get_by_id(self, inquiry_id: str) -> Inquiry | None:
        return self._inquiries.get(inquiry_id)

    def delete(self, inquiry_id: str) -> bool:
        return self._inquiries.pop(inquiry_id, None) is not None

    def delete_by_car_id(self, car_id: str) -> int:
        doomed = [i.id for i in self._inquiries.values() if i.car_id == car_id]
        for inquiry_id in doomed:
            del self._inquiries[inquiry_id]
        return len(doomed)

    def list_inquiries(self, query: InquiryQuery, paging: Paging) -> InquiryPage:
        matches = sorted(
            (i for i in self._inquiries.values() if self._matches(i, query)),
            key=lambda i: i.id,
        )
        matches.sort(key=lambda i: i.submitted_at, reverse=True)
        start = paging.offset
        end = paging.offset + paging.limit
        return InquiryPage(inquiries=matches[start:end], total_count=len(matches))

    def _matches(self, inquiry: Inquiry, query: InquiryQuery) -> bool:
        if query.assigned_to is not None and inquiry.assigned_to != query.assigned_to:
            return False
        if query.status is not None and inquiry.status is not query.status:
            return False
        if query.car_id is not None and inquiry.car_id != query.car_id:
            return False
        if query.serious_only and not inquiry.is_serious_customer:
            return False
        return True
