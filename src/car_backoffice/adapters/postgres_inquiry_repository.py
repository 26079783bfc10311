"""PostgreSQL implementation of InquiryRepository."""

from __future__ import annotations

import uuid

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from car_backoffice.domain.inquiry import CallPreference, Inquiry, InquiryQuery, InquiryStatus
from car_backoffice.domain.search import Paging
from car_backoffice.infra.db.models.inquiry import InquiryRow
from car_backoffice.ports.inquiry_repository import InquiryPage, InquiryRepository


def _as_uuid(value: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(value)
    except ValueError:
        return None


class PostgresInquiryRepository(InquiryRepository):
    """
    PostgreSQL implementation of InquiryRepository.

    Deletes are issued as bulk DELETE statements so the cascade from a
    listing removes its inquiries before the car row is touched.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, inquiry: Inquiry) -> None:
        row = InquiryRow(id=uuid.UUID(inquiry.id))
        self._apply(row, inquiry)
        self._session.add(row)
        self._session.flush()

    def save(self, inquiry: Inquiry) -> None:
        row = self._session.get(InquiryRow, uuid.UUID(inquiry.id))
        if row is None:
            self.add(inquiry)
            return
        self._apply(row, inquiry)
        self._session.flush()

    def get_by_id(self, inquiry_id: str) -> Inquiry | None:
        key = _as_uuid(inquiry_id)
        if key is None:
            return None
        row = self._session.get(InquiryRow, key)
        return self._to_domain(row) if row else None

    def delete(self, inquiry_id: str) -> bool:
        key = _as_uuid(inquiry_id)
        if key is None:
            return False
        result = self._session.execute(delete(InquiryRow).where(InquiryRow.id == key))
        return bool(result.rowcount)

    def delete_by_car_id(self, car_id: str) -> int:
        key = _as_uuid(car_id)
        if key is None:
            return 0
        result = self._session.execute(delete(InquiryRow).where(InquiryRow.car_id == key))
        return result.rowcount or 0

    def list_inquiries(self, query: InquiryQuery, paging: Paging) -> InquiryPage:
        statement = select(InquiryRow)
        if query.assigned_to is not None:
            statement = statement.where(InquiryRow.assigned_to == query.assigned_to)
        if query.status is not None:
            statement = statement.where(InquiryRow.status == query.status.value)
        if query.car_id is not None:
            key = _as_uuid(query.car_id)
            if key is None:
                return InquiryPage(inquiries=[], total_count=0)
            statement = statement.where(InquiryRow.car_id == key)
        if query.serious_only:
            statement = statement.where(InquiryRow.is_serious_customer.is_(True))

        count_query = select(func.count()).select_from(statement.subquery())
        total_count = self._session.execute(count_query).scalar() or 0

        statement = (
            statement.order_by(InquiryRow.submitted_at.desc(), InquiryRow.id.asc())
            .offset(paging.offset)
            .limit(paging.limit)
        )
        rows = self._session.execute(statement).scalars().all()
        return InquiryPage(inquiries=[self._to_domain(r) for r in rows], total_count=total_count)

    def _apply(self, row: InquiryRow, inquiry: Inquiry) -> None:
        row.car_id = uuid.UUID(inquiry.car_id)
        row.car_summary = inquiry.car_summary
        row.customer_name = inquiry.customer_name
        row.customer_phone = inquiry.customer_phone
        row.customer_id = inquiry.customer_id
        row.status = inquiry.status.value
        row.assigned_to = inquiry.assigned_to
        row.remarks = inquiry.remarks
        row.private_notes = inquiry.private_notes
        row.is_serious_customer = inquiry.is_serious_customer
        row.call_preference = inquiry.call_preference.value
        row.scheduled_call_time = inquiry.scheduled_call_time
        row.submitted_at = inquiry.submitted_at

    def _to_domain(self, row: InquiryRow) -> Inquiry:
        return Inquiry(
            id=str(row.id),
            car_id=str(row.car_id),
            car_summary=row.car_summary,
            customer_name=row.customer_name,
            customer_phone=row.customer_phone,
            customer_id=row.customer_id,
            status=InquiryStatus(row.status),
            assigned_to=row.assigned_to,
            remarks=row.remarks,
            private_notes=row.private_notes,
            is_serious_customer=row.is_serious_customer,
            call_preference=CallPreference(row.call_preference),
            scheduled_call_time=row.scheduled_call_time,
            submitted_at=row.submitted_at,
        )
