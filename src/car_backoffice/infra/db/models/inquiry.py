from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from car_backoffice.infra.db.models.base import Base


class InquiryRow(Base):
    __tablename__ = "inquiries"
    __table_args__ = (
        Index("ix_inquiries_car_id", "car_id"),
        Index("ix_inquiries_assigned_to", "assigned_to"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    # No ON DELETE: inquiries are removed explicitly before their car
    car_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), ForeignKey("cars.id"), nullable=False
    )
    car_summary: Mapped[str] = mapped_column(String(200), nullable=False)

    customer_name: Mapped[str] = mapped_column(String(120), nullable=False)
    customer_phone: Mapped[str] = mapped_column(String(40), nullable=False)
    customer_id: Mapped[str | None] = mapped_column(String(128), nullable=True)

    status: Mapped[str] = mapped_column(String(20), nullable=False)
    assigned_to: Mapped[str | None] = mapped_column(String(128), nullable=True)
    remarks: Mapped[str] = mapped_column(Text, nullable=False, default="")
    private_notes: Mapped[str] = mapped_column(Text, nullable=False, default="")
    is_serious_customer: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    call_preference: Mapped[str] = mapped_column(String(20), nullable=False)
    scheduled_call_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    submitted_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
