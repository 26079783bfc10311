from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, Index, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column

from car_backoffice.infra.db.models.base import Base


class CarRow(Base):
    __tablename__ = "cars"
    __table_args__ = (
        Index("ix_cars_status_created_at", "status", "created_at"),
        Index("ix_cars_submitted_by", "submitted_by"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    brand: Mapped[str] = mapped_column(String(80), nullable=False)
    model: Mapped[str] = mapped_column(String(80), nullable=False)

    year: Mapped[int] = mapped_column(Integer, nullable=False)
    registration_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    price: Mapped[int] = mapped_column(Integer, nullable=False)  # smallest currency unit
    km_run: Mapped[int] = mapped_column(Integer, nullable=False)

    fuel: Mapped[str] = mapped_column(String(20), nullable=False)
    transmission: Mapped[str] = mapped_column(String(20), nullable=False)
    ownership: Mapped[int] = mapped_column(Integer, nullable=False)
    color: Mapped[str] = mapped_column(String(40), nullable=False)
    engine_cc: Mapped[int] = mapped_column(Integer, nullable=False)
    additional_details: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Ordered list of URLs; list order is display order
    images: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    badges: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)

    instagram_reel_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    instagram_media_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)

    status: Mapped[str] = mapped_column(String(20), nullable=False)
    submitted_by: Mapped[str] = mapped_column(String(128), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
