from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from car_backoffice.infra.db.models.base import Base


class ActorRow(Base):
    """Local mirror of the identity provider's user roles."""

    __tablename__ = "actors"

    id: Mapped[str] = mapped_column(String(128), primary_key=True)
    role: Mapped[str] = mapped_column(String(30), nullable=False)
