from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from car_backoffice.infra.db.models.base import Base

SINGLETON_ID = "singleton"


class FilterCatalogRow(Base):
    """The one filter catalog document, replaced whole on every write."""

    __tablename__ = "filter_catalog"

    id: Mapped[str] = mapped_column(String(20), primary_key=True, default=SINGLETON_ID)
    brands: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    models: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    years: Mapped[list[Any]] = mapped_column(JSON, nullable=False, default=list)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
