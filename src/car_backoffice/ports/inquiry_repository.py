from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from car_backoffice.domain.inquiry import Inquiry, InquiryQuery
from car_backoffice.domain.search import Paging


@dataclass(frozen=True)
class InquiryPage:
    inquiries: list[Inquiry]
    total_count: int


class InquiryRepository(ABC):
    """
    Port for inquiry persistence.

    ``delete_by_car_id`` backs the listing cascade and must be idempotent:
    calling it again after a partial failure deletes whatever is left and
    never fails because rows are already gone.
    """

    @abstractmethod
    def add(self, inquiry: Inquiry) -> None: ...

    @abstractmethod
    def save(self, inquiry: Inquiry) -> None: ...

    @abstractmethod
    def get_by_id(self, inquiry_id: str) -> Inquiry | None: ...

    @abstractmethod
    def delete(self, inquiry_id: str) -> bool: ...

    @abstractmethod
    def delete_by_car_id(self, car_id: str) -> int:
        """Delete every inquiry referencing the car. Returns the number removed."""
        ...

    @abstractmethod
    def list_inquiries(self, query: InquiryQuery, paging: Paging) -> InquiryPage:
        """Inquiries matching the query, newest ``submitted_at`` first."""
        ...
