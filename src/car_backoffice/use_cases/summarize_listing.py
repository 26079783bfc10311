from __future__ import annotations

from dataclasses import dataclass

from car_backoffice.ports.car_summarizer import CarSummarizer
from car_backoffice.use_cases.get_listing import GetListing, GetListingRequest


@dataclass(frozen=True, slots=True)
class SummarizeListingRequest:
    car_id: str
    actor_id: str | None = None


@dataclass(frozen=True, slots=True)
class SummarizeListingResponse:
    car_id: str
    summary: str


class SummarizeListing:
    """Describe a listing in prose through the text-generation collaborator."""

    def __init__(self, get_listing: GetListing, summarizer: CarSummarizer) -> None:
        self._get_listing = get_listing
        self._summarizer = summarizer

    def execute(self, request: SummarizeListingRequest) -> SummarizeListingResponse:
        """
        Raises:
            NotFoundError: If the listing does not exist or is hidden from the caller
        """
        car = self._get_listing.execute(
            GetListingRequest(car_id=request.car_id, actor_id=request.actor_id)
        ).car
        return SummarizeListingResponse(car_id=car.id, summary=self._summarizer.summarize(car))
