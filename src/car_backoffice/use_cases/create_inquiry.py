from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from car_backoffice.domain.car import ListingStatus
from car_backoffice.domain.errors import NotFoundError
from car_backoffice.domain.ids import new_id, utc_now
from car_backoffice.domain.inquiry import CustomerContact, Inquiry, open_inquiry
from car_backoffice.ports.car_catalog_repository import CarCatalogRepository
from car_backoffice.ports.inquiry_repository import InquiryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateInquiryRequest:
    car_id: str
    contact: CustomerContact


@dataclass(frozen=True, slots=True)
class CreateInquiryResponse:
    inquiry: Inquiry


class CreateInquiry:
    """
    Record a customer's purchase inquiry against a listed car.

    Anyone may submit one; the car summary is captured at this moment and
    never recomputed.
    """

    def __init__(
        self,
        car_catalog_repository: CarCatalogRepository,
        inquiry_repository: InquiryRepository,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        self._cars = car_catalog_repository
        self._inquiries = inquiry_repository
        self._clock = clock
        self._id_factory = id_factory

    def execute(self, request: CreateInquiryRequest) -> CreateInquiryResponse:
        """
        Raises:
            ValidationError: If the contact details are incomplete
            NotFoundError: If the car does not exist or is not approved
        """
        request.contact.validate()

        car = self._cars.get_by_id(request.car_id)
        # Unlisted cars are hidden from the public, as in GetListing
        if car is None or car.status is not ListingStatus.APPROVED:
            raise NotFoundError(resource="Car", identifier=request.car_id)

        inquiry = open_inquiry(
            car,
            request.contact,
            inquiry_id=self._id_factory(),
            submitted_at=self._clock(),
        )
        self._inquiries.add(inquiry)

        logger.info(
            "inquiry.created",
            extra={"inquiry_id": inquiry.id, "car_id": car.id},
        )
        return CreateInquiryResponse(inquiry=inquiry)
