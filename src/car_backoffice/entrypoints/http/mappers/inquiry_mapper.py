from __future__ import annotations

from car_backoffice.domain.inquiry import CustomerContact, Inquiry
from car_backoffice.entrypoints.http.dtos.inquiries import (
    InquiryCreateDTO,
    InquiryPageResponseDTO,
    InquiryResponseDTO,
)


class InquiryMapper:
    """Maps between REST DTOs and domain models for inquiries."""

    @staticmethod
    def to_contact(dto: InquiryCreateDTO) -> CustomerContact:
        return CustomerContact(
            name=dto.customer_name,
            phone=dto.customer_phone,
            customer_id=dto.customer_id,
            call_preference=dto.call_preference,
            scheduled_call_time=dto.scheduled_call_time,
        )

    @staticmethod
    def to_response(inquiry: Inquiry) -> InquiryResponseDTO:
        # Inquiries reach the mapper already redacted for the caller
        return InquiryResponseDTO(
            id=inquiry.id,
            car_id=inquiry.car_id,
            car_summary=inquiry.car_summary,
            customer_name=inquiry.customer_name,
            customer_phone=inquiry.customer_phone,
            customer_id=inquiry.customer_id,
            status=inquiry.status,
            assigned_to=inquiry.assigned_to,
            remarks=inquiry.remarks,
            private_notes=inquiry.private_notes,
            is_serious_customer=inquiry.is_serious_customer,
            call_preference=inquiry.call_preference,
            scheduled_call_time=inquiry.scheduled_call_time,
            submitted_at=inquiry.submitted_at,
        )

    @staticmethod
    def to_page(
        inquiries: list[Inquiry], total_count: int, offset: int, limit: int
    ) -> InquiryPageResponseDTO:
        return InquiryPageResponseDTO(
            inquiries=[InquiryMapper.to_response(i) for i in inquiries],
            total=total_count,
            offset=offset,
            limit=limit,
        )
