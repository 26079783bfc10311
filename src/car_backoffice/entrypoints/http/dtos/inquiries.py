from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from car_backoffice.domain.inquiry import CallPreference, InquiryStatus
from car_backoffice.domain.search import MAX_PAGE_SIZE


class InquiryCreateDTO(BaseModel):
    customer_name: str
    customer_phone: str
    customer_id: str | None = Field(default=None, description="Set for signed-in customers")
    call_preference: CallPreference = CallPreference.NOW
    scheduled_call_time: datetime | None = Field(
        default=None, description="Required when call_preference is 'schedule'"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "customer_name": "Asha",
                "customer_phone": "+91 98765 43210",
                "call_preference": "now",
            }
        }
    )


class InquiryResponseDTO(BaseModel):
    id: str
    car_id: str
    car_summary: str
    customer_name: str
    customer_phone: str
    customer_id: str | None
    status: InquiryStatus
    assigned_to: str | None
    remarks: str
    private_notes: str = Field(description="Empty unless the caller is the assignee")
    is_serious_customer: bool
    call_preference: CallPreference
    scheduled_call_time: datetime | None
    submitted_at: datetime


class InquiryAssigneeDTO(BaseModel):
    agent_id: str


class InquiryStatusChangeDTO(BaseModel):
    status: InquiryStatus
    remarks: str | None = Field(
        default=None, description="Closure report; required when closing"
    )
    private_notes: str | None = None
    is_serious_customer: bool | None = Field(
        default=None, description="Only accepted when closing"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "closed",
                "remarks": "Customer purchased elsewhere",
                "is_serious_customer": False,
            }
        }
    )


class InquiryNotesDTO(BaseModel):
    private_notes: str


class InquiriesQueryDTO(BaseModel):
    status: InquiryStatus | None = None
    car_id: str | None = None
    assigned_to: str | None = Field(
        default=None, description="Ignored for agents, who always see their own queue"
    )
    serious_only: bool = False
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=20, ge=1, le=MAX_PAGE_SIZE)


class InquiryPageResponseDTO(BaseModel):
    inquiries: list[InquiryResponseDTO]
    total: int
    offset: int
    limit: int
