from fastapi import APIRouter, Depends, Response, status

from car_backoffice.domain.search import Paging
from car_backoffice.entrypoints.http.dependencies import (
    get_actor_id,
    get_assign_inquiry_use_case,
    get_create_inquiry_use_case,
    get_delete_inquiry_use_case,
    get_get_inquiry_use_case,
    get_list_inquiries_use_case,
    get_update_inquiry_notes_use_case,
    get_update_inquiry_status_use_case,
)
from car_backoffice.entrypoints.http.dtos.inquiries import (
    InquiriesQueryDTO,
    InquiryAssigneeDTO,
    InquiryCreateDTO,
    InquiryNotesDTO,
    InquiryPageResponseDTO,
    InquiryResponseDTO,
    InquiryStatusChangeDTO,
)
from car_backoffice.entrypoints.http.error_responses import ErrorResponse
from car_backoffice.entrypoints.http.mappers.inquiry_mapper import InquiryMapper
from car_backoffice.use_cases.assign_inquiry import AssignInquiry, AssignInquiryRequest
from car_backoffice.use_cases.create_inquiry import CreateInquiry, CreateInquiryRequest
from car_backoffice.use_cases.delete_inquiry import DeleteInquiry, DeleteInquiryRequest
from car_backoffice.use_cases.get_inquiry import GetInquiry, GetInquiryRequest
from car_backoffice.use_cases.list_inquiries import ListInquiries, ListInquiriesRequest
from car_backoffice.use_cases.update_inquiry_notes import (
    UpdateInquiryNotes,
    UpdateInquiryNotesRequest,
)
from car_backoffice.use_cases.update_inquiry_status import (
    UpdateInquiryStatus,
    UpdateInquiryStatusRequest,
)


router = APIRouter(tags=["Inquiries"])

_ACTOR_ERRORS = {
    401: {"model": ErrorResponse, "description": "Unknown or missing actor"},
    403: {"model": ErrorResponse, "description": "Role lacks the capability"},
    404: {"model": ErrorResponse, "description": "Inquiry not found"},
}


@router.post(
    "/listings/{car_id}/inquiries",
    response_model=InquiryResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a purchase inquiry for a car",
    description="Open to anonymous customers; no X-Actor-Id is needed.",
    responses={
        404: {"model": ErrorResponse, "description": "Car not found"},
        422: {"model": ErrorResponse, "description": "Missing contact details"},
    },
)
def create_inquiry(
    car_id: str,
    payload: InquiryCreateDTO,
    use_case: CreateInquiry = Depends(get_create_inquiry_use_case),
) -> InquiryResponseDTO:
    result = use_case.execute(
        CreateInquiryRequest(car_id=car_id, contact=InquiryMapper.to_contact(payload))
    )
    # The customer is never the assignee
    return InquiryMapper.to_response(result.inquiry.visible_to(None))


@router.get(
    "/inquiries",
    response_model=InquiryPageResponseDTO,
    summary="Inquiry board",
    description="""
    - Managers and admins see every inquiry and may filter by assignee
    - Sales agents see only the inquiries assigned to them
    - `serious_only=true` gives the serious-customers board
    """,
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
def list_inquiries(
    query: InquiriesQueryDTO = Depends(),
    actor_id: str | None = Depends(get_actor_id),
    use_case: ListInquiries = Depends(get_list_inquiries_use_case),
) -> InquiryPageResponseDTO:
    result = use_case.execute(
        ListInquiriesRequest(
            actor_id=actor_id,
            paging=Paging(offset=query.offset, limit=query.limit),
            status=query.status,
            car_id=query.car_id,
            assigned_to=query.assigned_to,
            serious_only=query.serious_only,
        )
    )
    return InquiryMapper.to_page(
        result.inquiries, result.total_count, offset=query.offset, limit=query.limit
    )


@router.get(
    "/inquiries/{inquiry_id}",
    response_model=InquiryResponseDTO,
    summary="Get inquiry by ID",
    responses=_ACTOR_ERRORS,
)
def get_inquiry(
    inquiry_id: str,
    actor_id: str | None = Depends(get_actor_id),
    use_case: GetInquiry = Depends(get_get_inquiry_use_case),
) -> InquiryResponseDTO:
    result = use_case.execute(GetInquiryRequest(actor_id=actor_id, inquiry_id=inquiry_id))
    return InquiryMapper.to_response(result.inquiry)


@router.put(
    "/inquiries/{inquiry_id}/assignee",
    response_model=InquiryResponseDTO,
    summary="Assign an inquiry to a sales agent",
    responses={
        **_ACTOR_ERRORS,
        409: {"model": ErrorResponse, "description": "Inquiry is closed"},
        422: {"model": ErrorResponse, "description": "Unknown agent"},
    },
)
def assign_inquiry(
    inquiry_id: str,
    payload: InquiryAssigneeDTO,
    actor_id: str | None = Depends(get_actor_id),
    use_case: AssignInquiry = Depends(get_assign_inquiry_use_case),
) -> InquiryResponseDTO:
    result = use_case.execute(
        AssignInquiryRequest(actor_id=actor_id, inquiry_id=inquiry_id, agent_id=payload.agent_id)
    )
    return InquiryMapper.to_response(result.inquiry)


@router.post(
    "/inquiries/{inquiry_id}/status",
    response_model=InquiryResponseDTO,
    summary="Change inquiry status",
    description="Closing requires `remarks` (the closure report).",
    responses={
        **_ACTOR_ERRORS,
        409: {"model": ErrorResponse, "description": "Inquiry is closed"},
        422: {"model": ErrorResponse, "description": "Missing closure report"},
    },
)
def update_inquiry_status(
    inquiry_id: str,
    payload: InquiryStatusChangeDTO,
    actor_id: str | None = Depends(get_actor_id),
    use_case: UpdateInquiryStatus = Depends(get_update_inquiry_status_use_case),
) -> InquiryResponseDTO:
    result = use_case.execute(
        UpdateInquiryStatusRequest(
            actor_id=actor_id,
            inquiry_id=inquiry_id,
            status=payload.status,
            remarks=payload.remarks,
            private_notes=payload.private_notes,
            is_serious_customer=payload.is_serious_customer,
        )
    )
    return InquiryMapper.to_response(result.inquiry)


@router.put(
    "/inquiries/{inquiry_id}/notes",
    response_model=InquiryResponseDTO,
    summary="Replace the assignee's private notes",
    responses=_ACTOR_ERRORS,
)
def update_inquiry_notes(
    inquiry_id: str,
    payload: InquiryNotesDTO,
    actor_id: str | None = Depends(get_actor_id),
    use_case: UpdateInquiryNotes = Depends(get_update_inquiry_notes_use_case),
) -> InquiryResponseDTO:
    result = use_case.execute(
        UpdateInquiryNotesRequest(
            actor_id=actor_id, inquiry_id=inquiry_id, private_notes=payload.private_notes
        )
    )
    return InquiryMapper.to_response(result.inquiry)


@router.delete(
    "/inquiries/{inquiry_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an inquiry",
    responses=_ACTOR_ERRORS,
)
def delete_inquiry(
    inquiry_id: str,
    actor_id: str | None = Depends(get_actor_id),
    use_case: DeleteInquiry = Depends(get_delete_inquiry_use_case),
) -> Response:
    use_case.execute(DeleteInquiryRequest(actor_id=actor_id, inquiry_id=inquiry_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
