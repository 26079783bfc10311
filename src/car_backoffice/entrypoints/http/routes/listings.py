from fastapi import APIRouter, Depends, Query, Response, status

from car_backoffice.entrypoints.http.dependencies import (
    get_actor_id,
    get_create_listing_use_case,
    get_delete_listing_use_case,
    get_get_listing_use_case,
    get_list_listings_use_case,
    get_search_listings_use_case,
    get_summarize_listing_use_case,
    get_transition_listing_use_case,
    get_update_listing_use_case,
)
from car_backoffice.entrypoints.http.dtos.listings import (
    BackOfficeListingsQueryDTO,
    ListingPageResponseDTO,
    ListingPayloadDTO,
    ListingResponseDTO,
    ListingSearchQueryDTO,
    ListingStatusChangeDTO,
    ListingSummaryResponseDTO,
)
from car_backoffice.entrypoints.http.error_responses import ErrorResponse
from car_backoffice.entrypoints.http.mappers.listing_mapper import ListingMapper
from car_backoffice.use_cases.create_listing import CreateListing, CreateListingRequest
from car_backoffice.use_cases.delete_listing import DeleteListing, DeleteListingRequest
from car_backoffice.use_cases.get_listing import GetListing, GetListingRequest
from car_backoffice.use_cases.list_listings import ListListings, ListListingsRequest
from car_backoffice.use_cases.search_listings import SearchListings
from car_backoffice.use_cases.summarize_listing import (
    SummarizeListing,
    SummarizeListingRequest,
)
from car_backoffice.use_cases.transition_listing import (
    TransitionListing,
    TransitionListingRequest,
)
from car_backoffice.use_cases.update_listing import UpdateListing, UpdateListingRequest


router = APIRouter(tags=["Listings"])

_WRITE_ERRORS = {
    401: {"model": ErrorResponse, "description": "Unknown or missing actor"},
    403: {"model": ErrorResponse, "description": "Role lacks the capability"},
    422: {"model": ErrorResponse, "description": "Field-keyed validation errors"},
}


@router.get(
    "/listings",
    response_model=ListingPageResponseDTO,
    summary="Search approved listings",
    description="""
    Public catalog search over approved listings.

    ## Filters
    - All filters use AND semantics
    - `brand` may be repeated; case-insensitive match against any of them
    - `model` only applies when exactly one brand is selected
    - Price and km ranges are inclusive; an omitted bound is unbounded
    - `color` and `q` are case-insensitive substring matches

    ## Example
    ```
    GET /v1/listings?brand=Tata&model=Nexon&price_max=900000&sort=price_asc
    ```
    """,
    responses={422: {"model": ErrorResponse, "description": "Invalid filters or paging"}},
)
def search_listings(
    query: ListingSearchQueryDTO = Depends(),
    brand: list[str] = Query(default=[], description="Repeat for several brands"),
    use_case: SearchListings = Depends(get_search_listings_use_case),
) -> ListingPageResponseDTO:
    """Search listings endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request
    request = ListingMapper.to_search_request(query, brand)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return ListingMapper.to_page(
        result.cars, result.total_count, offset=query.offset, limit=query.limit
    )


@router.post(
    "/listings",
    response_model=ListingResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Submit a listing for review",
    responses=_WRITE_ERRORS,
)
def create_listing(
    payload: ListingPayloadDTO,
    actor_id: str | None = Depends(get_actor_id),
    use_case: CreateListing = Depends(get_create_listing_use_case),
) -> ListingResponseDTO:
    result = use_case.execute(
        CreateListingRequest(actor_id=actor_id, draft=ListingMapper.to_draft(payload))
    )
    return ListingMapper.to_response(result.car)


@router.get(
    "/listings/{car_id}",
    response_model=ListingResponseDTO,
    summary="Get listing by ID",
    description="Approved listings are public; others are visible to reviewers and their submitter.",
    responses={404: {"model": ErrorResponse, "description": "Listing not found"}},
)
def get_listing(
    car_id: str,
    actor_id: str | None = Depends(get_actor_id),
    use_case: GetListing = Depends(get_get_listing_use_case),
) -> ListingResponseDTO:
    result = use_case.execute(GetListingRequest(car_id=car_id, actor_id=actor_id))
    return ListingMapper.to_response(result.car)


@router.put(
    "/listings/{car_id}",
    response_model=ListingResponseDTO,
    summary="Edit a listing",
    description="Any successful edit sends the listing back to pending review.",
    responses={**_WRITE_ERRORS, 404: {"model": ErrorResponse}},
)
def update_listing(
    car_id: str,
    payload: ListingPayloadDTO,
    actor_id: str | None = Depends(get_actor_id),
    use_case: UpdateListing = Depends(get_update_listing_use_case),
) -> ListingResponseDTO:
    result = use_case.execute(
        UpdateListingRequest(
            actor_id=actor_id, car_id=car_id, draft=ListingMapper.to_draft(payload)
        )
    )
    return ListingMapper.to_response(result.car)


@router.post(
    "/listings/{car_id}/status",
    response_model=ListingResponseDTO,
    summary="Approve or reject a pending listing",
    responses={
        **_WRITE_ERRORS,
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse, "description": "Listing is not pending"},
    },
)
def transition_listing(
    car_id: str,
    payload: ListingStatusChangeDTO,
    actor_id: str | None = Depends(get_actor_id),
    use_case: TransitionListing = Depends(get_transition_listing_use_case),
) -> ListingResponseDTO:
    result = use_case.execute(
        TransitionListingRequest(actor_id=actor_id, car_id=car_id, status=payload.status)
    )
    return ListingMapper.to_response(result.car)


@router.delete(
    "/listings/{car_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a listing and its inquiries",
    responses={
        **_WRITE_ERRORS,
        404: {"model": ErrorResponse},
        500: {
            "model": ErrorResponse,
            "description": "CASCADE_FAILED: inquiries could not be deleted, listing kept",
        },
    },
)
def delete_listing(
    car_id: str,
    actor_id: str | None = Depends(get_actor_id),
    use_case: DeleteListing = Depends(get_delete_listing_use_case),
) -> Response:
    use_case.execute(DeleteListingRequest(actor_id=actor_id, car_id=car_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/listings/{car_id}/summary",
    response_model=ListingSummaryResponseDTO,
    summary="Prose description of a listing",
    responses={404: {"model": ErrorResponse}},
)
def summarize_listing(
    car_id: str,
    actor_id: str | None = Depends(get_actor_id),
    use_case: SummarizeListing = Depends(get_summarize_listing_use_case),
) -> ListingSummaryResponseDTO:
    result = use_case.execute(SummarizeListingRequest(car_id=car_id, actor_id=actor_id))
    return ListingSummaryResponseDTO(car_id=result.car_id, summary=result.summary)


@router.get(
    "/back-office/listings",
    response_model=ListingPageResponseDTO,
    tags=["Back office"],
    summary="Listing board across every status",
    description="Reviewers see every listing; content editors see their own submissions.",
    responses={401: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
)
def list_listings(
    query: BackOfficeListingsQueryDTO = Depends(),
    actor_id: str | None = Depends(get_actor_id),
    use_case: ListListings = Depends(get_list_listings_use_case),
) -> ListingPageResponseDTO:
    result = use_case.execute(
        ListListingsRequest(
            actor_id=actor_id,
            paging=ListingMapper.to_paging(query),
            status=query.status,
            mine=query.mine,
        )
    )
    return ListingMapper.to_page(
        result.cars, result.total_count, offset=query.offset, limit=query.limit
    )
