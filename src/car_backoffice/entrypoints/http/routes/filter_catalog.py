from fastapi import APIRouter, Depends, Query

from car_backoffice.entrypoints.http.dependencies import (
    get_actor_id,
    get_edit_filter_catalog_use_case,
    get_get_filter_catalog_use_case,
    get_update_filter_catalog_use_case,
)
from car_backoffice.entrypoints.http.dtos.filter_catalog import (
    CatalogEntryDTO,
    CatalogRenameDTO,
    CatalogYearDTO,
    FilterCatalogResponseDTO,
    FilterCatalogUpdateDTO,
)
from car_backoffice.entrypoints.http.error_responses import ErrorResponse
from car_backoffice.entrypoints.http.mappers.filter_catalog_mapper import FilterCatalogMapper
from car_backoffice.use_cases.edit_filter_catalog import (
    CatalogEdit,
    EditFilterCatalog,
    EditFilterCatalogRequest,
)
from car_backoffice.use_cases.get_filter_catalog import GetFilterCatalog
from car_backoffice.use_cases.update_filter_catalog import UpdateFilterCatalog


router = APIRouter(prefix="/filter-catalog", tags=["Filter catalog"])

_EDIT_ERRORS = {
    401: {"model": ErrorResponse, "description": "Unknown or missing actor"},
    403: {"model": ErrorResponse, "description": "Only admins edit the catalog"},
    404: {"model": ErrorResponse, "description": "Brand, model or year not found"},
    409: {"model": ErrorResponse, "description": "Stale version or name collision"},
}


def _edit(
    use_case: EditFilterCatalog,
    actor_id: str | None,
    edit: CatalogEdit,
    description: str,
    expected_version: int | None,
) -> FilterCatalogResponseDTO:
    result = use_case.execute(
        EditFilterCatalogRequest(
            actor_id=actor_id,
            edit=edit,
            description=description,
            expected_version=expected_version,
        )
    )
    return FilterCatalogMapper.to_response(result.catalog)


@router.get(
    "",
    response_model=FilterCatalogResponseDTO,
    summary="Brands, models per brand and years",
)
def get_filter_catalog(
    use_case: GetFilterCatalog = Depends(get_get_filter_catalog_use_case),
) -> FilterCatalogResponseDTO:
    return FilterCatalogMapper.to_response(use_case.execute().catalog)


@router.put(
    "",
    response_model=FilterCatalogResponseDTO,
    summary="Replace the whole catalog",
    description="Send back the `version` you read as `expected_version`; 409 if it moved on.",
    responses={**_EDIT_ERRORS, 422: {"model": ErrorResponse}},
)
def update_filter_catalog(
    payload: FilterCatalogUpdateDTO,
    actor_id: str | None = Depends(get_actor_id),
    use_case: UpdateFilterCatalog = Depends(get_update_filter_catalog_use_case),
) -> FilterCatalogResponseDTO:
    result = use_case.execute(FilterCatalogMapper.to_update_request(payload, actor_id))
    return FilterCatalogMapper.to_response(result.catalog)


# ==============================================================================
# Brands
# ==============================================================================


@router.post("/brands", response_model=FilterCatalogResponseDTO, responses=_EDIT_ERRORS)
def add_brand(
    payload: CatalogEntryDTO,
    actor_id: str | None = Depends(get_actor_id),
    use_case: EditFilterCatalog = Depends(get_edit_filter_catalog_use_case),
) -> FilterCatalogResponseDTO:
    return _edit(
        use_case,
        actor_id,
        lambda catalog: catalog.add_brand(payload.name),
        f"add_brand:{payload.name}",
        payload.expected_version,
    )


@router.patch("/brands/{brand}", response_model=FilterCatalogResponseDTO, responses=_EDIT_ERRORS)
def rename_brand(
    brand: str,
    payload: CatalogRenameDTO,
    actor_id: str | None = Depends(get_actor_id),
    use_case: EditFilterCatalog = Depends(get_edit_filter_catalog_use_case),
) -> FilterCatalogResponseDTO:
    return _edit(
        use_case,
        actor_id,
        lambda catalog: catalog.rename_brand(brand, payload.new_name),
        f"rename_brand:{brand}->{payload.new_name}",
        payload.expected_version,
    )


@router.delete("/brands/{brand}", response_model=FilterCatalogResponseDTO, responses=_EDIT_ERRORS)
def remove_brand(
    brand: str,
    expected_version: int | None = Query(default=None),
    actor_id: str | None = Depends(get_actor_id),
    use_case: EditFilterCatalog = Depends(get_edit_filter_catalog_use_case),
) -> FilterCatalogResponseDTO:
    return _edit(
        use_case,
        actor_id,
        lambda catalog: catalog.remove_brand(brand),
        f"remove_brand:{brand}",
        expected_version,
    )


# ==============================================================================
# Models
# ==============================================================================


@router.post(
    "/brands/{brand}/models", response_model=FilterCatalogResponseDTO, responses=_EDIT_ERRORS
)
def add_model(
    brand: str,
    payload: CatalogEntryDTO,
    actor_id: str | None = Depends(get_actor_id),
    use_case: EditFilterCatalog = Depends(get_edit_filter_catalog_use_case),
) -> FilterCatalogResponseDTO:
    return _edit(
        use_case,
        actor_id,
        lambda catalog: catalog.add_model(brand, payload.name),
        f"add_model:{brand}/{payload.name}",
        payload.expected_version,
    )


@router.patch(
    "/brands/{brand}/models/{model}",
    response_model=FilterCatalogResponseDTO,
    responses=_EDIT_ERRORS,
)
def rename_model(
    brand: str,
    model: str,
    payload: CatalogRenameDTO,
    actor_id: str | None = Depends(get_actor_id),
    use_case: EditFilterCatalog = Depends(get_edit_filter_catalog_use_case),
) -> FilterCatalogResponseDTO:
    return _edit(
        use_case,
        actor_id,
        lambda catalog: catalog.rename_model(brand, model, payload.new_name),
        f"rename_model:{brand}/{model}->{payload.new_name}",
        payload.expected_version,
    )


@router.delete(
    "/brands/{brand}/models/{model}",
    response_model=FilterCatalogResponseDTO,
    responses=_EDIT_ERRORS,
)
def remove_model(
    brand: str,
    model: str,
    expected_version: int | None = Query(default=None),
    actor_id: str | None = Depends(get_actor_id),
    use_case: EditFilterCatalog = Depends(get_edit_filter_catalog_use_case),
) -> FilterCatalogResponseDTO:
    return _edit(
        use_case,
        actor_id,
        lambda catalog: catalog.remove_model(brand, model),
        f"remove_model:{brand}/{model}",
        expected_version,
    )


# ==============================================================================
# Years
# ==============================================================================


@router.post("/years", response_model=FilterCatalogResponseDTO, responses=_EDIT_ERRORS)
def add_year(
    payload: CatalogYearDTO,
    actor_id: str | None = Depends(get_actor_id),
    use_case: EditFilterCatalog = Depends(get_edit_filter_catalog_use_case),
) -> FilterCatalogResponseDTO:
    return _edit(
        use_case,
        actor_id,
        lambda catalog: catalog.add_year(payload.year),
        f"add_year:{payload.year}",
        payload.expected_version,
    )


@router.delete("/years/{year}", response_model=FilterCatalogResponseDTO, responses=_EDIT_ERRORS)
def remove_year(
    year: int,
    expected_version: int | None = Query(default=None),
    actor_id: str | None = Depends(get_actor_id),
    use_case: EditFilterCatalog = Depends(get_edit_filter_catalog_use_case),
) -> FilterCatalogResponseDTO:
    return _edit(
        use_case,
        actor_id,
        lambda catalog: catalog.remove_year(year),
        f"remove_year:{year}",
        expected_version,
    )
