"""Resident list and detail routes."""

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from seniwise.dependencies import ResidentsContext, get_residents_context
from seniwise.schemas.common import ApiResponse
from seniwise.schemas.listing import ListResult
from seniwise.schemas.resident import LocalizedResident, VisitFormData
from seniwise.services.list_transform import ListQuery
from seniwise.services.residents import get_resident_detail, get_visit_form, list_residents

router = APIRouter(prefix="/api/residents")

_NOT_FOUND_KEY = "residents.not_found"


def _not_found(ctx: ResidentsContext) -> HTTPException:
    return HTTPException(status_code=404, detail=ctx.resolver.resolve_or(_NOT_FOUND_KEY, "Resident not found."))


@router.get("", response_model=ApiResponse[ListResult])
def get_residents(
    q: str | None = Query(default=None),
    p: str | None = Query(default=None),
    sort_by: str | None = Query(default=None),
    sort_order: str | None = Query(default=None),
    ctx: ResidentsContext = Depends(get_residents_context),
) -> ApiResponse[ListResult]:
    """Return one filtered, sorted page of residents."""

    query = ListQuery.from_params(q=q, p=p, sort_by=sort_by, sort_order=sort_order)
    result = list_residents(
        ctx.records,
        query,
        resolver=ctx.resolver,
        staff=ctx.staff,
        page_size=ctx.settings.residents_page_size,
    )
    return ApiResponse(result=result)


@router.get("/{uuid}", response_model=ApiResponse[LocalizedResident])
def get_resident(
    uuid: str = Path(..., min_length=1),
    ctx: ResidentsContext = Depends(get_residents_context),
) -> ApiResponse[LocalizedResident]:
    """Return the localized resident payload for the detail view."""

    resident = get_resident_detail(
        ctx.records,
        uuid,
        registry=ctx.registry,
        resolver=ctx.resolver,
        staff=ctx.staff,
    )
    if resident is None:
        raise _not_found(ctx)
    return ApiResponse(result=resident)


@router.get("/{uuid}/add-visit", response_model=ApiResponse[VisitFormData])
def get_resident_visit_form(
    uuid: str = Path(..., min_length=1),
    ctx: ResidentsContext = Depends(get_residents_context),
) -> ApiResponse[VisitFormData]:
    """Return the resident header and visit categories for recording a visit."""

    form = get_visit_form(
        ctx.records,
        uuid,
        registry=ctx.registry,
        resolver=ctx.resolver,
        staff=ctx.staff,
    )
    if form is None:
        raise _not_found(ctx)
    return ApiResponse(result=form)
