"""Cross-organization people API: list/search people, get one person.

Unknown sub-routes and methods under /people answer with a 404 JSON error.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import get_people_service
from app.application.dtos.people import PeopleSearchParameters
from app.application.use_cases.people import PeopleDirectoryService
from app.core.config import get_settings
from app.core.constants import PEOPLE_ROUTE_NOT_FOUND_MESSAGE
from app.core.limiter import limit_people
from app.domain.enums import MemberSearchType
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.people import (
    PeoplePageResponse,
    PersonResponse,
    SearchFilterResponse,
)
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.get("", response_model=PeoplePageResponse, response_model_exclude_unset=True)
@router.get(
    "/",
    response_model=PeoplePageResponse,
    response_model_exclude_unset=True,
    include_in_schema=False,
)
@limit_people
async def list_people(
    request: Request,
    people_svc: Annotated[PeopleDirectoryService, Depends(get_people_service)],
    page_number: int = Query(1, description="1-indexed page; values below 1 mean page 1"),
    page_size: int | None = Query(None, ge=1, description="Defaults to PEOPLE_DEFAULT_PAGE_SIZE"),
    q: str | None = Query(None, max_length=500, description="Free-text phrase"),
    type_: str | None = Query(
        None,
        alias="type",
        description=f"One of {', '.join(MemberSearchType.values())}; anything else is ignored"
    ),
    sort: str | None = Query(None, description="Alphabet | ReverseAlphabet | Organizations"),
    org: str | None = Query(None, max_length=100, description="Limit to one organization"),
):
    """People across all organizations, filtered, sorted and paginated."""
    settings = get_settings()
    member_type = MemberSearchType.parse(type_)
    if type_ and member_type is None:
        logger.debug("Ignoring unrecognized people type filter: %r", type_)
    params = PeopleSearchParameters(
        phrase=q or None,
        type=member_type,
        organization=org or None,
        page_size=min(page_size or settings.people_default_page_size, settings.people_max_page_size),
        sort=sort,
        page_number=page_number,
    )
    result = await people_svc.list_people(params)
    page = result.page
    return PeoplePageResponse(
        values=[PersonResponse.from_record(r) for r in page.items],
        total=page.total,
        page_number=page.page_number,
        page_size=page.page_size,
        last_page=page.last_page,
        has_more=page.has_more,
        next_page=page.next_page,
        filters=[SearchFilterResponse.from_filter(f) for f in result.filters],
    )


@router.get("/{login}", response_model=PersonResponse, response_model_exclude_unset=True)
@router.get(
    "/{login}/",
    response_model=PersonResponse,
    response_model_exclude_unset=True,
    include_in_schema=False,
)
@limit_people
async def get_person(
    request: Request,
    login: str,
    people_svc: Annotated[PeopleDirectoryService, Depends(get_people_service)],
):
    """One person by login (case-insensitive)."""
    record = await people_svc.get_person(login)
    return PersonResponse.from_record(record)


@router.api_route(
    "",
    methods=["POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
@router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
async def people_route_not_found(request: Request):
    """Catch-all for unmatched routes and methods: terminal 404 JSON error."""
    path = request.path_params.get("path", "")
    raise ResourceNotFoundException(PEOPLE_ROUTE_NOT_FOUND_MESSAGE, {"path": path})
