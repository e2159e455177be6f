"""Health check endpoints. Used for liveness and readiness probes."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.dependencies import get_people_service
from app.application.use_cases.people import PeopleDirectoryService
from app.core.config import get_settings
from app.schemas.health import HealthResponse, ReadinessResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse(version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
def readiness_check(
    people_svc: Annotated[PeopleDirectoryService, Depends(get_people_service)],
) -> ReadinessResponse:
    """Return ok once the people directory is wired; reports whether a snapshot is memoized.

    Does not fetch: a cold cache is still ready (the first search populates it).
    """
    return ReadinessResponse(membership_cached=people_svc.members_cache.get() is not None)
