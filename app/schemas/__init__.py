"""Pydantic request/response schemas for the API."""

from app.schemas.health import HealthResponse, ReadinessResponse
from app.schemas.people import (
    PeoplePageResponse,
    PersonResponse,
    SearchFilterResponse,
)

__all__ = [
    "HealthResponse",
    "PeoplePageResponse",
    "PersonResponse",
    "ReadinessResponse",
    "SearchFilterResponse",
]
