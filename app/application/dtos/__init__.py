"""Application DTOs (no presentation dependency)."""

from app.application.dtos.people import (
    PageResult,
    PeopleSearchParameters,
    PersonRecord,
    SearchFilter,
)

__all__ = [
    "PageResult",
    "PeopleSearchParameters",
    "PersonRecord",
    "SearchFilter",
]
