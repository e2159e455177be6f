"""Application use cases: one entry point per workflow."""

from app.application.use_cases.people import PeopleDirectoryService, PeoplePage

__all__ = [
    "PeopleDirectoryService",
    "PeoplePage",
]
