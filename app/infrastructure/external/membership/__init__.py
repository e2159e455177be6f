"""Membership providers: GitHub REST API and JSON file."""

from app.infrastructure.external.membership.file_provider import FileMembershipProvider
from app.infrastructure.external.membership.github_provider import (
    GitHubMembershipProvider,
)

__all__ = [
    "FileMembershipProvider",
    "GitHubMembershipProvider",
]
