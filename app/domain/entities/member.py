"""Cross-organization member entities.

A member is one person (GitHub account) seen across one or more
organizations, optionally linked to a corporate identity. Entities are
frozen so a cached membership snapshot cannot be mutated by readers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from app.domain.enums import OrganizationRole


@dataclass(frozen=True)
class MemberAccount:
    """Account identity as reported by the membership provider."""

    id: int
    login: str
    avatar_url: str | None = None


@dataclass(frozen=True)
class OrganizationMembership:
    """One organization's view of an account (account + role in that org).

    account is None when the organization reports only the numeric id.
    """

    account: MemberAccount | None = None
    role: OrganizationRole = OrganizationRole.MEMBER

    @property
    def is_owner(self) -> bool:
        return self.role == OrganizationRole.ADMIN


@dataclass(frozen=True)
class CorporateLink:
    """Association between a GitHub account and a corporate identity.

    corporate_id is empty when the corporate identity could not be
    resolved; is_former marks identities that have left the directory.
    """

    github_id: int
    github_login: str
    corporate_id: str | None = None
    corporate_username: str | None = None
    corporate_display_name: str | None = None
    corporate_mail: str | None = None
    corporate_alias: str | None = None
    is_service_account: bool = False
    service_account_mail: str | None = None
    is_former: bool = False


@dataclass(frozen=True)
class CrossOrganizationMember:
    """One person across organizations.

    account is None when the provider only knows the numeric id; orgs maps
    organization name to that organization's view of the account. orgs is
    wrapped in a read-only mapping on construction (insertion order kept).
    """

    id: int
    account: MemberAccount | None = None
    link: CorporateLink | None = None
    orgs: Mapping[str, OrganizationMembership] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.orgs, MappingProxyType):
            object.__setattr__(self, "orgs", MappingProxyType(dict(self.orgs)))

    @property
    def login(self) -> str | None:
        return self.account.login if self.account else None

    @property
    def organization_names(self) -> list[str]:
        """Organization names (mapping keys) in insertion order."""
        return list(self.orgs.keys())

    def is_owner_in(self, organization: str | None = None) -> bool:
        """Return True if the account is an owner of organization (or of any org when None)."""
        if organization is None:
            return any(m.is_owner for m in self.orgs.values())
        wanted = organization.lower()
        return any(
            m.is_owner for name, m in self.orgs.items() if name.lower() == wanted
        )

    def belongs_to(self, organization: str) -> bool:
        """Return True if the member belongs to organization (case-insensitive)."""
        wanted = organization.lower()
        return any(name.lower() == wanted for name in self.orgs)


MembershipSnapshot = tuple[CrossOrganizationMember, ...]
"""Immutable collection of cross-organization members produced by a provider."""
