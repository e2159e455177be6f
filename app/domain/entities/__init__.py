"""Domain entities.

Pure domain models; no persistence or transport concerns.
"""

from app.domain.entities.member import (
    CorporateLink,
    CrossOrganizationMember,
    MemberAccount,
    MembershipSnapshot,
    OrganizationMembership,
)

__all__ = [
    "CorporateLink",
    "CrossOrganizationMember",
    "MemberAccount",
    "MembershipSnapshot",
    "OrganizationMembership",
]
