"""Domain layer: entities, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import (
    CorporateLink,
    CrossOrganizationMember,
    MemberAccount,
    MembershipSnapshot,
    OrganizationMembership,
)
from app.domain.enums import MemberSearchType, OrganizationRole
from app.domain.exceptions import (
    DirectoryException,
    MemberNotFoundException,
    ProviderException,
    ResourceNotFoundException,
)

__all__ = [
    # Entities
    "CorporateLink",
    "CrossOrganizationMember",
    "MemberAccount",
    "MembershipSnapshot",
    "OrganizationMembership",
    # Enums
    "MemberSearchType",
    "OrganizationRole",
    # Exceptions
    "DirectoryException",
    "MemberNotFoundException",
    "ProviderException",
    "ResourceNotFoundException",
]
