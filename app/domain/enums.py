"""Domain enumerations for the people directory.

Enums represent fixed sets of domain values (e.g. member search type).
"""

from enum import Enum


class MemberSearchType(str, Enum):
    """Type filter for the cross-organization member search.

    Values are the wire values accepted in the `type` query parameter.
    """

    LINKED = "linked"
    ACTIVE = "active"
    UNLINKED = "unlinked"
    FORMER = "former"
    SERVICE_ACCOUNT = "serviceAccount"
    UNKNOWN_ACCOUNT = "unknownAccount"
    OWNERS = "owners"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid type values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [member_type.value for member_type in cls]

    @classmethod
    def parse(cls, value: str | None) -> "MemberSearchType | None":
        """Return the matching type, or None for missing or unrecognized values.

        Unrecognized values mean "no type filter" rather than an error.
        """
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class OrganizationRole(str, Enum):
    """Role of an account within one organization."""

    ADMIN = "admin"
    MEMBER = "member"
