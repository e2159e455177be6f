"""Provider interfaces (ports) for the people directory.

Protocols define what the application needs from the membership and
corporate-link sources (DIP). Implementations live in
app.infrastructure.external.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.entities.member import CorporateLink, MembershipSnapshot


class IMembershipProvider(Protocol):
    """Enumerates members across all configured organizations.

    Expected to be expensive (one or more API round trips per organization).
    """

    async def get_members(self) -> MembershipSnapshot:
        """Return the full current cross-organization membership snapshot.

        Raises ProviderException when the source cannot be read.
        """
        ...


class ILinkProvider(Protocol):
    """Resolves GitHub accounts to corporate identities."""

    async def get_links(self) -> tuple[CorporateLink, ...]:
        """Return every known corporate link.

        Raises ProviderException when the source cannot be read.
        """
        ...
