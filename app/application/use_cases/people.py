"""Cross-organization people directory use case.

Memoizes the membership snapshot and the corporate links, runs the member
search, and slices/normalizes one page of people.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.application.dtos.people import (
    PageResult,
    PeopleSearchParameters,
    PersonRecord,
    SearchFilter,
)
from app.application.services.member_normalizer import normalize_member
from app.application.services.member_search import MemberSearch, describe_filters
from app.application.services.pagination import slice_page
from app.domain.exceptions import MemberNotFoundException
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import add_span_attributes

if TYPE_CHECKING:
    from app.application.interfaces.providers import ILinkProvider, IMembershipProvider
    from app.domain.entities.member import CorporateLink, MembershipSnapshot
    from app.infrastructure.cache.memory_cache import MemoizedValue

logger = get_logger(__name__)


@dataclass(frozen=True)
class PeoplePage:
    """One page of people plus the filters that produced it."""

    page: PageResult[PersonRecord]
    filters: list[SearchFilter]


class PeopleDirectoryService:
    """People across all configured organizations, filtered and paginated.

    members_cache and links_cache are process-wide memoized values shared by
    every request; provider failures propagate and are not cached.
    """

    def __init__(
        self,
        membership_provider: "IMembershipProvider",
        link_provider: "ILinkProvider",
        members_cache: "MemoizedValue[MembershipSnapshot]",
        links_cache: "MemoizedValue[tuple[CorporateLink, ...]]",
    ) -> None:
        self.membership_provider = membership_provider
        self.link_provider = link_provider
        self.members_cache = members_cache
        self.links_cache = links_cache

    async def get_people_across_organizations(self) -> "MembershipSnapshot":
        """Return the memoized membership snapshot (fetched on a miss)."""
        return await self.members_cache.get_or_fetch(self.membership_provider.get_members)

    async def get_links(self) -> "tuple[CorporateLink, ...]":
        """Return the memoized corporate links (fetched on a miss)."""
        return await self.links_cache.get_or_fetch(self.link_provider.get_links)

    async def refresh(self) -> None:
        """Refetch members and links now, replacing the memoized values."""
        await self.members_cache.refresh(self.membership_provider.get_members)
        await self.links_cache.refresh(self.link_provider.get_links)
        logger.info("People directory caches refreshed")

    async def _build_search(self) -> MemberSearch:
        links = await self.get_links()
        members = await self.get_people_across_organizations()
        return MemberSearch(members, links)

    async def list_people(self, params: PeopleSearchParameters) -> PeoplePage:
        """Search people and return the requested page as person records."""
        search = await self._build_search()
        members = search.search(params)
        page = slice_page(members, params.page_number, params.page_size)
        add_span_attributes(
            **{"people.total": page.total, "people.page_number": page.page_number}
        )
        records = PageResult(
            items=[normalize_member(m) for m in page.items],
            total=page.total,
            page_number=page.page_number,
            page_size=page.page_size,
            has_more=page.has_more,
        )
        return PeoplePage(page=records, filters=describe_filters(params))

    async def get_person(self, login: str) -> PersonRecord:
        """Return one person by login (case-insensitive).

        Raises:
            MemberNotFoundException: If no member has this login.
        """
        search = await self._build_search()
        member = search.find_by_login(login)
        if member is None:
            raise MemberNotFoundException(login)
        return normalize_member(member)
