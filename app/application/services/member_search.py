"""Member search over a cross-organization membership snapshot.

Joins corporate links onto members, applies type, phrase and organization
filters, and sorts deterministically so repeated searches over the same
snapshot page consistently.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable

from app.application.dtos.people import PeopleSearchParameters, SearchFilter
from app.core.constants import (
    DEFAULT_SORT,
    SORT_ALPHABET,
    SORT_ORGANIZATIONS,
    SORT_REVERSE_ALPHABET,
)
from app.domain.entities.member import CorporateLink, CrossOrganizationMember
from app.domain.enums import MemberSearchType
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

SortKey = Callable[[CrossOrganizationMember], tuple]


def _login_key(member: CrossOrganizationMember) -> str:
    return (member.login or "").lower()


_SORTS: dict[str, tuple[SortKey, bool]] = {
    SORT_ALPHABET: (lambda m: (_login_key(m), m.id), False),
    SORT_REVERSE_ALPHABET: (lambda m: (_login_key(m), m.id), True),
    SORT_ORGANIZATIONS: (lambda m: (-len(m.orgs), _login_key(m), m.id), False),
}


def _matches_type(
    member: CrossOrganizationMember,
    member_type: MemberSearchType,
    organization: str | None,
) -> bool:
    link = member.link
    if member_type == MemberSearchType.LINKED:
        return link is not None
    if member_type == MemberSearchType.UNLINKED:
        return link is None
    if member_type == MemberSearchType.ACTIVE:
        return link is not None and not link.is_former and not link.is_service_account
    if member_type == MemberSearchType.FORMER:
        return link is not None and link.is_former
    if member_type == MemberSearchType.SERVICE_ACCOUNT:
        return link is not None and link.is_service_account
    if member_type == MemberSearchType.UNKNOWN_ACCOUNT:
        return link is not None and not link.corporate_id
    if member_type == MemberSearchType.OWNERS:
        return member.is_owner_in(organization)
    return True


def _matches_phrase(member: CrossOrganizationMember, phrase: str) -> bool:
    needle = phrase.lower()
    haystack = [member.login]
    if member.link:
        haystack.extend(
            [
                member.link.corporate_username,
                member.link.corporate_display_name,
                member.link.corporate_alias,
                member.link.corporate_mail,
            ]
        )
    return any(value and needle in value.lower() for value in haystack)


def describe_filters(params: PeopleSearchParameters) -> list[SearchFilter]:
    """Return display descriptors for the filters params applies."""
    filters: list[SearchFilter] = []
    if params.type is not None:
        value = params.type.value
        filters.append(
            SearchFilter(
                type="type",
                value=value,
                display_value="formerly known" if params.type == MemberSearchType.FORMER else value,
                display_suffix="members",
            )
        )
    if params.phrase:
        filters.append(
            SearchFilter(type="phrase", value=params.phrase, display_prefix="matching")
        )
    if params.organization:
        filters.append(
            SearchFilter(type="organization", value=params.organization, display_prefix="in")
        )
    return filters


class MemberSearch:
    """Filters and sorts one membership snapshot with its corporate links.

    The snapshot is never modified; members with a link are copies.
    """

    def __init__(
        self,
        members: Iterable[CrossOrganizationMember],
        links: Iterable[CorporateLink] = (),
    ) -> None:
        self._links_by_id = {link.github_id: link for link in links}
        self._members = [self._with_link(m) for m in members]

    def _with_link(self, member: CrossOrganizationMember) -> CrossOrganizationMember:
        link = self._links_by_id.get(member.id)
        if link is None or member.link == link:
            return member
        return dataclasses.replace(member, link=link)

    def search(self, params: PeopleSearchParameters) -> list[CrossOrganizationMember]:
        """Return members matching params, sorted by params.sort.

        Unknown sort keys fall back to alphabetical by login; ties are broken
        by id.
        """
        results = self._members
        if params.organization:
            results = [m for m in results if m.belongs_to(params.organization)]
        if params.type is not None:
            results = [
                m for m in results if _matches_type(m, params.type, params.organization)
            ]
        if params.phrase:
            results = [m for m in results if _matches_phrase(m, params.phrase)]
        sort_name = params.sort if params.sort in _SORTS else DEFAULT_SORT
        key, reverse = _SORTS[sort_name]
        ordered = sorted(results, key=key, reverse=reverse)
        logger.debug(
            "Member search: %s of %s members (type=%s, sort=%s)",
            len(ordered),
            len(self._members),
            params.type.value if params.type else None,
            sort_name,
        )
        return ordered

    def find_by_login(self, login: str) -> CrossOrganizationMember | None:
        """Return the member with login (case-insensitive), or None."""
        wanted = login.lower()
        for member in self._members:
            if member.login and member.login.lower() == wanted:
                return member
        return None
