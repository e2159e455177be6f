"""DTOs for the cross-organization people directory (no dependency on presentation schemas)."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from app.domain.enums import MemberSearchType

T = TypeVar("T")


@dataclass(frozen=True)
class PeopleSearchParameters:
    """Filter, sort and paging input for the people search (already normalized).

    type is None when no type filter applies, including when the client sent
    an unrecognized value.
    """

    phrase: str | None = None
    type: MemberSearchType | None = None
    organization: str | None = None
    page_size: int = 33
    sort: str | None = None
    page_number: int = 1


@dataclass(frozen=True)
class PageResult(Generic[T]):
    """Exactly one page of an ordered collection plus pagination metadata."""

    items: list[T]
    total: int
    page_number: int
    page_size: int
    has_more: bool

    @property
    def next_page(self) -> int | None:
        return self.page_number + 1 if self.has_more else None

    @property
    def last_page(self) -> int:
        """Number of pages for total at page_size (0 for an empty collection)."""
        return -(-self.total // self.page_size)


@dataclass(frozen=True)
class PersonRecord:
    """Serialization-ready person (read-model).

    login and avatar_url are None only when the member has no account; the
    API then emits just the id. organizations holds org names, never the
    per-organization account data.
    """

    id: int
    link: dict[str, Any] | None
    organizations: list[str] = field(default_factory=list)
    login: str | None = None
    avatar_url: str | None = None
    has_account: bool = False


@dataclass(frozen=True)
class SearchFilter:
    """Describes an applied filter for client display (e.g. 'formerly known members')."""

    type: str
    value: str
    display_value: str | None = None
    display_prefix: str | None = None
    display_suffix: str | None = None
