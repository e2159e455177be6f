"""People directory API schemas."""

from typing import Any

from pydantic import BaseModel, Field

from app.application.dtos.people import PersonRecord, SearchFilter


class PersonResponse(BaseModel):
    """One cross-organization person.

    login and avatar_url are left unset (and omitted from JSON with
    response_model_exclude_unset) when the member has no account.
    """

    id: int
    login: str | None = None
    avatar_url: str | None = None
    link: dict[str, Any] | None = Field(..., description="Corporate link, or null when unlinked")
    organizations: list[str] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: PersonRecord) -> "PersonResponse":
        """Build from a PersonRecord, setting identity fields only when the member has an account."""
        fields: dict[str, Any] = {
            "id": record.id,
            "link": record.link,
            "organizations": list(record.organizations),
        }
        if record.has_account:
            fields["login"] = record.login
            fields["avatar_url"] = record.avatar_url
        return cls(**fields)


class SearchFilterResponse(BaseModel):
    """Applied filter descriptor for client display."""

    type: str
    value: str
    display_value: str | None = None
    display_prefix: str | None = None
    display_suffix: str | None = None

    @classmethod
    def from_filter(cls, search_filter: SearchFilter) -> "SearchFilterResponse":
        return cls(
            type=search_filter.type,
            value=search_filter.value,
            display_value=search_filter.display_value,
            display_prefix=search_filter.display_prefix,
            display_suffix=search_filter.display_suffix,
        )


class PeoplePageResponse(BaseModel):
    """Page envelope: one page of people plus pagination metadata."""

    values: list[PersonResponse]
    total: int = Field(..., description="Number of people matching the search")
    page_number: int
    page_size: int
    last_page: int
    has_more: bool
    next_page: int | None
    filters: list[SearchFilterResponse]
