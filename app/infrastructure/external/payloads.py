"""Wire payloads for membership and link sources.

Pydantic models validate JSON from files or HTTP and convert it into domain
entities. Parse failures surface as ProviderException.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.domain.entities.member import (
    CorporateLink,
    CrossOrganizationMember,
    MemberAccount,
    MembershipSnapshot,
    OrganizationMembership,
)
from app.domain.enums import OrganizationRole
from app.domain.exceptions import ProviderException


class OrganizationViewPayload(BaseModel):
    """One organization's view of a member; login/avatar default to the member's.

    An explicit "avatar_url": null is kept as no avatar.
    """

    model_config = ConfigDict(extra="ignore")

    role: OrganizationRole = OrganizationRole.MEMBER
    login: str | None = None
    avatar_url: str | None = None


class MemberPayload(BaseModel):
    """Member entry of a membership snapshot document."""

    model_config = ConfigDict(extra="ignore")

    id: int
    login: str | None = None
    avatar_url: str | None = None
    orgs: dict[str, OrganizationViewPayload] = Field(default_factory=dict)

    def to_entity(self) -> CrossOrganizationMember:
        account = (
            MemberAccount(id=self.id, login=self.login, avatar_url=self.avatar_url)
            if self.login
            else None
        )
        orgs: dict[str, OrganizationMembership] = {}
        for name, view in self.orgs.items():
            org_account = account
            if view.login:
                org_account = MemberAccount(
                    id=self.id,
                    login=view.login,
                    avatar_url=(
                        view.avatar_url
                        if "avatar_url" in view.model_fields_set
                        else self.avatar_url
                    ),
                )
            orgs[name] = OrganizationMembership(account=org_account, role=view.role)
        return CrossOrganizationMember(id=self.id, account=account, orgs=orgs)


class MembershipDocument(BaseModel):
    """Membership snapshot document: {"members": [...]}."""

    members: list[MemberPayload] = Field(default_factory=list)


class CorporateLinkPayload(BaseModel):
    """Corporate link as exchanged with link sources."""

    model_config = ConfigDict(extra="ignore")

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

    def to_entity(self) -> CorporateLink:
        return CorporateLink(**self.model_dump())


def parse_membership_document(data: Any, provider: str) -> MembershipSnapshot:
    """Validate a membership document and return an immutable snapshot."""
    try:
        document = MembershipDocument.model_validate(data)
    except ValidationError as e:
        raise ProviderException(provider, f"invalid membership document: {e}") from e
    return tuple(m.to_entity() for m in document.members)


def parse_links_document(data: Any, provider: str) -> tuple[CorporateLink, ...]:
    """Validate a links document (a list, or {"links": [...]}) and return links."""
    items = data.get("links") if isinstance(data, dict) else data
    if not isinstance(items, list):
        raise ProviderException(provider, "links document must be a list of links")
    try:
        return tuple(CorporateLinkPayload.model_validate(i).to_entity() for i in items)
    except ValidationError as e:
        raise ProviderException(provider, f"invalid corporate link: {e}") from e


def membership_document_from_snapshot(snapshot: MembershipSnapshot) -> dict[str, Any]:
    """Return the JSON document form of snapshot (inverse of parse_membership_document).

    Per-organization login and avatar_url are written together, only where the
    organization's account differs from the member's.
    """
    members: list[dict[str, Any]] = []
    for member in snapshot:
        orgs: dict[str, dict[str, Any]] = {}
        for name, view in member.orgs.items():
            entry: dict[str, Any] = {"role": view.role.value}
            if view.account is not None and view.account != member.account:
                entry["login"] = view.account.login
                entry["avatar_url"] = view.account.avatar_url
            orgs[name] = entry
        item: dict[str, Any] = {"id": member.id, "orgs": orgs}
        if member.account is not None:
            item["login"] = member.account.login
            item["avatar_url"] = member.account.avatar_url
        members.append(item)
    return {"members": members}
