"""Maps cross-organization members to serialization-ready person records."""

from typing import Any

from app.application.dtos.people import PersonRecord
from app.domain.entities.member import CorporateLink, CrossOrganizationMember


def corporate_link_to_dict(link: CorporateLink) -> dict[str, Any]:
    """Serialize a corporate link for API responses (corporate + github identity)."""
    return {
        "corporate": {
            "id": link.corporate_id,
            "username": link.corporate_username,
            "display_name": link.corporate_display_name,
            "mail": link.corporate_mail,
            "alias": link.corporate_alias,
        },
        "github": {
            "id": link.github_id,
            "login": link.github_login,
        },
        "is_service_account": link.is_service_account,
        "service_account_mail": link.service_account_mail,
    }


def normalize_member(member: CrossOrganizationMember) -> PersonRecord:
    """Build the person record for one member.

    Only the organization names (keys of member.orgs) are exposed, never the
    per-organization account data. Identity comes from member.account; a
    member without an account yields an id-only record.
    """
    link = corporate_link_to_dict(member.link) if member.link else None
    organizations = member.organization_names
    if member.account is None:
        return PersonRecord(id=member.id, link=link, organizations=organizations)
    return PersonRecord(
        id=member.account.id,
        link=link,
        organizations=organizations,
        login=member.account.login,
        avatar_url=member.account.avatar_url,
        has_account=True,
    )
