"""Tests for the JSON file membership and link providers."""

import json
from pathlib import Path

import pytest

from app.domain.enums import OrganizationRole
from app.domain.exceptions import ProviderException
from app.infrastructure.external.links import FileLinkProvider
from app.infrastructure.external.membership import FileMembershipProvider

FIXTURES = Path(__file__).parent.parent / "fixtures"


async def test_membership_fixture_loads() -> None:
    snapshot = await FileMembershipProvider(FIXTURES / "members.json").get_members()
    assert [m.login for m in snapshot] == ["alice", "bob", "carol-bot"]
    alice = snapshot[0]
    assert alice.orgs["contoso"].role == OrganizationRole.ADMIN
    assert alice.orgs["contoso"].account.login == "alice"
    assert alice.organization_names == ["contoso", "fabrikam"]


async def test_membership_member_without_login_has_no_account(tmp_path: Path) -> None:
    path = tmp_path / "members.json"
    path.write_text(json.dumps({"members": [{"id": 9, "orgs": {"contoso": {}}}]}))
    snapshot = await FileMembershipProvider(path).get_members()
    assert snapshot[0].account is None
    assert snapshot[0].organization_names == ["contoso"]


async def test_membership_org_view_overrides_login(tmp_path: Path) -> None:
    path = tmp_path / "members.json"
    document = {
        "members": [
            {
                "id": 1,
                "login": "alice",
                "avatar_url": "https://a/1",
                "orgs": {"contoso": {"login": "alice-contoso"}},
            }
        ]
    }
    path.write_text(json.dumps(document))
    snapshot = await FileMembershipProvider(path).get_members()
    view = snapshot[0].orgs["contoso"].account
    assert view.login == "alice-contoso"
    assert view.avatar_url == "https://a/1"
    assert snapshot[0].login == "alice"


async def test_membership_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ProviderException):
        await FileMembershipProvider(tmp_path / "missing.json").get_members()


async def test_membership_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "members.json"
    path.write_text("{not json")
    with pytest.raises(ProviderException):
        await FileMembershipProvider(path).get_members()


async def test_membership_invalid_document(tmp_path: Path) -> None:
    path = tmp_path / "members.json"
    path.write_text(json.dumps({"members": [{"login": "no-id"}]}))
    with pytest.raises(ProviderException):
        await FileMembershipProvider(path).get_members()


async def test_links_fixture_loads() -> None:
    links = await FileLinkProvider(FIXTURES / "links.json").get_links()
    assert [link.github_id for link in links] == [101, 103]
    assert links[1].is_service_account
    assert links[1].service_account_mail == "owners@contoso.com"


async def test_links_document_must_be_a_list(tmp_path: Path) -> None:
    path = tmp_path / "links.json"
    path.write_text(json.dumps({"unexpected": True}))
    with pytest.raises(ProviderException):
        await FileLinkProvider(path).get_links()
