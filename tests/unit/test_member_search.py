"""Tests for MemberSearch (type/phrase/organization filters, sorting, link join)."""

import pytest

from app.application.dtos.people import PeopleSearchParameters
from app.application.services.member_search import MemberSearch, describe_filters
from app.domain.enums import MemberSearchType
from tests.doubles import make_link, make_member


@pytest.fixture
def members():
    return [
        make_member(1, "alice", {"contoso": "admin", "fabrikam": "member"}),
        make_member(2, "Bob", {"contoso": "member"}),
        make_member(3, "carol-bot", {"fabrikam": "member"}),
        make_member(4, "dave", {"contoso": "member"}),
        make_member(5, "erin", {"fabrikam": "admin"}),
        make_member(6, "frank", {"contoso": "member", "fabrikam": "member", "tailspin": "member"}),
    ]


@pytest.fixture
def links():
    return [
        make_link(1, "alice", corporate_display_name="Alice Anders", corporate_alias="alicea"),
        make_link(3, "carol-bot", is_service_account=True),
        make_link(4, "dave", is_former=True),
        make_link(5, "erin", corporate_id=None, corporate_username=None),
    ]


@pytest.fixture
def search(members, links) -> MemberSearch:
    return MemberSearch(members, links)


def _logins(results) -> list[str]:
    return [m.login for m in results]


def test_no_filters_returns_everyone_alphabetically(search: MemberSearch) -> None:
    assert _logins(search.search(PeopleSearchParameters())) == [
        "alice",
        "Bob",
        "carol-bot",
        "dave",
        "erin",
        "frank",
    ]


@pytest.mark.parametrize(
    ("member_type", "expected"),
    [
        (MemberSearchType.LINKED, ["alice", "carol-bot", "dave", "erin"]),
        (MemberSearchType.UNLINKED, ["Bob", "frank"]),
        (MemberSearchType.ACTIVE, ["alice", "erin"]),
        (MemberSearchType.FORMER, ["dave"]),
        (MemberSearchType.SERVICE_ACCOUNT, ["carol-bot"]),
        (MemberSearchType.UNKNOWN_ACCOUNT, ["erin"]),
        (MemberSearchType.OWNERS, ["alice", "erin"]),
    ],
)
def test_type_filters(search: MemberSearch, member_type, expected) -> None:
    assert _logins(search.search(PeopleSearchParameters(type=member_type))) == expected


def test_owners_scoped_to_organization(search: MemberSearch) -> None:
    params = PeopleSearchParameters(type=MemberSearchType.OWNERS, organization="fabrikam")
    assert _logins(search.search(params)) == ["erin"]


def test_organization_filter_is_case_insensitive(search: MemberSearch) -> None:
    params = PeopleSearchParameters(organization="TAILSPIN")
    assert _logins(search.search(params)) == ["frank"]


def test_phrase_matches_login_case_insensitively(search: MemberSearch) -> None:
    assert _logins(search.search(PeopleSearchParameters(phrase="BOB"))) == ["Bob"]


def test_phrase_matches_corporate_identity(search: MemberSearch) -> None:
    assert _logins(search.search(PeopleSearchParameters(phrase="anders"))) == ["alice"]
    assert _logins(search.search(PeopleSearchParameters(phrase="alicea"))) == ["alice"]


def test_phrase_without_match_is_empty(search: MemberSearch) -> None:
    assert search.search(PeopleSearchParameters(phrase="zzz")) == []


def test_reverse_alphabet_sort(search: MemberSearch) -> None:
    results = search.search(PeopleSearchParameters(sort="ReverseAlphabet"))
    assert _logins(results) == ["frank", "erin", "dave", "carol-bot", "Bob", "alice"]


def test_organizations_sort_most_organizations_first(search: MemberSearch) -> None:
    results = search.search(PeopleSearchParameters(sort="Organizations"))
    assert _logins(results)[:2] == ["frank", "alice"]


def test_unknown_sort_falls_back_to_alphabet(search: MemberSearch) -> None:
    default = search.search(PeopleSearchParameters())
    assert search.search(PeopleSearchParameters(sort="Shoe size")) == default


def test_ties_break_by_id() -> None:
    twins = [make_member(9, "same"), make_member(2, "same")]
    assert [m.id for m in MemberSearch(twins).search(PeopleSearchParameters())] == [2, 9]


def test_link_join_does_not_mutate_snapshot(members, links) -> None:
    snapshot = tuple(members)
    joined = MemberSearch(snapshot, links).search(
        PeopleSearchParameters(type=MemberSearchType.LINKED)
    )
    assert all(m.link is not None for m in joined)
    assert all(m.link is None for m in snapshot)


def test_links_for_unknown_members_are_ignored(members) -> None:
    search = MemberSearch(members, [make_link(999, "ghost")])
    assert search.search(PeopleSearchParameters(type=MemberSearchType.LINKED)) == []


def test_find_by_login(search: MemberSearch) -> None:
    member = search.find_by_login("BOB")
    assert member is not None and member.id == 2
    assert search.find_by_login("alice").link is not None
    assert search.find_by_login("nobody") is None


def test_describe_filters() -> None:
    params = PeopleSearchParameters(
        phrase="ali", type=MemberSearchType.FORMER, organization="contoso"
    )
    filters = describe_filters(params)
    assert [(f.type, f.value) for f in filters] == [
        ("type", "former"),
        ("phrase", "ali"),
        ("organization", "contoso"),
    ]
    assert filters[0].display_value == "formerly known"
    assert filters[0].display_suffix == "members"
    assert filters[1].display_prefix == "matching"
    assert filters[2].display_prefix == "in"


def test_describe_filters_empty_without_filters() -> None:
    assert describe_filters(PeopleSearchParameters(sort="Alphabet")) == []
