"""API tests for the cross-organization people routes (service built from in-memory doubles)."""

import pytest
from httpx import AsyncClient

from app.api.v1.dependencies import get_people_service
from app.core.config import get_settings
from app.core.constants import PEOPLE_ROUTE_NOT_FOUND_MESSAGE
from app.domain.entities.member import CrossOrganizationMember
from app.domain.exceptions import ProviderException
from app.main import app
from tests.doubles import StaticMembershipProvider, build_service, make_member

PEOPLE = "/api/v1/people"


async def test_list_people_single_page(client: AsyncClient) -> None:
    response = await client.get(PEOPLE)
    assert response.status_code == 200
    data = response.json()
    assert [p["login"] for p in data["values"]] == ["alice", "bob", "carol"]
    assert data["total"] == 3
    assert data["page_number"] == 1
    assert data["page_size"] == 33
    assert data["last_page"] == 1
    assert data["has_more"] is False
    assert data["next_page"] is None
    assert data["filters"] == []


async def test_person_shape(client: AsyncClient) -> None:
    data = (await client.get(PEOPLE)).json()
    alice, bob = data["values"][0], data["values"][1]
    assert set(alice) == {"id", "login", "avatar_url", "link", "organizations"}
    assert alice["organizations"] == ["contoso", "fabrikam"]
    assert alice["link"]["corporate"]["display_name"] == "Alice Anders"
    assert alice["link"]["github"] == {"id": 1, "login": "alice"}
    assert bob["link"] is None


async def test_trailing_slash_lists_people(client: AsyncClient) -> None:
    response = await client.get(f"{PEOPLE}/")
    assert response.status_code == 200
    assert response.json()["total"] == 3


async def test_pagination(client: AsyncClient) -> None:
    data = (await client.get(PEOPLE, params={"page_size": 2})).json()
    assert [p["login"] for p in data["values"]] == ["alice", "bob"]
    assert data["has_more"] is True
    assert data["next_page"] == 2
    assert data["last_page"] == 2

    data = (await client.get(PEOPLE, params={"page_size": 2, "page_number": 2})).json()
    assert [p["login"] for p in data["values"]] == ["carol"]
    assert data["has_more"] is False


async def test_page_past_end_is_empty(client: AsyncClient) -> None:
    data = (await client.get(PEOPLE, params={"page_number": 9})).json()
    assert data["values"] == []
    assert data["total"] == 3


async def test_page_size_capped_at_maximum(client: AsyncClient) -> None:
    data = (await client.get(PEOPLE, params={"page_size": 5000})).json()
    assert data["page_size"] == 100


async def test_invalid_page_size_is_422(client: AsyncClient) -> None:
    response = await client.get(PEOPLE, params={"page_size": 0})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_type_filter(client: AsyncClient) -> None:
    data = (await client.get(PEOPLE, params={"type": "unlinked"})).json()
    assert [p["login"] for p in data["values"]] == ["bob", "carol"]
    assert data["filters"] == [
        {
            "type": "type",
            "value": "unlinked",
            "display_value": "unlinked",
            "display_prefix": None,
            "display_suffix": "members",
        }
    ]


async def test_unknown_type_means_no_filter(client: AsyncClient) -> None:
    unfiltered = (await client.get(PEOPLE)).json()
    data = (await client.get(PEOPLE, params={"type": "everyone"})).json()
    assert data["values"] == unfiltered["values"]
    assert data["filters"] == []


async def test_owners_in_organization(client: AsyncClient) -> None:
    data = (await client.get(PEOPLE, params={"type": "owners", "org": "contoso"})).json()
    assert [p["login"] for p in data["values"]] == ["alice"]
    assert [f["type"] for f in data["filters"]] == ["type", "organization"]


async def test_phrase_and_sort(client: AsyncClient) -> None:
    data = (await client.get(PEOPLE, params={"q": "l", "sort": "ReverseAlphabet"})).json()
    assert [p["login"] for p in data["values"]] == ["carol", "alice"]


async def test_get_person(client: AsyncClient) -> None:
    response = await client.get(f"{PEOPLE}/Alice")
    assert response.status_code == 200
    assert response.json()["login"] == "alice"


async def test_get_person_not_found(client: AsyncClient) -> None:
    response = await client.get(f"{PEOPLE}/mallory")
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "RESOURCE_NOT_FOUND"
    assert body["details"] == {"login": "mallory"}


async def test_unknown_sub_route_is_404_json(client: AsyncClient) -> None:
    response = await client.get(f"{PEOPLE}/alice/repositories")
    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "RESOURCE_NOT_FOUND"
    assert body["message"] == PEOPLE_ROUTE_NOT_FOUND_MESSAGE


async def test_unsupported_method_on_sub_route_is_404_json(client: AsyncClient) -> None:
    response = await client.post(f"{PEOPLE}/anything")
    assert response.status_code == 404
    assert response.json()["message"] == PEOPLE_ROUTE_NOT_FOUND_MESSAGE


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE"])
async def test_unsupported_method_on_collection_is_404_json(client: AsyncClient, method: str) -> None:
    for url in (PEOPLE, f"{PEOPLE}/"):
        response = await client.request(method, url)
        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "RESOURCE_NOT_FOUND"
        assert body["message"] == PEOPLE_ROUTE_NOT_FOUND_MESSAGE


async def test_get_person_with_trailing_slash(client: AsyncClient) -> None:
    response = await client.get(f"{PEOPLE}/alice/")
    assert response.status_code == 200
    assert response.json()["login"] == "alice"


async def test_member_without_account_is_id_only(client: AsyncClient) -> None:
    service = build_service(
        StaticMembershipProvider(
            [CrossOrganizationMember(id=77), make_member(1, "alice", {"contoso": "member"})]
        )
    )
    app.dependency_overrides[get_people_service] = lambda: service
    data = (await client.get(PEOPLE)).json()
    no_account = next(p for p in data["values"] if p["id"] == 77)
    assert no_account == {"id": 77, "link": None, "organizations": []}


async def test_provider_failure_is_502(client: AsyncClient) -> None:
    service = build_service(
        StaticMembershipProvider(error=ProviderException("github", "503 Service Unavailable"))
    )
    app.dependency_overrides[get_people_service] = lambda: service
    response = await client.get(PEOPLE)
    assert response.status_code == 502
    body = response.json()
    assert body["error"] == "PROVIDER_ERROR"
    assert body["details"] == {"provider": "github"}


async def test_rate_limit_exceeded_is_429(client: AsyncClient, monkeypatch) -> None:
    monkeypatch.setenv("PEOPLE_RATE_LIMIT", "2/minute")
    get_settings.cache_clear()
    try:
        statuses = [(await client.get(PEOPLE)).status_code for _ in range(2)]
        response = await client.get(PEOPLE)
        statuses.append(response.status_code)
    finally:
        monkeypatch.delenv("PEOPLE_RATE_LIMIT")
        get_settings.cache_clear()
    assert statuses == [200, 200, 429]
    assert response.json()["error"] == "RATE_LIMITED"
