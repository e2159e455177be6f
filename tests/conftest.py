"""Pytest configuration and fixtures for the people directory.

Environment is set before app.main is imported so create_app() validates
against the JSON fixture backends (no GitHub access). API tests override
get_people_service with a service built from in-memory doubles.
"""

import os
from pathlib import Path

FIXTURES = Path(__file__).parent / "fixtures"

os.environ.setdefault("MEMBERSHIP_BACKEND", "file")
os.environ.setdefault("MEMBERSHIP_SNAPSHOT_PATH", str(FIXTURES / "members.json"))
os.environ.setdefault("LINKS_BACKEND", "file")
os.environ.setdefault("LINKS_SNAPSHOT_PATH", str(FIXTURES / "links.json"))
os.environ.setdefault("TELEMETRY_ENABLED", "false")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.api.v1.dependencies import get_people_service  # noqa: E402
from app.application.use_cases.people import PeopleDirectoryService  # noqa: E402
from app.core.limiter import limiter  # noqa: E402
from app.domain.entities.member import CrossOrganizationMember  # noqa: E402
from app.main import app  # noqa: E402
from tests.doubles import (  # noqa: E402
    FakeClock,
    StaticLinkProvider,
    StaticMembershipProvider,
    build_service,
    make_link,
    make_member,
)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def three_members() -> list[CrossOrganizationMember]:
    """Three members across two organizations; alice owns contoso."""
    return [
        make_member(1, "alice", {"contoso": "admin", "fabrikam": "member"}),
        make_member(2, "bob", {"contoso": "member"}),
        make_member(3, "carol", {"fabrikam": "member"}),
    ]


@pytest.fixture
def membership_provider(three_members) -> StaticMembershipProvider:
    return StaticMembershipProvider(three_members)


@pytest.fixture
def link_provider() -> StaticLinkProvider:
    """alice is linked; bob and carol are not."""
    return StaticLinkProvider(
        [make_link(1, "alice", corporate_display_name="Alice Anders")]
    )


@pytest.fixture
def people_service(membership_provider, link_provider, clock) -> PeopleDirectoryService:
    return build_service(membership_provider, link_provider, clock=clock)


@pytest.fixture
async def client(people_service) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) with the people service overridden."""
    limiter.reset()
    app.dependency_overrides[get_people_service] = lambda: people_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.pop(get_people_service, None)
