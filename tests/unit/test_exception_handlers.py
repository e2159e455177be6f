"""Tests for the DirectoryException error-code to HTTP status mapping."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from app.core.exception_handlers import register_exception_handlers
from app.domain.exceptions import (
    DirectoryException,
    MemberNotFoundException,
    ProviderException,
)

ERRORS = {
    "missing": MemberNotFoundException("octocat"),
    "provider": ProviderException("github", "timeout"),
    "custom": DirectoryException("Unsupported filter", error_code="CUSTOM"),
}


@pytest.fixture
async def error_client() -> AsyncClient:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/fail/{kind}")
    async def fail(kind: str):
        raise ERRORS[kind]

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.mark.parametrize(
    ("kind", "status", "error"),
    [
        ("missing", 404, "RESOURCE_NOT_FOUND"),
        ("provider", 502, "PROVIDER_ERROR"),
        ("custom", 400, "CUSTOM"),
    ],
)
async def test_directory_exception_status(
    error_client: AsyncClient, kind: str, status: int, error: str
) -> None:
    response = await error_client.get(f"/fail/{kind}")
    assert response.status_code == status
    assert response.json()["error"] == error
