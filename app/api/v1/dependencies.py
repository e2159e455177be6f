"""Presentation-layer dependency injection (composition root).

Builds the people directory use case from infrastructure implementations
(providers, memo caches) and exposes it through FastAPI Depends().
Routes depend only on these dependencies, not on infrastructure directly.

The service is created once per process (in the lifespan) and stored on
app.state so its memoized snapshot is shared by all requests.
"""

from __future__ import annotations

import httpx
from fastapi import Request

from app.application.use_cases.people import PeopleDirectoryService
from app.core.config import Settings, get_settings
from app.core.constants import (
    CACHE_KEY_CORPORATE_LINKS,
    CACHE_KEY_CROSS_ORGANIZATION_MEMBERS,
)
from app.infrastructure.cache.memory_cache import MemoizedValue
from app.infrastructure.external.factory import ProviderFactory


def build_people_service(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> PeopleDirectoryService:
    """Build the people directory service with fresh memo caches.

    Args:
        settings: Application settings; if None, uses get_settings().
        http_client: Shared outbound HTTP client for the providers.
    """
    s = settings or get_settings()
    return PeopleDirectoryService(
        membership_provider=ProviderFactory.create_membership_provider(s, http_client),
        link_provider=ProviderFactory.create_link_provider(s, http_client),
        members_cache=MemoizedValue.with_ttl(
            CACHE_KEY_CROSS_ORGANIZATION_MEMBERS,
            s.people_cache_ttl_seconds,
            share_inflight=s.people_cache_share_inflight,
        ),
        links_cache=MemoizedValue.with_ttl(
            CACHE_KEY_CORPORATE_LINKS,
            s.links_cache_ttl_seconds,
            share_inflight=s.people_cache_share_inflight,
        ),
    )


def get_people_service(request: Request) -> PeopleDirectoryService:
    """People directory use case (process-wide, memoized snapshot).

    Falls back to building one on first use when the lifespan did not run
    (e.g. ASGI transports that skip startup events).
    """
    service = getattr(request.app.state, "people_service", None)
    if service is None:
        service = build_people_service(
            http_client=getattr(request.app.state, "http_client", None)
        )
        request.app.state.people_service = service
    return service
