"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic (SRP). Used by main.py;
no business logic here, only wiring of infrastructure (shared HTTP client,
people directory service and its memo caches, telemetry).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from app.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: shared HTTP client, then the people directory service.
    Shutdown: HTTP client close, telemetry shutdown (telemetry itself is
    set up in create_app, before the middleware stack is built). Memo
    caches are process-local and simply dropped.
    """
    settings = get_settings()

    # ---- Startup ----
    # Shared HTTP client for membership/link providers (connection reuse).
    app.state.http_client = httpx.AsyncClient(timeout=settings.provider_timeout_seconds)

    from app.api.v1.dependencies import build_people_service

    app.state.people_service = build_people_service(settings, app.state.http_client)
    logger.info(
        "People directory ready: membership=%s, links=%s, cache_ttl=%ss",
        settings.membership_backend,
        settings.links_backend,
        settings.people_cache_ttl_seconds,
    )

    yield

    # ---- Shutdown ----
    if getattr(app.state, "http_client", None) is not None:
        await app.state.http_client.aclose()
        app.state.http_client = None
        logger.info("HTTP client closed")
    app.state.people_service = None

    from app.shared.telemetry.telemetry import get_telemetry, set_telemetry

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
        logger.info("Telemetry shutdown complete")
