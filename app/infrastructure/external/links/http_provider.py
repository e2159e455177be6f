"""HTTP link provider: corporate links from a JSON endpoint."""

from __future__ import annotations

from contextlib import asynccontextmanager

import httpx

from app.domain.entities.member import CorporateLink
from app.domain.exceptions import ProviderException
from app.infrastructure.external.payloads import parse_links_document
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import traced

logger = get_logger(__name__)

PROVIDER_NAME = "links-http"


class HttpLinkProvider:
    """GET links_url and parse a list of corporate links.

    The optional API key is sent as X-Api-Key.
    """

    def __init__(
        self,
        url: str,
        *,
        api_key: str | None = None,
        timeout_seconds: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self._api_key = api_key
        self._timeout = timeout_seconds
        self._shared_http = http_client

    @asynccontextmanager
    async def _http_cm(self):
        """Yield shared HTTP client or a short-lived one (connection reuse when shared)."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            yield client

    @traced("links.http.get_links")
    async def get_links(self) -> tuple[CorporateLink, ...]:
        """Fetch every corporate link.

        Raises:
            ProviderException: On HTTP errors or an invalid payload.
        """
        headers = {"Accept": "application/json"}
        if self._api_key:
            headers["X-Api-Key"] = self._api_key
        try:
            async with self._http_cm() as client:
                response = await client.get(self.url, headers=headers, timeout=self._timeout)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise ProviderException(PROVIDER_NAME, str(e) or e.__class__.__name__) from e
        except ValueError as e:
            raise ProviderException(PROVIDER_NAME, f"invalid JSON: {e}") from e
        links = parse_links_document(data, PROVIDER_NAME)
        logger.info("Fetched %s corporate links", len(links))
        return links
