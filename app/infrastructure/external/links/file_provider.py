"""File-backed and empty link providers."""

from __future__ import annotations

import json
from pathlib import Path

import aiofiles

from app.domain.entities.member import CorporateLink
from app.domain.exceptions import ProviderException
from app.infrastructure.external.payloads import parse_links_document
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import traced

logger = get_logger(__name__)

PROVIDER_NAME = "links-file"


class FileLinkProvider:
    """Reads a JSON list of corporate links from a file on every call."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @traced("links.file.get_links")
    async def get_links(self) -> tuple[CorporateLink, ...]:
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                content = await f.read()
            data = json.loads(content)
        except OSError as e:
            raise ProviderException(PROVIDER_NAME, f"cannot read {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ProviderException(PROVIDER_NAME, f"invalid JSON in {self.path}: {e}") from e
        links = parse_links_document(data, PROVIDER_NAME)
        logger.info("Loaded %s corporate links from %s", len(links), self.path)
        return links


class NullLinkProvider:
    """No link source configured: every member is unlinked."""

    async def get_links(self) -> tuple[CorporateLink, ...]:
        return ()
