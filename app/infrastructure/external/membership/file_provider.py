"""File-backed membership provider (JSON snapshot on disk).

Used for development, demos and tests, or where membership is exported by
another system.
"""

from __future__ import annotations

import json
from pathlib import Path

import aiofiles

from app.domain.entities.member import MembershipSnapshot
from app.domain.exceptions import ProviderException
from app.infrastructure.external.payloads import parse_membership_document
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import traced

logger = get_logger(__name__)

PROVIDER_NAME = "membership-file"


class FileMembershipProvider:
    """Reads {"members": [...]} from a JSON file on every call."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    @traced("membership.file.get_members")
    async def get_members(self) -> MembershipSnapshot:
        """Load and validate the snapshot file.

        Raises:
            ProviderException: If the file is missing, unreadable or invalid.
        """
        try:
            async with aiofiles.open(self.path, "r", encoding="utf-8") as f:
                content = await f.read()
            data = json.loads(content)
        except OSError as e:
            raise ProviderException(PROVIDER_NAME, f"cannot read {self.path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ProviderException(PROVIDER_NAME, f"invalid JSON in {self.path}: {e}") from e
        snapshot = parse_membership_document(data, PROVIDER_NAME)
        logger.info("Loaded %s members from %s", len(snapshot), self.path)
        return snapshot
