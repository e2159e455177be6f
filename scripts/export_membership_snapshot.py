"""Export the GitHub cross-organization membership to a JSON snapshot file.

The output is the document read by MEMBERSHIP_BACKEND=file, so a directory
can be served from a periodic export instead of live GitHub calls.

Usage:
    uv run python -m scripts.export_membership_snapshot [path/to/members.json]

Default path: MEMBERSHIP_SNAPSHOT_PATH, else members.json.
Requires: GITHUB_ORGANIZATIONS (and GITHUB_TOKEN for private membership).
"""

import asyncio
import json
import sys
from pathlib import Path

from app.core.config import get_settings
from app.domain.exceptions import ProviderException
from app.infrastructure.external.membership import GitHubMembershipProvider
from app.infrastructure.external.payloads import membership_document_from_snapshot
from app.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Fetch membership from GitHub and write it as a snapshot document."""
    setup_logging()
    settings = get_settings()
    organizations = settings.github_organization_list
    if not organizations:
        print("Set GITHUB_ORGANIZATIONS (comma-separated)", file=sys.stderr)
        sys.exit(1)
    default_path = settings.membership_snapshot_path or "members.json"
    path = Path(sys.argv[1] if len(sys.argv) > 1 else default_path)

    provider = GitHubMembershipProvider(
        organizations,
        api_url=settings.github_api_url,
        token=settings.github_token.get_secret_value() if settings.github_token else None,
        timeout_seconds=settings.provider_timeout_seconds,
    )
    try:
        snapshot = await provider.get_members()
    except ProviderException as e:
        print(e.message, file=sys.stderr)
        sys.exit(1)

    document = membership_document_from_snapshot(snapshot)
    path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
    print(f"Wrote {len(snapshot)} member(s) across {len(organizations)} organization(s) to {path}")


if __name__ == "__main__":
    asyncio.run(main())
