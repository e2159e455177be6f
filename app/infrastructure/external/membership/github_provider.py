"""GitHub membership provider using the GitHub REST API.

Enumerates members (and owners) of every configured organization and
aggregates them by account id into one cross-organization snapshot.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import Any

import httpx

from app.core.constants import GITHUB_API_VERSION, GITHUB_MEMBERS_PER_PAGE
from app.domain.entities.member import (
    CrossOrganizationMember,
    MemberAccount,
    MembershipSnapshot,
    OrganizationMembership,
)
from app.domain.enums import OrganizationRole
from app.domain.exceptions import ProviderException
from app.shared.telemetry.logging import get_logger
from app.shared.telemetry.tracing import traced

logger = get_logger(__name__)

PROVIDER_NAME = "github"


class GitHubMembershipProvider:
    """Cross-organization membership from GitHub organizations.

    Each organization costs two paginated listings (all members, then
    admins), which is why callers memoize the result.
    """

    def __init__(
        self,
        organizations: list[str],
        *,
        api_url: str = "https://api.github.com",
        token: str | None = None,
        timeout_seconds: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not organizations:
            raise ValueError("At least one organization is required")
        self.organizations = list(organizations)
        self._api_url = api_url.rstrip("/")
        self._token = token
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

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    async def _list_members(
        self, client: httpx.AsyncClient, organization: str, role: str
    ) -> list[dict[str, Any]]:
        """Return every member of organization with role, following Link pagination."""
        url: str | None = f"{self._api_url}/orgs/{organization}/members"
        params: dict[str, Any] | None = {"role": role, "per_page": GITHUB_MEMBERS_PER_PAGE}
        members: list[dict[str, Any]] = []
        while url:
            response = await client.get(
                url, headers=self._headers(), params=params, timeout=self._timeout
            )
            response.raise_for_status()
            page = response.json()
            if not isinstance(page, list):
                raise ProviderException(
                    PROVIDER_NAME, f"unexpected members payload for {organization}"
                )
            members.extend(page)
            # next link already carries the query string
            url = response.links.get("next", {}).get("url")
            params = None
        return members

    async def _organization_members(
        self, client: httpx.AsyncClient, organization: str
    ) -> tuple[list[dict[str, Any]], set[int]]:
        members = await self._list_members(client, organization, "all")
        admins = await self._list_members(client, organization, "admin")
        return members, {int(a["id"]) for a in admins}

    @traced("membership.github.get_members")
    async def get_members(self) -> MembershipSnapshot:
        """Aggregate members of all organizations into one snapshot.

        Organizations are read concurrently in a task group; the first failing
        organization cancels the others. The snapshot lists members in
        first-seen order (organization order, then API order).

        Raises:
            ProviderException: On HTTP errors or malformed payloads.
        """
        try:
            async with self._http_cm() as client:
                async with asyncio.TaskGroup() as tg:
                    tasks = [
                        tg.create_task(self._organization_members(client, org))
                        for org in self.organizations
                    ]
        except ExceptionGroup as eg:
            # first failure wins; the other organizations were cancelled
            e = eg.exceptions[0]
            if isinstance(e, ProviderException):
                raise e from None
            if isinstance(e, httpx.HTTPError):
                raise ProviderException(PROVIDER_NAME, str(e) or e.__class__.__name__) from e
            if isinstance(e, (KeyError, TypeError, ValueError)):
                raise ProviderException(PROVIDER_NAME, f"malformed member entry: {e}") from e
            raise
        per_org = [task.result() for task in tasks]

        accounts: dict[int, MemberAccount] = {}
        orgs_by_id: dict[int, dict[str, OrganizationMembership]] = {}
        try:
            for organization, (members, admin_ids) in zip(self.organizations, per_org):
                for item in members:
                    account = MemberAccount(
                        id=int(item["id"]),
                        login=str(item["login"]),
                        avatar_url=item.get("avatar_url"),
                    )
                    accounts.setdefault(account.id, account)
                    role = (
                        OrganizationRole.ADMIN
                        if account.id in admin_ids
                        else OrganizationRole.MEMBER
                    )
                    orgs_by_id.setdefault(account.id, {})[organization] = (
                        OrganizationMembership(account=account, role=role)
                    )
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderException(PROVIDER_NAME, f"malformed member entry: {e}") from e

        snapshot = tuple(
            CrossOrganizationMember(id=member_id, account=account, orgs=orgs_by_id[member_id])
            for member_id, account in accounts.items()
        )
        logger.info(
            "Fetched %s members across %s organizations",
            len(snapshot),
            len(self.organizations),
        )
        return snapshot
