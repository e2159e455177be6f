"""Provider factory: creates membership and link providers from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from app.application.interfaces.providers import ILinkProvider, IMembershipProvider

if TYPE_CHECKING:
    from app.core.config import Settings


class ProviderFactory:
    """Factory for membership/link provider instances based on configuration."""

    @staticmethod
    def create_membership_provider(
        settings: "Settings | None" = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> IMembershipProvider:
        """Create membership provider from settings.

        Args:
            settings: Application settings; if None, uses get_settings().
            http_client: Shared outbound client (GitHub backend only).

        Returns:
            GitHubMembershipProvider or FileMembershipProvider.

        Raises:
            ValueError: Unknown backend or missing required config.
        """
        from app.core.config import get_settings

        s = settings or get_settings()
        backend = s.membership_backend.lower()

        if backend == "github":
            from app.infrastructure.external.membership import GitHubMembershipProvider

            return GitHubMembershipProvider(
                s.github_organization_list,
                api_url=s.github_api_url,
                token=s.github_token.get_secret_value() if s.github_token else None,
                timeout_seconds=s.provider_timeout_seconds,
                http_client=http_client,
            )
        if backend == "file":
            from app.infrastructure.external.membership import FileMembershipProvider

            if not s.membership_snapshot_path:
                raise ValueError("MEMBERSHIP_SNAPSHOT_PATH required for file backend")
            return FileMembershipProvider(s.membership_snapshot_path)
        raise ValueError(
            f"Unknown membership backend: {backend}. Supported: 'github', 'file'"
        )

    @staticmethod
    def create_link_provider(
        settings: "Settings | None" = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> ILinkProvider:
        """Create corporate link provider from settings.

        Returns:
            HttpLinkProvider, FileLinkProvider or NullLinkProvider.

        Raises:
            ValueError: Unknown backend or missing required config.
        """
        from app.core.config import get_settings
        from app.infrastructure.external.links import (
            FileLinkProvider,
            HttpLinkProvider,
            NullLinkProvider,
        )

        s = settings or get_settings()
        backend = s.links_backend.lower()

        if backend == "http":
            if not s.links_url:
                raise ValueError("LINKS_URL required for http backend")
            return HttpLinkProvider(
                s.links_url,
                api_key=s.links_api_key.get_secret_value() if s.links_api_key else None,
                timeout_seconds=s.provider_timeout_seconds,
                http_client=http_client,
            )
        if backend == "file":
            if not s.links_snapshot_path:
                raise ValueError("LINKS_SNAPSHOT_PATH required for file backend")
            return FileLinkProvider(s.links_snapshot_path)
        if backend == "none":
            return NullLinkProvider()
        raise ValueError(
            f"Unknown links backend: {backend}. Supported: 'http', 'file', 'none'"
        )
