"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Backend-specific fields (GitHub organizations, snapshot
paths, links URL) are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_backends checks that the selected
    membership and links backends have what they need.
    """

    # App
    app_name: str = "people-directory"
    app_version: str = "1.0.0"
    debug: bool = False
    # Overrides the debug-derived level when set (e.g. "WARNING")
    log_level: str | None = None

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # Membership: "github" (GitHub REST API) or "file" (JSON snapshot on disk)
    membership_backend: str = "github"
    github_api_url: str = "https://api.github.com"
    github_token: SecretStr | None = None
    github_organizations: str = ""
    membership_snapshot_path: str = ""

    # Corporate links: "http", "file", or "none"
    links_backend: str = "none"
    links_url: str = ""
    links_api_key: SecretStr | None = None
    links_snapshot_path: str = ""

    # Outbound calls (membership and links providers)
    provider_timeout_seconds: float = 30.0

    # In-process caches (seconds)
    people_cache_ttl_seconds: int = 300
    links_cache_ttl_seconds: int = 300
    # When True, concurrent cache misses share one in-flight fetch.
    people_cache_share_inflight: bool = False

    # Paging
    people_default_page_size: int = 33
    people_max_page_size: int = 100

    # Rate limit (slowapi limit string)
    people_rate_limit: str = "120/minute"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def github_organization_list(self) -> list[str]:
        """Configured GitHub organizations, in order, without blanks."""
        return [o.strip() for o in self.github_organizations.split(",") if o.strip()]

    @model_validator(mode="after")
    def validate_backends(self) -> "Settings":
        """Validate membership/links backends and paging bounds.

        - github: GITHUB_ORGANIZATIONS required.
        - file: MEMBERSHIP_SNAPSHOT_PATH / LINKS_SNAPSHOT_PATH required.
        - http links: LINKS_URL required.
        """
        if self.membership_backend == "github":
            if not self.github_organization_list:
                raise ValueError(
                    "GITHUB_ORGANIZATIONS is required when membership_backend is 'github' "
                    "(comma-separated organization names)."
                )
        elif self.membership_backend == "file":
            if not self.membership_snapshot_path:
                raise ValueError(
                    "MEMBERSHIP_SNAPSHOT_PATH is required when membership_backend is 'file'."
                )
        else:
            raise ValueError(
                f"membership_backend must be 'github' or 'file', got: {self.membership_backend!r}"
            )
        if self.links_backend == "http":
            if not self.links_url:
                raise ValueError(
                    "LINKS_URL is required when links_backend is 'http'."
                )
        elif self.links_backend == "file":
            if not self.links_snapshot_path:
                raise ValueError(
                    "LINKS_SNAPSHOT_PATH is required when links_backend is 'file'."
                )
        elif self.links_backend != "none":
            raise ValueError(
                f"Invalid links_backend '{self.links_backend}'. "
                "Must be one of: 'http', 'file', 'none'"
            )
        if self.people_default_page_size < 1 or self.people_max_page_size < 1:
            raise ValueError("Page sizes must be positive integers")
        if self.people_default_page_size > self.people_max_page_size:
            raise ValueError(
                "PEOPLE_DEFAULT_PAGE_SIZE must not exceed PEOPLE_MAX_PAGE_SIZE"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
