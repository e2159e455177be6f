"""External integrations: membership and corporate link providers."""

from app.infrastructure.external.factory import ProviderFactory

__all__ = ["ProviderFactory"]
