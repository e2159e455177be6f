"""Corporate link providers: HTTP endpoint, JSON file, or none."""

from app.infrastructure.external.links.file_provider import (
    FileLinkProvider,
    NullLinkProvider,
)
from app.infrastructure.external.links.http_provider import HttpLinkProvider

__all__ = [
    "FileLinkProvider",
    "HttpLinkProvider",
    "NullLinkProvider",
]
