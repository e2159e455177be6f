"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the provider interfaces.
"""

from app.application.interfaces import ILinkProvider, IMembershipProvider
from app.application.use_cases import PeopleDirectoryService

__all__ = [
    "ILinkProvider",
    "IMembershipProvider",
    "PeopleDirectoryService",
]
