"""Application interfaces (ports): provider protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.providers import ILinkProvider, IMembershipProvider

__all__ = [
    "ILinkProvider",
    "IMembershipProvider",
]
