"""Repository interfaces for the FlowDeck domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from flowdeck.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
]
