"""Domain model entities for FlowDeck."""

from flowdeck.domain.model.user import User

__all__ = [
    "User",
]
