"""Domain value objects for FlowDeck."""

from flowdeck.domain.value.identifiers import MAX_USER_ID, UserId
from flowdeck.domain.value.types import (
    CalendarSyncOutcome,
    GoogleProfile,
    GoogleTokenResponse,
    IdentityClaims,
    OAuthFlow,
    PKCEPair,
    StateEntry,
    UserRole,
)

__all__ = [
    # Identifiers
    "MAX_USER_ID",
    "UserId",
    # Types
    "CalendarSyncOutcome",
    "GoogleProfile",
    "GoogleTokenResponse",
    "IdentityClaims",
    "OAuthFlow",
    "PKCEPair",
    "StateEntry",
    "UserRole",
]
