"""Domain value objects for FlowDeck.

Value objects are immutable and defined by their values, not identity.
They carry the data that moves between the Google OAuth flows and the
user directory.
"""

from enum import Enum

from pydantic import Field, field_validator

from flowdeck.domain.value.common import ValueObject


class UserRole(str, Enum):
    """Role held by a user in the directory."""

    USER = "USER"
    ADMIN = "ADMIN"


class OAuthFlow(str, Enum):
    """The two authorization flows the service runs against Google."""

    LOGIN = "login"
    CALENDAR = "calendar"


class PKCEPair(ValueObject):
    """PKCE code verifier and its S256 challenge."""

    code_verifier: str = Field(min_length=43, max_length=128)
    code_challenge: str


class StateEntry(ValueObject):
    """Pending authorization flow, keyed by its state token.

    Attributes:
        code_verifier: PKCE verifier to send back to the token endpoint
        meta: Opaque data for the flow that created the entry
            (the user id for calendar-link flows)
        created_at: Clock reading when the entry was saved
    """

    code_verifier: str
    meta: str | None = None
    created_at: float


class GoogleTokenResponse(ValueObject):
    """Token endpoint response.

    Google only includes refresh_token on first consent or when the
    authorization request forced ``prompt=consent``.
    """

    access_token: str
    refresh_token: str | None = None
    id_token: str | None = None
    expires_in: int | None = None
    scope: str | None = None
    token_type: str | None = None

    @property
    def has_refresh_token(self) -> bool:
        return bool(self.refresh_token and self.refresh_token.strip())


class IdentityClaims(ValueObject):
    """Claims returned by Google's token-info endpoint for an id_token."""

    audience: str | None = None
    email: str | None = None
    email_verified: bool = False
    name: str | None = None
    subject: str | None = None

    @field_validator("email_verified", mode="before")
    @classmethod
    def parse_email_verified(cls, v: object) -> bool:
        """Google sends the flag as the string "true"/"false" (sometimes "1")."""
        if isinstance(v, bool):
            return v
        if v is None:
            return False
        return str(v).strip().lower() in ("true", "1")


class GoogleProfile(ValueObject):
    """Validated Google identity handed to the user directory."""

    subject: str | None = None
    email: str
    full_name: str


class CalendarSyncOutcome(ValueObject):
    """Result of a best-effort calendar sync.

    When ``synced`` is False, ``warning`` says why the event was not written.
    """

    synced: bool
    warning: str | None = None
