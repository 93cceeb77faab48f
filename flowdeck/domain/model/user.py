"""User as seen by the OAuth flows.

The user directory owns the full record; the flows only need the public
profile and the Google credentials attached to it.
"""

from datetime import datetime, timezone

from pydantic import Field

from flowdeck.domain.model.common import DomainModel
from flowdeck.domain.value import UserId, UserRole


class User(DomainModel):
    """User record keyed by email, linked to a Google account.

    Refresh tokens are kept out of repr so they never end up in logs.
    """

    id: UserId
    email: str
    full_name: str
    role: UserRole = UserRole.USER
    google_sub: str | None = None
    google_refresh_token: str | None = Field(default=None, repr=False)
    google_calendar_refresh_token: str | None = Field(default=None, repr=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def calendar_linked(self) -> bool:
        token = self.google_calendar_refresh_token
        return bool(token and token.strip())
