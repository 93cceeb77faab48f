"""User directory domain service."""

from datetime import datetime, timezone

import logfire

from flowdeck.domain.error import OAuthErrorKind, OAuthFlowError
from flowdeck.domain.model import User
from flowdeck.domain.repository import UserRepository
from flowdeck.domain.value import GoogleProfile, UserId, UserRole

from .base import Service


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class UserDirectoryService(Service):
    """Resolves Google identities to users and keeps their Google tokens.

    This is the only place that writes refresh tokens to the user record.
    """

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user directory service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def find_by_email(self, email: str) -> User | None:
        """Find a user by email (case-insensitive)."""
        return await self.user_repository.find_by_email(email)

    async def find_or_create_from_google(
        self, profile: GoogleProfile, refresh_token: str | None
    ) -> User:
        """Resolve a Google profile to a user, creating one if needed.

        An existing user gets its Google subject filled in if missing, its
        login refresh token replaced when a new one was issued, and its
        full name filled in if blank. A new user gets the USER role.

        Args:
            profile: Validated Google identity
            refresh_token: Refresh token from the login exchange, may be None

        Returns:
            The existing or newly created user
        """
        with logfire.span("user_directory.find_or_create_from_google"):
            existing = await self.user_repository.find_by_email(profile.email)

            if existing is None:
                user = await self.user_repository.create(
                    email=profile.email,
                    full_name=profile.full_name,
                    role=UserRole.USER,
                    google_sub=profile.subject,
                    google_refresh_token=(
                        None if _is_blank(refresh_token) else refresh_token
                    ),
                )
                logfire.info("User created from Google", user_id=user.id)
                return user

            update: dict[str, object] = {}
            if existing.google_sub is None and profile.subject is not None:
                update["google_sub"] = profile.subject
            if not _is_blank(refresh_token):
                update["google_refresh_token"] = refresh_token
            if _is_blank(existing.full_name):
                update["full_name"] = profile.full_name

            if not update:
                return existing

            update["updated_at"] = datetime.now(timezone.utc)
            user = await self.user_repository.save(existing.model_copy(update=update))
            logfire.info(
                "User updated from Google",
                user_id=user.id,
                fields=sorted(k for k in update if k != "updated_at"),
            )
            return user

    async def get_calendar_refresh_token(self, user_id: UserId) -> str | None:
        """Read the stored calendar refresh token.

        Args:
            user_id: User ID

        Returns:
            The token, or None if the user has not linked Google Calendar

        Raises:
            OAuthFlowError: USER_NOT_FOUND if the user does not exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise OAuthFlowError(OAuthErrorKind.USER_NOT_FOUND, "User not found")
        return user.google_calendar_refresh_token if user.calendar_linked else None

    async def update_calendar_refresh_token(
        self, user_id: UserId, refresh_token: str
    ) -> User:
        """Store the calendar refresh token for a user.

        Raises:
            OAuthFlowError: INVALID_REQUEST for a blank token,
                USER_NOT_FOUND if the user does not exist
        """
        if _is_blank(refresh_token):
            raise OAuthFlowError(
                OAuthErrorKind.INVALID_REQUEST, "Calendar refresh_token is required"
            )

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise OAuthFlowError(OAuthErrorKind.USER_NOT_FOUND, "User not found")

        saved = await self.user_repository.save(
            user.model_copy(
                update={
                    "google_calendar_refresh_token": refresh_token,
                    "updated_at": datetime.now(timezone.utc),
                }
            )
        )
        logfire.info("Calendar refresh token stored", user_id=user_id)
        return saved
