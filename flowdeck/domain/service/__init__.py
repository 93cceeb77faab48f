"""Domain services."""

from .base import Service
from .calendar_service import CalendarEventSink, CalendarSyncService
from .oauth_service import GoogleIdentityProvider, OAuthService
from .user_service import UserDirectoryService

__all__ = [
    "CalendarEventSink",
    "CalendarSyncService",
    "GoogleIdentityProvider",
    "OAuthService",
    "Service",
    "UserDirectoryService",
]
