"""Google Calendar use cases."""

from .link_calendar import (
    CalendarCallbackRequest,
    CalendarLinkResponse,
    CompleteCalendarLinkUseCase,
    StartCalendarLinkRequest,
    StartCalendarLinkUseCase,
)
from .sync_task import SyncTaskEventRequest, SyncTaskEventResponse, SyncTaskEventUseCase

__all__ = [
    "CalendarCallbackRequest",
    "CalendarLinkResponse",
    "CompleteCalendarLinkUseCase",
    "StartCalendarLinkRequest",
    "StartCalendarLinkUseCase",
    "SyncTaskEventRequest",
    "SyncTaskEventResponse",
    "SyncTaskEventUseCase",
]
