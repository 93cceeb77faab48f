"""Sync task to Google Calendar use case."""

from datetime import date

from pydantic import Field

from flowdeck.application.usecase.base import BaseUseCase, CamelModel
from flowdeck.domain.error import OAuthErrorKind, OAuthFlowError
from flowdeck.domain.service import CalendarSyncService
from flowdeck.domain.value import MAX_USER_ID, UserId


class SyncTaskEventRequest(CamelModel):
    """Task to write to the assignee's calendar."""

    user_id: int | None = Field(default=None, gt=0, le=MAX_USER_ID)
    team_name: str | None = None
    task_name: str | None = None
    event_date: date | None = Field(default=None, alias="date")
    best_effort: bool = False


class SyncTaskEventResponse(CamelModel):
    """Sync result; warning is set only for a skipped best-effort sync."""

    synced: bool
    warning: str | None = None


class SyncTaskEventUseCase(BaseUseCase):
    """Use case for creating a task event in a linked Google Calendar."""

    def __init__(self, calendar_sync_service: CalendarSyncService) -> None:
        self.calendar_sync_service = calendar_sync_service

    async def execute(self, request: SyncTaskEventRequest) -> SyncTaskEventResponse:
        """Create the event.

        In best-effort mode flow failures come back as a warning instead
        of an error.

        Raises:
            OAuthFlowError: INVALID_REQUEST without a user id; any sync
                failure when not in best-effort mode
        """
        if request.user_id is None:
            raise OAuthFlowError(OAuthErrorKind.INVALID_REQUEST, "userId is required")

        user_id = UserId(request.user_id)
        if request.best_effort:
            outcome = await self.calendar_sync_service.try_create_or_update_task_event(
                user_id, request.team_name, request.task_name, request.event_date
            )
            return SyncTaskEventResponse(synced=outcome.synced, warning=outcome.warning)

        await self.calendar_sync_service.create_or_update_task_event(
            user_id, request.team_name, request.task_name, request.event_date
        )
        return SyncTaskEventResponse(synced=True)
