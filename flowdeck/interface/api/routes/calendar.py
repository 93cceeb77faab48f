"""Google Calendar sync routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Response

from flowdeck.application.usecase.calendar import (
    SyncTaskEventRequest,
    SyncTaskEventResponse,
    SyncTaskEventUseCase,
)

router = APIRouter(prefix="/calendar/google", tags=["calendar"], route_class=DishkaRoute)


@router.post("/sync-task", response_model=None)
async def sync_task(
    request: SyncTaskEventRequest,
    use_case: FromDishka[SyncTaskEventUseCase],
    best_effort: bool = Query(default=False, alias="bestEffort"),
) -> Response | SyncTaskEventResponse:
    """Create an all-day event for a task in the user's linked calendar.

    With ``?bestEffort=true`` failures are reported in the body instead of
    as an error status.

    Example:
        POST /calendar/google/sync-task
        {"userId": 7, "teamName": "Core", "taskName": "Review", "date": "2025-03-14"}
    """
    if best_effort:
        request = request.model_copy(update={"best_effort": True})

    result = await use_case.execute(request)
    if request.best_effort:
        return result
    return Response(status_code=200)
