"""Unit tests for SyncTaskEventUseCase."""

from datetime import date

from dishka import AsyncContainer
from pydantic import ValidationError
import pytest

from flowdeck.adapter.google.calendar import GoogleCalendarClient
from flowdeck.application.usecase.calendar import (
    SyncTaskEventRequest,
    SyncTaskEventUseCase,
)
from flowdeck.domain.error import OAuthErrorKind, OAuthFlowError
from flowdeck.domain.repository import UserRepository
from flowdeck.domain.value import UserRole
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def linked_user_id(users: UserRepository) -> int:
    user = await users.create(email="a@b.com", full_name="Ada", role=UserRole.USER)
    await users.save(
        user.model_copy(update={"google_calendar_refresh_token": "cal-rt"})
    )
    return user.id


class TestSyncTaskEventUseCase:
    """Tests for SyncTaskEventUseCase."""

    @pytest.mark.asyncio
    async def test_creates_event(self, unit_env: AsyncContainer):
        users = await unit_env.get(UserRepository)
        calendar = await unit_env.get(GoogleCalendarClient)
        use_case = await unit_env.get(SyncTaskEventUseCase)
        user_id = await linked_user_id(users)

        response = await use_case.execute(
            SyncTaskEventRequest(
                user_id=user_id,
                team_name="Core",
                task_name="Review",
                event_date=date(2025, 3, 14),
            )
        )

        assert response.synced is True
        assert calendar.events[0][1]["summary"] == "[Core] Review"

    @pytest.mark.parametrize("user_id", [0, -5, 2**63])
    def test_rejects_ids_outside_bigint_range(self, user_id):
        with pytest.raises(ValidationError):
            SyncTaskEventRequest.model_validate({"userId": user_id, "date": "2025-03-14"})

    def test_accepts_camel_case_payload(self):
        request = SyncTaskEventRequest.model_validate(
            {"userId": 3, "teamName": "Core", "taskName": "Ship", "date": "2025-03-14"}
        )

        assert request.user_id == 3
        assert request.event_date == date(2025, 3, 14)

    @pytest.mark.asyncio
    async def test_user_id_is_required(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(SyncTaskEventUseCase)

        with pytest.raises(OAuthFlowError) as exc_info:
            await use_case.execute(SyncTaskEventRequest(event_date=date(2025, 1, 1)))

        assert exc_info.value.kind == OAuthErrorKind.INVALID_REQUEST

    @pytest.mark.asyncio
    async def test_not_linked_raises(self, unit_env: AsyncContainer):
        users = await unit_env.get(UserRepository)
        use_case = await unit_env.get(SyncTaskEventUseCase)
        user = await users.create(email="a@b.com", full_name="Ada", role=UserRole.USER)

        with pytest.raises(OAuthFlowError) as exc_info:
            await use_case.execute(
                SyncTaskEventRequest(user_id=user.id, event_date=date(2025, 1, 1))
            )

        assert exc_info.value.kind == OAuthErrorKind.NOT_LINKED

    @pytest.mark.asyncio
    async def test_best_effort_reports_failure(self, unit_env: AsyncContainer):
        users = await unit_env.get(UserRepository)
        calendar = await unit_env.get(GoogleCalendarClient)
        use_case = await unit_env.get(SyncTaskEventUseCase)
        user_id = await linked_user_id(users)
        calendar.fail = True

        response = await use_case.execute(
            SyncTaskEventRequest(
                user_id=user_id, event_date=date(2025, 1, 1), best_effort=True
            )
        )

        assert response.synced is False
        assert response.warning.startswith("upstream_failure")
