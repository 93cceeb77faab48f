"""Unit tests for row/domain mappers."""

from datetime import datetime, timezone

from flowdeck.domain.model import User
from flowdeck.domain.value import UserId, UserRole
from flowdeck.persistence.mappers import row_to_user, user_to_dict

NOW = datetime(2025, 3, 14, 9, 30, tzinfo=timezone.utc)


class TestUserMapping:
    def test_row_to_user(self):
        row = {
            "id": 7,
            "email": "a@b.com",
            "full_name": "Ada",
            "role": "ADMIN",
            "google_sub": "sub-1",
            "google_refresh_token": None,
            "google_calendar_refresh_token": "cal-rt",
            "created_at": NOW,
            "updated_at": NOW,
        }

        user = row_to_user(row)

        assert user.id == 7
        assert user.role == UserRole.ADMIN
        assert user.calendar_linked is True

    def test_user_to_dict_excludes_id(self):
        user = User(
            id=UserId(7),
            email="a@b.com",
            full_name="Ada",
            created_at=NOW,
            updated_at=NOW,
        )

        data = user_to_dict(user)

        assert "id" not in data
        assert data["role"] == "USER"
        assert data["google_calendar_refresh_token"] is None

    def test_refresh_tokens_stay_out_of_repr(self):
        user = User(
            id=UserId(1),
            email="a@b.com",
            full_name="Ada",
            google_refresh_token="secret-login-rt",
            google_calendar_refresh_token="secret-cal-rt",
        )

        assert "secret" not in repr(user)
