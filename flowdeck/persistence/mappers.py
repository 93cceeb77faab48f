"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from flowdeck.domain.model import User
from flowdeck.domain.value import UserId, UserRole


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        email=row["email"],
        full_name=row["full_name"],
        role=UserRole(row["role"]),
        google_sub=row.get("google_sub"),
        google_refresh_token=row.get("google_refresh_token"),
        google_calendar_refresh_token=row.get("google_calendar_refresh_token"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict (without the ID)."""
    data = user.model_dump(exclude={"id"})
    data["role"] = user.role.value
    return data
