"""Unit tests for InMemoryUserRepository."""

import pytest

from flowdeck.domain.value import UserRole
from flowdeck.persistence.repository.inmemory import InMemoryUserRepository


class TestInMemoryUserRepository:
    @pytest.mark.asyncio
    async def test_ids_are_sequential(self):
        repo = InMemoryUserRepository()

        first = await repo.create(email="a@b.com", full_name="A", role=UserRole.USER)
        second = await repo.create(email="c@d.com", full_name="C", role=UserRole.USER)

        assert (first.id, second.id) == (1, 2)

    @pytest.mark.asyncio
    async def test_find_by_email_ignores_case(self):
        repo = InMemoryUserRepository()
        user = await repo.create(email="Ada@Example.com", full_name="A", role=UserRole.USER)

        assert await repo.find_by_email("ada@example.COM") == user
        assert await repo.find_by_email("other@example.com") is None
