"""Test configuration and fixtures."""

import pytest

from tests.harness import (
    TEST_CALENDAR_REDIRECT_URI,
    TEST_CLIENT_ID,
    TEST_CLIENT_SECRET,
    TEST_REDIRECT_URI,
)


@pytest.fixture(autouse=True)
def google_env(monkeypatch):
    """Configure Google OAuth through the environment for DI-built settings."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("GOOGLE__CLIENT_ID", TEST_CLIENT_ID)
    monkeypatch.setenv("GOOGLE__CLIENT_SECRET", TEST_CLIENT_SECRET)
    monkeypatch.setenv("GOOGLE__REDIRECT_URI", TEST_REDIRECT_URI)
    monkeypatch.setenv("GOOGLE__CALENDAR_REDIRECT_URI", TEST_CALENDAR_REDIRECT_URI)
