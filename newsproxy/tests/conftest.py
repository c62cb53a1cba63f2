"""Shared fixtures for news proxy tests."""

from typing import Optional

import pytest
from fastapi.testclient import TestClient

from newsproxy.api import create_app
from newsproxy.config import Settings
from newsproxy.infrastructure.auth import require_verified_user
from newsproxy.infrastructure.database import UserRecord
from newsproxy.tests.fakes import VERIFIED_USER, FakeNewsClient, RecordingSleep, make_settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep real credentials in the environment from leaking into tests."""
    for name in ("SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY", "JWT_SECRET"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def make_client(sleep):
    """Build a TestClient around a scripted upstream.

    Authenticated as a verified user unless ``user`` is None.
    """

    def _make(
        news_client: FakeNewsClient,
        settings: Optional[Settings] = None,
        user: Optional[UserRecord] = VERIFIED_USER,
    ) -> TestClient:
        app = create_app(settings=settings or make_settings(), news_client=news_client, sleep=sleep)
        if user is not None:
            app.dependency_overrides[require_verified_user] = lambda: user
        return TestClient(app)

    return _make
