"""Shared fixtures: in-memory Motor database, recording mailer, API client.

The app lifespan is not run: ASGITransport skips it, so the real MongoDB
client and SMTP relay are never created. Store, mailer and settings are
swapped in through dependency overrides.
"""

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from easysolutions.core.config import Settings, get_settings
from easysolutions.core.mailer import get_mailer
from easysolutions.db.mongo import get_db
from easysolutions.main import app
from tests.fakes import RECEIVER, RecordingMailer


@pytest.fixture
def settings():
    return Settings(
        receiver_email=RECEIVER,
        email_user="mailer@easysolutions.test",
        app_env="production",
        _env_file=None,
    )


@pytest.fixture
def test_db():
    return AsyncMongoMockClient()["contactForm"]


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
async def client(test_db, mailer, settings):
    """API client with store, mailer and settings overridden."""
    app.dependency_overrides[get_db] = lambda: test_db
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
