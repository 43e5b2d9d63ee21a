# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Fixtures shared by the API tests. Unit tests run the real app against
# tests.fakes.FakeDatabase; tests/test_integration.py uses real PostgreSQL.
# =============================================================================

import os

# Set up test environment BEFORE importing the app.
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from adoption_api.main import create_app
from tests.fakes import ADMIN_TOKEN, SESSION_ID, USER_ID, FakeDatabase


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def app(fake_db):
    return create_app(database=fake_db)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_client(client, fake_db):
    """
    Client carrying a session cookie that resolves to USER_ID.
    """
    fake_db.on("sess->>'user_id'", lambda sid: {"user_id": USER_ID} if sid == SESSION_ID else None)
    client.cookies.set("sid", SESSION_ID)
    return client


@pytest.fixture
def admin_headers(monkeypatch) -> dict:
    monkeypatch.setenv("ADMIN_API_TOKEN", ADMIN_TOKEN)
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
