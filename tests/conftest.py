"""Pytest fixtures shared across the API tests."""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional

import pytest
from fastapi.testclient import TestClient

from lobby_api.app.core.config import settings
from lobby_api.app.core.db import get_connection, init_db
from lobby_api.app.main import app


@pytest.fixture
def database(tmp_path, monkeypatch) -> str:
    """Point the application at a fresh SQLite file with all migrations applied."""

    path = str(tmp_path / "lobby-test.db")
    monkeypatch.setattr(settings, "database_url", path)
    init_db()
    return path


@pytest.fixture
def conn(database):
    """Return a raw connection to the test database."""

    connection = get_connection()
    yield connection
    connection.close()


@pytest.fixture
def client(database) -> Iterator[TestClient]:
    """Return a TestClient bound to the test database."""

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_game(client):
    """Create a game through the API and return its JSON representation."""

    def _make(name: str = "Valorant", **extra: Any) -> Dict[str, Any]:
        response = client.post("/api/v1/games/", json={"name": name, **extra})
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_profile(client):
    """Create a user profile through the API and return its ``data`` block."""

    def _make(user_name: str = "ace", keycloak_id: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
        body = {"userKeycloakId": keycloak_id or f"kc-{user_name}", "userName": user_name, **extra}
        response = client.post("/api/v1/user-profiles/", json=body)
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make
