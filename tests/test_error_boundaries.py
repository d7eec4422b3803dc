"""Oversized identifiers and unexpected failures still produce JSON errors."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from lobby_api.app.api.deps import get_language_service
from lobby_api.app.main import app

# One past the largest value an SQLite INTEGER column holds.
TOO_BIG = "99999999999999999999"


def test_oversized_path_id_is_invalid(client) -> None:
    response = client.get(f"/api/v1/languages/{TOO_BIG}")

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid id"}


def test_largest_sqlite_id_is_just_not_found(client) -> None:
    response = client.get(f"/api/v1/languages/{2**63 - 1}")

    assert response.status_code == 404


def test_oversized_page_is_rejected(client) -> None:
    response = client.get("/api/v1/languages/", params={"page": TOO_BIG})

    assert response.status_code == 400
    assert "page" in response.json()["errors"]


def test_page_that_overflows_the_offset_is_rejected(client) -> None:
    response = client.get("/api/v1/languages/", params={"page": 2**63 // 10, "limit": 100})

    assert response.status_code == 400
    assert "page" in response.json()["errors"]


def test_oversized_event_id_is_rejected(client, make_profile) -> None:
    profile = make_profile("joiner")

    response = client.post(
        "/api/v1/event-attendees/",
        json={"eventId": int(TOO_BIG), "userProfileId": profile["id"]},
    )

    assert response.status_code == 400
    assert "eventId" in response.json()["errors"]


def test_oversized_favorite_game_id_is_rejected(client, make_profile) -> None:
    profile = make_profile("collector")

    response = client.post(
        f"/api/v1/user-profiles/{profile['id']}/favorite-games/",
        json={"gameId": TOO_BIG},
    )

    assert response.status_code == 400
    assert "gameId" in response.json()["errors"]


class _ExplodingLanguageService:
    async def list_page(self, **kwargs):
        raise RuntimeError("secret detail from the storage layer")


@pytest.fixture
def failing_client(database):
    """A client whose language service raises a non-API exception."""

    app.dependency_overrides[get_language_service] = lambda: _ExplodingLanguageService()
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()


def test_unexpected_exception_becomes_internal_error(failing_client) -> None:
    response = failing_client.get("/api/v1/languages/")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
    assert "secret" not in response.text


def test_very_long_digit_id_is_invalid(client) -> None:
    response = client.get("/api/v1/languages/" + "9" * 5000)

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid id"}
