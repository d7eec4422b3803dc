"""Lobby API client.

A thin wrapper around the Lobby REST API built on ``requests``.  Every
public method returns a tuple ``(data, error)``: on success ``data``
holds the decoded JSON body (``None`` for empty responses) and
``error`` is ``None``; on failure ``data`` is ``None`` and ``error`` is
a dictionary with the keys ``status_code`` and ``message``.

Field-level validation failures (``{"errors": {...}}``) are flattened
into ``message`` as ``"field: msg; field: msg"`` so callers always get
a printable string.

Example::

    client = LobbyApiClient(base_url="http://localhost:8000")
    profile, error = client.get_user_profile("42")
    if error is None:
        updated, error = client.update_user_profile(
            "42", {"bio": "Support main"}, row_version=profile["rowVersion"]
        )
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

import requests

logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]

API_PREFIX = "/api/v1"


def _error_message(response: requests.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        if body.get("message"):
            return str(body["message"])
        if isinstance(body.get("errors"), dict):
            return "; ".join(
                f"{field}: {', '.join(messages)}" for field, messages in body["errors"].items()
            )
        if body.get("detail"):
            return str(body["detail"])
    return str(body)


class LobbyApiClient:
    """Client for the Lobby API.

    Args:
        base_url: Server root, e.g. ``http://localhost:8000``.  The
            ``/api/v1`` prefix is added by the client.
        session: Optional requests session.  If not supplied a session
            will be created automatically.
        api_key: Optional token sent as ``Authorization: Bearer <key>``
            for deployments that put the API behind a gateway.
        timeout: Seconds to wait for each request.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        api_key: Optional[str] = None,
        timeout: float = 15,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.api_key = api_key
        self.timeout = timeout

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json_body: Any = None,
    ) -> Result:
        """Perform an HTTP request against ``/api/v1``.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ...).
            path: Path below the API prefix, e.g. ``/languages``.
            params: Query parameters; ``None`` values are dropped.
            json_body: JSON body for POST/PUT/PATCH.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{API_PREFIX}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        if params:
            params = {key: value for key, value in params.items() if value is not None}
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params or None,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = _error_message(exc.response) if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Languages
    # ------------------------------------------------------------------
    def list_languages(
        self,
        *,
        page: int = 1,
        limit: int = 10,
        search: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> Result:
        """Return one page ``{"data": [...], "pagination": {...}}``."""
        params = {"page": page, "limit": limit, "search": search, "sortBy": sort_by, "sortOrder": sort_order}
        return self._request("GET", "/languages/", params=params)

    def get_language(self, language_id: str, include_deleted: bool = False) -> Result:
        params = {"includeDeleted": "true"} if include_deleted else None
        return self._request("GET", f"/languages/{language_id}", params=params)

    def create_language(self, payload: Dict[str, Any]) -> Result:
        return self._request("POST", "/languages/", json_body=payload)

    def update_language(self, language_id: str, payload: Dict[str, Any]) -> Result:
        return self._request("PUT", f"/languages/{language_id}", json_body=payload)

    def delete_language(self, language_id: str) -> Result:
        return self._request("DELETE", f"/languages/{language_id}")

    # ------------------------------------------------------------------
    # User profiles
    # ------------------------------------------------------------------
    def get_user_profile(self, user_id: str) -> Result:
        return self._request("GET", f"/user-profiles/{user_id}")

    def get_user_profile_by_user_name(self, user_name: str) -> Result:
        return self._request("GET", f"/user-profiles/by-username/{user_name}")

    def create_user_profile(self, payload: Dict[str, Any]) -> Result:
        """Create a profile; ``data`` is the ``{success, message, data}`` envelope."""
        return self._request("POST", "/user-profiles/", json_body=payload)

    def update_user_profile(self, user_id: str, changes: Dict[str, Any], *, row_version: str) -> Result:
        """Send a partial update guarded by *row_version*.

        A stale *row_version* comes back as ``error`` with
        ``status_code`` 409; re-read the profile and retry.
        """
        body = dict(changes)
        body["rowVersion"] = row_version
        return self._request("PATCH", f"/user-profiles/{user_id}", json_body=body)

    def delete_user_profile(self, user_id: str, *, row_version: Optional[str] = None) -> Result:
        return self._request("DELETE", f"/user-profiles/{user_id}", params={"rowVersion": row_version})

    # ------------------------------------------------------------------
    # Favourite games
    # ------------------------------------------------------------------
    def list_favorite_games(self, user_id: str) -> Result:
        return self._request("GET", f"/user-profiles/{user_id}/favorite-games/")

    def add_favorite_game(self, user_id: str, game_id: str) -> Result:
        return self._request(
            "POST", f"/user-profiles/{user_id}/favorite-games/", json_body={"gameId": str(game_id)}
        )

    def remove_favorite_game(self, user_id: str, game_id: str) -> Result:
        return self._request("DELETE", f"/user-profiles/{user_id}/favorite-games/{game_id}")

    # ------------------------------------------------------------------
    # Game platforms
    # ------------------------------------------------------------------
    def list_game_platforms(self) -> Result:
        return self._request("GET", "/game-platforms/")

    def link_game_platform(self, game_id: str, platform_id: str) -> Result:
        return self._request(
            "POST", "/game-platforms/", json_body={"gameId": str(game_id), "platformId": str(platform_id)}
        )

    def unlink_game_platform(self, link_id: str) -> Result:
        return self._request("DELETE", f"/game-platforms/{link_id}")

    # ------------------------------------------------------------------
    # Event attendees
    # ------------------------------------------------------------------
    def list_event_attendees(self, event_id: str, *, page: int = 1, limit: int = 10) -> Result:
        return self._request(
            "GET", f"/event-attendees/events/{event_id}/attendees", params={"page": page, "limit": limit}
        )

    def join_event(self, event_id: int, user_profile_id: int, joined_at: Optional[str] = None) -> Result:
        body: Dict[str, Any] = {"eventId": event_id, "userProfileId": user_profile_id}
        if joined_at:
            body["joinedAt"] = joined_at
        return self._request("POST", "/event-attendees/", json_body=body)

    def leave_event(self, attendee_id: str) -> Result:
        return self._request("DELETE", f"/event-attendees/{attendee_id}")
