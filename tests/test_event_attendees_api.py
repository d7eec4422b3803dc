"""Integration tests for event attendance."""

from __future__ import annotations

BASE = "/api/v1/event-attendees"


def join(client, event_id: int, user_id: str, **extra):
    return client.post(f"{BASE}/", json={"eventId": event_id, "userProfileId": int(user_id), **extra})


def test_join_returns_wrapped_record(client, make_profile) -> None:
    user = make_profile("ace")

    response = join(client, 7, user["id"])

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["eventId"] == "7"
    assert data["userProfileId"] == user["id"]
    assert data["joinedAt"]

    fetched = client.get(f"{BASE}/{data['id']}")
    assert fetched.json() == {"data": data}


def test_joining_twice_conflicts_until_the_user_leaves(client, make_profile) -> None:
    user = make_profile("ace")
    first = join(client, 7, user["id"]).json()["data"]

    again = join(client, 7, user["id"])
    assert again.status_code == 409
    assert again.json() == {"message": "User is already attending"}

    left = client.delete(f"{BASE}/{first['id']}")
    assert left.status_code == 200
    assert left.json() == {"message": "Event attendee removed successfully"}
    assert client.get(f"{BASE}/{first['id']}").status_code == 404

    assert join(client, 7, user["id"]).status_code == 201


def test_unknown_profile_cannot_join(client) -> None:
    response = join(client, 7, "999")

    assert response.status_code == 404
    assert response.json() == {"message": "User not found"}


def test_event_id_must_be_positive(client, make_profile) -> None:
    user = make_profile("ace")

    response = join(client, 0, user["id"])

    assert response.status_code == 400
    assert "eventId" in response.json()["errors"]


def test_attendees_of_event_ordered_by_join_time(client, make_profile) -> None:
    users = [make_profile(name) for name in ("ace", "bolt", "crow")]
    join(client, 1, users[0]["id"], joinedAt="2026-01-01T10:00:00Z")
    join(client, 1, users[1]["id"], joinedAt="2026-01-01T12:00:00Z")
    join(client, 2, users[2]["id"], joinedAt="2026-01-01T11:00:00Z")

    body = client.get(f"{BASE}/events/1/attendees").json()

    assert [row["userProfileId"] for row in body["data"]] == [users[1]["id"], users[0]["id"]]
    assert body["pagination"]["totalRecords"] == 2

    everything = client.get(f"{BASE}/").json()
    assert everything["pagination"]["totalRecords"] == 3


def test_unknown_attendee_is_not_found(client) -> None:
    missing = client.get(f"{BASE}/31337")
    bad_id = client.delete(f"{BASE}/abc")

    assert missing.status_code == 404
    assert missing.json() == {"message": "Event attendee not found"}
    assert bad_id.status_code == 400
