"""Integration tests for user profiles and their optimistic concurrency."""

from __future__ import annotations

BASE = "/api/v1/user-profiles"


def test_create_returns_envelope_with_initial_version(client) -> None:
    response = client.post(f"{BASE}/", json={"userKeycloakId": "kc-1", "userName": "  ace  ", "region": "europe"})

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "User profile created successfully"
    profile = body["data"]
    assert profile["userName"] == "ace"
    assert profile["rowVersion"] == "0"
    assert profile["region"] == "europe"
    assert profile["gender"] == "unknown"
    assert profile["lastOnline"]


def test_create_rejects_duplicates_and_bad_enums(client, make_profile) -> None:
    make_profile("ace", keycloak_id="kc-1")

    same_kc = client.post(f"{BASE}/", json={"userKeycloakId": "kc-1", "userName": "other"})
    same_name = client.post(f"{BASE}/", json={"userKeycloakId": "kc-2", "userName": "ace"})
    bad_enum = client.post(f"{BASE}/", json={"userKeycloakId": "kc-3", "userName": "x", "gender": "robot"})

    assert same_kc.status_code == 409
    assert same_kc.json() == {"message": "Keycloak ID already exists"}
    assert same_name.status_code == 409
    assert same_name.json() == {"message": "Username already exists"}
    assert bad_enum.status_code == 400
    assert "gender" in bad_enum.json()["errors"]


def test_get_by_id_and_user_name(client, make_profile) -> None:
    profile = make_profile("ace")

    by_id = client.get(f"{BASE}/{profile['id']}")
    by_name = client.get(f"{BASE}/by-username/ace")
    missing = client.get(f"{BASE}/by-username/ghost")

    assert by_id.json()["id"] == profile["id"]
    assert by_name.json()["id"] == profile["id"]
    assert missing.status_code == 404
    assert missing.json() == {"message": "User not found"}


def test_patch_with_current_version_increments_it(client, make_profile) -> None:
    profile = make_profile("ace")

    first = client.patch(f"{BASE}/{profile['id']}", json={"bio": "Tank", "rowVersion": "0"})
    second = client.patch(f"{BASE}/{profile['id']}", json={"bio": "Healer", "rowVersion": "1"})

    assert first.status_code == 200
    assert first.json()["message"] == "User profile updated successfully"
    assert first.json()["data"]["rowVersion"] == "1"
    assert second.json()["data"]["rowVersion"] == "2"
    assert second.json()["data"]["bio"] == "Healer"


def test_patch_with_stale_version_conflicts_and_keeps_record(client, make_profile) -> None:
    profile = make_profile("ace")
    client.patch(f"{BASE}/{profile['id']}", json={"bio": "first writer", "rowVersion": "0"})

    stale = client.patch(f"{BASE}/{profile['id']}", json={"bio": "second writer", "rowVersion": "0"})

    assert stale.status_code == 409
    assert stale.json() == {"message": "Resource has been modified by another user"}
    stored = client.get(f"{BASE}/{profile['id']}").json()
    assert stored["bio"] == "first writer"
    assert stored["rowVersion"] == "1"


def test_patch_validation(client, make_profile) -> None:
    profile = make_profile("ace")

    no_version = client.patch(f"{BASE}/{profile['id']}", json={"bio": "x"})
    numeric_version = client.patch(f"{BASE}/{profile['id']}", json={"bio": "x", "rowVersion": 0})
    nothing = client.patch(f"{BASE}/{profile['id']}", json={"rowVersion": "0"})
    too_long = client.patch(f"{BASE}/{profile['id']}", json={"bio": "x" * 501, "rowVersion": "0"})

    assert no_version.status_code == 400
    assert "rowVersion" in no_version.json()["errors"]
    assert numeric_version.status_code == 400
    assert nothing.status_code == 400
    assert nothing.json() == {"message": "No data provided"}
    assert too_long.status_code == 400
    assert "bio" in too_long.json()["errors"]


def test_patch_user_name_clash_conflicts(client, make_profile) -> None:
    profile = make_profile("ace")
    make_profile("bolt")

    response = client.patch(f"{BASE}/{profile['id']}", json={"userName": "bolt", "rowVersion": "0"})

    assert response.status_code == 409
    assert response.json() == {"message": "Username already exists"}


def test_delete_twice_conflicts_and_hides_profile(client, make_profile) -> None:
    profile = make_profile("ace")

    first = client.delete(f"{BASE}/{profile['id']}")
    second = client.delete(f"{BASE}/{profile['id']}")

    assert first.status_code == 200
    assert first.json()["message"] == "User profile deleted successfully"
    assert first.json()["data"]["rowVersion"] == "1"
    assert second.status_code == 409
    assert second.json() == {"message": "User already deleted"}
    assert client.get(f"{BASE}/{profile['id']}").status_code == 404
    assert client.get(f"{BASE}/{profile['id']}", params={"includeDeleted": "true"}).status_code == 200

    patched = client.patch(f"{BASE}/{profile['id']}", json={"bio": "x", "rowVersion": "1"})
    assert patched.status_code == 404


def test_delete_with_stale_version_conflicts(client, make_profile) -> None:
    profile = make_profile("ace")

    response = client.delete(f"{BASE}/{profile['id']}", params={"rowVersion": "3"})

    assert response.status_code == 409
    assert client.get(f"{BASE}/{profile['id']}").status_code == 200


def test_list_searches_names(client, make_profile) -> None:
    make_profile("ace", firstName="Ada")
    make_profile("bolt", lastName="Lovelace")
    make_profile("crow")

    body = client.get(f"{BASE}/", params={"search": "la", "sortBy": "userName", "sortOrder": "asc"}).json()

    assert [row["userName"] for row in body["data"]] == ["bolt"]
    assert body["pagination"]["totalRecords"] == 1
