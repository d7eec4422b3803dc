"""Integration tests for the language endpoints."""

from __future__ import annotations

import pytest

BASE = "/api/v1/languages"


def create(client, code: str, name: str, **extra):
    response = client.post(f"{BASE}/", json={"code": code, "name": name, **extra})
    assert response.status_code == 201, response.text
    return response.json()


def test_create_returns_camel_case_record_with_string_id(client) -> None:
    body = create(client, "en", "English", flagUrl="https://flags.example.com/gb.svg")

    assert isinstance(body["id"], str) and body["id"].isdigit()
    assert body["flagUrl"] == "https://flags.example.com/gb.svg"
    assert body["createdAt"]
    assert body["deletedAt"] is None


def test_duplicate_code_and_name_conflict(client) -> None:
    create(client, "en", "English")

    by_code = client.post(f"{BASE}/", json={"code": "en", "name": "Other"})
    by_name = client.post(f"{BASE}/", json={"code": "xx", "name": "English"})

    assert by_code.status_code == 409
    assert by_code.json() == {"message": "Language with this code already exists."}
    assert by_name.status_code == 409
    assert by_name.json() == {"message": "Language with this name already exists."}


def test_invalid_payload_returns_field_errors(client) -> None:
    response = client.post(f"{BASE}/", json={"code": "", "name": "English", "flagUrl": "not a url"})

    assert response.status_code == 400
    errors = response.json()["errors"]
    assert "code" in errors
    assert "flagUrl" in errors


def test_pagination_splits_records_across_pages(client) -> None:
    for code, name in [("en", "English"), ("de", "German"), ("fr", "French")]:
        create(client, code, name)

    first = client.get(f"{BASE}/", params={"page": 1, "limit": 2}).json()
    second = client.get(f"{BASE}/", params={"page": 2, "limit": 2}).json()

    assert first["pagination"] == {"page": 1, "limit": 2, "totalPages": 2, "totalRecords": 3}
    assert [row["code"] for row in first["data"]] == ["fr", "de"]
    assert [row["code"] for row in second["data"]] == ["en"]


def test_empty_list_has_zero_pages(client) -> None:
    body = client.get(f"{BASE}/").json()

    assert body == {"data": [], "pagination": {"page": 1, "limit": 10, "totalPages": 0, "totalRecords": 0}}


def test_sort_by_name_ascending(client) -> None:
    for code, name in [("de", "German"), ("en", "English"), ("fr", "French")]:
        create(client, code, name)

    body = client.get(f"{BASE}/", params={"sortBy": "name", "sortOrder": "asc"}).json()

    assert [row["name"] for row in body["data"]] == ["English", "French", "German"]


@pytest.mark.parametrize(
    ("params", "field"),
    [
        ({"sortBy": "flagUrl"}, "sortBy"),
        ({"sortOrder": "sideways"}, "sortOrder"),
        ({"limit": 0}, "limit"),
        ({"page": 0}, "page"),
    ],
)
def test_invalid_list_parameters_are_rejected(client, params, field) -> None:
    response = client.get(f"{BASE}/", params=params)

    assert response.status_code == 400
    assert field in response.json()["errors"]


def test_search_treats_wildcards_literally(client) -> None:
    create(client, "p1", "100% Pure")
    create(client, "p2", "1000 Pure")
    create(client, "u1", "snake_case")
    create(client, "u2", "snakeXcase")

    percent = client.get(f"{BASE}/", params={"search": "100%"}).json()
    underscore = client.get(f"{BASE}/", params={"search": "e_c"}).json()

    assert [row["code"] for row in percent["data"]] == ["p1"]
    assert percent["pagination"]["totalRecords"] == 1
    assert [row["code"] for row in underscore["data"]] == ["u1"]


def test_all_returns_live_languages_ordered_by_name(client) -> None:
    create(client, "fr", "French")
    english = create(client, "en", "English")
    create(client, "de", "German")
    client.delete(f"{BASE}/{english['id']}")

    body = client.get(f"{BASE}/all").json()

    assert [row["name"] for row in body] == ["French", "German"]


def test_get_rejects_non_numeric_ids(client) -> None:
    for bad in ("abc", "-1", "1.5"):
        response = client.get(f"{BASE}/{bad}")
        assert response.status_code == 400
        assert response.json() == {"message": "Invalid id"}


def test_update_changes_only_given_fields(client) -> None:
    language = create(client, "en", "English", flagUrl="https://flags.example.com/gb.svg")

    response = client.put(f"{BASE}/{language['id']}", json={"name": "English (UK)"})

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "English (UK)"
    assert body["code"] == "en"
    assert body["flagUrl"] == "https://flags.example.com/gb.svg"
    assert body["updatedAt"]


def test_update_flag_url_to_null_clears_it(client) -> None:
    language = create(client, "en", "English", flagUrl="https://flags.example.com/gb.svg")

    body = client.put(f"{BASE}/{language['id']}", json={"flagUrl": None}).json()

    assert body["flagUrl"] is None


def test_update_errors(client) -> None:
    language = create(client, "en", "English")
    create(client, "de", "German")

    empty = client.put(f"{BASE}/{language['id']}", json={})
    clash = client.put(f"{BASE}/{language['id']}", json={"code": "de"})
    missing = client.put(f"{BASE}/999", json={"name": "Nope"})

    assert empty.status_code == 400
    assert empty.json() == {"message": "No fields to update"}
    assert clash.status_code == 409
    assert clash.json() == {"message": "Language with this code already exists."}
    assert missing.status_code == 404
    assert missing.json() == {"message": "Language not found or has been deleted"}


def test_delete_is_soft_and_not_repeatable(client) -> None:
    language = create(client, "en", "English")

    first = client.delete(f"{BASE}/{language['id']}")
    second = client.delete(f"{BASE}/{language['id']}")

    assert first.status_code == 200
    assert first.json() == {"message": "Language deleted successfully (soft delete)"}
    assert second.status_code == 409
    assert second.json() == {"message": "Language already deleted"}

    assert client.get(f"{BASE}/{language['id']}").status_code == 404
    kept = client.get(f"{BASE}/{language['id']}", params={"includeDeleted": "true"}).json()
    assert kept["deletedAt"] is not None

    update = client.put(f"{BASE}/{language['id']}", json={"name": "Back"})
    assert update.status_code == 404


def test_deleted_code_can_be_reused_by_a_new_row(client) -> None:
    old = create(client, "en", "English")
    client.delete(f"{BASE}/{old['id']}")

    new = create(client, "en", "English")

    assert new["id"] != old["id"]
    assert client.get(f"{BASE}/{old['id']}", params={"includeDeleted": "true"}).json()["deletedAt"]


def test_delete_unknown_language_is_not_found(client) -> None:
    response = client.delete(f"{BASE}/424242")

    assert response.status_code == 404
    assert response.json() == {"message": "Language not found"}
