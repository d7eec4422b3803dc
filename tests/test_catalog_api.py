"""Integration tests for games, game ranks, platforms, game platforms and distributors."""

from __future__ import annotations

import pytest


def test_game_name_is_unique_among_live_games(client, make_game) -> None:
    make_game("Valorant")

    response = client.post("/api/v1/games/", json={"name": "Valorant"})

    assert response.status_code == 409
    assert response.json() == {"message": "Game with this name already exists."}


def test_game_delete_returns_the_deleted_record(client, make_game) -> None:
    game = make_game("Dota 2", description="Five versus five")

    response = client.delete(f"/api/v1/games/{game['id']}")

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == game["id"]
    assert body["deletedAt"] is not None
    assert client.get(f"/api/v1/games/{game['id']}").json() == {"message": "Game not found"}


def test_game_description_can_be_cleared(client, make_game) -> None:
    game = make_game("Apex", description="Legends")

    body = client.put(f"/api/v1/games/{game['id']}", json={"description": None}).json()

    assert body["description"] is None
    assert body["name"] == "Apex"


@pytest.mark.parametrize(
    ("path", "extra_field", "value"),
    [
        ("platforms", "iconUrl", "https://cdn.example.com/pc.svg"),
        ("distributors", "websiteUrl", "https://store.example.com"),
    ],
)
def test_platform_and_distributor_crud(client, path, extra_field, value) -> None:
    created = client.post(f"/api/v1/{path}/", json={"name": "Steam", extra_field: value})
    assert created.status_code == 201
    record = created.json()
    assert record[extra_field] == value

    duplicate = client.post(f"/api/v1/{path}/", json={"name": "Steam"})
    assert duplicate.status_code == 409

    bad_url = client.post(f"/api/v1/{path}/", json={"name": "Other", extra_field: "ftp://nope"})
    assert bad_url.status_code == 400
    assert extra_field in bad_url.json()["errors"]

    renamed = client.put(f"/api/v1/{path}/{record['id']}", json={"name": "Steam Deck"})
    assert renamed.json()["name"] == "Steam Deck"

    listed = client.get(f"/api/v1/{path}/", params={"search": "deck"}).json()
    assert [row["id"] for row in listed["data"]] == [record["id"]]

    deleted = client.delete(f"/api/v1/{path}/{record['id']}")
    assert deleted.status_code == 200
    assert client.delete(f"/api/v1/{path}/{record['id']}").status_code == 409


def _rank(game_id: str, name: str = "Gold", order: int = 3) -> dict:
    return {"name": name, "image": f"https://cdn.example.com/{name.lower()}.png", "order": order, "gameId": int(game_id)}


def test_game_rank_requires_a_live_game(client, make_game) -> None:
    missing = client.post("/api/v1/game-ranks/", json=_rank("999"))
    assert missing.status_code == 404
    assert missing.json() == {"message": "Game not found"}

    game = make_game("League of Legends")
    client.delete(f"/api/v1/games/{game['id']}")

    deleted_game = client.post("/api/v1/game-ranks/", json=_rank(game["id"]))
    assert deleted_game.status_code == 404


def test_game_rank_order_must_be_positive(client, make_game) -> None:
    game = make_game()

    response = client.post("/api/v1/game-ranks/", json=_rank(game["id"], order=0))

    assert response.status_code == 400
    assert "order" in response.json()["errors"]


def test_game_ranks_default_to_ladder_order(client, make_game) -> None:
    game = make_game()
    for name, order in [("Silver", 2), ("Bronze", 1), ("Gold", 3)]:
        assert client.post("/api/v1/game-ranks/", json=_rank(game["id"], name, order)).status_code == 201

    body = client.get("/api/v1/game-ranks/", params={"sortOrder": "asc"}).json()

    assert [row["name"] for row in body["data"]] == ["Bronze", "Silver", "Gold"]
    assert body["data"][0]["gameId"] == game["id"]


def test_game_rank_delete_returns_no_content(client, make_game) -> None:
    game = make_game()
    rank = client.post("/api/v1/game-ranks/", json=_rank(game["id"])).json()

    response = client.delete(f"/api/v1/game-ranks/{rank['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.delete(f"/api/v1/game-ranks/{rank['id']}").status_code == 409


@pytest.fixture
def game_and_platforms(client, make_game):
    """A game plus two platforms to link it to."""

    game = make_game("Rocket League")
    pc = client.post("/api/v1/platforms/", json={"name": "PC"}).json()
    console = client.post("/api/v1/platforms/", json={"name": "Console"}).json()
    return game, pc, console


def test_game_platform_link_lifecycle(client, game_and_platforms) -> None:
    game, pc, console = game_and_platforms

    created = client.post("/api/v1/game-platforms/", json={"gameId": game["id"], "platformId": pc["id"]})
    assert created.status_code == 201
    link = created.json()
    assert (link["gameId"], link["platformId"]) == (game["id"], pc["id"])
    assert isinstance(link["id"], str)

    assert client.get(f"/api/v1/game-platforms/{link['id']}").json() == link
    assert client.get("/api/v1/game-platforms/").json() == [link]

    moved = client.put(f"/api/v1/game-platforms/{link['id']}", json={"platformId": console["id"]})
    assert moved.status_code == 200
    assert moved.json()["platformId"] == console["id"]
    assert moved.json()["updatedAt"] is not None

    deleted = client.delete(f"/api/v1/game-platforms/{link['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["id"] == link["id"]
    missing = client.get(f"/api/v1/game-platforms/{link['id']}")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Game platform not found"}


def test_game_platform_pair_is_unique(client, game_and_platforms) -> None:
    game, pc, console = game_and_platforms
    client.post("/api/v1/game-platforms/", json={"gameId": game["id"], "platformId": pc["id"]})
    other = client.post("/api/v1/game-platforms/", json={"gameId": game["id"], "platformId": console["id"]}).json()

    duplicate = client.post("/api/v1/game-platforms/", json={"gameId": game["id"], "platformId": pc["id"]})
    moved_onto_existing = client.put(f"/api/v1/game-platforms/{other['id']}", json={"platformId": pc["id"]})

    assert duplicate.status_code == 409
    assert duplicate.json() == {"message": "Duplicate game-platform combination"}
    assert moved_onto_existing.status_code == 409
    assert moved_onto_existing.json() == {"message": "Duplicate game-platform combination"}


def test_game_platform_requires_live_game_and_platform(client, game_and_platforms) -> None:
    game, pc, _ = game_and_platforms

    no_game = client.post("/api/v1/game-platforms/", json={"gameId": "999", "platformId": pc["id"]})
    no_platform = client.post("/api/v1/game-platforms/", json={"gameId": game["id"], "platformId": "999"})

    assert no_game.status_code == 404
    assert no_game.json() == {"message": "Game not found"}
    assert no_platform.status_code == 404
    assert no_platform.json() == {"message": "Platform not found"}


@pytest.mark.parametrize(
    "body",
    [
        {"platformId": "1"},
        {"gameId": "abc", "platformId": "1"},
        {"gameId": "1", "platformId": "-2"},
    ],
)
def test_game_platform_create_rejects_bad_ids(client, body) -> None:
    response = client.post("/api/v1/game-platforms/", json=body)

    assert response.status_code == 400
    assert set(response.json()["errors"]) <= {"gameId", "platformId"}


def test_game_platform_update_needs_a_field(client, game_and_platforms) -> None:
    game, pc, _ = game_and_platforms
    link = client.post("/api/v1/game-platforms/", json={"gameId": game["id"], "platformId": pc["id"]}).json()

    empty = client.put(f"/api/v1/game-platforms/{link['id']}", json={})
    unknown = client.put("/api/v1/game-platforms/999", json={"gameId": game["id"]})
    bad_id = client.get("/api/v1/game-platforms/abc")

    assert empty.status_code == 400
    assert empty.json() == {"message": "No valid data provided"}
    assert unknown.status_code == 404
    assert bad_id.status_code == 400
    assert bad_id.json() == {"message": "Invalid id"}
