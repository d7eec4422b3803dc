"""Repository for per-game rank tiers."""

from .base import BaseRepository


class GameRankRepository(BaseRepository):
    table = "game_ranks"
    columns = ("name", "image", "order", "game_id")
    sortable = {
        "name": "name",
        "order": "order",
        "gameId": "game_id",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    }
    searchable = ("name",)
