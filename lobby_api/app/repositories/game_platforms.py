"""Repository for the game <-> platform availability links."""

from typing import Any, Dict, Optional

from .base import BaseRepository, Where


class GamePlatformRepository(BaseRepository):
    table = "game_platforms"
    columns = ("game_id", "platform_id")
    sortable = {"createdAt": "created_at", "gameId": "game_id", "platformId": "platform_id"}
    # Links are removed physically, like favourites.
    soft_delete = False

    def find_pair(self, game_id: int, platform_id: int) -> Optional[Dict[str, Any]]:
        return self.first(Where.eq("game_id", game_id) & Where.eq("platform_id", platform_id))

    def remove(self, link_id: int) -> Optional[Dict[str, Any]]:
        rows = self.delete(Where.eq("id", link_id))
        return rows[0] if rows else None
