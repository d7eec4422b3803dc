"""Repository for the user <-> game favourites link table."""

from typing import Any, Dict, List, Optional

from .base import BaseRepository, Where


class FavoriteGameRepository(BaseRepository):
    table = "user_favorite_games"
    columns = ("user_profile_id", "game_id")
    sortable = {"createdAt": "created_at"}
    # Removing a favourite deletes the link row.
    soft_delete = False

    def find_pair(self, user_profile_id: int, game_id: int) -> Optional[Dict[str, Any]]:
        return self.first(Where.eq("user_profile_id", user_profile_id) & Where.eq("game_id", game_id))

    def remove_pair(self, user_profile_id: int, game_id: int) -> Optional[Dict[str, Any]]:
        rows = self.delete(Where.eq("user_profile_id", user_profile_id) & Where.eq("game_id", game_id))
        return rows[0] if rows else None

    def list_with_games(self, user_profile_id: int) -> List[Dict[str, Any]]:
        """Favourites of one user joined with the game name, oldest first."""
        rows = self.conn.execute(
            """
            SELECT f.id AS id, f.game_id AS game_id, g.name AS game_name, f.created_at AS created_at
            FROM user_favorite_games f
            JOIN games g ON g.id = f.game_id
            WHERE f.user_profile_id = ?
            ORDER BY f.created_at ASC, f.id ASC
            """,
            (user_profile_id,),
        ).fetchall()
        return [dict(row) for row in rows]
