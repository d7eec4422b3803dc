"""
Business logic for a user's favourite games.

A favourite is a plain link row between a live user profile and a live
game.  The pair is unique; removing a favourite deletes the row.
"""

import logging
import sqlite3
from typing import List

from ..core.errors import ConflictError, NotFoundError
from ..schemas.favorite_game import FavoriteGameCreate, FavoriteGameListItem, FavoriteGameRead

logger = logging.getLogger(__name__)


class FavoriteGameService:
    """Add, list and remove favourite games of one user."""

    def __init__(self, favorites, profiles, games) -> None:
        self.favorites = favorites
        self.profiles = profiles
        self.games = games

    def _require_user(self, user_profile_id: int) -> None:
        if not self.profiles.get(user_profile_id):
            raise NotFoundError("User not found")

    async def add(self, user_profile_id: int, data: FavoriteGameCreate) -> FavoriteGameRead:
        """Link *data.game_id* to the user.

        Raises
        ------
        NotFoundError
            If the user or the game does not exist or has been deleted.
        ConflictError
            If the game is already among the user's favourites.
        """
        game_id = int(data.game_id)
        try:
            with self.favorites.transaction():
                self._require_user(user_profile_id)
                if not self.games.get(game_id):
                    raise NotFoundError("Game not found")
                if self.favorites.find_pair(user_profile_id, game_id):
                    raise ConflictError("Game is already in favorites")
                row = self.favorites.insert({"user_profile_id": user_profile_id, "game_id": game_id})
        except sqlite3.IntegrityError as exc:
            raise ConflictError("Game is already in favorites") from exc
        logger.info("User %s added game %s to favourites", user_profile_id, game_id)
        return FavoriteGameRead.model_validate(row)

    async def list_for_user(self, user_profile_id: int) -> List[FavoriteGameListItem]:
        self._require_user(user_profile_id)
        return [FavoriteGameListItem.model_validate(row) for row in self.favorites.list_with_games(user_profile_id)]

    async def remove(self, user_profile_id: int, game_id: int) -> None:
        with self.favorites.transaction():
            removed = self.favorites.remove_pair(user_profile_id, game_id)
        if removed is None:
            raise NotFoundError("Favorite not found")
        logger.info("User %s removed game %s from favourites", user_profile_id, game_id)
