"""
Business logic for game platform links.

Links point at a live game and a live platform, and each
``(game, platform)`` pair exists at most once.  Deleting a link removes
the row; the deleted record is returned to the caller.
"""

import logging
import sqlite3
from typing import Any, Dict, List

from ..core.errors import ConflictError, NotFoundError, ValidationError
from ..schemas.game_platform import GamePlatformCreate, GamePlatformRead, GamePlatformUpdate

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Duplicate game-platform combination"


class GamePlatformService:
    def __init__(self, links, games, platforms) -> None:
        self.links = links
        self.games = games
        self.platforms = platforms

    def _check_references(self, values: Dict[str, Any]) -> None:
        if "game_id" in values and not self.games.get(values["game_id"]):
            raise NotFoundError("Game not found")
        if "platform_id" in values and not self.platforms.get(values["platform_id"]):
            raise NotFoundError("Platform not found")

    def _check_pair(self, game_id: int, platform_id: int, record_id: int = None) -> None:
        existing = self.links.find_pair(game_id, platform_id)
        if existing and existing["id"] != record_id:
            raise ConflictError(DUPLICATE_MESSAGE)

    async def list_all(self) -> List[GamePlatformRead]:
        return [GamePlatformRead.model_validate(row) for row in self.links.find(order_by=[("id", "asc")])]

    async def get(self, link_id: int) -> GamePlatformRead:
        row = self.links.get(link_id)
        if not row:
            raise NotFoundError("Game platform not found")
        return GamePlatformRead.model_validate(row)

    async def create(self, data: GamePlatformCreate) -> GamePlatformRead:
        values = {"game_id": int(data.game_id), "platform_id": int(data.platform_id)}
        try:
            with self.links.transaction():
                self._check_references(values)
                self._check_pair(values["game_id"], values["platform_id"])
                row = self.links.insert(values)
        except sqlite3.IntegrityError as exc:
            raise ConflictError(DUPLICATE_MESSAGE) from exc
        logger.info("Linked game %s to platform %s", values["game_id"], values["platform_id"])
        return GamePlatformRead.model_validate(row)

    async def update(self, link_id: int, data: GamePlatformUpdate) -> GamePlatformRead:
        updates = {
            key: int(value)
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }
        if not updates:
            raise ValidationError("No valid data provided")
        try:
            with self.links.transaction():
                current = self.links.get(link_id)
                if not current:
                    raise NotFoundError("Game platform not found")
                self._check_references(updates)
                merged = {**current, **updates}
                self._check_pair(merged["game_id"], merged["platform_id"], link_id)
                row = self.links.update_by_id(link_id, updates)
        except sqlite3.IntegrityError as exc:
            raise ConflictError(DUPLICATE_MESSAGE) from exc
        logger.info("Updated game platform link %s: %s", link_id, sorted(updates))
        return GamePlatformRead.model_validate(row)

    async def delete(self, link_id: int) -> GamePlatformRead:
        with self.links.transaction():
            removed = self.links.remove(link_id)
        if removed is None:
            raise NotFoundError("Game platform not found")
        logger.info("Removed game platform link %s", link_id)
        return GamePlatformRead.model_validate(removed)
