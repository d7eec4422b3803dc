"""
Services for the smaller catalog resources.

Games, platforms and distributors are unique by name; game ranks belong
to a game, which must exist and not be deleted.
"""

from typing import Any, Dict

from ..core.errors import NotFoundError
from ..schemas.distributor import DistributorRead
from ..schemas.game import GameRead
from ..schemas.game_rank import GameRankRead
from ..schemas.platform import PlatformRead
from .crud_service import CrudService


class GameService(CrudService):
    resource = "Game"
    read_model = GameRead
    unique_fields = ("name",)
    nullable_fields = ("description",)


class PlatformService(CrudService):
    resource = "Platform"
    read_model = PlatformRead
    unique_fields = ("name",)
    nullable_fields = ("icon_url",)


class DistributorService(CrudService):
    resource = "Distributor"
    read_model = DistributorRead
    unique_fields = ("name",)
    nullable_fields = ("website_url",)


class GameRankService(CrudService):
    resource = "Game rank"
    read_model = GameRankRead
    default_sort = "order"

    def __init__(self, repository, games) -> None:
        super().__init__(repository)
        self.games = games

    def _check_references(self, values: Dict[str, Any]) -> None:
        if "game_id" in values and not self.games.get(values["game_id"]):
            raise NotFoundError("Game not found")
