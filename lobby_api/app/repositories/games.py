"""Repository for the ``games`` catalog referenced by ranks and favourites."""

from .base import BaseRepository


class GameRepository(BaseRepository):
    table = "games"
    columns = ("name", "description")
    sortable = {"name": "name", "createdAt": "created_at", "updatedAt": "updated_at"}
    searchable = ("name", "description")
