"""Repository for gaming platforms (PC, consoles, mobile...)."""

from .base import BaseRepository


class PlatformRepository(BaseRepository):
    table = "platforms"
    columns = ("name", "icon_url")
    sortable = {"name": "name", "createdAt": "created_at", "updatedAt": "updated_at"}
    searchable = ("name",)
