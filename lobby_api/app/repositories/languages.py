"""Repository for the ``languages`` catalog."""

from .base import BaseRepository


class LanguageRepository(BaseRepository):
    table = "languages"
    columns = ("code", "name", "flag_url")
    sortable = {
        "name": "name",
        "code": "code",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    }
    searchable = ("name", "code")
