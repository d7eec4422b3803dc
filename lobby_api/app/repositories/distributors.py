"""Repository for game distributors (storefronts and publishers)."""

from .base import BaseRepository


class DistributorRepository(BaseRepository):
    table = "distributors"
    columns = ("name", "website_url")
    sortable = {"name": "name", "createdAt": "created_at", "updatedAt": "updated_at"}
    searchable = ("name", "website_url")
