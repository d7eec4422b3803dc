"""Repository for player profiles.

Profiles carry a ``row_version`` column used for optimistic concurrency;
the version rules themselves live in :mod:`..services.versioning`.
"""

from typing import Any, Dict, Optional

from .base import BaseRepository, Where


class UserProfileRepository(BaseRepository):
    table = "user_profiles"
    columns = (
        "user_keycloak_id",
        "user_name",
        "first_name",
        "last_name",
        "profile_image_url",
        "banner_image_url",
        "bio",
        "birth_date",
        "gender",
        "region",
        "favorite_game_genre",
        "player_type",
        "industry_role",
        "looking_for",
        "presence_status",
        "last_online",
        "row_version",
    )
    sortable = {
        "userName": "user_name",
        "lastOnline": "last_online",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    }
    searchable = ("user_name", "first_name", "last_name")

    def get_by_user_name(self, user_name: str, include_deleted: bool = False) -> Optional[Dict[str, Any]]:
        where = Where.eq("user_name", user_name)
        return self.first(where if include_deleted else self.active(where))
