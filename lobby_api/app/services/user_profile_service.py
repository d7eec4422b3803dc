"""
Business logic for user profiles.

Profiles are versioned records.  Every mutation goes through the
compare‑and‑swap protocol below, executed inside one transaction:

1. load the live record (``NotFoundError`` if absent or deleted);
2. compare the caller's ``rowVersion`` with the stored one
   (``VersionConflictError`` on mismatch);
3. when ``userKeycloakId`` or ``userName`` change, make sure no other
   live profile holds the new value (``ConflictError``);
4. write the changed fields, ``updated_at`` and ``row_version + 1``.

Soft delete is the same sequence with the fixed field set
``deleted_at = now``; a profile that is already deleted raises
``AlreadyDeletedError`` before the version is touched.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, Optional

from ..core.db import utc_now
from ..core.errors import AlreadyDeletedError, NotFoundError, ValidationError
from ..schemas.user_profile import UserProfileCreate, UserProfileRead, UserProfileUpdate
from .crud_service import CrudService
from .versioning import INITIAL_ROW_VERSION, ensure_row_version, next_row_version

logger = logging.getLogger(__name__)

# Enum columns fall back to their reserved member when sent as null.
ENUM_FIELDS = (
    "gender",
    "region",
    "favorite_game_genre",
    "player_type",
    "industry_role",
    "looking_for",
    "presence_status",
)


class UserProfileService(CrudService):
    """Service for managing user profiles."""

    resource = "User"
    read_model = UserProfileRead
    unique_fields = ("user_keycloak_id", "user_name")
    conflict_messages = {
        "user_keycloak_id": "Keycloak ID already exists",
        "user_name": "Username already exists",
    }
    nullable_fields = (
        "first_name",
        "last_name",
        "profile_image_url",
        "banner_image_url",
        "bio",
        "birth_date",
    )

    async def get_by_user_name(self, user_name: str, include_deleted: bool = False) -> UserProfileRead:
        row = self.repo.get_by_user_name(user_name, include_deleted=include_deleted)
        if not row:
            raise NotFoundError("User not found")
        return self._to_read(row)

    async def create(self, data: UserProfileCreate) -> UserProfileRead:
        """Insert a new profile with ``rowVersion = "0"``."""
        now = utc_now()
        values = data.model_dump(mode="json")
        values.update(created_at=now, last_online=now, row_version=INITIAL_ROW_VERSION)
        try:
            with self.repo.transaction():
                self._check_unique(values)
                row = self.repo.insert(values)
        except sqlite3.IntegrityError as exc:
            raise self._integrity_conflict(exc) from exc
        logger.info("Created user profile %s (%s)", row["id"], row["user_name"])
        return self._to_read(row)

    def _profile_updates(self, data: UserProfileUpdate) -> Dict[str, Any]:
        updates = data.model_dump(mode="json", exclude_unset=True)
        updates.pop("row_version", None)
        cleaned: Dict[str, Any] = {}
        for key, value in updates.items():
            if value is None and key in ENUM_FIELDS:
                cleaned[key] = "unknown"
            elif value is not None or key in self.nullable_fields:
                cleaned[key] = value
        return cleaned

    async def update(self, record_id: int, data: UserProfileUpdate) -> UserProfileRead:
        """Apply a partial update guarded by ``data.row_version``."""
        updates = self._profile_updates(data)
        if not updates:
            raise ValidationError("No data provided")
        try:
            with self.repo.transaction():
                current = self.repo.get(record_id)
                if not current:
                    raise NotFoundError("User not found")
                ensure_row_version(current["row_version"], data.row_version)
                changed = {k: v for k, v in updates.items() if k in self.unique_fields and v != current[k]}
                self._check_unique(changed, record_id)
                updates["row_version"] = next_row_version(current["row_version"])
                row = self.repo.update_by_id(record_id, updates)
                if row is None:
                    raise NotFoundError("User not found")
        except sqlite3.IntegrityError as exc:
            raise self._integrity_conflict(exc) from exc
        logger.info(
            "Updated user profile %s to row version %s: %s",
            record_id,
            row["row_version"],
            sorted(k for k in updates if k != "row_version"),
        )
        return self._to_read(row)

    async def delete(self, record_id: int, expected_row_version: Optional[str] = None) -> UserProfileRead:
        """Soft delete a profile, advancing its row version.

        When *expected_row_version* is given it is checked exactly like
        an update's ``rowVersion``.
        """
        with self.repo.transaction():
            current = self.repo.get(record_id, include_deleted=True)
            if not current:
                raise NotFoundError("User not found")
            if current["deleted_at"]:
                raise AlreadyDeletedError("User already deleted")
            if expected_row_version is not None:
                ensure_row_version(current["row_version"], expected_row_version)
            now = utc_now()
            row = self.repo.update_by_id(
                record_id,
                {
                    "deleted_at": now,
                    "updated_at": now,
                    "row_version": next_row_version(current["row_version"]),
                },
            )
        logger.info("Soft deleted user profile %s", record_id)
        return self._to_read(row)

