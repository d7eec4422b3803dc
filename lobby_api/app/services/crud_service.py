"""
Generic CRUD rules shared by the catalog resources.

``CrudService`` implements listing with sanitized search and
pagination, lookup, creation with uniqueness checks, partial update and
soft delete on top of any repository exposing the
``BaseRepository`` surface.  Resource services subclass it and only set
the resource name, the read model and the unique columns; a few of them
override a hook (``_check_references``) for foreign keys.

Read‑then‑write sequences run inside ``repository.transaction()`` so
the existence and uniqueness checks and the write are atomic.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel

from ..core.errors import AlreadyDeletedError, ConflictError, NotFoundError, ValidationError
from ..schemas.common import Page, build_pagination

logger = logging.getLogger(__name__)


class CrudService:
    """Create, read, update and soft delete one resource."""

    resource: str = "Resource"
    read_model: Type[BaseModel] = BaseModel
    # Columns unique among rows that have not been deleted.
    unique_fields: Tuple[str, ...] = ()
    # Column -> message raised when the value is already taken.
    conflict_messages: Dict[str, str] = {}
    # Columns that may be explicitly set to null by an update.
    nullable_fields: Tuple[str, ...] = ()
    default_sort: str = "createdAt"

    def __init__(self, repository) -> None:
        self.repo = repository

    # ------------------------------------------------------------------
    # Hooks and helpers
    # ------------------------------------------------------------------
    def _to_read(self, row: Dict[str, Any]) -> BaseModel:
        return self.read_model.model_validate(row)

    def _conflict_message(self, column: str) -> str:
        return self.conflict_messages.get(
            column, f"{self.resource} with this {column.replace('_', ' ')} already exists."
        )

    def _check_unique(self, values: Dict[str, Any], record_id: Optional[int] = None) -> None:
        for column in self.unique_fields:
            if column not in values:
                continue
            existing = self.repo.find_active_by(column, values[column])
            if existing and existing["id"] != record_id:
                raise ConflictError(self._conflict_message(column))

    def _check_references(self, values: Dict[str, Any]) -> None:
        """Verify foreign keys in *values*; the default has none."""

    def _integrity_conflict(self, exc: sqlite3.IntegrityError) -> ConflictError:
        # The partial unique index names the column in its message.
        text = str(exc)
        for column in self.unique_fields:
            if f".{column}" in text:
                return ConflictError(self._conflict_message(column))
        logger.warning("Unexpected integrity error on %s: %s", self.resource, exc)
        return ConflictError(f"A {self.resource.lower()} with these values already exists.")

    def _clean_updates(self, data: BaseModel) -> Dict[str, Any]:
        updates = data.model_dump(mode="json", exclude_unset=True)
        return {k: v for k, v in updates.items() if v is not None or k in self.nullable_fields}

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    async def list_page(
        self,
        *,
        search: Optional[str] = None,
        page: int = 1,
        limit: int = 10,
        sort_by: Optional[str] = None,
        sort_order: str = "desc",
    ) -> Page:
        """Return one page of live records.

        ``sort_by`` must be one of the repository's public sort keys;
        anything else is rejected rather than ignored.
        """
        sort_key = sort_by or self.default_sort
        if sort_key not in self.repo.sortable:
            allowed = ", ".join(sorted(self.repo.sortable))
            raise ValidationError(errors={"sortBy": [f"Invalid sort key. Expected one of: {allowed}"]})
        rows, total = self.repo.search(
            search or None,
            sort_column=self.repo.sortable[sort_key],
            sort_order=sort_order,
            limit=limit,
            offset=(page - 1) * limit,
        )
        return Page[self.read_model](
            data=[self._to_read(row) for row in rows],
            pagination=build_pagination(page, limit, total),
        )

    async def list_all(self) -> List[BaseModel]:
        return [self._to_read(row) for row in self.repo.all_active(order_by=[("name", "asc"), ("id", "asc")])]

    async def get(self, record_id: int, include_deleted: bool = False) -> BaseModel:
        row = self.repo.get(record_id, include_deleted=include_deleted)
        if not row:
            raise NotFoundError(f"{self.resource} not found")
        return self._to_read(row)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    async def create(self, data: BaseModel) -> BaseModel:
        values = data.model_dump(mode="json")
        try:
            with self.repo.transaction():
                self._check_unique(values)
                self._check_references(values)
                row = self.repo.insert(values)
        except sqlite3.IntegrityError as exc:
            raise self._integrity_conflict(exc) from exc
        logger.info("Created %s %s", self.resource.lower(), row["id"])
        return self._to_read(row)

    async def update(self, record_id: int, data: BaseModel) -> BaseModel:
        """Apply the fields set in *data*; at least one field is required."""
        updates = self._clean_updates(data)
        if not updates:
            raise ValidationError("No fields to update")
        try:
            with self.repo.transaction():
                if not self.repo.get(record_id):
                    raise NotFoundError(f"{self.resource} not found or has been deleted")
                self._check_unique(updates, record_id)
                self._check_references(updates)
                row = self.repo.update_by_id(record_id, updates)
        except sqlite3.IntegrityError as exc:
            raise self._integrity_conflict(exc) from exc
        if row is None:
            raise NotFoundError(f"{self.resource} not found or has been deleted")
        logger.info("Updated %s %s: %s", self.resource.lower(), record_id, sorted(updates))
        return self._to_read(row)

    async def delete(self, record_id: int) -> BaseModel:
        """Soft delete a record; deleting twice is a conflict."""
        with self.repo.transaction():
            current = self.repo.get(record_id, include_deleted=True)
            if not current:
                raise NotFoundError(f"{self.resource} not found")
            if current["deleted_at"]:
                raise AlreadyDeletedError(f"{self.resource} already deleted")
            row = self.repo.soft_delete_by_id(record_id)
        logger.info("Soft deleted %s %s", self.resource.lower(), record_id)
        return self._to_read(row)
