"""Repository base class used by all concrete repositories.

A repository wraps one SQLite table.  Sub-classes declare the table
name, the writable columns, the columns a list may be sorted by and the
columns free-text search looks at; :class:`BaseRepository` turns those
declarations into parameterised SQL.

Filters are expressed with :class:`Where`, a small predicate builder
that keeps the SQL fragment and its parameters together so values are
never interpolated into the statement text.  The soft-delete exclusion
lives in one place, :meth:`BaseRepository.active`, and every default
read goes through it.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core.db import transaction, utc_now

LIKE_ESCAPE = "\\"


def escape_like(term: str) -> str:
    """Turn *term* into a LIKE pattern that matches it as a literal substring.

    The escape character itself, ``%`` and ``_`` are prefixed with
    ``\\`` and the result is wrapped in unescaped ``%`` wildcards.  The
    pattern must be used together with ``ESCAPE '\\'``.
    """
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def quote(column: str) -> str:
    return f'"{column}"'


class Where:
    """A SQL predicate and its bound parameters.

    An empty ``Where()`` matches every row.  Predicates combine with
    ``&``; :meth:`contains_any` builds the OR across search columns.
    """

    def __init__(self, sql: str = "", params: Sequence[Any] = ()) -> None:
        self.sql = sql
        self.params = tuple(params)

    def __bool__(self) -> bool:
        return bool(self.sql)

    def __and__(self, other: "Where") -> "Where":
        if not self:
            return other
        if not other:
            return self
        return Where(f"({self.sql}) AND ({other.sql})", self.params + other.params)

    def __repr__(self) -> str:
        return f"Where({self.sql!r}, {self.params!r})"

    @classmethod
    def eq(cls, column: str, value: Any) -> "Where":
        return cls(f"{quote(column)} = ?", (value,))

    @classmethod
    def is_null(cls, column: str) -> "Where":
        return cls(f"{quote(column)} IS NULL")

    @classmethod
    def contains_any(cls, columns: Iterable[str], term: str) -> "Where":
        """Case-insensitive literal substring match on any of *columns*.

        Both sides go through the connection's ``casefold`` function, so
        non-ASCII letters fold too (``ESPAÑOL`` matches ``español``).
        """
        pattern = escape_like(term.casefold())
        parts = [f"casefold({quote(c)}) LIKE ? ESCAPE '{LIKE_ESCAPE}'" for c in columns]
        if not parts:
            return cls()
        return cls(" OR ".join(parts), (pattern,) * len(parts))

    def clause(self) -> str:
        return f" WHERE {self.sql}" if self else ""


class BaseRepository:
    """Parameterised CRUD over a single table.

    ``columns`` lists the columns callers may write; ``id`` and the
    timestamp columns are managed here.  Rows are returned as plain
    dictionaries keyed by column name.
    """

    table: str = ""
    columns: Tuple[str, ...] = ()
    # Public sort key -> column.
    sortable: Dict[str, str] = {"createdAt": "created_at"}
    searchable: Tuple[str, ...] = ()
    soft_delete: bool = True

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn
        self._log = logging.getLogger(f"lobby_api.repository.{type(self).__name__}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @contextmanager
    def transaction(self) -> Iterator["BaseRepository"]:
        with transaction(self.conn):
            yield self

    def active(self, where: Optional[Where] = None) -> Where:
        """Restrict *where* to rows that have not been soft deleted."""
        base = where or Where()
        if not self.soft_delete:
            return base
        return base & Where.is_null("deleted_at")

    def _check_columns(self, values: Dict[str, Any]) -> None:
        unknown = set(values) - set(self.columns) - {"updated_at", "deleted_at", "created_at"}
        if unknown:
            raise ValueError(f"Unknown columns for {self.table}: {sorted(unknown)}")

    def _select_sql(self) -> str:
        return f"SELECT * FROM {quote(self.table)}"

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def find(
        self,
        where: Optional[Where] = None,
        *,
        order_by: Optional[Sequence[Tuple[str, str]]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        where = where or Where()
        sql = self._select_sql() + where.clause()
        params: List[Any] = list(where.params)
        if order_by:
            sql += " ORDER BY " + ", ".join(
                f"{quote(column)} {'ASC' if direction == 'asc' else 'DESC'}"
                for column, direction in order_by
            )
        if limit is not None:
            sql += " LIMIT ? OFFSET ?"
            params.extend([limit, offset or 0])
        rows = self.conn.execute(sql, tuple(params)).fetchall()
        return [dict(row) for row in rows]

    def first(self, where: Where) -> Optional[Dict[str, Any]]:
        rows = self.find(where, limit=1)
        return rows[0] if rows else None

    def count(self, where: Optional[Where] = None) -> int:
        where = where or Where()
        sql = f"SELECT COUNT(*) AS total FROM {quote(self.table)}" + where.clause()
        return self.conn.execute(sql, where.params).fetchone()["total"]

    def get(self, record_id: int, include_deleted: bool = False) -> Optional[Dict[str, Any]]:
        where = Where.eq("id", record_id)
        return self.first(where if include_deleted else self.active(where))

    def find_active_by(self, column: str, value: Any) -> Optional[Dict[str, Any]]:
        """Return the live row whose *column* equals *value*, if any."""
        return self.first(self.active(Where.eq(column, value)))

    def all_active(self, order_by: Sequence[Tuple[str, str]] = (("id", "asc"),)) -> List[Dict[str, Any]]:
        return self.find(self.active(), order_by=order_by)

    def search(
        self,
        term: Optional[str],
        *,
        sort_column: str = "created_at",
        sort_order: str = "desc",
        limit: int = 10,
        offset: int = 0,
        where: Optional[Where] = None,
    ) -> Tuple[List[Dict[str, Any]], int]:
        """Return one page of live rows and the total number of matches.

        The data and count queries share the same predicate.  An empty
        *term* applies no search filter.
        """
        predicate = self.active(where)
        if term:
            predicate = predicate & Where.contains_any(self.searchable, term)
        order = [(sort_column, sort_order)]
        if sort_column != "id":
            order.append(("id", sort_order))
        rows = self.find(predicate, order_by=order, limit=limit, offset=offset)
        return rows, self.count(predicate)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def insert(self, values: Dict[str, Any]) -> Dict[str, Any]:
        values = dict(values)
        values.setdefault("created_at", utc_now())
        self._check_columns(values)
        names = ", ".join(quote(c) for c in values)
        placeholders = ", ".join("?" for _ in values)
        cursor = self.conn.execute(
            f"INSERT INTO {quote(self.table)} ({names}) VALUES ({placeholders})",
            tuple(values.values()),
        )
        self._log.debug("Inserted %s row %s", self.table, cursor.lastrowid)
        return self.get(cursor.lastrowid, include_deleted=True)

    def update(self, where: Where, values: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Apply *values* to every row matching *where*; return the updated rows."""
        if not values:
            return []
        self._check_columns(values)
        ids = [row["id"] for row in self.find(where)]
        if not ids:
            return []
        assignments = ", ".join(f"{quote(c)} = ?" for c in values)
        id_list = ", ".join("?" for _ in ids)
        self.conn.execute(
            f"UPDATE {quote(self.table)} SET {assignments} WHERE id IN ({id_list})",
            tuple(values.values()) + tuple(ids),
        )
        return self.find(Where(f"id IN ({id_list})", ids), order_by=[("id", "asc")])

    def update_by_id(
        self, record_id: int, values: Dict[str, Any], *, active_only: bool = True
    ) -> Optional[Dict[str, Any]]:
        """Update one row and stamp ``updated_at``; ``None`` if nothing matched."""
        values = dict(values)
        values.setdefault("updated_at", utc_now())
        where = Where.eq("id", record_id)
        rows = self.update(self.active(where) if active_only else where, values)
        return rows[0] if rows else None

    def soft_delete_by_id(self, record_id: int) -> Optional[Dict[str, Any]]:
        now = utc_now()
        return self.update_by_id(record_id, {"deleted_at": now, "updated_at": now})

    def delete(self, where: Where) -> List[Dict[str, Any]]:
        """Physically remove matching rows and return them."""
        rows = self.find(where)
        if rows:
            self.conn.execute(f"DELETE FROM {quote(self.table)}" + where.clause(), where.params)
        return rows
