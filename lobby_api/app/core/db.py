"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a FastAPI dependency that hands one connection
to each request (``get_db``), an explicit transaction helper
(``transaction``) and the migrations applied on application start
(``init_db``).

Connections are opened in autocommit mode: every statement outside an
explicit ``transaction`` block is committed on its own, while
read‑then‑write sequences run inside ``BEGIN IMMEDIATE`` so the write
lock is held from the first read.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from .config import settings

logger = logging.getLogger(__name__)


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path (or the special
    ``:memory:`` name), use it directly.  Otherwise resolve it relative
    to the package root.
    """
    db_url = settings.database_url
    if db_url == ":memory:" or os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # lobby_api/
    return str((base_dir / db_url).resolve())


def _casefold(value):
    # SQLite's own LIKE and lower() only fold ASCII letters.
    return value.casefold() if isinstance(value, str) else value


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name, has
    foreign key enforcement switched on (SQLite disables it by default
    and it must be enabled per connection) and registers a ``casefold``
    SQL function for Unicode case-insensitive search.
    """
    # A request may open the connection in a worker thread and use it in
    # the event loop thread; it is never shared between requests.
    conn = sqlite3.connect(get_database_path(), isolation_level=None, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.create_function("casefold", 1, _casefold, deterministic=True)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def get_db() -> Iterator[sqlite3.Connection]:
    """FastAPI dependency yielding a connection closed after the request."""
    conn = get_connection()
    try:
        yield conn
    finally:
        conn.close()


@contextmanager
def transaction(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """Run the enclosed statements as one atomic unit.

    Commits on normal exit and rolls back when the block raises; the
    exception is propagated to the caller.
    """
    conn.execute("BEGIN IMMEDIATE")
    try:
        yield conn
    except BaseException:
        conn.rollback()
        raise
    conn.commit()


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
    finally:
        conn.close()


def utc_now() -> str:
    """Current time as an ISO‑8601 string with UTC offset."""
    return datetime.now(timezone.utc).isoformat()


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: catalog tables
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS languages (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            code TEXT NOT NULL,
            name TEXT NOT NULL,
            flag_url TEXT,
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP,
            deleted_at TIMESTAMP
        );
        -- Codes and names are unique among live rows only, so a
        -- soft‑deleted language does not block re‑creating it.
        CREATE UNIQUE INDEX IF NOT EXISTS languages_code_idx
            ON languages(code) WHERE deleted_at IS NULL;
        CREATE UNIQUE INDEX IF NOT EXISTS languages_name_idx
            ON languages(name) WHERE deleted_at IS NULL;

        CREATE TABLE IF NOT EXISTS games (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            description TEXT,
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP,
            deleted_at TIMESTAMP
        );
        CREATE UNIQUE INDEX IF NOT EXISTS games_name_idx
            ON games(name) WHERE deleted_at IS NULL;

        CREATE TABLE IF NOT EXISTS game_ranks (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            image TEXT NOT NULL,
            "order" INTEGER NOT NULL,
            game_id INTEGER NOT NULL,
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP,
            deleted_at TIMESTAMP,
            FOREIGN KEY(game_id) REFERENCES games(id)
        );
        CREATE INDEX IF NOT EXISTS idx_game_ranks_game_id ON game_ranks(game_id);

        CREATE TABLE IF NOT EXISTS platforms (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            icon_url TEXT,
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP,
            deleted_at TIMESTAMP
        );
        CREATE UNIQUE INDEX IF NOT EXISTS platforms_name_idx
            ON platforms(name) WHERE deleted_at IS NULL;

        CREATE TABLE IF NOT EXISTS distributors (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            website_url TEXT,
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP,
            deleted_at TIMESTAMP
        );
        CREATE UNIQUE INDEX IF NOT EXISTS distributors_name_idx
            ON distributors(name) WHERE deleted_at IS NULL;
        """,
    ),
    # Migration 2: user profiles with optimistic concurrency
    (
        2,
        """
        CREATE TABLE IF NOT EXISTS user_profiles (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_keycloak_id TEXT NOT NULL,
            user_name TEXT NOT NULL,
            first_name TEXT,
            last_name TEXT,
            profile_image_url TEXT,
            banner_image_url TEXT,
            bio TEXT,
            birth_date TIMESTAMP,
            gender TEXT NOT NULL DEFAULT 'unknown',
            region TEXT NOT NULL DEFAULT 'unknown',
            favorite_game_genre TEXT NOT NULL DEFAULT 'unknown',
            player_type TEXT NOT NULL DEFAULT 'unknown',
            industry_role TEXT NOT NULL DEFAULT 'unknown',
            looking_for TEXT NOT NULL DEFAULT 'unknown',
            presence_status TEXT NOT NULL DEFAULT 'unknown',
            last_online TIMESTAMP NOT NULL,
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP,
            deleted_at TIMESTAMP,
            -- Stored as text so arbitrarily large counters survive JSON transport.
            row_version TEXT NOT NULL DEFAULT '0'
        );
        CREATE UNIQUE INDEX IF NOT EXISTS user_profiles_keycloak_idx
            ON user_profiles(user_keycloak_id) WHERE deleted_at IS NULL;
        CREATE UNIQUE INDEX IF NOT EXISTS user_profiles_user_name_idx
            ON user_profiles(user_name) WHERE deleted_at IS NULL;
        """,
    ),
    # Migration 3: favourites and event attendance
    (
        3,
        """
        CREATE TABLE IF NOT EXISTS user_favorite_games (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            user_profile_id INTEGER NOT NULL,
            game_id INTEGER NOT NULL,
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP,
            FOREIGN KEY(user_profile_id) REFERENCES user_profiles(id),
            FOREIGN KEY(game_id) REFERENCES games(id)
        );
        CREATE UNIQUE INDEX IF NOT EXISTS user_favorite_games_pair_idx
            ON user_favorite_games(user_profile_id, game_id);

        CREATE TABLE IF NOT EXISTS event_attendees (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            event_id INTEGER NOT NULL,
            user_profile_id INTEGER NOT NULL,
            joined_at TIMESTAMP NOT NULL,
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP,
            deleted_at TIMESTAMP,
            FOREIGN KEY(user_profile_id) REFERENCES user_profiles(id)
        );
        CREATE INDEX IF NOT EXISTS idx_event_attendees_event_id ON event_attendees(event_id);
        CREATE INDEX IF NOT EXISTS idx_event_attendees_user_profile_id ON event_attendees(user_profile_id);
        """,
    ),
    # Migration 4: which platforms a game is available on
    (
        4,
        """
        CREATE TABLE IF NOT EXISTS game_platforms (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            game_id INTEGER NOT NULL,
            platform_id INTEGER NOT NULL,
            created_at TIMESTAMP NOT NULL,
            updated_at TIMESTAMP,
            FOREIGN KEY(game_id) REFERENCES games(id),
            FOREIGN KEY(platform_id) REFERENCES platforms(id)
        );
        CREATE UNIQUE INDEX IF NOT EXISTS game_platforms_pair_idx
            ON game_platforms(game_id, platform_id);
        CREATE INDEX IF NOT EXISTS idx_game_platforms_platform_id ON game_platforms(platform_id);
        """,
    ),
]


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS``.  To add a migration, append it with an incremented
    version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                logger.info("Applying migration %s", version)
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
