"""
Shared FastAPI dependencies.

Each request receives its own SQLite connection from ``get_db``; the
factories below wrap it in repositories and hand the endpoint a ready
service.  Tests may override any of them through
``app.dependency_overrides``.
"""

import sqlite3
from typing import Literal, Optional

from fastapi import Depends, Query

from ..core.config import settings
from ..core.db import get_db
from ..core.errors import ValidationError
from ..schemas.common import MAX_ID, fits_id
from ..repositories import (
    DistributorRepository,
    EventAttendeeRepository,
    FavoriteGameRepository,
    GamePlatformRepository,
    GameRankRepository,
    GameRepository,
    LanguageRepository,
    PlatformRepository,
    UserProfileRepository,
)
from ..services.catalog_services import DistributorService, GameRankService, GameService, PlatformService
from ..services.event_attendee_service import EventAttendeeService
from ..services.favorite_game_service import FavoriteGameService
from ..services.game_platform_service import GamePlatformService
from ..services.language_service import LanguageService
from ..services.user_profile_service import UserProfileService


# Keeps the row offset ``(page - 1) * limit`` within the SQLite integer range.
MAX_PAGE = MAX_ID // settings.max_page_size


def parse_id(value: str) -> int:
    """Convert a path identifier to ``int``.

    Only non-empty strings of decimal digits are accepted; anything else
    (signs, whitespace, hex) and values beyond the SQLite integer range
    raise ``ValidationError("Invalid id")``.
    """
    if not value.isascii() or not value.isdigit() or not fits_id(value):
        raise ValidationError("Invalid id")
    return int(value)


def get_language_service(conn: sqlite3.Connection = Depends(get_db)) -> LanguageService:
    return LanguageService(LanguageRepository(conn))


def get_game_service(conn: sqlite3.Connection = Depends(get_db)) -> GameService:
    return GameService(GameRepository(conn))


def get_game_rank_service(conn: sqlite3.Connection = Depends(get_db)) -> GameRankService:
    return GameRankService(GameRankRepository(conn), GameRepository(conn))


def get_platform_service(conn: sqlite3.Connection = Depends(get_db)) -> PlatformService:
    return PlatformService(PlatformRepository(conn))


def get_distributor_service(conn: sqlite3.Connection = Depends(get_db)) -> DistributorService:
    return DistributorService(DistributorRepository(conn))


def get_user_profile_service(conn: sqlite3.Connection = Depends(get_db)) -> UserProfileService:
    return UserProfileService(UserProfileRepository(conn))


def get_favorite_game_service(conn: sqlite3.Connection = Depends(get_db)) -> FavoriteGameService:
    return FavoriteGameService(
        FavoriteGameRepository(conn), UserProfileRepository(conn), GameRepository(conn)
    )


def get_game_platform_service(conn: sqlite3.Connection = Depends(get_db)) -> GamePlatformService:
    return GamePlatformService(
        GamePlatformRepository(conn), GameRepository(conn), PlatformRepository(conn)
    )


def get_event_attendee_service(conn: sqlite3.Connection = Depends(get_db)) -> EventAttendeeService:
    return EventAttendeeService(EventAttendeeRepository(conn), UserProfileRepository(conn))


class PageQuery:
    """``page`` and ``limit`` for list endpoints with a fixed order."""

    def __init__(
        self,
        page: int = Query(1, ge=1, le=MAX_PAGE),
        limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    ) -> None:
        self.page = page
        self.limit = limit


class ListQuery:
    """Query parameters shared by the searchable, sortable list endpoints."""

    def __init__(
        self,
        page: int = Query(1, ge=1, le=MAX_PAGE),
        limit: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
        search: Optional[str] = Query(None, description="Literal substring; wildcards are not interpreted"),
        sort_by: Optional[str] = Query(None, alias="sortBy"),
        sort_order: Literal["asc", "desc"] = Query("desc", alias="sortOrder"),
    ) -> None:
        self.page = page
        self.limit = limit
        self.search = search.strip() if search else None
        self.sort_by = sort_by
        self.sort_order = sort_order

    def as_kwargs(self) -> dict:
        return {
            "search": self.search,
            "page": self.page,
            "limit": self.limit,
            "sort_by": self.sort_by,
            "sort_order": self.sort_order,
        }
