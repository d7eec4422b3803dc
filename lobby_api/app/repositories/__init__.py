"""
Repositories over the SQLite tables.

``base.BaseRepository`` implements the query building (filters,
ordering, limit/offset, soft‑delete exclusion); the subclasses only
declare their table layout and a few resource specific lookups.
"""

from .base import BaseRepository, Where, escape_like
from .distributors import DistributorRepository
from .event_attendees import EventAttendeeRepository
from .favorite_games import FavoriteGameRepository
from .game_platforms import GamePlatformRepository
from .game_ranks import GameRankRepository
from .games import GameRepository
from .languages import LanguageRepository
from .platforms import PlatformRepository
from .user_profiles import UserProfileRepository

__all__ = [
    "BaseRepository",
    "Where",
    "escape_like",
    "DistributorRepository",
    "EventAttendeeRepository",
    "FavoriteGameRepository",
    "GamePlatformRepository",
    "GameRankRepository",
    "GameRepository",
    "LanguageRepository",
    "PlatformRepository",
    "UserProfileRepository",
]
