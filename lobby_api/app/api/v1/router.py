"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
When new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import (
    distributors,
    event_attendees,
    favorite_games,
    game_platforms,
    game_ranks,
    games,
    languages,
    platforms,
    user_profiles,
)

router = APIRouter()

router.include_router(languages.router, prefix="/languages", tags=["languages"])
router.include_router(games.router, prefix="/games", tags=["games"])
router.include_router(game_ranks.router, prefix="/game-ranks", tags=["game ranks"])
router.include_router(platforms.router, prefix="/platforms", tags=["platforms"])
router.include_router(game_platforms.router, prefix="/game-platforms", tags=["game platforms"])
router.include_router(distributors.router, prefix="/distributors", tags=["distributors"])
router.include_router(user_profiles.router, prefix="/user-profiles", tags=["user profiles"])
router.include_router(
    favorite_games.router,
    prefix="/user-profiles/{user_id}/favorite-games",
    tags=["favorite games"],
)
router.include_router(event_attendees.router, prefix="/event-attendees", tags=["event attendees"])
