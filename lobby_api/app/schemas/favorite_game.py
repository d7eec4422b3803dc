"""Pydantic models for a user's favourite games."""

from pydantic import Field

from .common import CamelModel, DigitId, IdStr


class FavoriteGameCreate(CamelModel):
    # Identifier as a digit string, like every id the API emits.
    game_id: DigitId = Field(..., examples=["42"])


class FavoriteGameRead(CamelModel):
    id: IdStr
    user_profile_id: IdStr
    game_id: IdStr
    created_at: str


class FavoriteGameListItem(CamelModel):
    """A favourite joined with the game it points to."""

    id: IdStr
    game_id: IdStr
    game_name: str
    created_at: str
