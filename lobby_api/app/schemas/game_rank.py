"""
Pydantic models for game ranks.

A rank is one tier of a game's competitive ladder.  ``order`` positions
the tier within its game (1 is the lowest).
"""

from typing import Optional

from pydantic import Field, field_validator

from .common import MAX_ID, CamelModel, IdStr, PositiveId, check_url


class GameRankCreate(CamelModel):
    name: str = Field(..., min_length=1, examples=["Diamond"])
    image: str = Field(..., examples=["https://cdn.example.com/ranks/diamond.png"])
    order: int = Field(..., gt=0, le=MAX_ID, examples=[6])
    game_id: PositiveId

    @field_validator("image")
    @classmethod
    def validate_image(cls, value: Optional[str]) -> Optional[str]:
        return check_url(value)


class GameRankUpdate(CamelModel):
    """All fields optional; only provided fields will be updated."""

    name: Optional[str] = Field(None, min_length=1)
    image: Optional[str] = None
    order: Optional[int] = Field(None, gt=0, le=MAX_ID)
    game_id: Optional[PositiveId] = None

    @field_validator("image")
    @classmethod
    def validate_image(cls, value: Optional[str]) -> Optional[str]:
        return check_url(value)


class GameRankRead(CamelModel):
    id: IdStr
    name: str
    image: str
    order: int
    game_id: IdStr
    created_at: str
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None
