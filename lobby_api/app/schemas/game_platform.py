"""
Pydantic models for game platform links.

A link records that a game is available on a platform.  Both sides are
sent as digit strings; each pair may exist only once.
"""

from typing import Optional

from pydantic import Field

from .common import CamelModel, DigitId, IdStr


class GamePlatformCreate(CamelModel):
    game_id: DigitId = Field(..., examples=["3"])
    platform_id: DigitId = Field(..., examples=["1"])


class GamePlatformUpdate(CamelModel):
    """Either side of the link may be moved; at least one is required."""

    game_id: Optional[DigitId] = None
    platform_id: Optional[DigitId] = None


class GamePlatformRead(CamelModel):
    id: IdStr
    game_id: IdStr
    platform_id: IdStr
    created_at: str
    updated_at: Optional[str] = None
