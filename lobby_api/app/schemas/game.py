"""Pydantic models for games."""

from typing import Optional

from pydantic import Field

from .common import CamelModel, IdStr


class GameCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=150, examples=["Valorant"])
    description: Optional[str] = None


class GameUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None


class GameRead(CamelModel):
    id: IdStr
    name: str
    description: Optional[str] = None
    created_at: str
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None
