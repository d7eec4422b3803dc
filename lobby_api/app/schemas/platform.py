"""Pydantic models for platforms (PC, PlayStation, Switch, ...)."""

from typing import Optional

from pydantic import Field, field_validator

from .common import CamelModel, IdStr, check_url


class PlatformCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["PC"])
    icon_url: Optional[str] = None

    @field_validator("icon_url")
    @classmethod
    def validate_icon_url(cls, value: Optional[str]) -> Optional[str]:
        return check_url(value)


class PlatformUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    icon_url: Optional[str] = None

    @field_validator("icon_url")
    @classmethod
    def validate_icon_url(cls, value: Optional[str]) -> Optional[str]:
        return check_url(value)


class PlatformRead(CamelModel):
    id: IdStr
    name: str
    icon_url: Optional[str] = None
    created_at: str
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None
