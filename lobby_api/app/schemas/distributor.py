"""Pydantic models for distributors (Steam, Epic Games Store, ...)."""

from typing import Optional

from pydantic import Field, field_validator

from .common import CamelModel, IdStr, check_url


class DistributorCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100, examples=["Steam"])
    website_url: Optional[str] = Field(None, examples=["https://store.steampowered.com"])

    @field_validator("website_url")
    @classmethod
    def validate_website_url(cls, value: Optional[str]) -> Optional[str]:
        return check_url(value)


class DistributorUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    website_url: Optional[str] = None

    @field_validator("website_url")
    @classmethod
    def validate_website_url(cls, value: Optional[str]) -> Optional[str]:
        return check_url(value)


class DistributorRead(CamelModel):
    id: IdStr
    name: str
    website_url: Optional[str] = None
    created_at: str
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None
