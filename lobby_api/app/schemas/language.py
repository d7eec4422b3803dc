"""
Pydantic models for languages.

A language is a small catalog row (``code``, ``name``, optional flag
image) players attach to their profile.  ``code`` and ``name`` are
unique among languages that have not been deleted.
"""

from typing import Optional

from pydantic import Field, field_validator

from .common import CamelModel, IdStr, check_url


class LanguageCreate(CamelModel):
    """Schema for creating a language."""

    name: str = Field(..., min_length=1, examples=["English"])
    code: str = Field(..., min_length=1, max_length=10, examples=["en"])
    flag_url: Optional[str] = Field(None, examples=["https://flags.example.com/gb.svg"])

    @field_validator("flag_url")
    @classmethod
    def validate_flag_url(cls, value: Optional[str]) -> Optional[str]:
        return check_url(value)


class LanguageUpdate(CamelModel):
    """Schema for updating a language.

    All fields are optional; only provided fields will be updated.
    ``flagUrl`` may be set to ``null`` to clear it.
    """

    name: Optional[str] = Field(None, min_length=1)
    code: Optional[str] = Field(None, min_length=1, max_length=10)
    flag_url: Optional[str] = None

    @field_validator("flag_url")
    @classmethod
    def validate_flag_url(cls, value: Optional[str]) -> Optional[str]:
        return check_url(value)


class LanguageRead(CamelModel):
    """Schema for reading a language from the API."""

    id: IdStr
    name: str
    code: str
    flag_url: Optional[str] = None
    created_at: str
    updated_at: Optional[str] = None
    deleted_at: Optional[str] = None
