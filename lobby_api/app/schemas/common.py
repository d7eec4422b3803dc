"""
Shared schema building blocks.

All models use camelCase JSON keys while the Python attributes keep
the snake_case column names, so a repository row can be validated
directly into a read model.  Integer identifiers are emitted as
strings to avoid precision loss in JavaScript clients.
"""

from __future__ import annotations

import math
from typing import Annotated, Generic, List, Optional, TypeVar
from urllib.parse import urlparse

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer, StringConstraints
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Identifier read from the database and serialised as a decimal string.
IdStr = Annotated[int, PlainSerializer(lambda v: str(v), return_type=str)]

# Largest value an SQLite INTEGER column can hold.
MAX_ID = 2**63 - 1

# Identifier supplied by a client, as a JSON number or a digit string.
PositiveId = Annotated[int, Field(gt=0, le=MAX_ID)]


def fits_id(digits: str) -> bool:
    """True when the decimal digit string *digits* is at most ``MAX_ID``."""
    significant = digits.lstrip("0")
    # Length first: int() refuses very long digit strings.
    return len(significant) <= len(str(MAX_ID)) and int(significant or "0") <= MAX_ID


def check_id_range(value: str) -> str:
    """Validator helper: reject digit strings beyond ``MAX_ID``."""
    if not fits_id(value):
        raise ValueError("Invalid id")
    return value


# Identifier supplied by a client as a decimal digit string.
DigitId = Annotated[str, StringConstraints(pattern=r"^[0-9]+$"), AfterValidator(check_id_range)]


class CamelModel(BaseModel):
    """Base model emitting and accepting camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def check_url(value: Optional[str]) -> Optional[str]:
    """Validator helper: accept ``None`` or an absolute http(s) URL."""
    if value is None:
        return None
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError("Invalid url")
    return value


class Pagination(CamelModel):
    page: int
    limit: int
    total_pages: int
    total_records: int


class Page(CamelModel, Generic[T]):
    """One page of a list endpoint."""

    data: List[T]
    pagination: Pagination


def build_pagination(page: int, limit: int, total_records: int) -> Pagination:
    """Pagination block for a page; zero records gives zero pages."""
    return Pagination(
        page=page,
        limit=limit,
        total_pages=math.ceil(total_records / limit),
        total_records=total_records,
    )


class MessageResponse(BaseModel):
    message: str
