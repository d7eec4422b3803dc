"""
Row version rules for optimistic concurrency.

Versioned records carry a ``row_version`` counter stored as a decimal
string.  A writer must present the version it read; the comparison is
an exact string match, so ``"05"`` never matches ``"5"`` and a
malformed token can never match by accident.  Every successful
mutation advances the counter by exactly one.
"""

from typing import Optional

from ..core.errors import VersionConflictError

INITIAL_ROW_VERSION = "0"


def next_row_version(current: str) -> str:
    """Return ``current + 1``.

    Python integers are unbounded, so the counter cannot overflow no
    matter how many times a record is written.
    """
    return str(int(current) + 1)


def ensure_row_version(current: str, expected: Optional[str]) -> None:
    """Raise :class:`VersionConflictError` unless *expected* equals *current*."""
    if expected != current:
        raise VersionConflictError()
