"""
Error taxonomy shared by services and the HTTP layer.

Services raise one of the ``ApiError`` subclasses below; the handlers
registered in ``main.create_app`` turn them into JSON responses.  The
body is ``{"message": ...}`` for most errors and ``{"errors": {...}}``
when a field level error map is attached.
"""

from __future__ import annotations

from typing import Dict, List, Optional

FieldErrors = Dict[str, List[str]]


class ApiError(Exception):
    """Base class for errors that map onto an HTTP status code."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, *, errors: Optional[FieldErrors] = None) -> None:
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def to_body(self) -> dict:
        if self.errors is not None:
            return {"errors": self.errors}
        return {"message": self.message}


class ValidationError(ApiError):
    """Malformed or missing input (400)."""

    status_code = 400
    default_message = "Invalid request"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Not found"


class ConflictError(ApiError):
    """A uniqueness rule would be violated (409)."""

    status_code = 409
    default_message = "Conflict"


class VersionConflictError(ConflictError):
    """The caller's ``rowVersion`` is stale (409)."""

    default_message = "Resource has been modified by another user"


class AlreadyDeletedError(ConflictError):
    default_message = "Resource already deleted"


class InternalError(ApiError):
    status_code = 500
    default_message = "Internal server error"
