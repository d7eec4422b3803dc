"""
Application package initializer.

The project is organised into layers: ``core`` (configuration, logging,
errors and the SQLite connection), ``repositories`` (query building over
each table), ``services`` (business rules per resource), ``schemas``
(request and response models) and ``api`` (versioned routers).  Each
resource exposes a router defined in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
