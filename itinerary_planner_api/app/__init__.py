"""
Application package initializer.

The code is split into ``core`` (configuration, logging, errors and
the SQLite store), ``schemas`` (pydantic payloads), ``services``
(business logic and row serialization) and ``api`` (versioned FastAPI
routers).
"""

from .main import app  # noqa: F401
