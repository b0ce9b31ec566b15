"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any setup; override them via environment
variables in deployments.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Itinerary Planner API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file; console logging is always enabled.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the SQLite database file.  Relative paths are resolved
    # against the project root by the ``db`` module.  ``:memory:`` keeps
    # everything in process memory.
    database_url: str = os.getenv("DATABASE_URL", "itineraries.db")

    # Origin of the web front-end.  Share links are built as
    # ``<public_base_url>?trip=<id>``.
    public_base_url: str = os.getenv("PUBLIC_BASE_URL", "http://localhost:3000")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))


# Instantiated once so other modules can import it without repeatedly
# reading environment variables.  Set variables before importing.
settings = Settings()
