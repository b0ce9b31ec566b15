"""
Main entrypoint for the Itinerary Planner API.

This module assembles the FastAPI application, sets up logging, owns
the lifecycle of the itinerary store and includes the versioned
routers.  ``create_app`` builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn itinerary_planner_api.app.main:app --reload

The store is opened and migrated on startup and closed on shutdown.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.db import ItineraryStore, get_database_path
from .core.errors import ItineraryError, error_content
from .core.logging_config import setup_logging
from .services.itinerary_service import ItineraryService

logger = logging.getLogger(__name__)


def create_app(
    store: Optional[ItineraryStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ItineraryStore]
        Store to serve from.  Defaults to a store at
        ``settings.database_url``.
    settings : Optional[Settings]
        Settings to use instead of the environment-derived defaults.

    Returns
    -------
    FastAPI
        A configured application.  The store is not opened until the
        application starts.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None:
        store = ItineraryStore(get_database_path(settings.database_url))

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store
    app.state.itinerary_service = ItineraryService(store, public_base_url=settings.public_base_url)

    app.include_router(v1_router, prefix="/api/v1")
    # The web front-end calls the unversioned /api paths.
    app.include_router(v1_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        store.initialize()

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        store.close()

    @app.exception_handler(ItineraryError)
    async def itinerary_error_handler(request: Request, exc: ItineraryError) -> JSONResponse:
        # NotFound and ValidationError are handled per route; anything
        # reaching here is a storage or data failure.
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_content(exc),
        )

    return app


app = create_app()
