"""Entry point for the Itinerary Planner API.

Starts the FastAPI application with Uvicorn.  Host, port and database
location come from the environment (``HOST``, ``PORT``,
``DATABASE_URL``); see ``itinerary_planner_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from itinerary_planner_api.app.core.config import settings
from itinerary_planner_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("API server stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
