"""
Root logger setup for the itinerary API.

Call ``setup_logging`` once, before the app is built.  Every module
logs through ``logging.getLogger(__name__)``, so one console handler
(plus an optional log file) on the root logger covers the store, the
service and the HTTP layer alike.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handlers installed here carry these names, so a second call (e.g.
# another create_app in the same process) can tell they are present.
CONSOLE_HANDLER_NAME = "itinerary_planner.console"
FILE_HANDLER_NAME = "itinerary_planner.file"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the itinerary handlers to the root logger.

    ``level`` is a level name in any case; unknown names mean INFO.
    When ``logfile`` is set, its parent directory is created and
    records go to the file as well as the console.  Handlers owned by
    other code (uvicorn, pytest) are left alone.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile and not _has_handler(root, FILE_HANDLER_NAME):
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
