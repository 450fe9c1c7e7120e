"""
Logging configuration for the Customer API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Handlers installed here are tagged so that
calling ``setup_logging`` again, which happens whenever ``create_app``
builds a fresh application, only adjusts the level instead of stacking
duplicate handlers.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_TAG = "_customer_api_handler"

# Names understood both by ``logging`` and by uvicorn's ``log_level`` option.
LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def normalize_level(level: Optional[str]) -> str:
    """Return ``level`` upper‑cased, or ``"INFO"`` if it is not a known level."""
    name = (level or "").strip().upper()
    return name if name in LEVEL_NAMES else "INFO"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``).  Case insensitive; unknown
        names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to log to in addition to the console.  Resolved
        relative to the current working directory.
    """
    root = logging.getLogger()
    root.setLevel(normalize_level(level))

    if any(getattr(handler, _HANDLER_TAG, False) for handler in root.handlers):
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, True)
        root.addHandler(handler)
