"""
Logging configuration for the API process.

``setup_logging`` installs one console handler (plus an optional file
handler) on the root logger and then routes uvicorn's own loggers
through it, so server lines and application lines share a format and
obey ``LOG_LEVEL``.  ``run.py`` starts uvicorn with ``log_config=None``
to leave this configuration in place.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers uvicorn creates for itself.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to INFO."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def align_server_loggers(level: int) -> None:
    """Drop uvicorn's handlers and let its records propagate to the root."""
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.setLevel(level)
        server_logger.propagate = True


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and the server loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    numeric_level = resolve_level(level)
    align_server_loggers(numeric_level)

    logger = logging.getLogger()
    if logger.handlers:
        # create_app may run several times in one process (tests).
        return
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
