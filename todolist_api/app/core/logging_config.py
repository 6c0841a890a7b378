"""
Logging configuration for the application.

``setup_logging`` attaches a console handler, and optionally a
size-rotated file handler, to the root logger.  Uvicorn's own loggers
are routed through the root logger so server and application records
share one format.  Modules log through ``logging.getLogger(__name__)``
and never configure handlers themselves.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers created by uvicorn with handlers of their own.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# Marks handlers installed here so repeated calls do not stack them.
_HANDLER_FLAG = "_todolist_handler"


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_FLAG, True)
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    The level is applied on every call, so a new ``LOG_LEVEL`` takes
    effect when ``create_app`` runs again; handlers are installed only
    once.  Handlers attached by someone else (pytest's capture, for
    example) are left in place.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file to log to in addition to the console.  The file
        rotates at ``settings.log_max_bytes`` and keeps
        ``settings.log_backup_count`` old copies.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if any(getattr(handler, _HANDLER_FLAG, False) for handler in root.handlers):
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = _mark(logging.StreamHandler())
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = _mark(
            RotatingFileHandler(
                log_path,
                maxBytes=settings.log_max_bytes,
                backupCount=settings.log_backup_count,
                encoding="utf-8",
            )
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
