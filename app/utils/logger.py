# app/utils/logger.py
"""
Centralised logging configuration for the entire application.
Logs to console and to a rotating file at settings.LOG_PATH.
Repository modules tag their messages with the collection name,
e.g. "[VEHICLES] Added 123ABC".
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from app.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_configured = False


def _file_handler(level: str, fmt: logging.Formatter) -> RotatingFileHandler:
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    handler = RotatingFileHandler(
        filename=settings.LOG_PATH,
        maxBytes=settings.LOG_MAX_BYTES,
        backupCount=settings.LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(fmt)
    return handler


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    level = settings.LOG_LEVEL.upper()
    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler()
    console.setLevel(level)
    console.setFormatter(fmt)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(console)
    root.addHandler(_file_handler(level, fmt))


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    _configure_root_logger()
    return logging.getLogger(name)
