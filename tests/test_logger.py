"""Unit tests for the logging setup."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging
from logging.handlers import RotatingFileHandler
from app.config import settings
from app.utils.logger import get_logger


class TestLogger:
    def test_named_logger(self):
        assert get_logger("app.services.vehicle_service").name == "app.services.vehicle_service"

    def test_root_configured_once_with_rotating_file(self):
        get_logger("a")
        get_logger("b")
        handlers = [h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1
        assert handlers[0].baseFilename == os.path.abspath(settings.LOG_PATH)
        assert handlers[0].maxBytes == settings.LOG_MAX_BYTES
        assert handlers[0].backupCount == settings.LOG_BACKUP_COUNT
