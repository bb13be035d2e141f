# app/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

import os
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Storage ───────────────────────────────────────────────────────────
    DATA_DIR: str = "data"
    CUSTOMERS_FILE: str = "customers.json"
    VEHICLES_FILE: str = "vehicles.json"
    EMPLOYEES_FILE: str = "employees.json"
    JSON_INDENT: int = 4

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "0.0.0.0"
    BACKEND_PORT: int = 8080

    # ── Security ──────────────────────────────────────────────────────────
    API_KEY: Optional[str] = None   # Set in .env to enable auth on API endpoints

    # ── Collections ───────────────────────────────────────────────────────
    @property
    def CUSTOMERS_PATH(self) -> str:
        return os.path.join(self.DATA_DIR, self.CUSTOMERS_FILE)

    @property
    def VEHICLES_PATH(self) -> str:
        return os.path.join(self.DATA_DIR, self.VEHICLES_FILE)

    @property
    def EMPLOYEES_PATH(self) -> str:
        return os.path.join(self.DATA_DIR, self.EMPLOYEES_FILE)

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILE: str = "rental.log"
    LOG_MAX_BYTES: int = 5 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 10

    @property
    def LOG_PATH(self) -> str:
        return os.path.join(self.LOG_DIR, self.LOG_FILE)

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
