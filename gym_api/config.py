"""Environment-variable-based configuration for the HTTP API."""

from __future__ import annotations

import os

DATABASE_URL: str = os.environ.get("DATABASE_URL", "sqlite:///gym.db")
GYM_TIMEZONE: str = os.environ.get("GYM_TIMEZONE", "Australia/Sydney")
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
