"""Environment-variable-based configuration for the morning scheduler."""

from __future__ import annotations

import os

DATABASE_URL: str = os.environ.get("DATABASE_URL", "sqlite:///gym.db")
PUSH_URL: str = os.environ.get("PUSH_URL", "")
PUSH_TIMEOUT_S: float = float(os.environ.get("PUSH_TIMEOUT_S", "10"))
GYM_TIMEZONE: str = os.environ.get("GYM_TIMEZONE", "Australia/Sydney")
MORNING_HOUR: int = int(os.environ.get("SCHEDULER_HOUR", "6"))
MORNING_MINUTE: int = int(os.environ.get("SCHEDULER_MINUTE", "30"))
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
