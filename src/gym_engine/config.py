"""Engine configuration — overridable thresholds for session selection."""

from __future__ import annotations

from dataclasses import dataclass

from gym_engine.models.enums import (
    ACUTE_WINDOW_DAYS,
    ACWR_VETO_THRESHOLD,
    BUSY_WEEK_SESSIONS,
    CHRONIC_WINDOW_DAYS,
    HISTORY_SESSIONS,
    REENTRY_GAP_DAYS,
    REST_DAY_READINESS,
    TEMPLATE_EXERCISE_LIMIT,
)


@dataclass(frozen=True)
class EngineConfig:
    """Thresholds the session engine reads at request time.

    Defaults mirror the module constants in ``gym_engine.models.enums``.
    """

    reentry_gap_days: int = REENTRY_GAP_DAYS
    template_exercise_limit: int = TEMPLATE_EXERCISE_LIMIT
    history_sessions: int = HISTORY_SESSIONS
    acute_window_days: int = ACUTE_WINDOW_DAYS
    chronic_window_days: int = CHRONIC_WINDOW_DAYS
    acwr_veto_threshold: float = ACWR_VETO_THRESHOLD
    rest_day_readiness: float = REST_DAY_READINESS
    busy_week_sessions: int = BUSY_WEEK_SESSIONS
