"""Schedule step: fixed training days pin the session label."""

from __future__ import annotations

from gym_engine.models.enums import (
    FRIDAY,
    SUNDAY,
    TUESDAY,
    SessionLabel,
    SessionStage,
    WeekType,
)
from gym_engine.rules.base import SessionDecision, SessionRule, SessionState


class DayOfWeekOverrideRule(SessionRule):
    """Tuesday is A, Friday is B, Sunday is C (non-kid weeks only).

    Only overrides a rotated label; a first-ever session stays A.
    """

    rule_id = "day_override"
    priority = SessionStage.DAY_OVERRIDE

    def _pinned(self, state: SessionState) -> str | None:
        if state.weekday == TUESDAY:
            return SessionLabel.A.value
        if state.weekday == FRIDAY:
            return SessionLabel.B.value
        if state.weekday == SUNDAY and state.week_type == WeekType.NON_KID:
            return SessionLabel.C.value
        return None

    def applies(self, state: SessionState, current: str) -> bool:
        return state.has_history and self._pinned(state) is not None

    def decide(self, state: SessionState, current: str) -> SessionDecision:
        return SessionDecision(self._pinned(state) or current)
