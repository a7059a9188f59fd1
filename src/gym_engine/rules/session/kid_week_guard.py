"""Availability step: no conditioning session in a kid week."""

from __future__ import annotations

from gym_engine.models.enums import SessionLabel, SessionStage, WeekType
from gym_engine.rules.base import SessionDecision, SessionRule, SessionState


class KidWeekGuardRule(SessionRule):
    rule_id = "kid_week_guard"
    priority = SessionStage.KID_WEEK_GUARD

    def applies(self, state: SessionState, current: str) -> bool:
        return current == SessionLabel.C.value and state.week_type == WeekType.KID

    def decide(self, state: SessionState, current: str) -> SessionDecision:
        return SessionDecision(SessionLabel.A.value)
