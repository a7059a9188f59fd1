"""Rotation step: the next label in the A -> B -> C cycle."""

from __future__ import annotations

from gym_engine.models.enums import SessionLabel, SessionStage, WeekType
from gym_engine.rules.base import SessionDecision, SessionRule, SessionState


class RotationRule(SessionRule):
    """A follows anything but A or B; B is skipped over C in kid weeks.

    With no prior session the athlete starts at A.
    """

    rule_id = "rotation"
    priority = SessionStage.ROTATION

    def applies(self, state: SessionState, current: str) -> bool:
        return True

    def decide(self, state: SessionState, current: str) -> SessionDecision:
        last = state.last_session_type
        if last == SessionLabel.A.value:
            return SessionDecision(SessionLabel.B.value)
        if last == SessionLabel.B.value:
            if state.week_type == WeekType.NON_KID:
                return SessionDecision(SessionLabel.C.value)
            return SessionDecision(SessionLabel.A.value)
        return SessionDecision(SessionLabel.A.value)
