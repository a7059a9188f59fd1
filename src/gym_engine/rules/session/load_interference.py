"""Interference step: swap lower-body work for upper-body on heavy run weeks.

Runs after the kid-week guard, so an A produced by that guard can still be
switched to B.
"""

from __future__ import annotations

from gym_engine.math.progression import format_kg
from gym_engine.models.enums import LoadFactor, SessionLabel, SessionStage
from gym_engine.rules.base import SessionDecision, SessionRule, SessionState


class RunningLoadInterferenceRule(SessionRule):
    rule_id = "load_interference"
    priority = SessionStage.LOAD_INTERFERENCE

    def applies(self, state: SessionState, current: str) -> bool:
        return (
            state.has_history
            and state.load_factor == LoadFactor.HIGH
            and current == SessionLabel.A.value
        )

    def decide(self, state: SessionState, current: str) -> SessionDecision:
        return SessionDecision(
            SessionLabel.B.value,
            rationale=(
                f"Heavy running week (load: {format_kg(state.running_load)}). "
                "Switching to upper body focus."
            ),
        )
