"""Overload rows for a fresh athlete: progress when easy, otherwise hold."""

from __future__ import annotations

from gym_engine.math.progression import floor_weight, format_kg
from gym_engine.models.enums import PROGRESS_RPE, OverloadPriority
from gym_engine.models.overload_context import OverloadContext
from gym_engine.models.suggestion import WeightSuggestion
from gym_engine.rules.base import OverloadRule


class ProgressRule(OverloadRule):
    """Average RPE under 7: add one increment."""

    rule_id = "progress"
    priority = OverloadPriority.PROGRESS

    def applies(self, ctx: OverloadContext) -> bool:
        return ctx.average_rpe < PROGRESS_RPE

    def suggest(self, ctx: OverloadContext) -> WeightSuggestion:
        weight = floor_weight(ctx.last_weight + ctx.increment)
        return WeightSuggestion(
            weight=weight,
            sets=ctx.last_set_count,
            reps=ctx.last_reps,
            confidence=ctx.confidence,
            rationale=(
                f"RPE low ({ctx.average_rpe:.1f}), running load "
                f"{ctx.load_factor.value} ({format_kg(ctx.running_load)}). "
                f"Progress to {format_kg(weight)}kg."
            ),
            rule_id=self.rule_id,
        )


class OnTrackRule(OverloadRule):
    """Fallback row: nothing calls for a change."""

    rule_id = "on_track"
    priority = OverloadPriority.ON_TRACK

    def applies(self, ctx: OverloadContext) -> bool:
        return True

    def suggest(self, ctx: OverloadContext) -> WeightSuggestion:
        weight = floor_weight(ctx.last_weight)
        return WeightSuggestion(
            weight=weight,
            sets=ctx.last_set_count,
            reps=ctx.last_reps,
            confidence=ctx.confidence,
            rationale=(
                f"On track. Maintain {format_kg(weight)}kg. "
                f"RPE: {ctx.average_rpe:.1f}, running load: {format_kg(ctx.running_load)}."
            ),
            rule_id=self.rule_id,
        )
