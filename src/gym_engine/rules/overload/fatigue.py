"""Overload rows that back off or hold because the athlete is tired.

Deload: average RPE above 8.5 or a readiness score below 3.
Hold: average RPE above 8 or a high running load week.
"""

from __future__ import annotations

from gym_engine.math.progression import floor_weight, format_kg, kid_week_sets
from gym_engine.models.enums import DELOAD_RPE, HOLD_RPE, LoadFactor, OverloadPriority
from gym_engine.models.overload_context import OverloadContext
from gym_engine.models.suggestion import WeightSuggestion
from gym_engine.rules.base import OverloadRule


class DeloadRule(OverloadRule):
    """Drop one increment when effort is very high or recovery is poor."""

    rule_id = "deload"
    priority = OverloadPriority.DELOAD

    def applies(self, ctx: OverloadContext) -> bool:
        return ctx.average_rpe > DELOAD_RPE or ctx.low_recovery

    def suggest(self, ctx: OverloadContext) -> WeightSuggestion:
        weight = floor_weight(ctx.last_weight - ctx.increment)
        sets = ctx.last_set_count
        if ctx.is_kid_week:
            sets = kid_week_sets(sets)

        # Low recovery names the cause even when RPE is also high
        if ctx.low_recovery:
            rationale = (
                f"Low recovery score ({ctx.recovery_score:.1f}). "
                f"Deload to {format_kg(weight)}kg."
            )
        else:
            rationale = (
                f"RPE very high ({ctx.average_rpe:.1f}). "
                f"Deload slightly to {format_kg(weight)}kg."
            )

        return WeightSuggestion(
            weight=weight,
            sets=sets,
            reps=ctx.last_reps,
            confidence=ctx.confidence,
            rationale=rationale,
            rule_id=self.rule_id,
        )


class HoldRule(OverloadRule):
    """Keep the weight when effort is high or running load is heavy."""

    rule_id = "hold"
    priority = OverloadPriority.HOLD

    def applies(self, ctx: OverloadContext) -> bool:
        return ctx.average_rpe > HOLD_RPE or ctx.load_factor == LoadFactor.HIGH

    def suggest(self, ctx: OverloadContext) -> WeightSuggestion:
        weight = floor_weight(ctx.last_weight)
        if ctx.load_factor == LoadFactor.HIGH:
            rationale = (
                f"Heavy running week (load: {format_kg(ctx.running_load)}). "
                f"Maintain {format_kg(weight)}kg, focus on quality."
            )
        else:
            rationale = (
                f"RPE was high ({ctx.average_rpe:.1f}). "
                f"Consolidate at {format_kg(weight)}kg before progressing."
            )

        return WeightSuggestion(
            weight=weight,
            sets=ctx.last_set_count,
            reps=ctx.last_reps,
            confidence=ctx.confidence,
            rationale=rationale,
            rule_id=self.rule_id,
        )
