"""Overload row for kid weeks: same weight, one set fewer (minimum 2)."""

from __future__ import annotations

from gym_engine.math.progression import floor_weight, format_kg, kid_week_sets
from gym_engine.models.enums import OverloadPriority
from gym_engine.models.overload_context import OverloadContext
from gym_engine.models.suggestion import WeightSuggestion
from gym_engine.rules.base import OverloadRule


class KidWeekRule(OverloadRule):
    """Reduce volume, not intensity, in lower-availability weeks."""

    rule_id = "kid_week"
    priority = OverloadPriority.KID_WEEK

    def applies(self, ctx: OverloadContext) -> bool:
        return ctx.is_kid_week

    def suggest(self, ctx: OverloadContext) -> WeightSuggestion:
        weight = floor_weight(ctx.last_weight)
        sets = kid_week_sets(ctx.last_set_count)
        return WeightSuggestion(
            weight=weight,
            sets=sets,
            reps=ctx.last_reps,
            confidence=ctx.confidence,
            rationale=(
                f"Kid week: maintain weight at {format_kg(weight)}kg, "
                f"reduced sets ({sets})."
            ),
            rule_id=self.rule_id,
        )
