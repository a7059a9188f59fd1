"""Overload rows for exercises with nothing to progress from.

With no history, or history but no weighted set, the advisor prescribes
the category's default sets x reps at weight 0 and asks for a light start.
"""

from __future__ import annotations

from gym_engine.models.enums import Confidence, OverloadPriority
from gym_engine.models.overload_context import OverloadContext
from gym_engine.models.suggestion import WeightSuggestion
from gym_engine.rules.base import OverloadRule


def _start_light(ctx: OverloadContext, rule_id: str, rationale: str) -> WeightSuggestion:
    sets, reps = ctx.prescription
    return WeightSuggestion(
        weight=0.0,
        sets=sets,
        reps=reps,
        confidence=Confidence.LOW,
        rationale=rationale,
        rule_id=rule_id,
    )


class NoHistoryRule(OverloadRule):
    """The exercise has never been logged."""

    rule_id = "no_history"
    priority = OverloadPriority.NO_HISTORY

    def applies(self, ctx: OverloadContext) -> bool:
        return len(ctx.history) == 0

    def suggest(self, ctx: OverloadContext) -> WeightSuggestion:
        return _start_light(ctx, self.rule_id, "No history, start light and focus on form.")


class NoWeightHistoryRule(OverloadRule):
    """Logged before, but never with a weight (bodyweight, time or distance only)."""

    rule_id = "no_weight_history"
    priority = OverloadPriority.NO_WEIGHT_HISTORY

    def applies(self, ctx: OverloadContext) -> bool:
        return ctx.last_weight <= 0

    def suggest(self, ctx: OverloadContext) -> WeightSuggestion:
        return _start_light(
            ctx, self.rule_id, "No weight history, start light and focus on form."
        )
