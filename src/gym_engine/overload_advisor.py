"""ProgressiveOverloadAdvisor — next weight/sets/reps for one exercise."""

from __future__ import annotations

import dataclasses

from gym_engine.math.progression import floor_weight, format_kg, reentry_reduction
from gym_engine.models.decision_trace import DecisionTrace, RuleResult, RuleStatus
from gym_engine.models.enums import WeekType
from gym_engine.models.overload_context import OverloadContext
from gym_engine.models.suggestion import WeightSuggestion
from gym_engine.registry import RuleRegistry, overload_registry
from gym_engine.rules.base import OverloadRule


class ProgressiveOverloadAdvisor:
    """Walks the overload decision table; the first applicable rule wins.

    Usage:
        advisor = ProgressiveOverloadAdvisor()
        suggestion, trace = advisor.advise(context)
    """

    def __init__(self, registry: RuleRegistry[OverloadRule] | None = None) -> None:
        self.registry = registry or overload_registry()

    def advise(self, ctx: OverloadContext) -> tuple[WeightSuggestion, DecisionTrace]:
        """Evaluate the rules in priority order.

        Args:
            ctx: Frozen snapshot of the exercise's history and context.

        Returns:
            A tuple of (WeightSuggestion, DecisionTrace). Rules after the
            winner are recorded as NOT_EVALUATED.
        """
        rule_results: list[RuleResult] = []
        suggestion: WeightSuggestion | None = None

        for rule in self.registry.get_all_rules():
            if suggestion is not None:
                rule_results.append(RuleResult(rule.rule_id, RuleStatus.NOT_EVALUATED))
                continue
            if rule.applies(ctx):
                suggestion = rule.suggest(ctx)
                rule_results.append(
                    RuleResult(rule.rule_id, RuleStatus.FIRED, suggestion.rationale)
                )
            else:
                rule_results.append(RuleResult(rule.rule_id, RuleStatus.SKIPPED))

        if suggestion is None:
            raise LookupError("No overload rule applied; the registry is missing on_track")

        return suggestion, DecisionTrace(rule_results=tuple(rule_results))

    def suggest(self, ctx: OverloadContext) -> WeightSuggestion:
        return self.advise(ctx)[0]


_default_advisor: ProgressiveOverloadAdvisor | None = None


def _advisor() -> ProgressiveOverloadAdvisor:
    global _default_advisor
    if _default_advisor is None:
        _default_advisor = ProgressiveOverloadAdvisor()
    return _default_advisor


def suggest_weight_from_data(
    context: OverloadContext,
    week_type: WeekType | None = None,
    recovery_score: float | None = None,
) -> WeightSuggestion:
    """Suggest the next weight for one exercise.

    ``week_type`` and ``recovery_score`` override the values carried on the
    context when given.
    """
    overrides = {}
    if week_type is not None:
        overrides["week_type"] = week_type
    if recovery_score is not None:
        overrides["recovery_score"] = recovery_score
    if overrides:
        context = dataclasses.replace(context, **overrides)
    return _advisor().suggest(context)


def apply_reentry(
    suggestion: WeightSuggestion,
    category: str | None,
    movement_pattern: str | None,
) -> WeightSuggestion:
    """Take one more increment off a positive weight after a training gap."""
    if suggestion.weight <= 0:
        return suggestion
    weight = floor_weight(suggestion.weight - reentry_reduction(category, movement_pattern))
    return dataclasses.replace(
        suggestion,
        weight=weight,
        rationale=f"Re-entry after gap: {format_kg(weight)}kg. {suggestion.rationale}",
    )
