"""Turn exercises plus their batched history into suggestion rows.

Shared by the fixed A/B templates and the WOD generator: both fetch history
for all their exercises in one query, group it here, and run the advisor
once per exercise.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable

from gym_engine.models.enums import HISTORY_SESSIONS, LoadFactor, WeekType
from gym_engine.models.history import Exercise, SessionExercise
from gym_engine.models.overload_context import OverloadContext
from gym_engine.models.suggestion import ExerciseSuggestion
from gym_engine.overload_advisor import ProgressiveOverloadAdvisor, apply_reentry


@dataclass(frozen=True)
class AdvisorInputs:
    """Request-wide values every exercise's advice shares."""

    running_load: float
    load_factor: LoadFactor
    week_type: WeekType
    is_reentry: bool = False
    recovery_score: float | None = None


def group_history(
    entries: Iterable[SessionExercise], cap: int = HISTORY_SESSIONS
) -> dict[str, tuple[SessionExercise, ...]]:
    """Group a flat most-recent-first history by exercise id.

    Keeps at most *cap* entries per exercise, preserving order.
    """
    grouped: dict[str, list[SessionExercise]] = defaultdict(list)
    for entry in entries:
        bucket = grouped[entry.exercise_id]
        if len(bucket) < cap:
            bucket.append(entry)
    return {exercise_id: tuple(bucket) for exercise_id, bucket in grouped.items()}


def last_logged_weight(history: tuple[SessionExercise, ...]) -> float | None:
    """First positive weight in the most recent entry, if any."""
    if not history:
        return None
    for s in history[0].sets:
        if s.weight is not None and s.weight > 0:
            return s.weight
    return None


def filter_by_equipment(
    exercises: Iterable[Exercise], equipment: Iterable[str] | None
) -> list[Exercise]:
    """Exercises sharing at least one equipment tag with *equipment*.

    An absent or empty list means no filter.
    """
    wanted = frozenset(equipment or ())
    if not wanted:
        return list(exercises)
    return [e for e in exercises if e.equipment & wanted]


def suggest_exercise(
    exercise: Exercise,
    history: tuple[SessionExercise, ...],
    inputs: AdvisorInputs,
    advisor: ProgressiveOverloadAdvisor,
) -> ExerciseSuggestion:
    ctx = OverloadContext(
        history=history,
        running_load=inputs.running_load,
        load_factor=inputs.load_factor,
        category=exercise.category,
        movement_pattern=exercise.movement_pattern,
        week_type=inputs.week_type,
        recovery_score=inputs.recovery_score,
    )
    weight = advisor.suggest(ctx)
    if inputs.is_reentry:
        weight = apply_reentry(weight, exercise.category, exercise.movement_pattern)

    return ExerciseSuggestion(
        name=exercise.name,
        exercise_id=exercise.id,
        suggested_weight=weight.weight,
        rationale=weight.rationale,
        last_weight=last_logged_weight(history),
        suggested_sets=weight.sets,
        suggested_reps=weight.reps,
        confidence=weight.confidence,
    )
