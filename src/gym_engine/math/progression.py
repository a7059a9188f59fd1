"""Progression tables and helpers for the progressive-overload advisor.

Pure functions over logged sets. The decision table itself lives in
``gym_engine.rules.overload``; this module only answers questions such as
"how big is one step for this exercise" or "what was the last working
weight".
"""

from __future__ import annotations

from typing import Iterable

from gym_engine.models.enums import (
    CATEGORY_INCREMENT_KG,
    CATEGORY_PRESCRIPTION,
    DEFAULT_INCREMENT_KG,
    DEFAULT_PRESCRIPTION,
    DEFAULT_RPE,
    HIGH_CONFIDENCE_ENTRIES,
    KID_WEEK_MIN_SETS,
    LOW_RECOVERY_SCORE,
    LOWER_BODY_INCREMENT_KG,
    LOWER_BODY_PATTERNS,
    MEDIUM_CONFIDENCE_ENTRIES,
    Confidence,
)
from gym_engine.models.history import ExerciseSet


def weight_increment(category: str | None, movement_pattern: str | None) -> float:
    """Size of one loading step in kg.

    Lower-body hinge/squat/hip-extension patterns always step by 2.5 kg.
    Otherwise the category decides; categories that are not load-progressed
    (core, warmup, conditioning) step by 0. Unknown categories use 1.25 kg.
    """
    if movement_pattern in LOWER_BODY_PATTERNS:
        return LOWER_BODY_INCREMENT_KG
    if category is None:
        return DEFAULT_INCREMENT_KG
    return CATEGORY_INCREMENT_KG.get(category, DEFAULT_INCREMENT_KG)


def default_prescription(category: str | None) -> tuple[int, int]:
    """(sets, reps) for an exercise with no usable history."""
    if category is None:
        return DEFAULT_PRESCRIPTION
    return CATEGORY_PRESCRIPTION.get(category, DEFAULT_PRESCRIPTION)


def average_rpe(sets: Iterable[ExerciseSet]) -> float:
    """Mean RPE over the sets that recorded one; 7.0 when none did."""
    values = [s.rpe for s in sets if s.rpe is not None]
    if not values:
        return DEFAULT_RPE
    return sum(values) / len(values)


def last_working_weight(sets: Iterable[ExerciseSet]) -> float:
    """First positive weight in most-recent-first order, else 0."""
    for s in sets:
        if s.weight is not None and s.weight > 0:
            return float(s.weight)
    return 0.0


def confidence_for(entries: int) -> Confidence:
    """Confidence label from the number of history entries backing it."""
    if entries >= HIGH_CONFIDENCE_ENTRIES:
        return Confidence.HIGH
    if entries >= MEDIUM_CONFIDENCE_ENTRIES:
        return Confidence.MEDIUM
    return Confidence.LOW


def kid_week_sets(sets: int) -> int:
    """Drop one set for a kid week, never below the minimum."""
    return max(KID_WEEK_MIN_SETS, sets - 1)


def is_low_recovery(recovery_score: float | None) -> bool:
    return recovery_score is not None and recovery_score < LOW_RECOVERY_SCORE


def floor_weight(weight: float) -> float:
    """Clamp at zero and round to the nearest 10 g."""
    return round(max(0.0, weight), 2)


def reentry_reduction(category: str | None, movement_pattern: str | None) -> float:
    """Weight taken off when returning from a layoff.

    One loading step; categories that never step (increment 0) still lose
    the generic 1.25 kg so a weighted conditioning movement is eased too.
    """
    step = weight_increment(category, movement_pattern)
    return step if step > 0 else DEFAULT_INCREMENT_KG


def format_kg(weight: float) -> str:
    """``60.0`` -> ``"60"``, ``62.5`` -> ``"62.5"``."""
    return f"{weight:g}"
