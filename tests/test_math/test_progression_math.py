"""Tests for progression tables and helpers."""

from __future__ import annotations

import pytest

from gym_engine.math.progression import (
    average_rpe,
    confidence_for,
    default_prescription,
    floor_weight,
    format_kg,
    kid_week_sets,
    last_working_weight,
    reentry_reduction,
    weight_increment,
)
from gym_engine.models.enums import Confidence
from gym_engine.models.history import ExerciseSet


class TestWeightIncrement:
    @pytest.mark.parametrize(
        "category,pattern,expected",
        [
            ("strength", "squat", 2.5),
            ("accessory", "hip_extension", 2.5),
            ("core", "hip_hinge", 2.5),
            ("strength", "push", 2.5),
            ("power", None, 2.5),
            ("accessory", "pull", 1.25),
            ("core", "anti_extension", 0.0),
            ("warmup", None, 0.0),
            ("conditioning", "cardio", 0.0),
            ("mobility", None, 1.25),
            (None, None, 1.25),
        ],
    )
    def test_table(self, category, pattern, expected) -> None:
        assert weight_increment(category, pattern) == expected


class TestDefaultPrescription:
    def test_known_categories(self) -> None:
        assert default_prescription("power") == (4, 5)
        assert default_prescription("strength") == (4, 6)
        assert default_prescription("accessory") == (3, 10)
        assert default_prescription("core") == (3, 12)

    def test_unknown_category(self) -> None:
        assert default_prescription("mobility") == (3, 8)
        assert default_prescription(None) == (3, 8)


class TestAverageRPE:
    def test_ignores_missing(self) -> None:
        sets = [ExerciseSet(1, rpe=8), ExerciseSet(2), ExerciseSet(3, rpe=6)]
        assert average_rpe(sets) == 7.0

    def test_defaults_when_none_recorded(self) -> None:
        assert average_rpe([ExerciseSet(1), ExerciseSet(2)]) == 7.0
        assert average_rpe([]) == 7.0

    def test_mean(self) -> None:
        assert average_rpe([ExerciseSet(1, rpe=9), ExerciseSet(2, rpe=8)]) == 8.5


class TestLastWorkingWeight:
    def test_first_positive_weight(self) -> None:
        sets = [ExerciseSet(1, weight=None), ExerciseSet(2, weight=0), ExerciseSet(3, weight=50)]
        assert last_working_weight(sets) == 50.0

    def test_no_weight(self) -> None:
        assert last_working_weight([ExerciseSet(1, reps=10)]) == 0.0


class TestHelpers:
    @pytest.mark.parametrize(
        "entries,expected",
        [(0, Confidence.LOW), (1, Confidence.LOW), (2, Confidence.MEDIUM),
         (3, Confidence.MEDIUM), (4, Confidence.HIGH), (5, Confidence.HIGH)],
    )
    def test_confidence(self, entries: int, expected: Confidence) -> None:
        assert confidence_for(entries) == expected

    def test_kid_week_sets(self) -> None:
        assert kid_week_sets(4) == 3
        assert kid_week_sets(3) == 2
        assert kid_week_sets(2) == 2

    def test_floor_weight(self) -> None:
        assert floor_weight(-1.25) == 0.0
        assert floor_weight(61.249999) == 61.25

    def test_reentry_reduction(self) -> None:
        assert reentry_reduction("strength", "squat") == 2.5
        assert reentry_reduction("accessory", "pull") == 1.25
        assert reentry_reduction("conditioning", "compound") == 1.25

    def test_format_kg(self) -> None:
        assert format_kg(60.0) == "60"
        assert format_kg(62.5) == "62.5"
