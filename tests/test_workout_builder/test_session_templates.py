"""Tests for session templates and the exercise-row helpers."""

from __future__ import annotations

from gym_fixtures import MONDAY, make_history

from gym_engine.models.enums import LoadFactor, SessionLabel, WeekType
from gym_engine.models.history import Exercise, ExerciseSet, SessionExercise
from gym_engine.overload_advisor import ProgressiveOverloadAdvisor
from gym_engine.workout_builder.exercise_list import (
    AdvisorInputs,
    filter_by_equipment,
    group_history,
    last_logged_weight,
    suggest_exercise,
)
from gym_engine.workout_builder.session_templates import (
    CUSTOM_SESSION_NAME,
    SESSION_TEMPLATES,
    get_template,
    template_name,
)


class TestSessionTemplates:
    def test_every_label_has_a_template(self) -> None:
        assert set(SESSION_TEMPLATES) == set(SessionLabel)

    def test_template_a_patterns(self) -> None:
        assert get_template("A").patterns == (
            "hip_hinge",
            "squat",
            "pull",
            "anti_rotation",
            "hip_extension",
        )

    def test_template_b_is_upper_body(self) -> None:
        template = get_template("B")
        assert "squat" not in template.patterns
        assert "push" in template.patterns

    def test_free_form_label(self) -> None:
        assert get_template("Yoga") is None
        assert template_name("Yoga") == CUSTOM_SESSION_NAME
        assert template_name("B") == "Upper + Core"


class TestGroupHistory:
    def test_groups_and_caps(self) -> None:
        flat = sorted(
            make_history("a", 7) + make_history("b", 2),
            key=lambda e: e.session_date,
            reverse=True,
        )
        grouped = group_history(flat, cap=5)
        assert len(grouped["a"]) == 5
        assert len(grouped["b"]) == 2
        assert grouped["a"][0].session_date == MONDAY

    def test_empty(self) -> None:
        assert group_history([]) == {}


class TestLastLoggedWeight:
    def test_first_positive_in_latest_entry(self) -> None:
        entry = SessionExercise(
            "a", MONDAY, sets=(ExerciseSet(1, weight=0), ExerciseSet(2, weight=42.5))
        )
        assert last_logged_weight((entry,)) == 42.5

    def test_none_without_weights(self) -> None:
        assert last_logged_weight(()) is None
        assert last_logged_weight(make_history("a", 1, weight=None)) is None


class TestFilterByEquipment:
    def test_shares_any_tag(self, library: list[Exercise]) -> None:
        out = filter_by_equipment(library, ["kettlebell"])
        assert {e.id for e in out} == {"kb-swing", "goblet"}

    def test_empty_means_no_filter(self, library: list[Exercise]) -> None:
        assert filter_by_equipment(library, []) == library
        assert filter_by_equipment(library, None) == library


class TestSuggestExercise:
    def setup_method(self) -> None:
        self.advisor = ProgressiveOverloadAdvisor()
        self.squat = Exercise("back-squat", "Back Squat", "strength", "squat")

    def test_row_fields(self) -> None:
        inputs = AdvisorInputs(running_load=0.0, load_factor=LoadFactor.LOW, week_type=WeekType.NON_KID)
        row = suggest_exercise(self.squat, make_history("back-squat", 4), inputs, self.advisor)
        assert row.name == "Back Squat"
        assert row.suggested_weight == 62.5
        assert row.last_weight == 60.0
        assert (row.suggested_sets, row.suggested_reps) == (4, 6)

    def test_reentry_reduces(self) -> None:
        inputs = AdvisorInputs(
            running_load=0.0,
            load_factor=LoadFactor.LOW,
            week_type=WeekType.NON_KID,
            is_reentry=True,
        )
        row = suggest_exercise(self.squat, make_history("back-squat", 4), inputs, self.advisor)
        assert row.suggested_weight == 60.0
        assert row.rationale.startswith("Re-entry after gap")

    def test_no_history_has_no_last_weight(self) -> None:
        inputs = AdvisorInputs(running_load=0.0, load_factor=LoadFactor.LOW, week_type=WeekType.NON_KID)
        row = suggest_exercise(self.squat, (), inputs, self.advisor)
        assert row.last_weight is None
        assert row.suggested_weight == 0.0
