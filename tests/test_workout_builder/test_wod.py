"""Tests for the WOD format table and generator."""

from __future__ import annotations

import random

import pytest
from gym_fixtures import make_history

from gym_engine.models.enums import LoadFactor, WeekType, WodFormat
from gym_engine.workout_builder.exercise_list import AdvisorInputs
from gym_engine.workout_builder.wod_generator import WodGenerator
from gym_engine.workout_builder.wod_templates import (
    WOD_TEMPLATES,
    WodTemplate,
    eligible_templates,
)


def _inputs(**kwargs) -> AdvisorInputs:
    kwargs.setdefault("running_load", 100.0)
    kwargs.setdefault("load_factor", LoadFactor.LOW)
    kwargs.setdefault("week_type", WeekType.NON_KID)
    return AdvisorInputs(**kwargs)


def _by_name(name: str) -> WodTemplate:
    return next(t for t in WOD_TEMPLATES if t.name == name)


class _FixedTemplate(WodGenerator):
    def __init__(self, template: WodTemplate, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.template = template

    def pick_template(self, inputs: AdvisorInputs) -> WodTemplate:
        return self.template


class TestEligibleTemplates:
    def test_all_when_fresh(self) -> None:
        assert eligible_templates(LoadFactor.LOW, False, WeekType.NON_KID) == WOD_TEMPLATES

    def test_high_load_excludes_long_formats(self) -> None:
        names = [t.name for t in eligible_templates(LoadFactor.HIGH, False, WeekType.NON_KID)]
        assert "EMOM 20" not in names
        assert "Tabata x4" in names
        assert "21-15-9" in names

    def test_reentry_same_as_high_load(self) -> None:
        assert eligible_templates(LoadFactor.LOW, True, WeekType.NON_KID) == eligible_templates(
            LoadFactor.HIGH, False, WeekType.NON_KID
        )

    def test_kid_week_caps_at_fifteen(self) -> None:
        names = {t.name for t in eligible_templates(LoadFactor.LOW, False, WeekType.KID)}
        assert names == {"AMRAP 15", "21-15-9", "5 Rounds"}

    def test_never_empty(self) -> None:
        for load in LoadFactor:
            for reentry in (True, False):
                for week in WeekType:
                    assert eligible_templates(load, reentry, week)


class TestWodTemplate:
    def test_reps_for_slot(self) -> None:
        assert _by_name("21-15-9").reps_for_slot(1) == 15
        assert _by_name("5 Rounds").reps_for_slot(7) == 10
        assert _by_name("Tabata x4").reps_for_slot(2) is None

    def test_for_time_fits_any_cap(self) -> None:
        assert _by_name("21-15-9").fits_within(1)
        assert not _by_name("EMOM 20").fits_within(16)


class TestWodGenerator:
    def test_slots_filled_from_pool(self, source_factory) -> None:
        source = source_factory()
        template = _by_name("AMRAP 15")
        result = _FixedTemplate(template, source, rng=random.Random(3)).generate(_inputs())
        assert len(result.exercises) == template.slots
        assert [e.suggested_reps for e in result.exercises] == [10, 15, 20]
        assert result.wod.name == "AMRAP 15"
        assert result.wod.duration == 15

    def test_seeded_rng_repeats(self, source_factory) -> None:
        a = WodGenerator(source_factory(), rng=random.Random(11)).generate(_inputs())
        b = WodGenerator(source_factory(), rng=random.Random(11)).generate(_inputs())
        assert a == b

    def test_high_load_never_emom(self, source_factory) -> None:
        generator = WodGenerator(source_factory(), rng=random.Random(0))
        for _ in range(30):
            result = generator.generate(_inputs(load_factor=LoadFactor.HIGH))
            assert result.wod.name != "EMOM 20"

    def test_tabata_has_no_sets(self, source_factory) -> None:
        result = _FixedTemplate(_by_name("Tabata x4"), source_factory()).generate(_inputs())
        assert result.wod.format == WodFormat.TABATA
        for e in result.exercises:
            assert e.suggested_sets is None
            assert e.suggested_reps is not None

    def test_equipment_filter(self, source_factory) -> None:
        result = WodGenerator(source_factory(), rng=random.Random(5)).generate(
            _inputs(), equipment=["kettlebell"]
        )
        assert {e.exercise_id for e in result.exercises} <= {"kb-swing", "goblet"}

    def test_unmatched_equipment_still_returns_wod(self, source_factory) -> None:
        source = source_factory()
        result = WodGenerator(source, rng=random.Random(5)).generate(
            _inputs(), equipment=["sled"]
        )
        assert result.exercises == ()
        assert result.wod is not None
        assert source.calls["history_for_exercises"] == 0

    def test_history_fetched_once(self, source_factory) -> None:
        source = source_factory(history=make_history("kb-swing", 3, weight=24.0))
        result = _FixedTemplate(_by_name("Tabata x4"), source).generate(_inputs())
        assert source.calls["history_for_exercises"] == 1
        assert len(source.history_requests[0]) == 4
        assert len(result.exercises) == 4

    @pytest.mark.parametrize("week", list(WeekType))
    def test_reentry_eases_weighted_movements(self, source_factory, week: WeekType) -> None:
        source = source_factory(history=make_history("kb-swing", 3, weight=24.0, rpe=7.5))
        template = _by_name("21-15-9")
        generator = _FixedTemplate(template, source, rng=random.Random(2))
        fresh = {e.exercise_id: e for e in generator.generate(_inputs(week_type=week)).exercises}
        generator.rng = random.Random(2)
        eased = {
            e.exercise_id: e
            for e in generator.generate(_inputs(week_type=week, is_reentry=True)).exercises
        }
        for exercise_id, row in eased.items():
            if fresh[exercise_id].suggested_weight > 0:
                assert row.suggested_weight < fresh[exercise_id].suggested_weight
