"""WodGenerator — randomized conditioning workout for session C."""

from __future__ import annotations

import dataclasses
import logging
import random
from dataclasses import dataclass
from typing import Sequence

from gym_engine.data_source import TrainingDataSource
from gym_engine.models.enums import HISTORY_SESSIONS, SessionLabel, WodFormat
from gym_engine.models.suggestion import ExerciseSuggestion, WodDescriptor
from gym_engine.overload_advisor import ProgressiveOverloadAdvisor
from gym_engine.workout_builder.exercise_list import (
    AdvisorInputs,
    filter_by_equipment,
    group_history,
    suggest_exercise,
)
from gym_engine.workout_builder.session_templates import (
    CONDITIONING_CATEGORIES,
    SESSION_TEMPLATES,
)
from gym_engine.workout_builder.wod_templates import WodTemplate, eligible_templates

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WodResult:
    exercises: tuple[ExerciseSuggestion, ...]
    wod: WodDescriptor


class WodGenerator:
    """Compose a metcon from the conditioning pool.

    Selection is random: the candidate pool is shuffled and one eligible
    format is picked. Pass a seeded ``random.Random`` for repeatable output.

    Usage:
        generator = WodGenerator(source, rng=random.Random(7))
        result = generator.generate(inputs, equipment=["kettlebell"])
    """

    def __init__(
        self,
        source: TrainingDataSource,
        advisor: ProgressiveOverloadAdvisor | None = None,
        rng: random.Random | None = None,
        history_sessions: int = HISTORY_SESSIONS,
    ) -> None:
        self.source = source
        self.advisor = advisor or ProgressiveOverloadAdvisor()
        self.rng = rng or random.Random()
        self.history_sessions = history_sessions

    def pick_template(self, inputs: AdvisorInputs) -> WodTemplate:
        templates = eligible_templates(
            inputs.load_factor, inputs.is_reentry, inputs.week_type
        )
        return self.rng.choice(templates)

    def generate(
        self,
        inputs: AdvisorInputs,
        equipment: Sequence[str] | None = None,
    ) -> WodResult:
        """Pick a format, fill its slots and advise on each exercise.

        An equipment filter that matches nothing yields an empty exercise
        list; the WOD descriptor is still returned.
        """
        pool = self.source.exercises_for_conditioning(
            CONDITIONING_CATEGORIES, SESSION_TEMPLATES[SessionLabel.C].patterns
        )
        pool = filter_by_equipment(pool, equipment)
        self.rng.shuffle(pool)

        template = self.pick_template(inputs)
        picked = pool[: template.slots]
        if not picked:
            logger.warning("No conditioning exercises match equipment=%s", equipment)

        grouped = group_history(
            self.source.history_for_exercises([e.id for e in picked]) if picked else (),
            self.history_sessions,
        )

        exercises = []
        for i, exercise in enumerate(picked):
            row = suggest_exercise(
                exercise, grouped.get(exercise.id, ()), inputs, self.advisor
            )
            sets = None if template.format == WodFormat.TABATA else row.suggested_sets
            reps = template.reps_for_slot(i) or row.suggested_reps
            exercises.append(
                dataclasses.replace(row, suggested_sets=sets, suggested_reps=reps)
            )

        return WodResult(
            exercises=tuple(exercises),
            wod=WodDescriptor(
                name=template.name,
                format=template.format,
                duration=template.duration,
                description=template.description,
            ),
        )
