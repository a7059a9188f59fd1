"""Overload context — everything the advisor knows about one exercise."""

from __future__ import annotations

from dataclasses import dataclass, field

from gym_engine.math import progression
from gym_engine.models.enums import Confidence, LoadFactor, WeekType
from gym_engine.models.history import ExerciseSet, SessionExercise


@dataclass(frozen=True)
class OverloadContext:
    """Immutable input to the progressive-overload advisor.

    ``history`` holds at most the five most recent session entries for the
    exercise, most recent first, each with its sets in ascending order.
    """

    history: tuple[SessionExercise, ...] = field(default_factory=tuple)
    running_load: float = 0.0
    load_factor: LoadFactor = LoadFactor.LOW
    category: str | None = None
    movement_pattern: str | None = None
    week_type: WeekType | None = None
    recovery_score: float | None = None

    @property
    def recent_sets(self) -> tuple[ExerciseSet, ...]:
        return tuple(s for entry in self.history for s in entry.sets)

    @property
    def average_rpe(self) -> float:
        return progression.average_rpe(self.recent_sets)

    @property
    def last_weight(self) -> float:
        return progression.last_working_weight(self.recent_sets)

    @property
    def last_set_count(self) -> int:
        """Sets logged in the most recent entry, or the prescribed default."""
        if self.history and self.history[0].sets:
            return len(self.history[0].sets)
        return self.prescription[0]

    @property
    def last_reps(self) -> int:
        """Reps of the first set with reps in the most recent entry."""
        if self.history:
            for s in self.history[0].sets:
                if s.reps:
                    return s.reps
        return self.prescription[1]

    @property
    def increment(self) -> float:
        return progression.weight_increment(self.category, self.movement_pattern)

    @property
    def prescription(self) -> tuple[int, int]:
        return progression.default_prescription(self.category)

    @property
    def confidence(self) -> Confidence:
        return progression.confidence_for(len(self.history))

    @property
    def is_kid_week(self) -> bool:
        return self.week_type == WeekType.KID

    @property
    def low_recovery(self) -> bool:
        return progression.is_low_recovery(self.recovery_score)
