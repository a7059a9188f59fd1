"""Training history records — immutable snapshots read from the store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class Exercise:
    """A named movement from the exercise library.

    ``category`` is one of power/strength/accessory/core/warmup/conditioning
    but any string is tolerated; unknown categories fall back to generic
    defaults downstream.
    """

    id: str
    name: str
    category: str
    movement_pattern: str | None = None
    equipment: frozenset[str] = field(default_factory=frozenset)
    muscles: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class ExerciseSet:
    """One logged set. Every metric is optional."""

    set_number: int
    weight: float | None = None
    reps: int | None = None
    time_s: int | None = None
    distance_m: float | None = None
    rpe: float | None = None


@dataclass(frozen=True)
class SessionExercise:
    """One exercise performed within a session, with its sets in order."""

    exercise_id: str
    session_date: date
    order: int = 0
    week_type: str | None = None
    sets: tuple[ExerciseSet, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class GymSession:
    """A logged (or planned) gym session."""

    id: str
    date: date
    session_type: str
    week_type: str | None = None
    rpe: float | None = None
    completed_at: datetime | None = None
    exercises: tuple[SessionExercise, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RunActivity:
    """A completed run as synced from the activity provider."""

    source_id: str
    date: date
    run_type: str
    distance_km: float
    duration_min: float
    avg_pace: float
    training_load: float
    avg_hr: float | None = None
    elevation_gain: float | None = None
    name: str | None = None


@dataclass(frozen=True)
class RecoveryCheckIn:
    """Daily subjective readiness entry, each score 1-5."""

    date: date
    sleep_quality: int
    soreness: int
    energy: int
    motivation: int
    hours_slept: float | None = None
    notes: str | None = None

    @property
    def readiness_score(self) -> float:
        """Mean of the four subjective scores."""
        return (self.sleep_quality + self.soreness + self.energy + self.motivation) / 4
