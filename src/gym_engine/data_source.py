"""Read interface the engine needs from the training store.

The engine never writes. Every method is a point-in-time batched read, so
the number of queries per suggestion does not depend on how many exercises
are in the session.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Protocol, Sequence

from gym_engine.models.history import (
    Exercise,
    GymSession,
    RecoveryCheckIn,
    RunActivity,
    SessionExercise,
)


class TrainingDataSource(Protocol):
    """Store queries consumed by ``SessionSuggestionEngine``."""

    def last_session(self) -> GymSession | None:
        """Most recent session by date (exercises need not be loaded)."""
        ...

    def exercises_by_patterns(
        self, patterns: Sequence[str], limit: int
    ) -> list[Exercise]:
        """Up to *limit* exercises whose movement pattern is in *patterns*."""
        ...

    def exercises_for_conditioning(
        self, categories: Sequence[str], patterns: Sequence[str]
    ) -> list[Exercise]:
        """Exercises in any of *categories* or any of *patterns*.

        Equipment filtering is left to the caller.
        """
        ...

    def history_for_exercises(
        self, exercise_ids: Iterable[str]
    ) -> list[SessionExercise]:
        """Flat session-exercise history for all ids, most recent first.

        One query for the whole batch; sets ascend by set number.
        """
        ...

    def training_load_between(self, start: date, end: date) -> float:
        """Summed run training load for ``start <= date <= end``."""
        ...

    def run_activities_between(self, start: date, end: date) -> list[RunActivity]:
        ...

    def count_sessions_between(self, start: date, end: date) -> int:
        ...

    def latest_recovery_checkin(self, on_or_after: date) -> RecoveryCheckIn | None:
        ...
