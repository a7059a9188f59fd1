"""SqlTrainingStore — SQLAlchemy implementation of the engine's data source."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date
from typing import Iterable, Iterator, Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, contains_eager, joinedload

from gym_engine.models.history import (
    Exercise,
    ExerciseSet,
    GymSession,
    RecoveryCheckIn,
    RunActivity,
    SessionExercise,
)
from training_store.exceptions import StoreUnavailableError
from training_store.tables import (
    ExerciseRow,
    GymSessionRow,
    RecoveryCheckInRow,
    RunningSyncRow,
    SessionExerciseRow,
)

logger = logging.getLogger(__name__)


class SqlTrainingStore:
    """Read and sync-side write access to the training database.

    Every read used by the engine is a single statement, so the number of
    round trips per suggestion does not grow with the exercise count.

    Usage:
        with session_factory() as session:
            store = SqlTrainingStore(session)
            engine = SessionSuggestionEngine(store)
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.error("Database error while %s: %s", action, e)
            raise StoreUnavailableError(f"Database error while {action}") from e

    # ------------------------------------------------------------------
    # Engine reads
    # ------------------------------------------------------------------

    def last_session(self) -> GymSession | None:
        with self._guard("reading last session"):
            row = self.session.scalars(
                select(GymSessionRow)
                .order_by(GymSessionRow.date.desc(), GymSessionRow.created_at.desc())
                .limit(1)
            ).first()
        if row is None:
            return None
        return GymSession(
            id=row.id,
            date=row.date,
            session_type=row.session_type,
            week_type=row.week_type,
            rpe=row.rpe,
            completed_at=row.completed_at,
        )

    def exercises_by_patterns(self, patterns: Sequence[str], limit: int) -> list[Exercise]:
        with self._guard("reading exercises by pattern"):
            rows = self.session.scalars(
                select(ExerciseRow)
                .where(ExerciseRow.movement_pattern.in_(list(patterns)))
                .order_by(ExerciseRow.name)
                .limit(limit)
            ).all()
        return [_exercise(r) for r in rows]

    def exercises_for_conditioning(
        self, categories: Sequence[str], patterns: Sequence[str]
    ) -> list[Exercise]:
        with self._guard("reading conditioning exercises"):
            rows = self.session.scalars(
                select(ExerciseRow)
                .where(
                    or_(
                        ExerciseRow.category.in_(list(categories)),
                        ExerciseRow.movement_pattern.in_(list(patterns)),
                    )
                )
                .order_by(ExerciseRow.name)
            ).all()
        return [_exercise(r) for r in rows]

    def history_for_exercises(self, exercise_ids: Iterable[str]) -> list[SessionExercise]:
        """All session entries for the ids, most recent session first.

        Sets and the owning session are loaded in the same statement.
        """
        ids = list(exercise_ids)
        if not ids:
            return []
        with self._guard("reading exercise history"):
            rows = self.session.scalars(
                select(SessionExerciseRow)
                .join(SessionExerciseRow.session)
                .options(
                    contains_eager(SessionExerciseRow.session),
                    joinedload(SessionExerciseRow.sets),
                )
                .where(SessionExerciseRow.exercise_id.in_(ids))
                .order_by(GymSessionRow.date.desc(), GymSessionRow.created_at.desc())
            ).unique().all()
        return [_session_exercise(r) for r in rows]

    def training_load_between(self, start: date, end: date) -> float:
        with self._guard("summing training load"):
            total = self.session.scalar(
                select(func.coalesce(func.sum(RunningSyncRow.training_load), 0.0)).where(
                    RunningSyncRow.date >= start, RunningSyncRow.date <= end
                )
            )
        return float(total or 0.0)

    def run_activities_between(self, start: date, end: date) -> list[RunActivity]:
        with self._guard("reading run activities"):
            rows = self.session.scalars(
                select(RunningSyncRow)
                .where(RunningSyncRow.date >= start, RunningSyncRow.date <= end)
                .order_by(RunningSyncRow.date.desc())
            ).all()
        return [_run(r) for r in rows]

    def count_sessions_between(self, start: date, end: date) -> int:
        with self._guard("counting sessions"):
            count = self.session.scalar(
                select(func.count(GymSessionRow.id)).where(
                    GymSessionRow.date >= start, GymSessionRow.date <= end
                )
            )
        return int(count or 0)

    def latest_recovery_checkin(self, on_or_after: date) -> RecoveryCheckIn | None:
        with self._guard("reading recovery check-in"):
            row = self.session.scalars(
                select(RecoveryCheckInRow)
                .where(RecoveryCheckInRow.date >= on_or_after)
                .order_by(RecoveryCheckInRow.date.desc(), RecoveryCheckInRow.created_at.desc())
                .limit(1)
            ).first()
        if row is None:
            return None
        return RecoveryCheckIn(
            date=row.date,
            sleep_quality=row.sleep_quality,
            soreness=row.soreness,
            energy=row.energy,
            motivation=row.motivation,
            hours_slept=row.hours_slept,
            notes=row.notes,
        )

    # ------------------------------------------------------------------
    # Sync and check-in writes
    # ------------------------------------------------------------------

    def upsert_run_activity(self, activity: RunActivity, source: str = "strava") -> bool:
        """Insert or update a run keyed on ``source_id``.

        Returns:
            True when a new row was created.
        """
        with self._guard("upserting run activity"):
            row = self.session.scalars(
                select(RunningSyncRow).where(RunningSyncRow.source_id == activity.source_id)
            ).first()
            created = row is None
            if row is None:
                row = RunningSyncRow(source_id=activity.source_id, source=source)
                self.session.add(row)
            row.date = activity.date
            row.run_type = activity.run_type
            row.name = activity.name
            row.distance_km = activity.distance_km
            row.duration_min = activity.duration_min
            row.avg_pace = activity.avg_pace
            row.avg_hr = activity.avg_hr
            row.elevation_gain = activity.elevation_gain
            row.training_load = activity.training_load
            self.session.commit()
        logger.debug("%s run %s", "Created" if created else "Updated", activity.source_id)
        return created

    def add_recovery_checkin(self, checkin: RecoveryCheckIn) -> None:
        with self._guard("saving recovery check-in"):
            self.session.add(
                RecoveryCheckInRow(
                    date=checkin.date,
                    sleep_quality=checkin.sleep_quality,
                    soreness=checkin.soreness,
                    energy=checkin.energy,
                    motivation=checkin.motivation,
                    hours_slept=checkin.hours_slept,
                    notes=checkin.notes,
                )
            )
            self.session.commit()


# ---------------------------------------------------------------------------
# Row -> model conversion
# ---------------------------------------------------------------------------


def _exercise(row: ExerciseRow) -> Exercise:
    return Exercise(
        id=row.id,
        name=row.name,
        category=row.category,
        movement_pattern=row.movement_pattern,
        equipment=frozenset(row.equipment or ()),
        muscles=frozenset(row.muscles or ()),
    )


def _session_exercise(row: SessionExerciseRow) -> SessionExercise:
    return SessionExercise(
        exercise_id=row.exercise_id,
        session_date=row.session.date,
        order=row.order,
        week_type=row.session.week_type,
        sets=tuple(
            ExerciseSet(
                set_number=s.set_number,
                weight=s.weight,
                reps=s.reps,
                time_s=s.time_s,
                distance_m=s.distance_m,
                rpe=s.rpe,
            )
            for s in row.sets
        ),
    )


def _run(row: RunningSyncRow) -> RunActivity:
    return RunActivity(
        source_id=row.source_id,
        date=row.date,
        run_type=row.run_type,
        distance_km=row.distance_km,
        duration_min=row.duration_min,
        avg_pace=row.avg_pace,
        training_load=row.training_load,
        avg_hr=row.avg_hr,
        elevation_gain=row.elevation_gain,
        name=row.name,
    )
