"""ORM tables for exercises, gym sessions, runs and recovery check-ins."""

from __future__ import annotations

import uuid
import datetime as dt

from sqlalchemy import JSON, Date, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from training_store.database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


def _now() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


class ExerciseRow(Base):
    """Exercise library entry. Seeded, read-only for the engine."""

    __tablename__ = "exercises"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    name: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    category: Mapped[str] = mapped_column(String, nullable=False, index=True)
    movement_pattern: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    equipment: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    muscles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)


class GymSessionRow(Base):
    __tablename__ = "gym_sessions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    session_type: Mapped[str] = mapped_column(String, nullable=False)
    week_type: Mapped[str | None] = mapped_column(String, nullable=True)
    rpe: Mapped[float | None] = mapped_column(Float, nullable=True)
    completed_at: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_now)

    exercises: Mapped[list[SessionExerciseRow]] = relationship(
        back_populates="session",
        order_by="SessionExerciseRow.order",
        cascade="all, delete-orphan",
    )


class SessionExerciseRow(Base):
    __tablename__ = "session_exercises"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    session_id: Mapped[str] = mapped_column(
        ForeignKey("gym_sessions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    exercise_id: Mapped[str] = mapped_column(
        ForeignKey("exercises.id"), nullable=False, index=True
    )
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    session: Mapped[GymSessionRow] = relationship(back_populates="exercises")
    exercise: Mapped[ExerciseRow] = relationship()
    sets: Mapped[list[ExerciseSetRow]] = relationship(
        back_populates="session_exercise",
        order_by="ExerciseSetRow.set_number",
        cascade="all, delete-orphan",
    )


class ExerciseSetRow(Base):
    __tablename__ = "exercise_sets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    session_exercise_id: Mapped[str] = mapped_column(
        ForeignKey("session_exercises.id", ondelete="CASCADE"), nullable=False, index=True
    )
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    time_s: Mapped[int | None] = mapped_column(Integer, nullable=True)
    distance_m: Mapped[float | None] = mapped_column(Float, nullable=True)
    rpe: Mapped[float | None] = mapped_column(Float, nullable=True)

    session_exercise: Mapped[SessionExerciseRow] = relationship(back_populates="sets")


class RunningSyncRow(Base):
    """One synced run. ``source_id`` is the dedup key across syncs."""

    __tablename__ = "running_sync"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    source_id: Mapped[str] = mapped_column(String, unique=True, nullable=False)
    source: Mapped[str] = mapped_column(String, nullable=False, default="strava")
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    run_type: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str | None] = mapped_column(String, nullable=True)
    distance_km: Mapped[float] = mapped_column(Float, nullable=False)
    duration_min: Mapped[float] = mapped_column(Float, nullable=False)
    avg_pace: Mapped[float] = mapped_column(Float, nullable=False)
    avg_hr: Mapped[float | None] = mapped_column(Float, nullable=True)
    elevation_gain: Mapped[float | None] = mapped_column(Float, nullable=True)
    training_load: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)


class RecoveryCheckInRow(Base):
    __tablename__ = "recovery_checkins"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_uuid)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False, index=True)
    sleep_quality: Mapped[int] = mapped_column(Integer, nullable=False)
    soreness: Mapped[int] = mapped_column(Integer, nullable=False)
    energy: Mapped[int] = mapped_column(Integer, nullable=False)
    motivation: Mapped[int] = mapped_column(Integer, nullable=False)
    hours_slept: Mapped[float | None] = mapped_column(Float, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), default=_now)
