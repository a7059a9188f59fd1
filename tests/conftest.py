"""Shared test fixtures: exercise library, logged history, an in-memory data source."""

from __future__ import annotations

from datetime import timedelta
from typing import Callable, Iterator

import pytest
from gym_fixtures import MONDAY, FakeDataSource, make_run
from sqlalchemy import Engine, event
from sqlalchemy.orm import Session, sessionmaker

from gym_engine.models.history import Exercise, RunActivity
from training_store import SqlTrainingStore, init_db, make_engine, make_session_factory


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def library() -> list[Exercise]:
    """A small exercise library covering all three session templates."""
    return [
        Exercise("deadlift", "Deadlift", "strength", "hip_hinge", frozenset({"barbell"})),
        Exercise("back-squat", "Back Squat", "strength", "squat", frozenset({"barbell"})),
        Exercise("pull-up", "Pull Up", "strength", "pull", frozenset({"pullup_bar"})),
        Exercise("pallof", "Pallof Press", "core", "anti_rotation", frozenset({"cable"})),
        Exercise("hip-thrust", "Hip Thrust", "accessory", "hip_extension", frozenset({"barbell"})),
        Exercise("bench", "Bench Press", "strength", "push", frozenset({"barbell"})),
        Exercise("farmer", "Farmer Carry", "accessory", "carry", frozenset({"dumbbell"})),
        Exercise("plank", "Plank", "core", "anti_extension", frozenset()),
        Exercise("kb-swing", "Kettlebell Swing", "conditioning", "hip_hinge", frozenset({"kettlebell"})),
        Exercise("thruster", "Dumbbell Thruster", "conditioning", "compound", frozenset({"dumbbell"})),
        Exercise("burpee", "Burpee", "conditioning", "compound", frozenset()),
        Exercise("row", "Row Erg", "conditioning", "cardio", frozenset({"rower"})),
        Exercise("goblet", "Goblet Squat", "accessory", "squat", frozenset({"kettlebell", "dumbbell"})),
    ]


@pytest.fixture
def source_factory(library: list[Exercise]) -> Callable[..., FakeDataSource]:
    """Build a FakeDataSource over the standard library."""

    def _make(**kwargs) -> FakeDataSource:
        kwargs.setdefault("exercises", library)
        return FakeDataSource(**kwargs)

    return _make


@pytest.fixture
def heavy_runs() -> list[RunActivity]:
    """Last week well above the absolute and personal high thresholds."""
    return [make_run(MONDAY - timedelta(days=i), 150.0) for i in range(5)]


@pytest.fixture
def steady_runs() -> list[RunActivity]:
    """Every other day for four weeks at 30: acute 120, chronic 420."""
    return [make_run(MONDAY - timedelta(days=i), 30.0) for i in range(0, 28, 2)]


# ---------------------------------------------------------------------------
# Training database (in-memory SQLite)
# ---------------------------------------------------------------------------


@pytest.fixture
def db_engine() -> Iterator[Engine]:
    engine = make_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine: Engine) -> sessionmaker[Session]:
    return make_session_factory(db_engine)


@pytest.fixture
def store(session_factory: sessionmaker[Session]) -> Iterator[SqlTrainingStore]:
    session = session_factory()
    yield SqlTrainingStore(session)
    session.close()


@pytest.fixture
def statements(db_engine: Engine) -> list[str]:
    """SQL statements executed against the engine, in order."""
    seen: list[str] = []

    def _record(conn, cursor, statement, parameters, context, executemany) -> None:
        seen.append(statement)

    event.listen(db_engine, "before_cursor_execute", _record)
    return seen


@pytest.fixture
def seed(session_factory: sessionmaker[Session]) -> Callable[..., None]:
    """Write rows through a separate session so reads start cold."""

    def _seed(*rows) -> None:
        with session_factory() as session:
            session.add_all(rows)
            session.commit()

    return _seed
