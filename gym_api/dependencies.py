"""Request-scoped dependencies: the training store, the engine and today's date."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterator
from zoneinfo import ZoneInfo

from fastapi import Depends, Request

from gym_api.config import GYM_TIMEZONE
from gym_engine import SessionSuggestionEngine
from gym_engine.data_source import TrainingDataSource
from training_store import SqlTrainingStore


def get_store(request: Request) -> Iterator[SqlTrainingStore]:
    """One database session per request, closed afterwards."""
    session = request.app.state.session_factory()
    try:
        yield SqlTrainingStore(session)
    finally:
        session.close()


def get_engine(
    request: Request, store: TrainingDataSource = Depends(get_store)
) -> SessionSuggestionEngine:
    """Engine over this request's store, sharing the app's discovered rules."""
    return SessionSuggestionEngine(
        store,
        advisor=request.app.state.advisor,
        session_rules=request.app.state.session_rules,
    )


def get_today() -> date:
    """Today in the gym's local timezone."""
    return datetime.now(ZoneInfo(GYM_TIMEZONE)).date()
