"""Gym endpoints: session suggestion, daily plan, running statistics."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from gym_api.dependencies import get_engine, get_store, get_today
from gym_engine import SessionSuggestionEngine
from gym_engine.data_source import TrainingDataSource
from gym_engine.math.running_load import summarize_runs
from gym_engine.models.enums import WeekType
from gym_engine.serialization import (
    daily_plan_to_payload,
    running_stats_to_payload,
    to_payload,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/gym", tags=["gym"])

_STATS_WINDOW_DAYS = 30


class InvalidQueryError(ValueError):
    """A query parameter could not be parsed."""


def parse_week_type(value: str | None) -> WeekType | None:
    if not value:
        return None
    try:
        return WeekType(value)
    except ValueError:
        allowed = ", ".join(w.value for w in WeekType)
        raise InvalidQueryError(f"Invalid weekType '{value}'. Expected one of: {allowed}") from None


def parse_equipment(value: str | None) -> list[str] | None:
    """Comma-separated equipment list; blanks are dropped."""
    if not value:
        return None
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or None


def _failure(message: str) -> JSONResponse:
    return JSONResponse(status_code=500, content={"success": False, "error": message})


@router.get("/suggest")
def suggest(
    week_type: str | None = Query(None, alias="weekType"),
    equipment: str | None = Query(None),
    engine: SessionSuggestionEngine = Depends(get_engine),
    today: date = Depends(get_today),
):
    parsed_week = parse_week_type(week_type)
    try:
        suggestion = engine.get_session_suggestion(
            parsed_week, parse_equipment(equipment), today
        )
    except Exception:
        logger.exception("Error generating session suggestion")
        return _failure("Failed to generate suggestion")
    return {"success": True, "data": to_payload(suggestion)}


@router.get("/daily-plan")
def daily_plan(
    week_type: str | None = Query(None, alias="weekType"),
    equipment: str | None = Query(None),
    engine: SessionSuggestionEngine = Depends(get_engine),
    today: date = Depends(get_today),
):
    parsed_week = parse_week_type(week_type)
    try:
        plan = engine.build_daily_plan(
            parsed_week, parse_equipment(equipment), today
        )
    except Exception:
        logger.exception("Error generating daily plan")
        return _failure("Failed to generate plan")
    return {"success": True, "data": daily_plan_to_payload(plan)}


@router.get("/running/stats")
def running_stats(
    store: TrainingDataSource = Depends(get_store),
    today: date = Depends(get_today),
):
    try:
        activities = store.run_activities_between(
            today - timedelta(days=_STATS_WINDOW_DAYS), today
        )
        stats = summarize_runs(activities, today)
    except Exception:
        logger.exception("Error fetching running stats")
        return _failure("Failed to fetch running stats")
    return {"success": True, "data": running_stats_to_payload(stats)}
