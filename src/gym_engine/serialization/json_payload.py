"""JSON payloads for the HTTP layer.

Converts engine outputs into the camelCase dicts mobile and dashboard
clients read. Optional fields (``suggestedSets``, ``suggestedReps``,
``confidence``, ``wod``) are left out entirely when absent rather than
sent as null.

All functions are pure (no I/O).
"""

from __future__ import annotations

from gym_engine.models.running_context import RunningLoadContext, RunningStats, RunWindowStats
from gym_engine.models.suggestion import (
    DailyPlan,
    ExerciseSuggestion,
    LastSessionInfo,
    SessionSuggestion,
    WodDescriptor,
)


def to_payload(suggestion: SessionSuggestion) -> dict:
    """Convert a SessionSuggestion to its JSON-ready dict."""
    payload = {
        "recommendedSession": suggestion.recommended_session,
        "rationale": suggestion.rationale,
        "weekType": suggestion.week_type.value,
        "runningLoadLast7Days": suggestion.running_load_last_7_days,
        "runningContext": _running_context(suggestion.running_context),
        "frequency": {
            "thisWeek": suggestion.frequency.this_week,
            "thisMonth": suggestion.frequency.this_month,
        },
        "lastSession": _last_session(suggestion.last_session),
        "suggestedExercises": [_exercise(e) for e in suggestion.suggested_exercises],
    }
    if suggestion.wod is not None:
        payload["wod"] = _wod(suggestion.wod)
    return payload


def daily_plan_to_payload(plan: DailyPlan) -> dict:
    return {
        "headline": plan.headline,
        "shouldTrain": plan.should_train,
        "reasons": list(plan.reasons),
        "suggestion": to_payload(plan.suggestion),
        "recoveryScore": plan.recovery_score,
        "runningContext": _running_context(plan.suggestion.running_context, full=True),
        "sessionsLast7Days": plan.sessions_last_7_days,
        "context": plan.context,
    }


def running_stats_to_payload(stats: RunningStats) -> dict:
    return {
        "last7Days": _window(stats.last_7_days),
        "last30Days": _window(stats.last_30_days),
        "loadTrend": stats.load_trend.value,
        "dailyLoads": list(stats.daily_loads),
    }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _running_context(ctx: RunningLoadContext, full: bool = False) -> dict:
    result = {
        "acwr": ctx.acwr,
        "trend": ctx.trend.value,
        "weeklyLoad": ctx.weekly_load,
        "recommendation": ctx.recommendation,
    }
    if full:
        result.update(
            {
                "acuteLoad": ctx.acute_load,
                "chronicLoad": ctx.chronic_load,
                "loadFactor": ctx.load_factor.value,
                "injuryRisk": ctx.injury_risk,
            }
        )
    return result


def _last_session(info: LastSessionInfo | None) -> dict | None:
    if info is None:
        return None
    return {
        "type": info.session_type,
        "date": info.date.isoformat(),
        "daysAgo": info.days_ago,
    }


def _exercise(e: ExerciseSuggestion) -> dict:
    result = {
        "name": e.name,
        "exerciseId": e.exercise_id,
        "suggestedWeight": e.suggested_weight,
        "lastWeight": e.last_weight,
        "rationale": e.rationale,
    }
    if e.suggested_sets is not None:
        result["suggestedSets"] = e.suggested_sets
    if e.suggested_reps is not None:
        result["suggestedReps"] = e.suggested_reps
    if e.confidence is not None:
        result["confidence"] = e.confidence.value
    return result


def _wod(wod: WodDescriptor) -> dict:
    return {
        "name": wod.name,
        "format": wod.format.value,
        "duration": wod.duration,
        "description": wod.description,
    }


def _window(w: RunWindowStats) -> dict:
    return {
        "totalDistance": w.total_distance_km,
        "totalDuration": w.total_duration_min,
        "trainingLoad": w.training_load,
        "sessions": w.sessions,
    }
