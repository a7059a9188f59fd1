"""Running load calculations: load score, run classification, ACWR, trend.

The load score is a cheap TRIMP-like proxy that needs no per-runner max HR
calibration:

    load = (distance_km * 10 + duration_min * 0.5) * hr_modifier
           + elevation_gain_m * 0.1

Acute load is the trailing 7-day sum, chronic load the trailing 28-day sum;
ACWR compares their daily averages.
"""

from __future__ import annotations

import re
from datetime import date, timedelta
from typing import Iterable

import pandas as pd

from gym_engine.models.enums import (
    ACUTE_WINDOW_DAYS,
    ACWR_CAUTION_THRESHOLD,
    ACWR_OPTIMAL_LOW,
    ACWR_TREND_DECREASING,
    ACWR_TREND_INCREASING,
    ACWR_UNDERTRAINED,
    ACWR_VETO_THRESHOLD,
    BASELINE_HIGH_RATIO,
    BASELINE_MODERATE_RATIO,
    CHRONIC_WINDOW_DAYS,
    DAILY_LOAD_CHART_DAYS,
    DEFAULT_AVG_HR,
    DEFAULT_ELEVATION_GAIN_M,
    HILLS_ELEVATION_M,
    HR_HARD_BPM,
    HR_HARD_MODIFIER,
    HR_VERY_HARD_BPM,
    HR_VERY_HARD_MODIFIER,
    INTERVALS_HR_BPM,
    INTERVALS_PACE_MIN_PER_KM,
    LOAD_HIGH_THRESHOLD,
    LOAD_MODERATE_THRESHOLD,
    LOAD_PER_ELEVATION_M,
    LOAD_PER_KM,
    LOAD_PER_MINUTE,
    LONG_RUN_KM,
    TEMPO_HR_BPM,
    TEMPO_PACE_MIN_PER_KM,
    WEEK_OVER_WEEK_TREND_PCT,
    LoadFactor,
    LoadTrend,
    RunType,
)
from gym_engine.models.history import RunActivity
from gym_engine.models.running_context import (
    RunningLoadContext,
    RunningStats,
    RunWindowStats,
)

# Athlete-labelled intent, checked in this order
_NAME_PATTERNS: tuple[tuple[re.Pattern[str], RunType], ...] = (
    (re.compile(r"\b(easy|recovery|shake[- ]?out)\b"), RunType.EASY),
    (re.compile(r"\b(intervals?|speed|fartlek|repeats?|track)\b"), RunType.INTERVALS),
    (re.compile(r"\b(tempo|threshold|cruise)\b"), RunType.TEMPO),
    (re.compile(r"\b(hill|hills|incline|elevation)\b"), RunType.HILLS),
    (re.compile(r"\blong\b"), RunType.LONG),
)


def _require(value: float | None, field_name: str) -> float:
    if value is None:
        raise ValueError(f"Run activity is missing required field: {field_name}")
    return float(value)


def calculate_training_load(
    distance_km: float | None,
    duration_min: float | None,
    avg_hr: float | None = None,
    elevation_gain: float | None = None,
) -> int:
    """Standardised training load for one run.

    Missing heart rate defaults to 140 bpm and missing elevation to 0 m.
    Distance and duration are required.

    Returns:
        Non-negative integer load score.
    """
    distance = max(0.0, _require(distance_km, "distance_km"))
    duration = max(0.0, _require(duration_min, "duration_min"))
    hr = DEFAULT_AVG_HR if avg_hr is None else float(avg_hr)
    elevation = DEFAULT_ELEVATION_GAIN_M if elevation_gain is None else max(0.0, float(elevation_gain))

    load = distance * LOAD_PER_KM + duration * LOAD_PER_MINUTE

    if hr > HR_VERY_HARD_BPM:
        load *= HR_VERY_HARD_MODIFIER
    elif hr > HR_HARD_BPM:
        load *= HR_HARD_MODIFIER

    load += elevation * LOAD_PER_ELEVATION_M
    return int(round(load))


def calculate_training_load_for(activity: RunActivity) -> int:
    """Recompute the load score of an already-mapped activity."""
    return calculate_training_load(
        activity.distance_km,
        activity.duration_min,
        activity.avg_hr,
        activity.elevation_gain,
    )


def calculate_pace(distance_km: float, duration_min: float) -> float:
    """Average pace in min/km, rounded to 2 dp. 0 for a zero-distance run."""
    if distance_km <= 0:
        return 0.0
    return round(duration_min / distance_km, 2)


def classify_run_type_by_name(name: str | None) -> RunType | None:
    """Run type from an activity title, or None if the title says nothing."""
    if not name:
        return None
    lower = name.lower()
    for pattern, run_type in _NAME_PATTERNS:
        if pattern.search(lower):
            return run_type
    return None


def classify_run_type(
    distance_km: float,
    duration_min: float,
    avg_hr: float | None = None,
    elevation_gain: float | None = None,
    name: str | None = None,
) -> RunType:
    """Classify a run. The athlete's title wins over pace/HR heuristics.

    Metric fallback, in priority order: > 12 km long; HR > 165 or pace
    < 4:30/km intervals; HR > 150 or pace < 5:00/km tempo; > 100 m climb
    hills; otherwise easy.
    """
    by_name = classify_run_type_by_name(name)
    if by_name is not None:
        return by_name

    hr = avg_hr or 0.0
    pace = duration_min / distance_km if distance_km > 0 else float("inf")

    if distance_km > LONG_RUN_KM:
        return RunType.LONG
    if hr > INTERVALS_HR_BPM or pace < INTERVALS_PACE_MIN_PER_KM:
        return RunType.INTERVALS
    if hr > TEMPO_HR_BPM or pace < TEMPO_PACE_MIN_PER_KM:
        return RunType.TEMPO
    if (elevation_gain or 0.0) > HILLS_ELEVATION_M:
        return RunType.HILLS
    return RunType.EASY


def classify_run_type_for(activity: RunActivity) -> RunType:
    """Classify an already-mapped activity, title first."""
    return classify_run_type(
        activity.distance_km,
        activity.duration_min,
        activity.avg_hr,
        activity.elevation_gain,
        activity.name,
    )


def classify_load(load: float, baseline: float | None = None) -> LoadFactor:
    """Classify a weekly running load.

    With a positive personal baseline (average weekly load over the chronic
    window) the ratio decides; otherwise fixed thresholds of 300 and 500.
    """
    if baseline is not None and baseline > 0:
        ratio = load / baseline
        if ratio > BASELINE_HIGH_RATIO:
            return LoadFactor.HIGH
        if ratio > BASELINE_MODERATE_RATIO:
            return LoadFactor.MODERATE
        return LoadFactor.LOW

    if load > LOAD_HIGH_THRESHOLD:
        return LoadFactor.HIGH
    if load > LOAD_MODERATE_THRESHOLD:
        return LoadFactor.MODERATE
    return LoadFactor.LOW


def calculate_acwr(acute_load: float, chronic_load: float) -> float:
    """Acute:chronic workload ratio from trailing 7- and 28-day sums.

    Returns 0.0 when there is no chronic load to compare against.
    """
    chronic_avg = chronic_load / CHRONIC_WINDOW_DAYS
    if chronic_avg <= 0:
        return 0.0
    acute_avg = acute_load / ACUTE_WINDOW_DAYS
    return round(acute_avg / chronic_avg, 2)


def classify_trend(acwr: float, chronic_load: float) -> LoadTrend:
    """Load direction from the ACWR. No chronic history means stable."""
    if chronic_load <= 0:
        return LoadTrend.STABLE
    if acwr > ACWR_TREND_INCREASING:
        return LoadTrend.INCREASING
    if acwr < ACWR_TREND_DECREASING:
        return LoadTrend.DECREASING
    return LoadTrend.STABLE


def load_recommendation(acwr: float, chronic_load: float) -> str:
    """Human-readable advice for an ACWR value."""
    if acwr > ACWR_VETO_THRESHOLD:
        return "Spike detected - high injury risk. Consider rest or easy movement only."
    if acwr > ACWR_CAUTION_THRESHOLD:
        return "Load rising fast. Scale back intensity or skip high-impact work."
    if acwr < ACWR_UNDERTRAINED and chronic_load > 0:
        return "Undertraining - ramp back up gradually."
    if ACWR_OPTIMAL_LOW <= acwr <= ACWR_CAUTION_THRESHOLD:
        return "Sweet spot - load is well managed."
    return "Moderate load. Continue as planned."


def build_running_context(acute_load: float, chronic_load: float) -> RunningLoadContext:
    """Assemble the running load context from the two trailing sums.

    The personal baseline used to classify this week's load is the average
    weekly load over the chronic window.
    """
    acwr = calculate_acwr(acute_load, chronic_load)
    weekly_baseline = chronic_load / (CHRONIC_WINDOW_DAYS / ACUTE_WINDOW_DAYS)
    return RunningLoadContext(
        weekly_load=acute_load,
        acwr=acwr,
        acute_load=acute_load,
        chronic_load=chronic_load,
        trend=classify_trend(acwr, chronic_load),
        load_factor=classify_load(acute_load, weekly_baseline or None),
        recommendation=load_recommendation(acwr, chronic_load),
    )


# ---------------------------------------------------------------------------
# Activity-level aggregation
# ---------------------------------------------------------------------------


def _activities_frame(activities: Iterable[RunActivity]) -> pd.DataFrame:
    rows = [
        {
            "date": pd.Timestamp(a.date),
            "distance_km": a.distance_km,
            "duration_min": a.duration_min,
            "training_load": a.training_load,
        }
        for a in activities
    ]
    columns = ["date", "distance_km", "duration_min", "training_load"]
    return pd.DataFrame(rows, columns=columns)


def daily_load_series(
    activities: Iterable[RunActivity], end: date, days: int
) -> pd.Series:
    """Daily summed training load for the *days* days ending on *end*.

    Days without a run are 0. Index is a daily DatetimeIndex, oldest first.
    """
    index = pd.date_range(end=pd.Timestamp(end), periods=days, freq="D")
    frame = _activities_frame(activities)
    if frame.empty:
        return pd.Series(0.0, index=index, name="training_load")
    daily = frame.groupby("date")["training_load"].sum()
    return daily.reindex(index, fill_value=0.0).astype(float).rename("training_load")


def _window_stats(frame: pd.DataFrame, start: date, end: date) -> RunWindowStats:
    mask = (frame["date"] >= pd.Timestamp(start)) & (frame["date"] <= pd.Timestamp(end))
    window = frame.loc[mask]
    return RunWindowStats(
        total_distance_km=round(float(window["distance_km"].sum()), 1),
        total_duration_min=float(window["duration_min"].sum()),
        training_load=float(window["training_load"].sum()),
        sessions=int(len(window)),
    )


def summarize_runs(activities: Iterable[RunActivity], today: date) -> RunningStats:
    """Running statistics for the last 7 and 30 days.

    ``daily_loads`` covers the last 14 days, oldest first, for charting.
    The load trend compares the last 7 days with the 7 before them:
    more than 15% up is increasing, more than 15% down is decreasing.
    """
    activities = list(activities)
    frame = _activities_frame(activities)
    last_7 = _window_stats(frame, today - timedelta(days=7), today)
    last_30 = _window_stats(frame, today - timedelta(days=30), today)
    previous_7 = _window_stats(
        frame, today - timedelta(days=14), today - timedelta(days=8)
    )

    trend = LoadTrend.STABLE
    if previous_7.training_load > 0:
        if last_7.training_load > previous_7.training_load * (1 + WEEK_OVER_WEEK_TREND_PCT):
            trend = LoadTrend.INCREASING
        elif last_7.training_load < previous_7.training_load * (1 - WEEK_OVER_WEEK_TREND_PCT):
            trend = LoadTrend.DECREASING

    daily = daily_load_series(activities, today, DAILY_LOAD_CHART_DAYS)
    return RunningStats(
        last_7_days=last_7,
        last_30_days=last_30,
        load_trend=trend,
        daily_loads=tuple(float(v) for v in daily.to_numpy()),
    )
