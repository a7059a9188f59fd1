"""Map raw Strava activity dicts to run records.

Strava reports distance in metres and moving time in seconds; run records
hold kilometres and minutes. Only ``Run`` and ``TrailRun`` activities are
runs.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from gym_engine.math.running_load import (
    calculate_pace,
    calculate_training_load,
    classify_run_type,
)
from gym_engine.models.history import RunActivity
from training_store.exceptions import ActivityMappingError

RUN_ACTIVITY_TYPES = frozenset({"Run", "TrailRun"})


def is_run(raw: dict[str, Any]) -> bool:
    return raw.get("type") in RUN_ACTIVITY_TYPES or raw.get("sport_type") in RUN_ACTIVITY_TYPES


def _start_date(raw: dict[str, Any]) -> date:
    value = raw.get("start_date_local") or raw.get("start_date")
    if not value:
        raise ActivityMappingError(f"Activity {raw.get('id')} has no start date")
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()
    except ValueError as e:
        raise ActivityMappingError(f"Activity {raw.get('id')} has a bad start date: {value}") from e


def map_strava_activity(raw: dict[str, Any]) -> RunActivity:
    """Convert one Strava activity dict to a RunActivity.

    Raises:
        ActivityMappingError: The dict lacks an id, start date, distance
            or moving time.
    """
    if raw.get("id") is None:
        raise ActivityMappingError("Activity has no id")
    if raw.get("distance") is None or raw.get("moving_time") is None:
        raise ActivityMappingError(f"Activity {raw['id']} has no distance or moving time")

    distance_km = float(raw["distance"]) / 1000
    duration_min = float(round(float(raw["moving_time"]) / 60))
    avg_hr = raw.get("average_heartrate") or None
    elevation_gain = raw.get("total_elevation_gain") or None
    name = raw.get("name")

    return RunActivity(
        source_id=str(raw["id"]),
        date=_start_date(raw),
        run_type=classify_run_type(distance_km, duration_min, avg_hr, elevation_gain, name).value,
        distance_km=distance_km,
        duration_min=duration_min,
        avg_pace=calculate_pace(distance_km, duration_min),
        training_load=calculate_training_load(distance_km, duration_min, avg_hr, elevation_gain),
        avg_hr=avg_hr,
        elevation_gain=elevation_gain,
        name=name,
    )
