"""Serialization module — engine outputs as JSON-ready dicts."""

from gym_engine.serialization.json_payload import (
    daily_plan_to_payload,
    running_stats_to_payload,
    to_payload,
)

__all__ = ["daily_plan_to_payload", "running_stats_to_payload", "to_payload"]
