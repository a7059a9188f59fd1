"""Gym training-recommendation engine.

Pure core: load math, the progressive-overload advisor, session selection
and workout-of-the-day generation. Reads come through a
``TrainingDataSource``; the engine never writes.
"""

from gym_engine.config import EngineConfig
from gym_engine.engine import SessionSuggestionEngine
from gym_engine.overload_advisor import (
    ProgressiveOverloadAdvisor,
    apply_reentry,
    suggest_weight_from_data,
)

__all__ = [
    "EngineConfig",
    "ProgressiveOverloadAdvisor",
    "SessionSuggestionEngine",
    "apply_reentry",
    "suggest_weight_from_data",
]
