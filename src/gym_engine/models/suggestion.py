"""Engine outputs — weight suggestions, session suggestions, daily plans."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from gym_engine.models.decision_trace import DecisionTrace
from gym_engine.models.enums import Confidence, WeekType, WodFormat
from gym_engine.models.running_context import RunningLoadContext


@dataclass(frozen=True)
class WeightSuggestion:
    """What the overload advisor proposes for one exercise."""

    weight: float
    confidence: Confidence
    rationale: str
    sets: int | None = None
    reps: int | None = None
    rule_id: str = ""


@dataclass(frozen=True)
class ExerciseSuggestion:
    """One line of a suggested session."""

    name: str
    exercise_id: str
    suggested_weight: float
    rationale: str
    last_weight: float | None = None
    suggested_sets: int | None = None
    suggested_reps: int | None = None
    confidence: Confidence | None = None


@dataclass(frozen=True)
class WodDescriptor:
    """The chosen workout-of-the-day format."""

    name: str
    format: WodFormat
    duration: int | None
    description: str


@dataclass(frozen=True)
class FrequencyStats:
    """Sessions logged this calendar week (from Monday) and month."""

    this_week: int
    this_month: int


@dataclass(frozen=True)
class LastSessionInfo:
    session_type: str
    date: date
    days_ago: int


@dataclass(frozen=True)
class SessionSuggestion:
    """Full answer to "what should I do in the gym next?"."""

    recommended_session: str
    rationale: str
    week_type: WeekType
    running_load_last_7_days: float
    running_context: RunningLoadContext
    frequency: FrequencyStats
    last_session: LastSessionInfo | None
    suggested_exercises: tuple[ExerciseSuggestion, ...] = field(default_factory=tuple)
    wod: WodDescriptor | None = None
    recovery_score: float | None = None
    trace: DecisionTrace = field(default_factory=DecisionTrace)


@dataclass(frozen=True)
class DailyPlan:
    """Session suggestion plus a train / rest verdict for today."""

    headline: str
    should_train: bool
    suggestion: SessionSuggestion
    recovery_score: float | None
    reasons: tuple[str, ...]
    sessions_last_7_days: int
    context: str
