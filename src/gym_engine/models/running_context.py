"""Running load summaries consumed by the session engine and the API."""

from __future__ import annotations

from dataclasses import dataclass, field

from gym_engine.models.enums import ACWR_VETO_THRESHOLD, LoadFactor, LoadTrend


@dataclass(frozen=True)
class RunningLoadContext:
    """Acute/chronic running load picture at a point in time.

    ``weekly_load`` and ``acute_load`` are the same trailing 7-day sum;
    both are kept because callers read them under either name.
    """

    weekly_load: float
    acwr: float
    acute_load: float
    chronic_load: float
    trend: LoadTrend
    load_factor: LoadFactor
    recommendation: str

    @property
    def injury_risk(self) -> bool:
        """True when the acute:chronic ratio is in the spike zone."""
        return self.acwr > ACWR_VETO_THRESHOLD


@dataclass(frozen=True)
class RunWindowStats:
    """Totals for one trailing window of runs."""

    total_distance_km: float
    total_duration_min: float
    training_load: float
    sessions: int


@dataclass(frozen=True)
class RunningStats:
    """Last-7 / last-30 day running statistics with a week-over-week trend."""

    last_7_days: RunWindowStats
    last_30_days: RunWindowStats
    load_trend: LoadTrend
    daily_loads: tuple[float, ...] = field(default_factory=tuple)
