"""SessionSuggestionEngine — decides today's gym session and fills it in."""

from __future__ import annotations

import logging
import random
from datetime import date, timedelta
from typing import Sequence

from gym_engine.config import EngineConfig
from gym_engine.data_source import TrainingDataSource
from gym_engine.math.progression import format_kg
from gym_engine.math.running_load import build_running_context
from gym_engine.models.decision_trace import DecisionTrace, RuleResult, RuleStatus
from gym_engine.models.enums import SessionLabel, WeekType
from gym_engine.models.running_context import RunningLoadContext
from gym_engine.models.suggestion import (
    DailyPlan,
    ExerciseSuggestion,
    FrequencyStats,
    LastSessionInfo,
    SessionSuggestion,
    WodDescriptor,
)
from gym_engine.overload_advisor import ProgressiveOverloadAdvisor
from gym_engine.registry import RuleRegistry, session_registry
from gym_engine.rules.base import SessionRule, SessionState
from gym_engine.workout_builder.exercise_list import (
    AdvisorInputs,
    group_history,
    suggest_exercise,
)
from gym_engine.workout_builder.session_templates import get_template, template_name
from gym_engine.workout_builder.wod_generator import WodGenerator

logger = logging.getLogger(__name__)

_DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_HEADLINE_EXERCISES = 3


class SessionSuggestionEngine:
    """Orchestrates session selection, exercise advice and WOD generation.

    All reads go through ``source`` and are batched per request: one
    exercise query and one history query regardless of how many exercises
    the session holds.

    Usage:
        engine = SessionSuggestionEngine(store)
        suggestion = engine.get_session_suggestion(week_type=WeekType.KID)
        plan = engine.build_daily_plan()
    """

    def __init__(
        self,
        source: TrainingDataSource,
        config: EngineConfig | None = None,
        rng: random.Random | None = None,
        advisor: ProgressiveOverloadAdvisor | None = None,
        session_rules: RuleRegistry[SessionRule] | None = None,
    ) -> None:
        self.source = source
        self.config = config or EngineConfig()
        self.advisor = advisor or ProgressiveOverloadAdvisor()
        self.session_rules = session_rules or session_registry()
        self.wod_generator = WodGenerator(
            source,
            advisor=self.advisor,
            rng=rng,
            history_sessions=self.config.history_sessions,
        )

    # ------------------------------------------------------------------
    # Running load
    # ------------------------------------------------------------------

    def weekly_running_load(self, days: int = 7, today: date | None = None) -> float:
        """Summed run training load over the trailing *days*, today included."""
        today = today or date.today()
        return self.source.training_load_between(today - timedelta(days=days - 1), today)

    def running_context(self, today: date | None = None) -> RunningLoadContext:
        """Acute/chronic load, ACWR and trend as of *today*."""
        today = today or date.today()
        acute = self.weekly_running_load(self.config.acute_window_days, today)
        chronic = self.weekly_running_load(self.config.chronic_window_days, today)
        return build_running_context(acute, chronic)

    # ------------------------------------------------------------------
    # Session selection
    # ------------------------------------------------------------------

    def select_session(self, state: SessionState) -> tuple[str, str | None, DecisionTrace]:
        """Run the session steps in stage order.

        Returns:
            (label, rationale override or None, trace). Every applicable
            step overrides the label; the last step with a rationale wins.
        """
        current = SessionLabel.A.value
        rationale: str | None = None
        rule_results: list[RuleResult] = []

        for rule in self.session_rules.get_all_rules():
            if not rule.applies(state, current):
                rule_results.append(RuleResult(rule.rule_id, RuleStatus.SKIPPED))
                continue
            decision = rule.decide(state, current)
            rule_results.append(
                RuleResult(
                    rule.rule_id,
                    RuleStatus.FIRED,
                    f"{current} -> {decision.session}",
                )
            )
            current = decision.session
            if decision.rationale:
                rationale = decision.rationale

        return current, rationale, DecisionTrace(rule_results=tuple(rule_results))

    def frequency(self, today: date) -> FrequencyStats:
        """Sessions since Monday of this week and since the 1st of the month."""
        week_start = today - timedelta(days=today.weekday())
        month_start = today.replace(day=1)
        return FrequencyStats(
            this_week=self.source.count_sessions_between(week_start, today),
            this_month=self.source.count_sessions_between(month_start, today),
        )

    def recovery_score(self, today: date) -> float | None:
        checkin = self.source.latest_recovery_checkin(today)
        return checkin.readiness_score if checkin else None

    # ------------------------------------------------------------------
    # Suggestion
    # ------------------------------------------------------------------

    def get_session_suggestion(
        self,
        week_type: WeekType | str | None = None,
        equipment: Sequence[str] | None = None,
        today: date | None = None,
    ) -> SessionSuggestion:
        """Recommend the next session with per-exercise weight advice.

        Args:
            week_type: Availability week, as the enum or its "kid" / "non-kid"
                value; absent means non-kid.
            equipment: Equipment on hand, used only for session C.
            today: Date to plan for (defaults to today).
        """
        today = today or date.today()
        week_type = WeekType(week_type) if week_type else WeekType.NON_KID

        last = self.source.last_session()
        context = self.running_context(today)
        frequency = self.frequency(today)
        recovery_score = self.recovery_score(today)

        days_ago = (today - last.date).days if last else None
        is_reentry = days_ago is not None and days_ago >= self.config.reentry_gap_days

        state = SessionState(
            today=today,
            week_type=week_type,
            load_factor=context.load_factor,
            running_load=context.weekly_load,
            last_session_type=last.session_type if last else None,
        )
        session, rationale, trace = self.select_session(state)

        if rationale is None:
            rationale = self._default_rationale(session, state)
        if is_reentry:
            rationale += f" {days_ago} days since last session, easing back in."
            logger.info("Re-entry after %d days, reducing suggested weights", days_ago)

        inputs = AdvisorInputs(
            running_load=context.weekly_load,
            load_factor=context.load_factor,
            week_type=week_type,
            is_reentry=is_reentry,
            recovery_score=recovery_score,
        )

        wod: WodDescriptor | None = None
        if session == SessionLabel.C.value:
            result = self.wod_generator.generate(inputs, equipment)
            exercises = result.exercises
            wod = result.wod
        else:
            exercises = self._template_exercises(session, inputs)

        logger.info(
            "recommended=%s week=%s load=%s exercises=%d",
            session,
            week_type.value,
            context.load_factor.value,
            len(exercises),
        )

        return SessionSuggestion(
            recommended_session=session,
            rationale=rationale,
            week_type=week_type,
            running_load_last_7_days=context.weekly_load,
            running_context=context,
            frequency=frequency,
            last_session=(
                LastSessionInfo(last.session_type, last.date, days_ago)
                if last and days_ago is not None
                else None
            ),
            suggested_exercises=exercises,
            wod=wod,
            recovery_score=recovery_score,
            trace=trace,
        )

    def _default_rationale(self, session: str, state: SessionState) -> str:
        text = (
            f"{_DAY_NAMES[state.weekday]} - {template_name(session)}. "
            f"Running load {state.load_factor.value} ({format_kg(state.running_load)})."
        )
        if state.week_type == WeekType.KID:
            text += " Kid week: focus on quality over volume."
        return text

    def _template_exercises(
        self, session: str, inputs: AdvisorInputs
    ) -> tuple[ExerciseSuggestion, ...]:
        template = get_template(session)
        if template is None:
            return ()

        exercises = self.source.exercises_by_patterns(
            template.patterns, self.config.template_exercise_limit
        )
        if not exercises:
            logger.warning("No exercises found for session %s", session)
            return ()

        grouped = group_history(
            self.source.history_for_exercises([e.id for e in exercises]),
            self.config.history_sessions,
        )
        return tuple(
            suggest_exercise(e, grouped.get(e.id, ()), inputs, self.advisor)
            for e in exercises
        )

    # ------------------------------------------------------------------
    # Daily plan
    # ------------------------------------------------------------------

    def build_daily_plan(
        self,
        week_type: WeekType | str | None = None,
        equipment: Sequence[str] | None = None,
        today: date | None = None,
    ) -> DailyPlan:
        """Session suggestion plus a train-or-rest verdict for today.

        Rest is recommended when today's readiness is below the rest-day
        threshold or the ACWR is above the veto threshold. A busy week is
        reported as a reason but does not block training.
        """
        today = today or date.today()
        suggestion = self.get_session_suggestion(week_type, equipment, today)
        recovery_score = suggestion.recovery_score
        sessions_last_7_days = self.source.count_sessions_between(
            today - timedelta(days=7), today
        )

        should_train = True
        reasons: list[str] = []
        if recovery_score is not None and recovery_score < self.config.rest_day_readiness:
            should_train = False
            reasons.append("recovery score very low")
        if suggestion.running_context.acwr > self.config.acwr_veto_threshold:
            should_train = False
            reasons.append("ACWR spike detected")
        if sessions_last_7_days >= self.config.busy_week_sessions:
            reasons.append(f"already trained {self.config.busy_week_sessions}+ times this week")

        if should_train:
            listed = ", ".join(
                f"{e.name} {format_kg(e.suggested_weight)}kg"
                for e in suggestion.suggested_exercises[:_HEADLINE_EXERCISES]
            )
            headline = f"Session {suggestion.recommended_session} today: {listed or 'check exercises'}"
        else:
            headline = f"Rest day recommended: {', '.join(reasons)}"

        plural = "" if sessions_last_7_days == 1 else "s"
        context = ", ".join(
            (
                "Kid week" if suggestion.week_type == WeekType.KID else "Non-kid week",
                f"{sessions_last_7_days} session{plural} this week",
                f"Running load {suggestion.running_context.load_factor.value}",
            )
        )

        if not should_train:
            logger.info("Rest day recommended: %s", "; ".join(reasons))

        return DailyPlan(
            headline=headline,
            should_train=should_train,
            suggestion=suggestion,
            recovery_score=recovery_score,
            reasons=tuple(reasons),
            sessions_last_7_days=sessions_last_7_days,
            context=context,
        )
