"""Morning scheduler — pushes today's gym session on gym days.

Usage:
    python -m scheduler.morning --once      # single run (for cron)
    python -m scheduler.morning --daemon    # APScheduler loop
"""

from __future__ import annotations

import argparse
import logging
from datetime import date, datetime
from typing import Any, Callable
from zoneinfo import ZoneInfo

from sqlalchemy.orm import Session

from gym_engine import SessionSuggestionEngine
from gym_engine.math.progression import format_kg
from gym_engine.models.enums import FRIDAY, SUNDAY, TUESDAY, WeekType
from gym_engine.models.history import RecoveryCheckIn
from gym_engine.models.suggestion import SessionSuggestion
from gym_engine.workout_builder.session_templates import template_name
from push_client import PushClient
from training_store import SqlTrainingStore, init_db, make_engine, make_session_factory

from scheduler.config import (
    DATABASE_URL,
    GYM_TIMEZONE,
    LOG_LEVEL,
    MORNING_HOUR,
    MORNING_MINUTE,
    PUSH_TIMEOUT_S,
    PUSH_URL,
)

logger = logging.getLogger(__name__)

GYM_DAYS: dict[WeekType, frozenset[int]] = {
    WeekType.NON_KID: frozenset({TUESDAY, FRIDAY, SUNDAY}),
    WeekType.KID: frozenset({TUESDAY, FRIDAY}),
}

_NOTIFICATION_EXERCISES = 4
_LOW_SUBJECTIVE_SCORE = 2
_DAY_ABBR = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def is_gym_day(day: date, week_type: WeekType) -> bool:
    return day.weekday() in GYM_DAYS[week_type]


def needs_easy_day(checkin: RecoveryCheckIn | None) -> bool:
    """Sore or badly slept, judged from today's check-in."""
    if checkin is None:
        return False
    return (
        checkin.soreness <= _LOW_SUBJECTIVE_SCORE
        or checkin.sleep_quality <= _LOW_SUBJECTIVE_SCORE
    )


def build_notification(suggestion: SessionSuggestion, take_it_easy: bool) -> tuple[str, str]:
    """Title and body for the gym-day push.

    The body lists up to four exercises that have a positive suggested
    weight; with none, it points the athlete at the app.
    """
    session = suggestion.recommended_session
    title = f"Gym Day: Session {session}"
    if take_it_easy:
        title += " (take it easy today)"

    weighted = [e for e in suggestion.suggested_exercises if e.suggested_weight > 0]
    lines = ", ".join(
        f"{e.name} {format_kg(e.suggested_weight)}kg"
        for e in weighted[:_NOTIFICATION_EXERCISES]
    )
    name = template_name(session)
    body = f"{name}: {lines}" if lines else f"{name} - check the app for details"
    return title, body


def _default_session_factory() -> Callable[[], Session]:
    engine = make_engine(DATABASE_URL)
    init_db(engine)
    return make_session_factory(engine)


def gym_suggestion_job(
    now: datetime | None = None,
    session_factory: Callable[[], Session] | None = None,
    push: PushClient | None = None,
) -> dict[str, Any]:
    """Execute one morning cycle: decide if today is a gym day and push the plan.

    Never raises; failures are logged and reported in the returned dict.
    """
    logger.info("Starting gym suggestion job")
    now = now or datetime.now(ZoneInfo(GYM_TIMEZONE))
    today = now.date()

    # 1. Open the store
    try:
        factory = session_factory or _default_session_factory()
        session = factory()
    except Exception as exc:
        logger.error("Failed to open training store: %s", exc)
        return {"success": False, "error": "store unavailable"}

    try:
        store = SqlTrainingStore(session)

        # 2. Week type follows the most recent session
        try:
            last = store.last_session()
        except Exception as exc:
            logger.error("Failed to read last session: %s", exc)
            return {"success": False, "error": "store unavailable"}
        week_type = WeekType.NON_KID
        if last is not None and last.week_type == WeekType.KID.value:
            week_type = WeekType.KID

        if not is_gym_day(today, week_type):
            reason = f"Not a gym day ({_DAY_ABBR[today.weekday()]}, {week_type.value} week)"
            logger.info(reason)
            return {"success": True, "skipped": True, "reason": reason}

        # 3. Suggestion and recovery
        try:
            suggestion = SessionSuggestionEngine(store).get_session_suggestion(
                week_type=week_type, today=today
            )
            checkin = store.latest_recovery_checkin(today)
        except Exception as exc:
            logger.error("Failed to build gym suggestion: %s", exc)
            return {"success": False, "error": "Failed to generate gym suggestion"}
    finally:
        session.close()

    title, body = build_notification(suggestion, needs_easy_day(checkin))

    # 4. Push
    try:
        client = push or PushClient(PUSH_URL, timeout=PUSH_TIMEOUT_S)
        push_result = client.send(title, body)
    except Exception as exc:
        logger.error("Failed to send push: %s", exc)
        return {"success": False, "error": "push failed", "title": title, "body": body}

    logger.info("Gym suggestion job complete: session %s", suggestion.recommended_session)
    return {
        "success": True,
        "session": suggestion.recommended_session,
        "sessionName": template_name(suggestion.recommended_session),
        "weekType": week_type.value,
        "exerciseCount": len(suggestion.suggested_exercises),
        "title": title,
        "body": body,
        "pushSent": push_result,
    }


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    parser = argparse.ArgumentParser(description="Gym-day morning scheduler")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--once", action="store_true", help="Run once and exit")
    group.add_argument("--daemon", action="store_true", help="Run as APScheduler daemon")
    args = parser.parse_args()

    if args.once:
        gym_suggestion_job()
    else:
        from apscheduler.schedulers.blocking import BlockingScheduler

        scheduler = BlockingScheduler(timezone=GYM_TIMEZONE)
        scheduler.add_job(
            gym_suggestion_job,
            "cron",
            hour=MORNING_HOUR,
            minute=MORNING_MINUTE,
            id="gym_suggestion_job",
        )
        logger.info(
            "Scheduler started — gym suggestion job at %02d:%02d %s",
            MORNING_HOUR,
            MORNING_MINUTE,
            GYM_TIMEZONE,
        )
        try:
            scheduler.start()
        except (KeyboardInterrupt, SystemExit):
            logger.info("Scheduler stopped")


if __name__ == "__main__":
    main()
