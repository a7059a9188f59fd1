"""Tests for the morning gym-day scheduler job."""

from __future__ import annotations

from datetime import datetime
from unittest.mock import MagicMock
from zoneinfo import ZoneInfo

import pytest
from gym_fixtures import FRIDAY, MONDAY, SUNDAY, TUESDAY, exercise_row, session_row

from gym_engine.math.running_load import build_running_context
from gym_engine.models.enums import WeekType
from gym_engine.models.history import RecoveryCheckIn
from gym_engine.models.suggestion import ExerciseSuggestion, FrequencyStats, SessionSuggestion
from push_client.exceptions import PushAPIError
from scheduler.morning import build_notification, gym_suggestion_job, is_gym_day, needs_easy_day
from training_store.tables import RecoveryCheckInRow

SYDNEY = ZoneInfo("Australia/Sydney")


def _at(day) -> datetime:
    return datetime(day.year, day.month, day.day, 6, 30, tzinfo=SYDNEY)


def _suggestion(session: str, *rows: ExerciseSuggestion) -> SessionSuggestion:
    return SessionSuggestion(
        recommended_session=session,
        rationale="",
        week_type=WeekType.NON_KID,
        running_load_last_7_days=0.0,
        running_context=build_running_context(0.0, 0.0),
        frequency=FrequencyStats(0, 0),
        last_session=None,
        suggested_exercises=rows,
    )


@pytest.fixture
def push() -> MagicMock:
    client = MagicMock()
    client.send.return_value = {"sent": 1}
    return client


@pytest.fixture
def gym_db(seed) -> None:
    seed(
        exercise_row("deadlift", "strength", "hip_hinge", ("barbell",)),
        exercise_row("back-squat", "strength", "squat", ("barbell",)),
        exercise_row("pull-up", "strength", "pull"),
        exercise_row("kb-swing", "conditioning", "hip_hinge", ("kettlebell",)),
        session_row(MONDAY, "C", {"deadlift": [(100, 5, 6.0)] * 3}),
    )


class TestGymDays:
    def test_non_kid_week(self) -> None:
        assert [is_gym_day(d, WeekType.NON_KID) for d in (MONDAY, TUESDAY, FRIDAY, SUNDAY)] == [
            False,
            True,
            True,
            True,
        ]

    def test_kid_week_skips_sunday(self) -> None:
        assert is_gym_day(FRIDAY, WeekType.KID)
        assert not is_gym_day(SUNDAY, WeekType.KID)


class TestNeedsEasyDay:
    def test_no_checkin(self) -> None:
        assert not needs_easy_day(None)

    def test_sore_or_short_sleep(self) -> None:
        assert needs_easy_day(RecoveryCheckIn(TUESDAY, 4, 2, 4, 4))
        assert needs_easy_day(RecoveryCheckIn(TUESDAY, 1, 5, 5, 5))
        assert not needs_easy_day(RecoveryCheckIn(TUESDAY, 3, 3, 1, 1))


class TestBuildNotification:
    def test_lists_weighted_exercises(self) -> None:
        rows = [
            ExerciseSuggestion("Deadlift", "deadlift", 102.5, ""),
            ExerciseSuggestion("Plank", "plank", 0.0, ""),
            ExerciseSuggestion("Back Squat", "back-squat", 80.0, ""),
            ExerciseSuggestion("Pull Up", "pull-up", 10.0, ""),
            ExerciseSuggestion("Hip Thrust", "hip-thrust", 90.0, ""),
            ExerciseSuggestion("Row", "row", 40.0, ""),
        ]
        title, body = build_notification(_suggestion("A", *rows), take_it_easy=False)
        assert title == "Gym Day: Session A"
        assert body == (
            "Strength + Power: Deadlift 102.5kg, Back Squat 80kg, Pull Up 10kg, Hip Thrust 90kg"
        )

    def test_nothing_weighted(self) -> None:
        title, body = build_notification(_suggestion("C"), take_it_easy=True)
        assert title == "Gym Day: Session C (take it easy today)"
        assert body == "Conditioning - check the app for details"


class TestGymSuggestionJob:
    def test_skips_non_gym_day(self, session_factory, push) -> None:
        result = gym_suggestion_job(_at(MONDAY), session_factory, push)
        assert result == {
            "success": True,
            "skipped": True,
            "reason": "Not a gym day (Mon, non-kid week)",
        }
        push.send.assert_not_called()

    def test_kid_week_from_last_session(self, session_factory, seed, push) -> None:
        seed(session_row(FRIDAY, "B", week_type="kid"))
        result = gym_suggestion_job(_at(SUNDAY), session_factory, push)
        assert result["skipped"] is True
        assert result["reason"] == "Not a gym day (Sun, kid week)"

    def test_sends_push_on_gym_day(self, session_factory, gym_db, push) -> None:
        result = gym_suggestion_job(_at(TUESDAY), session_factory, push)
        assert result["success"] is True
        assert result["session"] == "A"
        assert result["sessionName"] == "Strength + Power"
        assert result["weekType"] == "non-kid"
        assert result["exerciseCount"] == 4
        assert result["title"] == "Gym Day: Session A"
        assert result["body"] == "Strength + Power: Deadlift 102.5kg"
        assert result["pushSent"] == {"sent": 1}
        push.send.assert_called_once_with(result["title"], result["body"])

    def test_sore_athlete_gets_easy_title(self, session_factory, seed, gym_db, push) -> None:
        seed(
            RecoveryCheckInRow(
                date=TUESDAY, sleep_quality=4, soreness=2, energy=4, motivation=4
            )
        )
        result = gym_suggestion_job(_at(TUESDAY), session_factory, push)
        assert result["title"].endswith("(take it easy today)")

    def test_store_unavailable(self, push) -> None:
        factory = MagicMock(side_effect=RuntimeError("no database"))
        result = gym_suggestion_job(_at(TUESDAY), factory, push)
        assert result == {"success": False, "error": "store unavailable"}
        push.send.assert_not_called()

    def test_push_failure_is_reported(self, session_factory, gym_db, push) -> None:
        push.send.side_effect = PushAPIError("HTTP 500", status_code=500)
        result = gym_suggestion_job(_at(TUESDAY), session_factory, push)
        assert result["success"] is False
        assert result["error"] == "push failed"
        assert result["title"] == "Gym Day: Session A"
