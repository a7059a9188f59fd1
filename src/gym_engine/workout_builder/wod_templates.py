"""Workout-of-the-day format table.

Durations are in minutes; ``None`` marks a for-time format, which has no
fixed duration and so is never excluded by a duration cap.
"""

from __future__ import annotations

from dataclasses import dataclass

from gym_engine.models.enums import (
    WOD_MAX_DURATION_FATIGUED_MIN,
    WOD_MAX_DURATION_KID_WEEK_MIN,
    LoadFactor,
    WeekType,
    WodFormat,
)


@dataclass(frozen=True)
class WodTemplate:
    """One metcon format.

    Attributes:
        name: Display name, e.g. "AMRAP 15".
        format: Scoring format.
        duration: Minutes, or None for for-time formats.
        description: One-line instructions.
        slots: Number of exercises the format needs.
        default_reps: Reps per slot; an entry of 0 means time-based.
    """

    name: str
    format: WodFormat
    duration: int | None
    description: str
    slots: int
    default_reps: tuple[int, ...]

    def fits_within(self, max_minutes: int) -> bool:
        return self.duration is None or self.duration <= max_minutes

    def reps_for_slot(self, index: int) -> int | None:
        """Template reps for a slot, falling back to the first entry.

        Returns None for time-based formats so the caller can use the
        advisor's reps instead.
        """
        if index < len(self.default_reps) and self.default_reps[index]:
            return self.default_reps[index]
        return self.default_reps[0] or None


WOD_TEMPLATES: tuple[WodTemplate, ...] = (
    WodTemplate(
        name="AMRAP 15",
        format=WodFormat.AMRAP,
        duration=15,
        description="As many rounds as possible in 15 minutes",
        slots=3,
        default_reps=(10, 15, 20),
    ),
    WodTemplate(
        name="EMOM 20",
        format=WodFormat.EMOM,
        duration=20,
        description="Every minute on the minute for 20 minutes (alternate movements)",
        slots=2,
        default_reps=(10, 12),
    ),
    WodTemplate(
        name="21-15-9",
        format=WodFormat.FOR_TIME,
        duration=None,
        description="Complete 21-15-9 reps of each movement for time",
        slots=2,
        default_reps=(21, 15, 9),
    ),
    WodTemplate(
        name="Tabata x4",
        format=WodFormat.TABATA,
        duration=16,
        description="4 movements, 4 minutes each (20s work / 10s rest x 8)",
        slots=4,
        default_reps=(0,),
    ),
    WodTemplate(
        name="5 Rounds",
        format=WodFormat.FOR_TIME,
        duration=None,
        description="5 rounds for time",
        slots=3,
        default_reps=(10, 12, 15),
    ),
)


def eligible_templates(
    load_factor: LoadFactor,
    is_reentry: bool,
    week_type: WeekType,
) -> tuple[WodTemplate, ...]:
    """Formats allowed today.

    A high running load or a re-entry day caps duration at 16 minutes; a kid
    week caps it at 15 on top of that.
    """
    templates = WOD_TEMPLATES
    if load_factor == LoadFactor.HIGH or is_reentry:
        templates = tuple(
            t for t in templates if t.fits_within(WOD_MAX_DURATION_FATIGUED_MIN)
        )
    if week_type == WeekType.KID:
        templates = tuple(
            t for t in templates if t.fits_within(WOD_MAX_DURATION_KID_WEEK_MIN)
        )
    return templates
