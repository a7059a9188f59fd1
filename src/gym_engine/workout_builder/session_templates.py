"""Session templates — static mapping from session label to movement patterns.

Templates A and B are filled from the exercise library by pattern. Template
C lists the patterns the WOD generator draws from alongside the
``conditioning`` category.
"""

from __future__ import annotations

from dataclasses import dataclass

from gym_engine.models.enums import ExerciseCategory, SessionLabel


@dataclass(frozen=True)
class SessionTemplate:
    """One rotating gym session.

    Attributes:
        name: Display name used in rationale text and notifications.
        day: The weekday this session is pinned to.
        patterns: Movement patterns exercises are drawn from.
    """

    name: str
    day: str
    patterns: tuple[str, ...]


SESSION_TEMPLATES: dict[SessionLabel, SessionTemplate] = {
    SessionLabel.A: SessionTemplate(
        name="Strength + Power",
        day="Tuesday",
        patterns=("hip_hinge", "squat", "pull", "anti_rotation", "hip_extension"),
    ),
    SessionLabel.B: SessionTemplate(
        name="Upper + Core",
        day="Friday",
        patterns=("push", "pull", "carry", "anti_extension"),
    ),
    SessionLabel.C: SessionTemplate(
        name="Conditioning",
        day="Sunday",
        patterns=("compound", "squat", "hip_hinge", "cardio"),
    ),
}

CONDITIONING_CATEGORIES: tuple[str, ...] = (ExerciseCategory.CONDITIONING.value,)

CUSTOM_SESSION_NAME = "Custom session"


def get_template(session: str) -> SessionTemplate | None:
    """Template for a label, or None for free-form session types."""
    try:
        return SESSION_TEMPLATES[SessionLabel(session)]
    except ValueError:
        return None


def template_name(session: str) -> str:
    template = get_template(session)
    return template.name if template else CUSTOM_SESSION_NAME
