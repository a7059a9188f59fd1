"""Enumerations and tuning constants for the gym engine.

Every threshold the engine uses lives here so it can be overridden in one
place (see ``EngineConfig`` in ``gym_engine.config``).
"""

from enum import Enum, IntEnum


class WeekType(str, Enum):
    """Two-week availability cycle. Kid weeks trade volume for quality."""

    KID = "kid"
    NON_KID = "non-kid"


class LoadFactor(str, Enum):
    """Classification of weekly running load."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class LoadTrend(str, Enum):
    """Direction of running load derived from the acute:chronic ratio."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class RunType(str, Enum):
    """Classified run session type."""

    EASY = "easy"
    INTERVALS = "intervals"
    TEMPO = "tempo"
    HILLS = "hills"
    LONG = "long"


class Confidence(str, Enum):
    """How much history backs a weight suggestion."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SessionLabel(str, Enum):
    """Rotating gym session templates."""

    A = "A"
    B = "B"
    C = "C"


class WodFormat(str, Enum):
    """Workout-of-the-day scoring formats."""

    AMRAP = "amrap"
    EMOM = "emom"
    FOR_TIME = "fortime"
    TABATA = "tabata"


class ExerciseCategory(str, Enum):
    """Exercise categories as seeded in the exercise library."""

    POWER = "power"
    STRENGTH = "strength"
    ACCESSORY = "accessory"
    CORE = "core"
    WARMUP = "warmup"
    CONDITIONING = "conditioning"


class OverloadPriority(IntEnum):
    """Evaluation order of the progressive-overload decision table.

    Lower value = evaluated first. The first rule that applies wins.
    """

    NO_HISTORY = 0
    NO_WEIGHT_HISTORY = 1
    DELOAD = 2
    HOLD = 3
    KID_WEEK = 4
    PROGRESS = 5
    ON_TRACK = 6


class SessionStage(IntEnum):
    """Evaluation order of session-selection steps.

    Every applicable step runs, in this order, each one overriding the
    label produced by the steps before it.
    """

    ROTATION = 0
    DAY_OVERRIDE = 1
    KID_WEEK_GUARD = 2
    LOAD_INTERFERENCE = 3


# ---------------------------------------------------------------------------
# Running load
# ---------------------------------------------------------------------------

# Load = distance_km * 10 + duration_min * 0.5, scaled by HR, plus elevation
LOAD_PER_KM = 10.0
LOAD_PER_MINUTE = 0.5
LOAD_PER_ELEVATION_M = 0.1

# Neutral defaults for incomplete activities
DEFAULT_AVG_HR = 140.0
DEFAULT_ELEVATION_GAIN_M = 0.0

# Heart-rate intensity modifiers
HR_VERY_HARD_BPM = 160
HR_HARD_BPM = 145
HR_VERY_HARD_MODIFIER = 1.5
HR_HARD_MODIFIER = 1.2

# Metric-based run classification
LONG_RUN_KM = 12.0
INTERVALS_HR_BPM = 165
INTERVALS_PACE_MIN_PER_KM = 4.5
TEMPO_HR_BPM = 150
TEMPO_PACE_MIN_PER_KM = 5.0
HILLS_ELEVATION_M = 100.0

# Absolute weekly load thresholds (no personal baseline)
LOAD_HIGH_THRESHOLD = 500
LOAD_MODERATE_THRESHOLD = 300

# Baseline-relative thresholds (weekly load / 28-day weekly average)
BASELINE_HIGH_RATIO = 1.3
BASELINE_MODERATE_RATIO = 0.8

# Acute:chronic windows (days)
ACUTE_WINDOW_DAYS = 7
CHRONIC_WINDOW_DAYS = 28

# ACWR bands
ACWR_VETO_THRESHOLD = 1.5
ACWR_CAUTION_THRESHOLD = 1.3
ACWR_OPTIMAL_LOW = 0.8
ACWR_UNDERTRAINED = 0.5
ACWR_TREND_INCREASING = 1.1
ACWR_TREND_DECREASING = 0.9

# Week-over-week trend band for running stats
WEEK_OVER_WEEK_TREND_PCT = 0.15
DAILY_LOAD_CHART_DAYS = 14

# ---------------------------------------------------------------------------
# Progressive overload
# ---------------------------------------------------------------------------

HISTORY_SESSIONS = 5
DEFAULT_RPE = 7.0
DELOAD_RPE = 8.5
HOLD_RPE = 8.0
PROGRESS_RPE = 7.0
LOW_RECOVERY_SCORE = 3.0
KID_WEEK_MIN_SETS = 2

HIGH_CONFIDENCE_ENTRIES = 4
MEDIUM_CONFIDENCE_ENTRIES = 2

LOWER_BODY_PATTERNS = frozenset({"hip_hinge", "squat", "hip_extension"})
LOWER_BODY_INCREMENT_KG = 2.5
DEFAULT_INCREMENT_KG = 1.25
DEFAULT_PRESCRIPTION = (3, 8)

CATEGORY_INCREMENT_KG: dict[str, float] = {
    ExerciseCategory.POWER.value: 2.5,
    ExerciseCategory.STRENGTH.value: 2.5,
    ExerciseCategory.ACCESSORY.value: 1.25,
    ExerciseCategory.CORE.value: 0.0,
    ExerciseCategory.WARMUP.value: 0.0,
    ExerciseCategory.CONDITIONING.value: 0.0,
}

# (sets, reps) when there is nothing to progress from
CATEGORY_PRESCRIPTION: dict[str, tuple[int, int]] = {
    ExerciseCategory.POWER.value: (4, 5),
    ExerciseCategory.STRENGTH.value: (4, 6),
    ExerciseCategory.ACCESSORY.value: (3, 10),
    ExerciseCategory.CORE.value: (3, 12),
    ExerciseCategory.WARMUP.value: (2, 10),
    ExerciseCategory.CONDITIONING.value: (3, 12),
}

# ---------------------------------------------------------------------------
# Session selection
# ---------------------------------------------------------------------------

REENTRY_GAP_DAYS = 5
TEMPLATE_EXERCISE_LIMIT = 6

# date.weekday(): Monday=0 ... Sunday=6
TUESDAY = 1
FRIDAY = 4
SUNDAY = 6

# ---------------------------------------------------------------------------
# WOD selection
# ---------------------------------------------------------------------------

WOD_MAX_DURATION_FATIGUED_MIN = 16
WOD_MAX_DURATION_KID_WEEK_MIN = 15

# ---------------------------------------------------------------------------
# Daily plan
# ---------------------------------------------------------------------------

REST_DAY_READINESS = 2.5
BUSY_WEEK_SESSIONS = 4
