"""Enumerations and policy constants for the workout engine.

Thresholds and multipliers are fixed policy values; changing them changes
which exercises users are offered.
"""

from __future__ import annotations

from enum import Enum, IntEnum, auto

from workout_engine.exceptions import BadArguments


class MuscleGroup(Enum):
    """The nine tracked muscle groups. Values are the catalog display names."""

    CHEST = "Chest"
    BACK = "Back"
    SHOULDERS = "Shoulders"
    ARMS = "Arms"
    CORE = "Core"
    QUADS = "Quads"
    HAMSTRINGS = "Hamstrings"
    GLUTES = "Glutes"
    CALVES = "Calves"

    @classmethod
    def from_name(cls, text: str) -> MuscleGroup:
        """Case-insensitive lookup for text coming from outside the engine.

        Raises:
            BadArguments: if ``text`` names no tracked group.
        """
        key = text.strip().lower()
        for group in cls:
            if group.value.lower() == key or group.name.lower() == key:
                return group
        raise BadArguments(f"Unknown muscle group: {text!r}")

    @property
    def is_leg_subgroup(self) -> bool:
        return self in LEG_SUBGROUPS

    @property
    def is_upper_body(self) -> bool:
        return self in UPPER_BODY_GROUPS


class PlanArchetype(IntEnum):
    """Workout plan archetypes, each with a fixed group order and cap policy."""

    LOWER_BODY = auto()
    UPPER_BODY = auto()
    FULL_BODY = auto()


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class WeightUnit(Enum):
    KG = "kg"
    LB = "lb"


class TrainingFrequency(Enum):
    """Training days per week."""

    THREE_DAYS = "threeDays"
    FOUR_DAYS = "fourDays"
    FIVE_DAYS = "fiveDays"


class RecoveryStatus(IntEnum):
    """Display classification of a recovery percentage, best first."""

    READY = auto()
    MODERATE = auto()
    LOW = auto()
    RECOVERING = auto()


# ---------------------------------------------------------------------------
# Group sets
# ---------------------------------------------------------------------------
LEG_SUBGROUPS = frozenset({
    MuscleGroup.QUADS,
    MuscleGroup.HAMSTRINGS,
    MuscleGroup.GLUTES,
    MuscleGroup.CALVES,
})

UPPER_BODY_GROUPS = frozenset({
    MuscleGroup.CHEST,
    MuscleGroup.BACK,
    MuscleGroup.SHOULDERS,
    MuscleGroup.ARMS,
})

# Group order per archetype; selections are appended in this order
ARCHETYPE_GROUPS: dict[PlanArchetype, tuple[MuscleGroup, ...]] = {
    PlanArchetype.LOWER_BODY: (
        MuscleGroup.QUADS,
        MuscleGroup.HAMSTRINGS,
        MuscleGroup.GLUTES,
        MuscleGroup.CALVES,
        MuscleGroup.CORE,
    ),
    PlanArchetype.UPPER_BODY: (
        MuscleGroup.CHEST,
        MuscleGroup.BACK,
        MuscleGroup.SHOULDERS,
        MuscleGroup.ARMS,
        MuscleGroup.CORE,
    ),
    PlanArchetype.FULL_BODY: (
        MuscleGroup.CHEST,
        MuscleGroup.BACK,
        MuscleGroup.SHOULDERS,
        MuscleGroup.ARMS,
        MuscleGroup.QUADS,
        MuscleGroup.HAMSTRINGS,
        MuscleGroup.GLUTES,
        MuscleGroup.CALVES,
        MuscleGroup.CORE,
    ),
}

# None = no cap beyond the per-group quotas
LOWER_BODY_MAX_EXERCISES = 8
ARCHETYPE_DEFAULT_CAP: dict[PlanArchetype, int | None] = {
    PlanArchetype.LOWER_BODY: LOWER_BODY_MAX_EXERCISES,
    PlanArchetype.UPPER_BODY: None,
    PlanArchetype.FULL_BODY: None,
}

# ---------------------------------------------------------------------------
# Recovery model
# ---------------------------------------------------------------------------
# Hours until a group is back at 100% after training
GROUP_RECOVERY_WINDOW_HOURS: dict[MuscleGroup, int] = {
    MuscleGroup.CHEST: 72,
    MuscleGroup.BACK: 72,
    MuscleGroup.SHOULDERS: 48,
    MuscleGroup.ARMS: 48,
    MuscleGroup.CORE: 48,
    MuscleGroup.QUADS: 72,
    MuscleGroup.HAMSTRINGS: 72,
    MuscleGroup.GLUTES: 72,
    MuscleGroup.CALVES: 48,
}

RECOVERY_MIN_PCT = 0.0
RECOVERY_MAX_PCT = 100.0

# Legs aggregate weights (relative muscle mass / recruitment); sum to 1.0
LEG_AGGREGATE_WEIGHTS: dict[MuscleGroup, float] = {
    MuscleGroup.QUADS: 0.38,
    MuscleGroup.HAMSTRINGS: 0.22,
    MuscleGroup.GLUTES: 0.30,
    MuscleGroup.CALVES: 0.10,
}

# Status label thresholds (lower bounds, inclusive)
RECOVERY_READY_PCT = 80.0
RECOVERY_MODERATE_PCT = 60.0
RECOVERY_LOW_PCT = 40.0

# ---------------------------------------------------------------------------
# Selection policy (exercise quotas per group)
# ---------------------------------------------------------------------------
LEG_FULL_QUOTA_PCT = 80.0     # >= 80% → 2 exercises
LEG_PARTIAL_QUOTA_PCT = 30.0  # 30-80% → 1 exercise
LEG_FULL_QUOTA = 2
LEG_PARTIAL_QUOTA = 1

UPPER_BODY_QUOTA_WINDOW_HOURS = 72  # Fixed window, independent of the group's own
UPPER_BODY_QUOTA_PCT = 65.0
UPPER_BODY_QUOTA = 2

CORE_QUOTA = 2                # Fixed regardless of recovery
TEST_MODE_QUOTA = 2

# ---------------------------------------------------------------------------
# Deterministic shuffle
# ---------------------------------------------------------------------------
SHUFFLE_HASH_MULTIPLIER = 31
SHUFFLE_HASH_MODULUS = 1_000_000_007

# ---------------------------------------------------------------------------
# Load / volume
# ---------------------------------------------------------------------------
REPS_PER_SET = 10

SETS_BY_FREQUENCY: dict[TrainingFrequency, int] = {
    TrainingFrequency.THREE_DAYS: 4,
    TrainingFrequency.FOUR_DAYS: 3,
    TrainingFrequency.FIVE_DAYS: 3,
}

# Fraction of bodyweight used as the starting load
BASE_WEIGHT_FRACTION: dict[Gender, float] = {
    Gender.MALE: 0.5,
    Gender.FEMALE: 0.35,
    Gender.OTHER: 0.4,
}

MUSCLE_LOAD_MULTIPLIER: dict[MuscleGroup, float] = {
    MuscleGroup.QUADS: 1.3,
    MuscleGroup.HAMSTRINGS: 1.25,
    MuscleGroup.GLUTES: 1.1,
    MuscleGroup.CALVES: 1.1,
    MuscleGroup.CORE: 0.3,
}
DEFAULT_MUSCLE_LOAD_MULTIPLIER = 1.0

# Keyed by lower-cased equipment name
EQUIPMENT_LOAD_MULTIPLIER: dict[str, float] = {
    "barbell": 1.2,
    "dumbbell": 0.8,
    "machine": 1.0,
    "cable": 0.9,
    "bodyweight": 0.0,
    "band": 0.4,
}
DEFAULT_EQUIPMENT_LOAD_MULTIPLIER = 0.8

# Intra-session weight adaptation after a logged set
ADAPT_HIGH_REPS = 12          # reps above this → increase
ADAPT_LOW_REPS = 6            # reps below this → decrease
ADAPT_INCREASE_FACTOR = 1.075
ADAPT_DECREASE_FACTOR = 0.925

# ---------------------------------------------------------------------------
# Plan notes
# ---------------------------------------------------------------------------
NOTE_LOWER_ALL_RECOVERING = "All lower muscle groups recovering"
NOTE_LOWER_CORE_FOCUSED = "Core-focused session (leg subgroups recovering)"
NOTE_LOWER_LIMITED = "Limited exercises due to muscle recovery"
NOTE_LOWER_FULL = "Full lower-body workout"
NOTE_REDUCED_VOLUME = "Reduced volume due to recovery constraints."

LOWER_LIMITED_MAX_EXERCISES = 3   # <= this many → "limited"
FULL_VOLUME_MIN_EXERCISES = 10    # fewer than this → "reduced volume"
