"""Load and volume calculations: sets, reps, suggested weight, session volume.

suggested_weight = max(0, base × muscle_multiplier × equipment_multiplier)

where base is a gender-dependent fraction of bodyweight. Weights are in the
profile's own unit.
"""

from __future__ import annotations

from typing import Iterable

from workout_engine.models.enums import (
    ADAPT_DECREASE_FACTOR,
    ADAPT_HIGH_REPS,
    ADAPT_INCREASE_FACTOR,
    ADAPT_LOW_REPS,
    BASE_WEIGHT_FRACTION,
    DEFAULT_EQUIPMENT_LOAD_MULTIPLIER,
    DEFAULT_MUSCLE_LOAD_MULTIPLIER,
    EQUIPMENT_LOAD_MULTIPLIER,
    MUSCLE_LOAD_MULTIPLIER,
    REPS_PER_SET,
    SETS_BY_FREQUENCY,
    Gender,
    MuscleGroup,
    TrainingFrequency,
)
from workout_engine.models.workout import SelectedExercise


def sets_and_reps(frequency: TrainingFrequency) -> tuple[int, int]:
    """Sets and reps per exercise for a weekly training frequency.

    3 days/week → 4 sets; 4 or 5 days/week → 3 sets. Reps are always 10.
    """
    return SETS_BY_FREQUENCY[frequency], REPS_PER_SET


def base_weight(gender: Gender, bodyweight: float) -> float:
    """Starting load as a fraction of bodyweight (0.5 male, 0.35 female, 0.4 other)."""
    return bodyweight * BASE_WEIGHT_FRACTION.get(gender, BASE_WEIGHT_FRACTION[Gender.OTHER])


def muscle_multiplier(group: MuscleGroup) -> float:
    return MUSCLE_LOAD_MULTIPLIER.get(group, DEFAULT_MUSCLE_LOAD_MULTIPLIER)


def equipment_multiplier(equipment_type: str) -> float:
    """Load multiplier for an equipment type; unknown equipment gets 0.8."""
    return EQUIPMENT_LOAD_MULTIPLIER.get(
        equipment_type.strip().lower(), DEFAULT_EQUIPMENT_LOAD_MULTIPLIER,
    )


def suggested_weight(
    gender: Gender,
    bodyweight: float,
    group: MuscleGroup,
    equipment_type: str,
) -> float:
    """Suggested working weight, floored at 0.

    Bodyweight exercises always come out at 0 since their equipment
    multiplier is 0.
    """
    weight = base_weight(gender, bodyweight) * muscle_multiplier(group) * equipment_multiplier(equipment_type)
    return max(0.0, weight)


def adapt_weight(weight: float, reps: int) -> float:
    """Next suggested weight after a logged set.

    More than 12 reps → +7.5%; fewer than 6 reps → -7.5%; otherwise unchanged.
    """
    if reps > ADAPT_HIGH_REPS:
        return weight * ADAPT_INCREASE_FACTOR
    if reps < ADAPT_LOW_REPS:
        return weight * ADAPT_DECREASE_FACTOR
    return weight


def total_volume(exercises: Iterable[SelectedExercise]) -> float:
    """Session volume: Σ sets × reps × suggested_weight."""
    return sum((e.volume for e in exercises), 0.0)
