"""User training profile: read-only input supplied by the profile store."""

from __future__ import annotations

from dataclasses import dataclass

from workout_engine.models.enums import Gender, TrainingFrequency, WeightUnit


@dataclass(frozen=True)
class UserProfile:
    """Immutable snapshot of a user's stored training profile.

    Suggested loads are expressed in the same unit as ``bodyweight``; the
    engine never converts between kg and lb.
    """

    gender: Gender
    bodyweight: float
    weight_unit: WeightUnit = WeightUnit.KG
    training_frequency: TrainingFrequency = TrainingFrequency.FOUR_DAYS
    rest_time_s: int = 90  # Rest between sets, used by the session timer
    muscle_group_rest_interval_days: int = 5
