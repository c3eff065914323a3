"""Exercise definitions: the immutable entries of the exercise catalog."""

from __future__ import annotations

from dataclasses import dataclass

from workout_engine.models.enums import MuscleGroup


@dataclass(frozen=True)
class ExerciseDefinition:
    """A single catalog exercise.

    ``name`` is the exercise's identity: two definitions with the same name
    are the same exercise as far as plan deduplication is concerned.
    """

    name: str
    primary_muscle_group: MuscleGroup
    equipment_type: str  # "Barbell", "Dumbbell", "Machine", "Cable", "Bodyweight", "Band", ...
    demo_url: str
    recovery_window_hours: int
