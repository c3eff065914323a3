"""Load assigner: turns a catalog exercise into a prescribed SelectedExercise.

Sets and reps follow the profile's training frequency; the suggested
weight follows bodyweight, gender, the exercise's muscle group and its
equipment.
"""

from __future__ import annotations

from workout_engine.math.load import sets_and_reps, suggested_weight
from workout_engine.models.exercise import ExerciseDefinition
from workout_engine.models.profile import UserProfile
from workout_engine.models.workout import SelectedExercise


def assign_load(exercise: ExerciseDefinition, profile: UserProfile) -> SelectedExercise:
    """Prescribe sets, reps and a starting weight for ``exercise``.

    Args:
        exercise: Catalog entry chosen for the plan.
        profile: The user's training profile.

    Returns:
        A SelectedExercise with no performed sets.
    """
    sets, reps = sets_and_reps(profile.training_frequency)
    weight = suggested_weight(
        profile.gender,
        profile.bodyweight,
        exercise.primary_muscle_group,
        exercise.equipment_type,
    )
    return SelectedExercise(
        exercise=exercise,
        sets=sets,
        reps=reps,
        suggested_weight=weight,
    )
