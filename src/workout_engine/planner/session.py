"""Intra-session weight adaptation.

The session collaborator logs sets as they are performed; after each set
the exercise's suggested weight moves up after an easy set (more than 12
reps) and down after a hard one (fewer than 6).
"""

from __future__ import annotations

import dataclasses
import logging

from workout_engine.exceptions import BadArguments
from workout_engine.math.load import adapt_weight, total_volume
from workout_engine.models.workout import SelectedExercise, SetData, WorkoutPlan

logger = logging.getLogger(__name__)


def log_set(selected: SelectedExercise, weight: float, reps: int) -> SelectedExercise:
    """Record a performed set and adapt the next suggested weight.

    Args:
        selected: The exercise being performed.
        weight: Weight used for the set.
        reps: Reps completed.

    Returns:
        A copy with the set appended and ``suggested_weight`` adapted from
        ``weight``.

    Raises:
        BadArguments: on negative weight or reps.
    """
    if weight < 0 or reps < 0:
        raise BadArguments(f"Invalid set for {selected.name}: weight={weight}, reps={reps}")
    return dataclasses.replace(
        selected,
        performed_sets=selected.performed_sets + (SetData(weight=weight, reps=reps),),
        suggested_weight=max(0.0, adapt_weight(weight, reps)),
    )


def update_plan_after_set(
    plan: WorkoutPlan,
    exercise_name: str,
    weight: float,
    reps: int,
) -> WorkoutPlan:
    """Apply ``log_set`` to one exercise of ``plan`` and recompute total volume.

    Raises:
        BadArguments: if ``exercise_name`` is not in the plan.
    """
    if exercise_name not in plan.exercise_names:
        raise BadArguments(f"Exercise not in plan: {exercise_name!r}")

    exercises = tuple(
        log_set(e, weight, reps) if e.name == exercise_name else e
        for e in plan.exercises
    )
    updated = next(e for e in exercises if e.name == exercise_name)
    logger.debug(
        "Logged %s x %d for %s, next suggested weight %.2f",
        weight, reps, exercise_name, updated.suggested_weight,
    )
    return dataclasses.replace(
        plan,
        exercises=exercises,
        total_volume=total_volume(exercises),
    )
