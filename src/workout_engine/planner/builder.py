"""Plan building blocks: per-group selection, deduplication, capping, validation.

These are the pipeline stages WorkoutEngine runs for every archetype:

1. ``select_for_group``: filter the catalog to one group, shuffle for the
   caller, keep the first ``quota`` entries and prescribe their load
2. ``deduplicate``: drop later exercises whose name was already selected
3. ``apply_cap``: truncate to the archetype's maximum length
"""

from __future__ import annotations

from typing import Sequence

from workout_engine.catalog import exercises_for_group
from workout_engine.exceptions import BadArguments
from workout_engine.math.load import total_volume
from workout_engine.math.shuffle import CallCounter, deterministic_shuffle
from workout_engine.models.enums import MuscleGroup
from workout_engine.models.exercise import ExerciseDefinition
from workout_engine.models.profile import UserProfile
from workout_engine.models.workout import SelectedExercise, WorkoutPlan
from workout_engine.planner.load_assigner import assign_load


def select_for_group(
    group: MuscleGroup,
    quota: int,
    catalog: Sequence[ExerciseDefinition],
    profile: UserProfile,
    caller: str | bytes,
    counter: CallCounter,
) -> tuple[list[SelectedExercise], int]:
    """Pick up to ``quota`` exercises of ``group`` for ``caller``.

    The shuffle runs (and the counter advances) for every group, including
    groups whose quota is zero or whose candidate list is empty.

    Returns:
        (selected exercises in shuffled order, number of candidates)
    """
    candidates = exercises_for_group(group, catalog)
    shuffled = deterministic_shuffle(candidates, caller, counter)
    take = min(max(quota, 0), len(shuffled))
    return [assign_load(exercise, profile) for exercise in shuffled[:take]], len(candidates)


def deduplicate(
    exercises: Sequence[SelectedExercise],
) -> tuple[list[SelectedExercise], list[str]]:
    """Keep the first occurrence of each exercise name.

    Returns:
        (unique exercises in original order, names of dropped duplicates)
    """
    seen: set[str] = set()
    unique: list[SelectedExercise] = []
    dropped: list[str] = []
    for exercise in exercises:
        if exercise.name in seen:
            dropped.append(exercise.name)
            continue
        seen.add(exercise.name)
        unique.append(exercise)
    return unique, dropped


def apply_cap(
    exercises: Sequence[SelectedExercise],
    cap: int | None,
) -> tuple[list[SelectedExercise], list[str]]:
    """Truncate to at most ``cap`` exercises (no-op when ``cap`` is None).

    Returns:
        (kept exercises, names removed by the cap)

    Raises:
        BadArguments: if ``cap`` is negative.
    """
    if cap is not None and cap < 0:
        raise BadArguments(f"Cap must be non-negative, got {cap}")
    if cap is None or len(exercises) <= cap:
        return list(exercises), []
    return list(exercises[:cap]), [e.name for e in exercises[cap:]]


def validate_plan(plan: WorkoutPlan) -> list[str]:
    """Check a plan against its invariants.

    Returns:
        Human-readable problems; an empty list means the plan is valid.
    """
    problems: list[str] = []
    seen: set[str] = set()
    for exercise in plan.exercises:
        if exercise.name in seen:
            problems.append(f"Duplicate exercise: {exercise.name}")
        seen.add(exercise.name)
        if exercise.sets <= 0:
            problems.append(f"Invalid sets for {exercise.name}: {exercise.sets}")
        if exercise.reps <= 0:
            problems.append(f"Invalid reps for {exercise.name}: {exercise.reps}")
        if exercise.suggested_weight < 0:
            problems.append(
                f"Negative suggested weight for {exercise.name}: {exercise.suggested_weight}"
            )
    expected = total_volume(plan.exercises)
    if plan.total_volume != expected:
        problems.append(f"Total volume {plan.total_volume} != {expected}")
    return problems
