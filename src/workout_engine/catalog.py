"""Built-in exercise catalog.

Immutable, loaded once at import. Entries are grouped by primary muscle
group and tagged with an equipment type; each inherits its group's recovery
window. Names are unique across the whole catalog.
"""

from __future__ import annotations

from urllib.parse import quote_plus

from workout_engine.exceptions import BadArguments
from workout_engine.models.enums import GROUP_RECOVERY_WINDOW_HOURS, MuscleGroup
from workout_engine.models.exercise import ExerciseDefinition

_DEMO_SEARCH_URL = "https://www.youtube.com/results?search_query="

# (name, equipment) per group, in catalog order
_CATALOG_TABLE: dict[MuscleGroup, tuple[tuple[str, str], ...]] = {
    MuscleGroup.CHEST: (
        ("Barbell Bench Press", "Barbell"),
        ("Incline Barbell Bench Press", "Barbell"),
        ("Dumbbell Bench Press", "Dumbbell"),
        ("Incline Dumbbell Press", "Dumbbell"),
        ("Dumbbell Fly", "Dumbbell"),
        ("Cable Crossover", "Cable"),
        ("Machine Chest Press", "Machine"),
        ("Push-Up", "Bodyweight"),
    ),
    MuscleGroup.BACK: (
        ("Barbell Row", "Barbell"),
        ("Deadlift", "Barbell"),
        ("One-Arm Dumbbell Row", "Dumbbell"),
        ("Lat Pulldown", "Cable"),
        ("Seated Cable Row", "Cable"),
        ("Machine Row", "Machine"),
        ("Pull-Up", "Bodyweight"),
    ),
    MuscleGroup.SHOULDERS: (
        ("Overhead Barbell Press", "Barbell"),
        ("Seated Dumbbell Shoulder Press", "Dumbbell"),
        ("Dumbbell Lateral Raise", "Dumbbell"),
        ("Cable Face Pull", "Cable"),
        ("Machine Shoulder Press", "Machine"),
        ("Band Pull-Apart", "Band"),
    ),
    MuscleGroup.ARMS: (
        ("Barbell Curl", "Barbell"),
        ("Dumbbell Hammer Curl", "Dumbbell"),
        ("Cable Triceps Pushdown", "Cable"),
        ("Overhead Dumbbell Triceps Extension", "Dumbbell"),
        ("Close-Grip Bench Press", "Barbell"),
        ("Bench Dip", "Bodyweight"),
        ("Preacher Curl Machine", "Machine"),
    ),
    MuscleGroup.QUADS: (
        ("Barbell Back Squat", "Barbell"),
        ("Front Squat", "Barbell"),
        ("Leg Press", "Machine"),
        ("Leg Extension", "Machine"),
        ("Dumbbell Walking Lunge", "Dumbbell"),
        ("Goblet Squat", "Dumbbell"),
        ("Bodyweight Squat", "Bodyweight"),
    ),
    MuscleGroup.HAMSTRINGS: (
        ("Romanian Deadlift", "Barbell"),
        ("Dumbbell Romanian Deadlift", "Dumbbell"),
        ("Lying Leg Curl", "Machine"),
        ("Seated Leg Curl", "Machine"),
        ("Good Morning", "Barbell"),
        ("Nordic Hamstring Curl", "Bodyweight"),
    ),
    MuscleGroup.GLUTES: (
        ("Barbell Hip Thrust", "Barbell"),
        ("Glute Bridge", "Bodyweight"),
        ("Cable Glute Kickback", "Cable"),
        ("Bulgarian Split Squat", "Dumbbell"),
        ("Band Lateral Walk", "Band"),
        ("Hip Abduction Machine", "Machine"),
    ),
    MuscleGroup.CALVES: (
        ("Standing Calf Raise Machine", "Machine"),
        ("Seated Calf Raise", "Machine"),
        ("Dumbbell Calf Raise", "Dumbbell"),
        ("Barbell Calf Raise", "Barbell"),
        ("Single-Leg Calf Raise", "Bodyweight"),
    ),
    MuscleGroup.CORE: (
        ("Plank", "Bodyweight"),
        ("Hanging Leg Raise", "Bodyweight"),
        ("Cable Crunch", "Cable"),
        ("Ab Wheel Rollout", "Bodyweight"),
        ("Russian Twist", "Dumbbell"),
        ("Pallof Press", "Band"),
    ),
}


def _demo_url(name: str) -> str:
    return _DEMO_SEARCH_URL + quote_plus(f"{name} exercise form")


def _build_catalog() -> tuple[ExerciseDefinition, ...]:
    entries: list[ExerciseDefinition] = []
    for group, rows in _CATALOG_TABLE.items():
        for name, equipment in rows:
            entries.append(ExerciseDefinition(
                name=name,
                primary_muscle_group=group,
                equipment_type=equipment,
                demo_url=_demo_url(name),
                recovery_window_hours=GROUP_RECOVERY_WINDOW_HOURS[group],
            ))
    return tuple(entries)


EXERCISE_CATALOG: tuple[ExerciseDefinition, ...] = _build_catalog()


def exercises_for_group(
    group: MuscleGroup,
    catalog: tuple[ExerciseDefinition, ...] | list[ExerciseDefinition] = EXERCISE_CATALOG,
) -> list[ExerciseDefinition]:
    """Return the catalog entries whose primary group is ``group``, in catalog order."""
    return [e for e in catalog if e.primary_muscle_group == group]


def get_exercise(
    name: str,
    catalog: tuple[ExerciseDefinition, ...] | list[ExerciseDefinition] = EXERCISE_CATALOG,
) -> ExerciseDefinition | None:
    """Look up an exercise by exact name. Returns ``None`` if not found."""
    for exercise in catalog:
        if exercise.name == name:
            return exercise
    return None


def exercise_counts(
    catalog: tuple[ExerciseDefinition, ...] | list[ExerciseDefinition] = EXERCISE_CATALOG,
) -> list[tuple[str, int]]:
    """Count catalog entries per muscle group, in MuscleGroup order.

    Groups with no entries are reported with a count of 0.
    """
    return [(group.value, len(exercises_for_group(group, catalog))) for group in MuscleGroup]


def alternative_exercises(
    group_name: str,
    exclude: str | None = None,
    catalog: tuple[ExerciseDefinition, ...] | list[ExerciseDefinition] = EXERCISE_CATALOG,
) -> list[ExerciseDefinition]:
    """List swap candidates for an exercise in the group named ``group_name``.

    Args:
        group_name: Muscle group text, matched case-insensitively.
        exclude: Name of the exercise being replaced, left out of the result.
        catalog: Catalog to search.

    Raises:
        BadArguments: if ``group_name`` is not a tracked muscle group.
    """
    group = MuscleGroup.from_name(group_name)
    if exclude is not None and get_exercise(exclude, catalog) is None:
        raise BadArguments(f"Unknown exercise: {exclude!r}")
    return [e for e in exercises_for_group(group, catalog) if e.name != exclude]
