"""Tests for the built-in exercise catalog and its lookups."""

from __future__ import annotations

import pytest

from workout_engine.catalog import (
    EXERCISE_CATALOG,
    alternative_exercises,
    exercise_counts,
    exercises_for_group,
    get_exercise,
)
from workout_engine.exceptions import BadArguments
from workout_engine.models.enums import GROUP_RECOVERY_WINDOW_HOURS, MuscleGroup


class TestCatalogContents:
    def test_names_unique(self) -> None:
        names = [e.name for e in EXERCISE_CATALOG]
        assert len(names) == len(set(names))

    def test_every_group_has_enough_for_two(self) -> None:
        for group in MuscleGroup:
            assert len(exercises_for_group(group)) >= 2

    def test_recovery_window_follows_group(self) -> None:
        for exercise in EXERCISE_CATALOG:
            assert exercise.recovery_window_hours == GROUP_RECOVERY_WINDOW_HOURS[
                exercise.primary_muscle_group
            ]

    def test_demo_urls_present(self) -> None:
        assert all(e.demo_url.startswith("https://") for e in EXERCISE_CATALOG)


class TestLookups:
    def test_get_exercise(self) -> None:
        squat = get_exercise("Barbell Back Squat")
        assert squat is not None
        assert squat.primary_muscle_group is MuscleGroup.QUADS
        assert squat.equipment_type == "Barbell"

    def test_get_unknown_returns_none(self) -> None:
        assert get_exercise("Underwater Basket Weaving") is None

    def test_exercises_for_group_keeps_catalog_order(self) -> None:
        core = exercises_for_group(MuscleGroup.CORE)
        assert core[0].name == "Plank"
        assert [EXERCISE_CATALOG.index(e) for e in core] == sorted(
            EXERCISE_CATALOG.index(e) for e in core
        )


class TestExerciseCounts:
    def test_counts_sum_to_catalog_size(self) -> None:
        counts = exercise_counts()
        assert [name for name, _ in counts] == [g.value for g in MuscleGroup]
        assert sum(n for _, n in counts) == len(EXERCISE_CATALOG)

    def test_empty_group_reported_as_zero(self) -> None:
        counts = dict(exercise_counts(exercises_for_group(MuscleGroup.CHEST)))
        assert counts["Chest"] == 8
        assert counts["Core"] == 0


class TestAlternativeExercises:
    def test_excludes_current_exercise(self) -> None:
        alternatives = alternative_exercises("calves", exclude="Seated Calf Raise")
        names = [e.name for e in alternatives]
        assert "Seated Calf Raise" not in names
        assert len(names) == 4
        assert all(e.primary_muscle_group is MuscleGroup.CALVES for e in alternatives)

    def test_without_exclude_lists_group(self) -> None:
        assert alternative_exercises("Core") == exercises_for_group(MuscleGroup.CORE)

    def test_unknown_group_raises(self) -> None:
        with pytest.raises(BadArguments):
            alternative_exercises("Neck")

    def test_unknown_exclude_raises(self) -> None:
        with pytest.raises(BadArguments):
            alternative_exercises("Chest", exclude="Not An Exercise")
