"""Tests for load/volume calculations."""

from __future__ import annotations

import pytest

from workout_engine.catalog import get_exercise
from workout_engine.math.load import (
    adapt_weight,
    base_weight,
    equipment_multiplier,
    muscle_multiplier,
    sets_and_reps,
    suggested_weight,
    total_volume,
)
from workout_engine.models.enums import Gender, MuscleGroup, TrainingFrequency
from workout_engine.models.profile import UserProfile
from workout_engine.planner.load_assigner import assign_load


class TestSetsAndReps:
    @pytest.mark.parametrize(
        ("frequency", "expected"),
        [
            (TrainingFrequency.THREE_DAYS, (4, 10)),
            (TrainingFrequency.FOUR_DAYS, (3, 10)),
            (TrainingFrequency.FIVE_DAYS, (3, 10)),
        ],
    )
    def test_by_frequency(self, frequency: TrainingFrequency, expected: tuple[int, int]) -> None:
        assert sets_and_reps(frequency) == expected


class TestMultipliers:
    def test_base_weight_by_gender(self) -> None:
        assert base_weight(Gender.MALE, 80.0) == pytest.approx(40.0)
        assert base_weight(Gender.FEMALE, 80.0) == pytest.approx(28.0)
        assert base_weight(Gender.OTHER, 80.0) == pytest.approx(32.0)

    def test_muscle_multipliers(self) -> None:
        assert muscle_multiplier(MuscleGroup.QUADS) == 1.3
        assert muscle_multiplier(MuscleGroup.HAMSTRINGS) == 1.25
        assert muscle_multiplier(MuscleGroup.CORE) == 0.3
        assert muscle_multiplier(MuscleGroup.CHEST) == 1.0

    def test_equipment_multipliers(self) -> None:
        assert equipment_multiplier("Barbell") == 1.2
        assert equipment_multiplier("Cable") == 0.9
        assert equipment_multiplier("Band") == 0.4
        assert equipment_multiplier("bodyweight") == 0.0

    def test_unknown_equipment_defaults(self) -> None:
        assert equipment_multiplier("Kettlebell") == 0.8


class TestSuggestedWeight:
    def test_barbell_quads_male(self) -> None:
        # 80 * 0.5 * 1.3 * 1.2
        assert suggested_weight(Gender.MALE, 80.0, MuscleGroup.QUADS, "Barbell") == pytest.approx(62.4)

    def test_dumbbell_chest_female(self) -> None:
        # 60 * 0.35 * 1.0 * 0.8
        assert suggested_weight(Gender.FEMALE, 60.0, MuscleGroup.CHEST, "Dumbbell") == pytest.approx(16.8)

    @pytest.mark.parametrize("gender", list(Gender))
    def test_bodyweight_is_zero_for_any_profile(self, gender: Gender) -> None:
        assert suggested_weight(gender, 95.0, MuscleGroup.CHEST, "Bodyweight") == 0.0

    def test_never_negative(self) -> None:
        assert suggested_weight(Gender.MALE, -10.0, MuscleGroup.BACK, "Barbell") == 0.0


class TestAdaptWeight:
    def test_increase_after_easy_set(self) -> None:
        assert adapt_weight(100.0, 13) == pytest.approx(107.5)

    def test_decrease_after_hard_set(self) -> None:
        assert adapt_weight(100.0, 5) == pytest.approx(92.5)

    @pytest.mark.parametrize("reps", [6, 10, 12])
    def test_unchanged_in_range(self, reps: int) -> None:
        assert adapt_weight(100.0, reps) == 100.0


class TestTotalVolume:
    def test_empty_is_zero(self) -> None:
        assert total_volume([]) == 0.0

    def test_sums_sets_reps_weight(self, male_profile: UserProfile) -> None:
        squat = assign_load(get_exercise("Barbell Back Squat"), male_profile)
        push_up = assign_load(get_exercise("Push-Up"), male_profile)
        assert total_volume([squat, push_up]) == squat.sets * squat.reps * squat.suggested_weight
        assert push_up.volume == 0.0
