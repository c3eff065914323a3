"""Tests for intra-session weight adaptation."""

from __future__ import annotations

import pytest

from workout_engine.catalog import get_exercise
from workout_engine.exceptions import BadArguments
from workout_engine.math.load import total_volume
from workout_engine.models.enums import PlanArchetype
from workout_engine.models.profile import UserProfile
from workout_engine.models.workout import SetData, WorkoutPlan
from workout_engine.planner.load_assigner import assign_load
from workout_engine.planner.session import log_set, update_plan_after_set


def _make_plan(profile: UserProfile) -> WorkoutPlan:
    exercises = (
        assign_load(get_exercise("Barbell Bench Press"), profile),
        assign_load(get_exercise("Lat Pulldown"), profile),
    )
    return WorkoutPlan(
        archetype=PlanArchetype.UPPER_BODY,
        exercises=exercises,
        total_volume=total_volume(exercises),
    )


class TestLogSet:
    def test_appends_set_and_raises_weight(self, male_profile: UserProfile) -> None:
        bench = assign_load(get_exercise("Barbell Bench Press"), male_profile)
        updated = log_set(bench, 50.0, 15)
        assert updated.performed_sets == (SetData(weight=50.0, reps=15),)
        assert updated.suggested_weight == pytest.approx(53.75)
        assert bench.performed_sets == ()

    def test_hard_set_lowers_weight(self, male_profile: UserProfile) -> None:
        bench = assign_load(get_exercise("Barbell Bench Press"), male_profile)
        assert log_set(bench, 50.0, 4).suggested_weight == pytest.approx(46.25)

    def test_sets_accumulate(self, male_profile: UserProfile) -> None:
        bench = assign_load(get_exercise("Barbell Bench Press"), male_profile)
        updated = log_set(log_set(bench, 50.0, 10), 50.0, 8)
        assert len(updated.performed_sets) == 2

    def test_negative_input_rejected(self, male_profile: UserProfile) -> None:
        bench = assign_load(get_exercise("Barbell Bench Press"), male_profile)
        with pytest.raises(BadArguments):
            log_set(bench, -5.0, 10)
        with pytest.raises(BadArguments):
            log_set(bench, 50.0, -1)


class TestUpdatePlanAfterSet:
    def test_updates_named_exercise_and_volume(self, male_profile: UserProfile) -> None:
        plan = _make_plan(male_profile)
        updated = update_plan_after_set(plan, "Lat Pulldown", 40.0, 14)
        pulldown = updated.exercises[1]
        assert pulldown.suggested_weight == pytest.approx(43.0)
        assert updated.exercises[0] == plan.exercises[0]
        assert updated.total_volume == total_volume(updated.exercises)
        assert updated.total_volume != plan.total_volume

    def test_unknown_exercise_rejected(self, male_profile: UserProfile) -> None:
        with pytest.raises(BadArguments, match="Plank"):
            update_plan_after_set(_make_plan(male_profile), "Plank", 0.0, 10)
