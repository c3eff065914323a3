"""Shared test fixtures: profiles, recovery states, engines with isolated counters."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from workout_engine.engine import WorkoutEngine
from workout_engine.math.recovery import recovery_percentage
from workout_engine.math.shuffle import CallCounter
from workout_engine.models.enums import (
    GROUP_RECOVERY_WINDOW_HOURS,
    Gender,
    MuscleGroup,
    TrainingFrequency,
    WeightUnit,
)
from workout_engine.models.profile import UserProfile
from workout_engine.models.recovery import MuscleRecovery, RecoveryState

NOW = datetime(2026, 3, 2, 18, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation time so recovery math is reproducible."""
    return NOW


@pytest.fixture
def male_profile() -> UserProfile:
    """80 kg male training 4 days/week → 3 sets of 10."""
    return UserProfile(
        gender=Gender.MALE,
        bodyweight=80.0,
        weight_unit=WeightUnit.KG,
        training_frequency=TrainingFrequency.FOUR_DAYS,
    )


@pytest.fixture
def female_profile() -> UserProfile:
    """60 kg female training 3 days/week → 4 sets of 10."""
    return UserProfile(
        gender=Gender.FEMALE,
        bodyweight=60.0,
        weight_unit=WeightUnit.KG,
        training_frequency=TrainingFrequency.THREE_DAYS,
    )


@pytest.fixture
def make_recovery(now: datetime) -> Callable[..., RecoveryState]:
    """Factory: ``make_recovery(hours_ago=..., quads=0, ...)``.

    Each group was trained ``hours_ago`` hours before ``now`` (default: one
    full recovery window ago); keyword arguments named after a group
    override that group's hours.
    """

    def _make(hours_ago: float | None = None, **overrides: float) -> RecoveryState:
        groups: dict[MuscleGroup, MuscleRecovery] = {}
        for group in MuscleGroup:
            window = GROUP_RECOVERY_WINDOW_HOURS[group]
            hours = overrides.get(group.name.lower(), hours_ago if hours_ago is not None else window)
            last = now - timedelta(hours=hours)
            groups[group] = MuscleRecovery(
                last_trained=last,
                recovery_percentage=recovery_percentage(last, now, window),
            )
        return RecoveryState.from_groups(groups)

    return _make


@pytest.fixture
def fully_recovered(now: datetime) -> RecoveryState:
    return RecoveryState.fully_recovered(now)


@pytest.fixture
def counter() -> CallCounter:
    """Fresh shuffle counter so tests do not depend on call order."""
    return CallCounter()


@pytest.fixture
def engine(counter: CallCounter) -> WorkoutEngine:
    """Engine on the built-in catalog with test recovery mode off."""
    return WorkoutEngine(counter=counter, test_recovery_mode=False, lower_body_cap=8)
