"""Recovery model: linear recovery since last training, Legs aggregation.

A group is at 0% immediately after training and recovers linearly until it
reaches 100% once its recovery window has elapsed. The four leg subgroups
are folded into a single Legs figure with fixed mass/recruitment weights.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

import numpy as np

from workout_engine.models.enums import (
    GROUP_RECOVERY_WINDOW_HOURS,
    LEG_AGGREGATE_WEIGHTS,
    RECOVERY_LOW_PCT,
    RECOVERY_MAX_PCT,
    RECOVERY_MIN_PCT,
    RECOVERY_MODERATE_PCT,
    RECOVERY_READY_PCT,
    MuscleGroup,
    RecoveryStatus,
)
from workout_engine.models.recovery import LegSubgroupRecovery, MuscleRecovery, RecoveryState
from workout_engine.models.workout import SelectedExercise, WorkoutPlan

_SECONDS_PER_HOUR = 3600.0


def clamp_percentage(value: float) -> float:
    """Clamp a recovery percentage into [0, 100]."""
    return float(np.clip(value, RECOVERY_MIN_PCT, RECOVERY_MAX_PCT))


def as_utc(moment: datetime) -> datetime:
    """Treat a naive datetime as UTC; aware datetimes are returned unchanged."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def hours_between(earlier: datetime, later: datetime) -> float:
    """Elapsed hours from ``earlier`` to ``later`` (negative if reversed).

    Naive datetimes are read as UTC.
    """
    return (as_utc(later) - as_utc(earlier)).total_seconds() / _SECONDS_PER_HOUR


def recovery_percentage(
    last_trained: datetime,
    now: datetime,
    window_hours: float,
) -> float:
    """Percentage of the recovery window that has elapsed since training.

    recovery = clamp((now - last_trained) / window_hours × 100, 0, 100)

    Args:
        last_trained: When the group was last trained.
        now: Evaluation time. Elapsed time is always ``now - last_trained``.
        window_hours: Hours until full recovery.

    Returns:
        Recovery percentage in [0, 100]. A non-positive window counts as
        instant recovery (100%).
    """
    if window_hours <= 0:
        return RECOVERY_MAX_PCT
    elapsed = hours_between(last_trained, now)
    return clamp_percentage(elapsed / window_hours * 100.0)


def aggregate_legs(
    quads: MuscleRecovery,
    hamstrings: MuscleRecovery,
    glutes: MuscleRecovery,
    calves: MuscleRecovery,
) -> MuscleRecovery:
    """Weighted Legs recovery from the four leg subgroups.

    legs = clamp(0.38·quads + 0.22·hamstrings + 0.30·glutes + 0.10·calves)

    The aggregate's ``last_trained`` is the most recent of the four.
    """
    subgroups = (quads, hamstrings, glutes, calves)
    weights = np.array([
        LEG_AGGREGATE_WEIGHTS[MuscleGroup.QUADS],
        LEG_AGGREGATE_WEIGHTS[MuscleGroup.HAMSTRINGS],
        LEG_AGGREGATE_WEIGHTS[MuscleGroup.GLUTES],
        LEG_AGGREGATE_WEIGHTS[MuscleGroup.CALVES],
    ], dtype=np.float64)
    values = np.array([s.recovery_percentage for s in subgroups], dtype=np.float64)
    return MuscleRecovery(
        last_trained=max(s.last_trained for s in subgroups),
        recovery_percentage=clamp_percentage(float(np.dot(weights, values))),
    )


def refresh_recovery_state(
    state: RecoveryState,
    now: datetime,
    test_recovery_mode: bool = False,
) -> RecoveryState:
    """Recompute every group's percentage at ``now`` from its last-trained time.

    The result is derived for this request only; callers should not persist it.
    Naive ``last_trained`` values come back as UTC.

    Args:
        state: Stored recovery snapshot.
        now: Evaluation time.
        test_recovery_mode: When True every group reads 100% and
            ``last_trained`` is left untouched.
    """
    refreshed: dict[MuscleGroup, MuscleRecovery] = {}
    for group, recovery in state.items():
        if test_recovery_mode:
            pct = RECOVERY_MAX_PCT
        else:
            pct = recovery_percentage(
                recovery.last_trained, now, GROUP_RECOVERY_WINDOW_HOURS[group],
            )
        refreshed[group] = MuscleRecovery(
            last_trained=as_utc(recovery.last_trained),
            recovery_percentage=pct,
        )
    return RecoveryState.from_groups(refreshed)


def leg_subgroup_recovery(state: RecoveryState) -> LegSubgroupRecovery:
    """Return the four leg subgroups of ``state`` with their Legs aggregate."""
    return LegSubgroupRecovery(
        legs=aggregate_legs(state.quads, state.hamstrings, state.glutes, state.calves),
        quads=state.quads,
        hamstrings=state.hamstrings,
        glutes=state.glutes,
        calves=state.calves,
    )


def classify_recovery(percentage: float) -> RecoveryStatus:
    """Classify a recovery percentage into a display status.

    Ready (>=80), Moderate (>=60), Low (>=40), otherwise Recovering.
    """
    if percentage >= RECOVERY_READY_PCT:
        return RecoveryStatus.READY
    if percentage >= RECOVERY_MODERATE_PCT:
        return RecoveryStatus.MODERATE
    if percentage >= RECOVERY_LOW_PCT:
        return RecoveryStatus.LOW
    return RecoveryStatus.RECOVERING


def record_workout(
    state: RecoveryState,
    exercises: WorkoutPlan | Iterable[SelectedExercise],
    completed_at: datetime,
) -> RecoveryState:
    """Apply a completed workout to a stored recovery state.

    Every group that appears in ``exercises`` is reset to 0% with
    ``last_trained = completed_at``; other groups are unchanged. Returns a
    new state for the store to persist; the engine itself never calls this.
    """
    if isinstance(exercises, WorkoutPlan):
        exercises = exercises.exercises
    trained = {e.muscle_group for e in exercises}
    for group in MuscleGroup:
        if group in trained:
            state = state.with_group(
                group,
                MuscleRecovery(last_trained=completed_at, recovery_percentage=RECOVERY_MIN_PCT),
            )
    return state
