"""WorkoutEngine: the main orchestrator that assembles workout plans."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Sequence

from workout_engine import config
from workout_engine.catalog import EXERCISE_CATALOG
from workout_engine.exceptions import BadArguments, OptimizationFailed
from workout_engine.math.load import total_volume
from workout_engine.math.recovery import as_utc, leg_subgroup_recovery, refresh_recovery_state
from workout_engine.math.shuffle import GLOBAL_CALL_COUNTER, CallCounter
from workout_engine.models.decision_trace import DecisionTrace, GroupResult, QuotaDecision
from workout_engine.models.enums import (
    ARCHETYPE_DEFAULT_CAP,
    ARCHETYPE_GROUPS,
    TEST_MODE_QUOTA,
    MuscleGroup,
    PlanArchetype,
)
from workout_engine.models.exercise import ExerciseDefinition
from workout_engine.models.profile import UserProfile
from workout_engine.models.recovery import LegSubgroupRecovery, RecoveryState
from workout_engine.models.workout import SelectedExercise, WorkoutPlan
from workout_engine.planner.builder import apply_cap, deduplicate, select_for_group
from workout_engine.planner.notes import lower_body_note, volume_note
from workout_engine.registry import QuotaRuleRegistry

logger = logging.getLogger(__name__)


class WorkoutEngine:
    """Assembles recovery-aware workout plans.

    Usage:
        engine = WorkoutEngine()
        plan = engine.generate_lower_body(profile, recovery, caller="user-1")
        plan, trace = engine.generate_with_trace(
            PlanArchetype.FULL_BODY, profile, recovery, caller="user-1",
        )

    Every call runs the same pipeline to completion: quota per group,
    caller-seeded shuffle, dedup, cap, volume, note. The only state shared
    between calls is the shuffle counter.
    """

    def __init__(
        self,
        catalog: Sequence[ExerciseDefinition] | None = None,
        registry: QuotaRuleRegistry | None = None,
        counter: CallCounter | None = None,
        test_recovery_mode: bool | None = None,
        lower_body_cap: int | None = None,
    ) -> None:
        self.catalog = tuple(catalog) if catalog is not None else EXERCISE_CATALOG
        self.registry = registry or QuotaRuleRegistry()
        self.counter = counter or GLOBAL_CALL_COUNTER
        self.test_recovery_mode = (
            config.TEST_RECOVERY_MODE if test_recovery_mode is None else test_recovery_mode
        )
        self._default_caps = dict(ARCHETYPE_DEFAULT_CAP)
        self._default_caps[PlanArchetype.LOWER_BODY] = (
            config.LOWER_BODY_CAP if lower_body_cap is None else lower_body_cap
        )

        # Auto-discover rules if using default registry
        if registry is None:
            self.registry.discover_rules()

    # ------------------------------------------------------------------
    # Public generation API
    # ------------------------------------------------------------------

    def generate_lower_body(
        self,
        profile: UserProfile,
        recovery: RecoveryState | None,
        caller: str | bytes,
        now: datetime | None = None,
        cap: int | None = None,
    ) -> WorkoutPlan:
        """Lower-body plan: Quads, Hamstrings, Glutes, Calves, then Core.

        Never raises OptimizationFailed; an empty result is a plan with an
        explanatory note.
        """
        return self.generate(PlanArchetype.LOWER_BODY, profile, recovery, caller, now, cap)

    def generate_upper_body(
        self,
        profile: UserProfile,
        recovery: RecoveryState | None,
        caller: str | bytes,
        now: datetime | None = None,
        cap: int | None = None,
    ) -> WorkoutPlan:
        """Upper-body plan: Chest, Back, Shoulders, Arms, then Core."""
        return self.generate(PlanArchetype.UPPER_BODY, profile, recovery, caller, now, cap)

    def generate_full_body(
        self,
        profile: UserProfile,
        recovery: RecoveryState | None,
        caller: str | bytes,
        now: datetime | None = None,
        cap: int | None = None,
    ) -> WorkoutPlan:
        """Full-body plan over all nine groups, Core last."""
        return self.generate(PlanArchetype.FULL_BODY, profile, recovery, caller, now, cap)

    def generate(
        self,
        archetype: PlanArchetype,
        profile: UserProfile,
        recovery: RecoveryState | None,
        caller: str | bytes,
        now: datetime | None = None,
        cap: int | None = None,
    ) -> WorkoutPlan:
        """Generate a plan of the given archetype. See ``generate_with_trace``."""
        plan, _ = self.generate_with_trace(archetype, profile, recovery, caller, now, cap)
        return plan

    def generate_with_trace(
        self,
        archetype: PlanArchetype,
        profile: UserProfile,
        recovery: RecoveryState | None,
        caller: str | bytes,
        now: datetime | None = None,
        cap: int | None = None,
    ) -> tuple[WorkoutPlan, DecisionTrace]:
        """Generate a plan and the decision trace explaining it.

        Args:
            archetype: Which plan to build.
            profile: The caller's stored profile.
            recovery: The caller's stored recovery snapshot, or None for a
                user with no history (treated as fully recovered).
            caller: Opaque identity used to seed the shuffle.
            now: Evaluation time; defaults to the current UTC time.
            cap: Maximum plan length; defaults to the archetype's cap.

        Returns:
            A tuple of (WorkoutPlan, DecisionTrace).

        Raises:
            BadArguments: ``cap`` is negative.
            OptimizationFailed: an upper- or full-body plan came out empty.
        """
        now = as_utc(now) if now is not None else datetime.now(timezone.utc)
        if cap is None:
            cap = self._default_caps[archetype]
        elif cap < 0:
            raise BadArguments(f"Cap must be non-negative, got {cap}")
        state = self.recovery_snapshot(recovery, now)

        running: list[SelectedExercise] = []
        group_results: list[GroupResult] = []
        for group in ARCHETYPE_GROUPS[archetype]:
            decision = self._quota(group, state, now)
            selected, candidates = select_for_group(
                group, decision.quota, self.catalog, profile, caller, self.counter,
            )
            logger.debug(
                "%s: quota %d, %d candidates, selected %s",
                group.value, decision.quota, candidates, [e.name for e in selected],
            )
            running.extend(selected)
            group_results.append(GroupResult(
                muscle_group=group,
                decision=decision,
                candidates=candidates,
                selected=tuple(e.name for e in selected),
            ))

        unique, duplicates = deduplicate(running)
        final, capped_out = apply_cap(unique, cap)

        trace = DecisionTrace(
            archetype=archetype,
            group_results=tuple(group_results),
            duplicates_dropped=tuple(duplicates),
            capped_out=tuple(capped_out),
            cap=cap,
            test_recovery_mode=self.test_recovery_mode,
        )

        if archetype == PlanArchetype.LOWER_BODY:
            note = lower_body_note(len(final), trace.leg_subgroup_selections)
        else:
            if not final:
                logger.warning("%s plan for %r is empty", archetype.name, caller)
                raise OptimizationFailed(
                    f"No eligible exercises for {archetype.name.lower()} workout"
                )
            note = volume_note(len(final))

        plan = WorkoutPlan(
            archetype=archetype,
            exercises=tuple(final),
            timestamp=now,
            total_volume=total_volume(final),
            note=note,
        )
        logger.info(
            "Generated %s plan: %d exercises, volume %.1f, note=%r",
            archetype.name, len(plan.exercises), plan.total_volume, plan.note,
        )
        return plan, trace

    # ------------------------------------------------------------------
    # Recovery views
    # ------------------------------------------------------------------

    def recovery_snapshot(
        self,
        recovery: RecoveryState | None,
        now: datetime | None = None,
    ) -> RecoveryState:
        """Stored recovery refreshed at ``now`` (never persisted).

        A missing state is the default fully-recovered state.
        """
        now = as_utc(now) if now is not None else datetime.now(timezone.utc)
        if recovery is None:
            recovery = RecoveryState.fully_recovered(now)
        return refresh_recovery_state(recovery, now, self.test_recovery_mode)

    def leg_recovery(
        self,
        recovery: RecoveryState | None,
        now: datetime | None = None,
    ) -> LegSubgroupRecovery:
        """Refreshed leg subgroups plus their weighted Legs aggregate."""
        return leg_subgroup_recovery(self.recovery_snapshot(recovery, now))

    def _quota(self, group: MuscleGroup, state: RecoveryState, now: datetime) -> QuotaDecision:
        if self.test_recovery_mode:
            return QuotaDecision(
                rule_id="test_recovery_mode",
                muscle_group=group,
                quota=TEST_MODE_QUOTA,
                recovery_percentage=state.get(group).recovery_percentage,
                explanation="Test recovery mode: fixed quota.",
            )
        return self.registry.rule_for(group).evaluate(group, state, now)
