"""Abstract base class for muscle-group quota rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from workout_engine.models.decision_trace import QuotaDecision
from workout_engine.models.enums import MuscleGroup
from workout_engine.models.recovery import RecoveryState


class QuotaRule(ABC):
    """Base class for the selection policy's per-group quota rules.

    Each rule decides how many exercises to request for the muscle groups
    it covers. Rules are discovered automatically by the QuotaRuleRegistry
    and consulted by the WorkoutEngine once per group per generation call.

    Subclasses must define:
        rule_id: unique identifier (e.g. "leg_subgroup_quota")
        version: semantic version string
        muscle_groups: the groups this rule decides for
        evaluate(): the rule's decision logic
    """

    rule_id: str
    version: str
    muscle_groups: frozenset[MuscleGroup]

    def covers(self, group: MuscleGroup) -> bool:
        return group in self.muscle_groups

    @abstractmethod
    def evaluate(
        self,
        group: MuscleGroup,
        state: RecoveryState,
        now: datetime,
    ) -> QuotaDecision:
        """Decide the exercise quota for ``group``.

        Args:
            group: One of this rule's ``muscle_groups``.
            state: Recovery state already refreshed at ``now``.
            now: Evaluation time, for rules that recompute recovery on
                their own window.

        Returns:
            A QuotaDecision with a non-negative quota.
        """
        ...

    def _decision(
        self,
        group: MuscleGroup,
        quota: int,
        recovery_percentage: float,
        explanation: str,
    ) -> QuotaDecision:
        return QuotaDecision(
            rule_id=self.rule_id,
            muscle_group=group,
            quota=quota,
            recovery_percentage=recovery_percentage,
            explanation=explanation,
        )
