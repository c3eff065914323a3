"""Quota rule for Core: a fixed quota that recovery never gates."""

from __future__ import annotations

from datetime import datetime

from workout_engine.models.decision_trace import QuotaDecision
from workout_engine.models.enums import CORE_QUOTA, MuscleGroup
from workout_engine.models.recovery import RecoveryState
from workout_engine.rules.base import QuotaRule


class CoreQuotaRule(QuotaRule):
    rule_id = "core_quota"
    version = "1.0.0"
    muscle_groups = frozenset({MuscleGroup.CORE})

    def evaluate(
        self,
        group: MuscleGroup,
        state: RecoveryState,
        now: datetime,
    ) -> QuotaDecision:
        pct = state.get(group).recovery_percentage
        return self._decision(
            group, CORE_QUOTA, pct,
            f"Core always gets {CORE_QUOTA} exercises ({pct:.0f}% recovered).",
        )
