"""Quota rule for the four leg subgroups: tiered on the subgroup's own recovery.

>= 80% → 2 exercises, 30-80% → 1, below 30% → none.
"""

from __future__ import annotations

from datetime import datetime

from workout_engine.models.decision_trace import QuotaDecision
from workout_engine.models.enums import (
    LEG_FULL_QUOTA,
    LEG_FULL_QUOTA_PCT,
    LEG_PARTIAL_QUOTA,
    LEG_PARTIAL_QUOTA_PCT,
    LEG_SUBGROUPS,
    MuscleGroup,
)
from workout_engine.models.recovery import RecoveryState
from workout_engine.rules.base import QuotaRule


class LegSubgroupQuotaRule(QuotaRule):
    """Quads, Hamstrings, Glutes and Calves each earn 0, 1 or 2 exercises."""

    rule_id = "leg_subgroup_quota"
    version = "1.0.0"
    muscle_groups = LEG_SUBGROUPS

    def evaluate(
        self,
        group: MuscleGroup,
        state: RecoveryState,
        now: datetime,
    ) -> QuotaDecision:
        pct = state.get(group).recovery_percentage

        if pct >= LEG_FULL_QUOTA_PCT:
            return self._decision(
                group, LEG_FULL_QUOTA, pct,
                f"{group.value} {pct:.0f}% recovered (>= {LEG_FULL_QUOTA_PCT:.0f}%).",
            )
        if pct >= LEG_PARTIAL_QUOTA_PCT:
            return self._decision(
                group, LEG_PARTIAL_QUOTA, pct,
                f"{group.value} {pct:.0f}% recovered "
                f"({LEG_PARTIAL_QUOTA_PCT:.0f}-{LEG_FULL_QUOTA_PCT:.0f}%). Single exercise.",
            )
        return self._decision(
            group, 0, pct,
            f"{group.value} {pct:.0f}% recovered (< {LEG_PARTIAL_QUOTA_PCT:.0f}%). Skipped.",
        )
