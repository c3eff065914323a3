"""Quota rule for Chest, Back, Shoulders and Arms.

Binary threshold on recovery recomputed over a fixed 72-hour window from
the group's last-trained time, regardless of the group's own window.
"""

from __future__ import annotations

from datetime import datetime

from workout_engine.math.recovery import recovery_percentage
from workout_engine.models.decision_trace import QuotaDecision
from workout_engine.models.enums import (
    UPPER_BODY_GROUPS,
    UPPER_BODY_QUOTA,
    UPPER_BODY_QUOTA_PCT,
    UPPER_BODY_QUOTA_WINDOW_HOURS,
    MuscleGroup,
)
from workout_engine.models.recovery import RecoveryState
from workout_engine.rules.base import QuotaRule


class UpperBodyQuotaRule(QuotaRule):
    """Upper-body groups earn 2 exercises at >= 65% of a 72h window, else none."""

    rule_id = "upper_body_quota"
    version = "1.0.0"
    muscle_groups = UPPER_BODY_GROUPS

    def evaluate(
        self,
        group: MuscleGroup,
        state: RecoveryState,
        now: datetime,
    ) -> QuotaDecision:
        pct = recovery_percentage(
            state.get(group).last_trained, now, UPPER_BODY_QUOTA_WINDOW_HOURS,
        )

        if pct >= UPPER_BODY_QUOTA_PCT:
            return self._decision(
                group, UPPER_BODY_QUOTA, pct,
                f"{group.value} {pct:.0f}% of {UPPER_BODY_QUOTA_WINDOW_HOURS}h window "
                f"(>= {UPPER_BODY_QUOTA_PCT:.0f}%).",
            )
        return self._decision(
            group, 0, pct,
            f"{group.value} {pct:.0f}% of {UPPER_BODY_QUOTA_WINDOW_HOURS}h window "
            f"(< {UPPER_BODY_QUOTA_PCT:.0f}%). Skipped.",
        )
