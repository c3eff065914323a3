"""Tests for CoreQuotaRule: Core always gets two exercises."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from workout_engine.models.enums import MuscleGroup
from workout_engine.models.recovery import MuscleRecovery, RecoveryState
from workout_engine.rules.core import CoreQuotaRule

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


class TestCoreQuotaRule:
    def setup_method(self) -> None:
        self.rule = CoreQuotaRule()

    def test_covers_core_only(self) -> None:
        assert self.rule.covers(MuscleGroup.CORE)
        assert not self.rule.covers(MuscleGroup.QUADS)

    @pytest.mark.parametrize("pct", [0.0, 10.0, 64.9, 100.0])
    def test_quota_independent_of_recovery(self, pct: float) -> None:
        state = RecoveryState.fully_recovered(T0).with_group(
            MuscleGroup.CORE, MuscleRecovery(last_trained=T0, recovery_percentage=pct),
        )
        decision = self.rule.evaluate(MuscleGroup.CORE, state, T0)
        assert decision.quota == 2
        assert decision.recovery_percentage == pct
