"""Tests for UpperBodyQuotaRule: binary threshold over a fixed 72h window."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from workout_engine.models.enums import MuscleGroup
from workout_engine.models.recovery import MuscleRecovery, RecoveryState
from workout_engine.rules.upper_body import UpperBodyQuotaRule

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


class TestUpperBodyQuotaRule:
    def setup_method(self) -> None:
        self.rule = UpperBodyQuotaRule()

    def _state(self, group: MuscleGroup, hours_ago: float, stored_pct: float = 100.0) -> RecoveryState:
        return RecoveryState.fully_recovered(T0).with_group(
            group,
            MuscleRecovery(last_trained=T0 - timedelta(hours=hours_ago), recovery_percentage=stored_pct),
        )

    def test_covers_upper_body_groups(self) -> None:
        for group in (MuscleGroup.CHEST, MuscleGroup.BACK, MuscleGroup.SHOULDERS, MuscleGroup.ARMS):
            assert self.rule.covers(group)
        assert not self.rule.covers(MuscleGroup.CORE)

    @pytest.mark.parametrize(
        ("hours_ago", "quota"),
        [
            (72.0, 2),
            (48.0, 2),    # 66.7%
            (47.0, 2),    # 65.3%
            (46.0, 0),    # 63.9%
            (24.0, 0),
            (0.0, 0),
        ],
    )
    def test_threshold_on_72h_window(self, hours_ago: float, quota: int) -> None:
        state = self._state(MuscleGroup.CHEST, hours_ago)
        assert self.rule.evaluate(MuscleGroup.CHEST, state, T0).quota == quota

    def test_ignores_group_window_and_stored_percentage(self) -> None:
        # Shoulders recover in 48h, so 40h ago reads 83% on its own window,
        # but only 55.6% of the 72h quota window
        state = self._state(MuscleGroup.SHOULDERS, 40.0, stored_pct=83.3)
        decision = self.rule.evaluate(MuscleGroup.SHOULDERS, state, T0)
        assert decision.quota == 0
        assert decision.recovery_percentage == pytest.approx(40.0 / 72 * 100)
