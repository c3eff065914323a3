"""Tests for plan notes."""

from __future__ import annotations

import pytest

from workout_engine.planner.notes import lower_body_note, volume_note


class TestLowerBodyNote:
    def test_empty_plan(self) -> None:
        assert lower_body_note(0, 0) == "All lower muscle groups recovering"

    def test_core_only(self) -> None:
        assert lower_body_note(2, 0) == "Core-focused session (leg subgroups recovering)"

    @pytest.mark.parametrize("count", [1, 2, 3])
    def test_limited(self, count: int) -> None:
        assert lower_body_note(count, 1) == "Limited exercises due to muscle recovery"

    def test_full(self) -> None:
        assert lower_body_note(4, 2) == "Full lower-body workout"

    def test_empty_wins_over_leg_count(self) -> None:
        # Leg selections can all be capped away
        assert lower_body_note(0, 4) == "All lower muscle groups recovering"


class TestVolumeNote:
    @pytest.mark.parametrize("count", [1, 2, 9])
    def test_reduced(self, count: int) -> None:
        assert volume_note(count) == "Reduced volume due to recovery constraints."

    @pytest.mark.parametrize("count", [10, 18])
    def test_full_volume_has_no_note(self, count: int) -> None:
        assert volume_note(count) == ""
