"""Decision trace: audit trail of how the engine assembled a plan."""

from __future__ import annotations

from dataclasses import dataclass, field

from workout_engine.models.enums import MuscleGroup, PlanArchetype


@dataclass(frozen=True)
class QuotaDecision:
    """A quota rule's verdict for one muscle group."""

    rule_id: str
    muscle_group: MuscleGroup
    quota: int
    recovery_percentage: float
    explanation: str = ""


@dataclass(frozen=True)
class GroupResult:
    """What happened to one muscle group during assembly."""

    muscle_group: MuscleGroup
    decision: QuotaDecision
    candidates: int = 0
    selected: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class DecisionTrace:
    """Complete audit trail for a single generation call.

    Records every group's quota and selection plus what deduplication and
    capping removed, so a plan can be explained after the fact.
    """

    archetype: PlanArchetype
    group_results: tuple[GroupResult, ...] = field(default_factory=tuple)
    duplicates_dropped: tuple[str, ...] = field(default_factory=tuple)
    capped_out: tuple[str, ...] = field(default_factory=tuple)
    cap: int | None = None
    test_recovery_mode: bool = False

    @property
    def leg_subgroup_selections(self) -> int:
        """Exercises selected for leg subgroups before dedup and cap."""
        return sum(
            len(r.selected) for r in self.group_results if r.muscle_group.is_leg_subgroup
        )

    def quota_for(self, group: MuscleGroup) -> int | None:
        for result in self.group_results:
            if result.muscle_group == group:
                return result.decision.quota
        return None
