"""Per-muscle-group recovery snapshot models."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime, timedelta

from workout_engine.models.enums import (
    GROUP_RECOVERY_WINDOW_HOURS,
    RECOVERY_MAX_PCT,
    MuscleGroup,
)

# MuscleGroup → RecoveryState attribute
_FIELD_BY_GROUP: dict[MuscleGroup, str] = {group: group.name.lower() for group in MuscleGroup}


@dataclass(frozen=True)
class MuscleRecovery:
    """Recovery of one muscle group: when it was last trained and how recovered it is."""

    last_trained: datetime
    recovery_percentage: float  # 0-100


@dataclass(frozen=True)
class RecoveryState:
    """Recovery of all nine tracked groups for one user.

    Owned by the external store. The engine reads it and derives refreshed
    copies; it never writes one back.
    """

    chest: MuscleRecovery
    back: MuscleRecovery
    shoulders: MuscleRecovery
    arms: MuscleRecovery
    core: MuscleRecovery
    quads: MuscleRecovery
    hamstrings: MuscleRecovery
    glutes: MuscleRecovery
    calves: MuscleRecovery

    @classmethod
    def fully_recovered(cls, now: datetime) -> RecoveryState:
        """Default state for a user with no stored recovery.

        Every group is at 100% and was last trained exactly one recovery
        window before ``now``.
        """
        return cls(**{
            _FIELD_BY_GROUP[group]: MuscleRecovery(
                last_trained=now - timedelta(hours=window),
                recovery_percentage=RECOVERY_MAX_PCT,
            )
            for group, window in GROUP_RECOVERY_WINDOW_HOURS.items()
        })

    @classmethod
    def from_groups(cls, groups: dict[MuscleGroup, MuscleRecovery]) -> RecoveryState:
        missing = [g.value for g in MuscleGroup if g not in groups]
        if missing:
            raise ValueError(f"Recovery missing for groups: {missing}")
        return cls(**{_FIELD_BY_GROUP[g]: groups[g] for g in MuscleGroup})

    def get(self, group: MuscleGroup) -> MuscleRecovery:
        return getattr(self, _FIELD_BY_GROUP[group])

    def with_group(self, group: MuscleGroup, recovery: MuscleRecovery) -> RecoveryState:
        """Return a copy with one group's recovery replaced."""
        return dataclasses.replace(self, **{_FIELD_BY_GROUP[group]: recovery})

    def items(self) -> list[tuple[MuscleGroup, MuscleRecovery]]:
        return [(group, self.get(group)) for group in MuscleGroup]


@dataclass(frozen=True)
class LegSubgroupRecovery:
    """The four leg subgroups plus their weighted Legs aggregate."""

    legs: MuscleRecovery
    quads: MuscleRecovery
    hamstrings: MuscleRecovery
    glutes: MuscleRecovery
    calves: MuscleRecovery
