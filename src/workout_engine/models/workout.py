"""Workout plan: the output of one generation call."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from workout_engine.models.enums import MuscleGroup, PlanArchetype
from workout_engine.models.exercise import ExerciseDefinition


@dataclass(frozen=True)
class SetData:
    """One logged set, recorded by the session collaborator."""

    weight: float
    reps: int


@dataclass(frozen=True)
class SelectedExercise:
    """A catalog exercise with its prescribed sets, reps and load."""

    exercise: ExerciseDefinition
    sets: int
    reps: int
    suggested_weight: float
    performed_sets: tuple[SetData, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        return self.exercise.name

    @property
    def muscle_group(self) -> MuscleGroup:
        return self.exercise.primary_muscle_group

    @property
    def volume(self) -> float:
        """Prescribed volume: sets × reps × suggested weight."""
        return self.sets * self.reps * self.suggested_weight


@dataclass(frozen=True)
class WorkoutPlan:
    """Final plan returned by WorkoutEngine.

    ``total_volume`` is always the sum of ``volume`` over ``exercises``.
    """

    archetype: PlanArchetype
    exercises: tuple[SelectedExercise, ...] = field(default_factory=tuple)
    timestamp: datetime | None = None
    total_volume: float = 0.0
    note: str = ""

    @property
    def exercise_names(self) -> list[str]:
        return [e.name for e in self.exercises]

    @property
    def muscle_groups(self) -> set[MuscleGroup]:
        return {e.muscle_group for e in self.exercises}
