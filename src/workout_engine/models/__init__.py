"""Data models for the workout engine."""

from workout_engine.models.decision_trace import DecisionTrace, GroupResult, QuotaDecision
from workout_engine.models.enums import (
    Gender,
    MuscleGroup,
    PlanArchetype,
    RecoveryStatus,
    TrainingFrequency,
    WeightUnit,
)
from workout_engine.models.exercise import ExerciseDefinition
from workout_engine.models.profile import UserProfile
from workout_engine.models.recovery import LegSubgroupRecovery, MuscleRecovery, RecoveryState
from workout_engine.models.workout import SelectedExercise, SetData, WorkoutPlan

__all__ = [
    "DecisionTrace",
    "ExerciseDefinition",
    "Gender",
    "GroupResult",
    "LegSubgroupRecovery",
    "MuscleGroup",
    "MuscleRecovery",
    "PlanArchetype",
    "QuotaDecision",
    "RecoveryState",
    "RecoveryStatus",
    "SelectedExercise",
    "SetData",
    "TrainingFrequency",
    "UserProfile",
    "WeightUnit",
    "WorkoutPlan",
]
