"""JSON serialization for plans, profiles and recovery states.

Encoders turn engine models into plain dicts (camelCase keys, ISO-8601
timestamps) for the external store and the CLI. Decoders are the boundary
where outside text enters: enum values are matched case-insensitively and
malformed payloads raise BadArguments.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
import math
from datetime import datetime, timezone
from enum import Enum
from typing import TypeVar

from workout_engine.exceptions import BadArguments
from workout_engine.math.recovery import (
    clamp_percentage,
    classify_recovery,
    leg_subgroup_recovery,
)
from workout_engine.models.enums import (
    Gender,
    MuscleGroup,
    TrainingFrequency,
    WeightUnit,
)
from workout_engine.models.exercise import ExerciseDefinition
from workout_engine.models.profile import UserProfile
from workout_engine.models.recovery import MuscleRecovery, RecoveryState
from workout_engine.models.workout import SelectedExercise, WorkoutPlan

E = TypeVar("E", bound=Enum)

# Store keys for the nine groups
_RECOVERY_KEYS: dict[MuscleGroup, str] = {group: group.value.lower() for group in MuscleGroup}


# ---------------------------------------------------------------------------
# Encoders
# ---------------------------------------------------------------------------


def exercise_to_dict(exercise: ExerciseDefinition) -> dict:
    return {
        "name": exercise.name,
        "primaryMuscleGroup": exercise.primary_muscle_group.value,
        "equipmentType": exercise.equipment_type,
        "demoUrl": exercise.demo_url,
        "recoveryTime": exercise.recovery_window_hours,
    }


def selected_exercise_to_dict(selected: SelectedExercise) -> dict:
    return {
        "exercise": exercise_to_dict(selected.exercise),
        "sets": selected.sets,
        "reps": selected.reps,
        "suggestedWeight": selected.suggested_weight,
        "setData": [{"weight": s.weight, "reps": s.reps} for s in selected.performed_sets],
    }


def plan_to_dict(plan: WorkoutPlan) -> dict:
    """Convert a WorkoutPlan to a JSON-compatible dict."""
    return {
        "archetype": plan.archetype.name.lower(),
        "exercises": [selected_exercise_to_dict(e) for e in plan.exercises],
        "timestamp": plan.timestamp.isoformat() if plan.timestamp else None,
        "totalVolume": plan.total_volume,
        "note": plan.note,
    }


def plan_to_json_string(plan: WorkoutPlan, indent: int = 2) -> str:
    return json.dumps(plan_to_dict(plan), indent=indent)


def muscle_recovery_to_dict(recovery: MuscleRecovery) -> dict:
    return {
        "lastTrained": recovery.last_trained.isoformat(),
        "recoveryPercentage": recovery.recovery_percentage,
    }


def recovery_state_to_dict(state: RecoveryState, include_legs: bool = False) -> dict:
    """Encode a recovery state keyed by lower-case group name.

    With ``include_legs`` the weighted Legs aggregate and a status label per
    entry are added; decoding ignores both.
    """
    result: dict = {}
    for group, recovery in state.items():
        result[_RECOVERY_KEYS[group]] = muscle_recovery_to_dict(recovery)
    if include_legs:
        result["legs"] = muscle_recovery_to_dict(leg_subgroup_recovery(state).legs)
        for entry in result.values():
            entry["status"] = classify_recovery(entry["recoveryPercentage"]).name.lower()
    return result


# ---------------------------------------------------------------------------
# Decoders
# ---------------------------------------------------------------------------


def _enum_from_text(enum_cls: type[E], text: object, field_name: str) -> E:
    if not isinstance(text, str):
        raise BadArguments(f"{field_name} must be a string, got {text!r}")
    key = text.strip().lower()
    for member in enum_cls:
        if str(member.value).lower() == key or member.name.lower() == key:
            return member
    raise BadArguments(f"Unknown {field_name}: {text!r}")


def _parse_datetime(text: object, field_name: str) -> datetime:
    if not isinstance(text, str):
        raise BadArguments(f"{field_name} must be an ISO-8601 string, got {text!r}")
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise BadArguments(f"Invalid {field_name}: {text!r}") from exc
    # Naive timestamps from the store are UTC
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _int_field(data: dict, key: str) -> int:
    try:
        return int(data[key])
    except (TypeError, ValueError) as exc:
        raise BadArguments(f"Invalid {key}: {data[key]!r}") from exc


def _require_object(data: object, what: str) -> dict:
    if not isinstance(data, dict):
        raise BadArguments(f"{what} must be a JSON object, got {type(data).__name__}")
    return data


def profile_from_dict(data: dict) -> UserProfile:
    """Decode a stored profile.

    ``gender`` and ``bodyweight`` are required; other fields fall back to
    UserProfile defaults.
    """
    data = _require_object(data, "Profile")
    try:
        bodyweight = float(data["bodyweight"])
        gender = _enum_from_text(Gender, data["gender"], "gender")
    except KeyError as exc:
        raise BadArguments(f"Profile missing field: {exc.args[0]}") from exc
    except (TypeError, ValueError) as exc:
        raise BadArguments(f"Invalid bodyweight: {data.get('bodyweight')!r}") from exc
    if not math.isfinite(bodyweight) or bodyweight < 0:
        raise BadArguments(f"Bodyweight must be a non-negative number, got {bodyweight}")

    kwargs: dict = {"gender": gender, "bodyweight": bodyweight}
    if "weightUnit" in data:
        kwargs["weight_unit"] = _enum_from_text(WeightUnit, data["weightUnit"], "weightUnit")
    if "trainingFrequency" in data:
        kwargs["training_frequency"] = _enum_from_text(
            TrainingFrequency, data["trainingFrequency"], "trainingFrequency",
        )
    if "restTime" in data:
        kwargs["rest_time_s"] = _int_field(data, "restTime")
    if "muscleGroupRestInterval" in data:
        kwargs["muscle_group_rest_interval_days"] = _int_field(data, "muscleGroupRestInterval")
    return UserProfile(**kwargs)


def profile_to_dict(profile: UserProfile) -> dict:
    return {
        "gender": profile.gender.value,
        "bodyweight": profile.bodyweight,
        "weightUnit": profile.weight_unit.value,
        "trainingFrequency": profile.training_frequency.value,
        "restTime": profile.rest_time_s,
        "muscleGroupRestInterval": profile.muscle_group_rest_interval_days,
    }


def recovery_state_from_dict(data: dict) -> RecoveryState:
    """Decode a stored recovery state.

    Group keys are matched case-insensitively; extra keys (e.g. ``legs``)
    are ignored. Stored percentages are clamped into [0, 100].
    """
    data = _require_object(data, "Recovery state")
    groups: dict[MuscleGroup, MuscleRecovery] = {}
    for key, entry in data.items():
        try:
            group = MuscleGroup.from_name(key)
        except BadArguments:
            continue
        if not isinstance(entry, dict) or "lastTrained" not in entry:
            raise BadArguments(f"Invalid recovery entry for {key!r}: {entry!r}")
        try:
            pct = float(entry.get("recoveryPercentage", 100.0))
        except (TypeError, ValueError) as exc:
            raise BadArguments(f"Invalid recoveryPercentage for {key!r}") from exc
        if math.isnan(pct):
            raise BadArguments(f"Invalid recoveryPercentage for {key!r}: NaN")
        groups[group] = MuscleRecovery(
            last_trained=_parse_datetime(entry["lastTrained"], f"{key}.lastTrained"),
            recovery_percentage=clamp_percentage(pct),
        )
    missing = [g.value for g in MuscleGroup if g not in groups]
    if missing:
        raise BadArguments(f"Recovery state missing groups: {missing}")
    return RecoveryState.from_groups(groups)
