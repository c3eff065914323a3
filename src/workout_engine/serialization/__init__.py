"""Serialization module: JSON encoding of plans, profiles and recovery states."""

from workout_engine.serialization.json_codec import (
    plan_to_dict,
    plan_to_json_string,
    profile_from_dict,
    profile_to_dict,
    recovery_state_from_dict,
    recovery_state_to_dict,
)

__all__ = [
    "plan_to_dict",
    "plan_to_json_string",
    "profile_from_dict",
    "profile_to_dict",
    "recovery_state_from_dict",
    "recovery_state_to_dict",
]
