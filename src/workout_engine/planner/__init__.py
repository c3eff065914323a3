"""Planner: selection, load assignment, notes and session adaptation for plans."""

from workout_engine.planner.builder import apply_cap, deduplicate, select_for_group, validate_plan
from workout_engine.planner.load_assigner import assign_load
from workout_engine.planner.notes import lower_body_note, volume_note
from workout_engine.planner.session import log_set, update_plan_after_set

__all__ = [
    "apply_cap",
    "assign_load",
    "deduplicate",
    "log_set",
    "lower_body_note",
    "select_for_group",
    "update_plan_after_set",
    "validate_plan",
    "volume_note",
]
