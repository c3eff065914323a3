"""Plan notes: the short status message attached to each plan."""

from __future__ import annotations

from workout_engine.models.enums import (
    FULL_VOLUME_MIN_EXERCISES,
    LOWER_LIMITED_MAX_EXERCISES,
    NOTE_LOWER_ALL_RECOVERING,
    NOTE_LOWER_CORE_FOCUSED,
    NOTE_LOWER_FULL,
    NOTE_LOWER_LIMITED,
    NOTE_REDUCED_VOLUME,
)


def lower_body_note(final_count: int, leg_subgroup_count: int) -> str:
    """Classify a lower-body plan.

    Args:
        final_count: Exercises in the final (deduplicated, capped) plan.
        leg_subgroup_count: Leg-subgroup selections before dedup and cap.
    """
    if final_count == 0:
        return NOTE_LOWER_ALL_RECOVERING
    if leg_subgroup_count == 0:
        return NOTE_LOWER_CORE_FOCUSED
    if final_count <= LOWER_LIMITED_MAX_EXERCISES:
        return NOTE_LOWER_LIMITED
    return NOTE_LOWER_FULL


def volume_note(final_count: int) -> str:
    """Note for upper- and full-body plans; empty plans never get here."""
    if final_count < FULL_VOLUME_MIN_EXERCISES:
        return NOTE_REDUCED_VOLUME
    return ""
