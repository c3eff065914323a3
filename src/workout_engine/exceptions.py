"""Custom exception hierarchy for the workout engine and its collaborators."""

from __future__ import annotations


class WorkoutEngineError(Exception):
    """Base exception for all workout_engine errors."""

    code = "internalError"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class Unauthorized(WorkoutEngineError):
    """Caller lacks the required role (raised by the access-control layer)."""

    code = "unauthorized"


class UserProfileNotFound(WorkoutEngineError):
    """No stored profile exists for the caller."""

    code = "userProfileNotFound"


class OptimizationFailed(WorkoutEngineError):
    """Upper- or full-body assembly produced zero exercises."""

    code = "optimizationFailed"


class BadArguments(WorkoutEngineError):
    """Input text or payload could not be interpreted."""

    code = "badArguments"


class InternalError(WorkoutEngineError):
    """The engine itself is misconfigured (e.g. a muscle group has no quota rule)."""

    code = "internalError"
