"""Environment-variable-based configuration for the workout engine."""

from __future__ import annotations

import os


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# Forces every group to 100% recovery and every quota to 2
TEST_RECOVERY_MODE: bool = _env_flag("WORKOUT_TEST_RECOVERY_MODE")
LOG_LEVEL: str = os.environ.get("WORKOUT_LOG_LEVEL", "INFO").upper()
LOWER_BODY_CAP: int = int(os.environ.get("WORKOUT_LOWER_BODY_CAP", "8"))
