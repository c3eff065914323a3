"""Command-line entry point: generate plans and inspect recovery from JSON files.

Usage:
    workout-engine generate --plan lower --profile profile.json --recovery recovery.json
    workout-engine recovery --recovery recovery.json
    workout-engine exercises --group quads
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

from workout_engine import config
from workout_engine.catalog import alternative_exercises, exercise_counts
from workout_engine.engine import WorkoutEngine
from workout_engine.exceptions import BadArguments, UserProfileNotFound, WorkoutEngineError
from workout_engine.models.enums import PlanArchetype
from workout_engine.models.profile import UserProfile
from workout_engine.models.recovery import RecoveryState
from workout_engine.serialization.json_codec import (
    exercise_to_dict,
    plan_to_dict,
    profile_from_dict,
    recovery_state_from_dict,
    recovery_state_to_dict,
)

logger = logging.getLogger(__name__)

_ARCHETYPES = {
    "lower": PlanArchetype.LOWER_BODY,
    "upper": PlanArchetype.UPPER_BODY,
    "full": PlanArchetype.FULL_BODY,
}


def _load_json(path: Path) -> dict:
    with open(path) as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as exc:
            raise BadArguments(f"Invalid JSON in {path}: {exc}") from exc


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {value}")
    return value


def _load_profile(path: Path) -> UserProfile:
    """Load the caller's profile; a missing file is a missing profile."""
    try:
        data = _load_json(path)
    except FileNotFoundError as exc:
        raise UserProfileNotFound(f"Profile not found at {path}") from exc
    return profile_from_dict(data)


def _load_recovery(path: Path | None) -> RecoveryState | None:
    """Load a stored recovery state; None when there is none yet."""
    if path is None:
        return None
    try:
        data = _load_json(path)
    except FileNotFoundError:
        logger.info("No recovery state at %s, assuming fully recovered", path)
        return None
    return recovery_state_from_dict(data)


def _engine(args: argparse.Namespace) -> WorkoutEngine:
    test_mode = True if args.test_recovery_mode else None
    return WorkoutEngine(test_recovery_mode=test_mode)


def _cmd_generate(args: argparse.Namespace) -> dict:
    profile = _load_profile(args.profile)
    recovery = _load_recovery(args.recovery)
    plan = _engine(args).generate(
        _ARCHETYPES[args.plan],
        profile,
        recovery,
        caller=args.caller,
        cap=args.cap,
    )
    return plan_to_dict(plan)


def _cmd_recovery(args: argparse.Namespace) -> dict:
    recovery = _load_recovery(args.recovery)
    snapshot = _engine(args).recovery_snapshot(recovery, datetime.now(timezone.utc))
    return recovery_state_to_dict(snapshot, include_legs=True)


def _cmd_exercises(args: argparse.Namespace) -> dict | list:
    if args.group:
        return [exercise_to_dict(e) for e in alternative_exercises(args.group, args.exclude)]
    return dict(exercise_counts())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workout-engine",
        description="Recovery-aware workout generator",
    )
    parser.add_argument(
        "--log-level", default=config.LOG_LEVEL,
        help="Logging level (default: WORKOUT_LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate a workout plan")
    gen.add_argument("--plan", choices=sorted(_ARCHETYPES), required=True)
    gen.add_argument("--profile", type=Path, required=True, help="Profile JSON file")
    gen.add_argument("--recovery", type=Path, help="Recovery state JSON file")
    gen.add_argument("--caller", default="anonymous", help="Caller identity for shuffling")
    gen.add_argument("--cap", type=_non_negative_int, help="Maximum number of exercises")
    gen.add_argument("--test-recovery-mode", action="store_true",
                     help="Treat every muscle group as fully recovered")
    gen.set_defaults(handler=_cmd_generate)

    rec = sub.add_parser("recovery", help="Show refreshed recovery state")
    rec.add_argument("--recovery", type=Path, help="Recovery state JSON file")
    rec.add_argument("--test-recovery-mode", action="store_true")
    rec.set_defaults(handler=_cmd_recovery)

    ex = sub.add_parser("exercises", help="Exercise counts, or alternatives for a group")
    ex.add_argument("--group", help="Muscle group name (case-insensitive)")
    ex.add_argument("--exclude", help="Exercise to leave out of the alternatives")
    ex.set_defaults(handler=_cmd_exercises)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        result = args.handler(args)
    except WorkoutEngineError as exc:
        logger.error("%s: %s", exc.code, exc.message)
        return 1

    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
