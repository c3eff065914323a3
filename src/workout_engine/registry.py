"""Quota rule registry with auto-discovery of QuotaRule subclasses."""

from __future__ import annotations

import importlib
import logging
import pkgutil

from workout_engine.exceptions import InternalError
from workout_engine.models.enums import MuscleGroup
from workout_engine.rules.base import QuotaRule

logger = logging.getLogger(__name__)


class QuotaRuleRegistry:
    """Discovers and manages all QuotaRule implementations.

    Auto-discovers rules by scanning the rules/ package for concrete
    subclasses of QuotaRule. Each muscle group must be covered by exactly
    one rule; the engine asks ``rule_for(group)`` during assembly.
    """

    def __init__(self) -> None:
        self._rules: dict[str, QuotaRule] = {}

    def discover_rules(self) -> None:
        """Scan the rules package and register all QuotaRule subclasses."""
        import workout_engine.rules as rules_pkg

        self._scan_package(rules_pkg.__name__, list(rules_pkg.__path__))

    def _scan_package(self, package_name: str, package_path: list[str]) -> None:
        for importer, module_name, is_pkg in pkgutil.walk_packages(
            package_path, prefix=package_name + "."
        ):
            try:
                module = importlib.import_module(module_name)
            except ImportError:
                logger.warning("Could not import rule module %s", module_name)
                continue

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, QuotaRule)
                    and attr is not QuotaRule
                    and not getattr(attr, "__abstractmethods__", set())
                ):
                    self.register(attr())

    def register(self, rule: QuotaRule) -> None:
        """Register a rule instance by its rule_id, replacing any previous one."""
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> QuotaRule | None:
        return self._rules.get(rule_id)

    def rule_for(self, group: MuscleGroup) -> QuotaRule:
        """Return the single rule covering ``group``.

        Raises:
            InternalError: if no rule, or more than one, covers the group.
        """
        matches = [r for r in self._rules.values() if r.covers(group)]
        if len(matches) != 1:
            raise InternalError(
                f"Expected exactly one quota rule for {group.value}, found "
                f"{[r.rule_id for r in matches]}"
            )
        return matches[0]

    def uncovered_groups(self) -> list[MuscleGroup]:
        """Muscle groups no registered rule covers."""
        return [g for g in MuscleGroup if not any(r.covers(g) for r in self._rules.values())]

    @property
    def rule_ids(self) -> list[str]:
        return list(self._rules.keys())
