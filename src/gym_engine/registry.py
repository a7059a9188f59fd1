"""Rule registry with auto-discovery of rule subclasses."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import Generic, TypeVar

from gym_engine.rules.base import OverloadRule, SessionRule

R = TypeVar("R", OverloadRule, SessionRule)


class RuleRegistry(Generic[R]):
    """Discovers and manages the concrete rules of one rule family.

    Rules are discovered by scanning a package for concrete subclasses of
    the family's base class. A new rule is added by placing a module in the
    package; no manual registration is needed.

    Usage:
        registry = RuleRegistry(OverloadRule, "gym_engine.rules.overload")
        registry.discover_rules()
        for rule in registry.get_all_rules():
            ...
    """

    def __init__(self, base: type[R], package: str) -> None:
        self._base = base
        self._package = package
        self._rules: dict[str, R] = {}

    def discover_rules(self) -> None:
        """Import every module under the package and register its rules."""
        pkg = importlib.import_module(self._package)
        pkg_path = Path(pkg.__file__).parent  # type: ignore[arg-type]
        self._scan_package(pkg.__name__, str(pkg_path))

    def _scan_package(self, package_name: str, package_path: str) -> None:
        for _, module_name, _ in pkgutil.walk_packages(
            [package_path], prefix=package_name + "."
        ):
            module = importlib.import_module(module_name)

            for attr_name in dir(module):
                attr = getattr(module, attr_name)
                if (
                    isinstance(attr, type)
                    and issubclass(attr, self._base)
                    and attr is not self._base
                    and not getattr(attr, "__abstractmethods__", set())
                ):
                    self.register(attr())

    def register(self, rule: R) -> None:
        """Register a rule instance by its rule_id."""
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> R | None:
        return self._rules.get(rule_id)

    def get_all_rules(self) -> list[R]:
        """All registered rules sorted by priority (lowest value first)."""
        return sorted(self._rules.values(), key=lambda r: r.priority)

    @property
    def rule_ids(self) -> list[str]:
        return list(self._rules.keys())


def overload_registry() -> RuleRegistry[OverloadRule]:
    """Registry pre-loaded with the progressive-overload decision table."""
    registry: RuleRegistry[OverloadRule] = RuleRegistry(
        OverloadRule, "gym_engine.rules.overload"
    )
    registry.discover_rules()
    return registry


def session_registry() -> RuleRegistry[SessionRule]:
    """Registry pre-loaded with the session-selection steps."""
    registry: RuleRegistry[SessionRule] = RuleRegistry(
        SessionRule, "gym_engine.rules.session"
    )
    registry.discover_rules()
    return registry
