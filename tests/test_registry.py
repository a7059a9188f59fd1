"""Tests for RuleRegistry auto-discovery."""

from __future__ import annotations

from gym_engine.models.enums import OverloadPriority, SessionStage
from gym_engine.registry import RuleRegistry, overload_registry, session_registry
from gym_engine.rules.base import OverloadRule
from gym_engine.rules.overload.progression import OnTrackRule


class TestOverloadRegistry:
    def setup_method(self) -> None:
        self.registry = overload_registry()

    def test_discovers_every_row(self) -> None:
        assert len(self.registry.get_all_rules()) == len(OverloadPriority)

    def test_priority_order(self) -> None:
        ids = [r.rule_id for r in self.registry.get_all_rules()]
        assert ids == [
            "no_history",
            "no_weight_history",
            "deload",
            "hold",
            "kid_week",
            "progress",
            "on_track",
        ]

    def test_get_by_id(self) -> None:
        assert isinstance(self.registry.get("on_track"), OnTrackRule)
        assert self.registry.get("nope") is None

    def test_register_replaces_same_id(self) -> None:
        self.registry.register(OnTrackRule())
        assert self.registry.rule_ids.count("on_track") == 1


class TestSessionRegistry:
    def test_stage_order(self) -> None:
        rules = session_registry().get_all_rules()
        assert [r.rule_id for r in rules] == [
            "rotation",
            "day_override",
            "kid_week_guard",
            "load_interference",
        ]
        assert [r.priority for r in rules] == sorted(SessionStage)


class TestManualRegistry:
    def test_starts_empty_until_discovery(self) -> None:
        registry: RuleRegistry[OverloadRule] = RuleRegistry(
            OverloadRule, "gym_engine.rules.overload"
        )
        assert registry.get_all_rules() == []
        registry.discover_rules()
        assert "deload" in registry.rule_ids
