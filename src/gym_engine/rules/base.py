"""Abstract base classes for the engine's rules.

Two rule families:

* ``OverloadRule`` — one row of the progressive-overload decision table.
  Rules are evaluated in ``priority`` order and the first one whose
  ``applies()`` is true produces the suggestion.
* ``SessionRule`` — one step of session selection. Steps run in ``priority``
  order; every step that applies overrides the current session label.

Both are discovered automatically by ``RuleRegistry``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING

from gym_engine.models.enums import (
    LoadFactor,
    OverloadPriority,
    SessionStage,
    WeekType,
)

if TYPE_CHECKING:
    from gym_engine.models.overload_context import OverloadContext
    from gym_engine.models.suggestion import WeightSuggestion


class OverloadRule(ABC):
    """One row of the progressive-overload decision table.

    Subclasses must define:
        rule_id: unique identifier (e.g. "deload")
        priority: position in the table (OverloadPriority)
        applies(): the row's predicate
        suggest(): the row's action
    """

    rule_id: str
    priority: OverloadPriority

    @abstractmethod
    def applies(self, ctx: OverloadContext) -> bool:
        ...

    @abstractmethod
    def suggest(self, ctx: OverloadContext) -> WeightSuggestion:
        ...


@dataclass(frozen=True)
class SessionState:
    """Everything a session-selection step may look at."""

    today: date
    week_type: WeekType
    load_factor: LoadFactor
    running_load: float
    last_session_type: str | None = None

    @property
    def has_history(self) -> bool:
        return self.last_session_type is not None

    @property
    def weekday(self) -> int:
        """Monday=0 ... Sunday=6."""
        return self.today.weekday()


@dataclass(frozen=True)
class SessionDecision:
    """Output of a session step: the new label and, optionally, why."""

    session: str
    rationale: str | None = None


class SessionRule(ABC):
    """One step of session selection.

    Subclasses must define:
        rule_id: unique identifier (e.g. "rotation")
        priority: stage in the selection pipeline (SessionStage)
        applies(): whether this step changes anything for *current*
        decide(): the new label
    """

    rule_id: str
    priority: SessionStage

    @abstractmethod
    def applies(self, state: SessionState, current: str) -> bool:
        ...

    @abstractmethod
    def decide(self, state: SessionState, current: str) -> SessionDecision:
        ...
