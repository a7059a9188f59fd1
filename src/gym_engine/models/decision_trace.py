"""Decision trace — audit trail of how a suggestion was reached."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import auto, IntEnum


class RuleStatus(IntEnum):
    """Whether a rule fired, was skipped, or was never reached."""

    FIRED = auto()
    SKIPPED = auto()
    NOT_EVALUATED = auto()


@dataclass(frozen=True)
class RuleResult:
    """Record of a single rule's evaluation."""

    rule_id: str
    status: RuleStatus
    explanation: str = ""


@dataclass(frozen=True)
class DecisionTrace:
    """Every rule's outcome for one decision, in evaluation order."""

    rule_results: tuple[RuleResult, ...] = field(default_factory=tuple)
    notes: str = ""

    @property
    def fired(self) -> tuple[str, ...]:
        """IDs of the rules that fired, in order."""
        return tuple(r.rule_id for r in self.rule_results if r.status == RuleStatus.FIRED)
