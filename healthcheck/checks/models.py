"""
Check Models

Shared data types for rule definitions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional

from ..collector.models import CollectedInputs


class Category(str, Enum):
    """Scoring dimensions, in report order."""
    SAFETY = "Safety Guards"
    QUALITY = "Code Quality"
    MONITORING = "Monitoring"
    RECOVERY = "Recovery"
    AUTONOMY = "Autonomy"
    COORDINATION = "Coordination"


@dataclass(frozen=True)
class CheckOutcome:
    """Result of one predicate invocation."""
    passed: bool
    detail: str

    def __post_init__(self):
        if not self.detail:
            raise ValueError("CheckOutcome.detail must not be empty")

    @classmethod
    def ok(cls, detail: str) -> "CheckOutcome":
        return cls(passed=True, detail=detail)

    @classmethod
    def fail(cls, detail: str) -> "CheckOutcome":
        return cls(passed=False, detail=detail)

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {self.detail}"


Predicate = Callable[[CollectedInputs], CheckOutcome]


@dataclass(frozen=True)
class CheckDefinition:
    """A single weighted heuristic check."""
    category: Category
    question: str
    weight: int
    predicate: Predicate
    remediation: str

    def __post_init__(self):
        if not isinstance(self.weight, int) or isinstance(self.weight, bool) or self.weight <= 0:
            raise ValueError(f"Weight must be a positive integer: {self.question!r}")
        if not self.question or not self.remediation:
            raise ValueError("Question and remediation text are required")


def first_match(text: str, keywords: Iterable[str]) -> Optional[str]:
    """First keyword contained in text (case-insensitive), or None."""
    text = text.lower()
    for keyword in keywords:
        if keyword.lower() in text:
            return keyword
    return None


def contains_any(text: str, keywords: Iterable[str]) -> bool:
    return first_match(text, keywords) is not None
