"""
Scoring Models

Result types produced by the scoring engine. All of them are frozen.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Tuple

from ..checks.models import Category, CheckDefinition, CheckOutcome
from ..config.defaults import PASSING_THRESHOLD


class Grade(str, Enum):
    """Qualitative grade bands, best first."""
    PRODUCTION_READY = "Production Ready"
    GETTING_THERE = "Getting There"
    NEEDS_WORK = "Needs Work"
    CRITICAL = "Critical"

    @property
    def rank(self) -> int:
        """0 for the lowest band, increasing towards the best one."""
        members = list(Grade)
        return len(members) - 1 - members.index(self)


def percent(earned: int, total: int) -> int:
    """round(100 * earned / total), rounding halves up; 0 when total is 0."""
    if total <= 0:
        return 0
    return (200 * earned + total) // (2 * total)


@dataclass(frozen=True)
class CheckResult:
    """Outcome of one check in one run."""
    definition: CheckDefinition
    outcome: CheckOutcome

    @property
    def passed(self) -> bool:
        return self.outcome.passed

    @property
    def points_awarded(self) -> int:
        return self.definition.weight if self.outcome.passed else 0

    @property
    def category(self) -> Category:
        return self.definition.category

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        return f"[{status}] {self.definition.question}: {self.outcome.detail}"


@dataclass(frozen=True)
class CategoryScore:
    """Aggregated points for one category."""
    earned: int
    total: int

    @property
    def percent(self) -> int:
        return percent(self.earned, self.total)


@dataclass(frozen=True)
class RunReport:
    """Complete result of one evaluation."""
    overall_earned: int
    overall_total: int
    grade: Grade
    per_category: Mapping[Category, CategoryScore] = field(default_factory=dict)
    per_check: Tuple[CheckResult, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "per_category", MappingProxyType(dict(self.per_category)))
        object.__setattr__(self, "per_check", tuple(self.per_check))

    @property
    def overall_percent(self) -> int:
        return percent(self.overall_earned, self.overall_total)

    @property
    def passed(self) -> bool:
        """True when the score meets the passing threshold."""
        return self.overall_percent >= PASSING_THRESHOLD

    @property
    def failures(self) -> List[CheckResult]:
        """Failed checks in registry order."""
        return [r for r in self.per_check if not r.passed]

    def top_failures(self, limit: int) -> List[CheckResult]:
        """
        Failed checks by descending weight.

        sorted() is stable, so equal weights keep registry order.
        """
        ranked = sorted(self.failures, key=lambda r: -r.definition.weight)
        return ranked[:max(limit, 0)]

    def summary(self) -> str:
        """Get summary string."""
        passed = len(self.per_check) - len(self.failures)
        return (
            f"{self.overall_percent}/100 ({self.grade.value}): "
            f"{passed}/{len(self.per_check)} checks passed, "
            f"{self.overall_earned}/{self.overall_total} points"
        )
