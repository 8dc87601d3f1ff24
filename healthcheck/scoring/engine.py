"""
Scoring Engine

Runs every check against one CollectedInputs snapshot and aggregates the
results into a RunReport.
"""

from typing import Dict, List, Optional, Sequence, Union

from ..checks import REGISTRY
from ..checks.models import Category, CheckDefinition, CheckOutcome
from ..collector import CollectedInputs, InputCollector
from ..config.defaults import GRADE_BANDS
from ..logger import get_logger
from .models import CategoryScore, CheckResult, Grade, RunReport, percent

log = get_logger(__name__)


def grade_for(score_percent: int) -> Grade:
    """Map a percentage to its grade band (first band whose bound is met)."""
    for lower_bound, label in GRADE_BANDS:
        if score_percent >= lower_bound:
            return Grade(label)
    return Grade(GRADE_BANDS[-1][1])


def run_check(definition: CheckDefinition, inputs: CollectedInputs) -> CheckResult:
    """
    Invoke one predicate.

    A predicate that raises, or returns something other than a CheckOutcome,
    is recorded as a failed check instead of aborting the run.
    """
    try:
        outcome = definition.predicate(inputs)
        if not isinstance(outcome, CheckOutcome):
            raise TypeError(
                f"predicate returned {type(outcome).__name__}, expected CheckOutcome"
            )
    except Exception as e:
        log.warning("Check %r failed to evaluate: %s", definition.question, e)
        outcome = CheckOutcome.fail(
            f"Internal evaluation error: {type(e).__name__}: {e}"
        )
    return CheckResult(definition=definition, outcome=outcome)


def evaluate(
    inputs: CollectedInputs,
    registry: Sequence[CheckDefinition] = REGISTRY,
) -> RunReport:
    """
    Evaluate every check in registry order and aggregate the scores.

    Args:
        inputs: Snapshot shared read-only by all predicates
        registry: Checks to run

    Returns:
        RunReport with overall, per-category and per-check results
    """
    results = [run_check(definition, inputs) for definition in registry]

    earned: Dict[Category, int] = {}
    totals: Dict[Category, int] = {}
    for result in results:
        category = result.category
        earned[category] = earned.get(category, 0) + result.points_awarded
        totals[category] = totals.get(category, 0) + result.definition.weight

    per_category = {
        category: CategoryScore(earned=earned[category], total=totals[category])
        for category in totals
    }

    overall_earned = sum(earned.values())
    overall_total = sum(totals.values())

    return RunReport(
        overall_earned=overall_earned,
        overall_total=overall_total,
        grade=grade_for(percent(overall_earned, overall_total)),
        per_category=per_category,
        per_check=tuple(results),
    )


class HealthChecker:
    """
    Orchestrates a health check run.

    Collects inputs once, then scores them against the registry.
    """

    def __init__(
        self,
        collector: Optional[InputCollector] = None,
        registry: Sequence[CheckDefinition] = REGISTRY,
    ):
        """
        Initialize the checker.

        Args:
            collector: Input collector (default: real home/cwd)
            registry: Checks to run
        """
        self.collector = collector or InputCollector()
        self.registry = tuple(registry)
        self._inputs: Optional[CollectedInputs] = None

    @property
    def inputs(self) -> CollectedInputs:
        """Collected inputs, gathered on first access."""
        if self._inputs is None:
            self._inputs = self.collector.collect()
        return self._inputs

    def run(self) -> RunReport:
        """
        Run all checks.

        Returns:
            RunReport for the collected inputs
        """
        report = evaluate(self.inputs, self.registry)
        log.debug("Scored %s", report.summary())
        return report

    def run_check(self, key: Union[int, str]) -> Optional[CheckResult]:
        """
        Run a single check by registry index or question text.

        Args:
            key: Index into the registry, or a case-insensitive
                 substring of the check's question

        Returns:
            CheckResult or None if no check matches
        """
        definition = self._find(key)
        if definition is None:
            return None
        return run_check(definition, self.inputs)

    def _find(self, key: Union[int, str]) -> Optional[CheckDefinition]:
        if isinstance(key, int):
            if 0 <= key < len(self.registry):
                return self.registry[key]
            return None

        needle = key.lower()
        matches: List[CheckDefinition] = [
            d for d in self.registry if needle in d.question.lower()
        ]
        return matches[0] if matches else None
