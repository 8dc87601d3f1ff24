#!/usr/bin/env python3
"""Unit tests for the scoring engine."""

from unittest import TestCase, main

from healthcheck.checks import REGISTRY, Category
from healthcheck.checks.models import CheckDefinition, CheckOutcome
from healthcheck.collector import CollectedInputs
from healthcheck.scoring import Grade, HealthChecker, evaluate, grade_for
from healthcheck.scoring.models import RunReport, percent

from support import full_inputs, make_inputs


def _check(category=Category.SAFETY, weight=5, passed=True, question=None, remediation="fix it"):
    return CheckDefinition(
        category=category,
        question=question or f"{category.value} check ({weight}, {passed})",
        weight=weight,
        predicate=lambda inputs: CheckOutcome(passed=passed, detail="detail"),
        remediation=remediation,
    )


class _StaticCollector:
    """Collector stand-in returning a fixed snapshot."""

    def __init__(self, inputs):
        self.inputs = inputs
        self.calls = 0

    def collect(self):
        self.calls += 1
        return self.inputs


# =============================================================================
# Grading
# =============================================================================

class TestGradeFor(TestCase):
    def test_band_boundaries(self):
        self.assertEqual(grade_for(100), Grade.PRODUCTION_READY)
        self.assertEqual(grade_for(80), Grade.PRODUCTION_READY)
        self.assertEqual(grade_for(79), Grade.GETTING_THERE)
        self.assertEqual(grade_for(60), Grade.GETTING_THERE)
        self.assertEqual(grade_for(59), Grade.NEEDS_WORK)
        self.assertEqual(grade_for(35), Grade.NEEDS_WORK)
        self.assertEqual(grade_for(34), Grade.CRITICAL)
        self.assertEqual(grade_for(0), Grade.CRITICAL)

    def test_monotonic(self):
        ranks = [grade_for(p).rank for p in range(0, 101)]
        self.assertEqual(ranks, sorted(ranks))


class TestPercent(TestCase):
    def test_rounds_half_up(self):
        self.assertEqual(percent(1, 8), 13)   # 12.5
        self.assertEqual(percent(5, 8), 63)   # 62.5
        self.assertEqual(percent(2, 3), 67)

    def test_zero_total(self):
        self.assertEqual(percent(0, 0), 0)


# =============================================================================
# evaluate()
# =============================================================================

class TestEvaluate(TestCase):
    def test_safety_example(self):
        registry = [
            CheckDefinition(
                category=Category.SAFETY,
                question="Hook blocks commands",
                weight=5,
                predicate=lambda i: (CheckOutcome.ok("block found") if "block" in i.hook_text
                                     else CheckOutcome.fail("no block")),
                remediation="add a guard",
            ),
            CheckDefinition(
                category=Category.SAFETY,
                question="Branch protection rule",
                weight=5,
                predicate=lambda i: (CheckOutcome.ok("rule found") if "protected branch" in i.instruction_text
                                     else CheckOutcome.fail("no rule")),
                remediation="add a rule",
            ),
        ]
        report = evaluate(make_inputs(hooks=[("PreToolUse", "block-rm.sh")]), registry)

        score = report.per_category[Category.SAFETY]
        self.assertEqual((score.earned, score.total, score.percent), (5, 10, 50))
        self.assertEqual(report.overall_percent, 50)
        self.assertEqual(report.grade, Grade.NEEDS_WORK)

    def test_totals_add_up(self):
        report = evaluate(full_inputs())
        self.assertEqual(sum(s.total for s in report.per_category.values()), report.overall_total)
        self.assertEqual(sum(s.earned for s in report.per_category.values()), report.overall_earned)
        self.assertEqual(report.overall_percent, percent(report.overall_earned, report.overall_total))

    def test_empty_inputs_score_zero(self):
        report = evaluate(make_inputs())
        self.assertEqual(report.overall_earned, 0)
        self.assertEqual(report.overall_total, 100)
        self.assertEqual(report.grade, Grade.CRITICAL)
        self.assertFalse(report.passed)

    def test_bare_snapshot_scores_zero(self):
        self.assertEqual(evaluate(CollectedInputs()).overall_earned, 0)

    def test_all_triggers_full_score(self):
        report = evaluate(full_inputs())
        self.assertEqual(report.overall_earned, report.overall_total)
        self.assertEqual(report.overall_percent, 100)
        self.assertEqual(report.grade, Grade.PRODUCTION_READY)
        self.assertEqual(report.failures, [])

    def test_idempotent(self):
        inputs = full_inputs()
        self.assertEqual(evaluate(inputs), evaluate(inputs))
        partial = make_inputs(instructions="backup and verify")
        self.assertEqual(evaluate(partial), evaluate(partial))

    def test_one_result_per_check_in_order(self):
        report = evaluate(make_inputs())
        self.assertEqual([r.definition for r in report.per_check], list(REGISTRY))
        self.assertEqual(list(report.per_category), list(Category))

    def test_points_awarded(self):
        report = evaluate(make_inputs(), [_check(weight=3, passed=True), _check(weight=2, passed=False)])
        self.assertEqual([r.points_awarded for r in report.per_check], [3, 0])

    def test_more_passes_never_lower_grade(self):
        previous = -1
        for passing in range(11):
            registry = (
                [_check(weight=10, passed=True, question=f"p{i}") for i in range(passing)]
                + [_check(weight=10, passed=False, question=f"f{i}") for i in range(10 - passing)]
            )
            rank = evaluate(make_inputs(), registry).grade.rank
            self.assertGreaterEqual(rank, previous)
            previous = rank

    def test_empty_registry(self):
        report = evaluate(make_inputs(), [])
        self.assertEqual((report.overall_earned, report.overall_total, report.overall_percent), (0, 0, 0))
        self.assertEqual(report.grade, Grade.CRITICAL)

    def test_malformed_config_reports_failures(self):
        report = evaluate(make_inputs(hooks=[]))
        guard = report.per_check[0]
        self.assertFalse(guard.passed)
        self.assertEqual(guard.outcome.detail, "No PreToolUse hooks found")


class TestPredicateErrors(TestCase):
    def test_exception_recorded_as_failure(self):
        def boom(inputs):
            raise RuntimeError("boom")

        registry = [
            CheckDefinition(Category.SAFETY, "explodes", 5, boom, "fix"),
            _check(weight=5, passed=True),
        ]
        with self.assertLogs("healthcheck", level="WARNING"):
            report = evaluate(make_inputs(), registry)

        failed = report.per_check[0]
        self.assertFalse(failed.passed)
        self.assertEqual(failed.outcome.detail, "Internal evaluation error: RuntimeError: boom")
        self.assertTrue(report.per_check[1].passed)
        self.assertEqual(report.overall_earned, 5)

    def test_wrong_return_type(self):
        registry = [CheckDefinition(Category.SAFETY, "returns none", 5, lambda i: None, "fix")]
        with self.assertLogs("healthcheck", level="WARNING"):
            report = evaluate(make_inputs(), registry)
        self.assertIn("TypeError", report.per_check[0].outcome.detail)


# =============================================================================
# RunReport
# =============================================================================

class TestRunReport(TestCase):
    def test_top_failures_by_weight_then_registry_order(self):
        registry = [
            _check(weight=2, passed=False, question="a"),
            _check(weight=5, passed=False, question="b"),
            _check(weight=3, passed=False, question="c"),
            _check(weight=5, passed=False, question="d"),
            _check(weight=5, passed=True, question="e"),
        ]
        report = evaluate(make_inputs(), registry)
        self.assertEqual(
            [r.definition.question for r in report.top_failures(3)],
            ["b", "d", "c"],
        )
        self.assertEqual(report.top_failures(0), [])

    def test_frozen(self):
        report = evaluate(make_inputs())
        with self.assertRaises(AttributeError):
            report.overall_earned = 100
        with self.assertRaises(TypeError):
            report.per_category[Category.SAFETY] = None

    def test_summary(self):
        report = RunReport(overall_earned=72, overall_total=100, grade=grade_for(72))
        self.assertEqual(report.summary(), "72/100 (Getting There): 0/0 checks passed, 72/100 points")

    def test_passing_threshold(self):
        self.assertTrue(RunReport(60, 100, grade_for(60)).passed)
        self.assertFalse(RunReport(59, 100, grade_for(59)).passed)


# =============================================================================
# HealthChecker
# =============================================================================

class TestHealthChecker(TestCase):
    def test_run_collects_once(self):
        collector = _StaticCollector(full_inputs())
        checker = HealthChecker(collector)
        checker.run()
        checker.run()
        self.assertEqual(collector.calls, 1)
        self.assertEqual(checker.run().overall_percent, 100)

    def test_run_check_by_index_and_question(self):
        checker = HealthChecker(_StaticCollector(make_inputs()))
        self.assertEqual(checker.run_check(0).definition, REGISTRY[0])
        result = checker.run_check("WATCHDOG")
        self.assertIn("Watchdog", result.definition.question)
        self.assertFalse(result.passed)

    def test_run_check_unknown(self):
        checker = HealthChecker(_StaticCollector(make_inputs()))
        self.assertIsNone(checker.run_check(999))
        self.assertIsNone(checker.run_check("no such check"))


if __name__ == "__main__":
    main()
