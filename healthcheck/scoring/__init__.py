"""
Scoring Module

Evaluates the check registry and aggregates weighted scores.
"""

from .models import CategoryScore, CheckResult, Grade, RunReport
from .engine import HealthChecker, evaluate, grade_for, run_check

__all__ = [
    "HealthChecker",
    "evaluate",
    "grade_for",
    "run_check",
    "CategoryScore",
    "CheckResult",
    "Grade",
    "RunReport",
]
