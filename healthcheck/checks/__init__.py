"""
Check Registry

Ordered collection of every check, grouped by category.
"""

from typing import Dict, Tuple

from .models import Category, CheckDefinition, CheckOutcome, Predicate
from . import autonomy, coordination, monitoring, quality, recovery, safety

REGISTRY: Tuple[CheckDefinition, ...] = tuple(
    safety.CHECKS
    + quality.CHECKS
    + monitoring.CHECKS
    + recovery.CHECKS
    + autonomy.CHECKS
    + coordination.CHECKS
)

# Weight budget per category; the registry must add up to these
CATEGORY_BUDGET: Dict[Category, int] = {
    Category.SAFETY: 20,
    Category.QUALITY: 20,
    Category.MONITORING: 15,
    Category.RECOVERY: 15,
    Category.AUTONOMY: 15,
    Category.COORDINATION: 15,
}

TOTAL_POINTS = sum(CATEGORY_BUDGET.values())

__all__ = [
    "REGISTRY",
    "CATEGORY_BUDGET",
    "TOTAL_POINTS",
    "Category",
    "CheckDefinition",
    "CheckOutcome",
    "Predicate",
]
