"""
Monitoring Checks
"""

from typing import List

from ..collector.models import CollectedInputs
from .models import Category, CheckDefinition, CheckOutcome, first_match

CONTEXT_KEYWORDS = ["context", "compact", "token"]
ACTIVITY_KEYWORDS = ["activity", "log", "jsonl", "audit"]
SUMMARY_KEYWORDS = ["proof", "summary", "session", "digest"]


def _check_context_monitoring(inputs: CollectedInputs) -> CheckOutcome:
    keyword = first_match(inputs.hook_text, CONTEXT_KEYWORDS)
    if keyword:
        return CheckOutcome.ok(f"Context window monitoring detected ('{keyword}')")
    return CheckOutcome.fail("No context window monitoring")


def _check_activity_logging(inputs: CollectedInputs) -> CheckOutcome:
    keyword = first_match(inputs.hook_text, ACTIVITY_KEYWORDS)
    if keyword:
        return CheckOutcome.ok(f"Activity logging detected ('{keyword}')")
    return CheckOutcome.fail("No activity logging configured")


def _check_daily_summaries(inputs: CollectedInputs) -> CheckOutcome:
    if first_match(inputs.hook_text, SUMMARY_KEYWORDS):
        return CheckOutcome.ok("Daily summarization configured")
    if inputs.flag("proof_log_dir"):
        return CheckOutcome.ok("Proof-log directory found")
    return CheckOutcome.fail("No daily summary generation")


CHECKS: List[CheckDefinition] = [
    CheckDefinition(
        category=Category.MONITORING,
        question="Context window usage monitored with alerts before it fills up",
        weight=5,
        predicate=_check_context_monitoring,
        remediation=(
            "Add a PostToolUse hook that checks context percentage and alerts before "
            "it fills up. Auto-compact at critical levels."
        ),
    ),
    CheckDefinition(
        category=Category.MONITORING,
        question="Activity logging tracks what commands ran, when, and what changed",
        weight=5,
        predicate=_check_activity_logging,
        remediation="Add a PostToolUse hook that logs every tool use to a JSONL file with timestamps.",
    ),
    CheckDefinition(
        category=Category.MONITORING,
        question="Daily summaries of AI work are generated (proof-log, session reports)",
        weight=5,
        predicate=_check_daily_summaries,
        remediation=(
            "Write a Stop hook that generates a 5W1H summary at session end. "
            "Makes handoffs and audits trivial."
        ),
    ),
]
