"""
Recovery Checks
"""

from typing import List

from ..collector.models import CollectedInputs
from .models import Category, CheckDefinition, CheckOutcome, contains_any, first_match

WATCHDOG_KEYWORDS = ["watchdog", "idle", "nudge", "heartbeat"]
LOOP_INSTRUCTION_KEYWORDS = ["loop", "retry", "3 times", "escalat"]
LOOP_HOOK_KEYWORDS = ["root-cause", "loop"]


def _check_backup_branches(inputs: CollectedInputs) -> CheckOutcome:
    if "backup" in inputs.instruction_text:
        return CheckOutcome.ok("Backup branch instructions found in CLAUDE.md")
    return CheckOutcome.fail("No backup branch strategy detected")


def _check_watchdog(inputs: CollectedInputs) -> CheckOutcome:
    keyword = first_match(inputs.hook_text, WATCHDOG_KEYWORDS)
    if keyword:
        return CheckOutcome.ok(f"Watchdog mechanism detected in hooks ('{keyword}')")
    if inputs.flag("watchdog_script"):
        return CheckOutcome.ok("Watchdog script found")
    return CheckOutcome.fail("No watchdog for hang/idle detection")


def _check_loop_fallback(inputs: CollectedInputs) -> CheckOutcome:
    if (contains_any(inputs.instruction_text, LOOP_INSTRUCTION_KEYWORDS)
            or contains_any(inputs.hook_text, LOOP_HOOK_KEYWORDS)):
        return CheckOutcome.ok("Loop detection / retry limits found")
    return CheckOutcome.fail("No loop detection or retry limits")


CHECKS: List[CheckDefinition] = [
    CheckDefinition(
        category=Category.RECOVERY,
        question="Git backup branches created before major changes",
        weight=5,
        predicate=_check_backup_branches,
        remediation=(
            'Add "git checkout -b backup/before-changes" to your CLAUDE.md instructions '
            "before risky operations."
        ),
    ),
    CheckDefinition(
        category=Category.RECOVERY,
        question="Watchdog detects and recovers from hangs/idle states",
        weight=5,
        predicate=_check_watchdog,
        remediation=(
            "Implement a tmux-based watchdog that detects idle/frozen states and "
            "automatically nudges or restarts the agent."
        ),
    ),
    CheckDefinition(
        category=Category.RECOVERY,
        question="Fallback plan exists for when AI gets stuck in a loop",
        weight=5,
        predicate=_check_loop_fallback,
        remediation="Track repeated command patterns. If the same error appears 3+ times, break the loop and escalate.",
    ),
]
