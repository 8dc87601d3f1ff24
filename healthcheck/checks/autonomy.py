"""
Autonomy Checks
"""

from typing import List

from ..collector.models import CollectedInputs
from .models import Category, CheckDefinition, CheckOutcome, contains_any

QUEUE_KEYWORDS = ["task queue", "task-queue"]
NO_ASK_HOOK_KEYWORDS = ["no-ask", "question"]
NO_ASK_INSTRUCTION_KEYWORDS = ["don't ask", "質問", "自分で判断"]
PERSISTENCE_KEYWORDS = ["memory", "mission.md", "persistent"]


def _check_task_queue(inputs: CollectedInputs) -> CheckOutcome:
    if inputs.flag("task_queue"):
        return CheckOutcome.ok("Task queue file found")
    if contains_any(inputs.instruction_text, QUEUE_KEYWORDS):
        return CheckOutcome.ok("Task queue referenced in CLAUDE.md")
    return CheckOutcome.fail("No task queue for autonomous execution")


def _check_no_questions(inputs: CollectedInputs) -> CheckOutcome:
    if (contains_any(inputs.hook_text, NO_ASK_HOOK_KEYWORDS)
            or contains_any(inputs.instruction_text, NO_ASK_INSTRUCTION_KEYWORDS)):
        return CheckOutcome.ok("Question-blocking rules detected")
    return CheckOutcome.fail("No rules to prevent unnecessary questions")


def _check_persistent_state(inputs: CollectedInputs) -> CheckOutcome:
    markers = [name for name in ("memory_dir", "mission_file") if inputs.flag(name)]
    if markers:
        return CheckOutcome.ok(f"State persistence found ({', '.join(markers)})")
    if contains_any(inputs.instruction_text, PERSISTENCE_KEYWORDS):
        return CheckOutcome.ok("State persistence described in CLAUDE.md")
    return CheckOutcome.fail("No persistent state mechanism")


CHECKS: List[CheckDefinition] = [
    CheckDefinition(
        category=Category.AUTONOMY,
        question="AI can run tasks from a queue without human prompting",
        weight=5,
        predicate=_check_task_queue,
        remediation=(
            "Create a task-queue.yaml with status tracking (pending/in-progress/done) "
            "that the AI reads and executes."
        ),
    ),
    CheckDefinition(
        category=Category.AUTONOMY,
        question="Setup blocks the AI from asking unnecessary questions",
        weight=5,
        predicate=_check_no_questions,
        remediation=(
            "Add a hook or CLAUDE.md rule that redirects question-asking patterns "
            "to autonomous decision-making."
        ),
    ),
    CheckDefinition(
        category=Category.AUTONOMY,
        question="AI can continue working across session restarts (persistent state)",
        weight=5,
        predicate=_check_persistent_state,
        remediation="Use mission.md or MEMORY.md to maintain state across context compactions and session restarts.",
    ),
]
