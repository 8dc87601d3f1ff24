"""
Coordination Checks

Decision trails, multi-agent coordination and shared knowledge.
"""

from typing import List

from ..collector.models import CollectedInputs
from .models import Category, CheckDefinition, CheckOutcome, contains_any, first_match

DECISION_KEYWORDS = ["decision", "rationale"]
COORDINATION_INSTRUCTION_KEYWORDS = ["multi-agent", "codex", "team", "subagent"]
COORDINATION_HOOK_KEYWORDS = ["relay", "tachikoma"]
LESSON_KEYWORDS = ["lesson", "教訓"]


def _check_decision_trail(inputs: CollectedInputs) -> CheckOutcome:
    if contains_any(inputs.hook_text, DECISION_KEYWORDS):
        return CheckOutcome.ok("Decision logging found in hooks")
    if inputs.flag("decision_log"):
        return CheckOutcome.ok("Decision log file found")
    return CheckOutcome.fail("No decision audit trail")


def _check_multi_agent(inputs: CollectedInputs) -> CheckOutcome:
    keyword = (first_match(inputs.instruction_text, COORDINATION_INSTRUCTION_KEYWORDS)
               or first_match(inputs.hook_text, COORDINATION_HOOK_KEYWORDS))
    if keyword:
        return CheckOutcome.ok(f"Multi-agent coordination found ('{keyword}')")
    return CheckOutcome.fail("No multi-agent coordination")


def _check_lessons(inputs: CollectedInputs) -> CheckOutcome:
    if inputs.flag("lessons_file") or contains_any(inputs.instruction_text, LESSON_KEYWORDS):
        return CheckOutcome.ok("Lesson capture mechanism found")
    return CheckOutcome.fail("No structured lesson capture")


def _check_project_instructions(inputs: CollectedInputs) -> CheckOutcome:
    if inputs.flag("project_instructions"):
        return CheckOutcome.ok("Project-level CLAUDE.md found")
    return CheckOutcome.fail("No project-level CLAUDE.md in the working directory")


CHECKS: List[CheckDefinition] = [
    CheckDefinition(
        category=Category.COORDINATION,
        question="Decision audit trail logs why each decision was made",
        weight=5,
        predicate=_check_decision_trail,
        remediation=(
            "Track decisions with rationale: what was decided, why, and what "
            "alternatives were rejected."
        ),
    ),
    CheckDefinition(
        category=Category.COORDINATION,
        question="AI can coordinate with other AI instances or tools",
        weight=3,
        predicate=_check_multi_agent,
        remediation="Enable file-based or tmux-based messaging between AI instances for parallel work.",
    ),
    CheckDefinition(
        category=Category.COORDINATION,
        question="Structured way to capture and reuse lessons learned",
        weight=2,
        predicate=_check_lessons,
        remediation="Maintain a LESSONS.md file to log errors and their fixes for future reference.",
    ),
    CheckDefinition(
        category=Category.COORDINATION,
        question="Project-specific instructions are kept with the repository",
        weight=5,
        predicate=_check_project_instructions,
        remediation=(
            "Add a CLAUDE.md (or .claude/CLAUDE.md) at the project root so project "
            "conventions travel with the code."
        ),
    ),
]
