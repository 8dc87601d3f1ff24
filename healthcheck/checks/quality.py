"""
Code Quality Checks
"""

from typing import List

from ..collector.models import CollectedInputs
from .models import Category, CheckDefinition, CheckOutcome, contains_any, first_match

SYNTAX_KEYWORDS = ["syntax", "compile", "lint", "py_compile", "eslint", "check"]
ERROR_DETECT_KEYWORDS = ["error", "stderr", "exit_code", "err-code"]
DOD_KEYWORDS = ["definition of done", "dod", "done checklist", "completion criteria"]
VERIFY_KEYWORDS = ["verify", "screenshot", "confirmation", "proof"]


def _check_post_edit_syntax(inputs: CollectedInputs) -> CheckOutcome:
    post_hooks = inputs.hooks_for("posttooluse")
    if not post_hooks:
        return CheckOutcome.fail("No PostToolUse hooks found")

    if any(contains_any(h.command, SYNTAX_KEYWORDS) for h in post_hooks):
        return CheckOutcome.ok("Post-edit syntax checking configured")

    return CheckOutcome.fail(
        f"{len(post_hooks)} PostToolUse hook(s) found but none run a syntax check"
    )


def _check_error_detection(inputs: CollectedInputs) -> CheckOutcome:
    keyword = first_match(inputs.hook_text, ERROR_DETECT_KEYWORDS)
    if keyword:
        return CheckOutcome.ok(f"Error detection patterns found in hooks ('{keyword}')")
    return CheckOutcome.fail("No error detection in command output")


def _check_definition_of_done(inputs: CollectedInputs) -> CheckOutcome:
    if inputs.flag("dod_checklist"):
        return CheckOutcome.ok("DoD checklist file found")
    if contains_any(inputs.instruction_text, DOD_KEYWORDS):
        return CheckOutcome.ok("DoD criteria found in CLAUDE.md")
    return CheckOutcome.fail("No Definition of Done checklist detected")


def _check_output_verification(inputs: CollectedInputs) -> CheckOutcome:
    keyword = first_match(inputs.instruction_text, VERIFY_KEYWORDS)
    if keyword:
        return CheckOutcome.ok(f"Output verification instructions found ('{keyword}')")
    return CheckOutcome.fail("No output verification pattern detected")


CHECKS: List[CheckDefinition] = [
    CheckDefinition(
        category=Category.QUALITY,
        question="Syntax checks run after every file edit (PostToolUse hook)",
        weight=5,
        predicate=_check_post_edit_syntax,
        remediation=(
            "Add a PostToolUse hook on Edit/Write that runs language-specific syntax "
            "checks (py_compile, eslint, bash -n)."
        ),
    ),
    CheckDefinition(
        category=Category.QUALITY,
        question="Error detection and tracking from command output",
        weight=5,
        predicate=_check_error_detection,
        remediation="Scan bash output for error patterns in PostToolUse hooks. Track repeated errors and escalate.",
    ),
    CheckDefinition(
        category=Category.QUALITY,
        question="Definition of Done (DoD) checklist exists for task completion",
        weight=5,
        predicate=_check_definition_of_done,
        remediation='Define what "done" means: tests pass, no open errors, syntax clean, docs updated.',
    ),
    CheckDefinition(
        category=Category.QUALITY,
        question="AI verifies its own output (screenshots, GET requests after publishing)",
        weight=5,
        predicate=_check_output_verification,
        remediation=(
            "Add verification steps to your workflow: after publishing or deploying, "
            "confirm the result matches expectations."
        ),
    ),
]
