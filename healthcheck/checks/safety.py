"""
Safety Guard Checks

Destructive-command guards, secret hygiene, branch protection and
error-aware gating.
"""

import re
from typing import List

from ..collector.hooks import script_token
from ..collector.models import CollectedInputs
from .models import Category, CheckDefinition, CheckOutcome, contains_any, first_match

GUARD_KEYWORDS = ["rm", "guard", "safe", "block", "deny", "cdp"]
GUARD_SCRIPT_PATTERNS = ["rm -rf", "reset --hard", "force", "block", "deny"]

SECRET_PATTERN = re.compile(
    r"sk-[a-z0-9]{20,}|ghp_[a-z0-9]{36}|token\s*[:=]\s*[\"'][^\"']{20,}",
    re.IGNORECASE,
)
CREDENTIAL_HINTS = [
    "environment variable",
    "env var",
    ".env",
    ".credentials",
    "secrets manager",
    "keychain",
]

BRANCH_HOOK_KEYWORDS = ["main", "master", "branch", "push"]
ERROR_GATE_KEYWORDS = ["error", "err-tracker", "err_code"]


def _check_destructive_guard(inputs: CollectedInputs) -> CheckOutcome:
    """PreToolUse hooks that look like they block destructive commands."""
    pre_hooks = inputs.hooks_for("pretooluse")
    if not pre_hooks:
        return CheckOutcome.fail("No PreToolUse hooks found")

    # Script contents are stronger evidence than the command line
    for hook in pre_hooks:
        script = script_token(hook.command)
        content = inputs.hook_scripts.get(script) if script else None
        if content and contains_any(content, GUARD_SCRIPT_PATTERNS):
            return CheckOutcome.ok(f"Safety hook found: {script}")

    if any(contains_any(h.command, GUARD_KEYWORDS) for h in pre_hooks):
        return CheckOutcome.ok(f"{len(pre_hooks)} PreToolUse hook(s) with safety patterns")

    return CheckOutcome.fail(
        f"{len(pre_hooks)} PreToolUse hook(s) found but no safety patterns detected"
    )


def _check_secrets(inputs: CollectedInputs) -> CheckOutcome:
    """No keys pasted into instructions, and a dedicated place to keep them."""
    if SECRET_PATTERN.search(inputs.instruction_text):
        return CheckOutcome.fail("Possible API key found in CLAUDE.md")

    if inputs.flag("credentials_file"):
        return CheckOutcome.ok("Credentials stored in dedicated file")

    hint = first_match(inputs.instruction_text, CREDENTIAL_HINTS)
    if hint:
        return CheckOutcome.ok(f"No leaked keys; instructions reference '{hint}' for secrets")

    return CheckOutcome.fail("No leaked keys, but no dedicated credential store found")


def _check_branch_protection(inputs: CollectedInputs) -> CheckOutcome:
    keyword = first_match(inputs.hook_text, BRANCH_HOOK_KEYWORDS)
    if keyword:
        return CheckOutcome.ok(f"Branch protection detected in hooks ('{keyword}')")

    text = inputs.instruction_text
    if "feature branch" in text or ("push" in text and "main" in text):
        return CheckOutcome.ok("Branch protection rules found in CLAUDE.md")

    return CheckOutcome.fail("No branch protection rules found")


def _check_error_gate(inputs: CollectedInputs) -> CheckOutcome:
    if contains_any(inputs.hook_text, ERROR_GATE_KEYWORDS):
        return CheckOutcome.ok("Error-aware gating detected in hooks")

    text = inputs.instruction_text
    if "error" in text and "block" in text:
        return CheckOutcome.ok("Error-aware gating rules found in CLAUDE.md")

    return CheckOutcome.fail("No error-aware gate found")


CHECKS: List[CheckDefinition] = [
    CheckDefinition(
        category=Category.SAFETY,
        question="PreToolUse hook blocks dangerous commands (rm -rf, git reset --hard)",
        weight=5,
        predicate=_check_destructive_guard,
        remediation=(
            "Add a PreToolUse hook that blocks destructive commands. A single shell "
            "script can catch rm -rf, force push, and database drops."
        ),
    ),
    CheckDefinition(
        category=Category.SAFETY,
        question="API keys stored in dedicated files (not hardcoded in CLAUDE.md)",
        weight=5,
        predicate=_check_secrets,
        remediation="Move API keys out of CLAUDE.md into ~/.credentials or environment variables.",
    ),
    CheckDefinition(
        category=Category.SAFETY,
        question="Setup prevents pushing to main/master without review",
        weight=5,
        predicate=_check_branch_protection,
        remediation=(
            "Add a PreToolUse hook that checks the target branch before git push. "
            "Block direct pushes to main/master."
        ),
    ),
    CheckDefinition(
        category=Category.SAFETY,
        question="Error-aware gate blocks external calls when errors exist",
        weight=5,
        predicate=_check_error_gate,
        remediation="Add an error-tracker that prevents publishing or pushing when unresolved errors exist.",
    ),
]
