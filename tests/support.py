"""Shared builders for the test suite."""

import json
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from healthcheck.collector import CollectedInputs, HookEntry
from healthcheck.config.defaults import MARKER_NAMES


def make_inputs(
    hooks: Optional[List[Tuple[str, str]]] = None,
    instructions: str = "",
    flags: Optional[Dict[str, bool]] = None,
    scripts: Optional[Dict[str, str]] = None,
) -> CollectedInputs:
    return CollectedInputs(
        hook_entries=tuple(HookEntry(event=e, command=c) for e, c in (hooks or [])),
        instruction_text=instructions,
        file_flags={name: False for name in MARKER_NAMES} if flags is None else flags,
        hook_scripts=scripts or {},
    )


FULL_HOOKS = [
    ("PreToolUse", "bash ~/.claude/hooks/guard.sh"),
    ("PostToolUse", "python -m py_compile $FILE && eslint --fix"),
    ("PostToolUse", "err-tracker --scan stderr --context-monitor --activity-log"),
    ("PreToolUse", "branch-guard --no-push-to main"),
    ("Stop", "session-summary && watchdog-ping && loop-detector"),
    ("UserPromptSubmit", "no-ask-redirect question"),
    ("Stop", "decision-log rationale && relay"),
]

FULL_INSTRUCTIONS = (
    "Always work on a feature branch.\n"
    "Definition of Done: tests pass.\n"
    "Verify every deploy with a screenshot.\n"
    "Create a backup branch before risky changes.\n"
    "Retry at most 3 times, then escalate.\n"
    "Work from the task queue. Don't ask for permission.\n"
    "Keep memory in mission.md. The team uses subagents.\n"
    "Record each lesson in LESSONS.md.\n"
    "Read API keys from environment variables.\n"
)


def full_inputs() -> CollectedInputs:
    """Inputs in which every check's trigger is present."""
    return make_inputs(
        hooks=FULL_HOOKS,
        instructions=FULL_INSTRUCTIONS,
        flags={name: True for name in MARKER_NAMES},
    )


def write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def build_setup(home: Path, project: Path, complete: bool = True) -> None:
    """Lay out a fake home, ~/.claude and project directory."""
    claude = home / ".claude"
    claude.mkdir(parents=True, exist_ok=True)
    project.mkdir(parents=True, exist_ok=True)
    if not complete:
        return

    settings = {"hooks": {}}
    for event, command in FULL_HOOKS:
        settings["hooks"].setdefault(event, []).append(
            {"matcher": "", "hooks": [{"type": "command", "command": command}]}
        )
    write(claude / "settings.json", json.dumps(settings))
    write(claude / "CLAUDE.md", FULL_INSTRUCTIONS)
    write(home / ".claude" / "hooks" / "guard.sh", "#!/bin/sh\n# BLOCK rm -rf\n")
    write(home / ".credentials", "")
    write(project / "CLAUDE.md", "# Project\n")
    write(project / "tasks" / "todo.md", "- [ ] ship\n")
    write(project / "LESSONS.md", "")
