"""
Hook Extraction

Normalizes the two shapes Claude Code accepts for the "hooks" section of
settings.json into one ordered sequence of HookEntry values:

    nested: {"PreToolUse": [{"matcher": "Bash", "hooks": [{"type": "command", "command": "..."}]}]}
    flat:   {"PreToolUse": ["guard.sh", {"command": "..."}]}
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError

from ..config.defaults import SCRIPT_EXTENSIONS
from ..config.models import ClaudeSettings, HookCommand, HookForm
from ..logger import get_logger
from .models import HookEntry

log = get_logger(__name__)

HOOK_FORM = TypeAdapter(HookForm)


def resolve_hook_form(raw: Any) -> Optional[HookForm]:
    """
    Resolve one raw event entry into its tagged form.

    The entry is tagged with its "kind" and validated through the HookForm
    discriminated union.

    Returns:
        MatcherGroup, FlatHook, or None when the entry is not recognized
    """
    if isinstance(raw, str):
        tagged = {"kind": "flat", "command": raw.strip()}
    elif not isinstance(raw, dict):
        return None
    elif isinstance(raw.get("hooks"), list):
        tagged = {"kind": "nested", "matcher": raw.get("matcher"), "hooks": raw["hooks"]}
    else:
        try:
            hook = HookCommand.model_validate(raw)
        except ValidationError:
            return None
        tagged = {"kind": "flat", "command": hook.text}

    try:
        return HOOK_FORM.validate_python(tagged)
    except ValidationError:
        return None


def parse_hook_document(data: Any) -> List[HookEntry]:
    """
    Extract hook entries from a parsed settings document.

    Never raises: anything unrecognized is dropped.
    """
    if not isinstance(data, dict):
        return []

    try:
        settings = ClaudeSettings.model_validate(data)
    except ValidationError:
        log.debug("Ignoring malformed hooks section")
        return []

    entries = []
    for event, raw_entries in settings.hooks.items():
        if not isinstance(raw_entries, list):
            raw_entries = [raw_entries]
        for raw in raw_entries:
            form = resolve_hook_form(raw)
            if form is None:
                continue
            for command in form.commands():
                entries.append(HookEntry(event=event, command=command))

    return entries


def read_settings(path: Path) -> Dict[str, Any]:
    """Read settings.json, returning {} when it is missing or malformed."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        log.debug("No settings file at %s", path)
        return {}
    except (OSError, UnicodeDecodeError, ValueError) as e:
        log.debug("Could not read settings file %s: %s", path, e)
        return {}

    if not isinstance(data, dict):
        log.debug("Settings file %s is not a JSON object", path)
        return {}
    return data


def load_hook_entries(path: Path) -> List[HookEntry]:
    """Read settings.json and extract its hook entries."""
    return parse_hook_document(read_settings(path))


def script_token(command: str) -> Optional[str]:
    """First whitespace-separated token that looks like a script file."""
    for part in command.split():
        token = part.strip("'\"")
        if token.endswith(SCRIPT_EXTENSIONS):
            return token
    return None
