"""
Input Collector

The only part of the tool that knows about real paths. Gathers hook
definitions, instruction-file text and marker-file flags into a
CollectedInputs snapshot.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from ..config.defaults import (
    CLAUDE_DIR_NAME,
    INSTRUCTION_FILE,
    MARKER_PATHS,
    RULES_DIR,
    SETTINGS_FILE,
)
from ..logger import get_logger
from .files import find_files, path_exists, read_text
from .hooks import load_hook_entries, script_token
from .models import CollectedInputs, HookEntry

log = get_logger(__name__)


class InputCollector:
    """
    Collects raw inputs from the host environment.

    Reads:
    - Hook commands from <claude_dir>/settings.json
    - CLAUDE.md files at home, config and project level, plus rules/*.md
    - Existence of well-known marker files
    - Content of scripts referenced by PreToolUse hooks
    """

    def __init__(
        self,
        claude_dir: Optional[Union[str, Path]] = None,
        project_dir: Optional[Union[str, Path]] = None,
        home: Optional[Union[str, Path]] = None,
    ):
        """
        Initialize the collector.

        Args:
            claude_dir: Claude config directory (default: ~/.claude)
            project_dir: Project working directory (default: cwd)
            home: Home directory (default: the user's home)
        """
        self.home = Path(home) if home else Path.home()
        self.claude_dir = Path(claude_dir) if claude_dir else self.home / CLAUDE_DIR_NAME
        self.project_dir = Path(project_dir) if project_dir else Path.cwd()

    @property
    def settings_path(self) -> Path:
        return self.claude_dir / SETTINGS_FILE

    @property
    def in_home(self) -> bool:
        """True when the project directory is the home directory itself."""
        return _same_path(self.project_dir, self.home)

    def collect(self) -> CollectedInputs:
        """
        Gather a snapshot of all inputs.

        Never raises; unreadable inputs are left empty.
        """
        hook_entries = load_hook_entries(self.settings_path)
        log.debug("Found %d hook command(s) in %s", len(hook_entries), self.settings_path)

        instruction_text, sources = self.collect_instructions()
        log.debug("Read %d instruction file(s)", len(sources))

        file_flags = self.collect_flags()
        hook_scripts = self.collect_hook_scripts(hook_entries)

        return CollectedInputs(
            hook_entries=tuple(hook_entries),
            instruction_text=instruction_text,
            file_flags=file_flags,
            hook_scripts=hook_scripts,
            instruction_sources=tuple(sources),
        )

    def instruction_candidates(self) -> List[Path]:
        """Instruction files in priority order (existing or not)."""
        candidates = [
            self.home / INSTRUCTION_FILE,
            self.claude_dir / INSTRUCTION_FILE,
        ]
        if not self.in_home:
            candidates.append(self.project_dir / INSTRUCTION_FILE)
            candidates.append(self.project_dir / CLAUDE_DIR_NAME / INSTRUCTION_FILE)

        rule_dirs = [self.claude_dir / RULES_DIR]
        if not self.in_home:
            rule_dirs.append(self.project_dir / CLAUDE_DIR_NAME / RULES_DIR)
        for rules_dir in rule_dirs:
            candidates.extend(find_files(rules_dir, "*.md"))

        return candidates

    def collect_instructions(self) -> Tuple[str, List[str]]:
        """Concatenate existing instruction files, lower-cased."""
        seen = set()
        contents = []
        sources = []

        for path in self.instruction_candidates():
            key = _resolve(path)
            if key in seen:
                continue
            seen.add(key)

            content = read_text(path)
            if content is None:
                continue
            contents.append(content.lower())
            sources.append(str(path))

        return "\n".join(contents), sources

    def collect_flags(self) -> Dict[str, bool]:
        """Check every marker path."""
        bases = {
            "home": self.home,
            "claude": self.claude_dir,
            "project": self.project_dir,
        }
        flags = {}
        for name, locations in MARKER_PATHS.items():
            if name == "project_instructions" and self.in_home:
                flags[name] = False
                continue
            flags[name] = any(
                path_exists(bases[base] / relative) for base, relative in locations
            )
        return flags

    def collect_hook_scripts(self, hook_entries: List[HookEntry]) -> Dict[str, str]:
        """Read scripts referenced by PreToolUse hooks."""
        scripts = {}
        for entry in hook_entries:
            if "pretooluse" not in entry.event.lower():
                continue
            script = script_token(entry.command)
            if script is None or script in scripts:
                continue
            content = read_text(self._script_path(script))
            if content is not None:
                scripts[script] = content
        return scripts

    def _script_path(self, token: str) -> Path:
        for prefix in ("~/", "$HOME/", "${HOME}/"):
            if token.startswith(prefix):
                return self.home / token[len(prefix):]
        path = Path(token)
        return path if path.is_absolute() else self.home / path


def _resolve(path: Path) -> str:
    try:
        return str(path.resolve())
    except (OSError, RuntimeError):
        # RuntimeError: symlink loop on Python < 3.13
        return str(path)


def _same_path(a: Path, b: Path) -> bool:
    return _resolve(a) == _resolve(b)
