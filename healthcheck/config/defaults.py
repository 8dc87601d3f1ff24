"""
Default configuration values.

Well-known locations, grading thresholds and presentation defaults.
"""

from typing import Dict, List, Tuple


# ============================================================
# Locations
# ============================================================

CLAUDE_DIR_NAME = ".claude"
SETTINGS_FILE = "settings.json"
INSTRUCTION_FILE = "CLAUDE.md"
RULES_DIR = "rules"
REPORT_CONFIG_FILE = "health-check.yaml"

# Marker flags: name -> list of (base, relative path).
# base is one of "home", "claude", "project".
MARKER_PATHS: Dict[str, List[Tuple[str, str]]] = {
    "memory_dir": [("claude", "memory"), ("claude", "projects")],
    "mission_file": [
        ("home", "ops/mission.md"),
        ("project", "mission.md"),
        ("project", "tasks/todo.md"),
    ],
    "credentials_file": [
        ("home", ".credentials"),
        ("home", ".env"),
        ("home", ".secrets"),
    ],
    "dod_checklist": [
        ("claude", "dod-checklists.md"),
        ("project", "dod-checklists.md"),
    ],
    "proof_log_dir": [("home", "ops/proof-log")],
    "watchdog_script": [
        ("home", "bin/cc-solo-watchdog"),
        ("claude", "cc-solo-watchdog"),
    ],
    "task_queue": [
        ("home", "ops/task-queue.yaml"),
        ("project", "task-queue.yaml"),
        ("project", "tasks/todo.md"),
    ],
    "decision_log": [("home", "ops/decision-log.jsonl")],
    "lessons_file": [("project", "tasks/lessons.md"), ("project", "LESSONS.md")],
    "project_instructions": [
        ("project", "CLAUDE.md"),
        ("project", ".claude/CLAUDE.md"),
    ],
}

MARKER_NAMES = tuple(MARKER_PATHS)

# Hook scripts worth opening for content checks
SCRIPT_EXTENSIONS = (".sh", ".js", ".py")

# ============================================================
# Directory traversal
# ============================================================

MAX_TRAVERSAL_DEPTH = 3
SKIP_DIRS = frozenset({
    "node_modules",
    "__pycache__",
    "venv",
    "dist",
    "build",
})

# ============================================================
# Grading
# ============================================================

# (lower bound, grade label), evaluated top-down
GRADE_BANDS: List[Tuple[int, str]] = [
    (80, "Production Ready"),
    (60, "Getting There"),
    (35, "Needs Work"),
    (0, "Critical"),
]

PASSING_THRESHOLD = 60

# (lower bound, shields colour), same thresholds as GRADE_BANDS
BADGE_COLORS: List[Tuple[int, str]] = [
    (80, "brightgreen"),
    (60, "yellow"),
    (35, "orange"),
    (0, "red"),
]

# Score line colours: (lower bound, rich colour)
SCORE_COLORS: List[Tuple[int, str]] = [
    (80, "green"),
    (60, "yellow"),
    (0, "red"),
]

# Category bar colours: (lower bound, rich colour)
BAR_COLORS: List[Tuple[int, str]] = [
    (60, "green"),
    (34, "yellow"),
    (0, "red"),
]

# ============================================================
# Presentation
# ============================================================

REPORT_VERSION = "1.0"
DEFAULT_TOP_FIXES = 5
DEFAULT_BAR_WIDTH = 20
DEFAULT_BADGE_LABEL = "Claude Code Health"
DEFAULT_CONSOLE_WIDTH = 100

