"""
File helpers for the collector.

Every helper here degrades to an empty or absent value instead of raising.
"""

from pathlib import Path
from typing import List, Optional

from ..config.defaults import MAX_TRAVERSAL_DEPTH, SKIP_DIRS
from ..logger import get_logger

log = get_logger(__name__)


def path_exists(path: Path) -> bool:
    """Existence check that treats permission errors as absent."""
    try:
        return path.exists()
    except OSError:
        return False


def read_text(path: Path) -> Optional[str]:
    """Read a text file, or None if it is missing or unreadable."""
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return None
    except OSError as e:
        log.debug("Could not read %s: %s", path, e)
        return None


def find_files(
    root: Path,
    pattern: str = "*",
    max_depth: int = MAX_TRAVERSAL_DEPTH,
) -> List[Path]:
    """
    Find files under root matching a glob pattern.

    Skips hidden directories and dependency caches, and does not descend
    more than max_depth levels below root.

    Returns:
        Sorted list of matching file paths
    """
    found: List[Path] = []

    def _walk(directory: Path, depth: int) -> None:
        if depth > max_depth:
            return
        try:
            children = sorted(directory.iterdir())
        except OSError:
            return
        for child in children:
            try:
                if child.is_file():
                    if child.match(pattern):
                        found.append(child)
                elif child.is_dir():
                    if child.name.startswith(".") or child.name in SKIP_DIRS:
                        continue
                    _walk(child, depth + 1)
            except OSError:
                continue

    if path_exists(root):
        _walk(root, 0)
    return sorted(found)
