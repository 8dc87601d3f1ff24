"""
Claude Code Health Check

Scores a Claude Code setup (hooks, CLAUDE.md instructions, marker files)
across weighted dimensions and reports what to fix first.
"""

__version__ = "1.0.0"
