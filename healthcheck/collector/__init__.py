"""
Input Collector Module

Gathers raw configuration artifacts from the host environment.
"""

from .models import CollectedInputs, HookEntry
from .hooks import parse_hook_document, load_hook_entries, script_token
from .collector import InputCollector

__all__ = [
    "InputCollector",
    "CollectedInputs",
    "HookEntry",
    "parse_hook_document",
    "load_hook_entries",
    "script_token",
]
