"""Configuration handling for the health check."""

from .models import (
    ClaudeSettings,
    FlatHook,
    HookCommand,
    HookForm,
    MatcherGroup,
    ReportSettings,
)
from .loader import ConfigError, ConfigLoader

__all__ = [
    "ClaudeSettings",
    "FlatHook",
    "HookCommand",
    "HookForm",
    "MatcherGroup",
    "ReportSettings",
    "ConfigError",
    "ConfigLoader",
]
