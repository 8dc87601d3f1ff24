"""Report output formatters."""

from .formatters import (
    BadgeDescriptor,
    BadgeFormatter,
    BaseFormatter,
    JsonFormatter,
    TextFormatter,
    badge_for,
    get_formatter,
)

__all__ = [
    "BadgeDescriptor",
    "BadgeFormatter",
    "BaseFormatter",
    "JsonFormatter",
    "TextFormatter",
    "badge_for",
    "get_formatter",
]
