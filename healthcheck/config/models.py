"""
Pydantic models for configuration validation.

These models define the schema for the Claude Code settings document
(as far as hooks are concerned) and for the report presentation settings.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .defaults import (
    DEFAULT_BADGE_LABEL,
    DEFAULT_BAR_WIDTH,
    DEFAULT_CONSOLE_WIDTH,
    DEFAULT_TOP_FIXES,
)


# ============================================================
# Hook Configuration
# ============================================================

class HookCommand(BaseModel):
    """A single hook object inside a matcher group."""

    model_config = ConfigDict(extra="ignore")

    type: Optional[str] = Field(None, description="Hook type, usually 'command'")
    command: Optional[str] = Field(None, description="Shell command to run")
    script: Optional[str] = Field(None, description="Legacy alias for command")

    @property
    def text(self) -> str:
        """Command text, falling back to the legacy script field."""
        return (self.command or self.script or "").strip()


class MatcherGroup(BaseModel):
    """Nested form: {"matcher": "...", "hooks": [{"type": ..., "command": ...}]}."""

    kind: Literal["nested"] = "nested"
    matcher: Optional[Any] = Field(None, description="Tool matcher expression")
    hooks: List[Any] = Field(default_factory=list, description="Raw hook objects")

    def commands(self) -> List[str]:
        """Command texts of all well-formed hook objects, in order."""
        commands = []
        for raw in self.hooks:
            if not isinstance(raw, dict):
                continue
            try:
                hook = HookCommand.model_validate(raw)
            except ValidationError:
                continue
            if hook.text:
                commands.append(hook.text)
        return commands


class FlatHook(BaseModel):
    """Flat form: a bare command string or {"command": "..."}."""

    kind: Literal["flat"] = "flat"
    command: str = Field(..., min_length=1, description="Shell command to run")

    def commands(self) -> List[str]:
        return [self.command]


HookForm = Annotated[Union[MatcherGroup, FlatHook], Field(discriminator="kind")]


class ClaudeSettings(BaseModel):
    """The subset of settings.json this tool reads."""

    model_config = ConfigDict(extra="allow")

    hooks: Dict[str, Any] = Field(default_factory=dict, description="Event name -> entries")


# ============================================================
# Report Settings
# ============================================================

class ReportSettings(BaseModel):
    """Presentation settings. None of these affect scoring."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    top_fixes: int = Field(default=DEFAULT_TOP_FIXES, ge=0, description="Failed checks listed as top fixes")
    bar_width: int = Field(default=DEFAULT_BAR_WIDTH, ge=1, le=80, description="Category bar width")
    badge_label: str = Field(default=DEFAULT_BADGE_LABEL, description="Badge label text")
    color: bool = Field(default=True, description="Use ANSI colours in text output")
    width: int = Field(default=DEFAULT_CONSOLE_WIDTH, ge=40, description="Text output width")

    @field_validator("badge_label")
    @classmethod
    def validate_badge_label(cls, v: str) -> str:
        """Badge label must not be blank."""
        if not v.strip():
            raise ValueError("badge_label must not be empty")
        return v.strip()
