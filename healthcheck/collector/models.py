"""
Collector Models

Immutable snapshot of everything the checks are allowed to look at.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple


@dataclass(frozen=True)
class HookEntry:
    """A hook command bound to a lifecycle event."""
    event: str
    command: str


@dataclass(frozen=True)
class CollectedInputs:
    """Raw inputs gathered for one run."""
    hook_entries: Tuple[HookEntry, ...] = ()
    instruction_text: str = ""
    file_flags: Mapping[str, bool] = field(default_factory=dict)
    hook_scripts: Mapping[str, str] = field(default_factory=dict)
    instruction_sources: Tuple[str, ...] = ()

    def __post_init__(self):
        # Freeze containers so predicates cannot mutate the shared snapshot
        object.__setattr__(self, "hook_entries", tuple(self.hook_entries))
        object.__setattr__(self, "instruction_text", self.instruction_text.lower())
        object.__setattr__(self, "file_flags", MappingProxyType(dict(self.file_flags)))
        object.__setattr__(
            self,
            "hook_scripts",
            MappingProxyType({k: v.lower() for k, v in self.hook_scripts.items()}),
        )
        object.__setattr__(self, "instruction_sources", tuple(self.instruction_sources))

    @property
    def hook_text(self) -> str:
        """All hook commands joined by newlines, lower-cased."""
        return "\n".join(h.command for h in self.hook_entries).lower()

    def hooks_for(self, event_fragment: str) -> Tuple[HookEntry, ...]:
        """Hooks whose event name contains event_fragment (case-insensitive)."""
        fragment = event_fragment.lower()
        return tuple(h for h in self.hook_entries if fragment in h.event.lower())

    def flag(self, name: str) -> bool:
        """Marker flag value; unknown markers count as absent."""
        return bool(self.file_flags.get(name, False))
