"""Tool policy and tool descriptor models.

A ``ToolPolicy`` carries two optional pattern lists. A missing policy means
"unrestricted"; a policy with neither list also allows everything.

``BUILTIN_TOOLS`` names the runtime's built-in tools. Their bodies live in
the tool layer; policy decisions only ever need their names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from skillgate.exceptions import PolicyError


def _coerce_patterns(value: Any, field_name: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise PolicyError(f"Tool policy '{field_name}' must be a list of strings")
    for item in value:
        if not isinstance(item, str):
            raise PolicyError(
                f"Tool policy '{field_name}' contains a non-string entry: {item!r}"
            )
    return tuple(value)


@dataclass(frozen=True)
class ToolPolicy:
    """Allow/deny name patterns for one execution context.

    Attributes:
        allow: Patterns a tool must match when the list is non-empty.
        deny: Patterns that exclude a tool regardless of ``allow``.
    """

    allow: tuple[str, ...] | None = None
    deny: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ToolPolicy:
        """Build a policy from a plain mapping such as parsed YAML.

        Raises:
            PolicyError: If ``data`` is not a mapping or a field is not a
                list of strings.
        """
        if not isinstance(data, Mapping):
            raise PolicyError("Tool policy must be a mapping with 'allow'/'deny' lists")
        return cls(
            allow=_coerce_patterns(data.get("allow"), "allow"),
            deny=_coerce_patterns(data.get("deny"), "deny"),
        )

    def to_dict(self) -> dict[str, list[str]]:
        """Plain mapping with only the lists that are set, as accepted by ``from_dict``."""
        out: dict[str, list[str]] = {}
        if self.allow is not None:
            out["allow"] = list(self.allow)
        if self.deny is not None:
            out["deny"] = list(self.deny)
        return out


@dataclass(frozen=True)
class ToolDescriptor:
    """Declared name and description of a tool."""

    name: str
    description: str = ""


BUILTIN_TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor("read", "Read a file and return numbered lines"),
    ToolDescriptor("write", "Write a file, replacing existing content"),
    ToolDescriptor("edit", "Replace the first occurrence of a string in a file"),
    ToolDescriptor("exec", "Run a shell command"),
    ToolDescriptor("list", "List directory contents"),
    ToolDescriptor("grep", "Search files with a regular expression"),
    ToolDescriptor("memory_search", "Search the long-term memory index"),
    ToolDescriptor("memory_get", "Fetch one memory entry by id"),
    ToolDescriptor("memory_save", "Store information in long-term memory"),
    ToolDescriptor("sessions_spawn", "Start a sub-agent for a background task"),
)
