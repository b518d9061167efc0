"""Slash-command records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandSpec:
    """An externally addressable slash command backed by a skill.

    Attributes:
        name: Sanitized command name, unique within one synthesis pass,
            1-32 characters of ``[a-z0-9_]``.
        skill_name: The backing skill's original name.
        description: At most 100 characters, ellipsis included.
    """

    name: str
    skill_name: str
    description: str


@dataclass(frozen=True)
class CommandMatch:
    """A resolved slash command.

    Attributes:
        command: The matched command.
        args: Trimmed argument tail, or None when there is none.
    """

    command: CommandSpec
    args: str | None = None
