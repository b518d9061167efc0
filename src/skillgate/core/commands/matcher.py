"""Slash-command resolution.

Two grammars are recognised. The caller does not choose between them; the
first token decides, and a miss in one grammar never falls through to the
other.

**Keyword dispatch** -- ``/skill <target> [args]``
    ``<target>`` is looked up with four tests per command, in one pass,
    first hit wins:

    1. command name equals target (case-insensitive)
    2. skill name equals target (case-insensitive)
    3. normalized command name equals normalized target
    4. normalized skill name equals normalized target

    Normalization trims, lower-cases and turns each run of whitespace or
    underscores into a single hyphen, so ``/skill Deploy-Service`` reaches
    a skill named ``"Deploy Service"``.

**Direct invocation** -- ``/<command> [args]``
    Strict case-insensitive equality against command names only.

Because ``skill`` is the dispatch keyword, a command whose sanitized name is
exactly ``skill`` can only be reached through keyword dispatch.
"""

from __future__ import annotations

import re
from typing import Sequence

from skillgate.core.commands.models import CommandMatch, CommandSpec

COMMAND_PREFIX = "/"
DISPATCH_KEYWORD = "skill"

_INVOCATION_PATTERN = re.compile(r"^/(\S+)(?:\s+(.+))?$", re.DOTALL)
_TARGET_PATTERN = re.compile(r"^(\S+)(?:\s+(.+))?$", re.DOTALL)
_LOOKUP_SEPARATORS = re.compile(r"[\s_]+")


def normalize_for_lookup(value: str) -> str:
    """Normalize a name for loose comparison.

    Examples:
        >>> normalize_for_lookup("  Deploy   Service ")
        'deploy-service'
        >>> normalize_for_lookup("deploy__service")
        'deploy-service'
    """
    return _LOOKUP_SEPARATORS.sub("-", value.strip().lower())


def find_skill_command(
    commands: Sequence[CommandSpec], raw_name: str,
) -> CommandSpec | None:
    """Look up a keyword-dispatch target.

    Args:
        commands: Synthesized commands in their stable order.
        raw_name: Target as typed by the user.

    Returns:
        The first command passing any of the four lookup tests, or None.
    """
    trimmed = raw_name.strip()
    if not trimmed:
        return None
    lowered = trimmed.lower()
    normalized = normalize_for_lookup(trimmed)

    for command in commands:
        if command.name.lower() == lowered:
            return command
        if command.skill_name.lower() == lowered:
            return command
        if normalize_for_lookup(command.name) == normalized:
            return command
        if normalize_for_lookup(command.skill_name) == normalized:
            return command
    return None


def _args_or_none(tail: str | None) -> str | None:
    if tail is None:
        return None
    return tail.strip() or None


def resolve_command_invocation(
    raw: str, commands: Sequence[CommandSpec],
) -> CommandMatch | None:
    """Resolve raw user input to a slash command.

    Args:
        raw: User input. Anything not starting with ``/`` is a miss.
        commands: Synthesized commands in their stable order.

    Returns:
        A ``CommandMatch`` on a hit, otherwise None.
    """
    trimmed = raw.strip()
    if not trimmed.startswith(COMMAND_PREFIX):
        return None
    match = _INVOCATION_PATTERN.match(trimmed)
    if not match:
        return None

    command_name = match.group(1).lower()
    if command_name == DISPATCH_KEYWORD:
        remainder = (match.group(2) or "").strip()
        if not remainder:
            return None
        target = _TARGET_PATTERN.match(remainder)
        if not target:
            return None
        command = find_skill_command(commands, target.group(1))
        if command is None:
            return None
        return CommandMatch(command=command, args=_args_or_none(target.group(2)))

    for command in commands:
        if command.name.lower() == command_name:
            return CommandMatch(command=command, args=_args_or_none(match.group(2)))
    return None
