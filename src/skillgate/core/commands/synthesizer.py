"""Slash-command synthesis from enriched skills.

Every user-invocable skill gets one command. Names are derived in three
steps:

1. **Sanitize** -- lower-case, collapse each run of characters outside
   ``[a-z0-9_]`` into one underscore, trim underscores at both ends, cut to
   32 characters. An empty result becomes ``"skill"``.
2. **De-duplicate** -- compare case-insensitively against names already
   emitted in this pass; on collision append ``_2``, ``_3`` ... ``_999``,
   shortening the base so the result still fits in 32 characters. If all of
   those are taken, fall back to ``<base>_x`` (then ``_x2``, ``_x3`` ...
   should even the fallback be taken).
3. **Describe** -- trimmed skill description (or the skill name when blank),
   cut to 100 characters with a trailing ellipsis when longer.

Synthesis is a pure function of the entry order: the same entries in the
same order always produce the same command list. Stability across separate
loads is not promised.
"""

from __future__ import annotations

import re
from typing import Iterable

from skillgate.core.commands.models import CommandSpec
from skillgate.core.invocation.models import SkillEntry

COMMAND_MAX_LENGTH = 32
COMMAND_FALLBACK = "skill"
DESCRIPTION_MAX_LENGTH = 100
ELLIPSIS = "…"
MAX_SUFFIX = 999

_INVALID_CHARS = re.compile(r"[^a-z0-9_]+")
_UNDERSCORE_RUNS = re.compile(r"_+")


def sanitize_command_name(raw: str) -> str:
    """Map an arbitrary skill name onto the command-name alphabet.

    Examples:
        >>> sanitize_command_name("Deploy Service")
        'deploy_service'
        >>> sanitize_command_name("!!!")
        'skill'
    """
    normalized = _INVALID_CHARS.sub("_", raw.lower())
    normalized = _UNDERSCORE_RUNS.sub("_", normalized).strip("_")
    return normalized[:COMMAND_MAX_LENGTH] or COMMAND_FALLBACK


def resolve_unique_command_name(base: str, used: set[str]) -> str:
    """Return ``base`` or the first free suffixed variant of it.

    Args:
        base: Sanitized command name.
        used: Lower-cased names already taken in this pass. Not modified.
    """
    if base.lower() not in used:
        return base
    for index in range(2, MAX_SUFFIX + 1):
        suffix = f"_{index}"
        max_base = max(1, COMMAND_MAX_LENGTH - len(suffix))
        candidate = f"{base[:max_base]}{suffix}"
        if candidate.lower() not in used:
            return candidate
    # Overflow: "_x" first, then "_x2", "_x3"... so names stay unique.
    overflow = 1
    while True:
        tag = "_x" if overflow == 1 else f"_x{overflow}"
        candidate = f"{base[:max(1, COMMAND_MAX_LENGTH - len(tag))]}{tag}"
        if candidate.lower() not in used:
            return candidate
        overflow += 1


def truncate_description(description: str, fallback: str) -> str:
    """Trim to 100 characters, ending in an ellipsis when cut. Blank uses ``fallback``."""
    text = description.strip() or fallback
    if len(text) > DESCRIPTION_MAX_LENGTH:
        return f"{text[:DESCRIPTION_MAX_LENGTH - 1]}{ELLIPSIS}"
    return text


def build_command_specs(entries: Iterable[SkillEntry]) -> list[CommandSpec]:
    """Build the slash-command list for user-invocable entries.

    Args:
        entries: Enriched skills in their stable merge order.

    Returns:
        One ``CommandSpec`` per entry whose ``user_invocable`` flag is not
        False, in input order.
    """
    used: set[str] = set()
    specs: list[CommandSpec] = []
    for entry in entries:
        if entry.invocation.user_invocable is False:
            continue
        unique = resolve_unique_command_name(
            sanitize_command_name(entry.skill.name), used,
        )
        used.add(unique.lower())
        specs.append(CommandSpec(
            name=unique,
            skill_name=entry.skill.name,
            description=truncate_description(entry.skill.description, entry.skill.name),
        ))
    return specs
