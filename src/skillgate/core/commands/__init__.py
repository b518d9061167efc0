"""Slash commands: synthesis of collision-free names and input matching."""

from skillgate.core.commands.matcher import (
    COMMAND_PREFIX,
    DISPATCH_KEYWORD,
    find_skill_command,
    normalize_for_lookup,
    resolve_command_invocation,
)
from skillgate.core.commands.models import CommandMatch, CommandSpec
from skillgate.core.commands.synthesizer import (
    COMMAND_FALLBACK,
    COMMAND_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    build_command_specs,
    resolve_unique_command_name,
    sanitize_command_name,
)

__all__ = [
    "COMMAND_FALLBACK",
    "COMMAND_MAX_LENGTH",
    "COMMAND_PREFIX",
    "CommandMatch",
    "CommandSpec",
    "DESCRIPTION_MAX_LENGTH",
    "DISPATCH_KEYWORD",
    "build_command_specs",
    "find_skill_command",
    "normalize_for_lookup",
    "resolve_command_invocation",
    "resolve_unique_command_name",
    "sanitize_command_name",
]
