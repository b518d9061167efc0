"""Tool access decisions.

Decision order for ``is_tool_allowed(name, policy)``:

1. No policy -- allowed.
2. Name matches any ``deny`` pattern -- denied, whatever ``allow`` says.
3. ``allow`` empty or absent -- allowed.
4. Name matches any ``allow`` pattern -- allowed; otherwise denied.

Policies are supplied per call and patterns are compiled per call; nothing
here holds state between calls.
"""

from __future__ import annotations

from typing import Iterable, Sequence, TypeVar

from skillgate.core.policy.models import ToolPolicy
from skillgate.core.policy.patterns import compile_patterns, matches_any, normalize_tool_name

T = TypeVar("T")


def is_tool_allowed(name: str, policy: ToolPolicy | None = None) -> bool:
    """Decide whether a tool is reachable under ``policy``."""
    if policy is None:
        return True

    normalized = normalize_tool_name(name)
    deny = compile_patterns(policy.deny or ())
    allow = compile_patterns(policy.allow or ())

    if matches_any(normalized, deny):
        return False
    if not allow:
        return True
    return matches_any(normalized, allow)


def filter_tools_by_policy(tools: Sequence[T], policy: ToolPolicy | None = None) -> list[T]:
    """Keep the tools ``policy`` allows, preserving order.

    Tools may be any objects exposing a ``name`` attribute.
    """
    if policy is None:
        return list(tools)
    return [tool for tool in tools if is_tool_allowed(tool.name, policy)]  # type: ignore[attr-defined]


def _merge_patterns(*groups: Iterable[str] | None) -> tuple[str, ...] | None:
    merged: dict[str, None] = {}
    for group in groups:
        for value in group or ():
            trimmed = value.strip()
            if trimmed:
                merged.setdefault(trimmed, None)
    return tuple(merged) or None


def merge_tool_policies(
    base: ToolPolicy | None = None, extra: ToolPolicy | None = None,
) -> ToolPolicy | None:
    """Combine two policies.

    ``allow`` and ``deny`` lists are concatenated independently, trimmed,
    stripped of empty entries and de-duplicated in first-seen order. Returns
    None only when both inputs are None.
    """
    if base is None and extra is None:
        return None
    return ToolPolicy(
        allow=_merge_patterns(
            base.allow if base else None, extra.allow if extra else None,
        ),
        deny=_merge_patterns(
            base.deny if base else None, extra.deny if extra else None,
        ),
    )
