"""Tool access policy: wildcard pattern compilation and deny-over-allow decisions.

Public API::

    from skillgate.core.policy import ToolPolicy, is_tool_allowed

    policy = ToolPolicy(allow=("read", "grep", "memory_*"), deny=("memory_save",))
    is_tool_allowed("memory_get", policy)   # True
    is_tool_allowed("memory_save", policy)  # False
"""

from skillgate.core.policy.engine import (
    filter_tools_by_policy,
    is_tool_allowed,
    merge_tool_policies,
)
from skillgate.core.policy.models import BUILTIN_TOOLS, ToolDescriptor, ToolPolicy
from skillgate.core.policy.patterns import (
    CompiledPattern,
    ExactPattern,
    MatchAll,
    RegexPattern,
    compile_pattern,
    compile_patterns,
    matches_any,
    normalize_tool_name,
)

__all__ = [
    "BUILTIN_TOOLS",
    "CompiledPattern",
    "ExactPattern",
    "MatchAll",
    "RegexPattern",
    "ToolDescriptor",
    "ToolPolicy",
    "compile_pattern",
    "compile_patterns",
    "filter_tools_by_policy",
    "is_tool_allowed",
    "matches_any",
    "merge_tool_policies",
    "normalize_tool_name",
]
