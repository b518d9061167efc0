"""Frontmatter primitives shared by discovery and orchestration.

Skill definition files open with a header block delimited by ``---`` lines::

    ---
    name: deploy-service
    description: "Roll out a service to production"
    user-invocable: yes
    ---

    # Deploy Service
    ...

Only single-line ``key: value`` pairs are recognised. Values are always
strings; one layer of surrounding quote characters is removed and nothing
else is coerced. Values that look like numbers or dates stay strings.
"""

from __future__ import annotations

import re

# Opening delimiter at the very start of the document, lazily matched body,
# closing delimiter at the start of a later line.
_FRONTMATTER_PATTERN = re.compile(r"^---\r?\n(.*?)\r?\n---", re.DOTALL)

# key: value -- keys start with a letter and may contain word chars and dashes.
_KEY_VALUE_PATTERN = re.compile(r"^([a-zA-Z][\w-]*):\s*(.+)$")

# One leading and one trailing quote character, stripped independently.
_QUOTE_PATTERN = re.compile(r"^[\"']|[\"']$")

_TRUE_VALUES = frozenset({"true", "yes", "1"})
_FALSE_VALUES = frozenset({"false", "no", "0"})


def extract_frontmatter(content: str) -> dict[str, str]:
    """Extract the ``key: value`` pairs from a document's header block.

    Args:
        content: Full text of a skill definition file.

    Returns:
        Mapping of header keys to string values. Empty when the document has
        no header block or the closing delimiter is missing. Lines that are
        not well-formed ``key: value`` pairs are ignored.
    """
    match = _FRONTMATTER_PATTERN.match(content)
    if not match:
        return {}

    result: dict[str, str] = {}
    for line in match.group(1).split("\n"):
        kv = _KEY_VALUE_PATTERN.match(line.rstrip("\r"))
        if kv:
            result[kv.group(1)] = _QUOTE_PATTERN.sub("", kv.group(2))
    return result


def parse_bool(value: str | None, default: bool) -> bool:
    """Parse a frontmatter flag.

    ``true``/``yes``/``1`` and ``false``/``no``/``0`` are recognised
    case-insensitively after trimming. Anything else, including a missing
    value, yields ``default``.
    """
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default
