"""Model-visible skill summary.

Renders the skills the model may use on its own into an
``<available_skills>`` block appended to the system prompt. The model reads
a skill's file on demand through its ``read`` tool, so each record carries
the absolute location alongside name and description.

The tag names and nesting are consumed by downstream parsers and must not
change. Every field is XML-escaped so skill-authored text cannot break out
of its element.
"""

from __future__ import annotations

from typing import Iterable, Union

from skillgate.core.invocation.models import SkillEntry
from skillgate.parsers.base import Skill

_XML_ESCAPES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}
_XML_TABLE = str.maketrans(_XML_ESCAPES)

PROMPT_PREAMBLE = (
    "\n\nThe following skills provide specialized instructions for specific tasks.",
    "Use the read tool to load a skill's file when the task matches its description.",
    "",
)


def escape_xml(value: str) -> str:
    """Escape the five XML-reserved characters."""
    return value.translate(_XML_TABLE)


def _visible_skills(items: Iterable[Union[Skill, SkillEntry]]) -> list[Skill]:
    visible: list[Skill] = []
    for item in items:
        if isinstance(item, SkillEntry):
            if not item.invocation.disable_model_invocation:
                visible.append(item.skill)
        elif not item.disable_model_invocation:
            visible.append(item)
    return visible


def format_skills_for_prompt(items: Iterable[Union[Skill, SkillEntry]]) -> str:
    """Render the ``<available_skills>`` block.

    Args:
        items: Skills or enriched entries. For entries, the enriched
            invocation policy decides visibility.

    Returns:
        The rendered block, or an empty string when no skill is visible.
    """
    visible = _visible_skills(items)
    if not visible:
        return ""

    lines = [*PROMPT_PREAMBLE, "<available_skills>"]
    for skill in visible:
        lines.append("  <skill>")
        lines.append(f"    <name>{escape_xml(skill.name)}</name>")
        lines.append(f"    <description>{escape_xml(skill.description)}</description>")
        lines.append(f"    <location>{escape_xml(str(skill.file_path))}</location>")
        lines.append("  </skill>")
    lines.append("</available_skills>")
    return "\n".join(lines)
