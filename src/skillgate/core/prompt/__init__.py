"""Prompt rendering for model-visible skills."""

from skillgate.core.prompt.formatter import escape_xml, format_skills_for_prompt

__all__ = ["escape_xml", "format_skills_for_prompt"]
