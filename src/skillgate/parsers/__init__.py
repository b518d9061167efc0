"""Skill definition parsing: frontmatter primitives and the directory scanner."""

from skillgate.parsers.base import Skill
from skillgate.parsers.frontmatter import extract_frontmatter, parse_bool
from skillgate.parsers.scanner import SkillScanner, load_skills_from_dir

__all__ = [
    "Skill",
    "SkillScanner",
    "extract_frontmatter",
    "load_skills_from_dir",
    "parse_bool",
]
