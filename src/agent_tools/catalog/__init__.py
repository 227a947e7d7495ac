"""
Skill catalog for Agent Tools.

Skills are discovered from ``<install_root>/skills/<dir>/SKILL.md``.
Each file starts with a ``---`` header naming and describing the skill.
"""

from agent_tools.catalog.catalog import SkillCatalog
from agent_tools.catalog.skill import SkillRecord, parse_header, strip_header

__all__ = [
    "SkillCatalog",
    "SkillRecord",
    "parse_header",
    "strip_header",
]
