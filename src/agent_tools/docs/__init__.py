"""
Documentation upsert for Agent Tools.

Renders a description of ``agt`` and the available skills, and installs
it as a managed section of a project's AGENTS.md.
"""

from agent_tools.docs.template import (
    escape_section_tags,
    format_skill_list,
    render_documentation,
)
from agent_tools.docs.upsert import (
    UpsertAction,
    apply_section,
    format_section,
    install_documentation,
    upsert_section,
)

__all__ = [
    "UpsertAction",
    "apply_section",
    "escape_section_tags",
    "format_section",
    "format_skill_list",
    "install_documentation",
    "render_documentation",
    "upsert_section",
]
