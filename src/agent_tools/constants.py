"""
Shared constants for Agent Tools.

Single source of truth for the literal names the catalog, the
documentation upsert, and the CLI agree on.
"""

PROGRAM_NAME = "agt"
"""Name of the console script, used in help text and suggested commands."""

SKILLS_DIR_NAME = "skills"
"""Directory under the install root holding one subdirectory per skill."""

SKILL_FILE_NAME = "SKILL.md"
"""Definition file expected inside each skill directory."""

DEFAULT_AGENTS_FILE = "AGENTS.md"
"""Documentation file edited by ``agt init`` when no path is given."""

SECTION_TAG = "agent-tools"
"""Name of the managed section tag pair."""

SECTION_OPEN_TAG = f"<{SECTION_TAG}>"
SECTION_CLOSE_TAG = f"</{SECTION_TAG}>"

NO_SKILLS_FOUND = "No skills found."
"""Printed by ``skill search``/``skill all`` when the result is empty."""

NO_SKILLS_AVAILABLE = "No skills available."
"""Placeholder line in rendered documentation for an empty catalog."""
