"""
Documentation text installed into AGENTS.md by ``agt init``.
"""

from __future__ import annotations

import agent_tools.catalog as catalog
import agent_tools.constants as constants

_DOCUMENTATION_TEMPLATE = """# Agent Tools CLI (agt)

Agent Tools is a CLI toolkit available in this environment that gives agents access to a repository of reusable skills.

Agent Tools is designed for LLM consumption with:
- Plain text, structured output optimized for agent parsing
- Direct access to a skill repository containing development best practices

## How to Use Agent Tools in Your Work

1. **Discover relevant commands**: `agt --help` will list all available commands and their descriptions.
2. Find a short description of each command below.

## Available Commands

`agt get-dir` prints the root directory of the agent-tools installation. This is useful for accessing the skill repository and other resources.

### Skill Management
The `agt skill` command helps you discover and use pre-built agent skills:

```bash
# Search for skills by keywords
agt skill search [keywords...]

# List all available skills
agt skill all

# Get full content of a specific skill
agt skill get <name>
```

**Use skills to enhance your capabilities**: Skills contain proven patterns, code examples, and best practices that you can apply to solve common problems more effectively.

**Recommendation**: Proactively use `agt skill search` when starting complex tasks to discover relevant skills that can guide your implementation approach.

## Available Skills

{skill_list}
"""


def escape_section_tags(text: str) -> str:
    """
    Neutralize section tag literals in text placed inside the section.

    A skill header containing ``</agent-tools>`` would otherwise end the
    managed region early and break the next upsert. The ``<`` is written
    as ``&lt;``, which Markdown renders back to the same text.
    """
    for tag in (constants.SECTION_CLOSE_TAG, constants.SECTION_OPEN_TAG):
        text = text.replace(tag, "&lt;" + tag[1:])
    return text


def format_skill_list(records: list[catalog.SkillRecord]) -> str:
    """Format records as ``- name: description`` lines, one per skill."""
    if not records:
        return constants.NO_SKILLS_AVAILABLE
    return "\n".join(
        escape_section_tags(f"- {r.name}: {r.description}") for r in records
    )


def render_documentation(skill_catalog: catalog.SkillCatalog) -> str:
    """
    Render the documentation block for the current catalog.

    Raises:
        SkillsDirectoryReadError: If the skills directory cannot be listed.
    """
    skill_list = format_skill_list(skill_catalog.discover())
    return _DOCUMENTATION_TEMPLATE.replace("{skill_list}", skill_list)
