"""
Agent Tools - skill discovery CLI for coding agents.

Skills are short Markdown documents describing reusable task patterns.
The ``agt`` command lists, searches, and prints them, and can install a
summary of itself into a project's AGENTS.md.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("agent-tools")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from agent_tools.catalog import SkillCatalog, SkillRecord  # noqa: E402
from agent_tools.config import Settings  # noqa: E402

__all__ = ["__version__", "__version_info__", "Settings", "SkillCatalog", "SkillRecord"]
