"""
Skill records and SKILL.md header handling.

A skill file starts with a ``---`` delimited header holding ``key: value``
lines. Only ``name`` and ``description`` are read; everything else in the
header is ignored, and the rest of the file is the skill body.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import re as _re
import typing as _typing

# Header block at the very start of the file. Parsing and stripping share
# the opening delimiter and the non-greedy header body.
_HEADER_RE = _re.compile(r"^---\s*\n(.*?)\n---", _re.DOTALL)

# Same block, also consuming trailing whitespace after the closing
# delimiter and at most one newline.
_HEADER_BLOCK_RE = _re.compile(r"^---\s*\n(.*?)\n---\s*\n?", _re.DOTALL)

_NAME_RE = _re.compile(r"^name:\s*(.+)$", _re.MULTILINE)
_DESCRIPTION_RE = _re.compile(r"^description:\s*(.+)$", _re.MULTILINE)


@_dataclasses.dataclass(frozen=True)
class SkillRecord:
    """A discovered skill: name, one-line description, and where it lives."""

    name: str
    """Skill identifier from the header."""

    description: str
    """One-line description from the header."""

    location: str
    """Skill directory relative to the install root (e.g. ``skills/foo``)."""

    @property
    def search_text(self) -> str:
        """Case-folded text that keyword searches match against."""
        return f"{self.name} {self.description}".casefold()

    def matches(self, keyword: str) -> bool:
        """Check whether ``keyword`` occurs in the name or description."""
        return keyword.casefold() in self.search_text

    def to_dict(self) -> dict[str, _typing.Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "description": self.description,
            "location": self.location,
        }


def parse_header(content: str) -> tuple[str, str] | None:
    """
    Extract ``(name, description)`` from a SKILL.md header.

    Args:
        content: Full text of the skill file.

    Returns:
        The trimmed name and description, or None if the file has no
        header or either key is missing or blank.
    """
    match = _HEADER_RE.match(content)
    if not match:
        return None

    header = match.group(1)
    name_match = _NAME_RE.search(header)
    desc_match = _DESCRIPTION_RE.search(header)
    if not name_match or not desc_match:
        return None

    name = name_match.group(1).strip()
    description = desc_match.group(1).strip()
    if not name or not description:
        return None

    return name, description


def strip_header(content: str) -> str:
    """
    Remove the leading header block from skill file content.

    Text without a header is returned unchanged, so stripping twice is
    the same as stripping once.
    """
    return _HEADER_BLOCK_RE.sub("", content, count=1)
