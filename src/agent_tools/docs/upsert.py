"""
Managed-section upsert for documentation files.

The tool owns exactly one ``<agent-tools>...</agent-tools>`` region in a
user's file. Running the upsert replaces that region wholesale, or
appends it when absent; text outside the region is never touched.
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib
import re as _re
import typing as _typing

import agent_tools.catalog as catalog
import agent_tools.constants as constants
import agent_tools.docs.template as template
import agent_tools.errors as errors
import agent_tools.utils.files as files

_logger = _logging.getLogger(__name__)

UpsertAction = _typing.Literal["created", "updated"]

_SECTION_RE = _re.compile(
    _re.escape(constants.SECTION_OPEN_TAG)
    + r"(.*?)"
    + _re.escape(constants.SECTION_CLOSE_TAG),
    _re.DOTALL,
)


def format_section(body: str) -> str:
    """Wrap ``body`` in the managed section tags."""
    return f"{constants.SECTION_OPEN_TAG}\n{body}\n{constants.SECTION_CLOSE_TAG}"


def apply_section(content: str, body: str) -> tuple[str, UpsertAction]:
    """
    Insert or replace the managed section in ``content``.

    Only the first tagged region is recognized. Anything previously
    written inside it is discarded.

    Returns:
        The new content and whether the section was created or updated.
    """
    section = format_section(body)
    match = _SECTION_RE.search(content)
    if match:
        return content[: match.start()] + section + content[match.end() :], "updated"
    return f"{content}\n\n{section}", "created"


def upsert_section(target_path: _pathlib.Path, body: str) -> UpsertAction:
    """
    Install ``body`` as the managed section of an existing file.

    Args:
        target_path: File to edit. It must already exist.
        body: Section body (without tags).

    Returns:
        "created" if the section was appended, "updated" if replaced.

    Raises:
        TargetFileNotFoundError: If the file does not exist. Nothing is written.
        DocumentationIOError: If the file cannot be read or written.
    """
    try:
        content = files.read_text_exact(target_path)
    except FileNotFoundError as e:
        raise errors.TargetFileNotFoundError(target_path) from e
    except OSError as e:
        raise errors.DocumentationIOError(target_path, str(e)) from e
    except UnicodeDecodeError as e:
        raise errors.DocumentationIOError(target_path, str(e)) from e

    new_content, action = apply_section(content, body)

    try:
        files.atomic_write_text(target_path, new_content)
    except OSError as e:
        raise errors.DocumentationIOError(target_path, str(e)) from e

    _logger.debug("Section %s in %s", action, target_path)
    return action


def install_documentation(
    target_path: _pathlib.Path,
    skill_catalog: catalog.SkillCatalog,
) -> UpsertAction:
    """
    Render documentation for ``skill_catalog`` and upsert it into ``target_path``.

    The target is checked before the catalog is scanned, so a missing file
    is reported even when the skills directory is broken.

    Raises:
        TargetFileNotFoundError: If the file does not exist.
        DocumentationIOError: If the file cannot be inspected, read or written.
        SkillsDirectoryReadError: If the skills directory cannot be listed.
    """
    try:
        target_path.stat()
    except FileNotFoundError as e:
        raise errors.TargetFileNotFoundError(target_path) from e
    except OSError as e:
        raise errors.DocumentationIOError(target_path, str(e)) from e
    return upsert_section(target_path, template.render_documentation(skill_catalog))
