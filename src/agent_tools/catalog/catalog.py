"""
Skill catalog: scan the skills directory and answer queries.

Nothing is cached. Every query rescans ``<install_root>/skills/`` so the
answer always reflects what is on disk at call time.
"""

from __future__ import annotations

import logging as _logging
import pathlib as _pathlib
import typing as _typing

import agent_tools.catalog.skill as skill_module
import agent_tools.constants as constants
import agent_tools.errors as errors
import agent_tools.utils.files as files

_logger = _logging.getLogger(__name__)


class SkillCatalog:
    """
    Catalog of the skills under an install root.

    Each skill lives in its own directory ``skills/<dir>/SKILL.md``.
    Directories without a readable SKILL.md, or whose header lacks a
    name or description, are not skills and are skipped without error.
    """

    def __init__(self, install_root: _pathlib.Path) -> None:
        """
        Initialize the catalog.

        Args:
            install_root: Directory that contains the ``skills/`` directory.
        """
        self._install_root = install_root

    @property
    def install_root(self) -> _pathlib.Path:
        """Directory containing the skills directory."""
        return self._install_root

    @property
    def skills_root(self) -> _pathlib.Path:
        """Directory scanned for skill subdirectories."""
        return self._install_root / constants.SKILLS_DIR_NAME

    def skill_file(self, record: skill_module.SkillRecord) -> _pathlib.Path:
        """Path to the SKILL.md backing a record."""
        return self._install_root / record.location / constants.SKILL_FILE_NAME

    def _load_record(self, skill_dir: _pathlib.Path) -> skill_module.SkillRecord | None:
        """Parse one skill directory, or None if it is not a valid skill."""
        skill_file = skill_dir / constants.SKILL_FILE_NAME
        try:
            content = files.read_text_exact(skill_file)
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            _logger.debug("Skipping %s: %s", skill_file, e)
            return None

        header = skill_module.parse_header(content)
        if header is None:
            _logger.debug("Skipping %s: no name/description header", skill_file)
            return None

        name, description = header
        return skill_module.SkillRecord(
            name=name,
            description=description,
            location=f"{constants.SKILLS_DIR_NAME}/{skill_dir.name}",
        )

    def discover(self) -> list[skill_module.SkillRecord]:
        """
        Scan the skills directory.

        Returns:
            Records in directory-listing order (not sorted).

        Raises:
            SkillsDirectoryReadError: If the skills directory itself cannot
                be listed.
        """
        root = self.skills_root
        try:
            entries = list(root.iterdir())
        except OSError as e:
            raise errors.SkillsDirectoryReadError(root, e.strerror or str(e)) from e

        records: list[skill_module.SkillRecord] = []
        seen: dict[str, str] = {}
        for entry in entries:
            try:
                if not entry.is_dir():
                    continue
            except OSError as e:
                _logger.debug("Skipping %s: %s", entry, e)
                continue

            record = self._load_record(entry)
            if record is None:
                continue

            if record.name in seen:
                _logger.warning(
                    "Duplicate skill name %r in %s and %s",
                    record.name,
                    seen[record.name],
                    record.location,
                )
            else:
                seen[record.name] = record.location
            records.append(record)

        _logger.debug("Discovered %d skills in %s", len(records), root)
        return records

    def search(self, keywords: _typing.Sequence[str]) -> list[skill_module.SkillRecord]:
        """
        Find skills whose name or description contains any keyword.

        Matching is case-insensitive substring containment. With no
        keywords every skill is returned.

        Args:
            keywords: Keywords to look for (any one is enough).

        Returns:
            Matching records, in discovery order.
        """
        skills = self.discover()
        if not keywords:
            return skills
        return [s for s in skills if any(s.matches(k) for k in keywords)]

    def find(self, name: str) -> skill_module.SkillRecord | None:
        """Get the first record with exactly this name, or None."""
        for record in self.discover():
            if record.name == name:
                return record
        return None

    def get(self, name: str) -> str:
        """
        Get a skill's body with its header removed.

        Args:
            name: Exact (case-sensitive) skill name.

        Returns:
            The file content after the header, verbatim.

        Raises:
            SkillNotFoundError: If no skill has this name.
            SkillFileReadError: If the skill file cannot be re-read.
        """
        record = self.find(name)
        if record is None:
            raise errors.SkillNotFoundError(name)

        skill_file = self.skill_file(record)
        try:
            content = files.read_text_exact(skill_file)
        except OSError as e:
            raise errors.SkillFileReadError(skill_file, e.strerror or str(e)) from e
        except UnicodeDecodeError as e:
            raise errors.SkillFileReadError(skill_file, str(e)) from e

        return skill_module.strip_header(content)
