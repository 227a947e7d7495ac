"""
Errors raised by the skill catalog and the documentation upsert.

Core operations raise these; the CLI turns them into a message on
stderr and a non-zero exit status.
"""

import pathlib as _pathlib


class AgentToolsError(Exception):
    """Base class for all user-facing Agent Tools errors."""


class SkillsDirectoryReadError(AgentToolsError):
    """Raised when the skills root directory cannot be enumerated."""

    def __init__(self, path: _pathlib.Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read skills directory: {path} ({reason})")


class SkillNotFoundError(AgentToolsError):
    """Raised when no discovered skill has the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Skill '{name}' not found.")


class SkillFileReadError(AgentToolsError):
    """Raised when a discovered skill's file cannot be re-read."""

    def __init__(self, path: _pathlib.Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read skill file: {path} ({reason})")


class TargetFileNotFoundError(AgentToolsError):
    """Raised when the documentation file to edit does not exist."""

    def __init__(self, path: _pathlib.Path) -> None:
        self.path = path
        super().__init__(
            f"File not found: {path}\n"
            f"Please ensure the file exists before running init"
        )


class DocumentationIOError(AgentToolsError):
    """Raised when the documentation file cannot be read or written."""

    def __init__(self, path: _pathlib.Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to update {path}: {reason}")
