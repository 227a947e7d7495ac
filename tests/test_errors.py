"""Tests for the error taxonomy."""

import pathlib as _pathlib

import pytest as _pytest

import agent_tools.errors as errors


class TestAgentToolsError:
    """Tests for the common base class."""

    def test_base_carries_message(self) -> None:
        """The base class behaves as a plain exception."""
        error = errors.AgentToolsError("boom")

        assert str(error) == "boom"
        assert isinstance(error, Exception)

    @_pytest.mark.parametrize(
        "error",
        [
            errors.SkillsDirectoryReadError(_pathlib.Path("skills"), "denied"),
            errors.SkillNotFoundError("nope"),
            errors.SkillFileReadError(_pathlib.Path("skills/a/SKILL.md"), "denied"),
            errors.TargetFileNotFoundError(_pathlib.Path("AGENTS.md")),
            errors.DocumentationIOError(_pathlib.Path("AGENTS.md"), "denied"),
        ],
        ids=lambda e: type(e).__name__,
    )
    def test_every_error_shares_the_base(self, error: errors.AgentToolsError) -> None:
        """The CLI can catch every core error through the base class."""
        assert isinstance(error, errors.AgentToolsError)
        assert str(error)
