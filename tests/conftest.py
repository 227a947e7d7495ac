"""
Shared pytest fixtures for Agent Tools tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

import agent_tools.catalog as catalog

SkillFactory = _typing.Callable[..., _pathlib.Path]


@_pytest.fixture(autouse=True)
def isolated_env(
    monkeypatch: _pytest.MonkeyPatch, tmp_path_factory: _pytest.TempPathFactory
) -> None:
    """Keep the user's AGT_* variables and config.yaml out of tests."""
    for key in list(_os.environ):
        if key.startswith("AGT_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("AGT_CONFIG_DIR", str(tmp_path_factory.mktemp("agt-config")))


@_pytest.fixture
def install_root(tmp_path: _pathlib.Path) -> _pathlib.Path:
    """An install root with an empty skills/ directory."""
    root = tmp_path / "install"
    (root / "skills").mkdir(parents=True)
    return root


@_pytest.fixture
def make_skill(install_root: _pathlib.Path) -> SkillFactory:
    """Factory that writes skills/<dir_name>/SKILL.md under the install root."""

    def _make(
        dir_name: str,
        name: str | None = None,
        description: str = "Test skill",
        body: str = "Body text.\n",
        *,
        content: str | None = None,
    ) -> _pathlib.Path:
        skill_dir = install_root / "skills" / dir_name
        skill_dir.mkdir(parents=True, exist_ok=True)
        if content is None:
            content = f"---\nname: {name or dir_name}\ndescription: {description}\n---\n{body}"
        (skill_dir / "SKILL.md").write_bytes(content.encode("utf-8"))
        return skill_dir

    return _make


@_pytest.fixture
def skill_catalog(install_root: _pathlib.Path) -> catalog.SkillCatalog:
    """Catalog over the temporary install root."""
    return catalog.SkillCatalog(install_root)
