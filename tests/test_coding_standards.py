"""
Tests that enforce coding standards.

Source and test modules use ``import x as _x`` (external) or
``import pkg.mod as mod`` (internal); ``from X import Y`` is reserved for
``__init__.py`` re-exports and ``from __future__``.
"""

import ast as _ast
import pathlib as _pathlib

import pytest as _pytest

SRC_DIR = _pathlib.Path(__file__).parent.parent / "src" / "agent_tools"
TESTS_DIR = _pathlib.Path(__file__).parent


def _is_type_checking_block(node: _ast.AST) -> bool:
    """Check for ``if TYPE_CHECKING:`` / ``if _typing.TYPE_CHECKING:``."""
    if not isinstance(node, _ast.If):
        return False
    test = node.test
    if isinstance(test, _ast.Name):
        return test.id == "TYPE_CHECKING"
    return isinstance(test, _ast.Attribute) and test.attr == "TYPE_CHECKING"


def find_from_imports(source: str) -> list[tuple[int, str]]:
    """
    Find forbidden ``from X import Y`` statements in module source.

    Returns (line number, module) pairs. ``from __future__`` imports and
    anything under a TYPE_CHECKING guard are allowed.
    """
    tree = _ast.parse(source)
    skipped: set[int] = set()
    for node in _ast.walk(tree):
        if _is_type_checking_block(node):
            for child in _ast.walk(node):
                skipped.add(id(child))

    found: list[tuple[int, str]] = []
    for node in _ast.walk(tree):
        if not isinstance(node, _ast.ImportFrom) or id(node) in skipped:
            continue
        module = "." * node.level + (node.module or "")
        if module == "__future__":
            continue
        found.append((node.lineno, module))
    return sorted(found)


def _violations(directory: _pathlib.Path) -> list[str]:
    messages: list[str] = []
    for path in sorted(directory.rglob("*.py")):
        if path.name in ("__init__.py", "test_coding_standards.py"):
            continue
        for line, module in find_from_imports(path.read_text(encoding="utf-8")):
            messages.append(f"{path}:{line}: from {module} import ...")
    return messages


class TestImportStyle:
    """Tests for import style compliance."""

    @_pytest.mark.parametrize("directory", [SRC_DIR, TESTS_DIR], ids=["src", "tests"])
    def test_no_from_imports(self, directory: _pathlib.Path) -> None:
        """Modules should not use the 'from X import Y' pattern."""
        violations = _violations(directory)
        if violations:
            _pytest.fail(
                "Found forbidden 'from X import Y' imports:\n"
                + "\n".join(f"  {v}" for v in violations)
                + "\n\nUse 'import X as _x' (external) or 'import X as x' (internal) instead."
            )


class TestFindFromImports:
    """Tests for the import detection itself."""

    def test_detects_from_import(self) -> None:
        """Plain from-imports are reported."""
        assert find_from_imports("from pathlib import Path\n") == [(1, "pathlib")]

    def test_detects_relative_import(self) -> None:
        """Relative imports are reported with their dots."""
        assert find_from_imports("from .sibling import thing\n") == [(1, ".sibling")]

    def test_allows_future_imports(self) -> None:
        """__future__ imports are allowed."""
        assert find_from_imports("from __future__ import annotations\n") == []

    def test_ignores_type_checking_block(self) -> None:
        """Imports under TYPE_CHECKING are allowed, later ones are not."""
        source = (
            "import typing as _typing\n"
            "\n"
            "if _typing.TYPE_CHECKING:\n"
            "    from allowed import Type\n"
            "\n"
            "from forbidden import Other\n"
        )
        assert find_from_imports(source) == [(6, "forbidden")]

    def test_ignores_strings_that_look_like_imports(self) -> None:
        """Text inside string literals is not an import."""
        assert find_from_imports('DOC = "from x import y"\n') == []
