"""
Tests that enforce coding standards.

These tests verify that the codebase follows our import conventions:
- no 'from X import Y' outside __init__.py (re-exports are allowed there)
- external modules are imported under a private alias: 'import yaml as _yaml'
"""

import ast as _ast
import pathlib as _pathlib

import pytest as _pytest

# Directories to check
SRC_DIR = _pathlib.Path(__file__).parent.parent / "src" / "yamlhash"
TESTS_DIR = _pathlib.Path(__file__).parent

INTERNAL_PACKAGE = "yamlhash"


def _get_python_files(directory: _pathlib.Path) -> list[_pathlib.Path]:
    """Get all Python files in a directory, recursively."""
    return list(directory.rglob("*.py"))


def _is_type_checking_block(node: _ast.AST) -> bool:
    """Check if a node is an `if TYPE_CHECKING:` / `if _typing.TYPE_CHECKING:` block."""
    if not isinstance(node, _ast.If):
        return False
    test = node.test
    if isinstance(test, _ast.Name):
        return test.id == "TYPE_CHECKING"
    if isinstance(test, _ast.Attribute):
        return test.attr == "TYPE_CHECKING"
    return False


def _iter_imports(tree: _ast.Module) -> list[_ast.Import | _ast.ImportFrom]:
    """Collect module-level and nested imports, skipping TYPE_CHECKING blocks."""
    found: list[_ast.Import | _ast.ImportFrom] = []
    pending: list[_ast.AST] = [tree]
    while pending:
        node = pending.pop()
        if _is_type_checking_block(node):
            continue
        if isinstance(node, (_ast.Import, _ast.ImportFrom)):
            found.append(node)
        pending.extend(_ast.iter_child_nodes(node))
    return sorted(found, key=lambda node: node.lineno)


def _check_source(source: str, *, allow_from: bool = False) -> list[tuple[int, str]]:
    """
    Check Python source for import violations.

    Returns list of (line_number, message) tuples.
    """
    violations: list[tuple[int, str]] = []

    for node in _iter_imports(_ast.parse(source)):
        if isinstance(node, _ast.ImportFrom):
            if node.module == "__future__" or allow_from:
                continue
            names = ", ".join(alias.name for alias in node.names)
            violations.append((node.lineno, f"from {node.module} import {names}"))
            continue

        for alias in node.names:
            top_level = alias.name.split(".")[0]
            if top_level == INTERNAL_PACKAGE:
                continue
            if alias.asname is None or not alias.asname.startswith("_"):
                violations.append((node.lineno, f"import {alias.name} without a private alias"))

    return violations


def _check_file(path: _pathlib.Path) -> list[str]:
    """Check a file for import violations."""
    allow_from = path.name == "__init__.py"
    return [
        f"{path}:{line}: {message}"
        for line, message in _check_source(path.read_text(), allow_from=allow_from)
    ]


class TestImportStyle:
    """Tests for import style compliance."""

    def test_src_imports(self) -> None:
        """Source files follow the import conventions."""
        violations: list[str] = []

        for path in _get_python_files(SRC_DIR):
            violations.extend(_check_file(path))

        if violations:
            msg = "Found forbidden imports:\n"
            msg += "\n".join(f"  {v}" for v in violations)
            msg += "\n\nUse 'import X as _x' (external) or 'import X as x' (internal) instead."
            _pytest.fail(msg)

    def test_tests_imports(self) -> None:
        """Test files follow the import conventions."""
        violations: list[str] = []

        for path in _get_python_files(TESTS_DIR):
            violations.extend(_check_file(path))

        if violations:
            msg = "Found forbidden imports:\n"
            msg += "\n".join(f"  {v}" for v in violations)
            _pytest.fail(msg)


class TestImportChecker:
    """Tests for the checker logic itself."""

    def test_detects_from_import(self) -> None:
        """Should detect basic from imports."""
        violations = _check_source("from pathlib import Path")
        assert violations == [(1, "from pathlib import Path")]

    def test_allows_future_imports(self) -> None:
        """Should allow __future__ imports."""
        assert _check_source("from __future__ import annotations") == []

    def test_allows_from_in_init(self) -> None:
        """Re-exports are fine when allow_from is set."""
        assert _check_source("from yamlhash._core import YamlHash", allow_from=True) == []

    def test_detects_unaliased_external(self) -> None:
        """External modules need a private alias."""
        assert len(_check_source("import yaml")) == 1
        assert len(_check_source("import yaml as yml")) == 1
        assert _check_source("import yaml as _yaml") == []

    def test_internal_alias_free(self) -> None:
        """Internal modules may be imported with or without an alias."""
        assert _check_source("import yamlhash") == []
        assert _check_source("import yamlhash._merge as merge") == []

    def test_ignores_type_checking_block(self) -> None:
        """Should ignore imports inside TYPE_CHECKING blocks."""
        content = """
import typing as _typing

if _typing.TYPE_CHECKING:
    from some_module import SomeType

def foo():
    pass
"""
        assert _check_source(content) == []

    def test_detects_import_after_type_checking(self) -> None:
        """Should still detect imports after TYPE_CHECKING block ends."""
        content = """
import typing as _typing

if _typing.TYPE_CHECKING:
    from allowed import Type

from forbidden import Other

def foo():
    pass
"""
        violations = _check_source(content)
        assert len(violations) == 1
        assert "from forbidden import Other" in violations[0][1]

    def test_detects_nested_import(self) -> None:
        """Imports inside functions are checked too."""
        content = """
def foo():
    import json
"""
        assert len(_check_source(content)) == 1
