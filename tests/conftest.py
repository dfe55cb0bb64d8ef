"""
Shared pytest fixtures for yamlhash tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import pathlib as _pathlib

import pytest as _pytest

import yamlhash

FIXTURES_DIR = _pathlib.Path(__file__).parent / "fixtures"

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "YAMLHASH_ENCODING",
    "YAMLHASH_INDENT",
    "YAMLHASH_WIDTH",
    "YAMLHASH_ALLOW_UNICODE",
]


@_pytest.fixture(autouse=True)
def clean_env(monkeypatch: _pytest.MonkeyPatch) -> None:
    """Keep YAMLHASH_* variables from the caller's shell out of every test."""
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)


@_pytest.fixture
def fixtures_dir() -> _pathlib.Path:
    """Directory holding the YAML fixture files."""
    return FIXTURES_DIR


@_pytest.fixture
def fruit() -> yamlhash.YamlHash:
    """Two-level hash used by lookup tests."""
    return yamlhash.YamlHash.from_str(
        "fruit:\n  apple: 1\n  banana: 2\n  cherry:\n    sweet: 3\n    tart: 4"
    )
