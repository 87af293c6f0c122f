"""Shared fixtures for search_path tests."""

from pathlib import Path

import pytest


@pytest.fixture
def search_tree(tmp_path, monkeypatch):
    """Build a directory tree to search and chdir into its parent.

    tests/a.txt
    tests/a/
    tests/b/a.txt
    tests/b/d/
    tests/c/
    tests/e/f/g/a.txt
    """
    root = tmp_path / "tests"
    for directory in ["a", "b/d", "c", "e/f/g"]:
        (root / directory).mkdir(parents=True)
    (root / "a.txt").touch()
    (root / "b" / "a.txt").touch()
    (root / "e" / "f" / "g" / "a.txt").touch()

    monkeypatch.chdir(tmp_path)
    return Path("tests")


@pytest.fixture
def unset_env(monkeypatch):
    """Name of an environment variable that is guaranteed to be unset."""
    name = "UNLIKELY_THIS_VAR_EXISTS"
    monkeypatch.delenv(name, raising=False)
    return name

