"""Tests for command lookup."""

import os
from pathlib import Path

from search_path import PATH_DELIMITER
from search_path import SearchPath
from search_path.operations import which
from search_path.operations import which_all


class TestWhich:
    """Tests for which()."""

    def test_finds_first_file(self, search_tree):
        """Test finding a command in an explicit search path."""
        search_path = SearchPath.from_sequence(["tests/a", "tests/b", "tests/e/f/g"])

        assert which("a.txt", search_path) == Path("tests/b/a.txt")

    def test_skips_directories(self, search_tree):
        """Test that a directory with the command's name is not a match."""
        search_path = SearchPath.from_sequence(["tests/b"])

        assert which("d", search_path) is None

    def test_rejects_names_with_directories(self, search_tree):
        """Test that directory-qualified commands are never searched for."""
        search_path = SearchPath.from_sequence(["tests/e/f"])

        assert which("g/a.txt", search_path) is None
        assert which("./a.txt", search_path) is None

    def test_uses_path_by_default(self, search_tree, monkeypatch):
        """Test that $PATH is searched when no search path is given."""
        monkeypatch.setenv("PATH", PATH_DELIMITER.join(["tests/c", "tests/b"]))

        assert which("a.txt") == Path("tests/b/a.txt")

    def test_unset_path_finds_nothing(self, search_tree, monkeypatch):
        """Test that an unset $PATH behaves as an empty search path."""
        monkeypatch.delenv("PATH", raising=False)

        assert which("a.txt") is None

    def test_finds_real_executable(self, tmp_path, monkeypatch):
        """Test finding an executable script on $PATH."""
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir()
        script = bin_dir / "hello"
        script.write_text("#!/bin/sh\necho hello\n")
        script.chmod(0o755)
        path = PATH_DELIMITER.join([str(bin_dir), os.environ.get("PATH", "")])
        monkeypatch.setenv("PATH", path)

        assert which("hello") == script


class TestWhichAll:
    """Tests for which_all()."""

    def test_finds_every_file(self, search_tree):
        """Test that every matching file is returned in order."""
        search_path = SearchPath.from_sequence(
            ["tests", "tests/a", "tests/b", "tests/e/f/g"]
        )

        assert which_all("a.txt", search_path) == [
            Path("tests/a.txt"),
            Path("tests/b/a.txt"),
            Path("tests/e/f/g/a.txt"),
        ]

    def test_skips_directories(self, search_tree):
        """Test that directories are not matches."""
        search_path = SearchPath.from_sequence(["tests", "tests/b"])

        assert which_all("d", search_path) == []

    def test_rejects_names_with_directories(self, search_tree):
        """Test that directory-qualified commands give no results."""
        search_path = SearchPath.from_sequence(["tests/e/f"])

        assert which_all("g/a.txt", search_path) == []
