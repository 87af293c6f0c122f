"""The SearchPath model."""

import logging
import os
from collections.abc import Iterable
from collections.abc import Iterator
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Self

from search_path.environment import CURRENT_DIR
from search_path.environment import EXECUTABLE_PATH_VAR
from search_path.environment import PATH_DELIMITER
from search_path.environment import read_env_var
from search_path.environment import split_text
from search_path.exceptions import EnvironmentVariableError
from search_path.files import FindKind
from search_path.files import entry_key
from search_path.files import is_name_only
from search_path.files import join_candidate
from search_path.files import probe

logger = logging.getLogger(__name__)


@dataclass
class SearchPath:
    """An ordered list of directories to search for files by name.

    Entries are searched in order, so earlier entries take priority.
    Entries keep the text they were given, so serializing reproduces it.
    Duplicates are kept until dedup() is called.
    """

    paths: list[str] = field(default_factory=list)

    @classmethod
    def from_path(cls, path: str | os.PathLike) -> Self:
        """Create a search path holding exactly one directory."""
        return cls(paths=[os.fspath(path)])

    @classmethod
    def from_sequence(cls, paths: Iterable[str | os.PathLike]) -> Self:
        """Create from already-separated directories, one entry each.

        Nothing is split or filtered out.
        """
        return cls(paths=[os.fspath(p) for p in paths])

    @classmethod
    def from_text(cls, text: str) -> Self:
        """Parse delimited path text such as the value of $PATH.

        Entries are separated by PATH_DELIMITER; blank entries are dropped.
        """
        return cls(paths=split_text(text))

    @classmethod
    def from_value(cls, value: "SearchPathSource") -> Self:
        """Create from any supported value.

        Args:
            value: Another SearchPath (copied), a str (parsed as delimited
                text), a path-like object (single entry), or an iterable of
                paths (one entry each)

        Raises:
            TypeError: If value is none of the above
        """
        if isinstance(value, SearchPath):
            return cls(paths=list(value.paths))
        if isinstance(value, str):
            return cls.from_text(value)
        if isinstance(value, os.PathLike):
            return cls.from_path(value)
        if isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray)):
            return cls.from_sequence(value)
        raise TypeError(f"Cannot build a search path from {type(value).__name__}")

    @classmethod
    def from_env(cls, name: str) -> Self:
        """Parse the environment variable name as delimited path text.

        Raises:
            EnvironmentVariableError: If the variable is unset or not valid text
        """
        return cls.from_text(read_env_var(name))

    @classmethod
    def from_env_or(cls, name: str, default: "SearchPathSource") -> Self:
        """Like from_env(), but build from default if the variable can't be read.

        Args:
            name: Name of the environment variable
            default: Fallback, anything from_value() accepts
        """
        try:
            return cls.from_env(name)
        except EnvironmentVariableError as e:
            logger.debug("%s; using fallback search path", e)
            return cls.from_value(default)

    @classmethod
    def from_env_or_default(cls, name: str) -> Self:
        """Like from_env(), but empty if the variable can't be read."""
        return cls.from_env_or(name, cls())

    @classmethod
    def from_executable_path(cls) -> Self:
        """Parse the executable search path ($PATH).

        Raises:
            EnvironmentVariableError: If PATH is unset or not valid text
        """
        return cls.from_env(EXECUTABLE_PATH_VAR)

    # Lookup

    def find(self, name: str | os.PathLike) -> Path | None:
        """Return the first file or directory called name, or None."""
        return self._find(name, FindKind.ANY)

    def find_file(self, name: str | os.PathLike) -> Path | None:
        """Return the first regular file called name, or None."""
        return self._find(name, FindKind.FILE)

    def find_directory(self, name: str | os.PathLike) -> Path | None:
        """Return the first directory called name, or None."""
        return self._find(name, FindKind.DIRECTORY)

    def find_all(self, name: str | os.PathLike) -> list[Path]:
        """Return every file or directory called name, in search order."""
        results = []
        for entry in self.paths:
            candidate = join_candidate(entry, name)
            if probe(candidate):
                results.append(candidate)
        return results

    def find_if_name_only(self, name: str | os.PathLike) -> Path | None:
        """Like find(), but only for bare names.

        Returns None without searching if name has any directory
        components, e.g. "g/a.txt".
        """
        if not is_name_only(name):
            return None
        return self.find(name)

    def _find(self, name: str | os.PathLike, kind: FindKind) -> Path | None:
        for entry in self.paths:
            candidate = join_candidate(entry, name)
            if probe(candidate, kind):
                return candidate
        return None

    # Inspection

    def is_empty(self) -> bool:
        return not self.paths

    def len(self) -> int:
        return len(self.paths)

    def contains(self, path: str | os.PathLike) -> bool:
        """Check if path is an entry. Compares values only, never the disk."""
        key = entry_key(os.fspath(path))
        return any(entry_key(p) == key for p in self.paths)

    def contains_cwd(self) -> bool:
        """Check if the current directory, ".", is an entry."""
        return self.contains(CURRENT_DIR)

    def iter(self) -> Iterator[str]:
        """Iterate over a snapshot of the entries, in search order."""
        return iter(list(self.paths))

    def __len__(self) -> int:
        return self.len()

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return self.contains(path)

    def __iter__(self) -> Iterator[str]:
        return self.iter()

    # Mutation

    def append(self, path: str | os.PathLike) -> None:
        self.paths.append(os.fspath(path))

    def append_cwd(self) -> None:
        self.append(CURRENT_DIR)

    def prepend(self, path: str | os.PathLike) -> None:
        self.paths.insert(0, os.fspath(path))

    def prepend_cwd(self) -> None:
        self.prepend(CURRENT_DIR)

    def remove(self, path: str | os.PathLike) -> None:
        """Remove every entry equal to path. Does nothing if there are none."""
        key = entry_key(os.fspath(path))
        self.paths = [p for p in self.paths if entry_key(p) != key]

    def dedup(self) -> None:
        """Drop repeated entries, keeping the first occurrence of each."""
        seen = set()
        unique = []
        for p in self.paths:
            key = entry_key(p)
            if key not in seen:
                seen.add(key)
                unique.append(p)
        self.paths = unique

    # Conversion

    def to_text(self) -> str:
        """Join entries with PATH_DELIMITER, the format from_text() parses."""
        return PATH_DELIMITER.join(self.paths)

    def to_list(self) -> list[str]:
        """Return the entries as a new list, in search order."""
        return list(self.paths)

    def __str__(self) -> str:
        return self.to_text()


SearchPathSource = SearchPath | str | os.PathLike | Iterable[str | os.PathLike]
