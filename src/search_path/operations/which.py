"""Command lookup on the executable search path."""

import os
from pathlib import Path

from search_path.environment import EXECUTABLE_PATH_VAR
from search_path.files import FindKind
from search_path.files import is_name_only
from search_path.files import join_candidate
from search_path.files import probe
from search_path.models import SearchPath


def which(
    command: str | os.PathLike, search_path: SearchPath | None = None
) -> Path | None:
    """Find the first regular file named command.

    Args:
        command: Bare command name, e.g. "python3"
        search_path: Directories to search. If None, uses $PATH (empty if unset).

    Returns:
        Path to the first matching file, or None. Names with directory
        components are never searched for.
    """
    if search_path is None:
        search_path = SearchPath.from_env_or_default(EXECUTABLE_PATH_VAR)

    if not is_name_only(command):
        return None
    return search_path.find_file(command)


def which_all(
    command: str | os.PathLike, search_path: SearchPath | None = None
) -> list[Path]:
    """Find every regular file named command, in search order.

    Args:
        command: Bare command name
        search_path: Directories to search. If None, uses $PATH (empty if unset).

    Returns:
        Paths to all matching files; empty for names with directory components
    """
    if search_path is None:
        search_path = SearchPath.from_env_or_default(EXECUTABLE_PATH_VAR)

    if not is_name_only(command):
        return []
    return [
        candidate
        for candidate in (join_candidate(entry, command) for entry in search_path)
        if probe(candidate, FindKind.FILE)
    ]
