"""Filesystem probes for candidate paths."""

import logging
import os
from enum import Enum
from enum import auto
from pathlib import Path

logger = logging.getLogger(__name__)


class FindKind(Enum):
    """What kind of filesystem entry a lookup accepts."""

    ANY = auto()
    FILE = auto()
    DIRECTORY = auto()


def join_candidate(entry: str | os.PathLike, name: str | os.PathLike) -> Path:
    """Join a search path entry with the name being looked up."""
    return Path(entry) / name


def probe(candidate: Path, kind: FindKind = FindKind.ANY) -> bool:
    """Check whether candidate exists as the requested kind of entry.

    Args:
        candidate: Path to check
        kind: ANY for files or directories, FILE for regular files only,
            DIRECTORY for directories only

    Returns:
        True if candidate matches. Errors raised while checking (permission
        denied, invalid names) count as no match.
    """
    try:
        if kind == FindKind.FILE:
            return candidate.is_file()
        if kind == FindKind.DIRECTORY:
            return candidate.is_dir()
        return candidate.exists()
    except (OSError, ValueError) as e:
        logger.debug("Skipping %s: %s", candidate, e)
        return False
