"""Structural checks on names and search path entries."""

import os
from pathlib import PurePath


def is_name_only(name: str | os.PathLike) -> bool:
    """Check whether name is a bare file name with no directory part.

    The check is made on the name as written: "a.txt" passes; "g/a.txt",
    "./a.txt", "/a.txt", ".", ".." and "" do not.

    Args:
        name: File name or path to check

    Returns:
        True if name has no directory components
    """
    head, tail = os.path.split(os.fspath(name))
    return not head and tail not in ("", os.curdir, os.pardir)


def entry_key(entry: str) -> PurePath | None:
    """Get the value search path entries are compared by.

    Entries compare component-wise, so "a/" matches "a" and "./" matches
    ".". An empty entry has no components and matches only another empty
    entry, never ".".
    """
    if not entry:
        return None
    return PurePath(entry)
