"""Filesystem operations for search_path."""

from search_path.files.names import entry_key
from search_path.files.names import is_name_only
from search_path.files.probe import FindKind
from search_path.files.probe import join_candidate
from search_path.files.probe import probe

__all__ = [
    "FindKind",
    "entry_key",
    "is_name_only",
    "join_candidate",
    "probe",
]
