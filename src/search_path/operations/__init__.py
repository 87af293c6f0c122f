"""High-level operations for search_path."""

from search_path.operations.which import which
from search_path.operations.which import which_all

__all__ = [
    "which",
    "which_all",
]
