"""Top-level package for find-up: locate the closest ancestor holding a root marker."""

from .locator import FileSystem, OSFileSystem, find_up_closest, iter_ancestors
from .markers import STANDARD_MARKERS, standard_markers
from .paths import canonicalize, find_project_root

__all__ = [
    "FileSystem",
    "OSFileSystem",
    "find_up_closest",
    "iter_ancestors",
    "STANDARD_MARKERS",
    "standard_markers",
    "canonicalize",
    "find_project_root",
]
