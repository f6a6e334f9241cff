"""
Ancestor marker lookup.

Walks from a starting directory up to the filesystem root and returns the
first ``dir / name`` that exists. Levels are visited nearest first and, at
each level, names are tried in the order given, so the closest level wins
and list order only breaks ties within a level.

Example:
    >>> find_up_closest(Path.cwd(), [".git", "pyproject.toml"])
    PosixPath('/home/me/project/.git')
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Optional, Protocol, Sequence, Union

from .utils.logging import get_logger

logger = get_logger("locator")

PathLike = Union[str, Path]


# ══════════════════════════════════════════════════════════════════════════════
# FILESYSTEM CAPABILITY
# ══════════════════════════════════════════════════════════════════════════════


class FileSystem(Protocol):
    """The two filesystem queries the lookup needs."""

    def exists(self, path: Path) -> bool:
        ...

    def parent(self, path: Path) -> Optional[Path]:
        ...


class OSFileSystem:
    """
    FileSystem backed by the real filesystem.

    I/O errors never escape: an entry that cannot be queried counts as
    missing, so one unreadable ancestor does not block the rest of the chain.
    """

    def exists(self, path: Path) -> bool:
        try:
            return path.exists()
        except OSError as exc:
            logger.debug("Treating %s as missing: %s", path, exc)
            return False

    def parent(self, path: Path) -> Optional[Path]:
        # Path("/").parent and Path(".").parent return themselves
        parent = path.parent
        if parent == path:
            return None
        return parent


# ══════════════════════════════════════════════════════════════════════════════
# LOOKUP
# ══════════════════════════════════════════════════════════════════════════════


def iter_ancestors(start: PathLike, fs: Optional[FileSystem] = None) -> Iterator[Path]:
    """Yield ``start`` and then each of its parents, nearest first.

    A relative ``start`` is walked through its own relative parents and is
    never made absolute.
    """
    fs = fs or OSFileSystem()
    current: Optional[Path] = Path(start)
    while current is not None:
        yield current
        try:
            current = fs.parent(current)
        except OSError as exc:
            logger.debug("No parent for %s: %s", current, exc)
            current = None


def find_up_closest(
    start: PathLike,
    names: Sequence[str],
    fs: Optional[FileSystem] = None,
) -> Optional[Path]:
    """
    Find the closest ancestor of ``start`` (``start`` included) holding any of ``names``.

    Args:
        start: Directory to begin the search from.
        names: Candidate entry names. If several exist at the closest level,
            the one listed first is returned.
        fs: Filesystem to query. Defaults to the real one.

    Returns:
        ``dir / name`` for the match, or None when no directory up to the
        root contains any candidate.

    Raises:
        ValueError: If ``names`` is empty.
    """
    if not names:
        raise ValueError("At least one name to search for is required.")

    fs = fs or OSFileSystem()
    for directory in iter_ancestors(start, fs):
        for name in names:
            candidate = directory / name
            if fs.exists(candidate):
                logger.debug("Found %s", candidate)
                return candidate
        logger.debug("No marker in %s", directory)
    return None


__all__ = ["FileSystem", "OSFileSystem", "iter_ancestors", "find_up_closest"]
