from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from .locator import FileSystem, PathLike, find_up_closest
from .markers import STANDARD_MARKERS
from .utils.logging import get_logger

logger = get_logger("paths")


def absolutize_fallback(path: Path) -> Path:
    """Join a relative path onto the working directory, without touching the filesystem."""
    if path.is_absolute():
        return path
    try:
        base = Path.cwd()
    except OSError:
        base = Path(".")
    return base / path


def canonicalize(path: Path) -> Path:
    """Resolve symlinks and `.`/`..`; fall back to a plain absolute path if that fails."""
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        logger.debug("Could not canonicalize %s (%s), using absolute path", path, exc)
        return absolutize_fallback(path)


def find_project_root(
    start: Optional[PathLike] = None,
    names: Sequence[str] = STANDARD_MARKERS,
    fs: Optional[FileSystem] = None,
) -> Optional[Path]:
    """Return the directory holding the closest marker above start, or None."""
    origin = Path(start) if start is not None else Path.cwd()
    found = find_up_closest(origin, names, fs)
    if found is None:
        return None
    return canonicalize(found.parent)


__all__ = ["absolutize_fallback", "canonicalize", "find_project_root"]
