"""
Print the closest ancestor entry matching any of the given names.

Usage:
    find-up .git
    find-up pyproject.toml setup.py
    find-up --std

Exit codes: 0 found, 1 not found, 2 usage error or unreadable working directory.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

from .config import DEFAULT_CONFIG, Config, merge_config
from .locator import find_up_closest
from .markers import standard_markers
from .paths import canonicalize
from .utils.logging import get_logger, setup_logging

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_USAGE = 2

logger = get_logger("cli")


@dataclass
class Invocation:
    use_std: bool = False
    names: List[str] = field(default_factory=list)


def parse_args(argv: Sequence[str], std_flag: str = "--std") -> Invocation:
    """Split argv into the std flag and candidate names.

    Anything that is not exactly the std flag is a name, including
    tokens like ``-x``. With the flag set, explicit names are dropped.
    """
    invocation = Invocation()
    for arg in argv:
        if arg == std_flag:
            invocation.use_std = True
        else:
            invocation.names.append(arg)

    if invocation.use_std:
        invocation.names = standard_markers()
    return invocation


def usage(prog: str, std_flag: str = "--std") -> str:
    return (
        f"Usage: {prog} [{std_flag}] <name> [name ...]\n"
        f"       {prog} {std_flag}"
    )


def main(
    argv: Optional[Sequence[str]] = None,
    prog: Optional[str] = None,
    config: Config | None = None,
) -> int:
    cfg = merge_config(DEFAULT_CONFIG, config)
    setup_logging(cfg["logging"]["level"])

    if argv is None:
        argv = sys.argv[1:]
    prog = prog or cfg["program_name"]

    invocation = parse_args(argv, cfg["std_flag"])
    if not invocation.names:
        print(usage(prog, cfg["std_flag"]), file=sys.stderr)
        return EXIT_USAGE

    try:
        start = Path.cwd()
    except OSError as exc:
        print(f"{cfg['program_name']}: failed to get current directory: {exc}", file=sys.stderr)
        return EXIT_USAGE

    logger.debug("Searching from %s for %d name(s)", start, len(invocation.names))
    found = find_up_closest(start, invocation.names)
    if found is None:
        return EXIT_NOT_FOUND

    print(canonicalize(found))
    return EXIT_FOUND


def run() -> None:
    """Console-script entry point."""
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else None
    raise SystemExit(main(sys.argv[1:], prog=prog))


if __name__ == "__main__":
    run()
