"""Well-known file and directory names that mark a project root."""

from __future__ import annotations

from typing import List, Tuple

# First match at the closest level wins, so order is the tie-breaker.
# VCS goes first: it is the most universal notion of a root.
STANDARD_MARKERS: Tuple[str, ...] = (
    # VCS
    ".git",
    ".jj",
    # Node / JS / TS
    "package.json",
    "pnpm-lock.yaml",
    "yarn.lock",
    "bun.lockb",
    "bun.lock",
    "package-lock.json",
    "tsconfig.json",
    "deno.json",
    "deno.jsonc",
    # Rust
    "Cargo.toml",
    # Go
    "go.mod",
    "go.work",
    # Python
    "pyproject.toml",
    "poetry.lock",
    "Pipfile",
    "requirements.txt",
    "setup.py",
    "setup.cfg",
    # Java / Kotlin / Scala
    "pom.xml",
    "build.gradle",
    "build.gradle.kts",
    "settings.gradle",
    "settings.gradle.kts",
    # .NET
    ".sln",
    # PHP
    "composer.json",
    # Ruby
    "Gemfile",
    # Elixir
    "mix.exs",
    # Haskell
    "stack.yaml",
    "cabal.project",
    # C / C++
    "CMakeLists.txt",
    "Makefile",
    # Swift
    "Package.swift",
    # OCaml
    "dune-project",
    "opam",
    # Zig
    "build.zig",
    # Lua
    "rockspec",
    # Nix
    "flake.nix",
    "default.nix",
)


def standard_markers() -> List[str]:
    """Return a fresh list copy of the standard marker table."""
    return list(STANDARD_MARKERS)


__all__ = ["STANDARD_MARKERS", "standard_markers"]
