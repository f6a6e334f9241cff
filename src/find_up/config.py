from __future__ import annotations

import logging
from typing import Any, Dict

Config = Dict[str, Any]

# Default configuration; can be overridden by callers of cli.main.
DEFAULT_CONFIG: Config = {
    "program_name": "find-up",
    "std_flag": "--std",
    "logging": {"level": logging.WARNING},
}


def merge_config(base: Config, override: Config | None = None) -> Config:
    """Shallow-merge override into base (one level deep)."""
    if not override:
        return dict(base)
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            merged = dict(result[key])
            merged.update(value)
            result[key] = merged
        else:
            result[key] = value
    return result


__all__ = ["DEFAULT_CONFIG", "merge_config", "Config"]
