"""Configuration constants read from the environment."""

from __future__ import annotations

import os


def env_flag(name: str, default: bool = False) -> bool:
    """Parse a boolean environment variable (1/true/yes/on)."""
    val = os.environ.get(name)
    if val is None:
        return default
    return val.strip().lower() in ("1", "true", "yes", "on")


def env_int(name: str, default: int) -> int:
    """Parse an integer environment variable; unset or malformed values
    fall back to ``default``."""
    val = os.environ.get(name)
    if val is None:
        return default
    try:
        return int(val.strip())
    except ValueError:
        return default


# Environment variable names
ENV_DEBUG = "SKIPSCAN_DEBUG"
ENV_ALGORITHM = "SKIPSCAN_ALGORITHM"
ENV_CONTEXT = "SKIPSCAN_CONTEXT"
ENV_ENCODING = "SKIPSCAN_ENCODING"

# Default searcher for the CLI when --algorithm is not given
DEFAULT_ALGORITHM = os.environ.get(ENV_ALGORITHM, "horspool")

# Trailing symbols printed after each match
DEFAULT_CONTEXT = env_int(ENV_CONTEXT, 16)

DEFAULT_ENCODING = os.environ.get(ENV_ENCODING, "utf-8")

# Sentence the original demo searched when no input is given
DEMO_TEXT = "あらゆるげんじつをすべてじぶんのほうへねじまげたのだ。"
DEMO_PATTERN = "じぶん"


def debug_enabled() -> bool:
    return env_flag(ENV_DEBUG)
