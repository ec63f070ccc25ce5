"""Process-wide logging configuration."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Names accepted in LOG_LEVEL besides the stdlib ones
_LEVEL_ALIASES = {
    "trace": "DEBUG",
    "warn": "WARNING",
    "off": "CRITICAL",
}


def parse_level(name: str) -> int:
    """Convert a level name such as "info" or "WARN" to a logging level.

    Unknown names fall back to INFO.
    """
    key = name.strip().lower()
    level = logging.getLevelName(_LEVEL_ALIASES.get(key, key.upper()))
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str = "info") -> None:
    """Configure the root logger to write to stderr.

    Args:
        level: Level name, typically taken from the LOG_LEVEL variable.
    """
    root = logging.getLogger()
    root.setLevel(parse_level(level))
    # Ensure stream handler
    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
