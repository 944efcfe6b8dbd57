"""Logging configuration."""

import logging
import os

# Below DEBUG; used for per-candidate detection chatter
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_LEVEL_ENV = "TERMPROFILES_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)-5s %(name)s: %(message)s"
DEFAULT_LEVEL = "WARNING"


def parse_level(value: str | None) -> int:
    """Parse a level name or number, falling back to the default."""
    if not value:
        return logging.getLevelName(DEFAULT_LEVEL)
    value = value.strip()
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return logging.getLevelName(DEFAULT_LEVEL)


def setup_logging(level: int | str = DEFAULT_LEVEL) -> None:
    """Configure the root logger once with a stderr handler."""
    if isinstance(level, str):
        level = parse_level(level)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def setup_logging_from_env() -> None:
    """Configure logging from TERMPROFILES_LOG_LEVEL."""
    setup_logging(parse_level(os.environ.get(LOG_LEVEL_ENV)))
