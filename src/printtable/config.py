"""Runtime settings for the printtable CLI."""

import logging
import os

LOG_LEVEL_ENV_VAR = "PRINTTABLE_LOG_LEVEL"
"""Environment variable for the CLI log level."""

DEFAULT_LOG_LEVEL = "ERROR"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_log_level() -> str:
    """Return the configured log level, falling back to the default."""
    level = os.environ.get(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return level


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging for command-line use.

    Args:
        level: Level name; defaults to ``get_log_level()``
    """
    logging.basicConfig(
        level=(level or get_log_level()).upper(),
        format=LOG_FORMAT,
        force=True,
    )
