"""Logging configuration for the forum client."""

import logging
import sys

from forum.config import Settings

# Libraries that log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def log_level(settings: Settings) -> int:
    """Pick the log level for an environment.

    Debug wins over environment; production only shows warnings.
    """
    if settings.debug:
        return logging.DEBUG
    if settings.is_production:
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for the forum client.

    Logs go to stderr so that scripts can print the forum to stdout.

    Args:
        settings: Application settings
    """
    level = log_level(settings)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("forum").setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
