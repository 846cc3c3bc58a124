"""Stdlib logging for the HTTP layer.

Domain code reports through logfire; the route layer, the authentication gate
and the error handlers log through loggers obtained from ``get_logger``.
"""

import logging
import sys

from scribe.config import Settings

# Libraries that are noisy at INFO
QUIET_LOGGERS = ("botocore", "boto3", "urllib3", "sqlalchemy.engine")


def log_level(settings: Settings) -> int:
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Send log records to stdout at a level chosen by the environment."""
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
    logging.getLogger("scribe").setLevel(level)

    logging.getLogger(__name__).info(
        f"Logging configured for {settings.environment} at {logging.getLevelName(level)}"
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module under the ``scribe`` hierarchy (pass ``__name__``)."""
    return logging.getLogger(name)
