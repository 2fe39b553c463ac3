import logging
import os
import sys

from key_check.config import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(log_level=None):
    """Configure logging for the checker. Records go to stderr so stdout holds only the report."""
    # Set log level from environment or default
    ignored_env_level = None
    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
        # Unknown LOG_LEVEL values fall back to WARNING; explicit levels still raise
        if log_level not in VALID_LOG_LEVELS:
            ignored_env_level = log_level
            log_level = "WARNING"

    log_level = log_level.upper()
    if log_level not in VALID_LOG_LEVELS:
        raise ConfigurationError(f"logging level must be one of {VALID_LOG_LEVELS}")

    logging.basicConfig(
        level=getattr(logging, log_level),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    logger = logging.getLogger("key_check")
    if ignored_env_level is not None:
        logger.warning(
            f"Ignoring unknown LOG_LEVEL {ignored_env_level!r}, using WARNING"
        )
    logger.debug(f"Logging initialized at {log_level}")

    return logger
