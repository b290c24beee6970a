"""
Logging setup.

Configures loguru logger for the wallet core.
Sets up log rotation and retention policies.
"""

import sys

from loguru import logger

from wallet.config.settings import settings


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """
    Configure logger with stderr output and file rotation.

    Args:
        level: Log level (defaults to settings.log_level)
        log_file: Log file path (defaults to settings.log_file)
    """
    level = level or settings.log_level
    logger.remove()
    logger.add(sys.stderr, level=level)
    logger.add(
        log_file or settings.log_file,
        rotation="1 day",
        retention="7 days",
        level=level,
        encoding="utf-8",
    )

    logger.info("Wallet logging configured")
