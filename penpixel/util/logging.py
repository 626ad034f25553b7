"""Logging configuration for the application."""

import logging
import sys

from penpixel.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Sets up the root logger with a level derived from the environment.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # SQL echo is handled by the engine in debug mode
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("penpixel").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
