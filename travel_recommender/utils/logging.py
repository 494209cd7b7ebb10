"""
Logging setup for the Travel Recommender.

Configures loguru sinks from the system settings and hands out
module-bound loggers so the gateway, the composer and the dev server log
in one format.
"""

import os
import sys

from loguru import logger

from travel_recommender.config import SystemConfig

_RECORD_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}"
)
_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def get_logger(name: str):
    """Return the shared logger bound to a module name."""
    return logger.bind(name=name)


def setup_logging(config: SystemConfig | None = None) -> None:
    """
    Replace the loguru sinks according to the system settings.

    Colored console output is only used in development. When
    ``config.log_file`` is set, records are also appended to that file,
    rotated at ``config.log_rotation``.

    Args:
        config: System settings; read from the environment if omitted
    """
    config = config or SystemConfig.from_env()
    level = config.log_level.value
    development = config.environment == "development"

    logger.remove()
    logger.add(
        sys.stderr,
        format=_CONSOLE_FORMAT if development else _RECORD_FORMAT,
        level=level,
        colorize=development,
    )

    if config.log_file:
        os.makedirs(os.path.dirname(os.path.abspath(config.log_file)), exist_ok=True)
        logger.add(
            config.log_file,
            format=_RECORD_FORMAT,
            level=level,
            rotation=config.log_rotation,
        )

    logger.debug(f"Logging initialized at {level} for {config.environment}")
