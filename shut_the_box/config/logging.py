"""
Shut the Box - Logging Setup
"""

import logging

from shut_the_box.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings | None = None) -> int:
    """
    Apply the configured log level to the root logger.

    Debug mode always logs at DEBUG. Returns the level that was applied.
    """
    settings = settings or get_settings()
    if settings.debug:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level {settings.log_level!r}.")

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    return level
