"""
Shut the Box Configuration.

Environment variables, settings, and logging configuration.
"""

from shut_the_box.config.logging import configure_logging
from shut_the_box.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
