"""
Runtime settings, read from the environment and an optional .env file.
"""

import os
import logging
from dataclasses import dataclass

from dotenv import load_dotenv

from natbreaks.errors import InvalidArgument

DEFAULT_CLASSES = 5
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    default_classes: int = DEFAULT_CLASSES
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self):
        """Numeric logging level for log_level."""
        return logging.getLevelName(self.log_level)


def load_settings(dotenv_path=None):
    """
    Load settings from the environment.

    Args:
        dotenv_path (str, optional): Path to a .env file. Defaults to None,
            which lets python-dotenv search for one.

    Returns:
        Settings: The loaded settings
    """
    load_dotenv(dotenv_path)

    raw_classes = os.getenv("NATBREAKS_DEFAULT_CLASSES", str(DEFAULT_CLASSES))
    try:
        default_classes = int(raw_classes)
    except ValueError as e:
        raise InvalidArgument(f"NATBREAKS_DEFAULT_CLASSES must be an integer, got {raw_classes!r}") from e
    if default_classes < 1:
        raise InvalidArgument(f"NATBREAKS_DEFAULT_CLASSES must be at least 1, got {default_classes}")

    log_level = os.getenv("NATBREAKS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise InvalidArgument(f"NATBREAKS_LOG_LEVEL is not a logging level: {log_level!r}")

    return Settings(default_classes=default_classes, log_level=log_level)
