"""
Logging configuration for the DeviceHub backend.

Modules log through ``logging.getLogger(__name__)``; this installs the single
root handler they all share.
"""

# Standard library imports
import logging
import sys
from typing import Final, Optional

# Local application imports
from .config import get_settings


DEFAULT_LOG_FORMAT: Final[str] = (
    "%(name)s | %(asctime)s | %(levelname)s | %(funcName)s:%(lineno)d | %(message)s"
)
DEFAULT_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging once for the whole application.

    Args:
        level: Log level name; defaults to the LOG_LEVEL setting
    """
    level_name = (level or get_settings().log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=DEFAULT_LOG_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
        stream=sys.stdout,
    )
