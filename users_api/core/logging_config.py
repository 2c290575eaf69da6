# Standard library imports
import logging
from typing import Optional

# Local application imports
from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging for the service process.

    Args:
        level: Log level name; defaults to LOG_LEVEL from settings
    """
    logging.basicConfig(
        level=(level or get_settings().log_level).upper(),
        format=LOG_FORMAT,
    )
