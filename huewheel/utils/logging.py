"""
HueWheel Logging Setup

Library modules log through loguru's shared ``logger`` and never touch its
sinks. Only the HTTP service calls ``configure_logging`` to install output.
"""
import sys
from typing import Optional

from loguru import logger

from huewheel.config import config

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}"


def configure_logging(level: Optional[str] = None, sink=sys.stdout) -> int:
    """
    Install the service's structured sink, replacing loguru's defaults.

    Args:
        level: Minimum level, defaults to config.LOG_LEVEL
        sink: Destination accepted by loguru's ``logger.add``

    Returns:
        The loguru handler id of the installed sink
    """
    logger.remove()
    return logger.add(
        sink,
        format=LOG_FORMAT,
        level=level or config.LOG_LEVEL,
        serialize=False  # Set to True for JSON output
    )
