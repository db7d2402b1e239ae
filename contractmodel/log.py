"""
Logging setup.

The library logs through loguru but stays silent until an
application opts in with configure_logging().
"""

import sys

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name} | {message}"


def configure_logging(level: str = "INFO") -> None:
    """Send contractmodel messages at `level` and above to stderr."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT, backtrace=False)
    logger.enable("contractmodel")
