"""loguru sink setup for the mdrender namespace"""

import sys

from loguru import logger


def configure_logging(level: str = "WARNING") -> int:
    """Enable mdrender logs and route them to a single stderr sink. Returns the sink id."""
    logger.remove()
    logger.enable("mdrender")
    return logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
    )
