import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(name)s: %(message)s"


def get_logger(name: str, level: str = "INFO", stream: Optional[TextIO] = None):
    """
    Return ``name`` logger with a single stream handler attached.

    Repeated calls reuse the existing handler and only update the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    return logger
