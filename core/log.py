"""
Logging setup.

Every module logs through logging.getLogger(__name__); the entry point calls
configure_logging() once with the level from settings.
"""
import logging
from typing import Union

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Union[str, int] = "INFO") -> None:
    """
    Install a single stream handler on the root logger.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or logging constant.
            Unknown names fall back to INFO.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
