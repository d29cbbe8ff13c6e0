from __future__ import annotations

import logging
from functools import lru_cache

from .config import CONFIG


@lru_cache(maxsize=None)
def get_logger(name: str = "tetra_pair") -> logging.Logger:
    """Return a shared logger with a stream handler attached.

    Args:
        name: Logger name, usually the module's ``__name__``.

    Returns:
        logging.Logger: Logger writing to stderr at the configured level.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(CONFIG.log_format))
        logger.addHandler(handler)

    logger.setLevel(CONFIG.log_level)
    logger.propagate = False
    return logger


def set_log_level(level: str) -> None:
    """Change the level of every logger handed out by get_logger()."""
    CONFIG.log_level = level.upper()
    for name in logging.root.manager.loggerDict:
        if name == "tetra_pair" or name.startswith("tetra_pair."):
            logging.getLogger(name).setLevel(CONFIG.log_level)
