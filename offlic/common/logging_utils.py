"""
Logger setup shared by the signer and the validator.
"""

from __future__ import annotations

import logging

from offlic.common.config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(logger: logging.Logger, log_level: int | None = None) -> None:
    """
    Attach one stream handler to ``logger`` and apply ``log_level``.

    Without an explicit level the ``OFFLIC_LOG_LEVEL`` setting is used.
    Repeated calls reuse the existing handler but still move its level.
    """
    level = log_level if log_level is not None else Config().LOG_LEVEL
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)


def get_logger(name: str, log_level: int | None = None) -> logging.Logger:
    """Return the named logger, configured through :func:`setup_logger`."""
    logger = logging.getLogger(name)
    setup_logger(logger, log_level)
    return logger
