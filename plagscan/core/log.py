"""Logging helpers for plagscan."""

import logging
from typing import Optional, Union

base_logger = logging.getLogger('plagscan')


def set_logger(
    name: str,
    level: Union[int, str] = logging.INFO,
    fmt: Optional[str] = None,
    remove_handlers: bool = False
) -> logging.Logger:
    """
    Attach a stream handler to a named logger.

    Args:
        name: Logger name, e.g. 'plagscan' or 'plagscan.detector'
        level: Logging level as int or level name
        fmt: Format string for the handler
        remove_handlers: Drop existing handlers before adding the new one

    Returns:
        The configured logger
    """
    logger = logging.getLogger(name)
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    if remove_handlers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    if fmt:
        handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
