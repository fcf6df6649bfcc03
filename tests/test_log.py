"""Tests for logging helpers."""

import logging
from plagscan.core.log import base_logger, set_logger


def test_set_logger_replaces_handlers():
    logger = set_logger('plagscan.test', level='DEBUG', fmt='%(message)s', remove_handlers=True)
    logger = set_logger('plagscan.test', level='DEBUG', fmt='%(message)s', remove_handlers=True)

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.parent is base_logger
