# -*- coding: utf-8 -*-
import logging

import pytest

import linmath
from linmath.utils import init_logger, logger, set_log_level


def test_library_logger_is_silent_by_default():
    assert logger.name == "linmath"
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
    assert linmath.logger is logger


def test_set_log_level_accepts_names_and_ints():
    set_log_level("debug")
    assert logger.level == logging.DEBUG
    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_rejects_unknown_names():
    with pytest.raises(ValueError):
        set_log_level("LOUD")


def test_init_logger_returns_library_logger(caplog):
    assert init_logger(logging.DEBUG) is logger
    assert logger.level == logging.DEBUG
    with caplog.at_level(logging.INFO, logger="linmath"):
        logger.info("[Test] hello")
    assert "[Test] hello" in caplog.text
