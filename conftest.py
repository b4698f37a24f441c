# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: тестовые матрицы и сброс уровня логгера.
"""

import logging
import warnings
from contextlib import contextmanager

import numpy as np
import pytest

from linmath.math import Vec3, Mat3
from linmath.utils import logger


@pytest.fixture(autouse=True)
def _reset_logger_level():
    yield
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def mat1():
    #
    # | 3  3  4 |
    # | 1  5  2 |
    # | 4  8  6 |
    #
    return Mat3.from_cols(
        Vec3(3.0, 1.0, 4.0),
        Vec3(3.0, 5.0, 8.0),
        Vec3(4.0, 2.0, 6.0),
    )


@pytest.fixture
def mat2():
    #
    # | 2  3  9 |
    # | 3  5  6 |
    # | 4  6  1 |
    #
    return Mat3.from_cols(
        Vec3(2.0, 3.0, 4.0),
        Vec3(3.0, 5.0, 6.0),
        Vec3(9.0, 6.0, 1.0),
    )


@pytest.fixture
def strict_float():
    """Контекст, в котором любое FP‑предупреждение становится ошибкой."""
    @contextmanager
    def _strict():
        with np.errstate(all="raise"), warnings.catch_warnings():
            warnings.simplefilter("error")
            yield
    return _strict
