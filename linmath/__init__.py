"""
linmath – минимальная библиотека линейной алгебры для Python.
Векторы Vec2/Vec3/Vec4, точка Point, матрицы Mat3/Mat4 (column‑major).
"""

from linmath.utils import logger, init_logger
from linmath.math import Vec2, Vec3, Vec4, Point, Mat3, Mat4

__version__ = "1.0.0"

__all__ = [
    "Vec2",
    "Vec3",
    "Vec4",
    "Point",
    "Mat3",
    "Mat4",
    "init_logger",
    "logger",
]
