# linmath/math/vec2.py
"""
2‑мерный вектор (float64). Неизменяемый.
"""

import numpy as np

from linmath.math._base import _VecN


class Vec2(_VecN):
    __slots__ = ()

    _size = 2

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self._v = np.array([x, y], dtype=np.float64)

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    def perp_dot(self, rhs: "Vec2") -> float:
        """
        Перпендикулярное скалярное произведение (2D cross, определитель).

        Удвоенная ориентированная площадь треугольника (0, self, rhs):
        > 0, если поворот от self к rhs – против часовой стрелки.
        """
        with np.errstate(all="ignore"):
            return float(self._v[0] * rhs._v[1] - self._v[1] * rhs._v[0])
