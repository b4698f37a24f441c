# linmath/math/vec4.py
"""
4‑мерный вектор (float64): x, y, z, w. Без cross и perp_dot.
"""

import numpy as np

from linmath.math._base import _VecN


class Vec4(_VecN):
    """Неизменяемый вектор‑4."""

    __slots__ = ()

    _size = 4

    def __init__(self, x: float = 0.0, y: float = 0.0,
                 z: float = 0.0, w: float = 0.0):
        self._v = np.array([x, y, z, w], dtype=np.float64)

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    @property
    def w(self) -> float:
        return float(self._v[3])
