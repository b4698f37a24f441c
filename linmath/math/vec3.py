# linmath/math/vec3.py
"""
3‑мерный вектор (float64).

Единственный изменяемый вектор: компоненты можно присваивать, а
accumulate() / `+=` складывает на месте. Поэтому Vec3 не хешируется.
"""

import numpy as np

from linmath.math._base import _VecN


class Vec3(_VecN):
    __slots__ = ()

    _size = 3

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float64)

    # -----------------------------------------------------------------
    # свойства (c‑сеттерами)
    # -----------------------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = float(value)

    # -----------------------------------------------------------------
    # накопление на месте
    # -----------------------------------------------------------------
    def accumulate(self, rhs: "Vec3") -> "Vec3":
        """self = self + rhs; возвращает self."""
        with np.errstate(all="ignore"):
            self._v = self._v + rhs._v
        return self

    add_assign = accumulate

    def __iadd__(self, other):
        if type(other) is not Vec3:
            return NotImplemented
        return self.accumulate(other)

    __hash__ = None

    # -----------------------------------------------------------------
    def cross(self, rhs: "Vec3") -> "Vec3":
        """Векторное произведение (правая тройка: X × Y = Z)."""
        ax, ay, az = self._v
        bx, by, bz = rhs._v
        with np.errstate(all="ignore"):
            return Vec3(
                ay * bz - az * by,
                az * bx - ax * bz,
                ax * by - ay * bx,
            )

    def copy(self) -> "Vec3":
        return Vec3._wrap(self._v.copy())
