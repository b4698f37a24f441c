# linmath/math/mat3.py
"""
Матрица 3×3, хранение по столбцам (column‑major).

Столбцы – три Vec3: x_axis, y_axis, z_axis. Столбцы копируются при
создании и при чтении, так что матрицу нельзя изменить через Vec3.
"""

from typing import Tuple

import numpy as np

from linmath.math.vec3 import Vec3


class Mat3:
    __slots__ = ("_x_axis", "_y_axis", "_z_axis")

    def __init__(self, x_axis: Vec3, y_axis: Vec3, z_axis: Vec3):
        self._x_axis = x_axis.copy()
        self._y_axis = y_axis.copy()
        self._z_axis = z_axis.copy()

    @classmethod
    def from_cols(cls, x_axis: Vec3, y_axis: Vec3, z_axis: Vec3) -> "Mat3":
        return cls(x_axis, y_axis, z_axis)

    @staticmethod
    def zero() -> "Mat3":
        return Mat3(Vec3(), Vec3(), Vec3())

    @staticmethod
    def identity() -> "Mat3":
        return Mat3(Vec3(1.0, 0.0, 0.0),
                    Vec3(0.0, 1.0, 0.0),
                    Vec3(0.0, 0.0, 1.0))

    # -----------------------------------------------------------------
    # столбцы (копии)
    # -----------------------------------------------------------------
    @property
    def x_axis(self) -> Vec3:
        return self._x_axis.copy()

    @property
    def y_axis(self) -> Vec3:
        return self._y_axis.copy()

    @property
    def z_axis(self) -> Vec3:
        return self._z_axis.copy()

    def cols(self) -> Tuple[Vec3, Vec3, Vec3]:
        return self.x_axis, self.y_axis, self.z_axis

    # -----------------------------------------------------------------
    # арифметика
    # -----------------------------------------------------------------
    def mul(self, rhs: Vec3) -> Vec3:
        """M · v = x_axis·v.x + y_axis·v.y + z_axis·v.z (именно в этом порядке)."""
        res = self._x_axis.scale(rhs.x)
        res.accumulate(self._y_axis.scale(rhs.y))
        res.accumulate(self._z_axis.scale(rhs.z))
        return res

    def add_mat(self, rhs: "Mat3") -> "Mat3":
        return Mat3(
            self._x_axis + rhs._x_axis,
            self._y_axis + rhs._y_axis,
            self._z_axis + rhs._z_axis,
        )

    def mul_mat(self, rhs: "Mat3") -> "Mat3":
        """Столбец i результата = self · rhs.col_i."""
        return Mat3(
            self.mul(rhs._x_axis),
            self.mul(rhs._y_axis),
            self.mul(rhs._z_axis),
        )

    def __matmul__(self, other):
        if isinstance(other, Mat3):
            return self.mul_mat(other)
        if isinstance(other, Vec3):
            return self.mul(other)
        return NotImplemented

    def __mul__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.mul(other)

    def __add__(self, other):
        if not isinstance(other, Mat3):
            return NotImplemented
        return self.add_mat(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return (self._x_axis == other._x_axis
                and self._y_axis == other._y_axis
                and self._z_axis == other._z_axis)

    __hash__ = None

    # -----------------------------------------------------------------
    def to_np(self) -> np.ndarray:
        """3×3 ndarray (float64), столбец i – i‑я ось."""
        return np.column_stack([self._x_axis.as_np(),
                                self._y_axis.as_np(),
                                self._z_axis.as_np()])

    def __repr__(self) -> str:
        return (f"Mat3(x_axis={self._x_axis!r}, y_axis={self._y_axis!r}, "
                f"z_axis={self._z_axis!r})")
