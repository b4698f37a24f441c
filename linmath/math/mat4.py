# linmath/math/mat4.py
"""
"Матрица 4×4": четыре столбца x_axis, y_axis, z_axis, w_axis.

Внимание: столбцы трёхкомпонентные (Vec3), так что это не настоящая
однородная 4×4‑матрица. Умножение на Vec3 использует только первые три
столбца; w_axis участвует лишь при умножении на Vec4.
"""

from typing import Tuple, Union

import numpy as np

from linmath.math.vec3 import Vec3
from linmath.math.vec4 import Vec4


class Mat4:
    __slots__ = ("_x_axis", "_y_axis", "_z_axis", "_w_axis")

    def __init__(self, x_axis: Vec3, y_axis: Vec3, z_axis: Vec3, w_axis: Vec3):
        self._x_axis = x_axis.copy()
        self._y_axis = y_axis.copy()
        self._z_axis = z_axis.copy()
        self._w_axis = w_axis.copy()

    @classmethod
    def from_cols(cls, x_axis: Vec3, y_axis: Vec3,
                  z_axis: Vec3, w_axis: Vec3) -> "Mat4":
        return cls(x_axis, y_axis, z_axis, w_axis)

    @staticmethod
    def zero() -> "Mat4":
        return Mat4(Vec3(), Vec3(), Vec3(), Vec3())

    @property
    def x_axis(self) -> Vec3:
        return self._x_axis.copy()

    @property
    def y_axis(self) -> Vec3:
        return self._y_axis.copy()

    @property
    def z_axis(self) -> Vec3:
        return self._z_axis.copy()

    @property
    def w_axis(self) -> Vec3:
        return self._w_axis.copy()

    def cols(self) -> Tuple[Vec3, Vec3, Vec3, Vec3]:
        return self.x_axis, self.y_axis, self.z_axis, self.w_axis

    # -----------------------------------------------------------------
    # арифметика
    # -----------------------------------------------------------------
    def mul(self, rhs: Union[Vec3, Vec4]) -> Vec3:
        res = self._x_axis.scale(rhs.x)
        res.accumulate(self._y_axis.scale(rhs.y))
        res.accumulate(self._z_axis.scale(rhs.z))
        if isinstance(rhs, Vec4):
            res.accumulate(self._w_axis.scale(rhs.w))
        return res

    def add_mat(self, rhs: "Mat4") -> "Mat4":
        return Mat4(
            self._x_axis + rhs._x_axis,
            self._y_axis + rhs._y_axis,
            self._z_axis + rhs._z_axis,
            self._w_axis + rhs._w_axis,
        )

    def mul_mat(self, rhs: "Mat4") -> "Mat4":
        # столбцы rhs – Vec3, поэтому self.w_axis в произведение не входит
        return Mat4(
            self.mul(rhs._x_axis),
            self.mul(rhs._y_axis),
            self.mul(rhs._z_axis),
            self.mul(rhs._w_axis),
        )

    def __matmul__(self, other):
        if isinstance(other, Mat4):
            return self.mul_mat(other)
        if isinstance(other, (Vec3, Vec4)):
            return self.mul(other)
        return NotImplemented

    def __mul__(self, other):
        if not isinstance(other, (Vec3, Vec4)):
            return NotImplemented
        return self.mul(other)

    def __add__(self, other):
        if not isinstance(other, Mat4):
            return NotImplemented
        return self.add_mat(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return (self._x_axis == other._x_axis
                and self._y_axis == other._y_axis
                and self._z_axis == other._z_axis
                and self._w_axis == other._w_axis)

    __hash__ = None

    def to_np(self) -> np.ndarray:
        """3×4 ndarray (float64), столбец i – i‑я ось."""
        return np.column_stack([col.as_np() for col in
                                (self._x_axis, self._y_axis,
                                 self._z_axis, self._w_axis)])

    def __repr__(self) -> str:
        return (f"Mat4(x_axis={self._x_axis!r}, y_axis={self._y_axis!r}, "
                f"z_axis={self._z_axis!r}, w_axis={self._w_axis!r})")
