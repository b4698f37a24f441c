# linmath/math/point.py
"""
Точка в 3‑D пространстве.

Отдельный тип от Vec3 (смещения), хотя устроен так же.
Point + Point и Point − Point возвращают Point, а не Vec3 –
это поведение сохранено намеренно.
"""

from typing import Iterator, Tuple, Union

import numpy as np

from linmath.math._format import fmt_components
from linmath.math.vec3 import Vec3


class Point:
    __slots__ = ("_v",)

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "Point":
        obj = object.__new__(cls)
        obj._v = array
        return obj

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    # -----------------------------------------------------------------
    def add(self, rhs: Union[Vec3, "Point"]) -> "Point":
        """Сдвиг на вектор (Point + Vec3) или сумма точек (Point + Point)."""
        with np.errstate(all="ignore"):
            return Point._wrap(self._v + rhs._v)

    def sub(self, rhs: "Point") -> "Point":
        """Покомпонентная разность; результат – тоже Point."""
        with np.errstate(all="ignore"):
            return Point._wrap(self._v - rhs._v)

    def __add__(self, other):
        if not isinstance(other, (Vec3, Point)):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.sub(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash(("Point",) + self.to_tuple())

    # -----------------------------------------------------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._v.tolist())

    def as_np(self) -> np.ndarray:
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return fmt_components("Point", self._v)
