# linmath/math/_base.py
"""
Общая часть векторов фиксированного размера (float64).

Компоненты хранятся в np.ndarray длины N. Все операции, кроме
Vec3.accumulate, возвращают новый объект и не трогают операнды.
NaN/Inf и переполнение не перехватываются: арифметика идёт под
np.errstate(all="ignore") и не зависит от глобального np.seterr.
"""

from math import sqrt
from numbers import Real
from typing import Iterator, Tuple, TypeVar

import numpy as np

from linmath.math._format import fmt_components

V = TypeVar("V", bound="_VecN")


class _VecN:
    __slots__ = ("_v",)

    _size = 0

    @classmethod
    def _wrap(cls, array: np.ndarray):
        """Обернуть готовый ndarray без повторного копирования."""
        obj = object.__new__(cls)
        obj._v = array
        return obj

    # -----------------------------------------------------------------
    # арифметика (именованные методы)
    # -----------------------------------------------------------------
    def add(self: V, rhs: V) -> V:
        """Покомпонентная сумма."""
        with np.errstate(all="ignore"):
            return self._wrap(self._v + rhs._v)

    def sub(self: V, rhs: V) -> V:
        """Покомпонентная разность."""
        with np.errstate(all="ignore"):
            return self._wrap(self._v - rhs._v)

    def neg(self: V) -> V:
        return self._wrap(-self._v)

    def scale(self: V, scalar: float) -> V:
        """Умножение на скаляр."""
        with np.errstate(all="ignore"):
            return self._wrap(self._v * float(scalar))

    mul = scale

    def dot(self: V, rhs: V) -> float:
        """Скалярное произведение: (x*x') + (y*y') + ... слева направо."""
        with np.errstate(all="ignore"):
            products = self._v * rhs._v
            total = products[0]
            for p in products[1:]:
                total = total + p
        return float(total)

    def element_product(self: V, rhs: V) -> V:
        """Покомпонентное (адамарово) произведение."""
        with np.errstate(all="ignore"):
            return self._wrap(self._v * rhs._v)

    def length(self) -> float:
        """Евклидова длина."""
        return sqrt(self.dot(self))

    # -----------------------------------------------------------------
    # операторы
    # -----------------------------------------------------------------
    def __add__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.sub(other)

    def __neg__(self):
        return self.neg()

    def __mul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self.to_tuple())

    # -----------------------------------------------------------------
    # приведение к кортежу / ndarray
    # -----------------------------------------------------------------
    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[float]:
        return iter(self._v.tolist())

    def as_np(self) -> np.ndarray:
        """Копия ndarray (float64)."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, ...]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return fmt_components(type(self).__name__, self._v)
