# -*- coding: utf-8 -*-
import pytest

from linmath.math import Point, Vec3


def test_point_translate_by_vector():
    p = Point(1.0, 2.0, 3.0)
    moved = p + Vec3(0.5, -2.0, 10.0)
    assert isinstance(moved, Point)
    assert moved == Point(1.5, 0.0, 13.0)
    assert p == Point(1.0, 2.0, 3.0)
    assert p.add(Vec3(1.0, 1.0, 1.0)) == Point(2.0, 3.0, 4.0)


def test_point_plus_point_is_a_point():
    # Point + Point геометрически странно, но поддерживается намеренно
    a = Point(1.0, 2.0, 3.0)
    b = Point(4.0, 5.0, 6.0)
    assert a + b == Point(5.0, 7.0, 9.0)
    assert a.add(b) == b.add(a)


def test_point_minus_point_is_a_point_not_a_vector():
    # разность точек остаётся Point (а не Vec3) – известная особенность
    diff = Point(4.0, 5.0, 6.0) - Point(1.0, 1.0, 1.0)
    assert type(diff) is Point
    assert diff == Point(3.0, 4.0, 5.0)
    assert Point(1.0, 1.0, 1.0).sub(Point(4.0, 5.0, 6.0)) == Point(-3.0, -4.0, -5.0)


def test_point_and_vec3_are_distinct_types():
    assert Point(1.0, 2.0, 3.0) != Vec3(1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        Vec3(1.0, 2.0, 3.0) + Point(1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        Point(1.0, 2.0, 3.0) - Vec3(1.0, 2.0, 3.0)


def test_point_components_are_read_only():
    p = Point(1.0, 2.0, 3.0)
    assert (p.x, p.y, p.z) == (1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        p.x = 0.0


def test_point_repr_and_hash():
    assert repr(Point(1, 2, 3)) == "Point(1.0, 2.0, 3.0)"
    assert hash(Point(1, 2, 3)) == hash(Point(1.0, 2.0, 3.0))
    assert list(Point(1, 2, 3)) == [1.0, 2.0, 3.0]


def test_point_inf_arithmetic_is_silent(strict_float):
    inf = float("inf")
    with strict_float():
        diff = Point(inf, 1e308, 0.0) - Point(inf, -1e308, 0.0)
        assert diff.x != diff.x
        assert diff.y == inf
        moved = Point(-inf, 0.0, 0.0) + Vec3(inf, 0.0, 0.0)
        assert moved.x != moved.x
