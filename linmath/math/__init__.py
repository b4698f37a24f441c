"""
Математический суб‑пакет: Vec2, Vec3, Vec4, Point, Mat3, Mat4.
"""

from linmath.math.vec2 import Vec2
from linmath.math.vec3 import Vec3
from linmath.math.vec4 import Vec4
from linmath.math.point import Point
from linmath.math.mat3 import Mat3
from linmath.math.mat4 import Mat4

__all__ = ["Vec2", "Vec3", "Vec4", "Point", "Mat3", "Mat4"]
