"""Vector types, packed colours, colour-space conversion and Bezier helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

COL32_R_SHIFT = 0
COL32_G_SHIFT = 8
COL32_B_SHIFT = 16
COL32_A_SHIFT = 24
COL32_A_MASK = 0xFF000000
COL32_WHITE = 0xFFFFFFFF
COL32_BLACK = 0xFF000000
COL32_BLACK_TRANS = 0x00000000

BEZIER_MAX_LEVEL = 10


def _clamp(value: float, lo: float, hi: float) -> float:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def __mul__(self, other: Union["Vec2", float]) -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union["Vec2", float]) -> "Vec2":
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)

    def length_sqr(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def length(self, fail_value: float = 0.0) -> float:
        """Euclidean length, or ``fail_value`` for a zero vector."""
        d = self.length_sqr()
        if d > 0.0:
            return math.sqrt(d)
        return fail_value

    def dot(self, other: "Vec2") -> float:
        return self.x * other.x + self.y * other.y

    def minimum(self, other: "Vec2") -> "Vec2":
        """Component-wise minimum."""
        return Vec2(min(self.x, other.x), min(self.y, other.y))

    def maximum(self, other: "Vec2") -> "Vec2":
        """Component-wise maximum."""
        return Vec2(max(self.x, other.x), max(self.y, other.y))

    def clamp(self, lo: "Vec2", hi: "Vec2") -> "Vec2":
        """Component-wise clamp into ``[lo, hi]``."""
        return Vec2(_clamp(self.x, lo.x, hi.x), _clamp(self.y, lo.y, hi.y))


@dataclass(frozen=True)
class Vec4:
    """Immutable 4-component vector, also used for RGBA colours and rectangles."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: "Vec4") -> "Vec4":
        return Vec4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Vec4") -> "Vec4":
        return Vec4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, other: Union["Vec4", float]) -> "Vec4":
        if isinstance(other, Vec4):
            return Vec4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)
        return Vec4(self.x * other, self.y * other, self.z * other, self.w * other)

    __rmul__ = __mul__


def col32(r: int, g: int, b: int, a: int) -> int:
    """Pack 8-bit channels into a 32-bit colour."""
    return (
        ((a & 0xFF) << COL32_A_SHIFT)
        | ((b & 0xFF) << COL32_B_SHIFT)
        | ((g & 0xFF) << COL32_G_SHIFT)
        | ((r & 0xFF) << COL32_R_SHIFT)
    )


def u32_to_float4(value: int) -> Vec4:
    """Unpack a 32-bit colour into RGBA floats in ``[0, 1]``."""
    s = 1.0 / 255.0
    return Vec4(
        ((value >> COL32_R_SHIFT) & 0xFF) * s,
        ((value >> COL32_G_SHIFT) & 0xFF) * s,
        ((value >> COL32_B_SHIFT) & 0xFF) * s,
        ((value >> COL32_A_SHIFT) & 0xFF) * s,
    )


def _f32_to_int8_sat(value: float) -> int:
    return int(_clamp(value, 0.0, 1.0) * 255.0 + 0.5)


def float4_to_u32(color: Vec4) -> int:
    """Pack RGBA floats (saturated to ``[0, 1]``) into a 32-bit colour."""
    return (
        (_f32_to_int8_sat(color.x) << COL32_R_SHIFT)
        | (_f32_to_int8_sat(color.y) << COL32_G_SHIFT)
        | (_f32_to_int8_sat(color.z) << COL32_B_SHIFT)
        | (_f32_to_int8_sat(color.w) << COL32_A_SHIFT)
    )


def rgb_to_hsv(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Convert RGB in ``[0, 1]`` to HSV in ``[0, 1]``."""
    k = 0.0
    if g < b:
        g, b = b, g
        k = -1.0
    if r < g:
        r, g = g, r
        k = -2.0 / 6.0 - k
    chroma = r - (g if g < b else b)
    h = abs(k + (g - b) / (6.0 * chroma + 1e-20))
    s = chroma / (r + 1e-20)
    return h, s, r


def hsv_to_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """Convert HSV in ``[0, 1]`` to RGB in ``[0, 1]``."""
    if s == 0.0:
        return v, v, v
    h = math.fmod(h, 1.0) / (60.0 / 360.0)
    i = int(h)
    f = h - i
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))
    if i == 0:
        return v, t, p
    if i == 1:
        return q, v, p
    if i == 2:
        return p, v, t
    if i == 3:
        return p, q, v
    if i == 4:
        return t, p, v
    return v, p, q


def bezier_cubic_calc(p1: Vec2, p2: Vec2, p3: Vec2, p4: Vec2, t: float) -> Vec2:
    """Point on a cubic Bezier curve at parameter ``t``."""
    u = 1.0 - t
    w1 = u * u * u
    w2 = 3 * u * u * t
    w3 = 3 * u * t * t
    w4 = t * t * t
    return Vec2(
        w1 * p1.x + w2 * p2.x + w3 * p3.x + w4 * p4.x,
        w1 * p1.y + w2 * p2.y + w3 * p3.y + w4 * p4.y,
    )


def bezier_quadratic_calc(p1: Vec2, p2: Vec2, p3: Vec2, t: float) -> Vec2:
    """Point on a quadratic Bezier curve at parameter ``t``."""
    u = 1.0 - t
    w1 = u * u
    w2 = 2 * u * t
    w3 = t * t
    return Vec2(w1 * p1.x + w2 * p2.x + w3 * p3.x, w1 * p1.y + w2 * p2.y + w3 * p3.y)


def tessellate_cubic(p1: Vec2, p2: Vec2, p3: Vec2, p4: Vec2, tess_tol: float) -> List[Vec2]:
    """Adaptively subdivide a cubic curve; returns the points after ``p1``."""
    out: List[Vec2] = []

    def subdivide(x1, y1, x2, y2, x3, y3, x4, y4, level):
        dx = x4 - x1
        dy = y4 - y1
        d2 = abs((x2 - x4) * dy - (y2 - y4) * dx)
        d3 = abs((x3 - x4) * dy - (y3 - y4) * dx)
        if (d2 + d3) * (d2 + d3) < tess_tol * (dx * dx + dy * dy):
            out.append(Vec2(x4, y4))
        elif level < BEZIER_MAX_LEVEL:
            x12, y12 = (x1 + x2) * 0.5, (y1 + y2) * 0.5
            x23, y23 = (x2 + x3) * 0.5, (y2 + y3) * 0.5
            x34, y34 = (x3 + x4) * 0.5, (y3 + y4) * 0.5
            x123, y123 = (x12 + x23) * 0.5, (y12 + y23) * 0.5
            x234, y234 = (x23 + x34) * 0.5, (y23 + y34) * 0.5
            x1234, y1234 = (x123 + x234) * 0.5, (y123 + y234) * 0.5
            subdivide(x1, y1, x12, y12, x123, y123, x1234, y1234, level + 1)
            subdivide(x1234, y1234, x234, y234, x34, y34, x4, y4, level + 1)

    subdivide(p1.x, p1.y, p2.x, p2.y, p3.x, p3.y, p4.x, p4.y, 0)
    return out


def tessellate_quadratic(p1: Vec2, p2: Vec2, p3: Vec2, tess_tol: float) -> List[Vec2]:
    """Adaptively subdivide a quadratic curve; returns the points after ``p1``."""
    out: List[Vec2] = []

    def subdivide(x1, y1, x2, y2, x3, y3, level):
        dx = x3 - x1
        dy = y3 - y1
        det = (x2 - x3) * dy - (y2 - y3) * dx
        if det * det * 4.0 < tess_tol * (dx * dx + dy * dy):
            out.append(Vec2(x3, y3))
        elif level < BEZIER_MAX_LEVEL:
            x12, y12 = (x1 + x2) * 0.5, (y1 + y2) * 0.5
            x23, y23 = (x2 + x3) * 0.5, (y2 + y3) * 0.5
            x123, y123 = (x12 + x23) * 0.5, (y12 + y23) * 0.5
            subdivide(x1, y1, x12, y12, x123, y123, level + 1)
            subdivide(x123, y123, x23, y23, x3, y3, level + 1)

    subdivide(p1.x, p1.y, p2.x, p2.y, p3.x, p3.y, 0)
    return out