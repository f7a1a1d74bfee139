"""Plane geometry primitives: points, rectangles, affine transforms and helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Point:
    """An immutable point (or vector) in the plane."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Point:
        if isinstance(factor, Point):
            return NotImplemented
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Point:
        if isinstance(divisor, Point):
            return NotImplemented
        return Point(self.x / divisor, self.y / divisor)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def top_left(self) -> Point:
        return Point(self.x, self.y)

    @property
    def bottom_right(self) -> Point:
        return Point(self.right, self.bottom)

    def is_null(self) -> bool:
        """True when both width and height are zero."""
        return self.width == 0 and self.height == 0

    def normalized(self) -> Rect:
        """Return an equivalent rectangle with non-negative width and height."""
        x, width = (self.x + self.width, -self.width) if self.width < 0 else (self.x, self.width)
        y, height = (self.y + self.height, -self.height) if self.height < 0 else (self.y, self.height)
        return Rect(x, y, width, height)

    def contains(self, point: Point) -> bool:
        """True when the point lies inside or on the border."""
        r = self.normalized()
        return r.left <= point.x <= r.right and r.top <= point.y <= r.bottom

    def united(self, other: Rect) -> Rect:
        """Return the smallest rectangle holding both rectangles."""
        if self.is_null():
            return other
        if other.is_null():
            return self
        a, b = self.normalized(), other.normalized()
        left = min(a.left, b.left)
        top = min(a.top, b.top)
        right = max(a.right, b.right)
        bottom = max(a.bottom, b.bottom)
        return Rect(left, top, right - left, bottom - top)

    def __or__(self, other: Rect) -> Rect:
        return self.united(other)

    def center(self) -> Point:
        return Point(self.x + self.width / 2.0, self.y + self.height / 2.0)


@dataclass
class Transform:
    """A 2D affine matrix; each operation is applied before the existing ones."""

    m11: float = 1.0
    m12: float = 0.0
    m21: float = 0.0
    m22: float = 1.0
    dx: float = 0.0
    dy: float = 0.0

    def translate(self, dx: float, dy: float) -> Transform:
        self.dx += dx * self.m11 + dy * self.m21
        self.dy += dy * self.m22 + dx * self.m12
        return self

    def scale(self, sx: float, sy: float) -> Transform:
        self.m11 *= sx
        self.m12 *= sx
        self.m21 *= sy
        self.m22 *= sy
        return self

    def shear(self, sx: float, sy: float) -> Transform:
        m11 = self.m11 + sy * self.m21
        m12 = self.m12 + sy * self.m22
        m21 = self.m21 + sx * self.m11
        m22 = self.m22 + sx * self.m12
        self.m11, self.m12, self.m21, self.m22 = m11, m12, m21, m22
        return self

    def rotate(self, degrees: float) -> Transform:
        radians = math.radians(degrees)
        sin_a, cos_a = math.sin(radians), math.cos(radians)
        m11 = cos_a * self.m11 + sin_a * self.m21
        m12 = cos_a * self.m12 + sin_a * self.m22
        m21 = -sin_a * self.m11 + cos_a * self.m21
        m22 = -sin_a * self.m12 + cos_a * self.m22
        self.m11, self.m12, self.m21, self.m22 = m11, m12, m21, m22
        return self

    def map_point(self, point: Point) -> Point:
        return Point(
            self.m11 * point.x + self.m21 * point.y + self.dx,
            self.m12 * point.x + self.m22 * point.y + self.dy,
        )

    def map_points(self, points: Iterable[Point]) -> list[Point]:
        return [self.map_point(p) for p in points]


def bounding_rect(points: Iterable[Point]) -> Rect:
    """Return the rectangle spanned by the points, or a null rect for none."""
    pts = list(points)
    if not pts:
        return Rect()
    xs = [p.x for p in pts]
    ys = [p.y for p in pts]
    left, top = min(xs), min(ys)
    return Rect(left, top, max(xs) - left, max(ys) - top)


def interpolate(a: T, b: T, span: float, offset: float) -> T:
    """Linearly blend from ``a`` to ``b``; ``offset / span`` is the fraction travelled."""
    if span == 0:
        return a
    return a + (b - a) * (offset / span)


def distance_to_segment(point: Point, start: Point, end: Point) -> float:
    """Shortest distance from a point to the segment between two points."""
    seg = end - start
    length_sq = seg.x * seg.x + seg.y * seg.y
    if length_sq == 0:
        return math.hypot(point.x - start.x, point.y - start.y)
    t = ((point.x - start.x) * seg.x + (point.y - start.y) * seg.y) / length_sq
    t = max(0.0, min(1.0, t))
    nearest = start + seg * t
    return math.hypot(point.x - nearest.x, point.y - nearest.y)


def _cross(a: Point, b: Point, p: Point) -> float:
    return (b.x - a.x) * (p.y - a.y) - (p.x - a.x) * (b.y - a.y)


def point_in_polygon(point: Point, polygon: Sequence[Point]) -> bool:
    """Test a point against a closed polygon using the non-zero winding rule."""
    pts = list(polygon)
    if len(pts) < 3:
        return False
    winding = 0
    for a, b in zip(pts, pts[1:] + pts[:1]):
        if a.y <= point.y:
            if b.y > point.y and _cross(a, b, point) > 0:
                winding += 1
        elif b.y <= point.y and _cross(a, b, point) < 0:
            winding -= 1
    return winding != 0


def flatten_cubic(p0: Point, p1: Point, p2: Point, p3: Point, steps: int) -> list[Point]:
    """Approximate a cubic Bezier curve with ``steps`` straight segments."""
    if steps < 1:
        raise ValueError("steps must be at least 1")

    def at(t: float) -> Point:
        u = 1.0 - t
        return p0 * (u * u * u) + p1 * (3 * u * u * t) + p2 * (3 * u * t * t) + p3 * (t * t * t)

    return [p0, *(at(i / steps) for i in range(1, steps)), p3]