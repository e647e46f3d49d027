"""Factories of pure point-to-point mapping functions.

Every factory returns a ``Callable[[Vector2], Vector2]``; composing two
transforms is ordinary function composition (see :func:`compose`).
"""

from __future__ import annotations

import math
from typing import Callable

from .vector import Vector2

PointMap = Callable[[Vector2], Vector2]


def translate(v: Vector2) -> PointMap:
    return lambda p: p.add(v)


def rotate(angle: float, pivot: Vector2) -> PointMap:
    """Counter-clockwise rotation by ``angle`` radians around ``pivot``."""
    return lambda p: p.sub(pivot).rotate(angle).add(pivot)


def scale(factor: Vector2, origin: Vector2) -> PointMap:
    """Independent x/y scaling about ``origin``."""
    return lambda p: p.sub(origin).mul(factor).add(origin)


def reflect_over_point(q: Vector2) -> PointMap:
    return lambda p: q.scale(2).sub(p)


def reflect_over_line(p1: Vector2, p2: Vector2) -> PointMap:
    """Mirror across the infinite line through ``p1`` and ``p2``."""
    normal = p2.sub(p1).rotate(math.pi / 2).normalize()

    def _reflect(p: Vector2) -> Vector2:
        distance = normal.dot(p.sub(p1))
        return p.sub(normal.scale(2 * distance))

    return _reflect


def skew_x(angle: float, ybase: float = 0.0) -> PointMap:
    """Shear parallel to the x axis, points on ``y == ybase`` stay fixed."""
    tan_a = math.tan(angle)
    return lambda p: Vector2(p.x + (p.y - ybase) * tan_a, p.y)


def skew_y(angle: float, xbase: float = 0.0) -> PointMap:
    """Shear parallel to the y axis, points on ``x == xbase`` stay fixed."""
    tan_a = math.tan(angle)
    return lambda p: Vector2(p.x, p.y + (p.x - xbase) * tan_a)


def compose(*funcs: PointMap) -> PointMap:
    """Apply ``funcs`` left to right."""

    def _composed(p: Vector2) -> Vector2:
        for func in funcs:
            p = func(p)
        return p

    return _composed


__all__ = [
    "PointMap",
    "translate",
    "rotate",
    "scale",
    "reflect_over_point",
    "reflect_over_line",
    "skew_x",
    "skew_y",
    "compose",
]
