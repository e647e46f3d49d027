"""Convenience shapes assembled from the primitive constructors."""

from __future__ import annotations

import math

from .diagram import Diagram, curve, diagram_combine, line, polygon
from .tags import TAG
from .vector import V2, Vector2

LOCATOR_COLOR = "#8B5CF6"


def rectangle(width: float, height: float) -> Diagram:
    """Axis-aligned rectangle centered at the origin."""
    w, h = width / 2, height / 2
    return polygon([V2(-w, -h), V2(w, -h), V2(w, h), V2(-w, h)])


def rectangle_corner(bottomleft: Vector2, topright: Vector2) -> Diagram:
    return polygon(
        [bottomleft, V2(topright.x, bottomleft.y), topright, V2(bottomleft.x, topright.y)]
    )


def square(side: float = 1.0) -> Diagram:
    return rectangle(side, side)


def regular_polygon(n: int, radius: float = 1.0) -> Diagram:
    """Regular ``n``-gon inscribed in a circle of ``radius``, first vertex on top."""
    top = V2(0, radius)
    return polygon([top.rotate(2 * math.pi * i / n) for i in range(n)])


def regular_polygon_side(n: int, sidelength: float = 1.0) -> Diagram:
    return regular_polygon(n, sidelength / (2 * math.sin(math.pi / n)))


def circle(radius: float = 1.0, points: int = 50) -> Diagram:
    return regular_polygon(points, radius).append_tags("circle")


def arc(radius: float = 1.0, angle: float = math.pi / 2, points: int = 50) -> Diagram:
    """Counter-clockwise arc from the positive x axis; the origin is the arc center."""
    step = angle / (points - 1)
    arc_points = [V2(radius, 0).rotate(step * i) for i in range(points)]
    return curve(arc_points).move_origin(V2(0, 0))


def arrow_head(headsize: float) -> Diagram:
    """Open chevron pointing up with its tip on the origin."""
    return (
        curve([V2(-headsize, -headsize), V2(0, 0), V2(headsize, -headsize)])
        .fill("none")
        .move_origin(V2(0, 0))
        .append_tags(TAG.ARROW_HEAD)
    )


def arrow(start: Vector2, end: Vector2, headsize: float = 3.0) -> Diagram:
    """Line from ``start`` to ``end`` with a filled triangular head at ``end``."""
    direction = end.sub(start)
    body = line(start, end).append_tags(TAG.ARROW_LINE)
    head = (
        polygon([V2(0, 0), V2(-headsize, headsize / 2), V2(-headsize, -headsize / 2)])
        .move_origin(V2(0, 0))
        .rotate(direction.angle())
        .translate(end)
        .fill("black")
        .append_tags(TAG.ARROW_HEAD)
    )
    return diagram_combine(body, head).move_origin(start)


def double_arrow(size: float, headsize: float, color: str) -> Diagram:
    """Vertical line of half-length ``size`` with chevrons on both ends."""
    head = arrow_head(headsize).stroke(color).strokewidth(2).translate(V2(0, size))
    shaft = (
        line(V2(0, size), V2(0, -size))
        .stroke(color)
        .strokewidth(2)
        .append_tags(TAG.ARROW_LINE)
    )
    head_down = head.position(shaft.get_anchor("bottom-center")).reflect()
    return diagram_combine(head, head_down, shaft).move_origin(shaft.get_anchor("center-center"))


def vertical_locator(
    radius: float = 3.0,
    fill: str = "white",
    color: str = LOCATOR_COLOR,
    headsize: float = 1.2,
) -> Diagram:
    background = square(radius * 2.4).fill(color).opacity(0.25).stroke("none")
    face = square(radius * 2).fill(fill).stroke("none")
    arrows = double_arrow(radius * 0.5, headsize, color)
    return diagram_combine(background, face, arrows).append_tags(TAG.LOCATOR)


def horizontal_locator(
    radius: float = 3.0,
    fill: str = "white",
    color: str = LOCATOR_COLOR,
    headsize: float = 1.2,
) -> Diagram:
    return vertical_locator(radius, fill, color, headsize).rotate(math.pi / 2)


def span_locator(
    radius: float = 3.0,
    fill: str = "white",
    color: str = LOCATOR_COLOR,
) -> Diagram:
    background = square(radius * 2.4).fill(color).opacity(0.25).stroke("none")
    face = square(radius * 2).fill(fill).stroke("none")
    dot = circle(radius * 0.5).stroke("none").fill(color)
    return diagram_combine(background, face, dot).append_tags(TAG.LOCATOR)


__all__ = [
    "rectangle",
    "rectangle_corner",
    "square",
    "regular_polygon",
    "regular_polygon_side",
    "circle",
    "arc",
    "arrow_head",
    "arrow",
    "double_arrow",
    "vertical_locator",
    "horizontal_locator",
    "span_locator",
]
