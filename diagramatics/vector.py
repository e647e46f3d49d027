"""Immutable 2D vector value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterator


@dataclass(frozen=True)
class Vector2:
    """2D point or vector; every operation returns a new instance."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, scalar: float) -> "Vector2":
        return Vector2(self.x * scalar, self.y * scalar)

    def mul(self, other: "Vector2") -> "Vector2":
        """Componentwise product."""
        return Vector2(self.x * other.x, self.y * other.y)

    def rotate(self, angle: float) -> "Vector2":
        """Rotate counter-clockwise by ``angle`` radians (y axis pointing up)."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2(self.x * cos_a - self.y * sin_a, self.x * sin_a + self.y * cos_a)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2") -> float:
        """Scalar z-component of the 3D cross product."""
        return self.x * other.y - self.y * other.x

    def length_sq(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def angle(self) -> float:
        return math.atan2(self.y, self.x)

    def normalize(self) -> "Vector2":
        """Unit vector in the same direction.

        Callers must not normalize a zero vector; the division is left
        unchecked and raises ``ZeroDivisionError``.
        """
        length = self.length()
        return Vector2(self.x / length, self.y / length)

    def equals(self, other: "Vector2") -> bool:
        return self.x == other.x and self.y == other.y

    def is_close(self, other: "Vector2", abs_tol: float = 1e-9) -> bool:
        return math.isclose(self.x, other.x, abs_tol=abs_tol) and math.isclose(
            self.y, other.y, abs_tol=abs_tol
        )

    def lerp(self, other: "Vector2", t: float) -> "Vector2":
        return Vector2(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)

    def apply(self, func: Callable[["Vector2"], "Vector2"]) -> "Vector2":
        return func(self)

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.sub(other)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Vector2":
        return self.scale(scalar)

    def __rmul__(self, scalar: float) -> "Vector2":
        return self.scale(scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __repr__(self) -> str:
        return f"V2({self.x!r}, {self.y!r})"


def V2(x: float, y: float) -> Vector2:
    return Vector2(x, y)


def Vdir(angle: float) -> Vector2:
    """Unit vector pointing at ``angle`` radians from the positive x axis."""
    return Vector2(math.cos(angle), math.sin(angle))


__all__ = ["Vector2", "V2", "Vdir"]
