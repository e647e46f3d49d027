"""Ordered point sequence with arc-length parametrization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .types import GeometryError
from .vector import Vector2


def locate_arc_parameter(lengths: Sequence[float], t: float) -> Tuple[int, float]:
    """Map a whole-length fraction ``t`` to ``(piece_index, local_t)``.

    ``lengths`` are the lengths of consecutive pieces. The chosen piece is
    the first whose cumulative share reaches ``t``; zero-length pieces are
    never selected past their start.
    """
    if t < 0 or t > 1:
        raise GeometryError(f"t must be between 0 and 1, got {t}")
    cumulative = np.cumsum(np.asarray(lengths, dtype=float))
    if cumulative.size == 0:
        raise GeometryError("arc-length parametrization needs at least one segment")
    if cumulative[-1] <= 0:
        raise GeometryError("arc-length parametrization of a zero-length path")
    cumulative_t = cumulative / cumulative[-1]
    cumulative_t[-1] = 1.0
    index = int(np.searchsorted(cumulative_t, t, side="left"))
    prev_t = 0.0 if index == 0 else float(cumulative_t[index - 1])
    span = float(cumulative_t[index]) - prev_t
    local_t = (t - prev_t) / span if span > 0 else 0.0
    return index, local_t


@dataclass
class Path:
    """Polyline owned by a single diagram node.

    ``mutable`` paths are edited in place by :meth:`add_points`,
    :meth:`reverse` and :meth:`transform`; immutable paths hand back an
    independent copy instead.
    """

    points: List[Vector2] = field(default_factory=list)
    mutable: bool = field(default=False, compare=False)

    def copy(self) -> "Path":
        return Path(list(self.points))

    def copy_if_not_mutable(self) -> "Path":
        return self if self.mutable else self.copy()

    def mut(self) -> "Path":
        self.mutable = True
        return self

    def immut(self) -> "Path":
        return self.copy()

    def __len__(self) -> int:
        return len(self.points)

    def as_array(self, closed: bool = False) -> np.ndarray:
        """Return the points as a ``(N, 2)`` float array.

        With ``closed`` the first point is repeated at the end.
        """
        if not self.points:
            return np.empty((0, 2), dtype=float)
        arr = np.array([(p.x, p.y) for p in self.points], dtype=float)
        if closed:
            arr = np.vstack([arr, arr[:1]])
        return arr

    def _segment_lengths(self, closed: bool) -> np.ndarray:
        arr = self.as_array(closed)
        if arr.shape[0] < 2:
            return np.zeros(0, dtype=float)
        diff = np.diff(arr, axis=0)
        return np.hypot(diff[:, 0], diff[:, 1])

    def length(self, closed: bool = False) -> float:
        """Sum of the segment lengths, including the closing edge if ``closed``."""
        return float(self._segment_lengths(closed).sum())

    def add_points(self, points: Iterable[Vector2]) -> "Path":
        newp = self.copy_if_not_mutable()
        newp.points.extend(points)
        return newp

    def reverse(self) -> "Path":
        newp = self.copy_if_not_mutable()
        newp.points.reverse()
        return newp

    def transform(self, func: Callable[[Vector2], Vector2]) -> "Path":
        newp = self.copy_if_not_mutable()
        newp.points = [func(p) for p in newp.points]
        return newp

    def parametric_point(
        self, t: float, closed: bool = False, segment_index: Optional[int] = None
    ) -> Vector2:
        """Point at parameter ``t`` along the path.

        Without ``segment_index`` ``t`` is an arc-length fraction of the whole
        path and must lie in ``[0, 1]``; a path of total length 0 has no
        arc-length parametrization. With ``segment_index`` the point is
        ``start + (end - start) * t`` on that segment and ``t`` may
        extrapolate outside ``[0, 1]``.
        """
        extended = list(self.points)
        if closed and extended:
            extended.append(extended[0])
        segment_count = len(extended) - 1

        if segment_index is not None:
            if not 0 <= segment_index < segment_count:
                raise GeometryError(
                    f"segment_index must be between 0 and {segment_count - 1}, got {segment_index}"
                )
            start = extended[segment_index]
            end = extended[segment_index + 1]
            return start.add(end.sub(start).scale(t))

        if segment_count < 1:
            raise GeometryError("parametric_point needs a path with at least 2 points")
        index, local_t = locate_arc_parameter(self._segment_lengths(closed), t)
        return self.parametric_point(local_t, closed, index)


__all__ = ["Path", "locate_arc_parameter"]
