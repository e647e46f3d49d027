from __future__ import annotations

from typing import Any, Dict, List, Tuple, TYPE_CHECKING
from typing import Literal

if TYPE_CHECKING:  # pragma: no cover
    from .vector import Vector2


class GeometryError(ValueError):
    """Raised when a geometric operation is invoked outside its contract."""


Anchor = Literal[
    "top-left",
    "top-center",
    "top-right",
    "center-left",
    "center-center",
    "center-right",
    "bottom-left",
    "bottom-center",
    "bottom-right",
]

ANCHORS: Tuple[str, ...] = (
    "top-left",
    "top-center",
    "top-right",
    "center-left",
    "center-center",
    "center-right",
    "bottom-left",
    "bottom-center",
    "bottom-right",
)

BoundingBox = Tuple["Vector2", "Vector2"]
StyleMap = Dict[str, str]
TextData = Dict[str, str]
TextSpan = Dict[str, Any]
MultilineData = Dict[str, Any]
TagList = List[str]


def split_anchor(anchor: str) -> Tuple[str, str]:
    """Return the ``(vertical, horizontal)`` parts of a named anchor."""

    if anchor not in ANCHORS:
        raise GeometryError(f"unknown anchor {anchor!r}")
    vertical, horizontal = anchor.split("-")
    return vertical, horizontal


__all__ = [
    "GeometryError",
    "Anchor",
    "ANCHORS",
    "BoundingBox",
    "StyleMap",
    "TextData",
    "TextSpan",
    "MultilineData",
    "TagList",
    "split_anchor",
]
