"""Diagram tree: tagged-variant nodes with copy-on-write editing.

A :class:`Diagram` is either a leaf (polygon, curve, text, image, multiline
text) or a composite holding ordered children. Nodes are immutable by
default: every editing method works on :meth:`Diagram.copy_if_not_mutable`,
so the receiver is left untouched unless it was explicitly made mutable
with :meth:`Diagram.mut`.
"""

from __future__ import annotations

import copy
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from . import transform as Transform
from .config import bbox_caching_enabled, default_linespace, default_map
from .logging_utils import debug_log_call
from .path import Path, locate_arc_parameter
from .tags import TAG
from .types import (
    Anchor,
    BoundingBox,
    GeometryError,
    MultilineData,
    StyleMap,
    TextData,
    split_anchor,
)
from .vector import V2, Vector2

logger = logging.getLogger(__name__)

TagArg = Union[str, Iterable[str]]
DiagramFunc = Callable[["Diagram"], "Diagram"]


class DiagramType(str, Enum):
    Polygon = "polygon"
    Curve = "curve"
    Text = "text"
    Image = "image"
    MultilineText = "multilinetext"
    Diagram = "diagram"


PATH_KINDS: FrozenSet[DiagramType] = frozenset(
    {DiagramType.Polygon, DiagramType.Curve, DiagramType.Image}
)
TEXT_KINDS: FrozenSet[DiagramType] = frozenset({DiagramType.Text, DiagramType.MultilineText})
LEAF_KINDS: FrozenSet[DiagramType] = PATH_KINDS | TEXT_KINDS
LINE_KINDS: FrozenSet[DiagramType] = frozenset({DiagramType.Polygon, DiagramType.Curve})


def style_targets(excluded_types: Optional[Iterable[DiagramType]] = None) -> FrozenSet[DiagramType]:
    """Leaf kinds a style update applies to once ``excluded_types`` are removed."""
    return LEAF_KINDS - frozenset(excluded_types or ())


_ALL_LEAVES = style_targets()
_SHAPE_STYLE_TARGETS = style_targets([DiagramType.Text])
_TEXT_STYLE_TARGETS = style_targets([DiagramType.Polygon, DiagramType.Curve])

_TEXT_ANCHOR_BY_COLUMN = {"left": "start", "center": "middle", "right": "end"}
_TEXT_DY_BY_ROW = {"top": "0.75em", "center": "0.25em", "bottom": "-0.25em"}


def _unreachable(kind: object) -> GeometryError:
    return GeometryError(f"unreachable, unknown diagram type: {kind!r}")


def _as_tag_list(tags: TagArg) -> List[str]:
    if isinstance(tags, str):
        return [tags]
    return list(tags)


def _num_str(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(repr=False)
class Diagram:
    kind: DiagramType
    path: Optional[Path] = None
    children: List["Diagram"] = field(default_factory=list)
    origin: Vector2 = field(default_factory=lambda: V2(0, 0))
    style: StyleMap = field(default_factory=dict)
    textdata: TextData = field(default_factory=dict)
    multilinedata: MultilineData = field(default_factory=dict)
    imgdata: Dict[str, str] = field(default_factory=dict)
    tags: List[str] = field(default_factory=list)
    mutable: bool = field(default=False, compare=False)
    _bbox_cache: Optional[BoundingBox] = field(default=None, init=False, compare=False)

    def __post_init__(self) -> None:
        self.kind = DiagramType(self.kind)
        self.tags = list(dict.fromkeys(self.tags))

    def __repr__(self) -> str:
        parts = [f"kind={self.kind.value!r}", f"origin={self.origin!r}"]
        if self.path is not None:
            parts.append(f"points={len(self.path)}")
        if self.children:
            parts.append(f"children={len(self.children)}")
        if self.tags:
            parts.append(f"tags={self.tags!r}")
        if self.mutable:
            parts.append("mutable=True")
        return f"Diagram({', '.join(parts)})"

    # ------------------------------------------------------------------
    # Copy / mutability

    def copy(self) -> "Diagram":
        """Deep structural clone; the clone and all its nodes are immutable.

        The bounding-box cache travels with the clone.
        """
        newd = Diagram(
            kind=self.kind,
            path=None if self.path is None else self.path.copy(),
            children=[child.copy() for child in self.children],
            origin=self.origin,
            style=dict(self.style),
            textdata=dict(self.textdata),
            multilinedata=copy.deepcopy(self.multilinedata),
            imgdata=dict(self.imgdata),
            tags=list(self.tags),
        )
        newd._bbox_cache = self._bbox_cache
        return newd

    def copy_if_not_mutable(self) -> "Diagram":
        if self.mutable:
            return self
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("copy-on-write: cloning %s node", self.kind.value)
        return self.copy()

    def _claim(self, owned: bool) -> Tuple["Diagram", bool]:
        """Return an editable node and whether its whole subtree is private.

        ``owned`` means the caller already holds a fresh copy of this
        subtree, so it may be edited in place regardless of flags.
        """
        if owned or self.mutable:
            return self, owned
        return self.copy_if_not_mutable(), True

    def mut(self) -> "Diagram":
        """Mark this node, its path and every descendant mutable, in place."""
        self.mutable = True
        if self.path is not None:
            self.path.mut()
        for child in self.children:
            child.mut()
        return self

    def mut_parent_only(self) -> "Diagram":
        """Mark only this node and its own path mutable, in place."""
        self.mutable = True
        if self.path is not None:
            self.path.mut()
        return self

    def immut(self) -> "Diagram":
        """Return an independent deep copy with every node immutable."""
        return self.copy()

    # ------------------------------------------------------------------
    # Structure

    def combine(self, *diagrams: "Diagram") -> "Diagram":
        return diagram_combine(self, *diagrams)

    def collect_children(self) -> List["Diagram"]:
        """Every leaf of the tree in depth-first, left-to-right order."""
        if self.kind is DiagramType.Diagram:
            leaves: List[Diagram] = []
            for child in self.children:
                leaves.extend(child.collect_children())
            return leaves
        if self.kind in LEAF_KINDS:
            return [self]
        raise _unreachable(self.kind)

    def flatten(self) -> "Diagram":
        """Replace the subtree by a single level holding all leaves.

        A leaf is already flat and is returned as is.
        """
        newd = self.copy_if_not_mutable()
        if newd.kind is not DiagramType.Diagram:
            return newd
        newd.children = newd.collect_children()
        logger.debug("flatten: %d leaves", len(newd.children))
        return newd

    # ------------------------------------------------------------------
    # Tags

    def append_tags(self, tags: TagArg) -> "Diagram":
        newd = self.copy_if_not_mutable()
        for tag in _as_tag_list(tags):
            if tag not in newd.tags:
                newd.tags.append(tag)
        return newd

    def remove_tags(self, tags: TagArg) -> "Diagram":
        removed = set(_as_tag_list(tags))
        newd = self.copy_if_not_mutable()
        newd.tags = [tag for tag in newd.tags if tag not in removed]
        return newd

    def reset_tags(self) -> "Diagram":
        newd = self.copy_if_not_mutable()
        newd.tags = []
        return newd

    def contain_tag(self, tag: str) -> bool:
        return tag in self.tags

    def contain_all_tags(self, tags: TagArg) -> bool:
        return all(tag in self.tags for tag in _as_tag_list(tags))

    # ------------------------------------------------------------------
    # Function application

    def apply(self, func: DiagramFunc) -> "Diagram":
        """Apply ``func`` to this node only."""
        result = func(self.copy_if_not_mutable())
        result._bbox_cache = None
        return result

    def apply_recursive(self, func: DiagramFunc) -> "Diagram":
        """Apply ``func`` to this node, then to every descendant (pre-order)."""
        return self._apply_where(func, None, False)

    def apply_to_tagged_recursive(self, tags: TagArg, func: DiagramFunc) -> "Diagram":
        """Like :meth:`apply_recursive`, only on nodes holding all ``tags``."""
        return self._apply_where(func, _as_tag_list(tags), False)

    def _apply_where(self, func: DiagramFunc, tags: Optional[List[str]], owned: bool) -> "Diagram":
        newd, owned = self._claim(owned)
        if tags is None or newd.contain_all_tags(tags):
            result = func(newd)
            if result is not newd:
                newd, owned = result._claim(False)
            newd._bbox_cache = None
        if newd.children:
            newd.children = [child._apply_where(func, tags, owned) for child in newd.children]
            newd._bbox_cache = None
        return newd

    def get_tagged_elements(self, tags: TagArg) -> List["Diagram"]:
        """Copies of every node (self included, pre-order) holding all ``tags``."""
        tags = _as_tag_list(tags)
        result: List[Diagram] = []
        if self.contain_all_tags(tags):
            result.append(self.copy())
        for child in self.children:
            result.extend(child.get_tagged_elements(tags))
        return result

    # ------------------------------------------------------------------
    # Kind conversion / points

    def to_curve(self) -> "Diagram":
        return self._retag(DiagramType.Polygon, DiagramType.Curve, False)

    def to_polygon(self) -> "Diagram":
        return self._retag(DiagramType.Curve, DiagramType.Polygon, False)

    def _retag(self, source: DiagramType, target: DiagramType, owned: bool) -> "Diagram":
        newd, owned = self._claim(owned)
        if newd.kind is source:
            newd.kind = target
        elif newd.kind is DiagramType.Diagram:
            newd.children = [child._retag(source, target, owned) for child in newd.children]
        elif newd.kind not in LEAF_KINDS:
            raise _unreachable(newd.kind)
        return newd

    def _require_path(self) -> Path:
        if self.path is None:
            raise GeometryError(f"{self.kind.value} diagram must have a path")
        return self.path

    def add_points(self, points: Sequence[Vector2]) -> "Diagram":
        """Append points to a polygon/curve, or to the last child of a composite."""
        newd = self.copy_if_not_mutable()
        if newd.kind in LINE_KINDS:
            newd.path = newd._require_path().add_points(points)
        elif newd.kind is DiagramType.Diagram:
            if newd.children:
                newd.children[-1] = newd.children[-1].add_points(points)
        elif newd.kind not in LEAF_KINDS:
            raise _unreachable(newd.kind)
        newd._bbox_cache = None
        return newd

    # ------------------------------------------------------------------
    # Style

    def update_style(
        self,
        name: str,
        value: str,
        excluded_types: Optional[Iterable[DiagramType]] = None,
    ) -> "Diagram":
        """Set ``style[name]`` on every leaf except those of ``excluded_types``."""
        return self._update_style(name, value, style_targets(excluded_types), False)

    def _update_style(
        self, name: str, value: str, targets: FrozenSet[DiagramType], owned: bool
    ) -> "Diagram":
        newd, owned = self._claim(owned)
        if newd.kind is DiagramType.Diagram:
            newd.children = [child._update_style(name, value, targets, owned) for child in newd.children]
        elif newd.kind in LEAF_KINDS:
            if newd.kind in targets:
                newd.style[name] = value
        else:
            raise _unreachable(newd.kind)
        return newd

    def fill(self, color: str) -> "Diagram":
        return self._update_style("fill", color, _SHAPE_STYLE_TARGETS, False)

    def stroke(self, color: str) -> "Diagram":
        return self._update_style("stroke", color, _SHAPE_STYLE_TARGETS, False)

    def strokewidth(self, width: float) -> "Diagram":
        return self._update_style("stroke-width", _num_str(width), _SHAPE_STYLE_TARGETS, False)

    def opacity(self, opacity: float) -> "Diagram":
        return self._update_style("opacity", _num_str(opacity), _ALL_LEAVES, False)

    def strokelinecap(self, linecap: str) -> "Diagram":
        return self._update_style("stroke-linecap", linecap, _ALL_LEAVES, False)

    def strokelinejoin(self, linejoin: str) -> "Diagram":
        return self._update_style("stroke-linejoin", linejoin, _ALL_LEAVES, False)

    def strokedasharray(self, dasharray: Sequence[float]) -> "Diagram":
        value = ",".join(_num_str(dash) for dash in dasharray)
        return self._update_style("stroke-dasharray", value, _ALL_LEAVES, False)

    def vectoreffect(self, effect: str) -> "Diagram":
        return self._update_style("vector-effect", effect, _ALL_LEAVES, False)

    def filter(self, filter_id: str) -> "Diagram":
        return self._update_style("filter", filter_id, _ALL_LEAVES, False)

    def textfill(self, color: str) -> "Diagram":
        return self._update_style("fill", color, _TEXT_STYLE_TARGETS, False)

    def textstroke(self, color: str) -> "Diagram":
        return self._update_style("stroke", color, _TEXT_STYLE_TARGETS, False)

    def textstrokewidth(self, width: float) -> "Diagram":
        return self._update_style("stroke-width", _num_str(width), _TEXT_STYLE_TARGETS, False)

    # ------------------------------------------------------------------
    # Text data

    def update_textdata(self, name: str, value: str) -> "Diagram":
        """Set ``textdata[name]`` on every text leaf; shapes are left alone."""
        return self._update_textdata({name: value}, False)

    def _update_textdata(self, updates: Mapping[str, str], owned: bool) -> "Diagram":
        newd, owned = self._claim(owned)
        if newd.kind in TEXT_KINDS:
            newd.textdata.update(updates)
        elif newd.kind is DiagramType.Diagram:
            newd.children = [child._update_textdata(updates, owned) for child in newd.children]
        elif newd.kind not in PATH_KINDS:
            raise _unreachable(newd.kind)
        return newd

    def fontfamily(self, fontfamily: str) -> "Diagram":
        return self.update_textdata("font-family", fontfamily)

    def fontstyle(self, fontstyle: str) -> "Diagram":
        return self.update_textdata("font-style", fontstyle)

    def fontsize(self, fontsize: float) -> "Diagram":
        return self.update_textdata("font-size", _num_str(fontsize))

    def fontweight(self, fontweight: Union[str, float]) -> "Diagram":
        if not isinstance(fontweight, str):
            fontweight = _num_str(fontweight)
        return self.update_textdata("font-weight", fontweight)

    def fontscale(self, fontscale: Union[str, float]) -> "Diagram":
        if not isinstance(fontscale, str):
            fontscale = _num_str(fontscale)
        return self.update_textdata("font-scale", fontscale)

    def textanchor(self, textanchor: str) -> "Diagram":
        return self.update_textdata("text-anchor", textanchor)

    def textdy(self, dy: str) -> "Diagram":
        return self.update_textdata("dy", dy)

    def textangle(self, angle: float) -> "Diagram":
        return self.update_textdata("angle", _num_str(angle))

    def resolved_style(self) -> StyleMap:
        """Node style layered over the configured defaults for its kind."""
        if self.kind in TEXT_KINDS:
            base = default_map("default_text_style")
        elif self.kind in PATH_KINDS:
            base = default_map("default_style")
        else:
            base = {}
        base.update(self.style)
        return base

    def resolved_textdata(self) -> TextData:
        base = default_map("default_textdata") if self.kind in TEXT_KINDS else {}
        base.update(self.textdata)
        return base

    # ------------------------------------------------------------------
    # Bounding box

    def bounding_box(self) -> BoundingBox:
        """``(min, max)`` corners; memoized until the geometry changes."""
        caching = bbox_caching_enabled()
        if caching and self._bbox_cache is not None:
            return self._bbox_cache
        bbox = self._compute_bounding_box()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("bounding box computed for %s node", self.kind.value)
        if caching:
            self._bbox_cache = bbox
        return bbox

    def _compute_bounding_box(self) -> BoundingBox:
        if self.kind is DiagramType.Diagram:
            minx = miny = math.inf
            maxx = maxy = -math.inf
            for child in self.children:
                lo, hi = child.bounding_box()
                minx = min(minx, lo.x)
                miny = min(miny, lo.y)
                maxx = max(maxx, hi.x)
                maxy = max(maxy, hi.y)
            return V2(minx, miny), V2(maxx, maxy)
        if self.kind in PATH_KINDS:
            arr = self._require_path().as_array()
            if arr.shape[0] == 0:
                return V2(math.inf, math.inf), V2(-math.inf, -math.inf)
            lo = arr.min(axis=0)
            hi = arr.max(axis=0)
            return V2(lo[0], lo[1]), V2(hi[0], hi[1])
        if self.kind in TEXT_KINDS:
            return self.origin, self.origin
        raise _unreachable(self.kind)

    # ------------------------------------------------------------------
    # Transforms

    def transform(self, func: Callable[[Vector2], Vector2]) -> "Diagram":
        """Map every point of the subtree, and every origin, through ``func``."""
        return self._transform(func, False)

    def _transform(self, func: Callable[[Vector2], Vector2], owned: bool) -> "Diagram":
        newd, owned = self._claim(owned)
        newd._bbox_cache = None
        newd.children = [child._transform(func, owned) for child in newd.children]
        if newd.path is not None:
            newd.path = newd.path.transform(func)
        newd.origin = func(newd.origin)
        return newd

    def translate(self, v: Vector2) -> "Diagram":
        cached = self._bbox_cache
        newd = self.transform(Transform.translate(v))
        if cached is not None and bbox_caching_enabled():
            newd._bbox_cache = (cached[0].add(v), cached[1].add(v))
        return newd

    def position(self, v: Vector2 = V2(0, 0)) -> "Diagram":
        """Translate so that the origin lands on ``v``."""
        return self.translate(v.sub(self.origin))

    def rotate(self, angle: float, pivot: Optional[Vector2] = None) -> "Diagram":
        if pivot is None:
            pivot = self.origin
        return self.transform(Transform.rotate(angle, pivot))

    def scale(self, factor: Union[float, Vector2], origin: Optional[Vector2] = None) -> "Diagram":
        if not isinstance(factor, Vector2):
            factor = V2(factor, factor)
        if origin is None:
            origin = self.origin
        return self.transform(Transform.scale(factor, origin))

    def scaletofit(self, width: float, height: float) -> "Diagram":
        """Scale uniformly about the origin to fit inside ``width`` x ``height``."""
        lo, hi = self.bounding_box()
        ratios = []
        if hi.x - lo.x > 0:
            ratios.append(width / (hi.x - lo.x))
        if hi.y - lo.y > 0:
            ratios.append(height / (hi.y - lo.y))
        if not ratios:
            return self.copy_if_not_mutable()
        return self.scale(min(ratios))

    def skew_x(self, angle: float, ybase: Optional[float] = None) -> "Diagram":
        if ybase is None:
            ybase = self.origin.y
        return self.transform(Transform.skew_x(angle, ybase))

    def skew_y(self, angle: float, xbase: Optional[float] = None) -> "Diagram":
        if xbase is None:
            xbase = self.origin.x
        return self.transform(Transform.skew_y(angle, xbase))

    def reflect_over_point(self, p: Vector2) -> "Diagram":
        return self.transform(Transform.reflect_over_point(p))

    def reflect_over_line(self, p1: Vector2, p2: Vector2) -> "Diagram":
        return self.transform(Transform.reflect_over_line(p1, p2))

    def reflect(self, p1: Optional[Vector2] = None, p2: Optional[Vector2] = None) -> "Diagram":
        """Point reflection through the origin or ``p1``, or across line ``p1``-``p2``."""
        if p1 is None and p2 is None:
            return self.reflect_over_point(self.origin)
        if p1 is None:
            raise GeometryError("reflect needs p1 when p2 is given")
        if p2 is None:
            return self.reflect_over_point(p1)
        return self.reflect_over_line(p1, p2)

    def vflip(self, a: Optional[float] = None) -> "Diagram":
        """Mirror across the horizontal line ``y == a`` (default: origin.y)."""
        if a is None:
            a = self.origin.y
        return self.reflect(V2(0, a), V2(1, a))

    def hflip(self, a: Optional[float] = None) -> "Diagram":
        """Mirror across the vertical line ``x == a`` (default: origin.x)."""
        if a is None:
            a = self.origin.x
        return self.reflect(V2(a, 0), V2(a, 1))

    # ------------------------------------------------------------------
    # Anchors / origin

    def get_anchor(self, anchor: Anchor) -> Vector2:
        vertical, horizontal = split_anchor(anchor)
        lo, hi = self.bounding_box()
        x = {"left": lo.x, "center": (lo.x + hi.x) / 2, "right": hi.x}[horizontal]
        y = {"top": hi.y, "center": (lo.y + hi.y) / 2, "bottom": lo.y}[vertical]
        return V2(x, y)

    def move_origin(self, pos: Union[Vector2, Anchor]) -> "Diagram":
        """Relocate the origin to a point or a named anchor; geometry is untouched."""
        target = pos if isinstance(pos, Vector2) else self.get_anchor(pos)
        newd = self.copy_if_not_mutable()
        newd.origin = target
        if newd.kind in TEXT_KINDS:
            newd._bbox_cache = None
        return newd

    def move_origin_text(self, anchor: Anchor) -> "Diagram":
        """Align text so that ``anchor`` of the rendered label sits on its origin."""
        vertical, horizontal = split_anchor(anchor)
        updates = {"text-anchor": _TEXT_ANCHOR_BY_COLUMN[horizontal], "dy": _TEXT_DY_BY_ROW[vertical]}
        return self._update_textdata(updates, False)

    # ------------------------------------------------------------------
    # Arc length

    def path_length(self) -> float:
        if self.kind is DiagramType.Diagram:
            return sum(child.path_length() for child in self.children)
        if self.kind in LINE_KINDS:
            return self._require_path().length(closed=self.kind is DiagramType.Polygon)
        if self.kind in LEAF_KINDS:
            raise GeometryError(f"path_length is not defined for {self.kind.value} diagrams")
        raise _unreachable(self.kind)

    def parametric_point(self, t: float, segment_index: Optional[int] = None) -> Vector2:
        """Point at arc-length fraction ``t``; composites share ``t`` by child length."""
        if self.kind is DiagramType.Diagram:
            if not self.children:
                raise GeometryError("parametric_point needs a diagram with children")
            if segment_index is not None:
                raise GeometryError("segment_index is not supported on composite diagrams")
            lengths = [child.path_length() for child in self.children]
            index, local_t = locate_arc_parameter(lengths, t)
            return self.children[index].parametric_point(local_t)
        if self.kind is DiagramType.Curve:
            return self._require_path().parametric_point(t, False, segment_index)
        if self.kind is DiagramType.Polygon:
            return self._require_path().parametric_point(t, True, segment_index)
        if self.kind in LEAF_KINDS:
            raise GeometryError(f"parametric_point is not defined for {self.kind.value} diagrams")
        raise _unreachable(self.kind)

    # ------------------------------------------------------------------
    # Debugging aids

    def debug_bbox(self) -> "Diagram":
        """Dashed rectangle outlining the bounding box."""
        from .shapes import rectangle_corner

        lo, hi = self.bounding_box()
        dash = max(hi.x - lo.x, hi.y - lo.y) / 20 or 1
        return (
            rectangle_corner(lo, hi)
            .strokedasharray([dash])
            .stroke("gray")
            .fill("none")
            .append_tags(TAG.DEBUG_BBOX)
        )

    def debug(self) -> "Diagram":
        """This diagram combined with its bbox outline and an origin marker."""
        from .shapes import circle

        lo, hi = self.bounding_box()
        radius = max(hi.x - lo.x, hi.y - lo.y) / 50 or 0.5
        marker = circle(radius).fill("red").stroke("none").position(self.origin)
        return diagram_combine(self, self.debug_bbox(), marker.append_tags(TAG.DEBUG_ORIGIN))

    # ------------------------------------------------------------------
    # Structural serialization

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "origin": [self.origin.x, self.origin.y],
            "path": None if self.path is None else [[p.x, p.y] for p in self.path.points],
            "children": [child.to_dict() for child in self.children],
            "style": dict(self.style),
            "textdata": dict(self.textdata),
            "multilinedata": copy.deepcopy(self.multilinedata),
            "imgdata": dict(self.imgdata),
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Diagram":
        try:
            kind = DiagramType(data["kind"])
        except ValueError as exc:
            raise _unreachable(data["kind"]) from exc
        points = data.get("path")
        origin = data.get("origin", (0.0, 0.0))
        return cls(
            kind=kind,
            path=None if points is None else Path([V2(x, y) for x, y in points]),
            children=[cls.from_dict(child) for child in data.get("children", [])],
            origin=V2(origin[0], origin[1]),
            style=dict(data.get("style", {})),
            textdata=dict(data.get("textdata", {})),
            multilinedata=copy.deepcopy(data.get("multilinedata", {})),
            imgdata=dict(data.get("imgdata", {})),
            tags=list(data.get("tags", [])),
        )


# ------------------------------------------------------------------
# Primitive constructors


def _centered(d: Diagram) -> Diagram:
    d.origin = d.get_anchor("center-center")
    return d


def polygon(points: Sequence[Vector2]) -> Diagram:
    """Closed shape through ``points``; the origin is the bbox center."""
    if len(points) < 3:
        raise GeometryError(f"polygon needs at least 3 points, got {len(points)}")
    return _centered(Diagram(DiagramType.Polygon, path=Path(list(points))))


def curve(points: Sequence[Vector2]) -> Diagram:
    """Open polyline through ``points``; the origin is the bbox center."""
    if len(points) < 1:
        raise GeometryError("curve needs at least 1 point")
    return _centered(Diagram(DiagramType.Curve, path=Path(list(points))))


def line(start: Vector2, end: Vector2) -> Diagram:
    d = curve([start, end])
    d.tags.append(TAG.LINE)
    return d


def text(s: str) -> Diagram:
    return Diagram(DiagramType.Text, textdata={"text": s})


def multiline_text(
    spans: Sequence[Union[Tuple[str], Tuple[str, Mapping[str, str]]]],
    linespace: Optional[str] = None,
) -> Diagram:
    """Text block built from already parsed ``(text,)``/``(text, style)`` spans.

    A span whose text is ``"\\n"`` starts a new line.
    """
    content = []
    for span in spans:
        style = dict(span[1]) if len(span) > 1 else {}
        content.append({"text": span[0], "style": style})
    multilinedata = {
        "content": content,
        "scale-factor": 1.0,
        "linespace": linespace if linespace is not None else default_linespace(),
    }
    return Diagram(DiagramType.MultilineText, multilinedata=multilinedata)


def image(src: str, width: float, height: float) -> Diagram:
    """Image placeholder occupying a ``width`` x ``height`` box centered at the origin."""
    w, h = width / 2, height / 2
    path = Path([V2(-w, -h), V2(w, -h), V2(w, h), V2(-w, h)])
    return Diagram(DiagramType.Image, path=path, imgdata={"src": src})


def empty(v: Vector2 = V2(0, 0)) -> Diagram:
    """Invisible single-point marker at ``v``."""
    d = curve([v])
    d.style.update({"stroke": "none", "fill": "none"})
    d.tags.append(TAG.EMPTY)
    return d


@debug_log_call(logger, log_result=False)
def diagram_combine(*diagrams: Diagram) -> Diagram:
    """Group ``diagrams`` as children of a new composite.

    The composite is mutable only when every input is mutable, and its
    origin is the first input's origin.
    """
    if not diagrams:
        return empty()
    children = [d.copy_if_not_mutable() for d in diagrams]
    newd = Diagram(DiagramType.Diagram, children=children, origin=diagrams[0].origin)
    newd.mutable = all(d.mutable for d in diagrams)
    logger.debug("combine: %d children, mutable=%s", len(children), newd.mutable)
    return newd


__all__ = [
    "DiagramType",
    "Diagram",
    "PATH_KINDS",
    "TEXT_KINDS",
    "LEAF_KINDS",
    "LINE_KINDS",
    "style_targets",
    "polygon",
    "curve",
    "line",
    "text",
    "multiline_text",
    "image",
    "empty",
    "diagram_combine",
]
