from typing import Iterable, List, Optional

from .diagram import Diagram, DiagramType, PATH_KINDS
from .types import GeometryError
from .vector import Vector2


def number_str(value: float) -> str:
    return f"{value:.6g}"


def vector_str(v: Vector2) -> str:
    return f"({number_str(v.x)}, {number_str(v.y)})"


def _format_map(values: dict) -> str:
    if not values:
        return ""
    return " {" + " ".join(f"{key}={values[key]}" for key in sorted(values)) + "}"


def format_node(d: Diagram) -> str:
    """One-line summary of a single node, without its children."""
    kind = d.kind
    if kind in PATH_KINDS:
        head = f"{kind.value} points={'none' if d.path is None else len(d.path)}"
        if kind is DiagramType.Image:
            head += f" src={d.imgdata.get('src', '')!r}"
    elif kind is DiagramType.Text:
        head = f"text {d.textdata.get('text', '')!r}"
    elif kind is DiagramType.MultilineText:
        head = f"multilinetext spans={len(d.multilinedata.get('content', []))}"
    elif kind is DiagramType.Diagram:
        head = f"diagram children={len(d.children)}"
    else:
        raise GeometryError(f"unknown diagram kind {kind!r}")
    out = f"{head} origin={vector_str(d.origin)}"
    if d.tags:
        out += " #" + ",".join(d.tags)
    return out + _format_map(d.style)


def _walk(d: Diagram, depth: int, tags: Optional[List[str]], indent: str, lines: List[str]) -> None:
    if tags is None or d.contain_all_tags(tags):
        lines.append(f"{indent * depth}{format_node(d)}")
    for child in d.children:
        _walk(child, depth + 1, tags, indent, lines)


def format_tree(d: Diagram, *, tags: Optional[Iterable[str]] = None, indent: str = "  ") -> str:
    """Indented outline of ``d``; with ``tags`` only nodes holding all of them."""
    lines: List[str] = []
    _walk(d, 0, None if tags is None else list(tags), indent, lines)
    return "\n".join(lines) + "\n"


def format_bounding_box(d: Diagram) -> str:
    lo, hi = d.bounding_box()
    return f"bbox {vector_str(lo)} .. {vector_str(hi)}"
