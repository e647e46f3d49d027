from . import transform
from . import transform as Transform
from .config import DiagramConfig, get_config, reset_config, set_config
from .diagram import (
    LEAF_KINDS,
    LINE_KINDS,
    PATH_KINDS,
    TEXT_KINDS,
    Diagram,
    DiagramType,
    curve,
    diagram_combine,
    empty,
    image,
    line,
    multiline_text,
    polygon,
    style_targets,
    text,
)
from .path import Path
from .printer import format_node, format_tree
from .shapes import (
    arc,
    arrow,
    arrow_head,
    circle,
    double_arrow,
    horizontal_locator,
    rectangle,
    rectangle_corner,
    regular_polygon,
    regular_polygon_side,
    span_locator,
    square,
    vertical_locator,
)
from .tags import TAG
from .types import ANCHORS, Anchor, BoundingBox, GeometryError
from .vector import V2, Vdir, Vector2

__all__ = [
    'Vector2',
    'V2',
    'Vdir',
    'Transform',
    'transform',
    'Path',
    'Diagram',
    'DiagramType',
    'PATH_KINDS',
    'TEXT_KINDS',
    'LEAF_KINDS',
    'LINE_KINDS',
    'style_targets',
    'polygon',
    'curve',
    'line',
    'text',
    'multiline_text',
    'image',
    'empty',
    'diagram_combine',
    'rectangle',
    'rectangle_corner',
    'square',
    'regular_polygon',
    'regular_polygon_side',
    'circle',
    'arc',
    'arrow',
    'arrow_head',
    'double_arrow',
    'vertical_locator',
    'horizontal_locator',
    'span_locator',
    'TAG',
    'ANCHORS',
    'Anchor',
    'BoundingBox',
    'GeometryError',
    'DiagramConfig',
    'get_config',
    'set_config',
    'reset_config',
    'format_node',
    'format_tree',
]
