import math
from typing import Callable, Dict

from . import shapes
from .diagram import Diagram, diagram_combine, multiline_text, text
from .printer import format_bounding_box, format_tree
from .vector import V2


def locator_scene() -> Diagram:
    vertical = shapes.vertical_locator()
    horizontal = shapes.horizontal_locator().translate(V2(10, 0))
    span = shapes.span_locator().translate(V2(20, 0))
    return diagram_combine(vertical, horizontal, span)


def arrows_scene() -> Diagram:
    hexagon = shapes.regular_polygon(6, 10).fill("lightblue").append_tags("hexagon")
    arrows = [
        shapes.arrow(V2(0, 0), hexagon.parametric_point(t), headsize=1.5)
        for t in (0.0, 0.25, 0.5, 0.75)
    ]
    return diagram_combine(hexagon, *arrows)


def labels_scene() -> Diagram:
    box = shapes.rectangle(20, 10).stroke("gray").append_tags("box")
    labels = [
        text(anchor).fontsize(8).position(box.get_anchor(anchor)).move_origin_text(anchor)
        for anchor in ("top-left", "top-right", "bottom-left", "bottom-right")
    ]
    caption = multiline_text([("Box", {"font-weight": "bold"}), ("\n",), ("20 x 10",)])
    caption = caption.position(box.get_anchor("center-center"))
    return diagram_combine(box, caption, *labels).rotate(math.pi / 12)


SCENES: Dict[str, Callable[[], Diagram]] = {
    "locator": locator_scene,
    "arrows": arrows_scene,
    "labels": labels_scene,
}


def run():
    for name, build in SCENES.items():
        scene = build()
        print(f"Scene {name}:")
        print(format_tree(scene))
        print(format_bounding_box(scene))
        print()


if __name__ == "__main__":
    run()
