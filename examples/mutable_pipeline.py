"""Example: build a scene in place with mutable diagrams, then freeze it."""

import math

from diagramatics import V2, diagram_combine, text
from diagramatics.shapes import arrow, regular_polygon


def main() -> None:
    hexagon = regular_polygon(6, 10).mut()
    hexagon.fill("lightyellow").stroke("orange").strokewidth(2)

    arrows = [arrow(V2(0, 0), hexagon.parametric_point(i / 6), headsize=1.5).mut() for i in range(6)]
    labels = [
        text(str(i)).fontsize(6).position(hexagon.parametric_point(i / 6).scale(1.2)).mut()
        for i in range(6)
    ]

    scene = diagram_combine(hexagon, *arrows, *labels)
    print("Mutable scene:", scene.mutable)

    scene.rotate(math.pi / 6).apply_to_tagged_recursive("arrow-head", lambda d: d.fill("red"))
    frozen = scene.immut()
    print("Frozen copy mutable:", frozen.mutable)
    print("Perimeter:", f"{hexagon.path_length():.3f}")
    lo, hi = frozen.bounding_box()
    print(f"Bounding box: ({lo.x:.2f}, {lo.y:.2f}) .. ({hi.x:.2f}, {hi.y:.2f})")


if __name__ == "__main__":
    main()
