"""Example: lay out locator widgets along a path and inspect the result."""

from diagramatics import V2, curve, diagram_combine, format_tree
from diagramatics.shapes import horizontal_locator, span_locator, vertical_locator
from diagramatics.printer import format_bounding_box


def main() -> None:
    track = curve([V2(0, 0), V2(30, 0), V2(30, 20), V2(60, 20)]).stroke("gray")
    widgets = [
        vertical_locator().position(track.parametric_point(0.0)),
        horizontal_locator().position(track.parametric_point(0.5)),
        span_locator(radius=2).position(track.parametric_point(1.0)),
    ]
    scene = diagram_combine(track, *widgets)

    print("Scene:")
    print(format_tree(scene), end="")
    print(format_bounding_box(scene))

    locators = scene.get_tagged_elements("locator")
    print(f"\nLocators: {len(locators)}")
    for widget in locators:
        print(f"  at ({widget.origin.x:.2f}, {widget.origin.y:.2f})")


if __name__ == "__main__":
    main()
