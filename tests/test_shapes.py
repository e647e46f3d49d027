import math

from diagramatics import TAG, V2, DiagramType
from diagramatics import shapes

from _helpers import close_bbox, close_vec


def test_rectangle_is_centered():
    r = shapes.rectangle(4, 2)
    assert r.kind is DiagramType.Polygon
    assert r.origin == V2(0, 0)
    assert r.bounding_box() == (V2(-2, -1), V2(2, 1))
    assert shapes.square(3).bounding_box() == (V2(-1.5, -1.5), V2(1.5, 1.5))


def test_rectangle_corner():
    r = shapes.rectangle_corner(V2(1, 1), V2(4, 3))
    assert r.bounding_box() == (V2(1, 1), V2(4, 3))
    assert r.origin == V2(2.5, 2)


def test_regular_polygon_starts_on_top():
    p = shapes.regular_polygon(4, 1)
    assert close_vec(p.path.points[0], V2(0, 1))
    assert close_bbox(p.bounding_box(), (V2(-1, -1), V2(1, 1)))


def test_regular_polygon_side_length():
    p = shapes.regular_polygon_side(6, 2)
    first, second = p.path.points[:2]
    assert math.isclose(first.sub(second).length(), 2)


def test_circle_and_arc():
    c = shapes.circle(2, points=40)
    assert c.contain_tag("circle")
    assert len(c.path) == 40
    assert all(math.isclose(p.length(), 2) for p in c.path.points)

    a = shapes.arc(2, math.pi / 2, points=5)
    assert a.kind is DiagramType.Curve
    assert a.origin == V2(0, 0)
    assert close_vec(a.path.points[0], V2(2, 0))
    assert close_vec(a.path.points[-1], V2(0, 2))


def test_arrow_head_chevron():
    head = shapes.arrow_head(1)
    assert head.origin == V2(0, 0)
    assert head.contain_tag(TAG.ARROW_HEAD)
    assert head.bounding_box() == (V2(-1, -1), V2(1, 0))


def test_arrow_places_head_at_end():
    a = shapes.arrow(V2(0, 0), V2(10, 0), headsize=2)
    body, head = a.children
    assert a.origin == V2(0, 0)
    assert body.contain_all_tags([TAG.LINE, TAG.ARROW_LINE])
    assert head.contain_tag(TAG.ARROW_HEAD)
    assert head.style["fill"] == "black"
    assert close_bbox(head.bounding_box(), (V2(8, -1), V2(10, 1)))
    assert close_bbox(a.bounding_box(), (V2(0, -1), V2(10, 1)))


def test_arrow_head_follows_direction():
    a = shapes.arrow(V2(0, 0), V2(0, 5), headsize=2)
    assert close_bbox(a.children[1].bounding_box(), (V2(-1, 3), V2(1, 5)))


def test_double_arrow_is_symmetric():
    d = shapes.double_arrow(2, 1, "red")
    assert len(d.children) == 3
    assert close_bbox(d.bounding_box(), (V2(-1, -2), V2(1, 2)))
    assert close_vec(d.origin, V2(0, 0))
    assert all(leaf.style["stroke"] == "red" for leaf in d.collect_children())


def test_locators():
    vertical = shapes.vertical_locator()
    assert vertical.contain_tag(TAG.LOCATOR)
    assert close_bbox(vertical.bounding_box(), (V2(-3.6, -3.6), V2(3.6, 3.6)))

    horizontal = shapes.horizontal_locator()
    assert close_bbox(horizontal.bounding_box(), (V2(-3.6, -3.6), V2(3.6, 3.6)))
    shaft = horizontal.children[2].children[2]
    assert close_vec(shaft.path.points[0], V2(-1.5, 0))

    span = shapes.span_locator(radius=1)
    assert span.contain_tag(TAG.LOCATOR)
    assert span.children[2].style["fill"] == shapes.LOCATOR_COLOR
