from diagramatics import V2, Diagram, DiagramType, TAG, curve, diagram_combine, multiline_text, text

from _helpers import sample_tree, unit_square


def test_edits_leave_immutable_receiver_untouched():
    d = sample_tree()
    snapshot = d.to_dict()

    filled = d.fill("red")
    moved = d.translate(V2(10, 10))
    tagged = d.append_tags("group")

    assert d.to_dict() == snapshot
    assert filled is not d and moved is not d and tagged is not d
    assert filled.children[0].style["fill"] == "red"
    assert tagged.tags == ["group"]


def test_result_differs_only_in_edited_field():
    d = unit_square()
    filled = d.fill("red")
    assert filled.style == {"fill": "red"}
    restyled = filled.copy()
    restyled.style = {}
    assert restyled == d


def test_copy_is_structurally_equal_and_shares_nothing_mutable():
    d = diagram_combine(sample_tree(), multiline_text([("a",), ("\n",), ("b", {"fill": "red"})]))
    clone = d.copy()

    assert clone == d
    assert clone is not d
    assert clone.children[0] is not d.children[0]
    assert clone.children[0].children[0].path is not d.children[0].children[0].path
    assert clone.children[0].children[0].path.points is not d.children[0].children[0].path.points
    assert clone.style is not d.style
    assert clone.tags is not d.tags
    clone_content = clone.children[1].multilinedata["content"]
    assert clone_content is not d.children[1].multilinedata["content"]
    assert clone_content[2]["style"] is not d.children[1].multilinedata["content"][2]["style"]


def test_editing_a_mutable_copy_does_not_touch_the_source():
    d = unit_square()
    clone = d.copy().mut()

    assert clone.translate(V2(5, 5)) is clone
    clone.add_points([V2(-1, -1)])

    assert d.bounding_box() == (V2(0, 0), V2(2, 2))
    assert len(d.path) == 4
    assert clone.bounding_box() == (V2(-1, -1), V2(7, 7))


def test_copy_resets_mutability():
    d = sample_tree().mut()
    clone = d.copy()
    assert not clone.mutable
    assert not any(child.mutable for child in clone.children)
    assert not clone.children[0].path.mutable


def test_mut_marks_whole_subtree_and_edits_in_place():
    d = sample_tree().mut()
    kids = list(d.children)

    assert d.children[0].mutable and d.children[1].children[0].mutable
    assert d.children[0].path.mutable

    out = d.fill("blue")
    assert out is d
    assert d.children[0] is kids[0]
    assert kids[0].style["fill"] == "blue"
    assert kids[1].children[0].style["fill"] == "blue"


def test_mut_parent_only_copies_immutable_children_on_edit():
    d = diagram_combine(unit_square(), unit_square().translate(V2(3, 0)))
    d.mut_parent_only()
    old_children = list(d.children)

    out = d.fill("red")

    assert out is d
    assert all(child.style["fill"] == "red" for child in d.children)
    assert all("fill" not in child.style for child in old_children)
    assert d.children[0] is not old_children[0]


def test_immut_returns_independent_immutable_tree():
    d = sample_tree().mut()
    frozen = d.immut()

    assert frozen is not d
    assert not frozen.mutable and not frozen.children[1].children[0].mutable

    d.fill("green")
    assert "fill" not in frozen.children[0].style


def test_combine_mutability_is_conjunction():
    a = unit_square().mut()
    b = unit_square().mut()
    c = unit_square()

    both = diagram_combine(a, b)
    assert both.mutable
    assert both.children[0] is a and both.children[1] is b

    mixed = diagram_combine(a, c)
    assert not mixed.mutable
    assert mixed.children[0] is a
    assert mixed.children[1] is not c

    assert not diagram_combine(c, unit_square()).mutable


def test_combine_takes_origin_of_first_input():
    a = unit_square().move_origin(V2(-4, 7))
    b = text("x").position(V2(5, 5))

    combined = diagram_combine(a, b)

    assert combined.kind is DiagramType.Diagram
    assert combined.origin == V2(-4, 7)
    assert a.combine(b) == combined


def test_combine_without_inputs_is_empty_marker():
    d = diagram_combine()
    assert d.kind is DiagramType.Curve
    assert d.contain_tag(TAG.EMPTY)
    assert d.style == {"stroke": "none", "fill": "none"}


def test_combine_inputs_are_not_aliased_when_immutable():
    a = curve([V2(0, 0), V2(1, 1)])
    combined = diagram_combine(a).mut()
    combined.add_points([V2(2, 2)])
    assert len(a.path) == 2
    assert len(combined.children[0].path) == 3


def test_copy_keeps_bounding_box_cache(monkeypatch):
    d = sample_tree()
    expected = d.bounding_box()
    clone = d.copy()

    def _fail(self):
        raise AssertionError("bounding box recomputed")

    monkeypatch.setattr(Diagram, "_compute_bounding_box", _fail)
    assert clone.bounding_box() == expected


def test_equality_ignores_mutability_flag():
    assert unit_square().mut() == unit_square()
