import math

import numpy as np
import pytest

from diagramatics import GeometryError, Path, V2


def _close(a, b, tol=1e-9):
    return math.isclose(a.x, b.x, abs_tol=tol) and math.isclose(a.y, b.y, abs_tol=tol)


def _corner_path():
    return Path([V2(0, 0), V2(10, 0), V2(10, 10)])


def _square_path():
    return Path([V2(0, 0), V2(2, 0), V2(2, 2), V2(0, 2)])


def test_length_open_and_closed():
    assert Path([V2(0, 0), V2(3, 4), V2(3, 10)]).length() == 11
    assert _square_path().length() == 6
    assert _square_path().length(closed=True) == 8
    assert Path([V2(1, 1)]).length() == 0


def test_parametric_point_uses_arc_length():
    path = _corner_path()
    assert path.parametric_point(0.5) == V2(10, 0)
    assert path.parametric_point(0.25) == V2(5, 0)
    assert path.parametric_point(0.0) == V2(0, 0)
    assert path.parametric_point(1.0) == V2(10, 10)
    assert _close(path.parametric_point(0.75), V2(10, 5))


def test_parametric_point_unequal_segments():
    path = Path([V2(0, 0), V2(1, 0), V2(1, 3)])
    # 4 units total: the short first segment only consumes a quarter of t
    assert _close(path.parametric_point(0.25), V2(1, 0))
    assert _close(path.parametric_point(0.5), V2(1, 1))


def test_parametric_point_closed_includes_closing_edge():
    path = _square_path()
    assert _close(path.parametric_point(0.875, closed=True), V2(0, 1))
    assert _close(path.parametric_point(1.0, closed=True), V2(0, 0))


def test_parametric_point_skips_zero_length_segments():
    path = Path([V2(0, 0), V2(0, 0), V2(4, 0)])
    assert path.parametric_point(0.0) == V2(0, 0)
    assert _close(path.parametric_point(0.5), V2(2, 0))


def test_segment_mode_extrapolates():
    path = _corner_path()
    assert path.parametric_point(1.5, segment_index=0) == V2(15, 0)
    assert path.parametric_point(-0.5, segment_index=0) == V2(-5, 0)
    assert path.parametric_point(0.5, segment_index=1) == V2(10, 5)


def test_segment_index_range():
    path = _corner_path()
    with pytest.raises(GeometryError):
        path.parametric_point(0.5, segment_index=2)
    with pytest.raises(GeometryError):
        path.parametric_point(0.5, segment_index=-1)
    assert path.parametric_point(0.5, closed=True, segment_index=2) == V2(5, 5)


@pytest.mark.parametrize("t", [-0.1, 1.1])
def test_whole_path_t_out_of_range(t):
    with pytest.raises(GeometryError):
        _corner_path().parametric_point(t)


def test_whole_path_needs_two_points():
    with pytest.raises(GeometryError):
        Path([V2(1, 1)]).parametric_point(0.5)


def test_immutable_path_edits_return_copies():
    path = _corner_path()
    extended = path.add_points([V2(0, 10)])
    reversed_path = path.reverse()
    moved = path.transform(lambda p: p.add(V2(1, 1)))

    assert path.points == [V2(0, 0), V2(10, 0), V2(10, 10)]
    assert extended.points[-1] == V2(0, 10)
    assert reversed_path.points == [V2(10, 10), V2(10, 0), V2(0, 0)]
    assert moved.points[0] == V2(1, 1)
    assert extended is not path and reversed_path is not path and moved is not path


def test_mutable_path_edits_in_place():
    path = _corner_path().mut()
    assert path.add_points([V2(0, 10)]) is path
    assert path.reverse() is path
    assert path.points[0] == V2(0, 10)

    frozen = path.immut()
    assert not frozen.mutable
    frozen_points = list(frozen.points)
    path.add_points([V2(5, 5)])
    assert frozen.points == frozen_points


def test_copy_is_independent():
    path = _corner_path()
    clone = path.copy()
    assert clone == path
    assert clone.points is not path.points


def test_as_array():
    arr = _square_path().as_array()
    assert arr.shape == (4, 2)
    closed = _square_path().as_array(closed=True)
    assert closed.shape == (5, 2)
    assert np.array_equal(closed[0], closed[-1])
    assert Path().as_array().shape == (0, 2)
