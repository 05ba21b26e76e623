import numpy as np
import pytest

from point_table import InvalidArgument, Point, Rectangle
from point_table.geometry import require_k, require_point, require_radius, require_rect


def test_point_equality_is_exact():
    assert Point(0.1, 0.2) == Point(0.1, 0.2)
    assert Point(0.1, 0.2) != Point(0.1, 0.2000000001)
    assert hash(Point(0.0, 0.0)) == hash(Point(-0.0, -0.0))


def test_point_rejects_non_finite():
    with pytest.raises(InvalidArgument):
        Point(float("nan"), 0.0)
    with pytest.raises(InvalidArgument):
        Point(0.0, float("inf"))
    with pytest.raises(InvalidArgument):
        Point(None, 0.0)


def test_point_distances():
    assert Point(0.0, 0.0).distance_squared_to(Point(3.0, 4.0)) == 25.0
    assert Point(0.0, 0.0).distance_to(Point(3.0, 4.0)) == 5.0
    assert np.array_equal(Point(0.25, 0.75).to_array(), np.array([0.25, 0.75]))
    assert str(Point(0.5, 0.25)) == "(0.5, 0.25)"


def test_point_order_is_x_then_y():
    assert sorted([Point(0.5, 0.1), Point(0.2, 0.9), Point(0.2, 0.3)]) == [
        Point(0.2, 0.3),
        Point(0.2, 0.9),
        Point(0.5, 0.1),
    ]


def test_rectangle_rejects_inverted_bounds():
    with pytest.raises(InvalidArgument):
        Rectangle(1.0, 0.0, 0.0, 1.0)
    with pytest.raises(InvalidArgument):
        Rectangle(0.0, 1.0, 1.0, 0.0)


def test_rectangle_contains_is_closed():
    rect = Rectangle(0.2, 0.2, 0.6, 0.6)
    assert rect.contains(Point(0.2, 0.2))
    assert rect.contains(Point(0.6, 0.4))
    assert rect.contains(Point(0.4, 0.4))
    assert not rect.contains(Point(0.61, 0.4))


def test_rectangle_intersects_is_closed():
    rect = Rectangle(0.0, 0.0, 0.5, 0.5)
    assert rect.intersects(Rectangle(0.5, 0.5, 1.0, 1.0))
    assert rect.intersects(Rectangle(0.1, 0.1, 0.2, 0.2))
    assert not rect.intersects(Rectangle(0.51, 0.0, 1.0, 1.0))
    assert not rect.intersects(Rectangle(0.0, 0.6, 1.0, 1.0))


def test_rectangle_distance_squared_to():
    rect = Rectangle(0.0, 0.0, 1.0, 1.0)
    assert rect.distance_squared_to(Point(0.5, 0.5)) == 0.0
    assert rect.distance_squared_to(Point(2.0, 0.5)) == 1.0
    assert rect.distance_squared_to(Point(-3.0, -4.0)) == 25.0
    assert rect.distance_to(Point(4.0, 5.0)) == 5.0


def test_rectangle_split():
    rect = Rectangle.unit()
    left, right = rect.split(0.25, True)
    assert left == Rectangle(0.0, 0.0, 0.25, 1.0)
    assert right == Rectangle(0.25, 0.0, 1.0, 1.0)
    bottom, top = rect.split(0.75, False)
    assert bottom == Rectangle(0.0, 0.0, 1.0, 0.75)
    assert top == Rectangle(0.0, 0.75, 1.0, 1.0)
    assert str(rect) == "[0.0, 1.0] x [0.0, 1.0]"


def test_require_helpers():
    with pytest.raises(InvalidArgument):
        require_point(None)
    with pytest.raises(InvalidArgument):
        require_point((0.5, 0.5))
    with pytest.raises(InvalidArgument):
        require_rect(None)
    with pytest.raises(InvalidArgument):
        require_k(-1)
    with pytest.raises(InvalidArgument):
        require_k(1.5)
    with pytest.raises(InvalidArgument):
        require_radius(-0.1)
    assert require_k(np.int64(3)) == 3
