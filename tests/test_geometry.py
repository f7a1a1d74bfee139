import math

import pytest

from multifusion.geometry import (
    Point,
    Rect,
    Transform,
    bounding_rect,
    distance_to_segment,
    flatten_cubic,
    interpolate,
    point_in_polygon,
)


def test_point_add_sub_round_trip():
    a = Point(1.5, -2.0)
    b = Point(3.0, 4.25)
    assert (a + b) - b == a


def test_point_mul_div_round_trip():
    a = Point(3.0, -6.0)
    assert (a * 4) / 4 == a
    assert 2 * a == a * 2


def test_point_div_by_zero():
    with pytest.raises(ZeroDivisionError):
        Point(1, 1) / 0


def test_rect_normalized_is_idempotent():
    r = Rect(10, 10, -4, -6)
    n = r.normalized()
    assert n.width == 4 and n.height == 6
    assert n.x + n.width == 10
    assert n.normalized() == n


def test_rect_contains():
    r = Rect(0, 0, 10, 10)
    assert r.contains(Point(5, 5))
    assert r.contains(Point(10, 10))
    assert not r.contains(Point(11, 5))


def test_rect_united_with_null():
    r = Rect(1, 2, 3, 4)
    assert Rect().united(r) == r
    assert r.united(Rect()) == r


def test_rect_united_covers_both():
    a = Rect(0, 0, 5, 5)
    b = Rect(10, -3, 2, 2)
    u = a | b
    for corner in (a.top_left, a.bottom_right, b.top_left, b.bottom_right):
        assert u.contains(corner)


def test_rect_center_is_midpoint():
    r = Rect(2, 4, 10, 20)
    c = r.center()
    assert c - r.top_left == r.bottom_right - c


def test_rect_is_null():
    assert Rect().is_null()
    assert not Rect(0, 0, 1, 0).is_null()


def test_translate():
    p = Point(1, 2)
    assert Transform().translate(3, 4).map_point(p) == p + Point(3, 4)


def test_scale_about_center_keeps_center():
    c = Point(5, 7)
    t = Transform().translate(c.x, c.y).scale(2, 3).translate(-c.x, -c.y)
    assert t.map_point(c) == c


def test_rotate_full_turn():
    p = Point(3, -8)
    q = Transform().rotate(360).map_point(p)
    assert q.x == pytest.approx(p.x)
    assert q.y == pytest.approx(p.y)


def test_rotate_quarter_turn():
    q = Transform().rotate(90).map_point(Point(1, 0))
    assert q.x == pytest.approx(0, abs=1e-12)
    assert q.y == pytest.approx(1)


def test_shear_horizontal():
    q = Transform().shear(0.5, 0).map_point(Point(0, 2))
    assert q.y == 2
    assert q.x == pytest.approx(1.0)


def test_map_points_matches_map_point():
    t = Transform().rotate(30).translate(2, 1).scale(1.5, 0.5)
    pts = [Point(0, 0), Point(1, 2), Point(-3, 4)]
    assert t.map_points(pts) == [t.map_point(p) for p in pts]


def test_bounding_rect():
    assert bounding_rect([]).is_null()
    pts = [Point(1, 5), Point(-2, 3), Point(4, -1)]
    r = bounding_rect(pts)
    assert all(r.contains(p) for p in pts)
    assert r.left == -2 and r.bottom == 5


def test_interpolate_endpoints():
    assert interpolate(2.0, 8.0, -10, 0) == 2.0
    assert interpolate(2.0, 8.0, -10, -10) == 8.0
    assert interpolate(Point(0, 0), Point(4, 4), 0, 3) == Point(0, 0)


def test_distance_to_segment():
    start, end = Point(0, 0), Point(10, 0)
    assert distance_to_segment(Point(5, 0), start, end) == 0
    assert distance_to_segment(Point(5, 3), start, end) == 3
    beyond = Point(13, 4)
    assert distance_to_segment(beyond, start, end) == pytest.approx(math.hypot(3, 4))


def test_point_in_polygon():
    square = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
    assert point_in_polygon(Point(5, 5), square)
    assert not point_in_polygon(Point(15, 5), square)
    assert not point_in_polygon(Point(5, 5), square[:2])


def test_flatten_cubic():
    p0, p1, p2, p3 = Point(0, 0), Point(1, 3), Point(4, 3), Point(5, 0)
    pts = flatten_cubic(p0, p1, p2, p3, 8)
    assert len(pts) == 9
    assert pts[0] == p0 and pts[-1] == p3


def test_flatten_cubic_rejects_zero_steps():
    with pytest.raises(ValueError):
        flatten_cubic(Point(), Point(), Point(), Point(), 0)