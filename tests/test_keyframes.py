import pytest

from multifusion.geometry import Point
from multifusion.gobject import Brush, BrushStyle, Color, Pen, PenStyle
from multifusion.keyframes import (
    FrameProperties,
    interpolate_brush,
    interpolate_frame,
    interpolate_pen,
    surrounding_indices,
)


def _frames(*specs):
    return [FrameProperties(points=list(pts), position=pos, alpha=alpha) for pos, alpha, pts in specs]


def test_copy_is_independent():
    f = FrameProperties(points=[Point(1, 2)], position=3)
    c = f.copy()
    c.points.append(Point(5, 5))
    c.alpha = 10
    assert f.points == [Point(1, 2)]
    assert f.alpha == 255


def test_dict_round_trip():
    f = FrameProperties([Point(1.5, 2), Point(-3, 4)], 7, False, True, 120, True)
    assert FrameProperties.from_dict(f.to_dict()) == f


def test_surrounding_indices():
    frames = _frames((0, 255, []), (10, 255, []), (20, 255, []))
    assert surrounding_indices(frames, 5) == (0, 1)
    assert surrounding_indices(frames, 10) == (1, 2)
    assert surrounding_indices(frames, 20) == (2, 2)


def test_surrounding_indices_outside():
    frames = _frames((0, 255, []), (10, 255, []))
    assert surrounding_indices(frames, 25) is None
    assert surrounding_indices(frames, -1) is None
    assert surrounding_indices([], 0) is None


def test_interpolate_frame_same_index_copies():
    frames = _frames((0, 255, [Point(1, 1)]))
    out = interpolate_frame(frames, 0, 0, 0)
    assert out == frames[0]
    assert out is not frames[0]


def test_interpolate_frame_endpoints_and_midpoint():
    frames = _frames((0, 255, [Point(0, 0), Point(3, 3)]), (10, 255, [Point(10, 20), Point(3, 3)]))
    assert interpolate_frame(frames, 0, 1, 0).points == frames[0].points
    mid = interpolate_frame(frames, 0, 1, 5)
    assert mid.points == [Point(5, 10), Point(3, 3)]
    assert mid.position == 0


def test_interpolate_frame_first_invisible():
    frames = _frames((0, 255, [Point(0, 0)]), (10, 255, [Point(10, 10)]))
    frames[0].visible = False
    assert interpolate_frame(frames, 0, 1, 5) == frames[0]


def test_interpolate_frame_second_invisible():
    frames = _frames((0, 255, [Point(0, 0)]), (10, 255, [Point(10, 10)]))
    frames[1].visible = False
    assert interpolate_frame(frames, 0, 1, 0) == frames[0]
    assert interpolate_frame(frames, 0, 1, 4) == frames[1]


def test_pen_both_invisible():
    frames = _frames((0, 255, []), (10, 255, []))
    for f in frames:
        f.visible = False
    assert interpolate_pen(Pen(), frames, 0, 1, 5).style is PenStyle.NO_PEN


def test_pen_equal_alpha_uses_frame_alpha():
    frames = _frames((0, 100, []), (10, 100, []))
    pen = Pen(Color(1, 2, 3, 255), 2.0)
    out = interpolate_pen(pen, frames, 0, 1, 5)
    assert out.color.a == 100
    assert out.width == pen.width


def test_pen_alpha_between_key_frames():
    frames = _frames((0, 55, []), (10, 255, []))
    pen = Pen(Color(0, 0, 0, 255))
    start = interpolate_pen(pen, frames, 0, 1, 0).color.a
    middle = interpolate_pen(pen, frames, 0, 1, 5).color.a
    assert start == 55
    assert 55 < middle < 255


def test_brush_both_invisible():
    frames = _frames((0, 255, []), (10, 255, []))
    for f in frames:
        f.visible = False
    out = interpolate_brush(Brush(BrushStyle.SOLID, Color(1, 1, 1)), frames, 0, 1, 5)
    assert out.style is BrushStyle.NO_BRUSH


def test_brush_gradient_stops_follow_frame_alpha():
    frames = _frames((0, 100, []), (10, 100, []))
    brush = Brush(BrushStyle.LINEAR_GRADIENT, Color(), ((0.0, Color(1, 1, 1, 255)), (1.0, Color(2, 2, 2, 255))))
    out = interpolate_brush(brush, frames, 0, 1, 3)
    assert [c.a for _, c in out.stops] == [100, 100]
    assert [off for off, _ in out.stops] == [0.0, 1.0]


@pytest.mark.parametrize("current", [1, 4, 9])
def test_brush_solid_alpha_stays_in_range(current):
    frames = _frames((0, 30, []), (10, 230, []))
    brush = Brush(BrushStyle.SOLID, Color(5, 5, 5, 255))
    out = interpolate_brush(brush, frames, 0, 1, current)
    assert 30 <= out.color.a <= 230
    assert (out.color.r, out.color.g, out.color.b) == (5, 5, 5)