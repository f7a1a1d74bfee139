import pytest

from multifusion.geometry import Point, Rect
from multifusion.gobject import (
    Brush,
    BrushStyle,
    Color,
    GObject,
    LinesType,
    Pen,
    PenStyle,
)


class _Dot(GObject):
    def __init__(self, at, name=""):
        super().__init__(name)
        self.at = at

    def copy(self):
        return _Dot(self.at, self.name)

    def is_container(self):
        return False

    def is_editable(self):
        return True

    def count_frames(self):
        return 1

    def bounding_rect(self):
        return Rect(self.at.x, self.at.y, 0, 0)

    def contains(self, point):
        return self if point == self.at else None

    def move(self, dx, dy):
        self.at = self.at + Point(dx, dy)

    def scale(self, sx, sy, center):
        pass

    def shear(self, sx, sy, center):
        pass

    def rotate(self, angle, center):
        pass

    def to_dict(self):
        return {"name": self.name}


def test_color_with_alpha_clamps():
    c = Color(10, 20, 30, 40)
    assert c.with_alpha(300).a == 255
    assert c.with_alpha(-5).a == 0
    assert c.with_alpha(77) == Color(10, 20, 30, 77)
    assert c.a == 40


def test_pen_with_alpha_keeps_other_fields():
    pen = Pen(Color(1, 2, 3), 2.5, PenStyle.DASH_LINE)
    out = pen.with_alpha(50)
    assert out.color.a == 50
    assert out.width == pen.width and out.style == pen.style


def test_brush_solid_with_alpha():
    b = Brush(BrushStyle.SOLID, Color(9, 9, 9, 200))
    assert b.with_alpha(12).color.a == 12
    assert not b.is_gradient


def test_brush_gradient_with_alpha_changes_stops():
    b = Brush(BrushStyle.RADIAL_GRADIENT, Color(), ((0.0, Color(1, 1, 1, 10)), (1.0, Color(2, 2, 2, 20))))
    out = b.with_alpha(99)
    assert [c.a for _, c in out.stops] == [99, 99]
    assert out.color == b.color


@pytest.mark.parametrize(
    "value",
    [
        Color(4, 5, 6, 7),
        Pen(Color(4, 5, 6), 3.0, PenStyle.NO_PEN),
        Brush(BrushStyle.LINEAR_GRADIENT, Color(1, 1, 1), ((0.25, Color(8, 8, 8, 8)),)),
    ],
)
def test_attribute_round_trip(value):
    assert type(value).from_dict(value.to_dict()) == value


def test_lines_type_from_stored_int():
    assert LinesType(int(LinesType.SPLINES)) is LinesType.SPLINES


def test_gobject_is_abstract():
    with pytest.raises(TypeError):
        GObject()


def test_subclass_keeps_name_and_copies():
    dot = _Dot(Point(1, 1), "dot")
    twin = dot.copy()
    twin.move(2, 0)
    assert twin.name == "dot"
    assert dot.at == Point(1, 1)
    assert dot.contains(Point(1, 1)) is dot