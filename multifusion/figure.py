"""Vector figures made of points, animated through key frames."""

from __future__ import annotations

from typing import Any, Iterable

from .geometry import (
    Point,
    Rect,
    Transform,
    bounding_rect,
    distance_to_segment,
    flatten_cubic,
    point_in_polygon,
)
from .gobject import Brush, GObject, LinesType, Pen
from .keyframes import (
    FrameProperties,
    interpolate_brush,
    interpolate_frame,
    interpolate_pen,
    surrounding_indices,
)

_CURVE_STEPS = 16


class VectorFigure(GObject):
    """A figure of points joined by lines or cubic splines, with key frames."""

    def __init__(
        self,
        points: Iterable[Point] = (),
        spline: bool = False,
        closed: bool = False,
        position: int = 0,
        name: str = "",
    ) -> None:
        super().__init__(name)
        self.frame: float = 0.0
        self.lines_type = LinesType.SPLINES if spline else LinesType.NORMAL
        self.closed = closed
        self.show_bezier = False
        self.hide_lines = 0
        self.pen = Pen()
        self.brush = Brush()
        self.item_min = -1
        self.item_max = -1
        self._frames: list[FrameProperties] = [
            FrameProperties(points=list(points), position=position)
        ]

    # ----------------------------------------------------------------- modes

    def to_normal(self) -> None:
        """Straighten every segment and switch to polyline mode."""
        for props in self._frames:
            pts = props.points
            count = len(pts)
            if count >= 2:
                pts[1] = pts[0]
                pts[count - 2] = pts[count - 1]
                for i in range(2, count - 2, 3):
                    pts[i] = pts[i + 2] = pts[i + 1]
        self.lines_type = LinesType.NORMAL
        self.show_bezier = False

    def to_spline(self) -> None:
        """Switch to spline mode and show the Bezier control points."""
        self.lines_type = LinesType.SPLINES
        self.show_bezier = True

    def is_spline(self) -> bool:
        return self.lines_type == LinesType.SPLINES

    def copy(self) -> VectorFigure:
        figure = VectorFigure(name=self.name)
        figure.frame = self.frame
        figure.lines_type = self.lines_type
        figure.closed = self.closed
        figure.show_bezier = self.show_bezier
        figure.hide_lines = self.hide_lines
        figure.pen = self.pen
        figure.brush = self.brush
        figure._frames = [props.copy() for props in self._frames]
        return figure

    def is_container(self) -> bool:
        return False

    # ------------------------------------------------------------ key frames

    @property
    def frames(self) -> list[FrameProperties]:
        """The key frames in timeline order (a shallow list copy)."""
        return list(self._frames)

    def index_of_position(self, frame: float) -> int | None:
        """Index of the key frame at timeline position ``int(frame)``."""
        target = int(frame)
        return next((i for i, p in enumerate(self._frames) if p.position == target), None)

    def _current(self) -> FrameProperties | None:
        index = self.index_of_position(self.frame)
        return None if index is None else self._frames[index]

    def delete_frame(self, position: int) -> None:
        """Remove the key frame at a timeline position, if there is one."""
        index = self.index_of_position(position)
        if index is not None:
            del self._frames[index]

    def delete_frames(self, frame: int) -> None:
        """Keep only the key frame at ``frame``; without one, keep only the first."""
        index = self.index_of_position(frame)
        if index is not None:
            self._frames = [self._frames[index]]
        else:
            self._frames = self._frames[:1]

    def add_frame(self, position: int, visible: bool) -> None:
        """Insert a key frame copied from the nearest earlier one."""
        item, nearest = 0, -1
        for i, props in enumerate(self._frames):
            if nearest < props.position < position:
                item, nearest = i, props.position

        if position == 0:
            new = self._frames[0].copy()
            new.visible = False
            self._frames.insert(0, new)
        else:
            new = self._frames[item].copy()
            new.visible = visible
            self._frames.insert(item + 1, new)
        new.is_transform = False
        new.position = position

    def add_frame_with_points(self, position: int, points: Iterable[Point]) -> None:
        """Add a visible key frame holding the given points."""
        props = FrameProperties(points=list(points), position=position)
        if position > self._frames[0].position:
            self._frames.append(props)
        else:
            self._frames.insert(0, props)

    def set_points(self, points: Iterable[Point], position: int) -> None:
        """Replace the key frame at the current frame with fresh points."""
        index = self.index_of_position(self.frame)
        if index is None:
            raise LookupError(f"no key frame at frame {self.frame}")
        self._frames[index] = FrameProperties(
            points=list(points), position=position, is_transform=True
        )

    def _valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._frames)

    def clone_frame_before(self, frame: int, paste_to: int) -> None:
        if not (self._valid_index(frame) and self._valid_index(paste_to)):
            return
        self._frames.insert(paste_to, self._frames[frame].copy())
        if paste_to <= self.frame:
            self.frame += 1.0

    def clone_frame_after(self, frame: int, paste_to: int) -> None:
        if not (self._valid_index(frame) and self._valid_index(paste_to)):
            return
        self._frames.insert(paste_to + 1, self._frames[frame].copy())
        if paste_to + 1 <= self.frame:
            self.frame += 1.0

    def clone_frame_to_all(self, frame: int) -> None:
        """Copy the key frame at ``frame`` over every other key frame."""
        if not self.is_editable():
            return
        source = self._frames[self.index_of_position(frame)]
        for i, props in enumerate(self._frames):
            if props.position != frame:
                clone = source.copy()
                clone.position = props.position
                self._frames[i] = clone

    def count_frames(self) -> int:
        return len(self._frames)

    # ------------------------------------------------------- frame attributes

    def is_editable(self) -> bool:
        return self._current() is not None

    @property
    def visible(self) -> bool:
        props = self._current()
        return props is not None and props.visible

    @visible.setter
    def visible(self, value: bool) -> None:
        props = self._current()
        if props is not None:
            props.visible = value

    @property
    def blocked(self) -> bool:
        props = self._current()
        return props is not None and props.blocked

    @blocked.setter
    def blocked(self, value: bool) -> None:
        props = self._current()
        if props is not None:
            props.blocked = value

    @property
    def alpha(self) -> int:
        props = self._current()
        if props is None:
            raise LookupError(f"no key frame at frame {self.frame}")
        return props.alpha

    @alpha.setter
    def alpha(self, value: int) -> None:
        props = self._current()
        if props is not None:
            props.alpha = value

    def is_transformed(self, frame: int) -> bool:
        index = self.index_of_position(frame)
        return index is not None and self._frames[index].is_transform

    def set_transformed(self, frame: int, transform: bool) -> None:
        index = self.index_of_position(frame)
        if index is not None:
            self._frames[index].is_transform = transform

    def points(self, frame: int) -> list[Point]:
        """The points of the key frame at ``frame``, or an empty list."""
        index = self.index_of_position(frame)
        return [] if index is None else list(self._frames[index].points)

    # ------------------------------------------------------------ hit testing

    def _outline(self, pts: list[Point]) -> list[Point]:
        if not self.is_spline():
            return pts
        spline_count = ((len(pts) - 1) // 3) * 3
        outline = [pts[0]]
        for i in range(1, spline_count + 1, 3):
            outline.extend(
                flatten_cubic(pts[i - 1], pts[i], pts[i + 1], pts[i + 2], _CURVE_STEPS)[1:]
            )
        return outline

    def contains(self, point: Point) -> VectorFigure | None:
        props = self._current()
        if props is None:
            return None
        if self.is_spline() and len(props.points) < 4:
            return None
        return self if point_in_polygon(point, self._outline(props.points)) else None

    def bounding_rect(self) -> Rect:
        if not self._frames or not self.update_frame_range():
            return Rect()
        pts = self.current_frame().points
        if not pts:
            return Rect()
        rect = bounding_rect(pts)
        if rect.is_null():
            corner = pts[0] - Point(10, 10)
            return Rect(corner.x, corner.y, 10, 10)
        return rect

    # ---------------------------------------------------------- point editing

    def add_point(self, point: Point) -> int | None:
        """Insert a point where it fits best; returns its index or None."""
        if not self.is_editable():
            return None
        if self.lines_type == LinesType.NORMAL:
            return self._add_point_to_polygon(point)
        return self._add_point_to_spline(point)

    def add_point_to_end(self, point: Point) -> int | None:
        """Append a point at the end of the figure; returns its index or None."""
        if not self.is_editable():
            return None
        if self.lines_type == LinesType.NORMAL:
            return self._add_point_to_end_of_polygon(point)
        return self._add_point_to_spline(point)

    def delete_point(self, index: int) -> bool:
        """Remove an anchor point with its control points from every key frame."""
        if not self.is_editable():
            return False
        count = len(self._frames[0].points)
        if not 0 <= index < count:
            return False
        if count <= 4 or index % 3 != 0:
            return False
        if index == 0:
            start = 0
        elif index == count - 1:
            start = index - 2
        else:
            start = index - 1
        for props in self._frames:
            del props.points[start:start + 3]
        return True

    def move_point(self, index: int, position: Point) -> None:
        props = self._current()
        if props is None or not 0 <= index < len(props.points):
            return
        props.points[index] = position

    def _add_point_to_end_of_polygon(self, point: Point) -> int:
        current = self._current()
        count = len(current.points)
        current.points.append(current.points[count - 1])
        current.points.extend([point, point])
        for props in self._frames:
            if props.position == self.frame:
                continue
            pts = props.points
            pts.append(pts[count - 1])
            for _ in range(2):
                pts.append(pts[0] + (pts[0] - pts[count - 1]) / 2.0)
        return count

    def _add_point_to_polygon(self, point: Point) -> int:
        current = self._current()
        pts = current.points
        count = len(pts)

        min_len = 65535.0
        line_begin = 0
        for i in range(count):
            length = distance_to_segment(point, pts[i], pts[(i + 1) % count])
            if length < min_len:
                min_len, line_begin = length, i

        len_to_begin = distance_to_segment(point, pts[0], pts[0])
        len_to_end = distance_to_segment(point, pts[count - 1], pts[count - 1])
        line_end = (line_begin + 1) % count
        insert_to = line_end

        if min_len >= len_to_begin or min_len >= len_to_end:
            insert_to = 0 if len_to_begin <= len_to_end else count
            line_begin, line_end = 0, count - 1

        edge: int | None = None
        if insert_to in (0, count):
            if insert_to == 0:
                edge = 0
            else:
                edge = count - 1
                insert_to += 1
            pts.insert(edge, pts[edge])
            repeats = 2
        else:
            repeats = 3

        for _ in range(repeats):
            pts.insert(insert_to, point)

        for props in self._frames:
            if props.position == self.frame:
                continue
            other = props.points
            if edge is not None:
                other.insert(edge, other[edge])
            for _ in range(repeats):
                other.insert(
                    insert_to,
                    other[line_begin] + (other[line_end] - other[line_begin]) / 2.0,
                )
        return insert_to

    def _add_point_to_spline(self, point: Point) -> int:
        current = self._current()
        count = len(current.points)
        for props in self._frames:
            pts = props.points
            if props.position == self.frame:
                pts.append(pts[count - 1] * 2 - pts[count - 2])
                pts.extend([point, point])
            else:
                pts.extend([pts[count - 1]] * 3)
        return len(current.points) - 2

    # --------------------------------------------------------- transformations

    def _apply(self, transform: Transform) -> None:
        props = self._current()
        if props is not None:
            props.points = transform.map_points(props.points)

    def move(self, dx: float, dy: float) -> None:
        self._apply(Transform().translate(dx, dy))

    def scale(self, sx: float, sy: float, center: Point) -> None:
        self._apply(
            Transform().translate(center.x, center.y).scale(sx, sy).translate(-center.x, -center.y)
        )

    def shear(self, sx: float, sy: float, center: Point) -> None:
        self._apply(
            Transform().translate(center.x, center.y).shear(sx, sy).translate(-center.x, -center.y)
        )

    def rotate(self, angle: float, center: Point) -> None:
        self._apply(
            Transform().translate(center.x, center.y).rotate(angle).translate(-center.x, -center.y)
        )

    # ------------------------------------------------------------- animation

    def update_frame_range(self) -> bool:
        """Find the key frames around the current frame; False if there are none."""
        found = surrounding_indices(self._frames, self.frame)
        self.item_min, self.item_max = found if found is not None else (-1, -1)
        return found is not None

    def _range(self) -> tuple[int, int]:
        if not self.update_frame_range():
            raise LookupError(f"frame {self.frame} lies outside the key frames")
        return self.item_min, self.item_max

    def current_frame(self) -> FrameProperties:
        """The figure state at the current frame, interpolated between key frames."""
        lower, upper = self._range()
        return interpolate_frame(self._frames, lower, upper, self.frame)

    def interpolated_pen(self) -> Pen:
        lower, upper = self._range()
        return interpolate_pen(self.pen, self._frames, lower, upper, self.frame)

    def interpolated_brush(self) -> Brush:
        lower, upper = self._range()
        return interpolate_brush(self.brush, self._frames, lower, upper, self.frame)

    # ---------------------------------------------------------- serialisation

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "figure",
            "name": self.name,
            "frame": self.frame,
            "lines_type": int(self.lines_type),
            "pen": self.pen.to_dict(),
            "brush": self.brush.to_dict(),
            "closed": self.closed,
            "show_bezier": self.show_bezier,
            "hide_lines": self.hide_lines,
            "frames": [props.to_dict() for props in self._frames],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VectorFigure:
        figure = cls(name=str(data.get("name", "")))
        figure.frame = float(data["frame"])
        figure.lines_type = LinesType(int(data["lines_type"]))
        figure.pen = Pen.from_dict(data["pen"])
        figure.brush = Brush.from_dict(data["brush"])
        figure.closed = bool(data["closed"])
        figure.show_bezier = bool(data["show_bezier"])
        figure.hide_lines = int(data["hide_lines"])
        figure._frames = [FrameProperties.from_dict(item) for item in data["frames"]]
        return figure