"""A container grouping graphical objects, itself a graphical object."""

from __future__ import annotations

from typing import Any, Iterator

from .figure import VectorFigure
from .geometry import Point, Rect
from .gobject import Brush, GObject, LinesType, Pen


class Container(GObject):
    """Holds figures and other containers; nesting depth is unlimited.

    The object at index 0 is the top-most one; it is painted last.
    """

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self.objects: list[GObject] = []

    # ------------------------------------------------------------ membership

    def copy(self) -> Container:
        clone = type(self)(name=self.name)
        clone.objects = [obj.copy() for obj in self.objects]
        return clone

    def is_container(self) -> bool:
        return True

    def __iter__(self) -> Iterator[GObject]:
        return iter(self.objects)

    def __contains__(self, obj: object) -> bool:
        return any(item is obj for item in self.objects)

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self.objects)

    def add(self, obj: GObject) -> int:
        """Put an object on top of the others; returns ``count_objects() - 1``."""
        self.objects.insert(0, obj)
        return len(self.objects) - 1

    def remove(self, index: int) -> GObject:
        """Take an object out of the container and return it."""
        if not self._valid(index):
            raise IndexError(f"no object at index {index}")
        return self.objects.pop(index)

    def remove_all(self) -> list[GObject]:
        """Take every object out of the container and return them."""
        removed, self.objects = self.objects, []
        return removed

    def index_of(self, obj: GObject) -> int | None:
        return next((i for i, item in enumerate(self.objects) if item is obj), None)

    def object_at(self, index: int) -> GObject | None:
        return self.objects[index] if self._valid(index) else None

    def move_down(self, index: int) -> int | None:
        if not 0 <= index < len(self.objects) - 1:
            return None
        self.objects.insert(index + 1, self.objects.pop(index))
        return index + 1

    def move_up(self, index: int) -> int | None:
        if not 0 < index < len(self.objects):
            return None
        self.objects.insert(index - 1, self.objects.pop(index))
        return index - 1

    def move_to_first(self, index: int) -> int | None:
        if not 0 < index < len(self.objects):
            return None
        self.objects.insert(0, self.objects.pop(index))
        return 0

    def move_to_last(self, index: int) -> int | None:
        if not 0 <= index < len(self.objects) - 1:
            return None
        self.objects.append(self.objects.pop(index))
        return len(self.objects) - 1

    def move_object(self, index: int, to: int) -> int | None:
        """Move an object to a new index; returns that index or None."""
        if index == to or not self._valid(index) or not self._valid(to):
            return None
        self.objects.insert(to, self.objects.pop(index))
        return to

    def count_objects(self) -> int:
        return len(self.objects)

    def count_visible_objects(self) -> int:
        return sum(1 for obj in self.objects if obj.visible)

    def _first_visible(self) -> GObject | None:
        return next((obj for obj in self.objects if obj.visible), None)

    # -------------------------------------------------- per-child attributes

    def object_name(self, index: int) -> str | None:
        return self.objects[index].name if self._valid(index) else None

    def set_object_name(self, index: int, name: str) -> None:
        if self._valid(index):
            self.objects[index].name = name

    def is_object_blocked(self, index: int) -> bool:
        return self._valid(index) and self.objects[index].blocked

    def set_object_blocked(self, index: int, blocked: bool) -> None:
        if self._valid(index):
            self.objects[index].blocked = blocked

    def is_object_visible(self, index: int) -> bool:
        return self._valid(index) and self.objects[index].visible

    def set_object_visible(self, index: int, visible: bool) -> None:
        if self._valid(index):
            self.objects[index].visible = visible

    # ----------------------------------------------------- group attributes

    @property
    def lines_type(self) -> LinesType:
        """Line type of the single visible object; NORMAL otherwise."""
        if self.count_visible_objects() != 1:
            return LinesType.NORMAL
        return self._first_visible().lines_type

    def is_editable(self) -> bool:
        first = self._first_visible()
        return first is not None and first.is_editable()

    @property
    def blocked(self) -> bool:
        return all(obj.blocked for obj in self.objects)

    @blocked.setter
    def blocked(self, value: bool) -> None:
        for obj in self.objects:
            obj.blocked = value

    @property
    def visible(self) -> bool:
        return any(obj.visible for obj in self.objects)

    @visible.setter
    def visible(self, value: bool) -> None:
        for obj in self.objects:
            obj.visible = value

    @property
    def frame(self) -> float:
        return self.objects[0].frame if self.objects else 0.0

    @frame.setter
    def frame(self, value: float) -> None:
        for obj in self.objects:
            obj.frame = value

    @property
    def alpha(self) -> int:
        if not self.is_editable():
            raise LookupError("container is not editable at the current frame")
        return self.objects[0].alpha

    @alpha.setter
    def alpha(self, value: int) -> None:
        if self.is_editable():
            self.objects[0].alpha = value

    def _styled(self) -> GObject | None:
        return self._first_visible() if self.is_editable() else None

    @property
    def pen(self) -> Pen:
        first = self._styled()
        return Pen() if first is None else first.pen

    @pen.setter
    def pen(self, value: Pen) -> None:
        if self._styled() is None:
            return
        for obj in self.objects:
            if obj.visible:
                obj.pen = value

    @property
    def brush(self) -> Brush:
        first = self._styled()
        return Brush() if first is None else first.brush

    @brush.setter
    def brush(self, value: Brush) -> None:
        if self._styled() is None:
            return
        for obj in self.objects:
            if obj.visible:
                obj.brush = value

    @property
    def closed(self) -> bool:
        first = self._styled()
        return first is not None and first.closed

    @closed.setter
    def closed(self, value: bool) -> None:
        if self._styled() is None:
            return
        for obj in self.objects:
            if obj.visible:
                obj.closed = value

    # ------------------------------------------------------------ geometry

    def contains(self, point: Point) -> GObject | None:
        """The visible, unblocked child under the point, or None."""
        for obj in self.objects:
            if not obj.visible or obj.blocked:
                continue
            if obj.contains(point) is not None:
                return obj
        return None

    def count_frames(self) -> int:
        return self.objects[0].count_frames() if self.objects else 0

    def bounding_rect(self) -> Rect:
        if self.count_frames() <= 0 or self.count_visible_objects() <= 0:
            return Rect()
        bound = Rect()
        for obj in self.objects:
            if obj.visible:
                bound = bound.united(obj.bounding_rect())
        return bound

    def _single_editable(self) -> bool:
        return self.is_editable() and self.count_visible_objects() <= 1

    def delete_point(self, index: int) -> bool:
        if not self._single_editable():
            return False
        return self.objects[0].delete_point(index)

    def add_point(self, point: Point) -> int | None:
        if not self._single_editable():
            return None
        return self.objects[0].add_point(point)

    def add_point_to_end(self, point: Point) -> int | None:
        if not self._single_editable():
            return None
        return self.objects[0].add_point_to_end(point)

    def points(self, frame: int) -> list[Point]:
        if not self._single_editable():
            return []
        return self.objects[0].points(frame)

    def move_point(self, index: int, position: Point) -> None:
        if self._single_editable():
            self.objects[0].move_point(index, position)

    def move(self, dx: float, dy: float) -> None:
        if not self.is_editable():
            return
        for obj in self.objects:
            obj.move(dx, dy)

    def scale(self, sx: float, sy: float, center: Point) -> None:
        if not self.is_editable():
            return
        for obj in self.objects:
            obj.scale(sx, sy, center)

    def shear(self, sx: float, sy: float, center: Point) -> None:
        if not self.is_editable():
            return
        for obj in self.objects:
            obj.shear(sx, sy, center)

    def rotate(self, angle: float, center: Point) -> None:
        if not self.is_editable():
            return
        for obj in self.objects:
            obj.rotate(angle, center)

    # ------------------------------------------------------------ key frames

    def clone_frame_to_all(self, frame: int) -> None:
        if not 0 <= frame < self.count_frames():
            return
        if not self.is_editable() or not self.objects:
            return
        for obj in self.objects:
            obj.clone_frame_to_all(frame)

    def delete_frames(self, frame: int) -> None:
        for obj in self.objects:
            obj.delete_frames(frame)

    def delete_frame(self, position: int) -> None:
        for obj in self.objects:
            obj.delete_frame(position)

    def add_frame(self, position: int, visible: bool) -> None:
        for obj in self.objects:
            obj.add_frame(position, visible)

    def clone_frame_before(self, frame: int, paste_to: int) -> None:
        count = self.count_frames()
        if not (0 <= frame < count and 0 <= paste_to < count):
            return
        for obj in self.objects:
            obj.clone_frame_before(frame, paste_to)

    def clone_frame_after(self, frame: int, paste_to: int) -> None:
        for obj in self.objects:
            obj.clone_frame_after(frame, paste_to)

    # ---------------------------------------------------------- serialisation

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "container",
            "name": self.name,
            "objects": [obj.to_dict() for obj in self.objects],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Container:
        container = cls(name=str(data.get("name", "")))
        for item in data["objects"]:
            kind = item.get("type")
            if kind == "container":
                container.objects.append(Container.from_dict(item))
            elif kind == "figure":
                container.objects.append(VectorFigure.from_dict(item))
            else:
                raise ValueError(f"unknown object type: {kind!r}")
        return container