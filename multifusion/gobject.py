"""Drawing attributes and the abstract base of all graphical objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Any

from .geometry import Point, Rect


class LinesType(IntEnum):
    """How the points of a figure are joined."""

    NORMAL = 0
    SPLINES = 1


class PenStyle(Enum):
    NO_PEN = "none"
    SOLID_LINE = "solid"
    DASH_LINE = "dash"


class BrushStyle(Enum):
    NO_BRUSH = "none"
    SOLID = "solid"
    LINEAR_GRADIENT = "linear"
    RADIAL_GRADIENT = "radial"
    CONICAL_GRADIENT = "conical"


_GRADIENTS = {BrushStyle.LINEAR_GRADIENT, BrushStyle.RADIAL_GRADIENT, BrushStyle.CONICAL_GRADIENT}


def _clamp_channel(value: int) -> int:
    return max(0, min(255, int(value)))


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def with_alpha(self, alpha: int) -> Color:
        """Return this colour with the alpha replaced, clamped to 0..255."""
        return replace(self, a=_clamp_channel(alpha))

    def to_dict(self) -> dict[str, int]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Color:
        return cls(int(data["r"]), int(data["g"]), int(data["b"]), int(data["a"]))


@dataclass(frozen=True)
class Pen:
    """Outline settings of a figure."""

    color: Color = Color()
    width: float = 1.0
    style: PenStyle = PenStyle.SOLID_LINE

    def with_alpha(self, alpha: int) -> Pen:
        return replace(self, color=self.color.with_alpha(alpha))

    def to_dict(self) -> dict[str, Any]:
        return {"color": self.color.to_dict(), "width": self.width, "style": self.style.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pen:
        return cls(Color.from_dict(data["color"]), float(data["width"]), PenStyle(data["style"]))


@dataclass(frozen=True)
class Brush:
    """Fill settings of a figure: a flat colour or a gradient with stops."""

    style: BrushStyle = BrushStyle.NO_BRUSH
    color: Color = Color()
    stops: tuple[tuple[float, Color], ...] = ()

    @property
    def is_gradient(self) -> bool:
        return self.style in _GRADIENTS

    def with_alpha(self, alpha: int) -> Brush:
        """Set the alpha of every gradient stop, or of the flat colour."""
        if self.is_gradient:
            return replace(self, stops=tuple((off, c.with_alpha(alpha)) for off, c in self.stops))
        return replace(self, color=self.color.with_alpha(alpha))

    def to_dict(self) -> dict[str, Any]:
        return {
            "style": self.style.value,
            "color": self.color.to_dict(),
            "stops": [[off, c.to_dict()] for off, c in self.stops],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Brush:
        return cls(
            BrushStyle(data["style"]),
            Color.from_dict(data["color"]),
            tuple((float(off), Color.from_dict(c)) for off, c in data.get("stops", [])),
        )


class GObject(ABC):
    """Abstract base of every graphical object: figures, containers and layers."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    @abstractmethod
    def copy(self) -> GObject:
        """Return an independent copy of this object."""

    @abstractmethod
    def is_container(self) -> bool:
        """True when the object holds other objects."""

    @abstractmethod
    def is_editable(self) -> bool:
        """True when the object can be changed at the current frame."""

    @abstractmethod
    def count_frames(self) -> int:
        """Number of key frames defined for the object."""

    @abstractmethod
    def bounding_rect(self) -> Rect:
        """Rectangle enclosing the object at the current frame."""

    @abstractmethod
    def contains(self, point: Point) -> GObject | None:
        """The object under the point, or None."""

    @abstractmethod
    def move(self, dx: float, dy: float) -> None:
        """Translate the object."""

    @abstractmethod
    def scale(self, sx: float, sy: float, center: Point) -> None:
        """Scale the object about a point."""

    @abstractmethod
    def shear(self, sx: float, sy: float, center: Point) -> None:
        """Shear the object about a point."""

    @abstractmethod
    def rotate(self, angle: float, center: Point) -> None:
        """Rotate the object by degrees about a point."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialise the whole object tree to plain data."""