"""Key frame properties and interpolation between neighbouring key frames."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Sequence

from .geometry import Point, interpolate
from .gobject import Brush, Pen, PenStyle


@dataclass
class FrameProperties:
    """The state of a figure at one key frame on the timeline."""

    points: list[Point] = field(default_factory=list)
    position: int = 0
    visible: bool = True
    blocked: bool = False
    alpha: int = 255
    is_transform: bool = False

    def copy(self) -> FrameProperties:
        return replace(self, points=list(self.points))

    def to_dict(self) -> dict[str, Any]:
        return {
            "points": [[p.x, p.y] for p in self.points],
            "position": self.position,
            "visible": self.visible,
            "blocked": self.blocked,
            "alpha": self.alpha,
            "is_transform": self.is_transform,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FrameProperties:
        return cls(
            points=[Point(float(x), float(y)) for x, y in data["points"]],
            position=int(data["position"]),
            visible=bool(data["visible"]),
            blocked=bool(data["blocked"]),
            alpha=int(data["alpha"]),
            is_transform=bool(data["is_transform"]),
        )


def surrounding_indices(frames: Sequence[FrameProperties], current: float) -> tuple[int, int] | None:
    """Indices of the key frames around ``current``, or None if it lies outside them.

    Frames are expected in timeline order; an exact match on the last frame
    yields that frame twice.
    """
    lower = upper = -1
    nearest_before = -1
    for index, props in enumerate(frames):
        if props.position == current:
            lower = upper = index
        if nearest_before < props.position < current:
            lower = index
            nearest_before = props.position
    if lower != -1 and lower < len(frames) - 1:
        upper = lower + 1
    if lower == -1 or upper == -1:
        return None
    return lower, upper


def _offsets(first: FrameProperties, second: FrameProperties, current: float) -> tuple[float, float]:
    span = float(first.position - second.position)
    in_frame = float(first.position - int(current))
    return span, in_frame


def interpolate_frame(
    frames: Sequence[FrameProperties], lower: int, upper: int, current: float
) -> FrameProperties:
    """The figure state at ``current`` between two key frames."""
    first = frames[lower]
    if lower == upper:
        return first.copy()
    second = frames[upper]
    span, in_frame = _offsets(first, second, current)

    if not first.visible:
        return first.copy()
    if not second.visible:
        return first.copy() if in_frame == 0 else second.copy()

    result = first.copy()
    result.visible = True
    result.points = [
        a if a == b else interpolate(a, b, span, in_frame)
        for a, b in zip(first.points, second.points)
    ] + first.points[len(second.points):]
    return result


def interpolate_pen(
    pen: Pen, frames: Sequence[FrameProperties], lower: int, upper: int, current: float
) -> Pen:
    """The pen of a figure at ``current``, with alpha blended between key frames."""
    first, second = frames[lower], frames[upper]
    if not first.visible and not second.visible:
        return Pen(style=PenStyle.NO_PEN)

    span, in_frame = _offsets(first, second, current)
    base = pen.color.a
    if in_frame == 0 or first.alpha == second.alpha:
        return pen.with_alpha(base + first.alpha - 255)

    a1 = max(0, base + first.alpha - 255)
    a2 = max(0, base + second.alpha - 255)
    return pen.with_alpha(int(interpolate(float(a1), float(a2), span, in_frame)))


def interpolate_brush(
    brush: Brush, frames: Sequence[FrameProperties], lower: int, upper: int, current: float
) -> Brush:
    """The brush of a figure at ``current``, with alpha blended between key frames."""
    first, second = frames[lower], frames[upper]
    if not first.visible and not second.visible:
        return Brush()

    span, in_frame = _offsets(first, second, current)
    exact = in_frame == 0 or first.alpha == second.alpha

    def blended(alpha: int) -> int:
        a1 = alpha + first.alpha - 255
        if exact:
            return a1
        a2 = alpha + second.alpha - 255
        return int(interpolate(float(a1), float(a2), span, in_frame))

    if brush.is_gradient:
        stops = tuple((off, c.with_alpha(blended(c.a))) for off, c in brush.stops)
        return replace(brush, stops=stops)
    return replace(brush, color=brush.color.with_alpha(blended(brush.color.a)))