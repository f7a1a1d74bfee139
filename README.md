# multifusion

This package is the document model of a 2D vector animation editor. It contains vector figures that are animated over keyframes, and containers that group them. It has no GUI and needs only the standard library.

## Modules

- **`multifusion.geometry`**
  - `Point`: a frozen point.
  - `Rect`: an axis-aligned rectangle.
  - `Transform`: an affine matrix.
  - Helper functions: `bounding_rect`, `interpolate`, `distance_to_segment`, `point_in_polygon` (non-zero winding) and `flatten_cubic`.
- **`multifusion.gobject`**
  - Style values: `Color`, `Pen` and `Brush`. A `Brush` is either a flat colour or a gradient with stops.
  - `LinesType`: `NORMAL` or `SPLINES`.
  - `GObject`: the abstract base class of every graphical object.
- **`multifusion.keyframes`**
  - `FrameProperties`: the state of a figure at one keyframe. It holds the points, `position`, `visible`, `blocked`, `alpha` and `is_transform`.
  - `surrounding_indices`: finds the two keyframes around a frame.
  - `interpolate_frame`, `interpolate_pen` and `interpolate_brush`: blend points and alpha between those two keyframes.
- **`multifusion.figure`**
  - `VectorFigure`: a polyline or cubic spline. Its points come in groups of three, each anchor with its incoming and outgoing control points.
  - It can insert, append, delete and move points, and translate, scale, shear and rotate.
  - Keyframes can be added, deleted and cloned.
  - It can switch between spline and normal form (`to_spline` / `to_normal`) and be hit-tested with `contains`.
- **`multifusion.container`**
  - `Container`: groups figures and other containers, nested to any depth.
  - Index 0 is the top-most object.
  - The container can reorder its children (`move_up`, `move_down`, `move_to_first`, `move_to_last`, `move_object`).
  - It can set per-child name, visibility and blocking, hit-test its children, and transform them as a whole.

## Installing

```
pip install .
```

## Example

```python
from multifusion.geometry import Point
from multifusion.figure import VectorFigure
from multifusion.container import Container

square = [Point(0, 0), Point(0, 0), Point(10, 0), Point(10, 0), Point(10, 0),
          Point(10, 10), Point(10, 10)]
figure = VectorFigure(square, closed=True)
figure.move(5, 5)
print(figure.bounding_rect())

group = Container()
group.add(figure)
group.rotate(90, Point(10, 10))
print(group.bounding_rect())
```

### Animating

A new figure has one keyframe, at position 0. Transforms and point edits act on the keyframe at the figure's current `frame`.

```python
figure.add_frame(10, True)      # copy of the keyframe before position 10
figure.frame = 10
figure.move(20, 0)              # changes only the keyframe at 10

figure.frame = 5
state = figure.current_frame()  # points halfway between the two keyframes
```

`interpolated_pen()` and `interpolated_brush()` give the pen and brush at the current frame. Their alpha is blended from the keyframes' `alpha`.

### Plain data

Every object converts to plain dicts with `to_dict()`. You can rebuild it with `VectorFigure.from_dict` or `Container.from_dict`. `Container.from_dict` restores nested figures and containers. Together they give a JSON round trip:

```python
import json

text = json.dumps(group.to_dict())
restored = Container.from_dict(json.loads(text))
```

## What the package does not do

- It does not draw anything. There is no GUI, canvas or rendering backend.
- It has no interactive selection frame or mouse handling.
- It has no layers with their own keyframe lists, and no morphing between different figures during playback.
- It has no file format of its own. Storage is limited to the `to_dict` / `from_dict` data shown above.

## Running the tests

```
pip install .[test]
pytest
```