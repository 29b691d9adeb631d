"""Screen geometry for the sketch canvas: axes, markers, shapes and tables."""

from __future__ import annotations

import enum
import itertools
import math
from collections.abc import Iterable, Sequence
from typing import NamedTuple, Union

from .shapes import Color

# One grid unit on the canvas is this many logical pixels.
GRID_SCALE = 25
CAMERA_DISTANCE = 500.0
TICK_SPACING = 25
TICK_SIZE = 5
AXIS_PEN_WIDTH = 3
AXIS_COLOR = Color(10, 10, 10)
GRID_PEN_WIDTH = 1
GRID_COLOR = Color(210, 210, 210)
ARROW_LENGTH = 15.0
ARROW_ANGLE = 30.0 * 3.14159265 / 180.0
ELLIPSE_STEPS = 360
MAX_TABLE_ROWS = 10
TABLE_HEADERS = ("Line", "Start X", "Start Y", "End X", "End Y", "Btn 1", "Btn 2")
TABLE_COLUMN_WIDTHS = (50, 60, 60, 60, 60, 70, 70)

_PI = 3.14159265


class ShapeKind(enum.Enum):
    """Shapes the rubber-band tool can draw."""

    LINE = "line"
    ELLIPSE = "ellipse"
    CIRCLE = "circle"


class Point(NamedTuple):
    x: int
    y: int


class Segment(NamedTuple):
    x1: int
    y1: int
    x2: int
    y2: int


class Bounds(NamedTuple):
    """Corners of the rectangle an ellipse is inscribed in, as passed to GDI."""

    left: int
    top: int
    right: int
    bottom: int


class Stroke(NamedTuple):
    segment: Segment
    width: int
    color: Color


class TableRow(NamedTuple):
    number: int
    start_x: int
    start_y: int
    end_x: int
    end_y: int


def project_3d(x: float, y: float, z: float) -> Point:
    """Project a 3D point onto the screen with a simple perspective divide."""
    depth = CAMERA_DISTANCE + z
    if depth == 0:
        raise ValueError("point lies in the camera plane")
    factor = CAMERA_DISTANCE / depth
    return Point(int(x * factor), int(y * factor))


def axis_segments(width: int, height: int) -> list[Stroke]:
    """Strokes of the centred axes, their ticks and the background grid, in drawing order."""
    if width < 0 or height < 0:
        raise ValueError("canvas size must not be negative")
    half_w = width // 2
    half_h = height // 2
    xs = range(-half_w, half_w + 1, TICK_SPACING)
    ys = range(-half_h, half_h + 1, TICK_SPACING)

    def axis(segment: Segment) -> Stroke:
        return Stroke(segment, AXIS_PEN_WIDTH, AXIS_COLOR)

    def grid(segment: Segment) -> Stroke:
        return Stroke(segment, GRID_PEN_WIDTH, GRID_COLOR)

    strokes = [
        axis(Segment(-half_w, 0, half_w, 0)),
        axis(Segment(0, -half_h, 0, half_h)),
    ]
    strokes += [axis(Segment(x, -TICK_SIZE, x, TICK_SIZE)) for x in xs]
    strokes += [axis(Segment(-TICK_SIZE, y, TICK_SIZE, y)) for y in ys]
    strokes += [grid(Segment(-half_w, y, half_w, y)) for y in ys]
    strokes += [grid(Segment(x, -half_h, x, half_h)) for x in xs]
    return strokes


def point_pixels(x: float, y: float, size: int = 5) -> list[Point]:
    """Pixels of the square marker drawn at grid point ``(x, y)``."""
    if size < 0:
        raise ValueError("marker size must not be negative")
    px = x * GRID_SCALE
    py = y * GRID_SCALE
    half = size // 2
    offsets = range(-half, half + 1)
    return [Point(int(px + dx), int(py + dy)) for dx in offsets for dy in offsets]


def line_segment(x1: int, y1: int, x2: int, y2: int) -> Segment:
    """Logical segment for a line between two grid points."""
    return Segment(x1 * GRID_SCALE, y1 * GRID_SCALE, x2 * GRID_SCALE, y2 * GRID_SCALE)


def rectangle_edges(x1: int, y1: int, x2: int, y2: int) -> list[Segment]:
    """The four edges of the rectangle with opposite grid corners ``(x1, y1)`` and ``(x2, y2)``."""
    return [
        line_segment(x1, y1, x2, y1),
        line_segment(x1, y1, x1, y2),
        line_segment(x2, y2, x2, y1),
        line_segment(x2, y2, x1, y2),
    ]


def circle_bounds(center_x: float, center_y: float, radius: float) -> Bounds:
    """Logical bounding box of a circle given in grid units."""
    return Bounds(
        int((center_x - radius) * GRID_SCALE),
        int((center_y + radius) * GRID_SCALE),
        int((center_x + radius) * GRID_SCALE),
        int((center_y - radius) * GRID_SCALE),
    )


def ellipse_points(
    center_x: float,
    center_y: float,
    a: float,
    b: float,
    angle: float,
    scale: float = GRID_SCALE,
) -> list[Point]:
    """The 360-point outline of an ellipse rotated by ``angle`` degrees.

    Every input length is multiplied by ``scale`` first.
    """
    rad = angle * _PI / 180.0
    cos_r = math.cos(rad)
    sin_r = math.sin(rad)
    cx = center_x * scale
    cy = center_y * scale
    sa = a * scale
    sb = b * scale
    points = []
    for step in range(ELLIPSE_STEPS):
        theta = step * 2.0 * _PI / ELLIPSE_STEPS
        x = sa * math.cos(theta)
        y = sb * math.sin(theta)
        points.append(Point(int(cx + x * cos_r - y * sin_r), int(cy + x * sin_r + y * cos_r)))
    return points


def arrow_head(x1: int, y1: int, x2: int, y2: int) -> tuple[Point, Point, Point]:
    """Tip and the two wing ends of an arrow head at the end of a segment."""
    direction = math.atan2(y2 - y1, x2 - x1)
    tip = Point(x2, y2)
    left = Point(
        int(x2 - ARROW_LENGTH * math.cos(direction - ARROW_ANGLE)),
        int(y2 - ARROW_LENGTH * math.sin(direction - ARROW_ANGLE)),
    )
    right = Point(
        int(x2 - ARROW_LENGTH * math.cos(direction + ARROW_ANGLE)),
        int(y2 - ARROW_LENGTH * math.sin(direction + ARROW_ANGLE)),
    )
    return tip, left, right


def drag_bounds(
    kind: ShapeKind, start: Sequence[int], end: Sequence[int]
) -> Union[Segment, Bounds]:
    """What a mouse drag from ``start`` to ``end`` draws for the given shape kind.

    A line gives its segment; an ellipse the dragged rectangle; a circle the
    largest square from ``start`` towards ``end`` that fits in that rectangle.
    """
    sx, sy = start
    ex, ey = end
    if kind is ShapeKind.LINE:
        return Segment(sx, sy, ex, ey)
    if kind is ShapeKind.ELLIPSE:
        return Bounds(sx, sy, ex, ey)
    if kind is ShapeKind.CIRCLE:
        dx = ex - sx
        dy = ey - sy
        r = min(abs(dx), abs(dy))
        return Bounds(sx, sy, sx + (-r if dx < 0 else r), sy + (-r if dy < 0 else r))
    raise ValueError(f"unknown shape kind: {kind!r}")


def table_rows(segments: Iterable[Sequence[int]]) -> list[TableRow]:
    """Rows of the line table, numbered from 1.

    The first segment is the list's anchor and is not shown; at most
    ``MAX_TABLE_ROWS`` rows follow it.
    """
    shown = itertools.islice(segments, 1, 1 + MAX_TABLE_ROWS)
    return [
        TableRow(number, x1, y1, x2, y2)
        for number, (x1, y1, x2, y2) in enumerate(shown, start=1)
    ]