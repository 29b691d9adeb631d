"""Shape records, colours and the in-memory store of drawn shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

# Command identifiers used by the drawing forms and the shape lists.
FORM_ID_BASE = 100
LINE_PREVIEW_ID_BASE = 300
LINE_INFO_ID_BASE = 400
CIRCLE_PREVIEW_ID_BASE = 500
CIRCLE_INFO_ID_BASE = 600

# Layout of the side panels, in client pixels.
FORM_WIDTH = 250
FORM_HEIGHT = 150
FORM_LEFT = 800 + 30
FORM_TOP = 40
LIST_LEFT = FORM_LEFT + FORM_WIDTH + 50
LIST_TOP = FORM_TOP
LIST_WIDTH = 370
LIST_HEIGHT = FORM_HEIGHT * 2

_PI = 3.14159


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of range: {value}")

    def to_hex(self) -> str:
        """Return the colour as ``#rrggbb``."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


BLACK = Color(0, 0, 0)
DEFAULT_COLOR = Color(255, 0, 0)


@dataclass
class LineInfo:
    """A line segment between two integer grid points."""

    slope: float
    angle: int
    start_x: int
    start_y: int
    end_x: int
    end_y: int
    color: Color = BLACK

    @classmethod
    def from_points(cls, x1: int, y1: int, x2: int, y2: int, color: Color) -> LineInfo:
        """Build a line, deriving its slope and its angle in whole degrees."""
        dx = x2 - x1
        dy = y2 - y1
        if dx:
            slope = dy / dx
        elif dy:
            slope = math.copysign(math.inf, dy)
        else:
            slope = math.nan
        angle = 0 if math.isnan(slope) else int(math.atan(slope) * (180.0 / _PI))
        return cls(slope, angle, x1, y1, x2, y2, color)


@dataclass
class CircleInfo:
    """A circle given by its centre and radius."""

    radius: float
    center_x: float
    center_y: float
    color: Color = BLACK


@dataclass
class EllipseInfo:
    """An ellipse with semi-axes ``a`` and ``b``, rotated by ``angle`` degrees."""

    a: float
    b: float
    center_x: float
    center_y: float
    eccentricity: float
    angle: float
    color: Color = BLACK

    @classmethod
    def from_axes(
        cls,
        center_x: float,
        center_y: float,
        a: float,
        b: float,
        angle: float,
        color: Color,
    ) -> EllipseInfo:
        """Build an ellipse and compute its eccentricity (NaN when undefined)."""
        return cls(a, b, center_x, center_y, _eccentricity(a, b), angle, color)


def _eccentricity(a: float, b: float) -> float:
    major, minor = (a, b) if a > b else (b, a)
    if major == 0:
        return math.nan
    ratio = 1 - (minor * minor) / (major * major)
    return math.sqrt(ratio) if ratio >= 0 else math.nan


@dataclass
class ShapeStore:
    """Ordered collections of every line, circle and ellipse drawn so far."""

    lines: list[LineInfo] = field(default_factory=list)
    circles: list[CircleInfo] = field(default_factory=list)
    ellipses: list[EllipseInfo] = field(default_factory=list)

    def add_line(self, line: LineInfo) -> None:
        self.lines.append(line)

    def add_circle(self, circle: CircleInfo) -> None:
        self.circles.append(circle)

    def add_ellipse(self, ellipse: EllipseInfo) -> None:
        self.ellipses.append(ellipse)

    def clear(self) -> None:
        """Forget every stored shape."""
        self.lines.clear()
        self.circles.clear()
        self.ellipses.clear()