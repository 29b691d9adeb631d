"""Turning the text of the drawing forms into shapes."""

from __future__ import annotations

import re
from collections.abc import Sequence

from .shapes import CircleInfo, Color, EllipseInfo, LineInfo

# Edit boxes are read into a 16-byte buffer, so only 15 characters survive.
FIELD_LIMIT = 15

_SPACE = "[ \t\n\v\f\r]*"
_INT_RE = re.compile(_SPACE + r"([+-]?[0-9]+)")
_FLOAT_RE = re.compile(
    _SPACE
    + r"([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def parse_int(text: str) -> int:
    """Read a leading integer as ``atoi`` does; 0 when there is none."""
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else 0


def parse_float(text: str) -> float:
    """Read a leading number as ``atof`` does; 0.0 when there is none."""
    match = _FLOAT_RE.match(text)
    return float(match.group(1)) if match else 0.0


def _fields(fields: Sequence[str], count: int, shape: str) -> list[str]:
    if len(fields) != count:
        raise ValueError(f"{shape} form needs {count} fields, got {len(fields)}")
    return [text[:FIELD_LIMIT] for text in fields]


def collect_line(fields: Sequence[str], color: Color) -> LineInfo:
    """Build a line from the X1, Y1, X2 and Y2 fields."""
    x1, y1, x2, y2 = (parse_int(text) for text in _fields(fields, 4, "line"))
    return LineInfo.from_points(x1, y1, x2, y2, color)


def collect_circle(fields: Sequence[str], color: Color) -> CircleInfo:
    """Build a circle from the XCenter, YCenter and Radius fields.

    The X centre is read as a whole number, the other two as decimals.
    """
    x_text, y_text, r_text = _fields(fields, 3, "circle")
    return CircleInfo(
        radius=parse_float(r_text),
        center_x=float(parse_int(x_text)),
        center_y=parse_float(y_text),
        color=color,
    )


def collect_ellipse(fields: Sequence[str], color: Color) -> EllipseInfo:
    """Build an ellipse from the X, Y, A, B and angle fields."""
    x, y, a, b, angle = (parse_float(text) for text in _fields(fields, 5, "ellipse"))
    return EllipseInfo.from_axes(x, y, a, b, angle, color)