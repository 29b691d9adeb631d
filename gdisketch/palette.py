"""The colour-picker gradient and the colour under a click in its window."""

from __future__ import annotations

import math

from .shapes import Color

BOX_WIDTH = 300
BOX_HEIGHT = 250
BOX_LEFT = 50
BOX_TOP = 5
WINDOW_WIDTH = 400
WINDOW_HEIGHT = 300
BACKGROUND = Color(128, 128, 128)


def gradient_color(x: int, y: int) -> Color:
    """Colour of the gradient box at box-relative ``(x, y)``.

    Red grows left to right, green top to bottom, and blue follows one
    sine period across the width.
    """
    if not (0 <= x < BOX_WIDTH and 0 <= y < BOX_HEIGHT):
        raise ValueError(f"point ({x}, {y}) lies outside the gradient box")
    red = x * 255 // (BOX_WIDTH - 1)
    green = y * 255 // (BOX_HEIGHT - 1)
    blue_level = (math.sin(x / BOX_WIDTH * 3.14159 * 2) + 1) / 2
    return Color(red, green, int(blue_level * 255))


def color_at(x: int, y: int) -> Color:
    """Colour shown at window point ``(x, y)`` of the picker."""
    if not (0 <= x < WINDOW_WIDTH and 0 <= y < WINDOW_HEIGHT):
        raise ValueError(f"point ({x}, {y}) lies outside the picker window")
    box_x = x - BOX_LEFT
    box_y = y - BOX_TOP
    if 0 <= box_x < BOX_WIDTH and 0 <= box_y < BOX_HEIGHT:
        return gradient_color(box_x, box_y)
    return BACKGROUND