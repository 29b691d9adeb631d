"""Scrollable lists of drawn shapes with their Preview and Information buttons."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, NamedTuple, TypeVar

from .shapes import (
    CIRCLE_INFO_ID_BASE,
    CIRCLE_PREVIEW_ID_BASE,
    LINE_INFO_ID_BASE,
    LINE_PREVIEW_ID_BASE,
)

T = TypeVar("T")

LINE_STEP = 20
WHEEL_DELTA = 120
ROW_HEIGHT = 30
ROW_TOP = 30
BUTTON_OFFSET = 5
LABEL_OFFSET = 15
LABEL_LEFT = 20
MAX_LINES = 10


class ScrollAction(enum.Enum):
    """Requests a vertical scroll bar can make."""

    LINE_UP = enum.auto()
    LINE_DOWN = enum.auto()
    PAGE_UP = enum.auto()
    PAGE_DOWN = enum.auto()
    THUMB_TRACK = enum.auto()


class Rect(NamedTuple):
    left: int
    top: int
    width: int
    height: int


class RowLabel(NamedTuple):
    x: int
    y: int
    text: str


class ButtonRow(NamedTuple):
    """The two buttons created for one listed shape."""

    index: int
    preview_id: int
    info_id: int
    preview: Rect
    info: Rect


def _button_rects(index: int, offset: int) -> tuple[Rect, Rect]:
    y = ROW_TOP + index * ROW_HEIGHT + BUTTON_OFFSET - offset
    return Rect(130, y + 8, 60, 20), Rect(200, y + 8, 120, 20)


@dataclass
class ScrollState:
    """Range, page size and position of a vertical scroll bar."""

    minimum: int = 0
    maximum: int = 1000
    page: int = 200
    position: int = 0

    def clamp(self, position: int) -> int:
        """Limit ``position`` to the range, keeping one page in view."""
        if position < self.minimum:
            position = self.minimum
        if position > self.maximum - self.page:
            position = self.maximum - self.page
        return position

    def scroll(self, action: ScrollAction, track_position: int | None = None) -> int:
        """Apply a scroll-bar request and return the new position."""
        position = self.position
        if action is ScrollAction.LINE_UP:
            position -= LINE_STEP
        elif action is ScrollAction.LINE_DOWN:
            position += LINE_STEP
        elif action is ScrollAction.PAGE_UP:
            position -= self.page
        elif action is ScrollAction.PAGE_DOWN:
            position += self.page
        elif action is ScrollAction.THUMB_TRACK:
            if track_position is None:
                raise ValueError("thumb tracking needs a track position")
            position = track_position
        self.position = self.clamp(position)
        return self.position

    def wheel(self, delta: int) -> int:
        """Scroll for a mouse-wheel turn of ``delta`` units; return the new position."""
        notches = abs(delta) // WHEEL_DELTA
        step = -notches * LINE_STEP if delta > 0 else notches * LINE_STEP
        self.position = self.clamp(self.position + step)
        return self.position


@dataclass
class ShapeListPanel(Generic[T]):
    """A scrolling list that gives each shape a row with two buttons."""

    label: str
    preview_base: int
    info_base: int
    command_ranges: tuple[tuple[int, int, int], ...]
    scroll_state: ScrollState = field(default_factory=ScrollState)
    rows: list[ButtonRow] = field(default_factory=list)
    selected: T | None = None
    _processed: dict[int, T] = field(default_factory=dict, repr=False)

    @classmethod
    def for_lines(cls) -> ShapeListPanel:
        """Panel listing lines; both button kinds count from the preview base."""
        return cls(
            "Line",
            LINE_PREVIEW_ID_BASE,
            LINE_INFO_ID_BASE,
            ((LINE_PREVIEW_ID_BASE, LINE_INFO_ID_BASE + MAX_LINES, LINE_PREVIEW_ID_BASE),),
        )

    @classmethod
    def for_circles(cls) -> ShapeListPanel:
        """Panel listing circles; each button kind counts from its own base."""
        return cls(
            "Circle",
            CIRCLE_PREVIEW_ID_BASE,
            CIRCLE_INFO_ID_BASE,
            (
                (CIRCLE_PREVIEW_ID_BASE, CIRCLE_PREVIEW_ID_BASE + 100, CIRCLE_PREVIEW_ID_BASE),
                (CIRCLE_INFO_ID_BASE, CIRCLE_INFO_ID_BASE + 100, CIRCLE_INFO_ID_BASE),
            ),
        )

    def _is_processed(self, shape: T) -> bool:
        return self._processed.get(id(shape)) is shape

    def sync(self, shapes: Sequence[T]) -> list[ButtonRow]:
        """Add rows for shapes not yet listed and return the new rows.

        The scroll range is reset to end below the last new row, or to zero
        when nothing new was added.
        """
        added: list[ButtonRow] = []
        max_y = 0
        for shape in shapes:
            if self._is_processed(shape):
                continue
            index = len(self.rows)
            preview, info = _button_rects(index, 0)
            row = ButtonRow(
                index, self.preview_base + index, self.info_base + index, preview, info
            )
            self.rows.append(row)
            added.append(row)
            self._processed[id(shape)] = shape
            max_y = ROW_TOP + index * ROW_HEIGHT + BUTTON_OFFSET + 50
        self.scroll_state.minimum = 0
        self.scroll_state.maximum = max_y
        self.scroll_state.page = 200
        return added

    def row_labels(self, shapes: Sequence[T], visible_height: int) -> list[RowLabel]:
        """Labels of the listed shapes that fall inside the visible height."""
        labels: list[RowLabel] = []
        listed = (shape for shape in shapes if self._is_processed(shape))
        for number, _shape in enumerate(listed, start=1):
            y = ROW_TOP + (number - 1) * ROW_HEIGHT + LABEL_OFFSET - self.scroll_state.position
            if y + ROW_HEIGHT > 0 and y < visible_height:
                labels.append(RowLabel(LABEL_LEFT, y, f"{self.label} {number}"))
        return labels

    def button_positions(self) -> list[tuple[Rect, Rect]]:
        """Current preview and information button rectangles, scrolled."""
        return [
            _button_rects(row.index, self.scroll_state.position) for row in self.rows
        ]

    def command(self, command_id: int, shapes: Sequence[T]) -> T | None:
        """Select the shape a button refers to; return it, or None if none matches."""
        for start, stop, base in self.command_ranges:
            if start <= command_id < stop:
                index = command_id - base
                if 0 <= index < len(shapes):
                    self.selected = shapes[index]
                    return self.selected
                return None
        return None

    def reset(self) -> None:
        """Drop every row, the selection and the scroll position."""
        self.rows.clear()
        self._processed.clear()
        self.selected = None
        self.scroll_state = ScrollState()