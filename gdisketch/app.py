"""The sketch workspace and its main window: forms, shape lists and the canvas."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from .forms import collect_circle, collect_ellipse, collect_line
from .geometry import (
    Point,
    Segment,
    axis_segments,
    circle_bounds,
    ellipse_points,
    line_segment,
    point_pixels,
)
from .listing import ScrollAction, ShapeListPanel
from .palette import (
    BACKGROUND,
    BOX_HEIGHT,
    BOX_LEFT,
    BOX_TOP,
    BOX_WIDTH,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    color_at,
    gradient_color,
)
from .shapes import (
    BLACK,
    DEFAULT_COLOR,
    FORM_HEIGHT,
    FORM_WIDTH,
    LIST_HEIGHT,
    LIST_WIDTH,
    CircleInfo,
    Color,
    EllipseInfo,
    LineInfo,
    ShapeStore,
)

CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600

# Colours a highlighted line cycles through, one per timer tick.
LINE_COLORS = (
    Color(255, 0, 0),
    Color(255, 255, 0),
    Color(238, 130, 238),
    Color(165, 42, 42),
    Color(0, 255, 255),
)

# The ellipse always drawn on the canvas in the current colour.
DEMO_ELLIPSE = (0.0, 0.0, 4.0, 2.0, 30.0)

_EDIT_BACKGROUND = "#cdc1ff"


@dataclass
class Workspace:
    """Everything the sketch window keeps: shapes, lists, colour and selection."""

    current_color: Color = DEFAULT_COLOR
    store: ShapeStore = field(default_factory=ShapeStore, init=False)
    line_panel: ShapeListPanel = field(default_factory=ShapeListPanel.for_lines, init=False)
    circle_panel: ShapeListPanel = field(
        default_factory=ShapeListPanel.for_circles, init=False
    )
    selected_line: LineInfo | None = field(default=None, init=False)
    old_color: Color | None = field(default=None, init=False)
    highlighted: bool = field(default=False, init=False)
    color_index: int = field(default=0, init=False)
    draw_mode: bool = field(default=False, init=False)
    segments: list[Segment] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.store.add_line(LineInfo.from_points(2, 2, 4, 4, DEFAULT_COLOR))
        self.line_panel.sync(self.store.lines)
        self.circle_panel.sync(self.store.circles)

    def submit_line(self, fields: Sequence[str]) -> LineInfo:
        """Add a line read from the line form, in the current colour."""
        line = collect_line(fields, BLACK)
        line.color = self.current_color
        self.store.add_line(line)
        self.line_panel.sync(self.store.lines)
        return line

    def submit_circle(self, fields: Sequence[str]) -> CircleInfo:
        """Add a circle read from the circle form, in the current colour."""
        circle = collect_circle(fields, BLACK)
        circle.color = self.current_color
        self.store.add_circle(circle)
        self.circle_panel.sync(self.store.circles)
        return circle

    def submit_ellipse(self, fields: Sequence[str]) -> EllipseInfo:
        """Add an ellipse read from the ellipse form, in the current colour."""
        ellipse = collect_ellipse(fields, BLACK)
        ellipse.color = self.current_color
        self.store.add_ellipse(ellipse)
        self.circle_panel.sync(self.store.circles)
        return ellipse

    def select_line(self, index: int) -> LineInfo:
        """Highlight the line at ``index``, remembering its colour."""
        if not 0 <= index < len(self.store.lines):
            raise IndexError(f"no line at index {index}")
        line = self.store.lines[index]
        self.old_color = line.color
        self.selected_line = line
        self.highlighted = True
        return line

    def clear_highlight(self) -> bool:
        """Give the highlighted line its colour back; return whether one was highlighted."""
        if not self.highlighted or self.selected_line is None:
            return False
        if self.old_color is not None:
            self.selected_line.color = self.old_color
        self.selected_line = None
        self.highlighted = False
        return True

    def tick(self) -> Color | None:
        """Move the highlighted line on to its next colour and return it."""
        if not self.highlighted or self.selected_line is None:
            return None
        color = LINE_COLORS[self.color_index]
        self.selected_line.color = color
        self.color_index = (self.color_index + 1) % len(LINE_COLORS)
        return color

    def pick_color(self, x: int, y: int) -> Color:
        """Take the colour at point ``(x, y)`` of the picker window as the current colour."""
        self.current_color = color_at(x, y)
        return self.current_color


def _to_screen(x: float, y: float) -> tuple[float, float]:
    return x + CANVAS_WIDTH // 2, CANVAS_HEIGHT // 2 - y


def _device_to_logical(x: int, y: int) -> tuple[int, int]:
    return x - CANVAS_WIDTH // 2, CANVAS_HEIGHT // 2 - y


@dataclass
class _ListView:
    panel: ShapeListPanel
    shapes: Callable[[], list[Any]]
    on_click: Callable[[int], None]
    frame: Any
    canvas: Any
    scrollbar: Any
    windows: list[tuple[int, int]] = field(default_factory=list)


class SketchApp:
    """The main window: the grid canvas, the drawing forms and the shape lists."""

    def __init__(self, workspace: Workspace | None = None) -> None:
        self.workspace = workspace if workspace is not None else Workspace()
        self._tk: Any = None
        self._root: Any = None
        self._canvas: Any = None
        self._forms: dict[str, tuple[Any, list[Any]]] = {}
        self._lists: dict[str, _ListView] = {}
        self._drag_start: tuple[int, int] | None = None
        self._picker: Any = None
        self._picker_image: Any = None

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        import tkinter as tk
        from tkinter import ttk

        self._tk = tk
        root = tk.Tk()
        root.title("Sketch")
        self._root = root

        canvas = tk.Canvas(
            root, width=CANVAS_WIDTH, height=CANVAS_HEIGHT, bg="white", highlightthickness=0
        )
        canvas.grid(row=0, column=0, sticky="nw")
        self._canvas = canvas

        side = tk.Frame(root)
        side.grid(row=0, column=1, sticky="nw", padx=30, pady=10)
        self._build_forms(side, ttk)
        lists = tk.Frame(root)
        lists.grid(row=0, column=2, sticky="nw", padx=20, pady=10)
        self._build_lists(lists, ttk)

        canvas.bind("<ButtonPress-1>", self._on_press)
        canvas.bind("<ButtonRelease-1>", self._on_release)
        canvas.bind("<ButtonPress-3>", self._on_right_click)
        for key in ("c", "C"):
            root.bind(f"<Key-{key}>", self._open_picker)
        for key in ("z", "Z"):
            root.bind(f"<Key-{key}>", lambda _event: self._submit_line())

        self._refresh_lists()
        self._paint()
        root.mainloop()

    # Forms

    def _build_forms(self, side: Any, ttk: Any) -> None:
        tk = self._tk
        chooser = ttk.Combobox(
            side, values=("Lines", "Circle", "Ellipse"), state="readonly", width=30
        )
        chooser.current(2)
        chooser.pack(anchor="w")
        holder = tk.Frame(side, width=FORM_WIDTH, height=FORM_HEIGHT)
        holder.pack(anchor="w", pady=(0, 10))
        holder.pack_propagate(False)

        specs = {
            "Lines": ("Draw Group Box", ("X1", "Y1", "X2", "Y2"), self._submit_line),
            "Circle": (
                "Draw Group Box Circle",
                ("XCenter", "YCenter", "Radius"),
                self._submit_circle,
            ),
            "Ellipse": (
                "Draw Group Box Ellipse",
                ("X", "Y", "A", "B", "Ang"),
                self._submit_ellipse,
            ),
        }
        for name, (title, labels, submit) in specs.items():
            frame = tk.LabelFrame(holder, text=title)
            entries = []
            for position, label in enumerate(labels):
                row, column = divmod(position, 2)
                tk.Label(frame, text=f"{label}:").grid(row=row, column=column * 2, sticky="w")
                entry = tk.Entry(frame, width=8, bg=_EDIT_BACKGROUND)
                entry.grid(row=row, column=column * 2 + 1, padx=2, pady=2)
                entries.append(entry)
            last = (len(labels) + 1) // 2
            tk.Button(frame, text="Color Picker", command=self._open_picker).grid(
                row=last, column=0, columnspan=2, pady=4
            )
            tk.Button(frame, text="Submit", command=submit).grid(
                row=last, column=2, columnspan=2, pady=4
            )
            self._forms[name] = (frame, entries)

        def show(_event: Any = None) -> None:
            for frame, _ in self._forms.values():
                frame.place_forget()
            self._forms[chooser.get()][0].place(x=0, y=0, relwidth=1, relheight=1)

        chooser.bind("<<ComboboxSelected>>", show)
        show()

    def _form_values(self, name: str, clear: bool) -> list[str]:
        _, entries = self._forms[name]
        values = [entry.get() for entry in entries]
        if clear:
            for entry in entries:
                entry.delete(0, "end")
        return values

    def _submit_line(self) -> None:
        self.workspace.submit_line(self._form_values("Lines", clear=True))
        self._after_change()

    def _submit_circle(self) -> None:
        self.workspace.submit_circle(self._form_values("Circle", clear=False))
        self._after_change()

    def _submit_ellipse(self) -> None:
        self.workspace.submit_ellipse(self._form_values("Ellipse", clear=True))
        self._after_change()

    def _after_change(self) -> None:
        self._refresh_lists()
        self._paint()

    # Shape lists

    def _build_lists(self, side: Any, ttk: Any) -> None:
        tk = self._tk
        chooser = ttk.Combobox(side, values=("Lines", "Circle"), state="readonly", width=30)
        chooser.current(0)
        chooser.pack(anchor="w")
        holder = tk.Frame(side, width=LIST_WIDTH, height=LIST_HEIGHT, relief="sunken", bd=2)
        holder.pack(anchor="w")
        holder.pack_propagate(False)

        ws = self.workspace
        specs = (
            ("Lines", ws.line_panel, lambda: ws.store.lines, self._line_button),
            ("Circle", ws.circle_panel, lambda: ws.store.circles, self._circle_button),
        )
        for name, panel, shapes, on_click in specs:
            frame = tk.Frame(holder, bg="white")
            canvas = tk.Canvas(frame, bg="white", highlightthickness=0)
            bar = tk.Scrollbar(frame, orient="vertical")
            bar.pack(side="right", fill="y")
            canvas.pack(side="left", fill="both", expand=True)
            view = _ListView(panel, shapes, on_click, frame, canvas, bar)
            bar.configure(command=lambda *args, v=view: self._on_scrollbar(v, *args))
            canvas.bind("<MouseWheel>", lambda event, v=view: self._on_wheel(v, event.delta))
            self._lists[name] = view

        def show(_event: Any = None) -> None:
            for view in self._lists.values():
                view.frame.place_forget()
            self._lists[chooser.get()].frame.place(x=0, y=0, relwidth=1, relheight=1)

        chooser.bind("<<ComboboxSelected>>", show)
        show()

    def _refresh_lists(self) -> None:
        tk = self._tk
        for view in self._lists.values():
            for row in view.panel.rows[len(view.windows):]:
                preview = tk.Button(
                    view.canvas, text="Preview", command=lambda c=row.preview_id, v=view: v.on_click(c)
                )
                info = tk.Button(
                    view.canvas,
                    text="Show Information",
                    command=lambda c=row.info_id, v=view: v.on_click(c),
                )
                preview_id = view.canvas.create_window(
                    row.preview.left, row.preview.top, anchor="nw",
                    width=row.preview.width, height=row.preview.height, window=preview,
                )
                info_id = view.canvas.create_window(
                    row.info.left, row.info.top, anchor="nw",
                    width=row.info.width, height=row.info.height, window=info,
                )
                view.windows.append((preview_id, info_id))
            self._layout_list(view)

    def _layout_list(self, view: _ListView) -> None:
        canvas = view.canvas
        for (preview_id, info_id), (preview, info) in zip(
            view.windows, view.panel.button_positions()
        ):
            canvas.coords(preview_id, preview.left, preview.top)
            canvas.coords(info_id, info.left, info.top)
        canvas.delete("label")
        height = canvas.winfo_height()
        if height <= 1:
            height = LIST_HEIGHT
        for label in view.panel.row_labels(view.shapes(), height):
            canvas.create_text(label.x, label.y, anchor="nw", text=label.text, tags="label")
        state = view.panel.scroll_state
        if state.maximum > 0:
            first = max(0.0, state.position / state.maximum)
            last = min(1.0, (state.position + state.page) / state.maximum)
        else:
            first, last = 0.0, 1.0
        view.scrollbar.set(first, last)

    def _on_scrollbar(self, view: _ListView, operation: str, amount: str, unit: str = "") -> None:
        state = view.panel.scroll_state
        if operation == "moveto":
            state.scroll(ScrollAction.THUMB_TRACK, int(float(amount) * state.maximum))
        else:
            count = int(amount)
            if unit == "pages":
                action = ScrollAction.PAGE_UP if count < 0 else ScrollAction.PAGE_DOWN
            else:
                action = ScrollAction.LINE_UP if count < 0 else ScrollAction.LINE_DOWN
            for _ in range(abs(count)):
                state.scroll(action)
        self._layout_list(view)

    def _on_wheel(self, view: _ListView, delta: int) -> None:
        view.panel.scroll_state.wheel(delta)
        self._layout_list(view)

    def _line_button(self, command_id: int) -> None:
        lines = self.workspace.store.lines
        shape = self.workspace.line_panel.command(command_id, lines)
        if shape is None:
            return
        index = next(i for i, line in enumerate(lines) if line is shape)
        self.workspace.select_line(index)
        self._paint()

    def _circle_button(self, command_id: int) -> None:
        self.workspace.circle_panel.command(command_id, self.workspace.store.circles)
        self._layout_list(self._lists["Circle"])

    # Colour picker

    def _open_picker(self, _event: Any = None) -> None:
        tk = self._tk
        if self._picker is not None and self._picker.winfo_exists():
            self._picker.lift()
            return
        top = tk.Toplevel(self._root)
        top.title("Color Picker")
        top.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        top.attributes("-topmost", True)
        canvas = tk.Canvas(
            top, width=WINDOW_WIDTH, height=WINDOW_HEIGHT,
            bg=BACKGROUND.to_hex(), highlightthickness=0,
        )
        canvas.pack()
        image = tk.PhotoImage(width=BOX_WIDTH, height=BOX_HEIGHT)
        image.put(
            " ".join(
                "{" + " ".join(gradient_color(x, y).to_hex() for x in range(BOX_WIDTH)) + "}"
                for y in range(BOX_HEIGHT)
            )
        )
        canvas.create_image(BOX_LEFT, BOX_TOP, anchor="nw", image=image)
        self._picker_image = image

        def pick(event: Any) -> None:
            try:
                self.workspace.pick_color(event.x, event.y)
            except ValueError:
                return
            top.destroy()
            self._paint()

        canvas.bind("<Button-1>", pick)
        self._picker = top

    # Canvas

    def _on_press(self, event: Any) -> None:
        if self.workspace.draw_mode:
            self._drag_start = (event.x, event.y)
        if self.workspace.clear_highlight():
            self._paint()

    def _on_release(self, event: Any) -> None:
        if self.workspace.draw_mode and self._drag_start is not None:
            start = _device_to_logical(*self._drag_start)
            end = _device_to_logical(event.x, event.y)
            self.workspace.segments.append(Segment(*start, *end))
            self._paint()

    def _on_right_click(self, _event: Any) -> None:
        self.workspace.draw_mode = not self.workspace.draw_mode

    def _stroke(self, segment: Segment, color: Color, width: int) -> None:
        x1, y1 = _to_screen(segment.x1, segment.y1)
        x2, y2 = _to_screen(segment.x2, segment.y2)
        self._canvas.create_line(x1, y1, x2, y2, fill=color.to_hex(), width=width)

    def _marker(self, x: float, y: float, color: Color, size: int) -> None:
        pixels = point_pixels(x, y, size)
        left, top = _to_screen(min(p.x for p in pixels), max(p.y for p in pixels))
        right, bottom = _to_screen(max(p.x for p in pixels), min(p.y for p in pixels))
        self._canvas.create_rectangle(
            left, top, right + 1, bottom + 1, fill=color.to_hex(), outline=""
        )

    def _polyline(self, points: list[Point], color: Color) -> None:
        coords = [value for point in points for value in _to_screen(point.x, point.y)]
        if len(coords) >= 4:
            self._canvas.create_line(*coords, fill=color.to_hex(), width=2)

    def _paint(self) -> None:
        canvas = self._canvas
        canvas.delete("all")
        for stroke in axis_segments(CANVAS_WIDTH, CANVAS_HEIGHT):
            self._stroke(stroke.segment, stroke.color, stroke.width)
        store = self.workspace.store
        for line in store.lines:
            self._marker(line.start_x, line.start_y, line.color, 7)
            self._marker(line.end_x, line.end_y, line.color, 7)
            self._stroke(
                line_segment(line.start_x, line.start_y, line.end_x, line.end_y), line.color, 2
            )
        for circle in store.circles:
            bounds = circle_bounds(circle.center_x, circle.center_y, circle.radius)
            left, top = _to_screen(bounds.left, bounds.top)
            right, bottom = _to_screen(bounds.right, bounds.bottom)
            canvas.create_oval(left, top, right, bottom, outline=circle.color.to_hex(), width=2)
            self._marker(circle.center_x, circle.center_y, circle.color, 5)
        for ellipse in store.ellipses:
            self._polyline(
                ellipse_points(
                    ellipse.center_x, ellipse.center_y, ellipse.a, ellipse.b, ellipse.angle
                ),
                ellipse.color,
            )
        self._polyline(ellipse_points(*DEMO_ELLIPSE), self.workspace.current_color)


def main(argv: Sequence[str] | None = None) -> int:
    """Start the sketch window."""
    parser = argparse.ArgumentParser(
        prog="gdisketch", description="Draw lines, circles and ellipses on a grid."
    )
    parser.parse_args(argv)
    SketchApp().run()
    return 0