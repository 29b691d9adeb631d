"""Rubber-band drawing of lines, ellipses and circles with the mouse."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Union

from .geometry import Bounds, Point, Segment, ShapeKind, drag_bounds, ellipse_points

DRAWER_SIZE = (500, 400)
DEMO_SIZE = (600, 600)
# Centre x, centre y, semi-major axis, semi-minor axis, rotation in degrees.
DEMO_ELLIPSE = (300.0, 300.0, 100.0, 50.0, 30.0)

Shape = Union[Segment, Bounds]


@dataclass
class RubberBand:
    """Tracks a mouse drag and the shape it outlines."""

    kind: ShapeKind = ShapeKind.LINE
    drawing: bool = False
    start_point: Point = Point(0, 0)
    prev_point: Point = Point(0, 0)

    def start(self, x: int, y: int) -> None:
        """Begin a drag at ``(x, y)``."""
        self.drawing = True
        self.start_point = Point(x, y)
        self.prev_point = self.start_point

    def move(self, x: int, y: int) -> tuple[Shape, Shape] | None:
        """Follow the pointer; return the outline to erase and the one to draw."""
        if not self.drawing:
            return None
        erase = drag_bounds(self.kind, self.start_point, self.prev_point)
        self.prev_point = Point(x, y)
        draw = drag_bounds(self.kind, self.start_point, self.prev_point)
        return erase, draw

    def finish(self) -> Shape | None:
        """End the drag and return the final shape, or None if none was in progress."""
        if not self.drawing:
            return None
        self.drawing = False
        return drag_bounds(self.kind, self.start_point, self.prev_point)


def _draw(canvas: Any, kind: ShapeKind, shape: Shape, tag: str, **options: Any) -> None:
    if kind is ShapeKind.LINE:
        canvas.create_line(*shape, tags=tag, **options)
    else:
        canvas.create_oval(*shape, tags=tag, outline=options.get("fill", "black"),
                           dash=options.get("dash", ""))


def _run_drawer() -> None:
    import tkinter as tk

    root = tk.Tk()
    root.title("Shape Drawer")
    root.geometry(f"{DRAWER_SIZE[0]}x{DRAWER_SIZE[1]}")
    band = RubberBand()

    def select(kind: ShapeKind) -> None:
        band.kind = kind

    bar = tk.Frame(root)
    bar.pack(anchor="nw", padx=10, pady=10)
    for label, kind in (
        ("Line", ShapeKind.LINE),
        ("Ellipse", ShapeKind.ELLIPSE),
        ("Circle", ShapeKind.CIRCLE),
    ):
        tk.Button(bar, text=label, width=7, command=lambda k=kind: select(k)).pack(
            side="left", padx=(0, 10)
        )

    canvas = tk.Canvas(root, bg="white", highlightthickness=0)
    canvas.pack(fill="both", expand=True)

    def on_press(event: Any) -> None:
        band.start(event.x, event.y)
        canvas.delete("preview")

    def on_motion(event: Any) -> None:
        outlines = band.move(event.x, event.y)
        if outlines is not None:
            canvas.delete("preview")
            _draw(canvas, band.kind, outlines[1], "preview", fill="gray", dash=(3, 3))

    def on_release(_event: Any) -> None:
        shape = band.finish()
        canvas.delete("preview")
        if shape is not None:
            _draw(canvas, band.kind, shape, "shape", fill="black")

    canvas.bind("<ButtonPress-1>", on_press)
    canvas.bind("<B1-Motion>", on_motion)
    canvas.bind("<ButtonRelease-1>", on_release)
    root.mainloop()


def _run_ellipse_demo() -> None:
    import tkinter as tk

    root = tk.Tk()
    root.title("Rotated Ellipse")
    canvas = tk.Canvas(
        root, width=DEMO_SIZE[0], height=DEMO_SIZE[1], bg="white", highlightthickness=0
    )
    canvas.pack()
    points = ellipse_points(*DEMO_ELLIPSE, scale=1)
    canvas.create_line(*[value for point in points for value in point])
    root.mainloop()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the shape drawer, or the rotated-ellipse view with ``--ellipse``."""
    parser = argparse.ArgumentParser(
        prog="gdisketch-rays", description="Drag with the mouse to draw shapes."
    )
    parser.add_argument(
        "--ellipse", action="store_true", help="show a rotated ellipse instead"
    )
    args = parser.parse_args(argv)
    if args.ellipse:
        _run_ellipse_demo()
    else:
        _run_drawer()
    return 0