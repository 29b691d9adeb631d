# gdisketch

A small sketching workspace for plotting lines, circles and rotated
ellipses on a Cartesian grid, and a rubber-band shape drawer. The windows
use tkinter from the standard library; there are no other dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `gdisketch`

Opens the main workspace: an 800×600 canvas with centred axes, tick marks
and a background grid (25 pixels per grid unit), a form for entering
shapes, and a list panel of the shapes entered so far. The workspace
starts with one line from (2, 2) to (4, 4), and always draws a rotated
demonstration ellipse at the origin in the current colour.

- Choose **Lines**, **Circle** or **Ellipse** from the first drop-down to
  switch forms. A line takes two end points (`X1`, `Y1`, `X2`, `Y2`), read
  as whole numbers; a circle takes `XCenter`, `YCenter` and `Radius`; an
  ellipse takes a centre (`X`, `Y`), the semi-axes `A` and `B`, and a
  rotation `Ang` in degrees. Fields are read leniently: a leading number is
  taken and anything that is not a number counts as 0. **Submit** adds the
  shape in the current colour; the line and ellipse forms are cleared
  afterwards, the circle form is not.
- **Color Picker** (or the `C` key) opens a gradient palette; a click on it
  sets the current colour (outside the gradient the grey background colour
  is taken).
- The `Z` key submits the line form.
- The second drop-down switches the list panel between **Lines** and
  **Circle**. Each listed shape gets **Preview** and **Show Information**
  buttons; the panel scrolls with its scroll bar or the mouse wheel. In the
  line list either button selects that line as highlighted; a left click on
  the canvas ends the highlight. In the circle list either button selects
  the circle.
- A right click on the canvas toggles drag mode; in drag mode a left-button
  drag is recorded in `Workspace.segments`.

### `gdisketch-rays`

Opens a window with **Line**, **Ellipse** and **Circle** buttons. Drag with
the left mouse button to draw the chosen shape; a dashed outline follows
the pointer until the button is released. With `--ellipse` it shows a
single ellipse rotated by 30 degrees instead.

## Library use

The building blocks are importable on their own:

- `gdisketch.shapes` — `Color` (with `to_hex`), `LineInfo`, `CircleInfo`,
  `EllipseInfo` and the `ShapeStore` that holds them.
  `LineInfo.from_points` works out slope and angle in whole degrees;
  `EllipseInfo.from_axes` works out the eccentricity (NaN when undefined).
- `gdisketch.forms` — `collect_line`, `collect_circle` and
  `collect_ellipse` turn form text into shapes; `parse_int` and
  `parse_float` read a leading number the way the form fields are read.
- `gdisketch.palette` — `gradient_color` and `color_at` for the colour
  picker's gradient.
- `gdisketch.listing` — `ScrollState`, `ScrollAction` and
  `ShapeListPanel` (`for_lines`, `for_circles`) for the scrolling shape
  list.
- `gdisketch.geometry` — pure geometry: `project_3d`, `axis_segments`,
  `point_pixels`, `line_segment`, `rectangle_edges`, `circle_bounds`,
  `ellipse_points`, `arrow_head`, `drag_bounds`, `table_rows` and the
  `ShapeKind` enum.
- `gdisketch.app` — the `Workspace` state (`submit_line`, `submit_circle`,
  `submit_ellipse`, `select_line`, `clear_highlight`, `tick`,
  `pick_color`) and the `SketchApp` window.
- `gdisketch.rays` — the `RubberBand` drag tracker (`start`, `move`,
  `finish`).

```python
from gdisketch.shapes import Color, EllipseInfo, ShapeStore

store = ShapeStore()
store.add_ellipse(EllipseInfo.from_axes(0, 0, 4, 2, 30.0, Color(255, 0, 0)))
```

## What it does not do

- Shapes live only in memory: nothing is saved or loaded.
- Segments recorded in drag mode are kept in `Workspace.segments` but are
  not drawn on the canvas.
- `Workspace.tick` cycles a highlighted line through a set of colours, but
  the window does not call it on a timer, so a highlighted line keeps its
  colour on screen.
- **Show Information** does not display any details; it selects the shape,
  just as **Preview** does.
- Shapes cannot be edited or deleted once added.