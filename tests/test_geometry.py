import math

import pytest

from gdisketch.geometry import (
    AXIS_PEN_WIDTH,
    GRID_COLOR,
    GRID_PEN_WIDTH,
    GRID_SCALE,
    MAX_TABLE_ROWS,
    TICK_SIZE,
    Bounds,
    Point,
    Segment,
    ShapeKind,
    TableRow,
    arrow_head,
    axis_segments,
    circle_bounds,
    drag_bounds,
    ellipse_points,
    line_segment,
    point_pixels,
    project_3d,
    rectangle_edges,
    table_rows,
)


def test_project_identity_at_zero_depth():
    assert project_3d(7, -3, 0) == (7, -3)


def test_project_sample_point():
    assert project_3d(100, 100, 100) == (83, 83)


def test_project_truncates_toward_zero():
    positive = project_3d(100, 100, 100)
    assert project_3d(-100, -100, 100) == Point(-positive.x, -positive.y)


def test_project_camera_plane_raises():
    with pytest.raises(ValueError):
        project_3d(1, 1, -500)


def test_axis_main_lines():
    strokes = axis_segments(800, 600)
    assert strokes[0].segment == Segment(-400, 0, 400, 0)
    assert strokes[1].segment == Segment(0, -300, 0, 300)
    assert strokes[0].width == AXIS_PEN_WIDTH


def test_axis_ticks_and_grid_counts_match():
    strokes = axis_segments(800, 600)
    thick = [s for s in strokes if s.width == AXIS_PEN_WIDTH]
    thin = [s for s in strokes if s.width == GRID_PEN_WIDTH]
    assert len(thick) - 2 == len(thin)
    assert all(s.color == GRID_COLOR for s in thin)
    ticks = thick[2:]
    for stroke in ticks:
        seg = stroke.segment
        span = {abs(seg.x2 - seg.x1), abs(seg.y2 - seg.y1)}
        assert span == {0, 2 * TICK_SIZE}


def test_axis_negative_size_raises():
    with pytest.raises(ValueError):
        axis_segments(-1, 10)


def test_point_pixels_square():
    pixels = point_pixels(0, 0, 5)
    assert len(pixels) == 25
    assert len(set(pixels)) == 25
    assert all(-2 <= p.x <= 2 and -2 <= p.y <= 2 for p in pixels)


def test_point_pixels_single():
    assert point_pixels(1, 2, 1) == [Point(GRID_SCALE, 2 * GRID_SCALE)]


def test_point_pixels_negative_size():
    with pytest.raises(ValueError):
        point_pixels(0, 0, -1)


def test_line_segment_scaled():
    assert line_segment(1, 2, 3, 4) == Segment(
        GRID_SCALE, 2 * GRID_SCALE, 3 * GRID_SCALE, 4 * GRID_SCALE
    )


def test_rectangle_edges():
    edges = rectangle_edges(-8, 8, 8, -8)
    assert edges == [
        line_segment(-8, 8, 8, 8),
        line_segment(-8, 8, -8, -8),
        line_segment(8, -8, 8, 8),
        line_segment(8, -8, -8, -8),
    ]
    assert all(e.x1 == e.x2 or e.y1 == e.y2 for e in edges)


def test_circle_bounds():
    bounds = circle_bounds(0, 0, 2)
    assert bounds == Bounds(-2 * GRID_SCALE, 2 * GRID_SCALE, 2 * GRID_SCALE, -2 * GRID_SCALE)
    assert bounds.right - bounds.left == bounds.top - bounds.bottom


def test_ellipse_points_unrotated_start():
    points = ellipse_points(300, 300, 100, 50, 0, 1)
    assert len(points) == 360
    assert points[0] == Point(400, 300)


def test_ellipse_points_lie_on_ellipse():
    points = ellipse_points(300, 300, 100, 50, 0, 1)
    for p in points:
        value = ((p.x - 300) / 100) ** 2 + ((p.y - 300) / 50) ** 2
        assert value == pytest.approx(1.0, abs=0.05)


def test_ellipse_circle_distance_under_rotation():
    points = ellipse_points(0, 0, 4, 4, 30.0)
    radius = 4 * GRID_SCALE
    for p in points:
        assert abs(math.hypot(p.x, p.y) - radius) < 2


def test_arrow_head_symmetric_on_horizontal_line():
    tip, left, right = arrow_head(0, 0, 100, 0)
    assert tip == Point(100, 0)
    assert left.x == right.x
    assert left.y == -right.y
    assert left.x < 100


def test_arrow_wings_about_fifteen_from_tip():
    tip, left, right = arrow_head(10, 20, 70, 95)
    for wing in (left, right):
        assert abs(math.hypot(wing.x - tip.x, wing.y - tip.y) - 15) < 2


def test_drag_line_and_ellipse():
    assert drag_bounds(ShapeKind.LINE, (1, 2), (3, 4)) == Segment(1, 2, 3, 4)
    assert drag_bounds(ShapeKind.ELLIPSE, (1, 2), (3, 4)) == Bounds(1, 2, 3, 4)


def test_drag_circle_square():
    bounds = drag_bounds(ShapeKind.CIRCLE, (10, 10), (50, 30))
    assert bounds == Bounds(10, 10, 30, 30)


def test_drag_circle_negative_direction():
    bounds = drag_bounds(ShapeKind.CIRCLE, (10, 10), (0, 40))
    assert bounds == Bounds(10, 10, 0, 20)
    assert abs(bounds.right - bounds.left) == abs(bounds.bottom - bounds.top)


def test_table_rows_skips_anchor_and_limits():
    segments = [(i, i + 1, i + 2, i + 3) for i in range(12)]
    rows = table_rows(segments)
    assert len(rows) == MAX_TABLE_ROWS
    assert rows[0] == TableRow(1, *segments[1])
    assert [r.number for r in rows] == list(range(1, MAX_TABLE_ROWS + 1))


def test_table_rows_empty_and_single():
    assert table_rows([]) == []
    assert table_rows([(1, 2, 3, 4)]) == []