import pytest

from gdisketch.listing import ScrollAction, ScrollState, ShapeListPanel
from gdisketch.shapes import BLACK, CircleInfo, LineInfo


def _circles(count):
    return [CircleInfo(float(n + 1), 0.0, 0.0, BLACK) for n in range(count)]


def _lines(count):
    return [LineInfo.from_points(0, 0, n + 1, n + 2, BLACK) for n in range(count)]


def test_clamp_limits_to_range():
    state = ScrollState()
    assert state.clamp(-5) == state.minimum
    assert state.clamp(5000) == state.maximum - state.page
    assert state.clamp(100) == 100


def test_clamp_with_tiny_range_goes_below_minimum():
    state = ScrollState(maximum=0)
    assert state.clamp(10) == -state.page


def test_line_steps():
    state = ScrollState()
    assert state.scroll(ScrollAction.LINE_DOWN) == 20
    assert state.scroll(ScrollAction.LINE_DOWN) == 40
    assert state.scroll(ScrollAction.LINE_UP) == 20
    state.scroll(ScrollAction.LINE_UP)
    assert state.scroll(ScrollAction.LINE_UP) == 0


def test_page_steps_and_limit():
    state = ScrollState()
    assert state.scroll(ScrollAction.PAGE_DOWN) == state.page
    for _ in range(10):
        state.scroll(ScrollAction.PAGE_DOWN)
    assert state.position == state.maximum - state.page
    assert state.scroll(ScrollAction.PAGE_UP) == state.maximum - 2 * state.page


def test_thumb_track():
    state = ScrollState()
    assert state.scroll(ScrollAction.THUMB_TRACK, 123) == 123
    with pytest.raises(ValueError):
        state.scroll(ScrollAction.THUMB_TRACK)


def test_wheel_moves_by_notches():
    state = ScrollState(position=100)
    assert state.wheel(-120) == 120
    assert state.wheel(-240) == 160
    assert state.wheel(120) == 140
    assert state.wheel(60) == 140


def test_sync_adds_each_shape_once():
    panel = ShapeListPanel.for_circles()
    shapes = _circles(2)
    rows = panel.sync(shapes)
    assert [row.index for row in rows] == [0, 1]
    assert [row.preview_id for row in rows] == [500, 501]
    assert [row.info_id for row in rows] == [600, 601]
    assert panel.sync(shapes) == []
    shapes.append(CircleInfo(9.0, 1.0, 1.0, BLACK))
    added = panel.sync(shapes)
    assert [row.index for row in added] == [2]
    assert len(panel.rows) == 3


def test_sync_equal_but_distinct_shapes_are_both_listed():
    panel = ShapeListPanel.for_circles()
    shapes = [CircleInfo(1.0, 0.0, 0.0, BLACK), CircleInfo(1.0, 0.0, 0.0, BLACK)]
    assert len(panel.sync(shapes)) == 2


def test_sync_sets_scroll_range():
    panel = ShapeListPanel.for_lines()
    panel.sync(_lines(1))
    assert panel.scroll_state.maximum == 85
    assert panel.scroll_state.page == 200
    panel.sync(_lines(0))
    assert panel.scroll_state.maximum == 0


def test_button_rects_layout():
    panel = ShapeListPanel.for_lines()
    rows = panel.sync(_lines(2))
    first, second = rows
    assert first.preview.left == 130 and first.preview.width == 60
    assert first.info.left == 200 and first.info.width == 120
    assert first.preview.height == 20
    assert first.preview.top == 43
    assert second.preview.top - first.preview.top == 30
    assert first.preview.top == first.info.top


def test_button_positions_follow_scroll():
    panel = ShapeListPanel.for_circles()
    panel.sync(_circles(3))
    before = panel.button_positions()
    panel.scroll_state.position = 20
    after = panel.button_positions()
    assert len(after) == 3
    for (old_preview, old_info), (new_preview, new_info) in zip(before, after):
        assert old_preview.top - new_preview.top == 20
        assert old_info.top - new_info.top == 20
        assert new_preview.left == old_preview.left


def test_row_labels_text_and_spacing():
    panel = ShapeListPanel.for_circles()
    shapes = _circles(2)
    panel.sync(shapes)
    labels = panel.row_labels(shapes, 300)
    assert [label.text for label in labels] == ["Circle 1", "Circle 2"]
    assert labels[1].y - labels[0].y == 30
    assert all(label.x == 20 for label in labels)


def test_row_labels_skip_unlisted_and_clip():
    panel = ShapeListPanel.for_lines()
    shapes = _lines(2)
    panel.sync(shapes[:1])
    assert [label.text for label in panel.row_labels(shapes, 300)] == ["Line 1"]
    assert panel.row_labels(shapes, 0) == []


def test_line_commands_count_from_preview_base():
    panel = ShapeListPanel.for_lines()
    shapes = _lines(3)
    assert panel.command(300, shapes) is shapes[0]
    assert panel.command(302, shapes) is shapes[2]
    assert panel.selected is shapes[2]
    assert panel.command(405, shapes) is None
    assert panel.command(250, shapes) is None
    assert panel.selected is shapes[2]


def test_circle_commands_use_both_bases():
    panel = ShapeListPanel.for_circles()
    shapes = _circles(2)
    assert panel.command(601, shapes) is shapes[1]
    assert panel.command(500, shapes) is shapes[0]
    assert panel.command(700, shapes) is None


def test_reset_clears_everything():
    panel = ShapeListPanel.for_circles()
    shapes = _circles(2)
    panel.sync(shapes)
    panel.command(500, shapes)
    panel.scroll_state.position = 40
    panel.reset()
    assert panel.rows == []
    assert panel.selected is None
    assert panel.scroll_state.position == 0
    assert len(panel.sync(shapes)) == 2