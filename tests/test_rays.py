from gdisketch.geometry import Bounds, Segment, ShapeKind, drag_bounds
from gdisketch.rays import RubberBand


def test_move_and_finish_before_start_do_nothing():
    band = RubberBand()
    assert band.move(5, 5) is None
    assert band.finish() is None
    assert band.drawing is False


def test_line_drag():
    band = RubberBand()
    band.start(10, 20)
    erase, draw = band.move(30, 40)
    assert erase == Segment(10, 20, 10, 20)
    assert draw == Segment(10, 20, 30, 40)
    assert band.finish() == Segment(10, 20, 30, 40)
    assert band.drawing is False


def test_erase_is_previous_outline():
    band = RubberBand()
    band.start(0, 0)
    band.move(3, 4)
    erase, draw = band.move(7, 8)
    assert erase == Segment(0, 0, 3, 4)
    assert draw == Segment(0, 0, 7, 8)


def test_ellipse_drag_gives_dragged_rectangle():
    band = RubberBand(kind=ShapeKind.ELLIPSE)
    band.start(5, 6)
    band.move(50, 60)
    assert band.finish() == Bounds(5, 6, 50, 60)


def test_circle_drag_is_square():
    band = RubberBand(kind=ShapeKind.CIRCLE)
    band.start(100, 100)
    band.move(40, 130)
    shape = band.finish()
    assert shape == drag_bounds(ShapeKind.CIRCLE, (100, 100), (40, 130))
    assert abs(shape.right - shape.left) == abs(shape.bottom - shape.top)
    assert shape.left == 100 and shape.top == 100


def test_finish_twice_returns_none_second_time():
    band = RubberBand()
    band.start(1, 2)
    assert band.finish() == Segment(1, 2, 1, 2)
    assert band.finish() is None


def test_new_drag_resets_previous_point():
    band = RubberBand()
    band.start(1, 1)
    band.move(9, 9)
    band.finish()
    band.start(2, 2)
    erase, _ = band.move(3, 3)
    assert erase == Segment(2, 2, 2, 2)


def test_kind_change_between_drags():
    band = RubberBand()
    band.start(0, 0)
    band.move(6, 6)
    assert band.finish() == Segment(0, 0, 6, 6)
    band.kind = ShapeKind.ELLIPSE
    band.start(0, 0)
    band.move(6, 6)
    assert band.finish() == Bounds(0, 0, 6, 6)