import pytest

from interaction import (LEFT, RIGHT, InteractionState, on_mode_select_shape, on_mode_select_stamp,
                         on_mode_select_stamp_name, on_pointer_click, on_pointer_drag,
                         on_pointer_press, on_pointer_release)
from shapes import ShapeKind

INSIDE = (400, 300)
OUTSIDE = (10, 10)


def draw(ctx, press, drag, button=LEFT):
    on_pointer_press(ctx, *press, button)
    on_pointer_drag(ctx, *drag)
    on_pointer_release(ctx)


def test_initial_state():
    state = InteractionState()
    assert not state.drawing_enabled
    assert state.pending_shape_kind is None
    assert not state.stamping
    assert state.pending_stamp_image is None
    assert state.in_progress_shape is None


def test_rectangle_scenario(ctx):
    on_mode_select_shape(ctx, ShapeKind.RECTANGLE)
    on_pointer_press(ctx, 100, 100, LEFT)
    on_pointer_drag(ctx, 150, 80)
    on_pointer_release(ctx)

    shapes = list(ctx.store.iter_shapes())
    assert len(shapes) == 1
    shape = shapes[0]
    assert shape.kind is ShapeKind.RECTANGLE
    assert (shape.x, shape.y, shape.w, shape.h) == (100, 100, 50, -20)
    assert ctx.state.in_progress_shape is None


@pytest.mark.parametrize("press, release", [
    ((100, 100), (700, 500)),
    ((700, 500), (90, 70)),
    ((400, 300), (400, 300)),
    ((300, 200), (5, 590)),
])
def test_committed_extents_match_release_exactly(ctx, press, release):
    on_mode_select_shape(ctx, ShapeKind.ELLIPSE)
    draw(ctx, press, release)
    shape = next(ctx.store.iter_shapes())
    assert (shape.w, shape.h) == (release[0] - press[0], release[1] - press[1])


def test_shape_takes_style_at_press_time(ctx, style):
    on_mode_select_shape(ctx, ShapeKind.RECTANGLE)
    on_pointer_press(ctx, *INSIDE, LEFT)
    shape = ctx.state.in_progress_shape
    assert (shape.border_color, shape.fill_color, shape.border_thickness) == tuple(style)


def test_press_outside_bounds_creates_nothing(ctx):
    on_mode_select_shape(ctx, ShapeKind.RECTANGLE)
    on_pointer_press(ctx, *OUTSIDE, LEFT)
    assert ctx.state.in_progress_shape is None
    on_pointer_drag(ctx, 400, 300)
    on_pointer_release(ctx)
    assert ctx.store.shape_count == 0


def test_press_while_not_armed_is_a_noop(ctx):
    draw(ctx, INSIDE, (450, 350))
    assert ctx.state.in_progress_shape is None
    assert ctx.store.shape_count == 0


def test_right_button_does_not_start_a_shape(ctx):
    on_mode_select_shape(ctx, ShapeKind.RECTANGLE)
    draw(ctx, INSIDE, (450, 350), button=RIGHT)
    assert ctx.store.shape_count == 0


def test_drag_and_release_without_shape_are_noops(ctx):
    on_mode_select_shape(ctx, ShapeKind.RECTANGLE)
    on_pointer_drag(ctx, 300, 300)
    on_pointer_release(ctx)
    assert ctx.store.shape_count == 0


def test_commit_keeps_mode_armed(ctx):
    on_mode_select_shape(ctx, ShapeKind.ELLIPSE)
    draw(ctx, (100, 100), (200, 200))
    assert ctx.state.drawing_enabled
    assert ctx.state.pending_shape_kind is ShapeKind.ELLIPSE

    draw(ctx, (300, 300), (350, 320))
    assert [s.kind for s in ctx.store.iter_shapes()] == [ShapeKind.ELLIPSE, ShapeKind.ELLIPSE]


def test_selecting_same_kind_keeps_shape_in_progress(ctx):
    on_mode_select_shape(ctx, ShapeKind.RECTANGLE)
    on_pointer_press(ctx, *INSIDE, LEFT)
    in_progress = ctx.state.in_progress_shape
    on_mode_select_shape(ctx, ShapeKind.RECTANGLE)
    assert ctx.state.in_progress_shape is in_progress


def test_switching_kind_abandons_shape_in_progress(ctx):
    on_mode_select_shape(ctx, ShapeKind.RECTANGLE)
    on_pointer_press(ctx, *INSIDE, LEFT)
    on_mode_select_shape(ctx, ShapeKind.ELLIPSE)
    assert ctx.state.in_progress_shape is None
    on_pointer_release(ctx)
    assert ctx.store.shape_count == 0


def test_click_inside_commits_stamp_and_disarms(ctx, catalog):
    on_mode_select_stamp(ctx, catalog["glasses"])
    on_pointer_click(ctx, *INSIDE)

    stamps = list(ctx.store.iter_stamps())
    assert len(stamps) == 1
    assert stamps[0].image is catalog["glasses"]
    assert (stamps[0].x, stamps[0].y) == INSIDE
    assert not ctx.state.stamping

    on_pointer_click(ctx, 410, 310)
    assert ctx.store.stamp_count == 1


def test_hat_outside_then_inside_scenario(ctx, catalog):
    on_mode_select_stamp_name(ctx, "hat")
    on_pointer_click(ctx, *OUTSIDE)
    assert list(ctx.store.iter_stamps()) == []
    assert ctx.state.stamping

    on_pointer_click(ctx, 500, 400)
    stamps = list(ctx.store.iter_stamps())
    assert len(stamps) == 1
    assert stamps[0].image is catalog["hat"]
    assert (stamps[0].x, stamps[0].y) == (500, 400)


def test_click_while_idle_is_a_noop(ctx):
    on_pointer_click(ctx, *INSIDE)
    assert ctx.store.stamp_count == 0


def test_unknown_stamp_name_changes_nothing(ctx):
    on_mode_select_stamp_name(ctx, "crown")
    assert not ctx.state.stamping
    assert ctx.state.pending_stamp_image is None


def test_selecting_stamp_rearms_and_replaces_image(ctx, catalog):
    on_mode_select_stamp(ctx, catalog["hat"])
    on_mode_select_stamp(ctx, catalog["santa"])
    on_pointer_click(ctx, *INSIDE)
    assert next(ctx.store.iter_stamps()).image is catalog["santa"]

    on_mode_select_stamp(ctx, catalog["santa"])
    assert ctx.state.stamping


def test_sub_machines_are_independent(ctx, catalog):
    on_mode_select_shape(ctx, ShapeKind.RECTANGLE)
    on_mode_select_stamp(ctx, catalog["moustache"])
    assert ctx.state.drawing_enabled and ctx.state.stamping

    # Un clic simple: presión y soltado en el mismo punto
    on_pointer_press(ctx, *INSIDE, LEFT)
    on_pointer_release(ctx)
    on_pointer_click(ctx, *INSIDE)

    assert ctx.store.stamp_count == 1
    assert ctx.store.shape_count == 1
    assert ctx.state.drawing_enabled
    assert not ctx.state.stamping
