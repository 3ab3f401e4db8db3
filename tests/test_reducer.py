"""
Tests for the drag state machine, driven directly through reduce().
"""
import pytest

from taskboard.core.layout import rect_for
from taskboard.core.reducer import Event, PointerDown, PointerMove, PointerUp, reduce
from taskboard.core.state import BoardState, Status


def _state(store):
    # Same rectangles a render of the seed store would publish.
    return BoardState(layout=(rect_for(0, 0, 1), rect_for(0, 1, 4), rect_for(1, 0, 2), rect_for(2, 0, 3)))


def test_press_on_card_starts_drag_with_grab_offset(store, selection):
    state = _state(store)
    assert reduce(state, PointerDown(100, 80), store=store, selection=selection)
    assert state.drag.task_id == 1
    assert state.drag.grab_offset == (84, 30)
    assert state.drag.pointer_pos == (100, 80)
    assert selection.calls == [True]


def test_move_updates_pointer_but_not_offset(store):
    state = _state(store)
    reduce(state, PointerDown(100, 80), store=store)
    assert reduce(state, PointerMove(400, 200), store=store)
    assert state.drag.pointer_pos == (400, 200)
    assert state.drag.grab_offset == (84, 30)
    assert state.drag.card_origin() == (316, 170)


def test_press_on_empty_space_stays_idle(store, selection):
    state = _state(store)
    assert not reduce(state, PointerDown(5, 5), store=store, selection=selection)
    assert state.drag is None
    assert not reduce(state, PointerMove(450, 300), store=store, selection=selection)
    assert not reduce(state, PointerUp(450, 300), store=store, selection=selection)
    assert selection.calls == []
    assert store.get(1).status == Status.INCOMPLETED


def test_press_on_card_edge_does_not_start_drag(store):
    state = _state(store)
    assert not reduce(state, PointerDown(16, 80), store=store)
    assert state.drag is None


def test_release_in_other_column_changes_status(store, selection):
    state = _state(store)
    reduce(state, PointerDown(100, 80), store=store, selection=selection)
    reduce(state, PointerMove(700, 300), store=store, selection=selection)
    assert reduce(state, PointerUp(700, 300), store=store, selection=selection)
    assert store.get(1).status == Status.COMPLETED
    assert state.drag is None
    assert selection.calls == [True, False]


def test_release_left_of_board_ends_drag_without_change(store, selection):
    state = _state(store)
    reduce(state, PointerDown(100, 80), store=store, selection=selection)
    reduce(state, PointerMove(-20, 100), store=store, selection=selection)
    assert reduce(state, PointerUp(-20, 100), store=store, selection=selection)
    assert store.get(1).status == Status.INCOMPLETED
    assert state.drag is None
    assert selection.calls == [True, False]


def test_release_right_of_board_ends_drag_without_change(store):
    state = _state(store)
    reduce(state, PointerDown(100, 80), store=store)
    assert reduce(state, PointerUp(900, 100), store=store)
    assert store.get(1).status == Status.INCOMPLETED
    assert state.drag is None


def test_second_press_while_dragging_is_ignored(store, selection):
    state = _state(store)
    reduce(state, PointerDown(100, 80), store=store, selection=selection)
    reduce(state, PointerMove(120, 90), store=store, selection=selection)
    drag = state.drag
    # Press over another card: the active drag is kept as-is.
    assert not reduce(state, PointerDown(400, 80), store=store, selection=selection)
    assert state.drag == drag
    assert selection.calls == [True]
    assert store.get(2).status == Status.ONGOING


def test_unknown_event_is_ignored(store):
    state = _state(store)
    assert not reduce(state, Event(), store=store)


def test_selection_hook_is_optional(store):
    state = _state(store)
    reduce(state, PointerDown(100, 80), store=store)
    reduce(state, PointerUp(400, 80), store=store)
    assert store.get(1).status == Status.ONGOING


@pytest.mark.parametrize("x", [float("inf"), float("-inf"), float("nan")])
def test_release_at_non_finite_x_ends_drag(store, selection, x):
    state = _state(store)
    reduce(state, PointerDown(100, 80), store=store, selection=selection)
    assert reduce(state, PointerUp(x, 80), store=store, selection=selection)
    assert state.drag is None
    assert selection.calls == [True, False]
    assert store.get(1).status == Status.INCOMPLETED


@pytest.mark.parametrize("point", [(float("nan"), 80), (400, float("inf")), (float("-inf"), float("nan"))])
def test_non_finite_move_keeps_last_pointer(store, point):
    state = _state(store)
    reduce(state, PointerDown(100, 80), store=store)
    reduce(state, PointerMove(400, 200), store=store)
    assert not reduce(state, PointerMove(*point), store=store)
    assert state.drag.pointer_pos == (400, 200)
    assert state.drag.grab_offset == (84, 30)


def test_non_finite_press_starts_nothing(store):
    state = _state(store)
    assert not reduce(state, PointerDown(float("nan"), float("nan")), store=store)
    assert not reduce(state, PointerDown(float("inf"), 80), store=store)
    assert state.drag is None


def test_grab_offset_is_measured_from_card_origin(store):
    state = _state(store)
    reduce(state, PointerDown(400, 100), store=store)
    # "Read book" sits at the origin of the ongoing lane.
    assert state.drag.task_id == 2
    assert state.drag.grab_offset == (400 - state.layout[2].origin[0], 100 - state.layout[2].origin[1])
