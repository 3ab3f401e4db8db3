from __future__ import annotations

from dataclasses import replace
import logging
import math
from typing import Callable, Optional

from taskboard.core.hit_test import hit_test
from taskboard.core.layout import column_at
from taskboard.core.state import COLUMNS, BoardState, Dragging
from taskboard.core.store import TaskStore

logger = logging.getLogger(__name__)

SelectionHook = Callable[[bool], None]


class Event:
    pass


class PointerEvent(Event):
    """Pointer event already translated into logical coordinates."""

    def __init__(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    @property
    def point(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.x:g}, {self.y:g})"


class PointerDown(PointerEvent):
    pass


class PointerMove(PointerEvent):
    pass


class PointerUp(PointerEvent):
    pass


def _finite(event: PointerEvent) -> bool:
    return math.isfinite(event.x) and math.isfinite(event.y)


def _suppress(selection: Optional[SelectionHook], on: bool) -> None:
    if selection is not None:
        selection(on)


def _begin_drag(state: BoardState, event: PointerDown, selection) -> bool:
    if state.drag is not None:
        # A second press while a drag is live does not restart or commit it.
        logger.debug("ignored %r: drag of %r already active", event, state.drag.task_id)
        return False

    hit = hit_test(event.point, state.layout)
    if hit is None:
        return False

    ox, oy = hit.origin
    state.drag = Dragging(
        task_id=hit.task_id,
        grab_offset=(event.x - ox, event.y - oy),
        pointer_pos=event.point,
    )
    _suppress(selection, True)
    logger.debug("drag start task=%r at %r", hit.task_id, event.point)
    return True


def _move_drag(state: BoardState, event: PointerMove) -> bool:
    if state.drag is None:
        return False
    if not _finite(event):
        # Keep the card where it was last drawn.
        return False
    state.drag = replace(state.drag, pointer_pos=event.point)
    return True


def _end_drag(state: BoardState, event: PointerUp, store: TaskStore, selection) -> bool:
    drag = state.drag
    if drag is None:
        return False

    # Non-finite x counts as a drop outside every column.
    col_idx = column_at(event.x) if math.isfinite(event.x) else -1
    if 0 <= col_idx < len(COLUMNS):
        store.set_status(drag.task_id, COLUMNS[col_idx].key)
    else:
        logger.debug("drop of %r outside columns (index %d)", drag.task_id, col_idx)

    state.drag = None
    _suppress(selection, False)
    return True


def reduce(
    state: BoardState,
    event: Event,
    *,
    store: TaskStore,
    selection: Optional[SelectionHook] = None,
) -> bool:
    """Apply one pointer event to the drag state machine.

    Mutates ``state`` (and, on drop, ``store``) in place. Returns True when the
    drag state or the store changed, i.e. when a new frame is needed.
    """
    if isinstance(event, PointerDown):
        return _begin_drag(state, event, selection)
    if isinstance(event, PointerMove):
        return _move_drag(state, event)
    if isinstance(event, PointerUp):
        return _end_drag(state, event, store, selection)
    return False
