from __future__ import annotations

import math

from taskboard.core.state import COLUMNS, CardRect, TaskId

# Logical coordinate space; the host scales device pixels into it.
CANVAS_WIDTH = 900
CANVAS_HEIGHT = 600
COLUMN_WIDTH = CANVAS_WIDTH / len(COLUMNS)
ROW_HEIGHT = 60
GAP = 16
HEADER_OFFSET = 50
CARD_WIDTH = COLUMN_WIDTH - 2 * GAP

# Column label position, relative to the column's left edge (baseline y).
LABEL_X = 24
LABEL_BASELINE = 36


def rect_for(column_index: int, row_index: int, task_id: TaskId = None) -> CardRect:
    x = column_index * COLUMN_WIDTH + GAP
    y = HEADER_OFFSET + row_index * (ROW_HEIGHT + GAP)
    return CardRect(task_id=task_id, x=x, y=y, width=CARD_WIDTH, height=ROW_HEIGHT)


def column_at(x: float) -> int:
    """Column index under logical x. Can be negative or >= 3; callers range-check."""
    return int(math.floor(x / COLUMN_WIDTH))


def column_band(column_index: int) -> tuple[float, float, float, float]:
    x0 = column_index * COLUMN_WIDTH
    return (x0, 0, x0 + COLUMN_WIDTH, CANVAS_HEIGHT)


def _axis_to_logical(device: float, origin: float, size: float, logical: float) -> float:
    if not size:
        return device - origin
    return (device - origin) / (size / logical)


def to_logical(device, origin, size, logical_size=(CANVAS_WIDTH, CANVAS_HEIGHT)) -> tuple[float, float]:
    """Map a device-pixel point into the logical space.

    ``origin``/``size`` are the host surface's on-screen box.
    logical = (device - origin) / (size / logical_size), per axis.
    """
    return (
        _axis_to_logical(device[0], origin[0], size[0], logical_size[0]),
        _axis_to_logical(device[1], origin[1], size[1], logical_size[1]),
    )
