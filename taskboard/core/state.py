from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


class Status(str, Enum):
    INCOMPLETED = "incompleted"
    ONGOING = "ongoing"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Column:
    key: Status
    label: str


# Fixed lane order; column index 0..2 maps straight into this tuple.
COLUMNS: tuple[Column, ...] = (
    Column(Status.INCOMPLETED, "Incompleted"),
    Column(Status.ONGOING, "Ongoing"),
    Column(Status.COMPLETED, "Completed"),
)

TaskId = Union[int, str]


@dataclass
class Task:
    id: TaskId
    title: str
    status: Status = Status.INCOMPLETED


@dataclass(frozen=True)
class CardRect:
    """On-screen rectangle of a resting card, in logical coordinates."""

    task_id: TaskId
    x: float
    y: float
    width: float
    height: float

    @property
    def origin(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Dragging:
    task_id: TaskId
    # pointer minus card origin at grab time; never recomputed during the drag
    grab_offset: tuple[float, float]
    pointer_pos: tuple[float, float]

    def card_origin(self) -> tuple[float, float]:
        return (
            self.pointer_pos[0] - self.grab_offset[0],
            self.pointer_pos[1] - self.grab_offset[1],
        )


@dataclass
class BoardState:
    # None means Idle.
    drag: Optional[Dragging] = None
    # Rectangles published by the most recent render pass.
    layout: tuple[CardRect, ...] = field(default_factory=tuple)
