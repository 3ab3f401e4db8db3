from __future__ import annotations

import logging
from typing import Iterable, Optional

from taskboard.core.state import COLUMNS, Status, Task, TaskId

logger = logging.getLogger(__name__)


def _coerce_status(value) -> Optional[Status]:
    if isinstance(value, Status):
        return value
    try:
        return Status(str(value))
    except ValueError:
        return None


class TaskStore:
    """Ordered task collection. Row order inside a column is insertion order."""

    def __init__(self, tasks: Iterable[Task] = ()):
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def all(self) -> list[Task]:
        return list(self._tasks)

    def get(self, task_id: TaskId) -> Optional[Task]:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def tasks_in(self, column_key) -> list[Task]:
        key = _coerce_status(column_key)
        if key is None:
            return []
        return [t for t in self._tasks if t.status == key]

    def set_status(self, task_id: TaskId, new_status) -> bool:
        """Move a task to another lane.

        Unknown ids and unrecognized statuses are silent no-ops. Returns True only
        when the stored status actually changed.
        """
        status = _coerce_status(new_status)
        if status is None or status not in {c.key for c in COLUMNS}:
            logger.debug("set_status ignored: unrecognized status %r", new_status)
            return False
        task = self.get(task_id)
        if task is None:
            logger.debug("set_status ignored: unknown task id %r", task_id)
            return False
        if task.status == status:
            return False
        old = task.status
        task.status = status
        logger.info("task %r moved %s -> %s", task_id, old.value, status.value)
        return True
