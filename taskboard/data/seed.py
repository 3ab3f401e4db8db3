from __future__ import annotations

import json
import logging
import os

from taskboard.core.state import Status, Task

logger = logging.getLogger(__name__)


def default_tasks() -> list[Task]:
    return [
        Task(1, "Do dishes", Status.INCOMPLETED),
        Task(2, "Read book", Status.ONGOING),
        Task(3, "Buy milk", Status.COMPLETED),
        Task(4, "Learn React", Status.INCOMPLETED),
    ]


def _int_id(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_tasks(data) -> list[Task]:
    """Build tasks from decoded JSON: a list of objects or {"tasks": [...]}."""
    if isinstance(data, dict):
        data = data.get("tasks")
    if not isinstance(data, list):
        raise ValueError("tasks must be a JSON list or an object with a 'tasks' list")

    tasks: list[Task] = []
    seen = set()
    next_id = 1 + max((t["id"] for t in data if isinstance(t, dict) and _int_id(t.get("id"))), default=0)
    for i, raw in enumerate(data):
        if not isinstance(raw, dict):
            logger.warning("task #%d skipped: not an object", i)
            continue
        title = raw.get("title") or raw.get("text") or ""
        if not isinstance(title, str):
            logger.warning("task #%d skipped: title is not text", i)
            continue
        title = title.strip()
        if not title:
            logger.warning("task #%d skipped: missing title", i)
            continue
        try:
            status = Status(str(raw.get("status") or Status.INCOMPLETED.value))
        except ValueError:
            logger.warning("task #%d (%s) skipped: unknown status %r", i, title, raw.get("status"))
            continue
        tid = raw.get("id")
        if tid is None:
            tid = next_id
            next_id += 1
        elif not (_int_id(tid) or isinstance(tid, str)):
            logger.warning("task #%d (%s) skipped: id %r is not a number or string", i, title, tid)
            continue
        if tid in seen:
            logger.warning("task #%d (%s) skipped: duplicate id %r", i, title, tid)
            continue
        seen.add(tid)
        tasks.append(Task(tid, title, status))
    return tasks


def load_tasks(path=None) -> list[Task]:
    if not path or not os.path.exists(path):
        return default_tasks()
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return parse_tasks(data)
