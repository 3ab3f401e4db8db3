"""Shared fixtures for the task board tests."""

import sys
from pathlib import Path

import pytest

# Repo root holds the flat taskboard package.
sys.path.insert(0, str(Path(__file__).parent.parent))

from taskboard.core.store import TaskStore
from taskboard.data.seed import default_tasks
from taskboard.shared.fonts import build_fonts
from taskboard.ui.app import BoardSession


@pytest.fixture
def store():
    return TaskStore(default_tasks())


@pytest.fixture(scope="session")
def fonts():
    return build_fonts()


class SelectionRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, on):
        self.calls.append(on)


@pytest.fixture
def selection():
    return SelectionRecorder()


@pytest.fixture
def session(store, fonts, selection):
    return BoardSession(store, fonts, selection=selection)


def card_center(session, task_id):
    for r in session.layout:
        if r.task_id == task_id:
            return (r.x + r.width / 2, r.y + r.height / 2)
    raise AssertionError(f"task {task_id!r} not in published layout")
