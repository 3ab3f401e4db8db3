"""
Tests for seed task parsing and theme files.
"""
import json

import pytest

from taskboard.core.state import Status
from taskboard.data.seed import default_tasks, load_tasks, parse_tasks
from taskboard.shared.theme import DEFAULT_THEME, hex_to_rgb, load_theme, resolve_theme


def test_default_tasks():
    tasks = default_tasks()
    assert [t.title for t in tasks] == ["Do dishes", "Read book", "Buy milk", "Learn React"]
    assert tasks[0].status == Status.INCOMPLETED


def test_load_tasks_missing_file_uses_defaults(tmp_path):
    assert [t.id for t in load_tasks(tmp_path / "nope.json")] == [1, 2, 3, 4]


def test_load_tasks_from_file(tmp_path):
    path = tmp_path / "tasks.json"
    path.write_text(json.dumps({"tasks": [{"id": "a", "title": "Water plants", "status": "ongoing"}]}))
    tasks = load_tasks(str(path))
    assert len(tasks) == 1
    assert tasks[0].id == "a"
    assert tasks[0].status == Status.ONGOING


def test_parse_tasks_skips_bad_entries():
    tasks = parse_tasks(
        [
            {"id": 5, "title": "Keep", "status": "completed"},
            {"id": 6, "title": "", "status": "ongoing"},
            {"id": 7, "title": "Bad status", "status": "blocked"},
            "not an object",
            {"id": 5, "title": "Duplicate"},
            {"title": "No id"},
            {"id": 9, "title": 5, "status": "ongoing"},
            {"id": 10, "title": ["list"]},
            {"id": [1, 2], "title": "Unhashable id"},
            {"id": {"a": 1}, "title": "Object id"},
            {"id": True, "title": "Bool id"},
        ]
    )
    assert [(t.id, t.title, t.status) for t in tasks] == [
        (5, "Keep", Status.COMPLETED),
        (10 + 1, "No id", Status.INCOMPLETED),
    ]


def test_parse_tasks_rejects_wrong_shape():
    with pytest.raises(ValueError):
        parse_tasks({"items": []})


def test_hex_to_rgb():
    assert hex_to_rgb("#41b8c3") == (65, 184, 195)
    assert hex_to_rgb("zzzzzz") is None
    assert hex_to_rgb("#fff") is None


def test_load_theme_normalizes_colors(tmp_path):
    path = tmp_path / "theme.json"
    path.write_text(json.dumps({"drag_fill": "#ffffff", "card": [1, 2, 3], "bg": "nope", "card_size": 20}))
    theme = load_theme(str(path))
    assert theme["drag_fill"] == (255, 255, 255)
    assert theme["card"] == (1, 2, 3)
    assert "bg" not in theme
    assert resolve_theme(theme)["bg"] == DEFAULT_THEME["bg"]
    assert resolve_theme(theme)["card_size"] == 20


def test_load_theme_missing(tmp_path):
    assert load_theme(str(tmp_path / "missing.json")) == {}
    with pytest.raises(FileNotFoundError):
        load_theme(str(tmp_path / "missing.json"), required=True)


def test_load_theme_rejects_non_object(tmp_path):
    path = tmp_path / "theme.json"
    path.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_theme(str(path))
