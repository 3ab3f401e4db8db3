#!/usr/bin/env python3
import argparse
import logging
import os

from PIL import Image

from taskboard.core.layout import CANVAS_HEIGHT, CANVAS_WIDTH, CARD_WIDTH, ROW_HEIGHT
from taskboard.core.state import Dragging
from taskboard.core.store import TaskStore
from taskboard.data.seed import load_tasks
from taskboard.shared.fonts import build_fonts
from taskboard.shared.paths import default_tasks_path, find_repo_root
from taskboard.shared.theme import load_theme, resolve_theme
from taskboard.ui.board import render_board


def _parse_size(value):
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError("size must be like 900x600")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError("size must be like 900x600")


def _parse_drag(value):
    # ID@X,Y -> task id floated with the pointer at logical (X, Y)
    try:
        tid, pos = value.split("@", 1)
        x, y = (float(v) for v in pos.split(",", 1))
    except ValueError:
        raise argparse.ArgumentTypeError("drag must be like 1@450,300")
    tid = int(tid) if tid.strip().isdigit() else tid.strip()
    return tid, (x, y)


def main():
    parser = argparse.ArgumentParser(description="Canvas task board snapshot")
    parser.add_argument("--png", default="board.png", help="Output PNG path")
    parser.add_argument("--size", type=_parse_size, default=None, help="Output size, e.g. 1800x1200")
    parser.add_argument("--tasks", default="", help="Path to a tasks JSON file")
    parser.add_argument("--theme", default="", help="Path to a board theme JSON file")
    parser.add_argument("--drag", type=_parse_drag, default=None, help="Float a task under the pointer, e.g. 1@450,300")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    repo_root = find_repo_root(os.path.dirname(__file__))
    try:
        tasks = load_tasks(args.tasks or default_tasks_path(repo_root))
        theme = load_theme(args.theme, required=True) if args.theme else {}
    except (OSError, ValueError) as e:
        parser.error(str(e))

    store = TaskStore(tasks)
    fonts = build_fonts(repo_root)
    theme = resolve_theme(theme)

    drag = None
    if args.drag:
        tid, pointer = args.drag
        if store.get(tid) is None:
            parser.error(f"no task with id {tid!r}")
        drag = Dragging(task_id=tid, grab_offset=(CARD_WIDTH / 2, ROW_HEIGHT / 2), pointer_pos=pointer)

    image = Image.new("RGB", (CANVAS_WIDTH, CANVAS_HEIGHT), theme["bg"])
    render_board(image, store, drag, fonts, theme)
    if args.size and args.size != image.size:
        image = image.resize(args.size, Image.Resampling.LANCZOS)
    image.save(args.png)
    logging.info("saved %s (%dx%d, %d tasks)", args.png, image.width, image.height, len(store))


if __name__ == "__main__":
    main()
