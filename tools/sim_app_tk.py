import argparse
import logging
import os
import sys
import tkinter as tk
from tkinter import ttk

from PIL import Image, ImageTk

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from taskboard.core.layout import CANVAS_HEIGHT, CANVAS_WIDTH, to_logical
from taskboard.core.reducer import PointerDown, PointerMove, PointerUp
from taskboard.core.store import TaskStore
from taskboard.data.seed import load_tasks
from taskboard.shared.fonts import build_fonts
from taskboard.shared.paths import default_tasks_path, default_theme_path, find_repo_root
from taskboard.shared.theme import load_theme
from taskboard.ui.app import BoardSession


class Simulator(tk.Tk):
    def __init__(self, scale=1.0, tasks_path="", theme_path=""):
        super().__init__()
        self.title("Canvas Todo Drag & Drop")
        self.configure(background="#f5f9fa")

        self.repo_root = find_repo_root(os.path.dirname(__file__))
        self.theme = load_theme(theme_path or default_theme_path(self.repo_root))
        self.fonts = build_fonts(self.repo_root)
        store = TaskStore(load_tasks(tasks_path or default_tasks_path(self.repo_root)))

        self.scale = max(0.25, float(scale))
        self.view_w = int(round(CANVAS_WIDTH * self.scale))
        self.view_h = int(round(CANVAS_HEIGHT * self.scale))

        ttk.Label(self, text="Canvas Todo Drag & Drop", font=("TkDefaultFont", 18, "bold")).grid(
            row=0, column=0, padx=12, pady=(12, 0)
        )

        self.canvas = tk.Canvas(self, width=self.view_w, height=self.view_h, highlightthickness=0, borderwidth=0)
        self.canvas.grid(row=1, column=0, padx=12, pady=12)
        self._image_id = self.canvas.create_image(0, 0, anchor="nw")

        ttk.Label(self, text="Tip: Drag tasks between columns!").grid(row=2, column=0, pady=(0, 4))
        self.status = ttk.Label(self, text="", anchor="w")
        self.status.grid(row=3, column=0, sticky="ew", padx=12, pady=(0, 10))

        self.session = BoardSession(
            store,
            self.fonts,
            self.theme,
            selection=self._set_selection_suppressed,
            on_status_change=self._on_status_change,
            on_frame=self._show,
        )

        self.canvas.bind("<ButtonPress-1>", lambda e: self._dispatch(PointerDown, e))
        self.canvas.bind("<B1-Motion>", lambda e: self._dispatch(PointerMove, e))
        self.canvas.bind("<ButtonRelease-1>", lambda e: self._dispatch(PointerUp, e))
        self.bind("q", lambda _e: self.destroy())
        self.bind("<Escape>", lambda _e: self.destroy())

    def _logical(self, e):
        origin = (self.canvas.winfo_rootx(), self.canvas.winfo_rooty())
        size = (self.canvas.winfo_width(), self.canvas.winfo_height())
        return to_logical((e.x_root, e.y_root), origin, size)

    def _dispatch(self, event_cls, e):
        x, y = self._logical(e)
        self.session.dispatch(event_cls(x, y))

    def _set_selection_suppressed(self, on):
        # Tk has no page text selection; a grab cursor marks the drag instead.
        self.canvas.configure(cursor="fleur" if on else "")

    def _on_status_change(self, task, old, new):
        self.status.configure(text=f"{task.title}: {old.value} -> {new.value}")

    def _show(self, image):
        if image.size != (self.view_w, self.view_h):
            image = image.resize((self.view_w, self.view_h), Image.Resampling.LANCZOS)
        self._photo = ImageTk.PhotoImage(image)
        self.canvas.itemconfigure(self._image_id, image=self._photo)


def main():
    parser = argparse.ArgumentParser(description="Interactive task board")
    parser.add_argument("--scale", type=float, default=1.0, help="Display scale of the 900x600 board")
    parser.add_argument("--tasks", default="", help="Path to a tasks JSON file")
    parser.add_argument("--theme", default="", help="Path to a board theme JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    Simulator(scale=args.scale, tasks_path=args.tasks, theme_path=args.theme).mainloop()


if __name__ == "__main__":
    main()
