from __future__ import annotations

import logging
from typing import Callable, Optional

from PIL import Image

from taskboard.core.layout import CANVAS_HEIGHT, CANVAS_WIDTH
from taskboard.core.reducer import Event, PointerUp, SelectionHook, reduce
from taskboard.core.state import BoardState, CardRect, Status, Task
from taskboard.core.store import TaskStore
from taskboard.shared.theme import resolve_theme
from taskboard.ui.board import render_board

logger = logging.getLogger(__name__)

StatusListener = Callable[[Task, Status, Status], None]
FrameListener = Callable[[Image.Image], None]


class BoardSession:
    """Glue between pointer events, the drag reducer and the renderer.

    Every event that changes the drag state or the store is followed by a full
    render, which republishes the rectangles the next press is hit-tested against.
    """

    def __init__(
        self,
        store: TaskStore,
        fonts,
        theme: Optional[dict] = None,
        *,
        selection: Optional[SelectionHook] = None,
        on_status_change: Optional[StatusListener] = None,
        on_frame: Optional[FrameListener] = None,
        mode: str = "RGB",
    ):
        self.store = store
        self.fonts = fonts
        self.theme = resolve_theme(theme)
        self.selection = selection
        self.on_status_change = on_status_change
        self.on_frame = on_frame
        self.state = BoardState()
        self.image = Image.new(mode, (CANVAS_WIDTH, CANVAS_HEIGHT))
        self.frames = 0
        self.render()

    @property
    def layout(self) -> tuple[CardRect, ...]:
        return self.state.layout

    def dispatch(self, event: Event) -> bool:
        watched = None
        if isinstance(event, PointerUp) and self.state.drag is not None:
            watched = self.store.get(self.state.drag.task_id)
        before = watched.status if watched is not None else None

        changed = reduce(self.state, event, store=self.store, selection=self.selection)
        if not changed:
            return False

        if watched is not None and watched.status != before and self.on_status_change is not None:
            self.on_status_change(watched, before, watched.status)
        self.render()
        return True

    def render(self) -> Image.Image:
        self.state.layout = render_board(self.image, self.store, self.state.drag, self.fonts, self.theme)
        self.frames += 1
        if self.on_frame is not None:
            self.on_frame(self.image)
        return self.image
