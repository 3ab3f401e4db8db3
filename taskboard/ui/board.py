from __future__ import annotations

import logging
from typing import Optional

from PIL import ImageDraw

from taskboard.core.layout import CARD_WIDTH, ROW_HEIGHT, rect_for
from taskboard.core.state import COLUMNS, CardRect, Dragging
from taskboard.core.store import TaskStore
from taskboard.shared.draw import color_for_mode
from taskboard.shared.theme import resolve_theme
from taskboard.ui.widgets import draw_card, draw_column, draw_drag_card

logger = logging.getLogger(__name__)


def render_board(
    image,
    store: TaskStore,
    drag: Optional[Dragging],
    fonts,
    theme: Optional[dict] = None,
) -> tuple[CardRect, ...]:
    """Draw one full frame and return the card rectangles it published.

    The frame depends only on the store contents and the drag state. The dragged
    card is left out of its lane and out of the returned set, then drawn last at
    pointer minus grab offset.
    """
    t = resolve_theme(theme)
    mode = image.mode
    draw = ImageDraw.Draw(image)
    w, h = image.size

    draw.rectangle((0, 0, w, h), fill=color_for_mode(t["bg"], mode))

    published: list[CardRect] = []
    for col_idx, col in enumerate(COLUMNS):
        draw_column(draw, col_idx, col.label, fonts, t, mode)

        for row_idx, task in enumerate(store.tasks_in(col.key)):
            if drag is not None and drag.task_id == task.id:
                continue
            rect = rect_for(col_idx, row_idx, task.id)
            draw_card(draw, rect, task.title, fonts, t, mode)
            published.append(rect)

    if drag is not None:
        task = store.get(drag.task_id)
        if task is not None:
            x, y = drag.card_origin()
            # Nothing to draw once the card is wholly off the surface.
            if -CARD_WIDTH < x < w and -ROW_HEIGHT < y < h:
                floating = CardRect(task_id=task.id, x=x, y=y, width=CARD_WIDTH, height=ROW_HEIGHT)
                draw_drag_card(image, floating, task.title, fonts, t)

    logger.debug("frame: %d cards published, drag=%s", len(published), drag.task_id if drag else None)
    return tuple(published)
