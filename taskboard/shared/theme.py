from __future__ import annotations

import json
import os

# Canvas look of the board. Keys ending in "_alpha" are 0..1 opacities.
DEFAULT_THEME: dict = {
    "bg": (250, 252, 255),
    "column_bg": (240, 240, 240),
    "label_ink": (34, 34, 34),
    "label_font": "sans_bold",
    "label_size": 22,
    "card": (255, 255, 255),
    "card_border": (170, 170, 170),
    "card_border_width": 2,
    "card_radius": 0,
    "card_ink": (51, 51, 51),
    "card_font": "sans",
    "card_size": 18,
    "card_text_x": 18,
    "card_text_baseline": 36,
    "card_shadow": (0, 0, 0),
    "card_shadow_alpha": 0.08,
    "card_shadow_offset": 3,
    "drag_fill": (227, 247, 250),
    "drag_border": (65, 184, 195),
    "drag_ink": (34, 153, 170),
    "drag_alpha": 0.8,
    "drag_shadow": (66, 152, 238),
    "drag_shadow_alpha": 0.22,
    "drag_shadow_offset": 5,
}

COLOR_KEYS = tuple(
    k for k, v in DEFAULT_THEME.items() if isinstance(v, tuple) and len(v) == 3
)


def hex_to_rgb(value):
    value = (value or "").strip()
    if value.startswith("#"):
        value = value[1:]
    if len(value) != 6:
        return None
    try:
        return tuple(int(value[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return None


def normalize_theme(data: dict) -> dict:
    theme = dict(data)
    for key, val in data.items():
        if key not in COLOR_KEYS:
            continue
        if isinstance(val, str):
            rgb = hex_to_rgb(val)
            if rgb:
                theme[key] = rgb
            else:
                theme.pop(key)
        elif isinstance(val, list) and len(val) == 3:
            # JSON color arrays become Python lists; PIL expects tuples.
            theme[key] = tuple(int(c) for c in val)
    return theme


def load_theme(path, required=False) -> dict:
    if not path or not os.path.exists(path):
        if required:
            raise FileNotFoundError(path)
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"theme file must hold a JSON object: {path}")
    return normalize_theme(data)


def resolve_theme(theme: dict | None) -> dict:
    t = dict(DEFAULT_THEME)
    t.update(theme or {})
    return t
