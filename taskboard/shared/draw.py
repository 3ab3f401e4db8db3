def _snap_px(value) -> int:
    try:
        return int(round(float(value)))
    except Exception:
        return 0


def text_size(draw, text, font):
    bbox = draw.textbbox((0, 0), text, font=font)
    return (bbox[2] - bbox[0], bbox[3] - bbox[1])


def text_width(draw, text, font):
    try:
        return draw.textlength(text, font=font)
    except Exception:
        return text_size(draw, text, font)[0]


def draw_text_baseline(draw, text, x, baseline_y, font, fill=0):
    """Draw text with its left baseline at (x, baseline_y), like a canvas fillText."""
    try:
        draw.text((_snap_px(x), _snap_px(baseline_y)), text, font=font, fill=fill, anchor="ls")
    except ValueError:
        # Bitmap fonts have no anchor support; sit the glyph box on the baseline.
        h = text_size(draw, text, font)[1]
        draw.text((_snap_px(x), _snap_px(baseline_y - h)), text, font=font, fill=fill)


def truncate_text(draw, text, font, max_width):
    if not text:
        return text
    if text_width(draw, text, font) <= max_width:
        return text
    ellipsis = "..."
    max_width = max(0, max_width - text_width(draw, ellipsis, font))
    trimmed = text
    while trimmed:
        if text_width(draw, trimmed, font) <= max_width:
            break
        trimmed = trimmed[:-1]
    return (trimmed + ellipsis) if trimmed else ellipsis


def rounded_rect(draw, box, radius=0, outline=0, width=2, fill=255):
    x0, y0, x1, y1 = (_snap_px(v) for v in box)
    if radius:
        draw.rounded_rectangle((x0, y0, x1, y1), radius=radius, outline=outline, width=width, fill=fill)
    else:
        draw.rectangle((x0, y0, x1, y1), outline=outline, width=width, fill=fill)


def mix_color(a, b, t):
    """
    Linear blend a->b by t in [0..1]. Works for int (gray) and RGB tuples.
    """
    t = max(0.0, min(1.0, float(t)))
    if isinstance(a, int) and isinstance(b, int):
        return int(round(a * (1.0 - t) + b * t))
    if isinstance(a, tuple) and isinstance(b, tuple) and len(a) == 3 and len(b) == 3:
        return tuple(int(round(a[i] * (1.0 - t) + b[i] * t)) for i in range(3))
    return b


def color_for_mode(color, mode):
    """Fit an RGB tuple or gray int to the image mode being drawn on."""
    if mode in ("RGB", "RGBA"):
        if isinstance(color, int):
            return (color, color, color)
        return tuple(color[:3])
    if isinstance(color, (tuple, list)) and len(color) >= 3:
        r, g, b = (float(c) for c in color[:3])
        gray = max(0, min(255, int(round(0.299 * r + 0.587 * g + 0.114 * b))))
    else:
        gray = max(0, min(255, int(color)))
    if mode == "1":
        return 255 if gray >= 128 else 0
    return gray
