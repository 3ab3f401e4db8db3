from PIL import Image, ImageDraw

from taskboard.core.layout import LABEL_BASELINE, LABEL_X, column_band
from taskboard.shared.draw import color_for_mode, draw_text_baseline, mix_color, rounded_rect, truncate_text


def _alpha_u8(value) -> int:
    return max(0, min(255, int(round(float(value) * 255))))


def draw_column(draw, column_index, label, fonts, theme, mode="RGB"):
    band = column_band(column_index)
    draw.rectangle(band, fill=color_for_mode(theme["column_bg"], mode))
    font = fonts.get(theme["label_font"], int(theme["label_size"]))
    draw_text_baseline(
        draw,
        label,
        band[0] + LABEL_X,
        LABEL_BASELINE,
        font,
        fill=color_for_mode(theme["label_ink"], mode),
    )


def _card_title(draw, rect, title, font, theme, ink, x0, y0):
    max_w = rect.width - 2 * int(theme["card_text_x"])
    text = truncate_text(draw, title, font, max_w)
    draw_text_baseline(draw, text, x0 + theme["card_text_x"], y0 + theme["card_text_baseline"], font, fill=ink)


def draw_card(draw, rect, title, fonts, theme, mode="RGB"):
    """Resting card: soft drop shadow, white box, gray border, title."""
    x0, y0 = rect.x, rect.y
    x1, y1 = x0 + rect.width, y0 + rect.height

    off = int(theme.get("card_shadow_offset", 0) or 0)
    if off:
        shadow = mix_color(theme["column_bg"], theme["card_shadow"], theme["card_shadow_alpha"])
        draw.rectangle((x0 + off, y0 + off, x1 + off, y1 + off), fill=color_for_mode(shadow, mode))

    rounded_rect(
        draw,
        (x0, y0, x1, y1),
        radius=int(theme.get("card_radius", 0) or 0),
        outline=color_for_mode(theme["card_border"], mode),
        width=int(theme["card_border_width"]),
        fill=color_for_mode(theme["card"], mode),
    )
    font = fonts.get(theme["card_font"], int(theme["card_size"]))
    _card_title(draw, rect, title, font, theme, color_for_mode(theme["card_ink"], mode), x0, y0)


def draw_drag_card(image, rect, title, fonts, theme):
    """Floating card under the pointer. Translucent on RGB images, opaque otherwise."""
    x0, y0 = rect.x, rect.y
    x1, y1 = x0 + rect.width, y0 + rect.height
    radius = int(theme.get("card_radius", 0) or 0)
    border_w = int(theme["card_border_width"])
    off = int(theme.get("drag_shadow_offset", 0) or 0)

    if image.mode in ("RGB", "RGBA"):
        layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
        ld = ImageDraw.Draw(layer)
        if off:
            shadow = tuple(theme["drag_shadow"]) + (_alpha_u8(theme["drag_shadow_alpha"]),)
            ld.rectangle((x0 + off, y0 + off, x1 + off, y1 + off), fill=shadow)
        a = _alpha_u8(theme["drag_alpha"])
        rounded_rect(
            ld,
            (x0, y0, x1, y1),
            radius=radius,
            outline=tuple(theme["drag_border"]) + (a,),
            width=border_w,
            fill=tuple(theme["drag_fill"]) + (a,),
        )
        image.paste(layer, (0, 0), layer)
        draw = ImageDraw.Draw(image)
    else:
        draw = ImageDraw.Draw(image)
        rounded_rect(
            draw,
            (x0, y0, x1, y1),
            radius=radius,
            outline=color_for_mode(theme["drag_border"], image.mode),
            width=border_w + 1,
            fill=color_for_mode(theme["drag_fill"], image.mode),
        )

    font = fonts.get(theme["card_font"], int(theme["card_size"]))
    _card_title(draw, rect, title, font, theme, color_for_mode(theme["drag_ink"], image.mode), x0, y0)
