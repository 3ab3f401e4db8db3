import logging
import os

from PIL import ImageFont

logger = logging.getLogger(__name__)

# Resolved by FreeType against the system font directories when no
# assets/fonts override is present.
SYSTEM_FONTS = {
    "sans": "DejaVuSans.ttf",
    "sans_bold": "DejaVuSans-Bold.ttf",
}


class FontBook:
    def __init__(self, font_paths, default_key=None):
        self.font_paths = dict(font_paths)
        self.default_key = default_key or (next(iter(self.font_paths)) if self.font_paths else None)
        self._cache = {}

    def get(self, key, size):
        font_key = key if key in self.font_paths else self.default_key
        cache_key = (font_key, size)
        font = self._cache.get(cache_key)
        if font is not None:
            return font

        # Preferred font first, then the other configured keys.
        candidates = [font_key] if font_key else []
        for k in self.font_paths.keys():
            if k not in candidates:
                candidates.append(k)

        for k in candidates:
            path = self.font_paths.get(k)
            if not path:
                continue
            try:
                font = ImageFont.truetype(path, size)
                self._cache[cache_key] = font
                return font
            except OSError:
                continue

        # Last resort: Pillow's built-in font so rendering can continue.
        logger.debug("no usable font for %r, using built-in at %dpx", key, size)
        font = ImageFont.load_default(size)
        self._cache[cache_key] = font
        return font


def build_fonts(repo_root=None):
    paths = dict(SYSTEM_FONTS)
    if repo_root:
        font_dir = os.path.join(repo_root, "assets", "fonts")
        for key, name in SYSTEM_FONTS.items():
            local = os.path.join(font_dir, name)
            if os.path.exists(local):
                paths[key] = local
    return FontBook(paths, default_key="sans")
