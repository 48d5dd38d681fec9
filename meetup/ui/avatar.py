"""Pastille de profil : initiale sur fond circulaire."""

from __future__ import annotations

from PIL import Image, ImageDraw, ImageFont

AVATAR_SIZE = 36
AVATAR_BACKGROUND = "#2563EB"
AVATAR_FOREGROUND = "#FFFFFF"
_SUPERSAMPLING = 4
_FONT_CANDIDATES = ("DejaVuSans-Bold.ttf", "Arial Bold.ttf", "arialbd.ttf")


def _load_font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    for name in _FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


def render_avatar(
    initial: str,
    size: int = AVATAR_SIZE,
    *,
    background: str = AVATAR_BACKGROUND,
    foreground: str = AVATAR_FOREGROUND,
) -> Image.Image:
    # Dessin en grand puis réduction pour lisser le bord du cercle.
    canvas = size * _SUPERSAMPLING
    image = Image.new("RGBA", (canvas, canvas), (0, 0, 0, 0))
    drawer = ImageDraw.Draw(image)
    drawer.ellipse((0, 0, canvas - 1, canvas - 1), fill=background)

    text = (initial or "?")[:1]
    font = _load_font(int(canvas * 0.5))
    left, top, right, bottom = drawer.textbbox((0, 0), text, font=font)
    x = (canvas - (right - left)) / 2 - left
    y = (canvas - (bottom - top)) / 2 - top
    drawer.text((x, y), text, fill=foreground, font=font)

    return image.resize((size, size), Image.LANCZOS)
