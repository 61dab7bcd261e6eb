# tagspacings/core/text_metrics.py
"""
Legend text metrics with Pillow. Sizes are in layout units (1 px = 1 unit).
Fonts are loaded once per (family, style, size); a missing family falls back
to DejaVu / Arial / Pillow's default and warns once per family.
"""

from __future__ import annotations

import warnings
from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont

_missing_families: set[str] = set()

_FALLBACK_FILES = ("DejaVuSans.ttf", "arial.ttf", "Arial.ttf")


def _font_files(font_family: str, font_style: str) -> list[str]:
    compact = font_family.replace(" ", "")
    style = font_style.replace(" ", "") or "Regular"
    return [
        f"{compact}-{style}.ttf",
        f"{font_family} {font_style}.ttf",
        f"{font_family}.ttf",
        f"{compact}.ttf",
    ]


@lru_cache(maxsize=64)
def load_font(font_family: str, font_size: float, font_style: str = "Regular"):
    """Pillow font for family/style at font_size (rounded, at least 1)."""
    size = max(1, int(round(font_size)))
    for name in _font_files(font_family, font_style) + list(_FALLBACK_FILES):
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    if font_family not in _missing_families:
        _missing_families.add(font_family)
        warnings.warn(f"Font not found: {font_family!r}; using Pillow default.", UserWarning)
    return ImageFont.load_default()


def _scale(font, font_size: float) -> float:
    # Bitmap fallback fonts ignore the requested size.
    return font_size / max(1.0, float(getattr(font, "size", font_size)))


def measure_text(
    text: str,
    font_family: str,
    font_size: float,
    font_style: str = "Regular",
) -> tuple[float, float]:
    """(width, height) of a single line; empty text is (0, 0)."""
    if not text:
        return (0.0, 0.0)
    font = load_font(font_family, font_size, font_style)
    draw = ImageDraw.Draw(Image.new("RGB", (1, 1)))
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    k = _scale(font, font_size)
    return (float(right - left) * k, float(bottom - top) * k)


def line_height(font_family: str, font_size: float, font_style: str = "Regular") -> float:
    """Ascent + descent of the font, never less than font_size."""
    font = load_font(font_family, font_size, font_style)
    if hasattr(font, "getmetrics"):
        ascent, descent = font.getmetrics()
        return max(float(font_size), float(ascent + descent) * _scale(font, font_size))
    return float(font_size)
