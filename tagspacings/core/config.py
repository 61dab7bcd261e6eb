# tagspacings/core/config.py
"""
Central configuration for tag placement and spacing measurements.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Tag geometry -----
TAG_DISTANCE_FROM_OBJECT: float = 2.0
"""Gap between the element edge and the start of its tag."""

BASE_TAG_SIZE: float = 24.0
"""Tag thickness across the axis perpendicular to its direction."""

EXTENSION_LENGTH: float = 64.0
"""How far a tag overshoots the container edge."""

# ----- Collision sweep -----
TAG_MICRO_SHIFT: float = 24.0
"""Sideways shift for a colliding tag. Equal to BASE_TAG_SIZE so the shifted tag clears its neighbour."""

TAG_LENGTH_EXTENSION: float = 15.0
"""Extra length given to a shifted tag, added at its far end."""

# ----- Direction inference -----
NEAR_EDGE_FRACTION: float = 0.3
"""Element midpoint is "near" an edge when closer than this fraction of the container dimension."""

# ----- Measurements -----
PADDING_EPSILON: float = 0.01
"""Padding sides at or below this size are not reported."""

GAP_EPSILON: float = 0.01
"""Gaps at or below this size count as touching."""

# ----- Units -----
DEFAULT_ROOT_SIZE: float = 16.0
"""Root font size for rem conversion; used when a non-positive value is supplied."""

REM_DECIMALS: int = 2
SPACING_VAR_PREFIX: str = "--spacing-"

# ----- Index alphabets -----
NUMERIC_INDEXES: str = "0123456789"
ALPHABETIC_LOWERCASE: str = "abcdefghijklmnopqrstuvwxyz"
ALPHABETIC_UPPERCASE: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
GEOMETRIC_SHAPES: str = "●○■□▲△▼▽◆◇◊★☆✦✧✩✪✫✬✭✮✯"
CIRCLED_NUMBERS: str = (
    "①②③④⑤⑥⑦⑧⑨⑩⑪⑫⑬⑭⑮⑯⑰⑱⑲⑳㉑㉒㉓㉔㉕㉖㉗㉘㉙㉚㉛㉜㉝㉞㉟㊱㊲㊳㊴㊵㊶㊷㊸㊹㊺㊻㊼㊽㊾㊿"
)
EXTENDED_ABC: str = (
    ALPHABETIC_LOWERCASE
    + ALPHABETIC_UPPERCASE
    + NUMERIC_INDEXES
    + "αβγδεζηθικλμνξοπρστυφχψω"
    + "ΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡΣΤΥΦΧΨΩ"
    + "♠♣♥♦"
    + "●○■□▲△▼▽◆◇◊"
    + "★☆✦✧✩✪✫✬✭✮✯"
    + "①②③④⑤⑥⑦⑧⑨⑩⑪⑫⑬⑭⑮⑯⑰⑱⑲⑳"
)
"""Large mixed alphabet for element counts beyond the small alphabets."""

INDEX_SCHEMES: dict[str, str] = {
    "alphabetic": ALPHABETIC_LOWERCASE,
    "numeric": NUMERIC_INDEXES,
    "geometric": GEOMETRIC_SHAPES,
    "circled": CIRCLED_NUMBERS,
    "extended": EXTENDED_ABC,
}

AMBIGUOUS_GLYPHS: str = "0oO1lI"
"""Stripped from letter-based alphabets so labels are not misread."""

UNAMBIGUOUS_SCHEMES: tuple[str, ...] = ("numeric", "circled", "geometric")
"""Schemes whose alphabets keep every glyph."""

# ----- Legend -----
LEGEND_OFFSET: float = 52.0
"""Vertical distance between the lowest tag (or container bottom) and the legend."""

LEGEND_ITEM_SPACING: float = 8.0
DEFAULT_FONT_FAMILY: str = "Inter"
LEGEND_FONT_SIZE: float = 12.0

# ----- Defaults (tool settings) -----
DEFAULT_DIRECTION: str = "auto"
DEFAULT_INDEX_SCHEME: str = "alphabetic"
DEFAULT_START_SYMBOL: str = "a"
DEFAULT_UNITS: str = "px"

# ----- Rendering -----
RENDER_WIDTH_PX: int = 800
RENDER_HEIGHT_PX: int = 600

# ----- Debug flags -----
LAYOUT_DEBUG: bool = os.environ.get("LAYOUT_DEBUG", "").lower() in ("1", "true", "yes")
"""Log every placement at INFO. Set env LAYOUT_DEBUG=1 to enable."""
