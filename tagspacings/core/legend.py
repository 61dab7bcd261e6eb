# tagspacings/core/legend.py
"""
Legend below the container: one "index  description" line per tag, in input order.
"""

from __future__ import annotations

from tagspacings.core.config import (
    DEFAULT_FONT_FAMILY,
    LEGEND_FONT_SIZE,
    LEGEND_ITEM_SPACING,
    LEGEND_OFFSET,
)
from tagspacings.core.text_metrics import line_height, measure_text
from tagspacings.core.types import ContainerBounds, Element, Legend, LegendEntry, Placement
from tagspacings.core.units import round_half_up


def legend_text(element: Element) -> str:
    """Description for an element: name, text style and font, or icon size."""
    meta = element.meta
    if (meta is not None and meta.is_icon) or element.name == "Icon":
        return f"Icon - {round_half_up(element.bounds.width)}px"
    if meta is None or not meta.style_name:
        return element.name
    font_info = ""
    if meta.font_family:
        font = " ".join(p for p in (meta.font_family, meta.font_style) if p)
        size = f"{meta.font_size:g}px" if meta.font_size is not None else "?px"
        font_info = f" ({font} - {size})"
    return f"{element.name}, {meta.style_name}{font_info}"


def legend_origin(placements: list[Placement], container: ContainerBounds) -> tuple[float, float]:
    """Legend sits at the container's x, LEGEND_OFFSET below the lowest of container and tags."""
    lowest = container.bottom
    for p in placements:
        lowest = max(lowest, p.y + p.height)
    return (container.x, lowest + LEGEND_OFFSET)


def build_legend(
    placements: list[Placement],
    indexes: list[str],
    container: ContainerBounds,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size: float = LEGEND_FONT_SIZE,
) -> Legend:
    """Stack legend entries vertically; width is the widest line."""
    x0, y0 = legend_origin(placements, container)
    entries: list[LegendEntry] = []
    row_height = line_height(font_family, font_size)
    y = y0
    width = 0.0
    for i, placement in enumerate(placements):
        index = indexes[i] if i < len(indexes) else str(i + 1)
        text = legend_text(placement.element)
        w, h = measure_text(f"{index}  {text}", font_family, font_size)
        h = max(h, row_height)
        entries.append(LegendEntry(
            index=index,
            text=text,
            element_ordinal=placement.element.ordinal,
            x=x0,
            y=y,
            width=w,
            height=h,
        ))
        width = max(width, w)
        y += h + LEGEND_ITEM_SPACING
    height = (y - y0 - LEGEND_ITEM_SPACING) if entries else 0.0
    return Legend(x=x0, y=y0, width=width, height=height, entries=entries)
