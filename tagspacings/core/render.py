# tagspacings/core/render.py
"""
Matplotlib PNG preview of a run: container, elements, tag rectangles with
their indexes, padding bands and gaps. A debugging aid, not document output.
"""

from __future__ import annotations

import warnings
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from shapely.geometry import Polygon, box

from tagspacings.core.config import RENDER_HEIGHT_PX, RENDER_WIDTH_PX
from tagspacings.core.geometry import bounds_to_box, placement_to_box
from tagspacings.core.placement import tag_far_edge
from tagspacings.core.types import ContainerBounds, Element, Measurements, TagLayout

DIRECTION_COLORS: dict[str, str] = {
    "top": "tab:red",
    "right": "tab:green",
    "bottom": "tab:blue",
    "left": "tab:purple",
}


def _new_fig(width_px: int, height_px: int) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(
        figsize=(width_px / 100.0, height_px / 100.0),
        dpi=100,
        constrained_layout=False,
    )
    ax = fig.add_axes([0.05, 0.08, 0.9, 0.88])
    ax.axis("off")
    return fig, ax


def _draw_rect(ax: plt.Axes, poly: Polygon, **kwargs: object) -> None:
    if poly is None or poly.is_empty:
        return
    xy = np.array(poly.exterior.coords)
    ax.fill(xy[:, 0], xy[:, 1], **kwargs)


def _set_axes(ax: plt.Axes, extent: tuple[float, float, float, float], pad_frac: float = 0.05) -> None:
    """Fit limits to extent with margin; y grows downwards like the source document."""
    minx, miny, maxx, maxy = extent
    dx = max(1.0, (maxx - minx) * pad_frac)
    dy = max(1.0, (maxy - miny) * pad_frac)
    ax.set_xlim(minx - dx, maxx + dx)
    ax.set_ylim(maxy + dy, miny - dy)
    ax.set_aspect("equal", adjustable="box")


def _padding_band(container: ContainerBounds, edge: str, position: float, size: float) -> Polygon:
    if edge in ("top", "bottom"):
        return box(container.x, position, container.right, position + size)
    return box(position, container.y, position + size, container.bottom)


def _gap_band(container: ContainerBounds, axis: str, start: float, end: float) -> Polygon:
    if axis == "horizontal":
        return box(start, container.y, end, container.bottom)
    return box(container.x, start, container.right, end)


def render_debug(
    container: ContainerBounds,
    elements: list[Element],
    layout: TagLayout | None,
    measurements: Measurements | None,
    output_path: str | Path,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    scale: int = 1,
) -> None:
    """Render debug overlay. scale multiplies output resolution (1x, 2x, 4x)."""
    w, h = width_px * scale, height_px * scale
    fig, ax = _new_fig(w, h)

    frame = box(container.x, container.y, container.right, container.bottom)
    _draw_rect(ax, frame, facecolor="whitesmoke", edgecolor="black", linewidth=1, label="container")
    minx, miny, maxx, maxy = frame.bounds

    if measurements is not None and measurements.paddings is not None:
        for side in measurements.paddings.reported():
            band = _padding_band(container, side.edge, side.position, side.size)
            _draw_rect(ax, band, facecolor="gold", edgecolor="none", alpha=0.35)
    if measurements is not None:
        for gap in measurements.gaps:
            band = _gap_band(container, gap.axis, gap.start, gap.end)
            _draw_rect(ax, band, facecolor="none", edgecolor="orange", hatch="//", linewidth=0.5, alpha=0.7)

    for element in elements:
        _draw_rect(ax, bounds_to_box(element.bounds), facecolor="lightblue", edgecolor="navy", linewidth=1)

    if layout is not None:
        for index, p in zip(layout.indexes, layout.placements):
            rect = placement_to_box(p)
            color = DIRECTION_COLORS.get(p.direction, "black")
            _draw_rect(ax, rect, facecolor=color, edgecolor=color, alpha=0.3, linewidth=1)
            ax.plot([p.stem_x], [p.stem_y], marker="o", markersize=3, color=color)
            far = tag_far_edge(p)
            if p.direction in ("top", "bottom"):
                tx, ty = p.x + p.width / 2, far
            else:
                tx, ty = far, p.y + p.height / 2
            ax.text(tx, ty, index, fontsize=8, ha="center", va="center", color="black", zorder=6)
            bx0, by0, bx1, by1 = rect.bounds
            minx, miny = min(minx, bx0), min(miny, by0)
            maxx, maxy = max(maxx, bx1), max(maxy, by1)

    _set_axes(ax, (minx, miny, maxx, maxy))
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=100, facecolor="white")
    plt.close(fig)
