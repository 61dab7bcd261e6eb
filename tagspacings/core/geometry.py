# tagspacings/core/geometry.py
"""
Geometry helpers: midpoints, edge distances, near-edge bands, union extents
and rectangle overlap. Total over well-formed bounds; no validation here.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
from shapely.geometry import Polygon, box

from tagspacings.core.types import Bounds, ContainerBounds, Placement


def container_from_bounds(bounds: Bounds) -> ContainerBounds:
    """Freeze caller-supplied container bounds and precompute its center."""
    return ContainerBounds(
        x=bounds.x,
        y=bounds.y,
        width=bounds.width,
        height=bounds.height,
        center_x=bounds.x + bounds.width / 2,
        center_y=bounds.y + bounds.height / 2,
    )


def midpoint(bounds: Bounds) -> tuple[float, float]:
    """Return (mid_x, mid_y)."""
    return (bounds.mid_x, bounds.mid_y)


def edge_distances(x: float, y: float, container: ContainerBounds) -> dict[str, float]:
    """
    Signed distance from (x, y) to each container edge.
    Positive when the point is inside the container on that side.
    """
    return {
        "left": x - container.x,
        "right": container.x + container.width - x,
        "top": y - container.y,
        "bottom": container.y + container.height - y,
    }


def within_band(distance: float, length: float, fraction: float) -> bool:
    """True if distance lies inside the band [.., fraction * length) measured from an edge."""
    return distance < length * fraction


def bounds_to_box(bounds: Bounds) -> Polygon:
    return box(bounds.x, bounds.y, bounds.x + bounds.width, bounds.y + bounds.height)


def placement_to_box(placement: Placement) -> Polygon:
    """Tag rectangle as a shapely polygon."""
    return box(
        placement.x,
        placement.y,
        placement.x + placement.width,
        placement.y + placement.height,
    )


def union_extent(bounds_list: Iterable[Bounds]) -> tuple[float, float, float, float] | None:
    """Return (minx, miny, maxx, maxy) of the union of bounds, or None if empty."""
    rows = [(b.x, b.y, b.x + b.width, b.y + b.height) for b in bounds_list]
    if not rows:
        return None
    arr = np.asarray(rows, dtype=np.float64)
    return (
        float(arr[:, 0].min()),
        float(arr[:, 1].min()),
        float(arr[:, 2].max()),
        float(arr[:, 3].max()),
    )


def overlap_area(a: Polygon, b: Polygon) -> float:
    """Intersection area of two rectangles; 0.0 when they only touch or are apart."""
    if a is None or b is None or a.is_empty or b.is_empty:
        return 0.0
    inter = a.intersection(b)
    if inter.is_empty:
        return 0.0
    return float(inter.area)
