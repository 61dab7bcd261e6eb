# tagspacings/core/direction.py
"""
Choose which side of an element its tag points from.
Explicit directions are returned unchanged; "auto" is inferred from the
element midpoint's position inside the container.
"""

from __future__ import annotations

from tagspacings.core.config import NEAR_EDGE_FRACTION
from tagspacings.core.geometry import edge_distances, within_band
from tagspacings.core.types import ContainerBounds, Direction, Element

# Nearest-edge fallback: first smallest distance wins in this order.
EDGE_ORDER: tuple[Direction, ...] = ("left", "right", "top", "bottom")


def resolve_direction(
    element: Element,
    container: ContainerBounds,
    requested: str = "auto",
) -> Direction:
    """
    Resolve "auto" to a concrete direction.
    Side edges win for elements near only one side; top/bottom win for
    elements near only top or bottom; corners fall through to nearest edge.
    """
    if requested != "auto":
        return requested  # type: ignore[return-value]

    b = element.bounds
    d = edge_distances(b.mid_x, b.mid_y, container)

    near_left = within_band(d["left"], container.width, NEAR_EDGE_FRACTION)
    near_right = within_band(d["right"], container.width, NEAR_EDGE_FRACTION)
    near_top = within_band(d["top"], container.height, NEAR_EDGE_FRACTION)
    near_bottom = within_band(d["bottom"], container.height, NEAR_EDGE_FRACTION)

    if near_left and not near_top and not near_bottom:
        return "left"
    if near_right and not near_top and not near_bottom:
        return "right"
    if near_top and not near_left and not near_right:
        return "top"
    if near_bottom and not near_left and not near_right:
        return "bottom"

    return min(EDGE_ORDER, key=lambda edge: abs(d[edge]))
