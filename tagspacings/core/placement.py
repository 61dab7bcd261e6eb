# tagspacings/core/placement.py
"""
Tag rectangle for one element: a BASE_TAG_SIZE-thick strip from the element
edge out past the container edge by EXTENSION_LENGTH, centred on the element
midpoint. Does not look at other tags; see collisions.py.
"""

from __future__ import annotations

from tagspacings.core.config import (
    BASE_TAG_SIZE,
    EXTENSION_LENGTH,
    TAG_DISTANCE_FROM_OBJECT,
)
from tagspacings.core.types import ContainerBounds, Direction, Element, Placement


def place_tag(element: Element, container: ContainerBounds, direction: Direction) -> Placement:
    """Compute tag rectangle and stem point for a resolved direction."""
    b = element.bounds

    if direction == "top":
        height = abs(b.y - container.y) + EXTENSION_LENGTH
        width = BASE_TAG_SIZE
        x = b.mid_x - width / 2
        y = b.y - height - TAG_DISTANCE_FROM_OBJECT
        stem = (b.mid_x, b.y)
    elif direction == "right":
        width = abs(container.right - b.right) + EXTENSION_LENGTH
        height = BASE_TAG_SIZE
        x = b.right + TAG_DISTANCE_FROM_OBJECT
        y = b.mid_y - height / 2
        stem = (b.right, b.mid_y)
    elif direction == "bottom":
        height = abs(container.bottom - b.bottom) + EXTENSION_LENGTH
        width = BASE_TAG_SIZE
        x = b.mid_x - width / 2
        y = b.bottom + TAG_DISTANCE_FROM_OBJECT
        stem = (b.mid_x, b.bottom)
    elif direction == "left":
        width = abs(b.x - container.x) + EXTENSION_LENGTH
        height = BASE_TAG_SIZE
        x = b.x - width - TAG_DISTANCE_FROM_OBJECT
        y = b.mid_y - height / 2
        stem = (b.x, b.mid_y)
    else:
        raise ValueError(f"Unresolved tag direction: {direction!r}")

    return Placement(
        direction=direction,
        x=x,
        y=y,
        width=width,
        height=height,
        stem_x=stem[0],
        stem_y=stem[1],
        element=element,
    )


def tag_far_edge(placement: Placement) -> float:
    """Coordinate of the tag end away from its element."""
    if placement.direction == "top":
        return placement.y
    if placement.direction == "bottom":
        return placement.y + placement.height
    if placement.direction == "left":
        return placement.x
    return placement.x + placement.width
