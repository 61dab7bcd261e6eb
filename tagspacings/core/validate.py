# tagspacings/core/validate.py
"""
Checks on finished placements: does a tag reach its container edge,
and which same-direction tags still overlap after the collision sweep.
"""

from __future__ import annotations

from tagspacings.core.collisions import group_by_direction
from tagspacings.core.geometry import overlap_area, placement_to_box
from tagspacings.core.placement import tag_far_edge
from tagspacings.core.types import ContainerBounds, Placement

OVERLAP_TOLERANCE: float = 1e-6


def reaches_container_edge(placement: Placement, container: ContainerBounds) -> bool:
    """True if the tag's far end is at or beyond the container edge on its side."""
    far = tag_far_edge(placement)
    if placement.direction == "top":
        return far <= container.y
    if placement.direction == "bottom":
        return far >= container.bottom
    if placement.direction == "left":
        return far <= container.x
    return far >= container.right


def placements_overlap(a: Placement, b: Placement, tolerance: float = OVERLAP_TOLERANCE) -> bool:
    """True if the two tag rectangles share more than tolerance area. Touching edges do not count."""
    return overlap_area(placement_to_box(a), placement_to_box(b)) > tolerance


def overlapping_pairs(placements: list[Placement]) -> list[tuple[Placement, Placement]]:
    """Same-direction pairs whose rectangles overlap."""
    pairs: list[tuple[Placement, Placement]] = []
    for group in group_by_direction(placements).values():
        for i, a in enumerate(group):
            for b in group[i + 1:]:
                if placements_overlap(a, b):
                    pairs.append((a, b))
    return pairs


def count_overlaps(placements: list[Placement]) -> int:
    return len(overlapping_pairs(placements))
