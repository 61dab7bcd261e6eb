# tagspacings/core/collisions.py
"""
Single-sweep overlap resolution within each direction group.
Each tag is compared only with its predecessor in sort order, so dense
clusters of three or more tags may keep some overlap.
"""

from __future__ import annotations

import logging

from tagspacings.core.config import TAG_LENGTH_EXTENSION, TAG_MICRO_SHIFT
from tagspacings.core.types import DIRECTIONS, Placement

logger = logging.getLogger(__name__)


def group_by_direction(placements: list[Placement]) -> dict[str, list[Placement]]:
    """Group placements by direction, keeping input order inside each group."""
    groups: dict[str, list[Placement]] = {d: [] for d in DIRECTIONS}
    for p in placements:
        groups[p.direction].append(p)
    return groups


def _shift_sign(current: float, previous: float) -> int:
    return 1 if current > previous else -1


def _resolve_vertical_group(direction: str, group: list[Placement]) -> int:
    """Top/bottom tags: collide along x."""
    shifted = 0
    ordered = sorted(group, key=lambda p: p.x)
    for prev, cur in zip(ordered, ordered[1:]):
        if abs(cur.x - prev.x) >= cur.width:
            continue
        dx = TAG_MICRO_SHIFT * _shift_sign(cur.element.bounds.mid_x, prev.element.bounds.mid_x)
        cur.micro_shift = (dx, 0.0)
        cur.x += dx
        cur.length_extension = TAG_LENGTH_EXTENSION
        cur.height += TAG_LENGTH_EXTENSION
        if direction == "top":
            cur.y -= TAG_LENGTH_EXTENSION
        shifted += 1
    return shifted


def _resolve_horizontal_group(direction: str, group: list[Placement]) -> int:
    """Left/right tags: collide along y."""
    shifted = 0
    ordered = sorted(group, key=lambda p: p.y)
    for prev, cur in zip(ordered, ordered[1:]):
        if abs(cur.y - prev.y) >= cur.height:
            continue
        dy = TAG_MICRO_SHIFT * _shift_sign(cur.element.bounds.mid_y, prev.element.bounds.mid_y)
        cur.micro_shift = (0.0, dy)
        cur.y += dy
        cur.length_extension = TAG_LENGTH_EXTENSION
        cur.width += TAG_LENGTH_EXTENSION
        if direction == "left":
            cur.x -= TAG_LENGTH_EXTENSION
        shifted += 1
    return shifted


def resolve_overlaps(placements: list[Placement]) -> list[Placement]:
    """
    Shift and lengthen colliding tags in place. Sorting uses the pre-shift
    coordinate; the returned list is the input list, order unchanged.
    """
    for direction, group in group_by_direction(placements).items():
        if len(group) < 2:
            continue
        if direction in ("top", "bottom"):
            shifted = _resolve_vertical_group(direction, group)
        else:
            shifted = _resolve_horizontal_group(direction, group)
        if shifted:
            logger.debug("Shifted %d of %d %s tags", shifted, len(group), direction)
    return placements
