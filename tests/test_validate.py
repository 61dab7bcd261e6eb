# tests/test_validate.py
"""
Deterministic tests for placement checks: container edge reach and residual overlap.
"""

from __future__ import annotations

from tagspacings.core.geometry import container_from_bounds
from tagspacings.core.placement import place_tag
from tagspacings.core.types import Bounds, Element, Placement
from tagspacings.core.validate import (
    count_overlaps,
    overlapping_pairs,
    placements_overlap,
    reaches_container_edge,
)

CONTAINER = container_from_bounds(Bounds(0, 0, 200, 100))


def _placement(direction: str, x: float, y: float, w: float, h: float, ordinal: int = 0) -> Placement:
    el = Element(bounds=Bounds(x, y, w, h), name="el", ordinal=ordinal)
    return Placement(direction=direction, x=x, y=y, width=w, height=h, stem_x=x, stem_y=y, element=el)


def test_reaches_container_edge_short_tag() -> None:
    short = _placement("top", 10, 5, 24, 10)
    assert reaches_container_edge(short, CONTAINER) is False


def test_reaches_container_edge_exactly_at_edge() -> None:
    exact = _placement("right", 150, 10, 50, 24)
    assert reaches_container_edge(exact, CONTAINER) is True


def test_placements_overlap_touching_is_not_overlap() -> None:
    a = _placement("top", 0, 0, 24, 50)
    b = _placement("top", 24, 0, 24, 50)
    assert placements_overlap(a, b) is False


def test_placements_overlap_partial() -> None:
    a = _placement("top", 0, 0, 24, 50)
    b = _placement("top", 12, 0, 24, 50)
    assert placements_overlap(a, b) is True


def test_overlapping_pairs_ignores_other_directions() -> None:
    a = _placement("top", 0, 0, 24, 50, 0)
    b = _placement("left", 0, 0, 50, 24, 1)
    assert overlapping_pairs([a, b]) == []


def test_count_overlaps_after_layout() -> None:
    el = Element(bounds=Bounds(90, 40, 20, 20), name="el", ordinal=0)
    twin = Element(bounds=Bounds(90, 40, 20, 20), name="el", ordinal=1)
    placements = [place_tag(el, CONTAINER, "top"), place_tag(twin, CONTAINER, "top")]
    assert count_overlaps(placements) == 1
