# tests/test_direction.py
"""
Direction resolution: explicit requests, near-edge rules, nearest-edge fallback.
"""

from __future__ import annotations

import pytest

from tagspacings.core.direction import resolve_direction
from tagspacings.core.geometry import container_from_bounds
from tagspacings.core.types import Bounds, Element


def _el(x: float, y: float, w: float = 20, h: float = 20, ordinal: int = 0) -> Element:
    return Element(bounds=Bounds(x, y, w, h), name="el", ordinal=ordinal)


CONTAINER = container_from_bounds(Bounds(0, 0, 200, 100))


@pytest.mark.parametrize("requested", ["top", "right", "bottom", "left"])
def test_explicit_direction_is_honoured(requested: str) -> None:
    assert resolve_direction(_el(90, 40), CONTAINER, requested) == requested


def test_near_left_edge_only() -> None:
    # mid (20, 50): near left, not near top/bottom (threshold 30)
    assert resolve_direction(_el(10, 40), CONTAINER, "auto") == "left"


def test_near_right_edge_only() -> None:
    assert resolve_direction(_el(170, 40), CONTAINER, "auto") == "right"


def test_near_top_edge_only() -> None:
    # mid (100, 15)
    assert resolve_direction(_el(90, 5), CONTAINER, "auto") == "top"


def test_near_bottom_edge_only() -> None:
    # mid (100, 85)
    assert resolve_direction(_el(90, 75), CONTAINER, "auto") == "bottom"


def test_corner_falls_back_to_nearest_edge() -> None:
    # mid (20, 10): near left and top; top is closer
    assert resolve_direction(_el(10, 0), CONTAINER, "auto") == "top"
    # mid (10, 25): near left and top; left is closer
    assert resolve_direction(_el(0, 15), CONTAINER, "auto") == "left"


def test_center_element_uses_nearest_edge() -> None:
    # mid (100, 50): near nothing; top and bottom at 50, left/right at 100
    assert resolve_direction(_el(90, 40), CONTAINER, "auto") == "top"


def test_resolution_is_deterministic() -> None:
    el = _el(37, 61)
    first = resolve_direction(el, CONTAINER, "auto")
    for _ in range(5):
        assert resolve_direction(el, CONTAINER, "auto") == first


def test_end_to_end_scenario_directions() -> None:
    assert resolve_direction(_el(10, 10), CONTAINER, "auto") == "left"
    assert resolve_direction(_el(170, 10), CONTAINER, "auto") == "right"
