# tests/test_placement.py
"""
Tag rectangles per direction: size, offset from the element, stem point,
far edge past the container edge.
"""

from __future__ import annotations

import pytest

from tagspacings.core.config import BASE_TAG_SIZE, EXTENSION_LENGTH, TAG_DISTANCE_FROM_OBJECT
from tagspacings.core.geometry import container_from_bounds
from tagspacings.core.placement import place_tag, tag_far_edge
from tagspacings.core.types import Bounds, Element
from tagspacings.core.validate import reaches_container_edge

CONTAINER = container_from_bounds(Bounds(0, 0, 200, 100))
ELEMENT = Element(bounds=Bounds(90, 40, 20, 20), name="Button", ordinal=0)


def test_top_tag_geometry() -> None:
    p = place_tag(ELEMENT, CONTAINER, "top")
    assert p.width == BASE_TAG_SIZE
    assert p.height == pytest.approx(40 + EXTENSION_LENGTH)
    assert p.x == pytest.approx(100 - BASE_TAG_SIZE / 2)
    assert p.y + p.height == pytest.approx(40 - TAG_DISTANCE_FROM_OBJECT)
    assert (p.stem_x, p.stem_y) == (100, 40)


def test_right_tag_geometry() -> None:
    p = place_tag(ELEMENT, CONTAINER, "right")
    assert p.height == BASE_TAG_SIZE
    assert p.width == pytest.approx(90 + EXTENSION_LENGTH)
    assert p.x == pytest.approx(110 + TAG_DISTANCE_FROM_OBJECT)
    assert p.y == pytest.approx(50 - BASE_TAG_SIZE / 2)
    assert (p.stem_x, p.stem_y) == (110, 50)


def test_bottom_tag_geometry() -> None:
    p = place_tag(ELEMENT, CONTAINER, "bottom")
    assert p.height == pytest.approx(40 + EXTENSION_LENGTH)
    assert p.y == pytest.approx(60 + TAG_DISTANCE_FROM_OBJECT)
    assert (p.stem_x, p.stem_y) == (100, 60)


def test_left_tag_geometry() -> None:
    p = place_tag(ELEMENT, CONTAINER, "left")
    assert p.width == pytest.approx(90 + EXTENSION_LENGTH)
    assert p.x + p.width == pytest.approx(90 - TAG_DISTANCE_FROM_OBJECT)
    assert (p.stem_x, p.stem_y) == (90, 50)


@pytest.mark.parametrize("direction", ["top", "right", "bottom", "left"])
def test_far_edge_reaches_container_edge(direction: str) -> None:
    p = place_tag(ELEMENT, CONTAINER, direction)
    assert reaches_container_edge(p, CONTAINER)


@pytest.mark.parametrize("direction", ["top", "right", "bottom", "left"])
def test_flush_element_still_reaches_edge(direction: str) -> None:
    flush = Element(bounds=Bounds(0, 0, 200, 100), name="Fill", ordinal=0)
    p = place_tag(flush, CONTAINER, direction)
    assert reaches_container_edge(p, CONTAINER)


def test_far_edge_per_direction() -> None:
    top = place_tag(ELEMENT, CONTAINER, "top")
    right = place_tag(ELEMENT, CONTAINER, "right")
    assert tag_far_edge(top) == pytest.approx(top.y)
    assert tag_far_edge(right) == pytest.approx(right.x + right.width)


def test_placement_has_no_shift_before_sweep() -> None:
    p = place_tag(ELEMENT, CONTAINER, "top")
    assert p.micro_shift is None
    assert p.length_extension == 0.0
    assert p.element is ELEMENT


def test_unresolved_direction_raises() -> None:
    with pytest.raises(ValueError):
        place_tag(ELEMENT, CONTAINER, "auto")  # type: ignore[arg-type]
