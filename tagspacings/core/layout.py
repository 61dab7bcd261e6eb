# tagspacings/core/layout.py
"""
Tag run orchestration: resolve directions, place tags, sweep collisions,
generate index labels and the legend. Placements and indexes come back
paired 1:1 in input order.
"""

from __future__ import annotations

import logging

from tagspacings.core.collisions import resolve_overlaps
from tagspacings.core.config import DEFAULT_FONT_FAMILY, LAYOUT_DEBUG, LEGEND_FONT_SIZE
from tagspacings.core.direction import resolve_direction
from tagspacings.core.indexes import generate_indexes
from tagspacings.core.legend import build_legend
from tagspacings.core.placement import place_tag
from tagspacings.core.types import ContainerBounds, Element, Placement, TagLayout, TagsConfig
from tagspacings.core.validate import count_overlaps

logger = logging.getLogger(__name__)


def compute_placements(
    elements: list[Element],
    container: ContainerBounds,
    direction: str = "auto",
) -> list[Placement]:
    """Initial placement per element, then one collision sweep."""
    placements: list[Placement] = []
    for element in elements:
        resolved = resolve_direction(element, container, direction)
        placements.append(place_tag(element, container, resolved))
    return resolve_overlaps(placements)


def run_tag_layout(
    container: ContainerBounds,
    elements: list[Element],
    config: TagsConfig | None = None,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size: float = LEGEND_FONT_SIZE,
    with_legend: bool = True,
) -> TagLayout:
    """
    Full tag run for one container. Empty input gives an empty layout.
    residual_overlaps counts same-direction pairs the single sweep left overlapping.
    """
    cfg = config or TagsConfig()
    if not elements:
        return TagLayout(placements=[], indexes=[], legend=None, residual_overlaps=0)

    placements = compute_placements(elements, container, cfg.direction)
    indexes = generate_indexes(len(placements), cfg.index_scheme, cfg.start_symbol)

    log_placement = logger.info if LAYOUT_DEBUG else logger.debug
    for index, p in zip(indexes, placements):
        log_placement(
            "tag %s -> %r: %s at (%.1f, %.1f) %.1fx%.1f shift=%s ext=%.1f",
            index, p.element.name, p.direction, p.x, p.y, p.width, p.height,
            p.micro_shift, p.length_extension,
        )

    residual = count_overlaps(placements)
    if residual:
        logger.warning("%d tag pair(s) still overlap after collision sweep", residual)

    legend = build_legend(placements, indexes, container, font_family, font_size) if with_legend else None
    logger.info("Placed %d tags (direction=%s, scheme=%s)", len(placements), cfg.direction, cfg.index_scheme)
    return TagLayout(
        placements=placements,
        indexes=indexes,
        legend=legend,
        residual_overlaps=residual,
    )
