# tagspacings/core/spacing.py
"""
Padding and gap measurements for a container.
ExplicitLayout values are authoritative; missing values are inferred from
child bounds. Children are expected to be real content already (no spacers,
no zero-size nodes).
"""

from __future__ import annotations

import logging

from tagspacings.core.config import DEFAULT_ROOT_SIZE, GAP_EPSILON
from tagspacings.core.geometry import union_extent
from tagspacings.core.types import (
    Axis,
    Bounds,
    ContainerBounds,
    EdgeInsets,
    ExplicitLayout,
    Gap,
    InferredLayout,
    LayoutSource,
    Measurements,
    PaddingMeasurement,
    PaddingSide,
    SizeMeasurement,
    SpacingsConfig,
)
from tagspacings.core.units import format_size

logger = logging.getLogger(__name__)


def dominant_axis(container: ContainerBounds) -> Axis:
    """horizontal when the container is wider than tall, else vertical."""
    return "horizontal" if container.width > container.height else "vertical"


def _span(bounds: Bounds, axis: Axis) -> tuple[float, float]:
    if axis == "horizontal":
        return (bounds.x, bounds.right)
    return (bounds.y, bounds.bottom)


def _paddings(
    sizes: EdgeInsets,
    positions: tuple[float, float, float, float],
    units: str,
    root_size: float,
) -> PaddingMeasurement:
    top_pos, right_pos, bottom_pos, left_pos = positions

    def side(edge: str, position: float, size: float) -> PaddingSide:
        size = max(0.0, size)
        return PaddingSide(edge=edge, position=position, size=size, label=format_size(size, units, root_size))  # type: ignore[arg-type]

    return PaddingMeasurement(
        top=side("top", top_pos, sizes.top),
        right=side("right", right_pos, sizes.right),
        bottom=side("bottom", bottom_pos, sizes.bottom),
        left=side("left", left_pos, sizes.left),
    )


def derive_paddings(
    container: ContainerBounds,
    children: list[Bounds],
    layout: LayoutSource | None = None,
    units: str = "px",
    root_size: float = DEFAULT_ROOT_SIZE,
) -> PaddingMeasurement:
    """
    Four padding sides. Explicit insets are used as-is; otherwise each side is
    the distance from the container edge to the union of children. With no
    insets and no children every side is zero.
    """
    if isinstance(layout, ExplicitLayout) and layout.insets is not None:
        ins = layout.insets
        return _paddings(
            ins,
            (
                container.y,
                container.right - max(0.0, ins.right),
                container.bottom - max(0.0, ins.bottom),
                container.x,
            ),
            units,
            root_size,
        )

    extent = union_extent(children)
    if extent is None:
        return _paddings(
            EdgeInsets(),
            (container.y, container.right, container.bottom, container.x),
            units,
            root_size,
        )
    minx, miny, maxx, maxy = extent
    inferred = EdgeInsets(
        top=miny - container.y,
        right=container.right - maxx,
        bottom=container.bottom - maxy,
        left=minx - container.x,
    )
    return _paddings(inferred, (container.y, maxx, maxy, container.x), units, root_size)


def _explicit_gaps(
    children: list[Bounds],
    spacing: float,
    axis: Axis,
    units: str,
    root_size: float,
) -> list[Gap]:
    if spacing <= GAP_EPSILON:
        return []
    label = format_size(spacing, units, root_size)
    gaps: list[Gap] = []
    for current in children[:-1]:
        start = _span(current, axis)[1]
        gaps.append(Gap(start=start, end=start + spacing, size=spacing, axis=axis, label=label))
    return gaps


def _inferred_gaps(
    children: list[Bounds],
    axis: Axis,
    units: str,
    root_size: float,
) -> list[Gap]:
    spans = sorted((_span(b, axis) for b in children), key=lambda s: s[0])
    gaps: list[Gap] = []
    for (_, end), (start, _) in zip(spans, spans[1:]):
        size = start - end
        if size <= GAP_EPSILON:
            continue
        gaps.append(Gap(start=end, end=start, size=size, axis=axis, label=format_size(size, units, root_size)))
    return gaps


def derive_gaps(
    container: ContainerBounds,
    children: list[Bounds],
    layout: LayoutSource | None = None,
    units: str = "px",
    root_size: float = DEFAULT_ROOT_SIZE,
) -> list[Gap]:
    """
    Gaps between consecutive children. Explicit item spacing yields one gap
    per pair in input order along the layout axis; otherwise children are
    sorted on the dominant axis and touching pairs are skipped.
    """
    if len(children) < 2:
        return []
    if isinstance(layout, ExplicitLayout) and layout.item_spacing is not None:
        return _explicit_gaps(children, layout.item_spacing, layout.axis, units, root_size)
    return _inferred_gaps(children, dominant_axis(container), units, root_size)


def derive_size(
    container: ContainerBounds,
    units: str = "px",
    root_size: float = DEFAULT_ROOT_SIZE,
) -> SizeMeasurement:
    """Container width and height with display labels."""
    return SizeMeasurement(
        width=container.width,
        height=container.height,
        width_label=format_size(container.width, units, root_size),
        height_label=format_size(container.height, units, root_size),
    )


def derive_measurements(
    container: ContainerBounds,
    children: list[Bounds],
    layout: LayoutSource | None = None,
    units: str = "px",
    root_size: float = DEFAULT_ROOT_SIZE,
) -> Measurements:
    """Paddings and gaps for one container."""
    source = layout if layout is not None else InferredLayout()
    return Measurements(
        paddings=derive_paddings(container, children, source, units, root_size),
        gaps=derive_gaps(container, children, source, units, root_size),
    )


def run_measurements(
    container: ContainerBounds,
    children: list[Bounds],
    layout: LayoutSource | None = None,
    config: SpacingsConfig | None = None,
) -> Measurements:
    """Measurement run honouring the include_* switches of SpacingsConfig."""
    cfg = config or SpacingsConfig()
    source = layout if layout is not None else InferredLayout()
    paddings = None
    gaps: list[Gap] = []
    if cfg.include_paddings:
        paddings = derive_paddings(container, children, source, cfg.units, cfg.root_size)
    if cfg.include_item_spacing:
        gaps = derive_gaps(container, children, source, cfg.units, cfg.root_size)
    size = derive_size(container, cfg.units, cfg.root_size) if cfg.include_size else None
    logger.info(
        "Measured %s layout: %d padding side(s), %d gap(s)",
        "explicit" if isinstance(source, ExplicitLayout) else "inferred",
        len(paddings.reported()) if paddings is not None else 0,
        len(gaps),
    )
    return Measurements(paddings=paddings, gaps=gaps, size=size)
