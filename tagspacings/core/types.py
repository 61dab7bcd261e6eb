# tagspacings/core/types.py
"""
Dataclasses for elements, containers, tag placements and spacing measurements.
Coordinates live in one flat space; y grows downwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Union

from tagspacings.core.config import (
    DEFAULT_DIRECTION,
    DEFAULT_INDEX_SCHEME,
    DEFAULT_ROOT_SIZE,
    DEFAULT_START_SYMBOL,
    DEFAULT_UNITS,
    PADDING_EPSILON,
)


Direction = Literal["top", "right", "bottom", "left"]
DirectionRequest = Literal["top", "right", "bottom", "left", "auto"]
IndexScheme = Literal["alphabetic", "numeric", "geometric", "circled", "extended"]
SpacingUnits = Literal["px", "rem", "percent", "var"]
Axis = Literal["horizontal", "vertical"]

DIRECTIONS: tuple[str, ...] = ("top", "right", "bottom", "left")
SCHEMES: tuple[str, ...] = ("alphabetic", "numeric", "geometric", "circled", "extended")
UNITS: tuple[str, ...] = ("px", "rem", "percent", "var")


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned bounding box."""
    x: float
    y: float
    width: float
    height: float

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class ContainerBounds:
    """Region tags are placed around. Built once per run via geometry.container_from_bounds."""
    x: float
    y: float
    width: float
    height: float
    center_x: float
    center_y: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class ElementMeta:
    """Optional display metadata used for legend text."""
    style_name: str | None = None
    font_family: str | None = None
    font_style: str | None = None
    font_size: float | None = None
    is_icon: bool = False
    link_target: str | None = None


@dataclass(frozen=True)
class Element:
    """One taggable unit. ordinal is the stable input position."""
    bounds: Bounds
    name: str
    ordinal: int
    meta: ElementMeta | None = None


@dataclass
class Placement:
    """
    Tag rectangle, its direction and the stem point on the element.
    Mutated at most once by the collision resolver (micro_shift, length_extension).
    """
    direction: Direction
    x: float
    y: float
    width: float
    height: float
    stem_x: float
    stem_y: float
    element: Element
    micro_shift: tuple[float, float] | None = None
    length_extension: float = 0.0


@dataclass(frozen=True)
class PaddingSide:
    """Inset on one container edge. position is on the axis across that edge."""
    edge: Direction
    position: float
    size: float
    label: str


@dataclass(frozen=True)
class PaddingMeasurement:
    top: PaddingSide
    right: PaddingSide
    bottom: PaddingSide
    left: PaddingSide

    def reported(self, epsilon: float | None = None) -> list[PaddingSide]:
        """Sides with a size above epsilon, in top/right/bottom/left order."""
        eps = PADDING_EPSILON if epsilon is None else epsilon
        return [s for s in (self.top, self.right, self.bottom, self.left) if s.size > eps]


@dataclass(frozen=True)
class Gap:
    start: float
    end: float
    size: float
    axis: Axis
    label: str


@dataclass(frozen=True)
class SizeMeasurement:
    width: float
    height: float
    width_label: str
    height_label: str


@dataclass(frozen=True)
class EdgeInsets:
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


@dataclass(frozen=True)
class ExplicitLayout:
    """
    Layout metadata carried by the container (auto-layout style).
    None fields fall back to inference from children.
    """
    insets: EdgeInsets | None = None
    item_spacing: float | None = None
    axis: Axis = "horizontal"


@dataclass(frozen=True)
class InferredLayout:
    """No layout metadata: paddings and gaps come from child bounds."""


LayoutSource = Union[ExplicitLayout, InferredLayout]


@dataclass
class Measurements:
    paddings: PaddingMeasurement | None
    gaps: list[Gap] = field(default_factory=list)
    size: SizeMeasurement | None = None


@dataclass(frozen=True)
class LegendEntry:
    index: str
    text: str
    element_ordinal: int
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Legend:
    x: float
    y: float
    width: float
    height: float
    entries: list[LegendEntry] = field(default_factory=list)


@dataclass
class TagLayout:
    """Result of one tag run: placements paired 1:1 with indexes, in input order."""
    placements: list[Placement]
    indexes: list[str]
    legend: Legend | None = None
    residual_overlaps: int = 0


@dataclass(frozen=True)
class TagsConfig:
    """
    Tag run settings. include_instances, include_text and max_width are
    consumed by the element enumerator and only echoed in run metadata.
    """
    direction: DirectionRequest = DEFAULT_DIRECTION  # type: ignore[assignment]
    index_scheme: IndexScheme = DEFAULT_INDEX_SCHEME  # type: ignore[assignment]
    start_symbol: str = DEFAULT_START_SYMBOL
    include_instances: bool = True
    include_text: bool = True
    max_width: float = 0.0


@dataclass(frozen=True)
class SpacingsConfig:
    include_size: bool = True
    include_paddings: bool = True
    include_item_spacing: bool = True
    units: SpacingUnits = DEFAULT_UNITS  # type: ignore[assignment]
    root_size: float = DEFAULT_ROOT_SIZE


@dataclass
class Scene:
    """Container, its elements and layout metadata, as loaded from a scene file."""
    container: ContainerBounds
    elements: list[Element]
    layout: LayoutSource = field(default_factory=InferredLayout)
    source: str = ""
