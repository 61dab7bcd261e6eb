# tagspacings/core/io.py
"""
Load and validate scene files (JSON): container bounds, optional layout
metadata and the ordered element list. Elements get ordinals in file order.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from tagspacings.core.geometry import container_from_bounds
from tagspacings.core.types import (
    Bounds,
    EdgeInsets,
    Element,
    ElementMeta,
    ExplicitLayout,
    InferredLayout,
    LayoutSource,
    Scene,
)

logger = logging.getLogger(__name__)

_AXES = ("horizontal", "vertical")


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _number(obj: dict[str, Any], key: str, where: str, default: float | None = None) -> float:
    value = obj.get(key, default)
    if value is None:
        raise ValueError(f"{where}: missing '{key}'")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{where}: '{key}' must be a number, got {value!r}")
    return float(value)


def parse_bounds(obj: Any, where: str) -> Bounds:
    """Bounds from {x, y, width, height}; negative width/height is rejected."""
    if not isinstance(obj, dict):
        raise ValueError(f"{where}: expected an object with x, y, width, height")
    bounds = Bounds(
        x=_number(obj, "x", where, 0.0),
        y=_number(obj, "y", where, 0.0),
        width=_number(obj, "width", where),
        height=_number(obj, "height", where),
    )
    if bounds.width < 0 or bounds.height < 0:
        raise ValueError(f"{where}: width and height must be non-negative")
    return bounds


def parse_layout(obj: Any) -> LayoutSource:
    """ExplicitLayout when the scene carries padding and/or item_spacing; otherwise InferredLayout."""
    if not obj:
        return InferredLayout()
    if not isinstance(obj, dict):
        raise ValueError("layout: expected an object")
    insets = None
    padding = obj.get("padding")
    if padding is not None:
        if isinstance(padding, (int, float)) and not isinstance(padding, bool):
            p = float(padding)
            insets = EdgeInsets(top=p, right=p, bottom=p, left=p)
        elif isinstance(padding, dict):
            insets = EdgeInsets(
                top=_number(padding, "top", "layout.padding", 0.0),
                right=_number(padding, "right", "layout.padding", 0.0),
                bottom=_number(padding, "bottom", "layout.padding", 0.0),
                left=_number(padding, "left", "layout.padding", 0.0),
            )
        else:
            raise ValueError("layout.padding: expected a number or {top, right, bottom, left}")
    item_spacing = None
    if obj.get("item_spacing") is not None:
        item_spacing = _number(obj, "item_spacing", "layout")
    axis = obj.get("axis", "horizontal")
    if axis not in _AXES:
        raise ValueError(f"layout.axis: expected one of {_AXES}, got {axis!r}")
    if insets is None and item_spacing is None:
        return InferredLayout()
    return ExplicitLayout(insets=insets, item_spacing=item_spacing, axis=axis)


def _parse_meta(obj: dict[str, Any], where: str) -> ElementMeta | None:
    keys = ("style_name", "font_family", "font_style", "font_size", "is_icon", "link_target")
    if not any(k in obj for k in keys):
        return None
    font_size = None
    if obj.get("font_size") is not None:
        font_size = _number(obj, "font_size", where)
    is_icon = obj.get("is_icon", False)
    if not isinstance(is_icon, bool):
        raise ValueError(f"{where}: 'is_icon' must be true or false, got {is_icon!r}")
    return ElementMeta(
        style_name=obj.get("style_name"),
        font_family=obj.get("font_family"),
        font_style=obj.get("font_style"),
        font_size=font_size,
        is_icon=is_icon,
        link_target=obj.get("link_target"),
    )


def parse_scene(data: Any, source: str = "") -> Scene:
    """
    Build a Scene from parsed JSON.
    Raises ValueError with the offending location when the structure is invalid.
    """
    if not isinstance(data, dict):
        raise ValueError("Scene must be a JSON object")
    if "container" not in data:
        raise ValueError("Scene has no 'container'")
    container = container_from_bounds(parse_bounds(data["container"], "container"))
    raw_elements = data.get("elements", [])
    if not isinstance(raw_elements, list):
        raise ValueError("'elements' must be a list")
    elements: list[Element] = []
    for i, raw in enumerate(raw_elements):
        where = f"elements[{i}]"
        bounds = parse_bounds(raw.get("bounds", raw) if isinstance(raw, dict) else raw, where)
        elements.append(Element(
            bounds=bounds,
            name=str(raw.get("name", f"element {i + 1}")),
            ordinal=i,
            meta=_parse_meta(raw, where),
        ))
    return Scene(
        container=container,
        elements=elements,
        layout=parse_layout(data.get("layout")),
        source=source,
    )


def load_scene(path: str | Path, repo_root: Path | None = None) -> Scene:
    """
    Read and validate a scene JSON file.
    Raises FileNotFoundError if path is missing, ValueError if the scene is invalid.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Scene file not found: {resolved}")
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Scene file is not valid JSON: {resolved}: {exc}") from exc
    scene = parse_scene(data, source=str(path))
    logger.debug("Loaded scene %s: %d elements", path, len(scene.elements))
    return scene


def scene_to_dict(scene: Scene) -> dict:
    """Inverse of parse_scene, used by the synthetic scene generator."""
    c = scene.container
    out: dict[str, Any] = {
        "container": {"x": c.x, "y": c.y, "width": c.width, "height": c.height},
        "elements": [],
    }
    for e in scene.elements:
        item: dict[str, Any] = {
            "name": e.name,
            "x": e.bounds.x,
            "y": e.bounds.y,
            "width": e.bounds.width,
            "height": e.bounds.height,
        }
        if e.meta is not None:
            for key in ("style_name", "font_family", "font_style", "font_size", "link_target"):
                value = getattr(e.meta, key)
                if value is not None:
                    item[key] = value
            if e.meta.is_icon:
                item["is_icon"] = True
        out["elements"].append(item)
    if isinstance(scene.layout, ExplicitLayout):
        layout: dict[str, Any] = {"axis": scene.layout.axis}
        if scene.layout.insets is not None:
            ins = scene.layout.insets
            layout["padding"] = {"top": ins.top, "right": ins.right, "bottom": ins.bottom, "left": ins.left}
        if scene.layout.item_spacing is not None:
            layout["item_spacing"] = scene.layout.item_spacing
        out["layout"] = layout
    return out
