# tagspacings/core/reporting.py
"""
Create reports/<run_name>/ and write tags.json, measurements.json, run_metadata.json.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from tagspacings.core.config import (
    BASE_TAG_SIZE,
    EXTENSION_LENGTH,
    GAP_EPSILON,
    NEAR_EDGE_FRACTION,
    PADDING_EPSILON,
    REPORTS_DIR,
    TAG_DISTANCE_FROM_OBJECT,
    TAG_LENGTH_EXTENSION,
    TAG_MICRO_SHIFT,
)
from tagspacings.core.types import (
    Measurements,
    PaddingSide,
    Placement,
    SpacingsConfig,
    TagLayout,
    TagsConfig,
)

SCHEMA_VERSION = "1.0"


def placement_to_dict(placement: Placement, index: str) -> dict:
    """One tag: index, element, rectangle, stem and collision adjustments."""
    e = placement.element
    return {
        "index": index,
        "element": {
            "name": e.name,
            "ordinal": e.ordinal,
            "bounds": asdict(e.bounds),
        },
        "direction": placement.direction,
        "rect": {
            "x": placement.x,
            "y": placement.y,
            "width": placement.width,
            "height": placement.height,
        },
        "stem": {"x": placement.stem_x, "y": placement.stem_y},
        "micro_shift": (
            {"x": placement.micro_shift[0], "y": placement.micro_shift[1]}
            if placement.micro_shift is not None else None
        ),
        "length_extension": placement.length_extension,
    }


def layout_to_dict(layout: TagLayout) -> dict:
    """Exact structure for tags.json."""
    legend = None
    if layout.legend is not None:
        legend = {
            "x": layout.legend.x,
            "y": layout.legend.y,
            "width": layout.legend.width,
            "height": layout.legend.height,
            "entries": [asdict(entry) for entry in layout.legend.entries],
        }
    return {
        "schema_version": SCHEMA_VERSION,
        "tags": [placement_to_dict(p, i) for p, i in zip(layout.placements, layout.indexes)],
        "legend": legend,
        "summary": {
            "n_tags": len(layout.placements),
            "residual_overlaps": layout.residual_overlaps,
        },
    }


def _side_to_dict(side: PaddingSide) -> dict:
    return {"position": side.position, "size": side.size, "label": side.label}


def measurements_to_dict(measurements: Measurements) -> dict:
    """Exact structure for measurements.json. Only reported padding sides are written."""
    paddings = {}
    if measurements.paddings is not None:
        paddings = {s.edge: _side_to_dict(s) for s in measurements.paddings.reported()}
    size = None
    if measurements.size is not None:
        size = asdict(measurements.size)
    return {
        "schema_version": SCHEMA_VERSION,
        "paddings": paddings,
        "gaps": [asdict(g) for g in measurements.gaps],
        "size": size,
    }


def run_metadata_dict(
    run_name: str,
    scene_source: str,
    tags_config: TagsConfig,
    spacings_config: SpacingsConfig,
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "scene_source": scene_source,
        "tags": asdict(tags_config),
        "spacings": asdict(spacings_config),
        "config": {
            "TAG_DISTANCE_FROM_OBJECT": TAG_DISTANCE_FROM_OBJECT,
            "BASE_TAG_SIZE": BASE_TAG_SIZE,
            "EXTENSION_LENGTH": EXTENSION_LENGTH,
            "TAG_MICRO_SHIFT": TAG_MICRO_SHIFT,
            "TAG_LENGTH_EXTENSION": TAG_LENGTH_EXTENSION,
            "NEAR_EDGE_FRACTION": NEAR_EDGE_FRACTION,
            "PADDING_EPSILON": PADDING_EPSILON,
            "GAP_EPSILON": GAP_EPSILON,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_tags_json(report_dir: Path, layout: TagLayout) -> Path:
    """Write tags.json to report_dir. Returns path to file."""
    path = report_dir / "tags.json"
    path.write_text(json.dumps(layout_to_dict(layout), indent=2, ensure_ascii=False), encoding="utf-8")
    return path


def write_measurements_json(report_dir: Path, measurements: Measurements) -> Path:
    path = report_dir / "measurements.json"
    path.write_text(json.dumps(measurements_to_dict(measurements), indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    scene_source: str,
    tags_config: TagsConfig,
    spacings_config: SpacingsConfig,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, scene_source, tags_config, spacings_config)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    return path
