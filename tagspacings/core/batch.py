# tagspacings/core/batch.py
"""
Multi-scene batch mode: run tags + measurements on a directory of scene .json files.
Output: reports/batch_<run_name>/index.csv and cases/<case_id>/ with tags.json, measurements.json.
"""

from __future__ import annotations

import csv
import logging
import time
from pathlib import Path

from tagspacings.core.config import REPORTS_DIR
from tagspacings.core.error_codes import NO_ELEMENTS, OK, RUN_FAILED, SCENE_INVALID
from tagspacings.core.io import load_scene
from tagspacings.core.layout import run_tag_layout
from tagspacings.core.reporting import (
    ensure_report_dir,
    write_measurements_json,
    write_run_metadata_json,
    write_tags_json,
)
from tagspacings.core.spacing import run_measurements
from tagspacings.core.types import SpacingsConfig, TagsConfig

logger = logging.getLogger(__name__)

INDEX_FIELDS = [
    "case_id",
    "scene_source",
    "status",
    "n_elements",
    "n_tags",
    "residual_overlaps",
    "n_gaps",
    "paddings_reported",
    "duration_ms",
]


def _error_row(case_id: str, source: str, status: str, t0: float) -> dict:
    return {
        "case_id": case_id, "scene_source": source, "status": status,
        "n_elements": 0, "n_tags": 0, "residual_overlaps": 0, "n_gaps": 0,
        "paddings_reported": 0, "duration_ms": int((time.perf_counter() - t0) * 1000),
    }


def run_batch(
    run_name: str,
    batch_dir: Path,
    tags_config: TagsConfig | None = None,
    spacings_config: SpacingsConfig | None = None,
    limit: int | None = None,
    repo_root: Path | None = None,
    output_dir: str = REPORTS_DIR,
    render: bool = False,
) -> Path:
    """
    Run every *.json scene in batch_dir (sorted by name). Invalid scenes get a
    row with status scene_invalid instead of stopping the batch.
    Returns the batch report directory containing index.csv and cases/.
    """
    if batch_dir is None or not batch_dir.is_dir():
        raise ValueError(f"Batch directory not found: {batch_dir}")
    root = repo_root or Path.cwd().resolve()
    tags_cfg = tags_config or TagsConfig()
    spacings_cfg = spacings_config or SpacingsConfig()

    report_dir = ensure_report_dir(root, f"batch_{run_name}", output_dir=output_dir)
    cases_dir = report_dir / "cases"
    cases_dir.mkdir(parents=True, exist_ok=True)

    scene_files = sorted(batch_dir.glob("*.json"))
    if limit:
        scene_files = scene_files[:limit]

    rows: list[dict] = []
    for i, scene_path in enumerate(scene_files):
        case_id = f"case_{i:04d}_{scene_path.stem}"
        source = str(scene_path.relative_to(root)) if root in scene_path.parents else str(scene_path)
        t0 = time.perf_counter()
        try:
            scene = load_scene(scene_path)
        except ValueError as exc:
            logger.warning("Skipping %s: %s", scene_path.name, exc)
            rows.append(_error_row(case_id, source, SCENE_INVALID, t0))
            continue

        case_dir = cases_dir / case_id
        case_dir.mkdir(parents=True, exist_ok=True)
        try:
            layout = run_tag_layout(scene.container, scene.elements, tags_cfg)
            measurements = run_measurements(
                scene.container, [e.bounds for e in scene.elements], scene.layout, spacings_cfg,
            )
        except Exception:
            logger.exception("Run failed for %s", scene_path.name)
            rows.append(_error_row(case_id, source, RUN_FAILED, t0))
            continue
        duration_ms = int((time.perf_counter() - t0) * 1000)

        write_tags_json(case_dir, layout)
        write_measurements_json(case_dir, measurements)
        write_run_metadata_json(case_dir, run_name, source, tags_cfg, spacings_cfg)
        if render:
            from tagspacings.core.render import render_debug
            render_debug(scene.container, scene.elements, layout, measurements, case_dir / "debug.png")

        rows.append({
            "case_id": case_id,
            "scene_source": source,
            "status": OK if scene.elements else NO_ELEMENTS,
            "n_elements": len(scene.elements),
            "n_tags": len(layout.placements),
            "residual_overlaps": layout.residual_overlaps,
            "n_gaps": len(measurements.gaps),
            "paddings_reported": len(measurements.paddings.reported()) if measurements.paddings else 0,
            "duration_ms": duration_ms,
        })

    index_path = report_dir / "index.csv"
    with open(index_path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=INDEX_FIELDS)
        w.writeheader()
        w.writerows(rows)
    logger.info("Batch %s: %d case(s) -> %s", run_name, len(rows), index_path)
    return report_dir
