# tagspacings/core/runner.py
"""
CLI entrypoint: load a scene, place tags, derive measurements, write reports.
Batch mode runs every scene file in a directory.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

from tagspacings.core.config import (
    DEFAULT_DIRECTION,
    DEFAULT_INDEX_SCHEME,
    DEFAULT_ROOT_SIZE,
    DEFAULT_START_SYMBOL,
    DEFAULT_UNITS,
    REPORTS_DIR,
)
from tagspacings.core.error_codes import NO_ELEMENTS, user_message
from tagspacings.core.io import load_scene
from tagspacings.core.layout import run_tag_layout
from tagspacings.core.reporting import (
    ensure_report_dir,
    write_measurements_json,
    write_run_metadata_json,
    write_tags_json,
)
from tagspacings.core.spacing import run_measurements
from tagspacings.core.types import DIRECTIONS, SCHEMES, UNITS, SpacingsConfig, TagsConfig

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Tag placement and spacing measurements for a container.")
    p.add_argument("--scene", type=str, default=None, help="Scene JSON path (repo-relative)")
    p.add_argument("--direction", type=str, default=DEFAULT_DIRECTION, choices=DIRECTIONS + ("auto",), help="Tag direction")
    p.add_argument("--scheme", type=str, default=DEFAULT_INDEX_SCHEME, choices=SCHEMES, help="Index scheme")
    p.add_argument("--start", type=str, default=DEFAULT_START_SYMBOL, help="First index symbol")
    p.add_argument("--units", type=str, default=DEFAULT_UNITS, choices=UNITS, help="Measurement units")
    p.add_argument("--root-size", type=float, default=DEFAULT_ROOT_SIZE, dest="root_size", help="Root font size for rem")
    p.add_argument("--no-size", action="store_false", dest="include_size", help="Skip container size labels")
    p.add_argument("--no-paddings", action="store_false", dest="include_paddings", help="Skip paddings")
    p.add_argument("--no-spacing", action="store_false", dest="include_item_spacing", help="Skip gaps")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--no-render", action="store_false", dest="render", help="Skip debug.png")
    p.add_argument("--batch-dir", type=str, default=None, dest="batch_dir", help="Batch mode: directory of scene .json files")
    p.add_argument("--batch-limit", type=int, default=None, dest="batch_limit", help="Max cases in batch")
    return p.parse_args(argv)


def _configure_logging() -> None:
    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    _configure_logging()
    args = _parse_args(argv)
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    tags_config = TagsConfig(
        direction=args.direction,
        index_scheme=args.scheme,
        start_symbol=args.start,
    )
    spacings_config = SpacingsConfig(
        include_size=args.include_size,
        include_paddings=args.include_paddings,
        include_item_spacing=args.include_item_spacing,
        units=args.units,
        root_size=args.root_size,
    )

    if args.batch_dir:
        from tagspacings.core.batch import run_batch
        batch_dir = Path(args.batch_dir)
        if not batch_dir.is_absolute():
            batch_dir = repo_root / batch_dir
        out = run_batch(
            run_name=args.run_name,
            batch_dir=batch_dir,
            tags_config=tags_config,
            spacings_config=spacings_config,
            limit=args.batch_limit,
            repo_root=repo_root,
            output_dir=args.output_dir,
            render=args.render,
        )
        print(out / "index.csv")
        return

    if not args.scene:
        raise SystemExit("--scene or --batch-dir is required")

    scene = load_scene(args.scene, repo_root=repo_root)
    if not scene.elements:
        logger.warning(user_message(NO_ELEMENTS))

    layout = run_tag_layout(scene.container, scene.elements, tags_config)
    measurements = run_measurements(
        scene.container,
        [e.bounds for e in scene.elements],
        scene.layout,
        spacings_config,
    )

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    paths = [
        write_tags_json(report_dir, layout),
        write_measurements_json(report_dir, measurements),
        write_run_metadata_json(report_dir, args.run_name, args.scene, tags_config, spacings_config),
    ]
    if args.render:
        from tagspacings.core.render import render_debug
        debug_path = report_dir / "debug.png"
        render_debug(scene.container, scene.elements, layout, measurements, debug_path)
        paths.append(debug_path)

    for p in paths:
        print(p)
    print("Tags placed:", len(layout.placements), "residual overlaps:", layout.residual_overlaps)


if __name__ == "__main__":
    main()
