#!/usr/bin/env python3
"""
Generate synthetic scene JSON files for batch runs of the tag/spacing engine.

Categories:
1-10:   Horizontal rows (toolbar / button group), inferred layout
11-20:  Vertical stacks (list / form), explicit auto-layout padding + spacing
21-30:  Scattered elements (cards with badges, icons in corners)
31-35:  Dense clusters (stacked elements sharing a midpoint; collision sweep)
36-40:  Edge cases (empty container, single element, flush children)
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import numpy as np

from tagspacings.core.geometry import container_from_bounds
from tagspacings.core.io import scene_to_dict
from tagspacings.core.types import (
    Bounds,
    EdgeInsets,
    Element,
    ElementMeta,
    ExplicitLayout,
    InferredLayout,
    Scene,
)

DEFAULT_OUTPUT_DIR = Path(__file__).parent.parent / "docs" / "assets" / "test_scenes"

NAMES = ["Icon", "Label", "Button", "Avatar", "Badge", "Divider", "Input", "Chip"]


def save_scene(output_dir: Path, filename: str, scene: Scene) -> None:
    path = output_dir / filename
    path.write_text(json.dumps(scene_to_dict(scene), indent=2, ensure_ascii=False), encoding="utf-8")
    print(f"Created: {path.name}")


def _element(rng: np.random.Generator, ordinal: int, x: float, y: float, w: float, h: float) -> Element:
    name = NAMES[int(rng.integers(0, len(NAMES)))]
    meta = None
    if name == "Label":
        meta = ElementMeta(style_name="Body/Medium", font_family="Inter", font_style="Regular", font_size=14.0)
    elif name == "Icon":
        meta = ElementMeta(is_icon=True)
    return Element(bounds=Bounds(x=round(x, 2), y=round(y, 2), width=round(w, 2), height=round(h, 2)), name=name, ordinal=ordinal, meta=meta)


def generate_row(seed: int, n: int) -> Scene:
    """Horizontal row with random gaps; no layout metadata."""
    rng = np.random.default_rng(seed)
    pad = float(rng.uniform(8, 24))
    item_height = 32.0
    x = pad
    right = pad
    elements = []
    for i in range(n):
        w = float(rng.uniform(24, 96))
        elements.append(_element(rng, i, x, pad, w, item_height))
        right = x + w
        x = right + float(rng.uniform(4, 16))
    container = container_from_bounds(Bounds(0, 0, right + pad, item_height + 2 * pad))
    return Scene(container=container, elements=elements, layout=InferredLayout())


def generate_stack(seed: int, n: int) -> Scene:
    """Vertical stack with explicit padding and item spacing."""
    rng = np.random.default_rng(seed)
    pad = float(rng.choice([8.0, 12.0, 16.0, 24.0]))
    spacing = float(rng.choice([4.0, 8.0, 12.0]))
    width = float(rng.uniform(160, 320))
    y = pad
    elements = []
    for i in range(n):
        h = float(rng.uniform(20, 48))
        elements.append(_element(rng, i, pad, y, width - 2 * pad, h))
        y += h + spacing
    container = container_from_bounds(Bounds(0, 0, width, y - spacing + pad))
    layout = ExplicitLayout(insets=EdgeInsets(pad, pad, pad, pad), item_spacing=spacing, axis="vertical")
    return Scene(container=container, elements=elements, layout=layout)


def generate_scatter(seed: int, n: int) -> Scene:
    """Elements scattered uniformly inside a card."""
    rng = np.random.default_rng(seed)
    width, height = float(rng.uniform(200, 400)), float(rng.uniform(120, 300))
    elements = []
    for i in range(n):
        w, h = float(rng.uniform(12, 48)), float(rng.uniform(12, 32))
        x, y = float(rng.uniform(0, width - w)), float(rng.uniform(0, height - h))
        elements.append(_element(rng, i, x, y, w, h))
    container = container_from_bounds(Bounds(0, 0, width, height))
    return Scene(container=container, elements=elements, layout=InferredLayout())


def generate_cluster(seed: int, n: int) -> Scene:
    """Elements stacked on one vertical line so top tags collide."""
    rng = np.random.default_rng(seed)
    width, height = 240.0, float(40 * n + 40)
    mid = float(rng.uniform(80, 160))
    elements = [_element(rng, i, mid - 10, 20 + 40 * i, 20, 20) for i in range(n)]
    container = container_from_bounds(Bounds(0, 0, width, height))
    return Scene(container=container, elements=elements, layout=InferredLayout())


def main() -> None:
    p = argparse.ArgumentParser(description="Generate synthetic scene files.")
    p.add_argument("--output-dir", type=str, default=str(DEFAULT_OUTPUT_DIR), dest="output_dir")
    args = p.parse_args()
    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    file_num = 1
    print("\n[1-10] Rows...")
    for i in range(10):
        save_scene(output_dir, f"scene_{file_num:03d}_row.json", generate_row(seed=1000 + i, n=2 + i))
        file_num += 1

    print("\n[11-20] Stacks...")
    for i in range(10):
        save_scene(output_dir, f"scene_{file_num:03d}_stack.json", generate_stack(seed=2000 + i, n=2 + i))
        file_num += 1

    print("\n[21-30] Scattered...")
    for i in range(10):
        save_scene(output_dir, f"scene_{file_num:03d}_scatter.json", generate_scatter(seed=3000 + i, n=3 + 3 * i))
        file_num += 1

    print("\n[31-35] Clusters...")
    for i in range(5):
        save_scene(output_dir, f"scene_{file_num:03d}_cluster.json", generate_cluster(seed=4000 + i, n=2 + i))
        file_num += 1

    print("\n[36-40] Edge cases...")
    empty = Scene(container=container_from_bounds(Bounds(0, 0, 200, 100)), elements=[])
    save_scene(output_dir, f"scene_{file_num:03d}_empty.json", empty)
    file_num += 1
    single = Scene(
        container=container_from_bounds(Bounds(0, 0, 200, 100)),
        elements=[Element(bounds=Bounds(90, 40, 20, 20), name="Button", ordinal=0)],
    )
    save_scene(output_dir, f"scene_{file_num:03d}_single.json", single)
    file_num += 1
    flush = Scene(
        container=container_from_bounds(Bounds(0, 0, 120, 40)),
        elements=[
            Element(bounds=Bounds(0, 0, 60, 40), name="Left", ordinal=0),
            Element(bounds=Bounds(60, 0, 60, 40), name="Right", ordinal=1),
        ],
    )
    save_scene(output_dir, f"scene_{file_num:03d}_flush.json", flush)
    file_num += 1
    for i in range(2):
        save_scene(output_dir, f"scene_{file_num:03d}_large.json", generate_scatter(seed=5000 + i, n=60 + 20 * i))
        file_num += 1

    print("\n" + "=" * 50)
    print(f"Generated {file_num - 1} scene files in {output_dir}")


if __name__ == "__main__":
    main()
