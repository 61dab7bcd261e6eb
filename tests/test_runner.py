# tests/test_runner.py
"""
CLI smoke: single-scene run writes tags.json, measurements.json and run_metadata.json.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tagspacings.core.runner import main


def _scene(path: Path) -> None:
    path.write_text(json.dumps({
        "container": {"x": 0, "y": 0, "width": 200, "height": 100},
        "layout": {"padding": 8, "item_spacing": 4},
        "elements": [
            {"name": "A", "x": 8, "y": 8, "width": 20, "height": 20},
            {"name": "B", "x": 32, "y": 8, "width": 20, "height": 20},
        ],
    }), encoding="utf-8")


def test_cli_single_scene(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _scene(tmp_path / "scene.json")
    main([
        "--scene", "scene.json",
        "--repo-root", str(tmp_path),
        "--run-name", "cli",
        "--scheme", "numeric",
        "--start", "1",
        "--no-render",
    ])
    report_dir = tmp_path / "reports" / "cli"
    tags = json.loads((report_dir / "tags.json").read_text(encoding="utf-8"))
    assert [t["index"] for t in tags["tags"]] == ["1", "2"]
    meas = json.loads((report_dir / "measurements.json").read_text(encoding="utf-8"))
    assert meas["paddings"]["top"]["size"] == 8
    assert [g["size"] for g in meas["gaps"]] == [4]
    assert (report_dir / "run_metadata.json").exists()
    assert not (report_dir / "debug.png").exists()
    assert "tags.json" in capsys.readouterr().out


def test_cli_requires_scene_or_batch(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--repo-root", str(tmp_path), "--no-render"])


def test_cli_rejects_unknown_direction() -> None:
    with pytest.raises(SystemExit):
        main(["--scene", "x.json", "--direction", "diagonal"])
