# tests/test_batch_manifest.py
"""
Batch mode: temp directory with a few synthetic scene files; run batch and assert index.csv exists with rows.
"""

from __future__ import annotations

import csv
import json
import tempfile
from pathlib import Path

import pytest

from tagspacings.core.batch import INDEX_FIELDS, run_batch
from tagspacings.core.error_codes import NO_ELEMENTS, OK, SCENE_INVALID


def _write(path: Path, data: dict) -> None:
    path.write_text(json.dumps(data), encoding="utf-8")


def test_batch_from_dir_produces_index_csv() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        scene_dir = root / "scenes"
        scene_dir.mkdir()
        _write(scene_dir / "s1.json", {
            "container": {"x": 0, "y": 0, "width": 200, "height": 100},
            "elements": [
                {"name": "A", "x": 10, "y": 10, "width": 20, "height": 20},
                {"name": "B", "x": 170, "y": 10, "width": 20, "height": 20},
            ],
        })
        _write(scene_dir / "s2.json", {
            "container": {"x": 0, "y": 0, "width": 120, "height": 40},
            "elements": [],
        })
        (scene_dir / "s3.json").write_text("{broken", encoding="utf-8")

        report_dir = run_batch(run_name="test_batch", batch_dir=scene_dir, limit=5, repo_root=root)
        index_csv = report_dir / "index.csv"
        assert index_csv.exists()
        with open(index_csv, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            assert reader.fieldnames == INDEX_FIELDS
            rows = list(reader)
        assert [r["status"] for r in rows] == [OK, NO_ELEMENTS, SCENE_INVALID]
        assert rows[0]["n_tags"] == "2"
        assert rows[0]["scene_source"] == str(Path("scenes") / "s1.json")
        cases_dir = report_dir / "cases"
        assert cases_dir.is_dir()
        assert (cases_dir / rows[0]["case_id"] / "tags.json").exists()
        assert (cases_dir / rows[0]["case_id"] / "measurements.json").exists()


def test_batch_limit_and_empty_dir() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        scene_dir = root / "scenes"
        scene_dir.mkdir()
        empty_report = run_batch(run_name="empty", batch_dir=scene_dir, repo_root=root)
        lines = (empty_report / "index.csv").read_text(encoding="utf-8").strip().split("\n")
        assert lines == [",".join(INDEX_FIELDS)]

        for i in range(3):
            _write(scene_dir / f"s{i}.json", {"container": {"width": 50, "height": 50}, "elements": []})
        limited = run_batch(run_name="limited", batch_dir=scene_dir, limit=2, repo_root=root)
        lines = (limited / "index.csv").read_text(encoding="utf-8").strip().split("\n")
        assert len(lines) == 3  # header + 2 cases


def test_batch_missing_dir_raises(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        run_batch(run_name="x", batch_dir=tmp_path / "missing", repo_root=tmp_path)


def test_batch_bad_element_metadata_is_scene_invalid(tmp_path: Path) -> None:
    scene_dir = tmp_path / "scenes"
    scene_dir.mkdir()
    _write(scene_dir / "a.json", {
        "container": {"width": 100, "height": 50},
        "elements": [{"name": "T", "x": 0, "y": 0, "width": 5, "height": 5, "font_size": [12]}],
    })
    _write(scene_dir / "b.json", {
        "container": {"width": 100, "height": 50},
        "elements": [{"name": "B", "x": 10, "y": 10, "width": 20, "height": 20}],
    })
    report_dir = run_batch(run_name="bad_meta", batch_dir=scene_dir, repo_root=tmp_path)
    with open(report_dir / "index.csv", newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["status"] for r in rows] == [SCENE_INVALID, OK]
