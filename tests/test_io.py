# tests/test_io.py
"""
Scene loading: bounds parsing, layout metadata, element ordinals, error cases.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tagspacings.core.io import load_scene, parse_layout, parse_scene, scene_to_dict
from tagspacings.core.types import EdgeInsets, ExplicitLayout, InferredLayout


def _scene_dict() -> dict:
    return {
        "container": {"x": 0, "y": 0, "width": 200, "height": 100},
        "layout": {"padding": 8, "item_spacing": 4, "axis": "horizontal"},
        "elements": [
            {"name": "Icon", "bounds": {"x": 10, "y": 10, "width": 20, "height": 20}, "is_icon": True},
            {"name": "Label", "x": 40, "y": 10, "width": 60, "height": 20, "style_name": "Body", "font_size": 14},
        ],
    }


def test_parse_scene_elements_in_file_order() -> None:
    scene = parse_scene(_scene_dict(), source="inline")
    assert scene.source == "inline"
    assert scene.container.center_x == 100
    assert [e.ordinal for e in scene.elements] == [0, 1]
    assert scene.elements[0].bounds.width == 20
    assert scene.elements[0].meta is not None and scene.elements[0].meta.is_icon
    assert scene.elements[1].bounds.x == 40
    assert scene.elements[1].meta.font_size == 14.0


def test_parse_scene_without_meta() -> None:
    data = {"container": {"width": 10, "height": 10}, "elements": [{"width": 1, "height": 1}]}
    scene = parse_scene(data)
    assert scene.elements[0].meta is None
    assert scene.elements[0].name == "element 1"
    assert isinstance(scene.layout, InferredLayout)


def test_parse_layout_variants() -> None:
    assert isinstance(parse_layout(None), InferredLayout)
    assert isinstance(parse_layout({"axis": "vertical"}), InferredLayout)
    uniform = parse_layout({"padding": 8})
    assert isinstance(uniform, ExplicitLayout)
    assert uniform.insets == EdgeInsets(8, 8, 8, 8)
    sides = parse_layout({"padding": {"top": 4, "left": 12}, "item_spacing": 6, "axis": "vertical"})
    assert sides.insets == EdgeInsets(top=4, right=0, bottom=0, left=12)
    assert sides.item_spacing == 6 and sides.axis == "vertical"


def test_parse_layout_rejects_bad_axis() -> None:
    with pytest.raises(ValueError):
        parse_layout({"item_spacing": 4, "axis": "diagonal"})


def test_negative_size_rejected() -> None:
    data = {"container": {"x": 0, "y": 0, "width": -1, "height": 10}, "elements": []}
    with pytest.raises(ValueError):
        parse_scene(data)


def test_missing_container_rejected() -> None:
    with pytest.raises(ValueError):
        parse_scene({"elements": []})


def test_non_numeric_bound_rejected() -> None:
    data = {"container": {"width": "wide", "height": 10}}
    with pytest.raises(ValueError):
        parse_scene(data)


def test_load_scene_from_file(tmp_path: Path) -> None:
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(_scene_dict()), encoding="utf-8")
    scene = load_scene("scene.json", repo_root=tmp_path)
    assert len(scene.elements) == 2
    assert scene.source == "scene.json"


def test_load_scene_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_scene(tmp_path / "nope.json")


def test_load_scene_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_scene(path)


def test_scene_to_dict_reloads_equal() -> None:
    scene = parse_scene(_scene_dict())
    again = parse_scene(scene_to_dict(scene))
    assert again.container == scene.container
    assert again.elements == scene.elements
    assert again.layout == scene.layout


@pytest.mark.parametrize("font_size", [[12], "14px", True])
def test_non_numeric_font_size_rejected(font_size: object) -> None:
    data = _scene_dict()
    data["elements"][1]["font_size"] = font_size
    with pytest.raises(ValueError, match=r"elements\[1\]"):
        parse_scene(data)


@pytest.mark.parametrize("is_icon", ["false", 1, None])
def test_non_bool_is_icon_rejected(is_icon: object) -> None:
    data = _scene_dict()
    data["elements"][0]["is_icon"] = is_icon
    with pytest.raises(ValueError, match=r"elements\[0\]"):
        parse_scene(data)


def test_is_icon_false_keeps_text_element() -> None:
    data = _scene_dict()
    data["elements"][0]["is_icon"] = False
    scene = parse_scene(data)
    assert scene.elements[0].meta is not None
    assert scene.elements[0].meta.is_icon is False
