"""
Tests for exhibit configuration loading.

Run with: python -m pytest tests/test_config.py
"""

import json

import pytest

from logic.config import (
    DEFAULT_BOOTH_POSITIONS,
    default_booth_positions,
    freeze_categories,
    freeze_descriptions,
    get_default_config,
    load_config,
)


def test_missing_file_uses_defaults(tmp_path):
    config = load_config(str(tmp_path / "missing.json"))
    assert config == get_default_config()
    assert config["view_width"] == 600
    assert config["view_height"] == 500
    assert config["hit_radius"] == 15
    assert [c["code"] for c in config["categories"]] == ["A", "B", "C", "D", "E", "F"]


def test_invalid_json_uses_defaults(tmp_path):
    path = tmp_path / "exhibit.json"
    path.write_text('{"view_width": 800,', encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_non_object_uses_defaults(tmp_path):
    path = tmp_path / "exhibit.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert load_config(str(path)) == get_default_config()


def test_partial_config_filled_in(tmp_path):
    path = tmp_path / "exhibit.json"
    path.write_text(
        json.dumps(
            {
                "view_width": 1200,
                "categories": [{"code": "G", "color": "#00FF00"}],
            }
        ),
        encoding="utf-8",
    )
    config = load_config(str(path))

    assert config["view_width"] == 1200
    assert config["view_height"] == 500
    assert config["fallback_color"] == "#FFFFFF"
    assert config["categories"] == [{"code": "G", "color": "#00FF00", "label": "G"}]
    assert "A-01" in config["booth_descriptions"]


def test_frozen_tables_are_read_only():
    config = get_default_config()
    categories = freeze_categories(config)
    descriptions = freeze_descriptions(config)

    assert isinstance(categories, tuple)
    assert categories[0]["code"] == "A"
    with pytest.raises(TypeError):
        categories[0]["color"] = "#000000"
    with pytest.raises(TypeError):
        descriptions["A-01"] = {"title": "x", "description": "y"}
    with pytest.raises(TypeError):
        descriptions["A-01"]["title"] = "x"


def test_default_booth_positions_is_a_copy():
    positions = default_booth_positions()
    positions[0]["code"] = "changed"
    positions[0]["points"].clear()
    assert DEFAULT_BOOTH_POSITIONS[0]["code"] == "C-01"
    assert len(DEFAULT_BOOTH_POSITIONS[0]["points"]) == 2


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"categories": "x"}, "categories"),
        ({"categories": None}, "categories"),
        ({"booth_descriptions": ["A-01"]}, "booth_descriptions"),
        ({"view_width": "wide"}, "view_width"),
        ({"view_height": 0}, "view_height"),
        ({"hit_radius": True}, "hit_radius"),
        ({"fallback_color": 255}, "fallback_color"),
    ],
)
def test_wrongly_typed_field_uses_default(tmp_path, overrides, field):
    path = tmp_path / "exhibit.json"
    path.write_text(json.dumps(overrides), encoding="utf-8")

    config = load_config(str(path))
    assert config[field] == get_default_config()[field]
    freeze_categories(config)
    freeze_descriptions(config)


def test_malformed_entries_dropped(tmp_path):
    path = tmp_path / "exhibit.json"
    path.write_text(
        json.dumps(
            {
                "categories": ["A", {"code": "B", "color": "#87CEEB"}, 3],
                "booth_descriptions": {
                    "A-01": "IoT for Monitoring",
                    "B-01": {"title": "Health Monitor Band", "description": "Wearable"},
                },
            }
        ),
        encoding="utf-8",
    )
    config = load_config(str(path))

    assert config["categories"] == [{"code": "B", "color": "#87CEEB", "label": "B"}]
    assert list(freeze_descriptions(config)) == ["B-01"]
