"""
Exhibit configuration module.

This module loads the exhibit layout settings (canvas size, hit radius,
category table, booth descriptions) from exhibit.json, filling anything
missing from built-in defaults, and holds the embedded fallback booth
position list.

Author: Matthew Picone (mail@matthewpicone.com)
Date: 2025-12-17
"""

import json
import logging
import os
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from logic.geometry import DEFAULT_VIEW_HEIGHT, DEFAULT_VIEW_WIDTH
from logic.hit_test import HIT_RADIUS

logger = logging.getLogger(__name__)

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
EXHIBIT_PATH = os.getenv("EXHIBIT_CONFIG", os.path.join(BASE_DIR, "exhibit.json"))

DEFAULT_CATEGORIES = [
    {"code": "A", "color": "#FFD700", "label": "Smart Grid and Energy Management / SDG-7"},
    {"code": "B", "color": "#87CEEB", "label": "Wearable Health and Diagnosis / SDG-3"},
    {"code": "C", "color": "#90EE90", "label": "Public Safe and Culture / SDG-11"},
    {"code": "D", "color": "#DDA0DD", "label": "Smart Agriculture and Aquaculture / SDG-12"},
    {"code": "E", "color": "#FFB6C1", "label": "Climate and Waste Management / SDG-12"},
    {"code": "F", "color": "#FFD700", "label": "National Heritage and Conservation / SDG-15"},
]

DEFAULT_DESCRIPTIONS = {
    "A-01": {"title": "IoT for Monitoring", "description": "Real-time energy monitoring system"},
    "A-02": {"title": "Smart Pot", "description": "Intelligent plant monitoring device"},
    "B-01": {"title": "Health Monitor Band", "description": "Wearable vital signs tracker"},
    "C-01": {"title": "Safety Alert System", "description": "Emergency notification platform"},
    "D-01": {"title": "Crop Monitor System", "description": "IoT sensor network for crops"},
    "D-02": {
        "title": "H.A.R.V.E.S.T",
        "description": "Humidity-based And Regulation for Vegetation, Environment, Soil, and Temperature",
    },
    "E-01": {"title": "Air Quality Monitor", "description": "Real-time pollution monitoring"},
    "F-01": {"title": "Heritage Database", "description": "Digital archive of artifacts"},
}

# Used when booth-positions.json cannot be loaded
DEFAULT_BOOTH_POSITIONS = [
    {
        "code": "C-01",
        "type": "rect",
        "rotation": 0,
        "points": [{"x": "74.76", "y": "96.20"}, {"x": "74.76", "y": "96.20"}],
        "pointsPercent": [{"x": "12.46", "y": "19.24"}, {"x": "12.46", "y": "19.24"}],
    },
    {
        "code": "A-01",
        "type": "rect",
        "rotation": 0,
        "points": [{"x": "220.76", "y": "101.03"}, {"x": "241.76", "y": "125.03"}],
        "pointsPercent": [{"x": "36.79", "y": "20.21"}, {"x": "40.29", "y": "25.01"}],
    },
    {
        "code": "B-01",
        "type": "rect",
        "rotation": 0,
        "points": [{"x": "148.76", "y": "102.20"}, {"x": "169.76", "y": "127.20"}],
        "pointsPercent": [{"x": "24.79", "y": "20.44"}, {"x": "28.29", "y": "25.44"}],
    },
    {
        "code": "D-01",
        "type": "rect",
        "rotation": 0,
        "points": [{"x": "104.76", "y": "256.03"}, {"x": "125.76", "y": "285.03"}],
        "pointsPercent": [{"x": "17.46", "y": "51.21"}, {"x": "20.96", "y": "57.01"}],
    },
    {
        "code": "E-01",
        "type": "rect",
        "rotation": 0,
        "points": [{"x": "224.76", "y": "282.20"}, {"x": "247.76", "y": "310.20"}],
        "pointsPercent": [{"x": "37.46", "y": "56.44"}, {"x": "41.29", "y": "62.04"}],
    },
    {
        "code": "F-01",
        "type": "rect",
        "rotation": 0,
        "points": [{"x": "308.76", "y": "384.20"}, {"x": "332.76", "y": "412.20"}],
        "pointsPercent": [{"x": "51.46", "y": "76.84"}, {"x": "55.46", "y": "82.44"}],
    },
]


def load_config(path: str = EXHIBIT_PATH) -> Dict[str, Any]:
    """Load exhibit configuration from JSON.

    Args:
        path: Path to the exhibit JSON file.

    Returns:
        Configuration dictionary with all required fields ensured.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except FileNotFoundError:
        config = get_default_config()
    except json.JSONDecodeError as e:
        logger.warning("Invalid exhibit config %s, using defaults: %s", path, e)
        config = get_default_config()

    if not isinstance(config, dict):
        logger.warning("Exhibit config %s is not an object, using defaults", path)
        config = get_default_config()

    return ensure_config_fields(config)


def get_default_config() -> Dict[str, Any]:
    """Get default exhibit configuration.

    Returns:
        Default configuration dictionary.
    """
    return {
        "view_width": DEFAULT_VIEW_WIDTH,
        "view_height": DEFAULT_VIEW_HEIGHT,
        "hit_radius": HIT_RADIUS,
        "fallback_color": "#FFFFFF",
        "categories": [dict(c) for c in DEFAULT_CATEGORIES],
        "booth_descriptions": {k: dict(v) for k, v in DEFAULT_DESCRIPTIONS.items()},
    }


def ensure_config_fields(config: Dict[str, Any]) -> Dict[str, Any]:
    """Ensure all required fields are present and well-typed.

    Fields with the wrong type are replaced by their defaults, and malformed
    category or description entries are dropped, each with a warning.

    Args:
        config: Configuration dictionary to update.

    Returns:
        Updated configuration dictionary.
    """
    defaults = get_default_config()
    for key, default in defaults.items():
        config.setdefault(key, default)

    for key in ("view_width", "view_height", "hit_radius"):
        value = config[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            logger.warning("Invalid exhibit %s %r, using default", key, value)
            config[key] = defaults[key]

    if not isinstance(config["fallback_color"], str):
        logger.warning("Invalid exhibit fallback_color %r, using default", config["fallback_color"])
        config["fallback_color"] = defaults["fallback_color"]

    if not isinstance(config["categories"], list):
        logger.warning("Exhibit categories must be a list, using defaults")
        config["categories"] = defaults["categories"]
    elif not all(isinstance(c, dict) for c in config["categories"]):
        logger.warning("Dropping exhibit categories that are not objects")
        config["categories"] = [c for c in config["categories"] if isinstance(c, dict)]

    descriptions = config["booth_descriptions"]
    if not isinstance(descriptions, dict):
        logger.warning("Exhibit booth_descriptions must be an object, using defaults")
        config["booth_descriptions"] = defaults["booth_descriptions"]
    elif not all(isinstance(d, dict) for d in descriptions.values()):
        logger.warning("Dropping exhibit booth descriptions that are not objects")
        config["booth_descriptions"] = {k: d for k, d in descriptions.items() if isinstance(d, dict)}

    for category in config["categories"]:
        category.setdefault("code", "")
        category.setdefault("color", config["fallback_color"])
        category.setdefault("label", category["code"])

    return config


def freeze_categories(config: Dict[str, Any]) -> Tuple[Mapping[str, Any], ...]:
    """Get the category table as read-only entries."""
    return tuple(MappingProxyType(dict(c)) for c in config["categories"])


def freeze_descriptions(config: Dict[str, Any]) -> Mapping[str, Mapping[str, str]]:
    """Get the booth description table as a read-only mapping."""
    return MappingProxyType(
        {code: MappingProxyType(dict(desc)) for code, desc in config["booth_descriptions"].items()}
    )


def default_booth_positions() -> List[Dict[str, Any]]:
    """Get a fresh copy of the embedded booth position list."""
    return json.loads(json.dumps(DEFAULT_BOOTH_POSITIONS))
