"""
Geometry normalization for booth annotations.

This module converts raw annotation points into canvas-pixel coordinates.
Raw points carry no unit: a point whose coordinates are both within
[-100, 100] is read as a percentage of the canvas, anything else as pixels
already in canvas space.

The percent/pixel split is a heuristic. A booth whose true pixel position is
at or below 100 on both axes is scaled as if it were a percentage. Annotation
data does not carry enough information to tell the two apart.

Author: Matthew Picone (mail@matthewpicone.com)
Date: 2026-01-09
"""

import math
from typing import Any, Dict, Mapping, Tuple

DEFAULT_VIEW_WIDTH = 600
DEFAULT_VIEW_HEIGHT = 500
PERCENT_LIMIT = 100


class InvalidPointError(ValueError):
    """Raised when a raw point coordinate is not a finite number."""


def parse_coordinate(value: Any) -> float:
    """Parse a single raw coordinate.

    Args:
        value: Coordinate as text ("36.79") or number.

    Returns:
        Coordinate as a float.

    Raises:
        InvalidPointError: If the value is not parseable as a finite number.
    """
    if value is None or isinstance(value, bool):
        raise InvalidPointError(f"Invalid coordinate: {value!r}")
    if isinstance(value, str):
        value = value.strip()
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidPointError(f"Invalid coordinate: {value!r}")
    if not math.isfinite(number):
        raise InvalidPointError(f"Invalid coordinate: {value!r}")
    return number


def is_percent_space(x: float, y: float) -> bool:
    """Check whether a point looks like percent-of-canvas coordinates."""
    return abs(x) <= PERCENT_LIMIT and abs(y) <= PERCENT_LIMIT


def normalize_point(
        point: Mapping[str, Any],
        view_width: float = DEFAULT_VIEW_WIDTH,
        view_height: float = DEFAULT_VIEW_HEIGHT,
) -> Tuple[float, float]:
    """Convert a raw point to canvas-pixel coordinates.

    Args:
        point: Mapping with "x" and "y" values (text or numbers).
        view_width: Canvas width in logical units.
        view_height: Canvas height in logical units.

    Returns:
        Tuple of (x, y) in canvas pixels.

    Raises:
        InvalidPointError: If the point is not a mapping or either coordinate
            is not a finite number.
    """
    if not isinstance(point, Mapping):
        raise InvalidPointError(f"Invalid point: {point!r}")

    x = parse_coordinate(point.get("x"))
    y = parse_coordinate(point.get("y"))

    if is_percent_space(x, y):
        return (x / 100) * view_width, (y / 100) * view_height

    # Pixel coordinates are assumed to match the canvas 1:1
    return x, y


def client_to_canvas(
        client_x: float,
        client_y: float,
        rect: Dict[str, float],
        canvas_width: float = DEFAULT_VIEW_WIDTH,
        canvas_height: float = DEFAULT_VIEW_HEIGHT,
) -> Tuple[float, float]:
    """Map a pointer position on the displayed canvas to canvas coordinates.

    The canvas is drawn at a fixed logical size and stretched by the page, so
    pointer positions must be rescaled before hit-testing.

    Args:
        client_x: Pointer X in client (page) coordinates.
        client_y: Pointer Y in client (page) coordinates.
        rect: Displayed canvas box with "left", "top", "width", "height".
        canvas_width: Logical canvas width.
        canvas_height: Logical canvas height.

    Returns:
        Tuple of (x, y) in canvas coordinates.

    Raises:
        ValueError: If the displayed canvas has no area.
    """
    width = rect.get("width", 0)
    height = rect.get("height", 0)
    if not width or not height:
        raise ValueError("Displayed canvas has zero size")

    scale_x = canvas_width / width
    scale_y = canvas_height / height
    x = (client_x - rect.get("left", 0)) * scale_x
    y = (client_y - rect.get("top", 0)) * scale_y
    return x, y
