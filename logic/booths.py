"""
Booth aggregation module.

This module groups raw point annotations by booth code, averages their
normalized points into one center per booth, and attaches category colour and
description metadata.

Author: Matthew Picone (mail@matthewpicone.com)
Date: 2026-01-09
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from logic.geometry import (
    DEFAULT_VIEW_HEIGHT,
    DEFAULT_VIEW_WIDTH,
    InvalidPointError,
    normalize_point,
)

logger = logging.getLogger(__name__)

FALLBACK_COLOR = "#FFFFFF"
FALLBACK_DESCRIPTION = "Booth"


def select_points(annotation: Mapping[str, Any]) -> List[Any]:
    """Pick the point list to use for an annotation.

    Percent points win when present and non-empty, otherwise pixel points.

    Args:
        annotation: Raw annotation dictionary.

    Returns:
        List of raw points, empty if the annotation has none.
    """
    points = annotation.get("pointsPercent")
    if not points:
        points = annotation.get("points")
    if not points or not isinstance(points, (list, tuple)):
        return []
    return list(points)


def category_lookup(
        categories: Iterable[Mapping[str, Any]], code: str
) -> Optional[Mapping[str, Any]]:
    """Find the category entry for a booth code.

    Args:
        categories: Category entries with "code", "color" and "label".
        code: Booth code, e.g. "A-01", or a bare category letter.

    Returns:
        Matching category entry or None.
    """
    letter = code[:1]
    return next((c for c in categories if c.get("code") == letter), None)


def aggregate_booths(
        annotations: Iterable[Any],
        categories: Sequence[Mapping[str, Any]],
        descriptions: Mapping[str, Mapping[str, str]],
        view_width: float = DEFAULT_VIEW_WIDTH,
        view_height: float = DEFAULT_VIEW_HEIGHT,
        fallback_color: str = FALLBACK_COLOR,
) -> List[Dict[str, Any]]:
    """Build the booth list from raw annotations.

    Every annotation contributes its normalized points to the running sum of
    its booth code. A booth's center is the mean of all contributed points.
    Malformed points and annotations are logged and skipped; this function
    does not raise for bad input.

    Args:
        annotations: Raw annotations with "code", "points" and "pointsPercent".
        categories: Category table.
        descriptions: Mapping of booth code to {"title", "description"}.
        view_width: Canvas width used for percent points.
        view_height: Canvas height used for percent points.
        fallback_color: Colour for codes with no matching category.

    Returns:
        List of booth dictionaries, in order of first appearance of each code.
    """
    centers: Dict[str, Dict[str, float]] = {}

    for index, annotation in enumerate(annotations or []):
        if not isinstance(annotation, Mapping):
            logger.warning("Skipping annotation %d: not an object", index)
            continue

        code = str(annotation.get("code") or "").strip()
        if not code:
            logger.warning("Skipping annotation %d: missing booth code", index)
            continue

        for point in select_points(annotation):
            try:
                x, y = normalize_point(point, view_width, view_height)
            except InvalidPointError as e:
                logger.warning("Skipping point for booth %s: %s", code, e)
                continue

            # A code only exists here once it has a point, so count >= 1
            acc = centers.setdefault(code, {"x": 0.0, "y": 0.0, "count": 0})
            acc["x"] += x
            acc["y"] += y
            acc["count"] += 1

    booths = []
    for code, acc in centers.items():
        category = category_lookup(categories, code)
        desc = descriptions.get(code) or {
            "title": code,
            "description": FALLBACK_DESCRIPTION,
        }
        booths.append(
            {
                "code": code,
                "title": desc.get("title", code),
                "description": desc.get("description", FALLBACK_DESCRIPTION),
                "category": code[0],
                "color": category.get("color", fallback_color) if category else fallback_color,
                "center_x": acc["x"] / acc["count"],
                "center_y": acc["y"] / acc["count"],
            }
        )

    logger.debug("Aggregated %d booths", len(booths))
    return booths


def filter_by_category(
        booths: List[Dict[str, Any]], category: Optional[str]
) -> List[Dict[str, Any]]:
    """Filter booths by category letter; None keeps every booth."""
    if not category:
        return list(booths)
    return [b for b in booths if b.get("category") == category]


def find_booth(booths: List[Dict[str, Any]], code: str) -> Optional[Dict[str, Any]]:
    """Find a booth by its code."""
    return next((b for b in booths if b.get("code") == code), None)
