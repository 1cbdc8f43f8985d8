"""
Map view state transitions.

Selection, category filter and cursor style belong to the caller. Each
function here takes the current state and returns a new state dictionary;
the input state is never modified.

Author: Matthew Picone (mail@matthewpicone.com)
Date: 2026-01-12
"""

from typing import Any, Dict, List, Optional

from logic.booths import filter_by_category, find_booth
from logic.hit_test import HIT_RADIUS, cursor_for, hit_test


def initial_state() -> Dict[str, Any]:
    """Get the starting view state: nothing selected, all categories shown."""
    return {
        "selected_code": None,
        "selected_category": None,
        "cursor": "default",
    }


def click(
        state: Dict[str, Any],
        booths: List[Dict[str, Any]],
        x: float,
        y: float,
        radius: float = HIT_RADIUS,
) -> Dict[str, Any]:
    """Apply a canvas click.

    A hit selects the booth. A miss leaves the current selection in place.

    Args:
        state: Current view state.
        booths: Current booth list.
        x: Click X in canvas coordinates.
        y: Click Y in canvas coordinates.
        radius: Hit radius.

    Returns:
        New view state.
    """
    booth = hit_test(booths, x, y, radius)
    if booth is None:
        return dict(state)
    return {**state, "selected_code": booth["code"]}


def hover(
        state: Dict[str, Any],
        booths: List[Dict[str, Any]],
        x: float,
        y: float,
        radius: float = HIT_RADIUS,
) -> Dict[str, Any]:
    """Apply a pointer move; only the cursor changes."""
    return {**state, "cursor": cursor_for(booths, x, y, radius)}


def select_booth(state: Dict[str, Any], code: str) -> Dict[str, Any]:
    """Select a booth directly, e.g. from the booth grid."""
    return {**state, "selected_code": code}


def clear_selection(state: Dict[str, Any]) -> Dict[str, Any]:
    return {**state, "selected_code": None}


def set_category(state: Dict[str, Any], category: Optional[str]) -> Dict[str, Any]:
    """Set the category filter; None shows all categories."""
    return {**state, "selected_category": category or None}


def visible_booths(
        state: Dict[str, Any], booths: List[Dict[str, Any]]
) -> List[Dict[str, Any]]:
    """Booths shown in the booth grid for the current filter."""
    return filter_by_category(booths, state.get("selected_category"))


def selected_booth(
        state: Dict[str, Any], booths: List[Dict[str, Any]]
) -> Optional[Dict[str, Any]]:
    """Resolve the selected code against the current booth list.

    Returns None when nothing is selected or the booth disappeared after a
    reload.
    """
    code = state.get("selected_code")
    if code is None:
        return None
    return find_booth(booths, code)
