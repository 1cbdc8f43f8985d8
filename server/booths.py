"""
Booth map API routes.

This module loads the raw booth position list, aggregates it into booths,
and serves booth lists, booth details and hit-test queries.

Author: Matthew Picone (mail@matthewpicone.com)
Date: 2026-01-12
"""

import asyncio
import json
import logging
import os
from typing import Any, Dict, List, Optional

import aiohttp
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from logic.booths import aggregate_booths, category_lookup, filter_by_category, find_booth
from logic.config import (
    BASE_DIR,
    default_booth_positions,
    freeze_categories,
    freeze_descriptions,
    load_config,
)
from logic.geometry import client_to_canvas
from logic.hit_test import cursor_style, hit_test

logger = logging.getLogger(__name__)

router = APIRouter()

BOOTH_POSITIONS_URL = os.getenv("BOOTH_POSITIONS_URL")
BOOTH_POSITIONS_PATH = os.getenv(
    "BOOTH_POSITIONS_PATH", os.path.join(BASE_DIR, "static", "booth-positions.json")
)
FETCH_TIMEOUT_SECONDS = 10


class ReloadResponse(BaseModel):
    """Response model for a booth reload."""

    applied: bool
    generation: int
    count: int


def _read_positions_file(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


async def _fetch_positions_url(url: str) -> Any:
    timeout = aiohttp.ClientTimeout(total=FETCH_TIMEOUT_SECONDS)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        async with session.get(url) as resp:
            if resp.status != 200:
                raise RuntimeError(f"HTTP {resp.status} from {url}")
            return await resp.json(content_type=None)


async def fetch_annotations(
        url: Optional[str] = BOOTH_POSITIONS_URL, path: str = BOOTH_POSITIONS_PATH
) -> List[Dict[str, Any]]:
    """Load the raw booth annotation list.

    Tries the configured URL, otherwise the local JSON file. Any failure, or
    a result that is not a non-empty list, falls back to the embedded list.

    Args:
        url: Remote booth-positions JSON URL, if any.
        path: Local booth-positions JSON path.

    Returns:
        List of raw annotations.
    """
    source = url or path
    try:
        if url:
            data = await _fetch_positions_url(url)
        else:
            data = await asyncio.to_thread(_read_positions_file, path)
    except FileNotFoundError:
        logger.info("No booth positions at %s, using embedded list", path)
        return default_booth_positions()
    except (aiohttp.ClientError, asyncio.TimeoutError, RuntimeError, ValueError, OSError) as e:
        logger.warning("Failed to load booth positions from %s: %s", source, e)
        return default_booth_positions()

    if isinstance(data, list) and data:
        return data

    logger.warning("Booth positions from %s are empty or not a list, using embedded list", source)
    return default_booth_positions()


class BoothStore:
    """Current booth list plus a load generation counter.

    Each load takes a token from begin_load(). Only the latest token may
    commit, so a slow superseded load cannot overwrite a newer result.
    Readers waiting for the first load share the latest in-flight load task.
    """

    def __init__(self):
        self.booths: List[Dict[str, Any]] = []
        self.generation = 0
        self._latest_token = 0
        self._loaded = False
        self._pending: Optional[asyncio.Future] = None

    def begin_load(self) -> int:
        self._latest_token += 1
        return self._latest_token

    def commit(self, token: int, booths: List[Dict[str, Any]]) -> bool:
        """Store a load result if it is still the latest.

        Args:
            token: Token returned by begin_load().
            booths: Aggregated booth list.

        Returns:
            True if the result was applied, False if it was stale.
        """
        if token != self._latest_token:
            logger.info("Discarding stale booth load %d (latest %d)", token, self._latest_token)
            return False
        self.booths = booths
        self.generation = token
        self._loaded = True
        return True

    def _start_load(self) -> asyncio.Future:
        token = self.begin_load()
        self._pending = asyncio.ensure_future(self._load(token))
        return self._pending

    async def reload(self) -> bool:
        """Fetch annotations and rebuild the booth list.

        Returns:
            True if this load was applied, False if a newer load superseded it.
        """
        return await asyncio.shield(self._start_load())

    async def get_booths(self) -> List[Dict[str, Any]]:
        """Get the booth list, waiting for the first applied load if needed."""
        while not self._loaded:
            task = self._pending
            if task is None or task.done():
                task = self._start_load()
            await asyncio.shield(task)
        return self.booths

    async def _load(self, token: int) -> bool:
        annotations = await fetch_annotations()
        config = load_config()
        booths = aggregate_booths(
            annotations,
            freeze_categories(config),
            freeze_descriptions(config),
            config["view_width"],
            config["view_height"],
            config["fallback_color"],
        )
        return self.commit(token, booths)


store = BoothStore()


@router.get("/api/exhibit")
def get_exhibit():
    """Get canvas settings for the map.

    Returns:
        Dictionary with canvas size and hit radius.
    """
    config = load_config()
    return {
        "view_width": config["view_width"],
        "view_height": config["view_height"],
        "hit_radius": config["hit_radius"],
    }


@router.get("/api/categories")
def get_categories():
    """Get the category table for the filter buttons."""
    return load_config()["categories"]


@router.get("/api/booths")
async def get_booths(category: Optional[str] = None):
    """Get all booths, optionally filtered by category letter.

    Args:
        category: Category letter, e.g. "A". Omit for all booths.

    Returns:
        Dictionary with the booth list and its total count.
    """
    booths = await store.get_booths()
    filtered = filter_by_category(booths, category)
    return {"total": len(booths), "booths": filtered}


@router.get("/api/booths/hit")
async def hit_booth(
        x: float,
        y: float,
        client_width: Optional[float] = None,
        client_height: Optional[float] = None,
):
    """Hit-test a pointer position against booth centers.

    When the displayed canvas size is supplied, x and y are taken as offsets
    within the displayed canvas and rescaled to canvas coordinates first.

    Args:
        x: Pointer X.
        y: Pointer Y.
        client_width: Displayed canvas width, if scaled.
        client_height: Displayed canvas height, if scaled.

    Returns:
        Dictionary with the matched booth (or None) and the cursor style.

    Raises:
        HTTPException: If the displayed canvas size is invalid.
    """
    config = load_config()

    if client_width is not None or client_height is not None:
        rect = {"left": 0, "top": 0, "width": client_width or 0, "height": client_height or 0}
        try:
            x, y = client_to_canvas(x, y, rect, config["view_width"], config["view_height"])
        except ValueError as e:
            raise HTTPException(400, str(e))

    booths = await store.get_booths()
    booth = hit_test(booths, x, y, config["hit_radius"])
    return {
        "x": x,
        "y": y,
        "booth": booth,
        "cursor": cursor_style(booth),
    }


@router.get("/api/booths/{code}")
async def get_booth(code: str):
    """Get a single booth with its category label.

    Raises:
        HTTPException: If the booth code is unknown.
    """
    booths = await store.get_booths()
    booth = find_booth(booths, code)
    if not booth:
        raise HTTPException(404, f"Booth '{code}' not found")

    config = load_config()
    category = category_lookup(config["categories"], booth["code"])
    return {**booth, "category_label": category.get("label") if category else None}


@router.post("/api/booths/reload", response_model=ReloadResponse)
async def reload_booths():
    """Reload booth positions and rebuild the booth list."""
    applied = await store.reload()
    return ReloadResponse(applied=applied, generation=store.generation, count=len(store.booths))
