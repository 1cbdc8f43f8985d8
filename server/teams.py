"""
Teams list API route.

This module reads the exhibiting teams from the first worksheet of a Google
Sheet using a service account. The route never fails: a missing
configuration or any upstream error yields an empty list.

Author: Matthew Picone (mail@matthewpicone.com)
Date: 2026-01-14
"""

import asyncio
import logging
import os
from typing import Any, Dict, List, Mapping

import gspread
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from google.oauth2.service_account import Credentials

logger = logging.getLogger(__name__)

router = APIRouter()

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
TOKEN_URI = "https://oauth2.googleapis.com/token"

# Team field -> accepted sheet headers, first non-empty wins
TEAM_COLUMNS = {
    "teamCode": ("Team Code", "team code"),
    "judul": ("Judul", "judul"),
    "description": ("Description", "description"),
    "logo": ("Logo", "logo"),
}


def row_to_team(row: Mapping[str, Any]) -> Dict[str, str]:
    """Map a worksheet record to a team dictionary.

    Args:
        row: Record keyed by sheet header.

    Returns:
        Team dictionary with teamCode, judul, description and logo.
    """
    team = {}
    for field, headers in TEAM_COLUMNS.items():
        value = next((row.get(h) for h in headers if row.get(h) not in (None, "")), "")
        team[field] = str(value)
    return team


def _read_sheet(email: str, private_key: str, sheet_id: str) -> List[Dict[str, Any]]:
    credentials = Credentials.from_service_account_info(
        {
            "client_email": email,
            "private_key": private_key.replace("\\n", "\n"),
            "token_uri": TOKEN_URI,
        },
        scopes=SCOPES,
    )
    client = gspread.authorize(credentials)
    worksheet = client.open_by_key(sheet_id).get_worksheet(0)
    return worksheet.get_all_records()


async def get_teams() -> List[Dict[str, str]]:
    """Fetch the teams list from the configured spreadsheet.

    Returns:
        List of team dictionaries, empty when unconfigured or on any error.
    """
    email = os.getenv("GOOGLE_SERVICE_ACCOUNT_EMAIL")
    private_key = os.getenv("GOOGLE_PRIVATE_KEY")
    sheet_id = os.getenv("GOOGLE_SHEET_ID")

    if not email or not private_key or not sheet_id:
        logger.warning("Google Sheets environment variables are missing. Returning empty list.")
        return []

    try:
        rows = await asyncio.to_thread(_read_sheet, email, private_key, sheet_id)
    except Exception as e:
        logger.error("Error fetching data from Google Sheets: %s", e)
        return []

    return [row_to_team(row) for row in rows]


@router.get("/api/teams")
async def list_teams():
    """Get the exhibiting teams.

    Returns:
        JSON array of teams, never cached.
    """
    teams = await get_teams()
    return JSONResponse(teams, headers={"Cache-Control": "no-store"})
