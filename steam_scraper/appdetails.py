"""Fetch a single game from the official Steam Store `appdetails` endpoint.

The endpoint returns JSON keyed by the requested app id:
    {"620": {"success": true, "data": {...}}}
"""
import logging
from typing import Optional, Union

import requests

from .constants import PRICE_FREE, PRICE_NOT_FOR_SALE, STEAM_API_URL
from .models import GameInfo, SteamScraperError
from .utils import safe_get

logger = logging.getLogger(__name__)


def _format_price(data: dict) -> str:
    if data.get("is_free"):
        return PRICE_FREE
    price_overview = data.get("price_overview") or {}
    return price_overview.get("final_formatted") or PRICE_NOT_FOR_SALE


def parse_appdetails(payload, app_id: Union[str, int]) -> Optional[GameInfo]:
    """Map an appdetails response body to a GameInfo, or None if the app is not found."""
    if not isinstance(payload, dict):
        return None
    entry = payload.get(str(app_id))
    if not entry or not entry.get("success") or entry.get("data") is None:
        return None
    data = entry["data"]
    if "name" not in data:
        raise ValueError(f"appdetails payload for {app_id} has no 'name' field")
    release_date = data.get("release_date") or {}
    return GameInfo(
        title=data["name"],
        release=release_date.get("date") or "",
        price=_format_price(data),
        image=data.get("header_image") or "",
        # echo the requested id, not data["steam_appid"]
        appid=int(app_id),
    )


def get_game_by_id(
    app_id: Union[str, int],
    session: Optional[requests.Session] = None,
) -> Optional[GameInfo]:
    """Look up a game by its Steam app id.

    Returns None when Steam reports no such app.

    Raises:
        SteamScraperError: the request failed, or the response did not have
            the expected shape.
    """
    url = f"{STEAM_API_URL}{app_id}"
    try:
        resp = safe_get(url, session=session)
    except requests.RequestException as e:
        logger.warning(f"appdetails request for {app_id} failed: {e}")
        raise SteamScraperError(f"Steam API request failed: {e}", e) from e

    try:
        game = parse_appdetails(resp.json(), app_id)
    except Exception as e:
        logger.warning(f"Could not parse appdetails for {app_id}: {e}")
        raise SteamScraperError(f"Failed to fetch game by ID: {e}", e) from e

    if game is None:
        logger.debug(f"App {app_id} not found")
    return game
