"""Find Steam games by name by scraping the store search results page.

Each result row (`.search_result_row`) is mapped to a `GameInfo`. Rows with
missing pieces are kept with empty defaults rather than dropped.
"""
import logging
import warnings
from typing import List, Optional
from urllib.parse import quote

import requests

from .constants import (
    APPID_ATTRIBUTE,
    DEFAULT_SEARCH_LIMIT,
    DISCOUNT_PRICE_SELECTOR,
    IMAGE_SELECTOR,
    PRICE_NOT_AVAILABLE,
    PRICE_SELECTOR,
    RELEASED_SELECTOR,
    RESULT_ROW_SELECTOR,
    SEARCH_URL,
    TITLE_SELECTOR,
)
from .document import ElementView, parse_html
from .models import GameInfo, SteamScraperError
from .utils import appid_from_href, collapse_whitespace, parse_appid, safe_get

logger = logging.getLogger(__name__)

# same unreserved set as JavaScript's encodeURIComponent
_QUERY_SAFE = "-_.!~*'()"


def build_search_url(query: str) -> str:
    return SEARCH_URL + quote(query, safe=_QUERY_SAFE)


def _text_of(row: ElementView, selector: str) -> str:
    el = row.find(selector)
    if el is None:
        return ""
    return el.text().strip()


def _extract_appid(row: ElementView) -> Optional[int]:
    appid = parse_appid(row.attribute(APPID_ATTRIBUTE))
    if appid is not None:
        return appid
    href = row.attribute("href")
    if not href:
        link = row.find("a[href]")
        href = link.attribute("href") if link is not None else None
    return appid_from_href(href)


def _extract_price(row: ElementView) -> str:
    price = _text_of(row, PRICE_SELECTOR)
    if not price:
        price = _text_of(row, DISCOUNT_PRICE_SELECTOR)
    return collapse_whitespace(price) or PRICE_NOT_AVAILABLE


def parse_search_row(row: ElementView) -> GameInfo:
    img = row.find(IMAGE_SELECTOR)
    return GameInfo(
        title=_text_of(row, TITLE_SELECTOR),
        release=_text_of(row, RELEASED_SELECTOR),
        price=_extract_price(row),
        image=img.attribute("src") if img is not None else None,
        appid=_extract_appid(row),
    )


def parse_search_results(html: str, limit: int = DEFAULT_SEARCH_LIMIT) -> List[GameInfo]:
    """Map up to `limit` result rows of a search page, in page order."""
    if limit <= 0:
        return []
    rows = parse_html(html).find_all(RESULT_ROW_SELECTOR)
    logger.debug(f"Search page has {len(rows)} result rows")
    return [parse_search_row(row) for row in rows[:limit]]


def search_games(
    query: str,
    limit: int = DEFAULT_SEARCH_LIMIT,
    session: Optional[requests.Session] = None,
) -> List[GameInfo]:
    """Search the Steam store for `query` and return up to `limit` games.

    No matching rows is not an error: an empty list is returned.

    Raises:
        SteamScraperError: the request failed or the page could not be parsed.
    """
    if limit <= 0:
        return []
    url = build_search_url(query)
    try:
        resp = safe_get(url, session=session)
        return parse_search_results(resp.text, limit)
    except Exception as e:
        logger.warning(f"Search for {query!r} failed: {e}")
        raise SteamScraperError(f"Failed to fetch game information: {e}", e) from e


def get_first_game(query: str, session: Optional[requests.Session] = None) -> Optional[GameInfo]:
    """Return the first search result for `query`, or None.

    Deprecated: use `search_games(query, 1)`.
    """
    warnings.warn(
        "get_first_game() is deprecated; use search_games(query, 1)",
        DeprecationWarning,
        stacklevel=2,
    )
    try:
        games = search_games(query, 1, session=session)
    except Exception as e:
        raise SteamScraperError(f"Failed to fetch first game: {e}", e) from e
    return games[0] if games else None
