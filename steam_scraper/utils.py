import logging
import re
from typing import Optional

import requests

from .constants import HEADERS, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

APP_HREF_PATTERN = re.compile(r"/app/(\d+)")
WHITESPACE_PATTERN = re.compile(r"\s+")
DIGITS_PATTERN = re.compile(r"[0-9]+")


def safe_get(url: str, session: Optional[requests.Session] = None, **kwargs) -> requests.Response:
    """GET `url` once and raise for non-2xx responses.

    Uses the caller's session as-is when given (its own headers apply),
    otherwise a bare `requests.get` with the library User-Agent.
    """
    kwargs.setdefault("timeout", REQUEST_TIMEOUT)
    if session is not None:
        getter = session.get
    else:
        kwargs.setdefault("headers", HEADERS)
        getter = requests.get
    logger.debug(f"GET {url}")
    resp = getter(url, **kwargs)
    resp.raise_for_status()
    return resp


def collapse_whitespace(text: Optional[str]) -> str:
    if not text:
        return ""
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def parse_appid(value: Optional[str]) -> Optional[int]:
    """Return `value` as an int if it is a plain number, else None.

    Bundle rows carry a comma-separated list of ids, which is not an app id.
    """
    if value is None:
        return None
    value = value.strip()
    if not DIGITS_PATTERN.fullmatch(value):
        return None
    return int(value)


def appid_from_href(href: Optional[str]) -> Optional[int]:
    if not href:
        return None
    m = APP_HREF_PATTERN.search(href)
    if not m:
        return None
    return int(m.group(1))
