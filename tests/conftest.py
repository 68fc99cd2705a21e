"""
Shared pytest fixtures for all tests.
"""

from unittest.mock import MagicMock

import pytest


# ============================================================
# HTTP stubs
# ============================================================


def make_response(text: str = "", json_data=None) -> MagicMock:
    """Build a stand-in for requests.Response."""
    resp = MagicMock()
    resp.text = text
    resp.json.return_value = json_data
    resp.raise_for_status.return_value = None
    return resp


@pytest.fixture
def response_factory():
    """Factory for requests.Response stand-ins."""
    return make_response


@pytest.fixture
def fake_session():
    """Session double whose get() returns whatever the test sets."""
    session = MagicMock()
    session.get.return_value = make_response()
    return session


# ============================================================
# Search page fixtures
# ============================================================


@pytest.fixture
def search_page_html() -> str:
    """Search results page with three rows covering the price/appid variants."""
    return """
<html><body>
<div id="search_resultsRows">
  <a href="https://store.steampowered.com/app/620/Portal_2/?snr=1_7_7_151_150_1"
     data-ds-appid="620" class="search_result_row ds_collapse_flag">
    <div class="col search_capsule"><img src="https://cdn.akamai.steamstatic.com/steam/apps/620/capsule_sm_120.jpg"></div>
    <div class="responsive_search_name_combined">
      <div class="col search_name ellipsis"><span class="title">Portal 2</span></div>
      <div class="col search_released responsive_secondrow">  18 Apr, 2011  </div>
      <div class="col search_price_discount_combined responsive_secondrow">
        <div class="col search_price responsive_secondrow">
          $9.99
        </div>
      </div>
    </div>
  </a>
  <a href="https://store.steampowered.com/app/400/Portal/?snr=1_7_7_151_150_1"
     class="search_result_row ds_collapse_flag">
    <div class="col search_capsule"><img src="https://cdn.akamai.steamstatic.com/steam/apps/400/capsule_sm_120.jpg"></div>
    <div class="responsive_search_name_combined">
      <div class="col search_name ellipsis"><span class="title">Portal</span></div>
      <div class="col search_released responsive_secondrow">10 Oct, 2007</div>
      <div class="col search_price_discount_combined responsive_secondrow">
        <div class="col search_discount"><span>-90%</span></div>
        <div class="col search_price discounted"></div>
        <span>$0.99</span>
      </div>
    </div>
  </a>
  <a href="https://store.steampowered.com/bundle/7932/Portal_Bundle/"
     data-ds-appid="400,620" class="search_result_row ds_collapse_flag">
    <div class="responsive_search_name_combined">
      <div class="col search_name ellipsis"><span class="title">Portal Bundle</span></div>
      <div class="col search_released responsive_secondrow"></div>
      <div class="col search_price responsive_secondrow"></div>
    </div>
  </a>
</div>
</body></html>
"""


@pytest.fixture
def empty_search_page_html() -> str:
    """Search page with no result rows."""
    return """
<html><body>
<div id="search_resultsRows"></div>
<div class="search_results_count">0 results match your search.</div>
</body></html>
"""


# ============================================================
# appdetails fixtures
# ============================================================


@pytest.fixture
def portal2_appdetails() -> dict:
    """appdetails payload for a paid game."""
    return {
        "620": {
            "success": True,
            "data": {
                "type": "game",
                "name": "Portal 2",
                "steam_appid": 620,
                "is_free": False,
                "header_image": "https://cdn.akamai.steamstatic.com/steam/apps/620/header.jpg",
                "release_date": {"coming_soon": False, "date": "18 Apr, 2011"},
                "price_overview": {
                    "currency": "USD",
                    "initial": 999,
                    "final": 999,
                    "discount_percent": 0,
                    "final_formatted": "$9.99",
                },
                "developers": ["Valve"],
                "publishers": ["Valve"],
            },
        }
    }


@pytest.fixture
def dota2_appdetails() -> dict:
    """appdetails payload for a free-to-play game."""
    return {
        "570": {
            "success": True,
            "data": {
                "type": "game",
                "name": "Dota 2",
                "steam_appid": 570,
                "is_free": True,
                "header_image": "https://cdn.akamai.steamstatic.com/steam/apps/570/header.jpg",
                "release_date": {"coming_soon": False, "date": "9 Jul, 2013"},
            },
        }
    }
