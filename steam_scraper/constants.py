"""Endpoints and fixed values shared by the Steam store extractors."""

# Search results page; the url-encoded query is appended to `term=`
SEARCH_URL = "http://store.steampowered.com/search/results?sort_by=_ASC&page=1&term="

# appdetails JSON endpoint; the app id is appended to `appids=`
STEAM_API_URL = "https://store.steampowered.com/api/appdetails?appids="

DEFAULT_SEARCH_LIMIT = 10

REQUEST_TIMEOUT = 15
HEADERS = {"User-Agent": "steam-scraper/1.0 (+https://github.com/)"}

# CSS selectors for the search results markup
RESULT_ROW_SELECTOR = ".search_result_row"
TITLE_SELECTOR = ".title"
RELEASED_SELECTOR = ".search_released"
PRICE_SELECTOR = ".search_price"
DISCOUNT_PRICE_SELECTOR = ".search_price_discount_combined"
IMAGE_SELECTOR = "img"
APPID_ATTRIBUTE = "data-ds-appid"

PRICE_NOT_AVAILABLE = "Price not available"
PRICE_FREE = "Free"
PRICE_NOT_FOR_SALE = "Not available for purchase"
