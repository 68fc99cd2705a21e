"""Look up Steam store games by name (search page scraping) or by app id (appdetails API)."""

__version__ = "1.0.0"

from .appdetails import get_game_by_id
from .constants import DEFAULT_SEARCH_LIMIT, SEARCH_URL, STEAM_API_URL
from .logging_config import setup_logging
from .models import GameInfo, SteamScraperError
from .search import get_first_game, search_games

__all__ = [
    "DEFAULT_SEARCH_LIMIT",
    "GameInfo",
    "SEARCH_URL",
    "STEAM_API_URL",
    "SteamScraperError",
    "get_first_game",
    "get_game_by_id",
    "search_games",
    "setup_logging",
]
