"""Record and error types returned by the extractors."""
from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass
class GameInfo:
    """Normalized game metadata produced by both the search and appdetails paths.

    `image` is None when a search row has no thumbnail, while the appdetails
    path falls back to an empty string.
    """
    title: str
    release: str
    price: str
    image: Optional[str] = None
    appid: Optional[int] = None

    def to_dict(self) -> dict:
        return asdict(self)


class SteamScraperError(Exception):
    """Raised when a store request or the parsing of its response fails.

    `cause` holds whatever was originally raised, untouched.
    """

    def __init__(self, message: str, cause: Any = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self):
        return self.message
