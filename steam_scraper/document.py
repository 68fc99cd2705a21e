"""Thin selector-based view over a parsed HTML page.

The search extractor only talks to `DocumentView` and `ElementView`, so the
BeautifulSoup/lxml specifics stay in this module.
"""
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag


class ElementView:
    def __init__(self, tag: Tag):
        self._tag = tag

    def find(self, selector: str) -> Optional["ElementView"]:
        found = self._tag.select_one(selector)
        return ElementView(found) if found is not None else None

    def text(self) -> str:
        return self._tag.get_text()

    def attribute(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        # multi-valued attributes (class, rel) come back as lists
        if isinstance(value, list):
            return " ".join(value)
        return value


class DocumentView:
    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    def find_all(self, selector: str) -> List[ElementView]:
        return [ElementView(tag) for tag in self._soup.select(selector)]


def parse_html(markup: str) -> DocumentView:
    return DocumentView(BeautifulSoup(markup, "lxml"))
