"""Locate the documentation region of a rustdoc page."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

from rustdoc_mcp.errors import ContentNotFoundError

MAIN_CONTENT_SELECTOR = "#main-content"


def select_main_content(
    soup: BeautifulSoup | Tag,
    selector: str = MAIN_CONTENT_SELECTOR,
) -> Tag:
    """Return the one element matching ``selector``.

    Zero or several matches mean the page is not the rustdoc page we expected,
    so no match is guessed.
    """
    matches = soup.select(selector)
    if len(matches) != 1:
        raise ContentNotFoundError(selector, len(matches))
    return matches[0]


def extract_main_content(html: str, selector: str = MAIN_CONTENT_SELECTOR) -> str:
    """Return the inner markup of the page's documentation region."""
    soup = BeautifulSoup(html, "html.parser")
    return select_main_content(soup, selector).decode_contents()
