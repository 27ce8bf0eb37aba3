"""Tests for locating the documentation region and processing pages."""

import pytest
from bs4 import BeautifulSoup

from pages import SERDE_INDEX, rustdoc_page

from rustdoc_mcp.errors import ContentNotFoundError
from rustdoc_mcp.process_html_content import process_html_content
from rustdoc_mcp.select_main_content import extract_main_content, select_main_content


def test_extract_inner_markup() -> None:
    """Verify only the inner markup of the anchor is returned."""
    html = rustdoc_page("<p>Docs</p>")
    assert extract_main_content(html) == "<p>Docs</p>"


def test_missing_anchor() -> None:
    """Verify a page without the anchor is rejected."""
    with pytest.raises(ContentNotFoundError) as exc_info:
        extract_main_content("<html><body><p>Not rustdoc</p></body></html>")
    assert exc_info.value.matches == 0


def test_duplicate_anchor() -> None:
    """Verify two anchors are rejected instead of picking the first."""
    html = (
        "<html><body><section id='main-content'>a</section>"
        "<section id='main-content'>b</section></body></html>"
    )
    with pytest.raises(ContentNotFoundError) as exc_info:
        extract_main_content(html)
    assert exc_info.value.matches == 2


def test_custom_selector() -> None:
    """Verify other anchors can be selected."""
    soup = BeautifulSoup("<div class='a'><ul><li>x</li></ul></div>", "html.parser")
    assert select_main_content(soup, ".a > ul").name == "ul"


def test_process_html_content() -> None:
    """Verify a full page renders to clean Markdown of its main content only."""
    md = process_html_content(SERDE_INDEX)
    assert md.startswith("# Crate serde\n\n")
    assert "Serde is a framework for *ser*ializing" in md
    assert (
        "[de](de/index.html):\nGeneric data structure deserialization framework.\n"
        in md
    )
    assert "[Serialize](trait.Serialize.html):\nA **data structure** that can be" in md
    assert "Sidebar" not in md
    assert "Copy item path" not in md
    assert "searchState" not in md
    assert "\n\n\n" not in md
