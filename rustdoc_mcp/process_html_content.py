"""Turn a fetched rustdoc page into clean Markdown."""

from __future__ import annotations

from collections.abc import Iterable

from rustdoc_mcp.clean_markdown import clean_markdown
from rustdoc_mcp.html_to_markdown import html_to_markdown
from rustdoc_mcp.select_main_content import MAIN_CONTENT_SELECTOR, extract_main_content


def process_html_content(
    html: str,
    *,
    selector: str = MAIN_CONTENT_SELECTOR,
    skip_tags: Iterable[str] | None = None,
) -> str:
    """Extract the documentation region of ``html`` and render it as Markdown."""
    content = extract_main_content(html, selector)
    return clean_markdown(html_to_markdown(content, skip_tags))
