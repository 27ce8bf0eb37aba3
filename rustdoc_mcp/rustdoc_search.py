"""Search docs.rs for crates matching a query."""

from __future__ import annotations

from typing import Any

import httpx

from rustdoc_mcp.build_http_client import http_client_scope
from rustdoc_mcp.fetch_page import fetch_page
from rustdoc_mcp.load_config import load_config
from rustdoc_mcp.process_html_content import process_html_content


async def rustdoc_search(
    query: str,
    *,
    config: dict[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Return the docs.rs release search results for ``query`` as Markdown."""
    config = config or load_config()
    docs = config["docs"]
    url = f"{docs['base_url'].rstrip('/')}/releases/search"
    async with http_client_scope(config, client) as http:
        html = await fetch_page(http, url, params={"query": query})
    return process_html_content(
        html,
        selector=docs["search_selector"],
        skip_tags=config["markdown"]["skip_tags"],
    )
