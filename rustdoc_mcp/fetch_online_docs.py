"""Fetch docs.rs pages addressed by crate, module and item path."""

from __future__ import annotations

from typing import Any

import httpx

from rustdoc_mcp.build_http_client import http_client_scope
from rustdoc_mcp.errors import InvalidIdentifierError
from rustdoc_mcp.fetch_page import fetch_page
from rustdoc_mcp.load_config import load_config
from rustdoc_mcp.process_html_content import process_html_content
from rustdoc_mcp.resource_identifier import DEFAULT_VERSION, PATH_SEPARATOR


def online_docs_url(
    base_url: str,
    crate_name: str,
    module: str | None = None,
    item_path: str | None = None,
    version: str | None = None,
) -> str:
    """Build the page URL for a crate, an optional module and an item path.

    ``item_path`` names the page file without its extension, e.g.
    ``struct.Serializer`` or ``ser::trait.Serializer``.
    """
    if not crate_name.strip():
        msg = "crate_name must not be empty"
        raise InvalidIdentifierError(msg)
    root = f"{base_url.rstrip('/')}/{crate_name}/{version or DEFAULT_VERSION}"
    url = f"{root}/{crate_name}"
    if module:
        url = f"{url}/{module.replace(PATH_SEPARATOR, '/')}"
    if item_path:
        return f"{url}/{item_path.replace(PATH_SEPARATOR, '/')}.html"
    return f"{url}/index.html"


async def fetch_online_docs(
    crate_name: str,
    module: str | None = None,
    item_path: str | None = None,
    *,
    version: str | None = None,
    config: dict[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Fetch a crate, module or item page from docs.rs as Markdown."""
    config = config or load_config()
    docs = config["docs"]
    url = online_docs_url(docs["base_url"], crate_name, module, item_path, version)
    async with http_client_scope(config, client) as http:
        html = await fetch_page(http, url)
    return process_html_content(
        html,
        selector=docs["content_selector"],
        skip_tags=config["markdown"]["skip_tags"],
    )
