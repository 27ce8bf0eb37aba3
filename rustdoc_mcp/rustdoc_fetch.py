"""Resolve a resource path to its docs.rs page and render it as Markdown."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from rustdoc_mcp.build_http_client import http_client_scope
from rustdoc_mcp.fetch_page import fetch_page
from rustdoc_mcp.infer_kind import infer_kind
from rustdoc_mcp.item_kind import ItemKind
from rustdoc_mcp.load_config import load_config
from rustdoc_mcp.process_html_content import process_html_content
from rustdoc_mcp.resolve_url import resolve_url
from rustdoc_mcp.resource_identifier import parse_resource

logger = logging.getLogger(__name__)


async def rustdoc_fetch(
    resource: str,
    kind: str | ItemKind | None = None,
    version: str | None = None,
    *,
    config: dict[str, Any] | None = None,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Fetch the documentation of ``resource`` (e.g. ``serde::Serialize``).

    When ``kind`` is omitted it is inferred from the parent module's listing
    before the item page itself is requested, so at most two requests are made,
    one after the other.
    """
    config = config or load_config()
    docs = config["docs"]
    identifier = parse_resource(resource, kind, version)

    async with http_client_scope(config, client) as http:
        resolved = identifier.kind
        if resolved is None:
            resolved = await infer_kind(
                http,
                identifier,
                base_url=docs["base_url"],
                content_selector=docs["content_selector"],
            )
        url = resolve_url(identifier, resolved, base_url=docs["base_url"])
        logger.debug("Resolved %s to %s", identifier, url)
        html = await fetch_page(http, url)

    return process_html_content(
        html,
        selector=docs["content_selector"],
        skip_tags=config["markdown"]["skip_tags"],
    )
