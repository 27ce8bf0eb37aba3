"""Single GET against docs.rs with status validation."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from rustdoc_mcp.errors import HttpStatusError, TransportError

logger = logging.getLogger(__name__)


async def fetch_page(
    client: httpx.AsyncClient,
    url: str,
    *,
    params: dict[str, Any] | None = None,
) -> str:
    """Fetch ``url`` and return the response body as text."""
    logger.debug("GET %s params=%s", url, params)
    try:
        response = await client.get(url, params=params)
    except httpx.RequestError as exc:
        msg = f"Failed to reach {url}: {exc}"
        raise TransportError(msg) from exc

    if not response.is_success:
        logger.debug("GET %s -> %s", url, response.status_code)
        raise HttpStatusError(response.status_code, str(response.url))
    return response.text
