"""Factory for the async HTTP client used to talk to docs.rs."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx


def build_http_client(
    config: dict[str, Any],
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` from the ``http`` config section."""
    http = config.get("http", {})
    return httpx.AsyncClient(
        timeout=httpx.Timeout(http.get("timeout", 30.0)),
        headers={"User-Agent": http.get("user_agent", "rustdoc-mcp")},
        follow_redirects=http.get("follow_redirects", True),
        transport=transport,
    )


@asynccontextmanager
async def http_client_scope(
    config: dict[str, Any],
    client: httpx.AsyncClient | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield ``client`` if given, else a fresh client closed on exit."""
    if client is not None:
        yield client
        return
    async with build_http_client(config) as owned:
        yield owned
