"""MCP server exposing docs.rs lookups as tools."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from rustdoc_mcp.build_http_client import build_http_client
from rustdoc_mcp.errors import RustdocError
from rustdoc_mcp.fetch_online_docs import fetch_online_docs
from rustdoc_mcp.load_config import load_config
from rustdoc_mcp.rustdoc_fetch import rustdoc_fetch
from rustdoc_mcp.rustdoc_search import rustdoc_search

logger = logging.getLogger(__name__)

SERVER_NAME = "rustdoc-mcp"
INSTRUCTIONS = (
    "This server provides tools for fetching docs from Docs.rs. "
    "Tools: fetch_docs, rustdoc_fetch, search_crates."
)


async def run_tool(
    config: dict[str, Any],
    call: Callable[[httpx.AsyncClient], Awaitable[str]],
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Run ``call`` with a request-scoped client, reporting failures as tool errors."""
    async with build_http_client(config, transport=transport) as client:
        try:
            return await call(client)
        except RustdocError as exc:
            logger.error("Tool call failed: %s", exc)
            msg = f"Failed to fetch documentation: {exc}"
            raise ToolError(msg) from exc


def build_server(
    config: dict[str, Any] | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastMCP:
    """Create the FastMCP server with the documentation tools registered."""
    config = config or load_config()
    mcp = FastMCP(SERVER_NAME, instructions=INSTRUCTIONS)

    @mcp.tool(
        description=(
            "Fetch Rust documentation from docs.rs as Markdown. Provides "
            "documentation for Rust crates, modules, structs, enums, traits, "
            "functions, and more."
        )
    )
    async def fetch_docs(
        crate_name: str,
        module: str | None = None,
        item_path: str | None = None,
    ) -> str:
        return await run_tool(
            config,
            lambda client: fetch_online_docs(
                crate_name, module, item_path, config=config, client=client
            ),
            transport=transport,
        )

    @mcp.tool(
        name="rustdoc_fetch",
        description=(
            "Fetch the docs.rs page for an item path such as "
            "'serde::de::Deserializer' as Markdown. item_type is the rustdoc "
            "kind token (mod, struct, enum, fn, trait, macro, ...); when omitted "
            "it is looked up in the parent module."
        ),
    )
    async def fetch_item(
        path: str,
        item_type: str | None = None,
        version: str | None = None,
    ) -> str:
        return await run_tool(
            config,
            lambda client: rustdoc_fetch(
                path, item_type, version, config=config, client=client
            ),
            transport=transport,
        )

    @mcp.tool(description="Search docs.rs for crates matching a query.")
    async def search_crates(query: str) -> str:
        return await run_tool(
            config,
            lambda client: rustdoc_search(query, config=config, client=client),
            transport=transport,
        )

    return mcp


def run_server(config: dict[str, Any] | None = None) -> None:
    """Serve the tools over stdio until the client disconnects."""
    build_server(config).run()
