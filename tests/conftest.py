"""Shared fixtures: canned docs.rs pages served through httpx.MockTransport."""

from collections.abc import Callable

import httpx
import pytest

from rustdoc_mcp.load_config import load_config


class DocsRsStub:
    """Route requests by URL (without query) to canned (status, body) pairs."""

    def __init__(self, pages: dict[str, tuple[int, str]]) -> None:
        self.pages = pages
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = f"{request.url.scheme}://{request.url.host}{request.url.path}"
        status, body = self.pages.get(url, (404, "<html><body>Not found</body></html>"))
        return httpx.Response(status, text=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport)


@pytest.fixture
def config() -> dict:
    """Default configuration, independent of any $RUSTDOC_MCP_CONFIG."""
    return load_config("/nonexistent/rustdoc-mcp.yml")


@pytest.fixture
def docs_rs() -> Callable[[dict[str, tuple[int, str]]], DocsRsStub]:
    """Build a docs.rs stub from a URL -> (status, body) mapping."""
    return DocsRsStub
