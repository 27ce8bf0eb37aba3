"""Infer an item's kind from its parent module's listing page."""

from __future__ import annotations

import logging

import httpx
from bs4 import BeautifulSoup
from bs4.element import Tag

from rustdoc_mcp.errors import ResourceNotFoundError, UnknownKindError
from rustdoc_mcp.fetch_page import fetch_page
from rustdoc_mcp.item_kind import ItemKind, parse_kind
from rustdoc_mcp.resolve_url import DOCS_RS_URL, resolve_url
from rustdoc_mcp.resource_identifier import PATH_SEPARATOR, ResourceIdentifier
from rustdoc_mcp.select_main_content import MAIN_CONTENT_SELECTOR, select_main_content

logger = logging.getLogger(__name__)


def find_candidates(region: Tag, name: str) -> list[Tag]:
    """Return elements whose title names ``name``, in document order.

    Listing links carry the item path in their title, either bare
    (``title="struct Foo"``) or qualified (``title="struct serde::de::Foo"``).
    Matching is on the exact, case-sensitive suffix.
    """
    suffixes = (f" {name}", f"{PATH_SEPARATOR}{name}")
    return [el for el in region.select("[title]") if el["title"].endswith(suffixes)]


def kind_from_class(element: Tag) -> ItemKind | None:
    """Read a listing link's ``class`` attribute as an item kind token."""
    token = " ".join(element.get("class") or [])
    try:
        return parse_kind(token)
    except UnknownKindError:
        return None


def kind_from_listing(region: Tag, name: str) -> ItemKind | None:
    """Return the kind of the first listing entry for ``name``."""
    for element in find_candidates(region, name):
        kind = kind_from_class(element)
        if kind is not None:
            return kind
    return None


async def infer_kind(
    client: httpx.AsyncClient,
    identifier: ResourceIdentifier,
    *,
    base_url: str = DOCS_RS_URL,
    content_selector: str = MAIN_CONTENT_SELECTOR,
) -> ItemKind:
    """Work out what kind of item ``identifier`` names.

    A bare crate name is its root module. Anything deeper is looked up in the
    parent module's item listing, costing one request.
    """
    if len(identifier.segments) == 1:
        return ItemKind.MODULE

    container = identifier.container()
    url = resolve_url(container, ItemKind.MODULE, base_url=base_url)
    html = await fetch_page(client, url)
    region = select_main_content(BeautifulSoup(html, "html.parser"), content_selector)

    kind = kind_from_listing(region, identifier.name)
    if kind is None:
        msg = f"No item named {identifier.name!r} is listed in {container}"
        raise ResourceNotFoundError(msg)
    logger.info("Inferred %s as %s", identifier, kind.name.lower())
    return kind
