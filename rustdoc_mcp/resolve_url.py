"""Build the docs.rs URL for a resource identifier."""

from __future__ import annotations

from rustdoc_mcp.errors import InvalidIdentifierError
from rustdoc_mcp.item_kind import ItemKind, kind_token
from rustdoc_mcp.resource_identifier import ResourceIdentifier

DOCS_RS_URL = "https://docs.rs"


def resolve_url(
    identifier: ResourceIdentifier,
    kind: ItemKind,
    *,
    base_url: str = DOCS_RS_URL,
) -> str:
    """Return the page URL documenting ``identifier`` as an item of ``kind``.

    Modules live at ``{crate}/{version}/{path...}/index.html``; every other
    item is a ``{token}.{name}.html`` page inside its parent module directory.
    """
    root = f"{base_url.rstrip('/')}/{identifier.crate}/{identifier.effective_version}"
    if kind is ItemKind.MODULE:
        return f"{root}/{'/'.join(identifier.segments)}/index.html"

    container = identifier.segments[:-1]
    if not container:
        msg = (
            f"Cannot resolve {identifier} as {kind_token(kind)}: "
            "the top level resource is always a module"
        )
        raise InvalidIdentifierError(msg)
    return f"{root}/{'/'.join(container)}/{kind_token(kind)}.{identifier.name}.html"
