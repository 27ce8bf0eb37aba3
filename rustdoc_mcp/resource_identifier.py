"""Parsed form of a ``crate::module::Item`` resource path."""

from __future__ import annotations

from dataclasses import dataclass

from rustdoc_mcp.errors import InvalidIdentifierError
from rustdoc_mcp.item_kind import ItemKind, parse_kind

PATH_SEPARATOR = "::"
DEFAULT_VERSION = "latest"


@dataclass(frozen=True)
class ResourceIdentifier:
    """A crate-rooted item path plus an optional kind and crate version."""

    segments: tuple[str, ...]
    kind: ItemKind | None = None
    version: str | None = None  # None means whatever docs.rs serves as latest

    def __post_init__(self) -> None:
        if not self.segments or any(not s for s in self.segments):
            msg = f"Invalid resource path: {PATH_SEPARATOR.join(self.segments)!r}"
            raise InvalidIdentifierError(msg)
        if self.kind not in (None, ItemKind.MODULE) and len(self.segments) < 2:
            msg = "The top level resource is always a module"
            raise InvalidIdentifierError(msg)

    @property
    def crate(self) -> str:
        return self.segments[0]

    @property
    def name(self) -> str:
        return self.segments[-1]

    @property
    def effective_version(self) -> str:
        return self.version or DEFAULT_VERSION

    def container(self) -> ResourceIdentifier:
        """Return the module that lists this item."""
        if len(self.segments) < 2:
            msg = f"{self.crate!r} is a crate root and has no parent module"
            raise InvalidIdentifierError(msg)
        return ResourceIdentifier(
            segments=self.segments[:-1],
            kind=ItemKind.MODULE,
            version=self.version,
        )

    def __str__(self) -> str:
        return PATH_SEPARATOR.join(self.segments)


def parse_resource(
    path: str,
    kind: str | ItemKind | None = None,
    version: str | None = None,
) -> ResourceIdentifier:
    """Parse ``serde::de::Deserializer`` (plus optional kind token and version)."""
    segments = tuple(s.strip() for s in path.strip().split(PATH_SEPARATOR))
    return ResourceIdentifier(
        segments=segments,
        kind=parse_kind(kind) if kind is not None else None,
        version=(version or "").strip() or None,
    )
