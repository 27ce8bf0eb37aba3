"""Exception hierarchy for resolving, fetching and converting docs.rs pages.

Every failure that can abort a resolution derives from ``RustdocError`` so the
command surface and the MCP server can report it uniformly, while callers that
care can still tell a missing page (``HttpStatusError``) apart from a network
failure (``TransportError``).
"""

from __future__ import annotations


class RustdocError(RuntimeError):
    """Base exception for documentation resolution failures."""


class UnknownKindError(RustdocError, ValueError):
    """Raised when a token does not name a rustdoc item kind."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown item kind: {token!r}")
        self.token = token


class InvalidIdentifierError(RustdocError, ValueError):
    """Raised when a resource path cannot address a documentation page."""


class TransportError(RustdocError):
    """Raised when the HTTP request never produced a response."""


class HttpStatusError(RustdocError):
    """Raised when docs.rs answers with a non-success status."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP {status_code} from {url}")
        self.status_code = status_code
        self.url = url


class ContentNotFoundError(RustdocError):
    """Raised when a page does not contain exactly one content anchor."""

    def __init__(self, selector: str, matches: int) -> None:
        if matches == 0:
            msg = f"Could not find main content section ({selector})"
        else:
            msg = f"Expected one main content section ({selector}), found {matches}"
        super().__init__(msg)
        self.selector = selector
        self.matches = matches


class ResourceNotFoundError(RustdocError):
    """Raised when the parent module does not list the requested item."""


class ConversionFailedError(RustdocError):
    """Raised when HTML to Markdown conversion fails."""
