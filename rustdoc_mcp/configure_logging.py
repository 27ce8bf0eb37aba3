"""Logging setup shared by the CLI and the MCP server."""

import logging
import sys
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: dict[str, Any], *, verbose: bool = False) -> None:
    """Send log records to stderr; stdout carries Markdown or MCP traffic."""
    level = str(config.get("logging", {}).get("level", "WARNING"))
    if verbose:
        level = "DEBUG"
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
    # httpx logs every request at INFO; our own fetch logging covers it.
    if not verbose:
        logging.getLogger("httpx").setLevel(logging.WARNING)
