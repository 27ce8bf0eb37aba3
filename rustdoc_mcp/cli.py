"""Command line interface: print docs.rs documentation as Markdown."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence

from rustdoc_mcp.configure_logging import configure_logging
from rustdoc_mcp.errors import RustdocError
from rustdoc_mcp.fetch_online_docs import fetch_online_docs
from rustdoc_mcp.item_kind import KIND_TOKENS
from rustdoc_mcp.load_config import load_config
from rustdoc_mcp.rustdoc_fetch import rustdoc_fetch
from rustdoc_mcp.rustdoc_search import rustdoc_search
from rustdoc_mcp.server import run_server

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per surface."""
    ap = argparse.ArgumentParser(
        prog="rustdoc-mcp",
        description="Fetch Rust documentation from docs.rs as Markdown.",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file (default: $RUSTDOC_MCP_CONFIG)",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    fetch = sub.add_parser("fetch", help="Fetch the page for an item path")
    fetch.add_argument("resource", help="Item path, e.g. serde::de::Deserializer")
    fetch.add_argument(
        "-k",
        "--kind",
        choices=sorted(KIND_TOKENS.values()),
        help="Item kind token; inferred from the parent module when omitted",
    )
    fetch.add_argument("--crate-version", help="Crate version (default: latest)")

    docs = sub.add_parser("docs", help="Fetch a crate, module or item page")
    docs.add_argument("crate_name", help="Crate to fetch documentation for")
    docs.add_argument("-m", "--module", help="Module within the crate")
    docs.add_argument(
        "-i",
        "--item-path",
        help='Page of a specific item, e.g. "struct.MyStruct"',
    )
    docs.add_argument("--crate-version", help="Crate version (default: latest)")

    search = sub.add_parser("search", help="Search docs.rs for crates")
    search.add_argument("query", help="Search terms")

    sub.add_parser("serve", help="Run as an MCP server over stdio")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    configure_logging(config, verbose=args.verbose)

    if args.command == "serve":
        run_server(config)
        return 0

    if args.command == "fetch":
        job = rustdoc_fetch(
            args.resource, args.kind, args.crate_version, config=config
        )
    elif args.command == "docs":
        job = fetch_online_docs(
            args.crate_name,
            args.module,
            args.item_path,
            version=args.crate_version,
            config=config,
        )
    else:
        job = rustdoc_search(args.query, config=config)

    try:
        markdown = asyncio.run(job)
    except RustdocError as exc:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(markdown, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
