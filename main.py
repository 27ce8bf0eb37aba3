"""Entry point for running the rustdoc-mcp CLI from a source checkout."""

from rustdoc_mcp.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
