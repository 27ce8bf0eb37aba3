"""Logic for loading and merging configuration files."""

import copy
import os
from pathlib import Path
from typing import Any

import yaml

from rustdoc_mcp.deep_merge import deep_merge

CONFIG_ENV_VAR = "RUSTDOC_MCP_CONFIG"

DEFAULT_CONFIG: dict[str, Any] = {
    "docs": {
        "base_url": "https://docs.rs",
        "content_selector": "#main-content",
        "search_selector": ".recent-releases-container > ul",
    },
    "http": {
        "timeout": 30.0,
        "user_agent": "rustdoc-mcp/0.1.0",
        "follow_redirects": True,
    },
    "markdown": {
        "skip_tags": ["script", "style", "button"],
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Without an explicit path, ``$RUSTDOC_MCP_CONFIG`` is used if set. A path
    that does not exist leaves the defaults in place.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    path = path or os.environ.get(CONFIG_ENV_VAR)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
