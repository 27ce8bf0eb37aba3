"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from rustdoc_mcp.deep_merge import deep_merge
from rustdoc_mcp.load_config import CONFIG_ENV_VAR, DEFAULT_CONFIG, load_config


def test_deep_merge_scalars() -> None:
    """Verify scalar replacement in deep merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    assert deep_merge(base, update) == {"a": 1, "b": 3, "c": 4}


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    assert deep_merge(base, update) == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced by default."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3, 4]}) == {"arr": [3, 4]}


def test_deep_merge_skip_tags_additive() -> None:
    """Verify that skip_tags lists are merged additively, keeping order."""
    base = {"markdown": {"skip_tags": ["script", "style"]}}
    update = {"markdown": {"skip_tags": ["style", "nav"]}}
    merged = deep_merge(base, update)
    assert merged["markdown"]["skip_tags"] == ["script", "style", "nav"]


def test_load_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify that default config is loaded when no path is provided."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config["docs"]["base_url"] == "https://docs.rs"
    # Callers may mutate their copy without touching the defaults.
    config["docs"]["base_url"] = "https://mirror.example"
    assert DEFAULT_CONFIG["docs"]["base_url"] == "https://docs.rs"


def test_load_config_missing_file() -> None:
    """Verify that a missing file leaves the defaults in place."""
    assert load_config("/nonexistent/rustdoc-mcp.yml") == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "http": {"timeout": 5},
        "markdown": {"skip_tags": ["nav"]},
        "logging": {"level": "INFO"},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    timeout = 5
    assert loaded["http"]["timeout"] == timeout
    assert loaded["http"]["user_agent"].startswith("rustdoc-mcp/")  # Default
    assert loaded["markdown"]["skip_tags"] == ["script", "style", "button", "nav"]
    assert loaded["logging"]["level"] == "INFO"


def test_load_config_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify that $RUSTDOC_MCP_CONFIG is used when no path is given."""
    config_file = tmp_path / "env.yml"
    config_file.write_text(yaml.dump({"docs": {"base_url": "http://localhost:3000"}}))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
    assert load_config()["docs"]["base_url"] == "http://localhost:3000"


def test_load_config_empty_file(tmp_path: Path) -> None:
    """Verify that an empty YAML file is treated as no overrides."""
    config_file = tmp_path / "empty.yml"
    config_file.write_text("")
    assert load_config(str(config_file)) == DEFAULT_CONFIG
