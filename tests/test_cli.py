"""Tests for the command line interface."""

import sys
from unittest.mock import patch

import pytest

import rustdoc_mcp.cli as cli
from rustdoc_mcp.errors import HttpStatusError
from rustdoc_mcp.load_config import CONFIG_ENV_VAR


@pytest.fixture(autouse=True)
def _isolated(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.setattr(cli, "configure_logging", lambda config, verbose: None)


def test_fetch_prints_markdown(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify fetch passes its arguments through and prints the result."""
    calls = []

    async def fake_fetch(resource, kind, version, *, config):
        calls.append((resource, kind, version))
        return "# Trait Serialize\n"

    monkeypatch.setattr(cli, "rustdoc_fetch", fake_fetch)
    ret = cli.main(
        ["fetch", "serde::Serialize", "--kind", "trait", "--crate-version", "1.0.0"]
    )

    assert ret == 0
    assert calls == [("serde::Serialize", "trait", "1.0.0")]
    assert capsys.readouterr().out == "# Trait Serialize\n"


def test_fetch_error_exit_code(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify core errors print to stderr and exit non-zero."""

    async def failing_fetch(resource, kind, version, *, config):
        raise HttpStatusError(404, "https://docs.rs/nope/latest/nope/index.html")

    monkeypatch.setattr(cli, "rustdoc_fetch", failing_fetch)
    ret = cli.main(["fetch", "nope"])

    captured = capsys.readouterr()
    assert ret == 1
    assert captured.out == ""
    assert "Error: HTTP 404" in captured.err


def test_docs_subcommand(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify the crate/module/item-path variant."""
    calls = []

    async def fake_docs(crate_name, module, item_path, *, version, config):
        calls.append((crate_name, module, item_path, version))
        return "docs\n"

    monkeypatch.setattr(cli, "fetch_online_docs", fake_docs)
    test_args = ["rustdoc-mcp", "docs", "serde", "-m", "de", "-i", "trait.Visitor"]
    with patch.object(sys, "argv", test_args):
        ret = cli.main()

    assert ret == 0
    assert calls == [("serde", "de", "trait.Visitor", None)]
    assert capsys.readouterr().out == "docs\n"


def test_search_subcommand(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Verify the search subcommand."""

    async def fake_search(query, *, config):
        return f"- {query}\n"

    monkeypatch.setattr(cli, "rustdoc_search", fake_search)
    assert cli.main(["search", "serde json"]) == 0
    assert capsys.readouterr().out == "- serde json\n"


def test_serve_subcommand(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify serve hands the loaded config to the MCP server."""
    served = []
    monkeypatch.setattr(cli, "run_server", served.append)
    assert cli.main(["serve"]) == 0
    assert served[0]["docs"]["base_url"] == "https://docs.rs"


def test_unknown_kind_rejected(capsys: pytest.CaptureFixture[str]) -> None:
    """Verify argparse rejects kind tokens that do not exist."""
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["fetch", "serde::Serialize", "--kind", "class"])
    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err
