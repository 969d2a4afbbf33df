from __future__ import annotations

from typer.testing import CliRunner

from fod_dashboard.cli.app import app


def test_cli_help_smoke() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    # Basic sanity checks that the top-level commands are registered.
    assert "sync-site-settings" in result.stdout
    assert "serve" in result.stdout
    assert "init-db" in result.stdout
