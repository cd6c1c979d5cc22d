from __future__ import annotations

from typer.testing import CliRunner

from datewise.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("parse", "format", "format-day", "format-month"):
        assert command in result.stdout


def test_parse_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["parse", "--help"])
    assert "--in" in result.stdout
    assert "--config" in result.stdout
    assert "--json" in result.stdout
    assert "--verbose" in result.stdout
