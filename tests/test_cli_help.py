from __future__ import annotations

from typer.testing import CliRunner

from wholefile.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "wholefile show" in result.stdout


def test_show_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["show", "--help"])
    assert "--as" in result.stdout
    assert "--line-numbers" in result.stdout
    assert "--config" in result.stdout
