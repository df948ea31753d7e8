from __future__ import annotations

from typer.testing import CliRunner

from fireflower.cli.main import app

runner = CliRunner()


def test_play_command_reports_outcome() -> None:
    result = runner.invoke(app, ["play", "--players", "2", "--seed", "5"])

    assert result.exit_code == 0, result.output
    assert "Outcome" in result.output
    assert "seed 5" in result.output


def test_benchmark_command_reports_summary() -> None:
    result = runner.invoke(app, ["benchmark", "--games", "2", "--players", "3", "--seed", "1"])

    assert result.exit_code == 0, result.output
    assert "Summary" in result.output
