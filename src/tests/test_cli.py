from typer.testing import CliRunner

from transaction_reports.cli.main import app

runner = CliRunner()


def test_cli_lists_commands():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("seed", "statistics", "bar-chart", "pie-chart"):
        assert command in result.output


def test_report_commands_require_month():
    result = runner.invoke(app, ["statistics"])
    assert result.exit_code != 0
