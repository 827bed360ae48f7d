"""
CLI tests using click's runner
"""
import json

from click.testing import CliRunner

from cli import cli


def test_analyze_json_from_stdin(simple_statement):
    result = CliRunner().invoke(cli, ["analyze", "-", "--json"], input=simple_statement)

    assert result.exit_code == 0
    # log records may share the captured output
    output = result.output
    data = json.loads(output[output.index("{"):output.rindex("}") + 1])
    assert data["totalIncome"] == 55000.0
    assert data["spendingTrend"] == "stable"


def test_analyze_file(tmp_path, gtb_ledger_statement):
    statement = tmp_path / "statement.txt"
    statement.write_text(gtb_ledger_statement, encoding="utf-8")

    result = CliRunner().invoke(cli, ["analyze", str(statement)])

    assert result.exit_code == 0
    assert "Financial Summary" in result.output


def test_analyze_unrecognized_input():
    result = CliRunner().invoke(cli, ["analyze", "-"], input="hello")

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_parse(gtb_lines_statement):
    result = CliRunner().invoke(cli, ["parse", "-"], input=gtb_lines_statement)

    assert result.exit_code == 0
    assert "Transactions (2)" in result.output


def test_info():
    result = CliRunner().invoke(cli, ["info"])

    assert result.exit_code == 0
    assert "GTB" in result.output
    assert "FIRSTBANK" in result.output
