#!/usr/bin/env python3
"""
Bank Statement Analyzer CLI
"""
import json
import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from api.v1.dependencies import get_analyze_use_case
from config import settings
from domain.exceptions import StatementParseError
from infrastructure.analysis.report import format_currency
from infrastructure.parsing import BANK_LINE_FORMATS, LEDGER_LAYOUTS

console = Console()


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


@click.group()
@click.version_option(version=settings.SERVICE_VERSION)
@click.option("--verbose", "-v", is_flag=True, help="Log parser decisions")
def cli(verbose: bool):
    """
    🏦 Bank Statement Analyzer - Summarize income, expenses and savings

    Reads statement text, JSON transaction arrays or the simple
    "YYYY-MM-DD: Category - Description, ₦Amount" format.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else settings.LOG_LEVEL)


@cli.command()
@click.argument("source", default="-")
@click.option("--top-n", "-n", type=click.IntRange(0, 50), default=None,
              help="Number of top expense categories")
@click.option("--json", "as_json", is_flag=True, help="Print the raw result as JSON")
def analyze(source: str, top_n: Optional[int], as_json: bool):
    """
    Analyze a statement file (or stdin).

    Example:
        bank-analyzer analyze statement.txt --top-n 3
    """
    try:
        result = get_analyze_use_case().execute_with_trend(_read_input(source), top_n=top_n)
    except (StatementParseError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        sys.exit(1)

    if as_json:
        data = result.to_dict()
        data["spendingTrend"] = result.spending_trend.value if result.spending_trend else None
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return

    table = Table(title="Statement Summary", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_row("Total Income", format_currency(result.total_income))
    table.add_row("Total Expenses", format_currency(result.total_expenses))
    table.add_row("Net Balance", format_currency(result.net_balance))
    table.add_row("Spending Trend", str(result.spending_trend))
    console.print(table)

    if result.top_categories:
        categories = Table(title="Top Spending Categories", show_header=True)
        categories.add_column("Category", style="cyan")
        categories.add_column("Total", style="magenta", justify="right")
        for item in result.top_categories:
            categories.add_row(item.category, format_currency(item.total))
        console.print(categories)

    console.print(Panel(result.summary, title="Analysis Result", border_style="green"))


@cli.command()
@click.argument("source", default="-")
def parse(source: str):
    """
    Parse a statement into transactions without analyzing it.

    Example:
        bank-analyzer parse statement.txt
    """
    try:
        transactions = get_analyze_use_case().parse(_read_input(source))
    except (StatementParseError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        sys.exit(1)

    table = Table(title=f"Transactions ({len(transactions)})", show_header=True)
    table.add_column("Date", style="cyan")
    table.add_column("Description")
    table.add_column("Category", style="green")
    table.add_column("Amount", justify="right")

    for tx in transactions:
        style = "green" if tx.amount > 0 else "red"
        table.add_row(
            tx.date or "",
            tx.description or "",
            tx.category or "",
            f"[{style}]{format_currency(tx.amount)}[/{style}]"
        )

    console.print(table)


@cli.command()
def info():
    """
    Show supported statement formats.
    """
    console.print(Panel.fit(
        "[bold cyan]🏦 Bank Statement Analyzer[/bold cyan]\n"
        "Income, expense and savings analysis for bank statements",
        border_style="cyan"
    ))

    table = Table(title="Single-line Formats", show_header=True)
    table.add_column("Code", style="cyan")
    table.add_column("Bank Name", style="green")
    for line_format in BANK_LINE_FORMATS:
        table.add_row(line_format.code, line_format.name)
    console.print(table)

    table = Table(title="Ledger Statements", show_header=True)
    table.add_column("Code", style="cyan")
    table.add_column("Bank Name", style="green")
    for layout in LEDGER_LAYOUTS:
        table.add_row(layout.code, layout.name)
    console.print(table)


@cli.command()
def serve():
    """
    Run the HTTP API.
    """
    from main import run
    run()


if __name__ == '__main__':
    cli()
