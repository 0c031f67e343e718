from __future__ import annotations
from datetime import timedelta
from typing import Iterable, Optional
import logging

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from .api import LibraNet
from .config import settings
from .report import describe_added, describe_borrow, describe_return
from .seed import demo_items, seed_demo_data

app = typer.Typer(help="LibraNet lending ledger")
console = Console(soft_wrap=True)


@app.callback()
def _global_options(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (default: LIBRANET_LOG_LEVEL or WARNING)",
    )
):
    """LibraNet command line."""
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_lines(lines: Iterable[str]) -> None:
    for line in lines:
        console.print(escape(line))


def _print_section(title: str, lines: Iterable[str]) -> None:
    console.print(Panel.fit(escape(title), style="bold"))
    _print_lines(lines)


@app.command("catalog")
def cli_catalog():
    """Print the demo catalog."""
    ledger = LibraNet()
    seed_demo_data(ledger)
    _print_section("LibraNet Catalog", ledger.list_all_items())


@app.command("demo")
def cli_demo(
    fine_rate: Optional[float] = typer.Option(
        None, "--fine-rate", "-f", help="Fine per overdue day"
    ),
):
    """Populate the catalog, lend and return a few items, and show the results."""
    ledger = LibraNet(fine_per_day=fine_rate)
    today = ledger.today()

    console.print(Panel.fit("Populating the Library", style="bold"))
    for item in demo_items():
        ledger.add_item(item)
        _print_lines([describe_added(item)])

    _print_section("LibraNet Catalog", ledger.list_all_items())

    console.print(Panel.fit("Borrowing Items", style="bold"))
    _print_lines([
        describe_borrow(ledger.borrow_item(115, 7)),
        # started 25 days ago, so already five days late
        describe_borrow(ledger.borrow_item(210, 20, today - timedelta(days=25))),
        describe_borrow(ledger.borrow_item(310, 10)),
    ])
    _print_section("Borrowed Items", ledger.list_borrowed_items())

    console.print(Panel.fit("Returning Items", style="bold"))
    _print_lines(describe_return(ledger.return_item(115)))
    _print_lines(describe_return(ledger.return_item(210)))

    console.print(Panel.fit("Testing Error Case", style="bold"))
    _print_lines(describe_return(ledger.return_item(110)))

    _print_section("Borrowed Items", ledger.list_borrowed_items())
    _print_section("LibraNet Catalog", ledger.list_all_items())


if __name__ == "__main__":
    app()
