"""
Command-line interface for the receipt engine.

Provides subcommands for printing a receipt, replaying the sample
baskets, and showing the tax rates in force.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich import box

from receipt_engine.basket import Receipt, build_basket
from receipt_engine.errors import ReceiptError
from receipt_engine.rates import DEFAULT_CONFIG
from receipt_engine.report_generator import ReportGenerator

console = Console()

SAMPLE_BASKETS: list[tuple[str, list[str]]] = [
    (
        "Output 1:",
        [
            "1 book at 12.49",
            "1 music CD at 14.99",
            "1 chocolate bar at 0.85",
        ],
    ),
    (
        "Output 2:",
        [
            "1 imported box of chocolates at 10.00",
            "1 imported bottle of perfume at 47.50",
        ],
    ),
    (
        "Output 3:",
        [
            "1 imported bottle of perfume at 27.99",
            "1 bottle of perfume at 18.99",
            "1 packet of headache pills at 9.75",
            "1 box of imported chocolates at 11.25",
        ],
    ),
]


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _load_descriptions(path: str) -> list[str]:
    """
    Read item descriptions from a text file, one per line.

    Blank lines and lines starting with '#' are skipped.
    """
    file_path = Path(path)
    if not file_path.exists():
        console.print(f"[red]File not found: {escape(path)}[/red]")
        sys.exit(1)

    descriptions: list[str] = []
    with open(file_path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                descriptions.append(line)
    return descriptions


def _print_receipt(receipt: Receipt) -> None:
    console.print(receipt.format_text(), markup=False, highlight=False, soft_wrap=True)


def _print_table(receipt: Receipt) -> None:
    table = Table(title=receipt.header or "Receipt", box=box.ROUNDED)
    table.add_column("Qty", justify="right")
    table.add_column("Item")
    table.add_column("Imported", justify="center")
    table.add_column("Cost", justify="right")
    table.add_column("Tax", justify="right")
    table.add_column("Total", justify="right", style="bold")

    for item in receipt.items:
        table.add_row(
            str(item.quantity),
            escape(item.name),
            "Y" if item.is_imported else "",
            f"{item.cost:.2f}",
            f"{item.tax_amount:.2f}",
            f"{item.total_cost:.2f}",
        )
    console.print(table)
    console.print(f"[bold]Sales Taxes:[/bold] {receipt.sales_taxes:.2f}")
    console.print(f"[bold]Total:[/bold] {receipt.total:.2f}")


# -----------------------------------------------------------------------
# Subcommand: receipt
# -----------------------------------------------------------------------


def cmd_receipt(args: argparse.Namespace) -> None:
    """Print the receipt for items given on the command line or in a file."""
    descriptions = list(args.items)
    if args.file:
        descriptions.extend(_load_descriptions(args.file))
    if not descriptions:
        console.print("[red]Provide item descriptions or --file[/red]")
        sys.exit(1)

    receipt = build_basket(descriptions).receipt(args.header or "")

    if args.table:
        _print_table(receipt)
    else:
        _print_receipt(receipt)

    if args.export_json or args.export_csv:
        rg = ReportGenerator(args.output_dir)
        report = rg.receipt_report(receipt)
        if args.export_json:
            rg.to_json(report, args.export_json)
            console.print(f"[green]JSON exported to {escape(args.export_json)}[/green]")
        if args.export_csv:
            rg.to_csv(report, args.export_csv)
            console.print(f"[green]CSV exported to {escape(args.export_csv)}[/green]")


# -----------------------------------------------------------------------
# Subcommand: demo
# -----------------------------------------------------------------------


def cmd_demo(args: argparse.Namespace) -> None:
    """Print the receipts for the three sample baskets."""
    for i, (header, descriptions) in enumerate(SAMPLE_BASKETS):
        if i:
            console.print()
        _print_receipt(build_basket(descriptions).receipt(header))


# -----------------------------------------------------------------------
# Subcommand: rates
# -----------------------------------------------------------------------


def cmd_rates(args: argparse.Namespace) -> None:
    """Display the tax rates and exempt categories."""
    config = DEFAULT_CONFIG
    table = Table(title="Tax Rates", box=box.ROUNDED)
    table.add_column("Tax", style="bold")
    table.add_column("Rate", justify="right")
    table.add_row("Sales tax", f"{config.sales_tax_rate:.0%}")
    table.add_row("Import duty", f"{config.import_tax_rate:.0%}")
    console.print(table)

    exempt = Table(title="Exempt from Sales Tax", box=box.SIMPLE)
    exempt.add_column("Item")
    for name in sorted(config.exempt_categories):
        exempt.add_row(name)
    console.print(exempt)


# -----------------------------------------------------------------------
# Argument parser
# -----------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="receipt-engine",
        description="Receipt Engine - price a shopping basket with sales tax and import duty",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # receipt
    receipt_p = subparsers.add_parser("receipt", help="Print a receipt")
    receipt_p.add_argument(
        "items",
        nargs="*",
        help='Item descriptions, e.g. "1 music CD at 14.99"',
    )
    receipt_p.add_argument("--file", "-f", help="Text file with one item per line")
    receipt_p.add_argument("--header", help="Line printed above the receipt")
    receipt_p.add_argument(
        "--table", "-t", action="store_true", help="Render as a table"
    )
    receipt_p.add_argument("--export-json", help="Export receipt to JSON file")
    receipt_p.add_argument("--export-csv", help="Export line items to CSV file")
    receipt_p.add_argument("--output-dir", help="Output directory for exports")
    receipt_p.set_defaults(func=cmd_receipt)

    # demo
    demo_p = subparsers.add_parser("demo", help="Print the sample receipts")
    demo_p.set_defaults(func=cmd_demo)

    # rates
    rates_p = subparsers.add_parser("rates", help="View tax rates")
    rates_p.set_defaults(func=cmd_rates)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(0)

    _configure_logging(args.verbose)

    try:
        args.func(args)
    except ReceiptError as e:
        console.print(f"[red]Invalid item: {escape(str(e))}[/red]")
        sys.exit(1)
