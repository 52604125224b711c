# ABOUTME: Rich table utilities for styled, colorful terminal displays
# ABOUTME: Provides pre-configured table generators for medals, countries, and logging status

from collections.abc import Iterable
from typing import Any

from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table

from podium_watch.core.models import MedalRecord
from podium_watch.core.registry import CountryRegistry

MEDAL_COLUMNS: list[tuple[str, str]] = [
    ("🥇 Gold", "bold yellow"),
    ("🥈 Silver", "bold white"),
    ("🥉 Bronze", "bold dark_orange3"),
    ("🏅 Total", "bold green"),
]

LOG_FILE_LABELS = {"main": "📝 Main Log", "json": "📊 JSON Log", "errors": "🚨 Error Log"}


def _base_table(title: str, title_style: str = "bold cyan", **options: Any) -> Table:
    return Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=ROUNDED,
        show_header=True,
        border_style="cyan",
        title_justify="left",
        **options,
    )


def create_listing_table(title: str, columns: list[tuple[str, str]], rows: Iterable[list[str]]) -> Table:
    """Create a full-width table with zebra striping, one row per item.

    Args:
        title: Table title with emoji
        columns: (header, style) pairs in display order
        rows: Cell text for each row, in display order

    Returns:
        Formatted Rich table ready for printing
    """
    table = _base_table(title, header_style="bold magenta", row_styles=["", "dim"], expand=True)
    for header, style in columns:
        table.add_column(header, style=style)
    for row in rows:
        table.add_row(*row)
    return table


def medal_row(record: MedalRecord) -> list[str]:
    """Label plus the four count badges, in gold/silver/bronze/total order."""
    return [f"{record.country.flag} {record.country.name}", *(str(count) for count in record.counts)]


def create_medal_table(records: list[MedalRecord]) -> Table:
    """Create the medal list table, one row per record in source order."""
    return create_listing_table(
        "🏟️ 2024 Summer Olympics Medal Table",
        [("Country", "bold cyan"), *MEDAL_COLUMNS],
        (medal_row(record) for record in records),
    )


def create_countries_table(registry: CountryRegistry) -> Table:
    return create_listing_table(
        f"🌍 Tracked Countries ({len(registry)})",
        [("Flag", "white"), ("Name", "bold cyan")],
        ([country.flag, country.name] for country in registry),
    )


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a two-column logging configuration status table.

    Log files that are not in use (production mode) are left out.
    """
    table = _base_table("🔍 Logging Configuration", title_style="bold green", header_style="bold magenta")
    table.add_column("Setting", style="blue")
    table.add_column("Value", style="white")

    table.add_row("🔧 Mode", status["mode"].title())
    table.add_row("📁 Log Directory", status["log_directory"] or "N/A (production mode)")
    table.add_row("🔇 Suppressed Libraries", ", ".join(status["third_party_suppressed"]))
    for key, label in LOG_FILE_LABELS.items():
        path = status["log_files"].get(key)
        if path:
            table.add_row(label, path)

    return table


def print_rich_table(console: Console, table: Table) -> None:
    """Print a table with a blank line either side."""
    console.print()
    console.print(table)
    console.print()
