# ABOUTME: Rich table utilities for styled, colorful CLI displays
# ABOUTME: Provides pre-configured table generators for datasets, run summaries and logging status

from collections.abc import Sequence
from typing import Any

from rich.box import ROUNDED, SIMPLE
from rich.console import Console
from rich.table import Table

from rocket_lineups.core.models import InvasionRecord


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a key-value table.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, no_wrap=False)
    table.add_column("Value", style=value_style, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_multi_column_table(
    title: str,
    columns: list[tuple[str, str]],
    rows: list[list[str]],
    title_style: str = "bold cyan",
    header_style: str = "bold magenta",
    alternate_row_styles: list[str] | None = None,
    box_style=ROUNDED,
) -> Table:
    """Create a multi-column table with zebra striping."""
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style=header_style,
        border_style="cyan",
        title_justify="left",
        row_styles=alternate_row_styles or ["", "dim"],
        expand=True,
    )

    for name, style in columns:
        table.add_column(name, style=style)

    for row in rows:
        table.add_row(*row)

    return table


def _format_slot(record: InvasionRecord, slot_number: int) -> str:
    names = []
    for entry in record.lineup:
        if entry.slot_number != slot_number:
            continue
        marks = ("✨" if entry.shiny_available else "") + ("🎯" if entry.catchable else "")
        names.append(f"{entry.display_name}{marks}")
    return ", ".join(names) or "-"


def create_invasion_table(records: Sequence[InvasionRecord], title: str = "🚀 Rocket Invasions") -> Table:
    """Create a table listing each adversary and its three lineup slots.

    ✨ marks shiny-capable entries and 🎯 marks catchable ones.
    """
    columns = [
        ("#", "cyan"),
        ("Category", "bold magenta"),
        ("Quote", "white"),
        ("Slot 1", "green"),
        ("Slot 2", "yellow"),
        ("Slot 3", "red"),
    ]

    rows = []
    for index, record in enumerate(records, start=1):
        quote = record.quote[:50] + "..." if len(record.quote) > 50 else record.quote
        category = f"⭐ {record.category}" if record.is_special else record.category
        rows.append(
            [
                str(index),
                category,
                quote or "[dim]-[/dim]",
                _format_slot(record, 1),
                _format_slot(record, 2),
                _format_slot(record, 3),
            ]
        )

    return create_multi_column_table(title=title, columns=columns, rows=rows)


def create_run_summary_table(records: Sequence[InvasionRecord], written: Sequence[Any]) -> Table:
    """Create a summary of a finished extraction run."""
    summary_data = {
        "🚀 Invasions": str(len(records)),
        "⭐ Leaders & Boss": str(sum(1 for record in records if record.is_special)),
        "👾 Lineup Entries": str(sum(len(record.lineup) for record in records)),
        "✨ Shiny-capable": str(sum(1 for record in records for entry in record.lineup if entry.shiny_available)),
        "💾 Files": "\n".join(str(path) for path in written) or "None",
    }

    return create_key_value_table(
        title="🔄 Extraction Summary",
        data=summary_data,
        title_style="bold green",
        key_style="cyan",
        value_style="white",
        box_style=SIMPLE,
    )


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table.

    Args:
        status: Logging status dictionary

    Returns:
        Styled logging configuration table
    """
    logging_data = {
        "🔧 Mode": status["mode"].title(),
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "🔇 Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }

    if status["log_files"]["main"]:
        logging_data["📝 Main Log"] = status["log_files"]["main"]
    if status["log_files"]["json"]:
        logging_data["📊 JSON Log"] = status["log_files"]["json"]
    if status["log_files"]["errors"]:
        logging_data["🚨 Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing."""
    console.print()
    console.print(table)
    console.print()
