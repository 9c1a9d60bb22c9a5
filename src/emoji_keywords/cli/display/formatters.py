"""Display formatters and UI helpers for CLI."""

from typing import List, Tuple

from rich.console import Console
from rich.table import Table

from ...models import ConversionSummary

console = Console()


def display_conversion_summary(summary: ConversionSummary) -> None:
    """Display summary of a conversion run.

    Args:
        summary: Statistics returned by the conversion service
    """
    console.print(
        f"\n[bold green]✓ Converted file created: {summary.output_path}[/bold green]\n"
    )

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="green", justify="right")

    table.add_row("Total entries in emoji file", str(summary.total_entries))
    table.add_row("Entries with keywords added", str(summary.entries_with_keywords))
    table.add_row("Entries without keywords", str(summary.entries_without_keywords))
    table.add_row("Keyword source entries", str(summary.keyword_entries))
    table.add_row("Distinct keyword signatures", str(summary.table_size))
    table.add_row("Coverage", f"{summary.coverage:.1f}%")

    console.print(table)
    console.print()


def display_signatures(rows: List[Tuple[str, str]]) -> None:
    """Display input values next to their signatures.

    Args:
        rows: Pairs of (input value, signature)
    """
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Input", style="cyan")
    table.add_column("Signature", style="green")

    for value, signature in rows:
        table.add_row(value, signature or "[red]invalid[/red]")

    console.print(table)
