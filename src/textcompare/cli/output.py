"""Terminal output helpers for the textcompare CLI."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/textcompare/cli/output.py
import sys
from typing import IO, Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from textcompare.diff.models import ComparisonResult
from textcompare.diff.renderers.text import TextDiffRenderer, statistics_rows

_OPERATION_STYLES = {
    "+": "green",
    "-": "red",
    "~": "yellow",
}


def _isatty(stream: IO[Any] | None) -> bool:
    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def should_use_rich_output(rich: bool, force_rich: bool = False, stream: IO[Any] | None = None) -> bool:
    """Determine whether rich output should be used.

    Rich output is used when it was requested and either ``force_rich`` is
    set or the stream is a terminal.
    """
    if not rich:
        return False
    if force_rich:
        return True
    return _isatty(stream)


def should_use_color(color_mode: str, writing_to_file: bool, stream: IO[Any] | None = None) -> bool:
    """Resolve ``--color`` into a yes/no decision.

    Files never receive colour codes. ``auto`` colours only terminals.
    """
    if writing_to_file or color_mode == "never":
        return False
    if color_mode == "always":
        return True
    return _isatty(stream)


def build_statistics_table(result: ComparisonResult) -> Table:
    """Build a rich table holding the six statistics fields."""
    table = Table(title="Statistics", show_header=False, title_justify="left")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    for label, value in statistics_rows(result.statistics):
        table.add_row(label, value)
    return table


def render_rich_report(result: ComparisonResult, console: Console, stats_only: bool = False) -> None:
    """Print a comparison to a rich console.

    Parameters
    ----------
    result : ComparisonResult
        The comparison to display
    console : Console
        Destination console
    stats_only : bool, default False
        If True, only the statistics table is printed

    """
    console.print(build_statistics_table(result))
    if stats_only:
        return

    if not result.has_changes:
        console.print("[dim]No differences found.[/dim]")
        return

    console.print()
    renderer = TextDiffRenderer()
    for op in result.diffs:
        for line in renderer.format_operation(op):
            marker = line.lstrip()[:1]
            console.print(Text(line, style=_OPERATION_STYLES.get(marker, "")))


def format_plain_statistics(result: ComparisonResult) -> str:
    """Return the statistics block as plain text lines."""
    return "\n".join(f"{label}: {value}" for label, value in statistics_rows(result.statistics))
