"""Mood preview, window statistics and legend commands."""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from cli.utils import get_components
from mood.chart import axis_labels, legend as chart_legend
from shared_types import ChartWindow, TrendDirection

console = Console()

TREND_STYLE = {
    TrendDirection.UP: ("green", "↗"),
    TrendDirection.DOWN: ("red", "↘"),
    TrendDirection.NEUTRAL: ("yellow", "→"),
}


@click.command()
@click.argument("text")
def score(text: str):
    """Preview the mood score of TEXT without saving it."""
    c = get_components()
    reading = c["service"].preview(text)
    band = reading.category
    console.print(f"{band.emoji}  [bold]{reading.display_value:.1f}[/]  {band.label}")
    console.print(f"[dim]{band.description}[/]")


@click.command()
@click.option(
    "-w",
    "--window",
    type=click.Choice([w.value for w in ChartWindow]),
    default=None,
    help="Time window (defaults to config)",
)
def stats(window: Optional[str]):
    """Average mood and trend for the last week or month."""
    c = get_components()
    window = window or c["config_model"].stats.default_window
    result = c["service"].stats(window)

    if not result.entries:
        console.print("[yellow]No data available. Add notes to see your progress.[/]")
        return

    color, arrow = TREND_STYLE[result.trend]
    console.print(
        f"{result.average_band.emoji}  [bold]Average mood:[/] {result.average:.2f}   "
        f"[{color}]{arrow} {result.trend.text}[/]   [dim]{result.count} items[/]"
    )

    table = Table(title=f"Mood trend - last {result.window.value}", show_header=True)
    table.add_column("Date", style="dim")
    table.add_column("Mood")
    table.add_column("Value", justify="right")
    table.add_column("", min_width=10)

    for entry in result.entries:
        table.add_row(
            entry.timestamp.strftime("%d %b"),
            entry.category.emoji,
            f"{entry.mood_value:.1f}",
            "█" * round(entry.mood_value),
        )

    console.print(table)
    console.print(
        "[dim]Axis:[/] " + "  ".join(f"{tick:g}={emoji}" for tick, emoji in axis_labels())
    )


@click.command()
def legend():
    """Show what each mood emoji means on the 0-10 scale."""
    table = Table(title="Legend", show_header=True)
    table.add_column("Mood")
    table.add_column("Range")
    table.add_column("Label")

    for item in chart_legend():
        table.add_row(item.emoji, item.range_label, item.label)

    console.print(table)
