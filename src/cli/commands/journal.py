"""Journal CLI commands."""

import asyncio
import sys

import click
import structlog
from rich.console import Console
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from cli.utils import get_components
from observability import log_run_summary

console = Console()
logger = structlog.get_logger()


@click.group()
def journal():
    """Write, list and delete journal entries."""


@journal.command("add")
@click.argument("content", required=False)
def journal_add(content: str):
    """Add new journal entry. Opens editor if no content provided."""
    if not content:
        content = click.edit("")
    if not content or not content.strip():
        console.print("[yellow]No content provided, cancelled.[/]")
        return

    c = get_components()

    try:
        with console.status("Summarizing..."):
            entry = asyncio.run(c["service"].save(content))
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    band = entry.category
    console.print(
        Panel(
            f"{band.emoji}  [bold]{entry.mood_value:.1f}[/] {band.label}\n\n{entry.summary}",
            title="Saved",
            subtitle=entry.id,
        )
    )
    log_run_summary()


@journal.command("list")
@click.option("-n", "--limit", default=20, help="Max entries to show")
def journal_list(limit: int):
    """List entries, newest first."""
    c = get_components()
    entries = list(reversed(c["service"].snapshot()))[:limit]

    if not entries:
        console.print("[yellow]No notes yet. Add one with: moodjournal journal add[/]")
        return

    table = Table(show_header=True)
    table.add_column("Date", style="dim")
    table.add_column("Mood")
    table.add_column("Value", justify="right")
    table.add_column("Summary")
    table.add_column("ID", style="dim")

    for entry in entries:
        table.add_row(
            entry.timestamp.strftime("%Y-%m-%d"),
            entry.category.emoji,
            f"{entry.mood_value:.1f}",
            entry.summary[:50],
            entry.id,
        )

    console.print(table)


@journal.command("show")
@click.argument("entry_id")
def journal_show(entry_id: str):
    """Show a single entry in full."""
    c = get_components()
    try:
        entry = c["service"].get(entry_id)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    if entry is None:
        console.print(f"[red]Entry not found:[/] {entry_id}")
        sys.exit(1)

    band = entry.category
    console.print(
        f"{band.emoji}  [bold]{entry.mood_value:.1f}[/]  "
        f"[dim]{entry.timestamp.strftime('%B %d, %Y')}[/]"
    )
    console.print(f"[italic]{band.description}[/]\n")
    console.print(f"[bold]{entry.summary}[/]")
    console.print(Rule())
    console.print(entry.text)


@journal.command("delete")
@click.argument("entry_id")
@click.option("-y", "--yes", is_flag=True, help="Skip confirmation")
def journal_delete(entry_id: str, yes: bool):
    """Delete an entry."""
    c = get_components()
    if not yes:
        click.confirm(f"Delete {entry_id}?", abort=True)

    try:
        deleted = c["service"].delete(entry_id)
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    if deleted:
        console.print(f"[green]Deleted[/] {entry_id}")
    else:
        console.print(f"[red]Entry not found:[/] {entry_id}")
        sys.exit(1)
