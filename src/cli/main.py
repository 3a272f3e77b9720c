"""moodjournal command line entry point."""

import sys

import click
from rich.console import Console

from cli.commands import journal, legend, score, stats
from cli.config import load_config_model
from cli.logging_config import setup_logging

console = Console()


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON lines")
def cli(verbose: bool, json_logs: bool):
    """Mood journal - write, get a mood score and summary, watch the trend."""
    try:
        config = load_config_model()
    except ValueError as e:
        console.print(f"[red]Config error:[/] {e}")
        sys.exit(1)

    setup_logging(
        json_mode=json_logs,
        level="DEBUG" if verbose else config.logging.level,
        log_file=config.paths.log_file,
        file_level=config.logging.file_level,
    )


cli.add_command(journal)
cli.add_command(score)
cli.add_command(stats)
cli.add_command(legend)


if __name__ == "__main__":
    cli()
