"""Command-line interface for the hiring pipeline interpreter."""

import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from hiring.config.settings import get_settings
from hiring.logging_config import configure_logging
from hiring.models import PipelineStats
from hiring.runner import HiringRunError, is_error_response, run_hiring

app = typer.Typer(
    name="hiring",
    help="Hiring pipeline - Interpret stage, applicant and decision command files",
    add_completion=False,
)
console = Console()


@app.command()
def run(
    input_file: Path = typer.Argument(
        None,
        help="Command file to process (default: HIRING_INPUT_FILE or input.txt)",
        dir_okay=False,
    ),
    output: Path = typer.Option(
        None,
        "--output",
        "-o",
        help="Transcript output path (default: HIRING_OUTPUT_FILE or output.txt)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """Process a command file and write one response per line."""
    settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    input_file = input_file or settings.input_file
    output = output or settings.output_file

    try:
        result = run_hiring(input_file, output, encoding=settings.encoding)
    except HiringRunError as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    _display_stats(result.stats)
    if result.error_count:
        console.print(f"[yellow]Invalid commands:[/yellow] {result.error_count} of {result.lines_processed}")

    console.print(f"Hiring Complete. Please check {escape(str(output))}")


@app.command()
def check(
    input_file: Path = typer.Argument(
        ...,
        help="Command file to dry-run",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
) -> None:
    """Dry-run a command file and show each line's response without writing output."""
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        result = run_hiring(input_file, None, encoding=settings.encoding)
    except HiringRunError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    for number, response in enumerate(result.responses, 1):
        style = "red" if is_error_response(response) else "green"
        console.print(f"[dim]{number:>4}[/dim] [{style}]{escape(response)}[/{style}]", highlight=False)

    if result.error_count:
        console.print(f"\n[red]{result.error_count} invalid command(s)[/red]")
        sys.exit(1)

    console.print("\n[green]All commands valid.[/green]")


@app.command()
def info() -> None:
    """Display version and configuration."""
    from hiring import __version__

    settings = get_settings()

    console.print(
        Panel.fit(
            "[bold blue]Hiring Pipeline Interpreter[/bold blue]",
            border_style="blue",
        )
    )

    table = Table(show_header=False, box=None)
    table.add_column("Setting", style="dim")
    table.add_column("Value")

    table.add_row("Version", __version__)
    table.add_row("Input File", str(settings.input_file))
    table.add_row("Output File", str(settings.output_file))
    table.add_row("Encoding", settings.encoding)
    table.add_row("Log Level", settings.log_level)

    console.print(table)


def _display_stats(stats: PipelineStats) -> None:
    """Display the final pipeline counts.

    Args:
        stats: Stats from the finished run.
    """
    table = Table(title="Pipeline Summary", show_header=True)
    table.add_column("Stage")
    table.add_column("Applicants", justify="right")

    for stage in stats.stages:
        table.add_row(escape(stage.stage), str(stage.count))
    table.add_row("[green]Hired[/green]", str(stats.hired))
    table.add_row("[red]Rejected[/red]", str(stats.rejected))
    table.add_row("[dim]In Progress[/dim]", str(stats.in_progress))

    console.print(table)


if __name__ == "__main__":
    app()
