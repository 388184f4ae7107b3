"""Command-line interface for Column Press."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from column_press import __version__
from column_press.config import JobError, load_job, load_settings
from column_press.core.composer import CompositionError, DocumentComposer

app = typer.Typer(
    name="column-press",
    help="Lay out HTML-styled articles as two-column paginated PDFs.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Column Press v{__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Route library logging through rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def generate_output_path(job_path: Path, output_dir: Optional[Path] = None) -> Path:
    """Default output path: the job file name with a .pdf suffix."""
    output_name = f"{job_path.stem}.pdf"

    if output_dir:
        return output_dir / output_name
    return job_path.parent / output_name


@app.command()
def main(
    job_file: Path = typer.Argument(
        ...,
        help="JSON job file describing the document",
        exists=True,
        dir_okay=False,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output PDF path (overrides the job's outputFile)",
    ),
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        help="Read COLUMN_PRESS_* settings from this .env file",
        exists=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Build a two-column PDF from a JSON job file.

    Examples:

        python press.py article.json

        python press.py article.json --output out/article.pdf

        python press.py article.json --env-file press.env
    """
    settings = load_settings(env_file)
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        job = load_job(job_file)
        output_path = output or job.output_file or generate_output_path(job_file)

        if verbose:
            console.print(f"[blue]Job:[/blue] {job_file}")
            console.print(f"[blue]Output:[/blue] {output_path}")

        result = DocumentComposer(settings=settings).compose_file(job, output_path)
    except (JobError, CompositionError) as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)

    console.print(f"[green]Success:[/green] {output_path} ({result.pages} pages)")


if __name__ == "__main__":
    app()
