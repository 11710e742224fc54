"""Command-line interface for Stylify."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from stylify import __version__
from stylify.config import get_settings
from stylify.core.stylifier import get_stylifier
from stylify.errors import ConfigurationError
from stylify.formats import SUPPORTED_FORMATS, get_format

app = typer.Typer(
    name="stylify",
    help="Render inline emphasis markers (*bold*, _italic_, ~strike~) as styled text.",
    add_completion=False,
)
console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"Stylify v{__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Send stylify log records to the console through rich."""
    logger = logging.getLogger("stylify")
    logger.handlers.clear()
    logger.addHandler(
        RichHandler(console=console, show_time=False, show_path=False)
    )
    logger.setLevel(level.upper())


def read_input(text: Optional[str], file: Optional[Path]) -> Optional[str]:
    """Pick the input: the argument, else the file, else stdin."""
    if text is not None:
        return text
    if file is not None:
        return file.read_text(encoding="utf-8")
    if sys.stdin.isatty():
        return None
    return sys.stdin.read()


@app.command()
def main(
    text: Optional[str] = typer.Argument(
        None,
        help="Text to style (reads --file or stdin when omitted)",
    ),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-i",
        help="Read the text from a file",
        exists=True,
        dir_okay=False,
    ),
    format_name: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Output format: {', '.join(SUPPORTED_FORMATS)} (default: html)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the result to a file instead of stdout",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
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
    Style text containing inline emphasis markers.

    Examples:

        stylify "*bold* and _italic_"

        stylify "~gone~" --format ansi

        stylify --file notes.txt --format delta -o notes.json

        echo "*_both_*" | stylify -f spans
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2)

    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        output_format = get_format(format_name or settings.default_format)()
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        stylifier = get_stylifier()
    except ConfigurationError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2)

    try:
        source = read_input(text, file)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[red]Error reading {file}:[/red] {e}")
        raise typer.Exit(1)

    if source is None:
        console.print("[red]Error:[/red] No input given (pass TEXT, --file or pipe stdin)")
        raise typer.Exit(1)

    result = output_format.render(stylifier, source)

    if output is not None:
        output.write_text(result, encoding="utf-8")
        console.print(f"[green]Success:[/green] {output}")
    else:
        typer.echo(result, nl=not result.endswith("\n"))


if __name__ == "__main__":
    app()
