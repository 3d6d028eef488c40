"""CLI application entry point for bdfedit.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from bdfedit import __version__
from bdfedit.cli.output import (
    console,
    print_error,
    print_font_info,
    print_glyph,
    print_glyph_table,
    print_header,
    print_properties,
    print_step,
    print_success,
)
from bdfedit.config import BdfEditSettings, LoggingConfig
from bdfedit.core import FontEditor, new_font
from bdfedit.domain import Font, Glyph
from bdfedit.exceptions import FontLoadError, FontSaveError, FormatError, GlyphNotFoundError
from bdfedit.io import FontReader, FontWriter
from bdfedit.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="bdfedit",
    help="Inspect, normalize and create BDF bitmap fonts.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]bdfedit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect, normalize and create BDF bitmap fonts."""
    settings = BdfEditSettings(
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "WARNING",
        ),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    ctx.obj = {"settings": settings, "quiet": quiet}


def _load_font(font_path: Path) -> Font:
    """Load a font, exiting with a message on failure."""
    if not font_path.is_file():
        print_error(
            f"Input file not found: {font_path}",
            details=f"The file '{font_path}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    try:
        return FontReader(font_path).load()
    except FormatError as e:
        print_error(f"Could not parse font: {e}")
        raise typer.Exit(code=1)
    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)


def _save_font(font: Font, output_path: Path) -> None:
    """Save a font, exiting with a message on failure."""
    try:
        FontWriter(font, output_path).save()
    except FontSaveError as e:
        print_error(f"Could not save font: {e.reason}")
        raise typer.Exit(code=1)


def _select_glyph(font: Font, selector: str) -> Glyph:
    """Find a glyph by name, or by encoding when written as ``#<code>``.

    Raises:
        GlyphNotFoundError: If no glyph matches
    """
    editor = FontEditor(font)
    glyph: Glyph | None = None
    if selector.startswith("#") and selector[1:].lstrip("-").isdigit():
        glyph = editor.find_by_encoding(int(selector[1:]))
    if glyph is None:
        glyph = editor.find_by_name(selector)
    if glyph is None:
        raise GlyphNotFoundError(selector)
    return glyph


@app.command()
def info(
    ctx: typer.Context,
    input_font: Annotated[
        Path,
        typer.Argument(help="Path to input BDF font file", show_default=False),
    ],
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Show at most this many glyphs", min=0),
    ] = None,
) -> None:
    """Show the font header, properties and glyph list."""
    quiet = ctx.obj["quiet"]
    if not quiet:
        print_header(__version__)

    font = _load_font(input_font)
    print_font_info(str(input_font), font)

    print_step("Properties")
    print_properties(font)

    print_step("Glyphs")
    print_glyph_table(font.glyphs, limit=limit)


@app.command()
def show(
    input_font: Annotated[
        Path,
        typer.Argument(help="Path to input BDF font file", show_default=False),
    ],
    glyph: Annotated[
        str,
        typer.Argument(help="Glyph name, or #<encoding> (e.g. #65)", show_default=False),
    ],
) -> None:
    """Print one glyph's metrics and bitmap."""
    font = _load_font(input_font)
    try:
        selected = _select_glyph(font, glyph)
    except GlyphNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_glyph(selected)


@app.command()
def normalize(
    ctx: typer.Context,
    input_font: Annotated[
        Path,
        typer.Argument(help="Path to input BDF font file", show_default=False),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-normalized.bdf)",
        ),
    ] = None,
) -> None:
    """Rewrite a font in canonical form.

    Unknown header lines are dropped, missing fields are defaulted and every
    bitmap is padded or cut to its glyph's bounding box.
    """
    quiet = ctx.obj["quiet"]
    if not quiet:
        print_header(__version__)
        print_step("Loading font")

    font = _load_font(input_font)
    output_path = output if output is not None else FontWriter.get_normalized_path(input_font)

    if not quiet:
        print_font_info(str(input_font), font)
        print_step("Writing")

    _save_font(font, output_path)

    if not quiet:
        print_success(str(output_path), len(font.glyphs))


@app.command()
def new(
    ctx: typer.Context,
    output: Annotated[
        Path,
        typer.Argument(help="Path of the font file to create", show_default=False),
    ],
    name: Annotated[
        str,
        typer.Option("--name", help="Font name"),
    ] = "NewFont",
    width: Annotated[
        int,
        typer.Option("--width", help="Cell width in pixels", min=1, max=1024),
    ] = 8,
    height: Annotated[
        int,
        typer.Option("--height", help="Cell height in pixels", min=1, max=1024),
    ] = 16,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Create an empty font holding a blank space glyph."""
    quiet = ctx.obj["quiet"]
    if output.exists() and not force:
        print_error(
            f"Output file already exists: {output}",
            details="Use --force to overwrite it.",
        )
        raise typer.Exit(code=1)

    settings: BdfEditSettings = ctx.obj["settings"]
    config = settings.new_font.model_copy(update={"name": name, "width": width, "height": height})
    font = new_font(config)

    _save_font(font, output)

    if not quiet:
        print_success(str(output), len(font.glyphs))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
