"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from bdfedit.codec.fields import format_property_value
from bdfedit.domain import Font, Glyph

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

PIXEL_ON = "#"
PIXEL_OFF = "."


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]bdfedit[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, font: Font) -> None:
    """Print font header information.

    Args:
        font_path: Path to the font file
        font: Parsed font
    """
    # Use Text to safely handle names with brackets
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" (BDF {font.version})")
    console.print(line1)

    line2 = Text("  ")
    line2.append(font.name, style="bold")
    console.print(line2)

    box = font.bounding_box
    console.print(
        f"  {len(font.glyphs):,} glyphs {SYM_DOT} {font.size.point}pt "
        f"{font.size.xres}x{font.size.yres} dpi {SYM_DOT} "
        f"cell {box.width}x{box.height}{box.xoff:+d}{box.yoff:+d}"
    )


def print_properties(font: Font) -> None:
    """Print the font properties as a two-column table."""
    if not font.properties:
        console.print("  No properties")
        return

    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Property")
    table.add_column("Value")
    for key, value in font.properties.items():
        table.add_row(Text(key), Text(format_property_value(value)))
    console.print(table)


def print_glyph_table(glyphs: list[Glyph], limit: int | None = None) -> None:
    """Print one row per glyph with its metrics.

    Args:
        glyphs: Glyphs to list
        limit: Maximum rows to print (None = all)
    """
    shown = glyphs if limit is None else glyphs[:limit]
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Encoding", justify="right")
    table.add_column("Name")
    table.add_column("BBX")
    table.add_column("DWIDTH", justify="right")
    table.add_column("Ink", justify="right")

    for idx, glyph in enumerate(shown):
        bbx = glyph.bbx
        table.add_row(
            str(idx),
            str(glyph.encoding),
            Text(glyph.name or "(unnamed)"),
            f"{bbx.width}x{bbx.height}{bbx.xoff:+d}{bbx.yoff:+d}",
            str(glyph.dwidth_x),
            str(glyph.ink_count()),
        )
    console.print(table)

    if len(shown) < len(glyphs):
        console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(glyphs) - len(shown)} more)")


def render_bitmap_rows(glyph: Glyph) -> list[str]:
    """Render a glyph bitmap as text rows of PIXEL_ON/PIXEL_OFF."""
    return ["".join(PIXEL_ON if bit else PIXEL_OFF for bit in row) for row in glyph.bitmap]


def print_glyph(glyph: Glyph) -> None:
    """Print a glyph's metrics followed by its bitmap."""
    bbx = glyph.bbx
    title = Text("  ")
    title.append(glyph.name or "(unnamed)", style="bold")
    title.append(f" {SYM_DOT} encoding {glyph.encoding}")
    console.print(title)
    console.print(
        f"  BBX {bbx.width} {bbx.height} {bbx.xoff} {bbx.yoff} {SYM_DOT} "
        f"DWIDTH {glyph.dwidth_x} {glyph.dwidth_y}\n"
    )
    for row in render_bitmap_rows(glyph):
        console.print(Text(f"  {row}"))


def print_success(output_path: str, glyph_count: int) -> None:
    """Print success message with the written file.

    Args:
        output_path: Path to output file
        glyph_count: Number of glyphs written
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({glyph_count} glyphs)")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] ", end="")
    console.print(Text(message))
    if details:
        console.print(Text(f"  {details}"))
