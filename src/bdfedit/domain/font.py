"""Font and glyph representation.

This module defines the font domain model: header metadata, the font-wide
bounding box, free-form properties and the ordered list of glyphs, each
owning a row-major boolean bitmap.
"""

from dataclasses import dataclass, field

Bitmap = list[list[bool]]

# Property values keep the type inferred from their surface syntax:
# quoted text stays str, bare decimal integers become int.
PropertyValue = int | str


@dataclass
class BoundingBox:
    """A pixel cell and its offset from the font origin.

    Attributes:
        width: Cell width in pixels
        height: Cell height in pixels
        xoff: Horizontal offset of the lower-left corner from the origin
        yoff: Vertical offset of the lower-left corner from the baseline
    """

    width: int = 8
    height: int = 16
    xoff: int = 0
    yoff: int = 0

    def copy(self) -> "BoundingBox":
        """Return an independent copy of this bounding box."""
        return BoundingBox(self.width, self.height, self.xoff, self.yoff)


@dataclass
class FontSize:
    """Nominal point size and device resolution in dots per inch."""

    point: int = 16
    xres: int = 75
    yres: int = 75


@dataclass
class Glyph:
    """A single character: its bitmap plus metrics.

    The bitmap is ``bbx.height`` rows of ``bbx.width`` booleans, top to bottom
    and left to right. The parser and serializer re-establish that shape, so
    an editor that changes ``bbx`` without resizing the bitmap still produces
    valid output.

    Attributes:
        name: Glyph identifier, free text after STARTCHAR
        encoding: Code point, -1 for unencoded glyphs
        swidth_x: Scalable width, x component
        swidth_y: Scalable width, y component
        dwidth_x: Device width, horizontal advance in pixels
        dwidth_y: Device width, y component
        bbx: The glyph's own pixel cell
        bitmap: Row-major pixel grid
    """

    name: str = ""
    encoding: int = -1
    swidth_x: int = 0
    swidth_y: int = 0
    dwidth_x: int = 0
    dwidth_y: int = 0
    bbx: BoundingBox = field(default_factory=BoundingBox)
    bitmap: Bitmap = field(default_factory=list)

    def __post_init__(self) -> None:
        # An omitted bitmap becomes a blank grid sized to bbx
        if not self.bitmap:
            width = max(0, self.bbx.width)
            self.bitmap = [[False] * width for _ in range(max(0, self.bbx.height))]

    def is_empty(self) -> bool:
        """Check if no pixel of the glyph is set.

        Returns:
            True if every pixel is off, False otherwise
        """
        return not any(any(row) for row in self.bitmap)

    def ink_count(self) -> int:
        """Count the pixels that are set."""
        return sum(sum(1 for bit in row if bit) for row in self.bitmap)


@dataclass
class Font:
    """A complete BDF font.

    Glyph order is significant and encodings need not be unique: two
    glyphs with the same encoding are kept as two entries.

    Attributes:
        version: Declared format version
        name: Font name from the FONT line
        size: Point size and resolution
        bounding_box: Font-wide default glyph cell
        properties: Named properties in insertion order
        glyphs: Glyphs in file order
    """

    version: str = "2.1"
    name: str = "Font"
    size: FontSize = field(default_factory=FontSize)
    bounding_box: BoundingBox = field(default_factory=BoundingBox)
    properties: dict[str, PropertyValue] = field(default_factory=dict)
    glyphs: list[Glyph] = field(default_factory=list)


def create_blank_glyph(
    encoding: int,
    name: str = "",
    bbx: BoundingBox | None = None,
    dwidth_x: int | None = None,
) -> Glyph:
    """Create a glyph with every pixel off.

    Args:
        encoding: Code point of the new glyph
        name: Glyph name (default: ``uni<encoding>``)
        bbx: Cell to copy (default: 8x16 at the origin)
        dwidth_x: Horizontal advance (default: the cell width)

    Returns:
        New blank Glyph
    """
    cell = bbx.copy() if bbx is not None else BoundingBox()
    return Glyph(
        name=name or f"uni{encoding}",
        encoding=encoding,
        dwidth_x=cell.width if dwidth_x is None else dwidth_x,
        bbx=cell,
    )


def create_empty_font(
    name: str = "NewFont",
    size: FontSize | None = None,
    bounding_box: BoundingBox | None = None,
    ascent: int = 12,
    descent: int = 4,
) -> Font:
    """Create a new font holding a single blank space glyph.

    Args:
        name: Font name
        size: Point size and resolution (default: 16pt at 75x75 dpi)
        bounding_box: Font cell (default: 8x16 with the baseline 3px up)
        ascent: FONT_ASCENT property
        descent: FONT_DESCENT property

    Returns:
        New Font
    """
    box = bounding_box.copy() if bounding_box is not None else BoundingBox(8, 16, 0, -3)
    font = Font(
        name=name,
        size=size if size is not None else FontSize(),
        bounding_box=box,
        properties={"FONT_ASCENT": ascent, "FONT_DESCENT": descent},
    )
    font.glyphs.append(create_blank_glyph(32, "space", box, box.width))
    return font
