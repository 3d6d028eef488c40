"""BDF text parser.

This module turns BDF text into a Font. The scanner is tolerant: unknown
keywords are skipped, missing fields fall back to defaults and bitmaps are
normalized to their glyph's bounding box. The only failure is a bitmap row
holding a character that is not a hex digit.
"""

from bdfedit.codec.bits import hex_row_to_bits, normalize_bitmap
from bdfedit.codec.fields import parse_property_value, to_int
from bdfedit.domain.font import BoundingBox, Font, FontSize, Glyph, PropertyValue
from bdfedit.exceptions import FormatError

# Rows past this many are consumed but not stored
MAX_BITMAP_ROWS = 20000


class _LineCursor:
    """Forward-only cursor over the lines of a document."""

    def __init__(self, text: str) -> None:
        self._lines = text.replace("\r\n", "\n").split("\n")
        self._index = 0

    def at_end(self) -> bool:
        return self._index >= len(self._lines)

    def peek(self) -> str:
        """Return the current line, trimmed, without consuming it."""
        if self.at_end():
            return ""
        return self._lines[self._index].strip()

    def next(self) -> str:
        """Consume and return the current line, trimmed."""
        line = self.peek()
        if not self.at_end():
            self._index += 1
        return line

    @property
    def line_number(self) -> int:
        """1-based number of the line last returned by next()."""
        return self._index

    def skip_blank(self) -> None:
        while not self.at_end() and not self.peek():
            self._index += 1


def _keyword(line: str) -> str:
    parts = line.split(None, 1)
    return parts[0] if parts else ""


def _arg(parts: list[str], index: int) -> str | None:
    return parts[index] if index < len(parts) else None


def _parse_size(parts: list[str]) -> FontSize:
    """SIZE <point> <xres> <yres>, defaults 16/75/75."""
    return FontSize(
        point=to_int(_arg(parts, 1), 16),
        xres=to_int(_arg(parts, 2), 75),
        yres=to_int(_arg(parts, 3), 75),
    )


def _parse_bounding_box(parts: list[str]) -> BoundingBox:
    """FONTBOUNDINGBOX <w> <h> <xoff> <yoff>, defaults 8/16/0/0."""
    return BoundingBox(
        width=to_int(_arg(parts, 1), 8),
        height=to_int(_arg(parts, 2), 16),
        xoff=to_int(_arg(parts, 3), 0),
        yoff=to_int(_arg(parts, 4), 0),
    )


def _parse_glyph_bbx(parts: list[str], current: BoundingBox) -> BoundingBox:
    """BBX <w> <h> <xoff> <yoff>; missing sizes keep ``current``, offsets 0."""
    return BoundingBox(
        width=to_int(_arg(parts, 1), current.width),
        height=to_int(_arg(parts, 2), current.height),
        xoff=to_int(_arg(parts, 3), 0),
        yoff=to_int(_arg(parts, 4), 0),
    )


def _read_properties(cursor: _LineCursor, properties: dict[str, PropertyValue]) -> None:
    while not cursor.at_end():
        line = cursor.next()
        if not line:
            continue
        key = _keyword(line)
        if key == "ENDPROPERTIES":
            break
        properties[key] = parse_property_value(line[len(key):].strip())


def _read_header(cursor: _LineCursor, font: Font) -> None:
    while not cursor.at_end():
        keyword = _keyword(cursor.peek())
        if keyword == "CHARS":
            break

        parts = cursor.next().split()
        if keyword == "FONT":
            font.name = " ".join(parts[1:])
        elif keyword == "SIZE":
            font.size = _parse_size(parts)
        elif keyword == "FONTBOUNDINGBOX":
            font.bounding_box = _parse_bounding_box(parts)
        elif keyword == "STARTPROPERTIES":
            _read_properties(cursor, font.properties)


def _read_bitmap_rows(cursor: _LineCursor, width: int) -> list[list[bool]]:
    rows: list[list[bool]] = []
    while not cursor.at_end():
        line = cursor.next()
        if not line:
            continue
        if _keyword(line) == "ENDCHAR":
            break
        if len(rows) < MAX_BITMAP_ROWS:
            try:
                rows.append(hex_row_to_bits(line, width))
            except FormatError as e:
                raise FormatError(e.row, cursor.line_number) from None
    return rows


def _read_glyph(cursor: _LineCursor, font: Font, name: str) -> Glyph:
    box = font.bounding_box
    glyph = Glyph(
        name=name,
        dwidth_x=box.width,
        bbx=BoundingBox(box.width, box.height, 0, 0),
    )

    has_bitmap = False
    while not cursor.at_end():
        parts = cursor.next().split()
        if not parts:
            continue
        keyword = parts[0]
        if keyword == "BITMAP":
            has_bitmap = True
            break
        if keyword == "ENDCHAR":
            break

        if keyword == "ENCODING":
            glyph.encoding = to_int(_arg(parts, 1), -1)
        elif keyword == "SWIDTH":
            glyph.swidth_x = to_int(_arg(parts, 1), 0)
            glyph.swidth_y = to_int(_arg(parts, 2), 0)
        elif keyword == "DWIDTH":
            glyph.dwidth_x = to_int(_arg(parts, 1), glyph.dwidth_x)
            glyph.dwidth_y = to_int(_arg(parts, 2), 0)
        elif keyword == "BBX":
            glyph.bbx = _parse_glyph_bbx(parts, glyph.bbx)

    # BBX always precedes BITMAP, so the width used for decoding is final
    rows = _read_bitmap_rows(cursor, glyph.bbx.width) if has_bitmap else []
    glyph.bitmap = normalize_bitmap(rows, glyph.bbx.width, glyph.bbx.height)
    return glyph


def _read_glyphs(cursor: _LineCursor, font: Font) -> None:
    while not cursor.at_end():
        parts = cursor.next().split()
        if not parts:
            continue
        if parts[0] == "ENDFONT":
            break
        if parts[0] == "STARTCHAR":
            font.glyphs.append(_read_glyph(cursor, font, " ".join(parts[1:])))


def parse_bdf(text: str) -> Font:
    """Parse BDF text into a Font.

    Unknown keywords are skipped and missing values are defaulted, so any
    text yields a Font. A declared CHARS count that disagrees with the
    number of glyphs found is ignored.

    Args:
        text: Complete file contents, ``\\n`` or ``\\r\\n`` line endings

    Returns:
        Parsed Font

    Raises:
        FormatError: If a bitmap row contains a non-hex character
    """
    cursor = _LineCursor(text)
    font = Font()

    cursor.skip_blank()
    if _keyword(cursor.peek()) == "STARTFONT":
        parts = cursor.next().split()
        font.version = parts[1] if len(parts) > 1 else font.version

    _read_header(cursor, font)
    if _keyword(cursor.peek()) == "CHARS":
        cursor.next()

    _read_glyphs(cursor, font)
    return font
