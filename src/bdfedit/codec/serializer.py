"""BDF text serializer.

This module writes a Font as canonical BDF text. Bitmaps are normalized
against each glyph's declared bounding box right before encoding.
"""

from bdfedit.codec.bits import bits_to_hex_row, normalize_bitmap
from bdfedit.codec.fields import format_property_value, safe_int
from bdfedit.domain.font import BoundingBox, Font, Glyph


def _box_fields(box: BoundingBox) -> str:
    return (
        f"{safe_int(box.width)} {safe_int(box.height)} "
        f"{safe_int(box.xoff)} {safe_int(box.yoff)}"
    )


def _glyph_lines(glyph: Glyph) -> list[str]:
    width = safe_int(glyph.bbx.width)
    height = safe_int(glyph.bbx.height)
    bitmap = normalize_bitmap(glyph.bitmap or [], width, height)

    lines = [
        f"STARTCHAR {glyph.name or 'unnamed'}",
        f"ENCODING {safe_int(glyph.encoding)}",
        f"SWIDTH {safe_int(glyph.swidth_x)} {safe_int(glyph.swidth_y)}",
        f"DWIDTH {safe_int(glyph.dwidth_x)} {safe_int(glyph.dwidth_y)}",
        f"BBX {_box_fields(glyph.bbx)}",
        "BITMAP",
    ]
    lines.extend(bits_to_hex_row(row, width).upper() for row in bitmap)
    lines.append("ENDCHAR")
    return lines


def serialize_bdf(font: Font) -> str:
    """Serialize a Font to BDF text.

    The properties block is omitted when the font has no properties. Lines
    are joined with ``\\n`` and no trailing newline is added.

    Args:
        font: Font to write

    Returns:
        BDF text
    """
    size = font.size
    lines = [
        f"STARTFONT {font.version}",
        f"FONT {font.name}",
        f"SIZE {safe_int(size.point)} {safe_int(size.xres)} {safe_int(size.yres)}",
        f"FONTBOUNDINGBOX {_box_fields(font.bounding_box)}",
    ]

    properties = font.properties or {}
    if properties:
        lines.append(f"STARTPROPERTIES {len(properties)}")
        lines.extend(
            f"{key} {format_property_value(value)}" for key, value in properties.items()
        )
        lines.append("ENDPROPERTIES")

    lines.append(f"CHARS {len(font.glyphs)}")
    for glyph in font.glyphs:
        lines.extend(_glyph_lines(glyph))
    lines.append("ENDFONT")
    return "\n".join(lines)
