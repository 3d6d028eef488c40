"""Bitmap row packing.

A BDF bitmap row is a string of hex digits, each digit holding four pixels
with the most significant bit leftmost. Decoding pads a short row on the
left; encoding pads a partial trailing nibble on the right. Both paddings
are part of the format and must be kept for round trips with widths that
are not a multiple of four.
"""

import string
from collections.abc import Sequence

from bdfedit.domain.font import Bitmap
from bdfedit.exceptions import FormatError

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_row_to_bits(hex_row: str, width: int) -> list[bool]:
    """Decode one hex bitmap row into ``width`` pixels.

    An optional ``0x`` prefix and surrounding whitespace are ignored. A row
    with fewer than ``ceil(width / 4)`` digits is left-padded with zeros;
    bits past ``width`` are dropped.

    Args:
        hex_row: Row text as found in the BITMAP section
        width: Number of pixels in the row

    Returns:
        List of exactly ``width`` booleans, left to right

    Raises:
        FormatError: If the row contains a character that is not a hex digit
    """
    width = max(0, width)
    clean = hex_row.strip()
    if clean[:2].lower() == "0x":
        clean = clean[2:].strip()

    need = (width + 3) // 4
    if len(clean) < need:
        clean = clean.rjust(need, "0")

    if any(char not in _HEX_DIGITS for char in clean):
        raise FormatError(hex_row)

    bits = "".join(f"{int(char, 16):04b}" for char in clean)
    return [bits[i] == "1" for i in range(width)]


def bits_to_hex_row(row: Sequence[bool], width: int) -> str:
    """Encode ``width`` pixels as a lowercase hex row.

    Missing entries count as off. The last nibble is padded with zero bits
    on the right.

    Args:
        row: Pixels, left to right
        width: Number of pixels to encode

    Returns:
        ``ceil(width / 4)`` lowercase hex digits
    """
    width = max(0, width)
    bits = "".join("1" if i < len(row) and row[i] else "0" for i in range(width))
    bits += "0" * (-width % 4)
    return "".join(f"{int(bits[i:i + 4], 2):x}" for i in range(0, len(bits), 4))


def normalize_bitmap(rows: Sequence[Sequence[bool]], width: int, height: int) -> Bitmap:
    """Return a new bitmap of exactly ``height`` rows of ``width`` pixels.

    Missing rows and columns are filled with False, extra ones are dropped.

    Args:
        rows: Source bitmap, possibly ragged
        width: Target row length
        height: Target row count

    Returns:
        Fresh bitmap that shares no lists with ``rows``
    """
    width = max(0, width)
    height = max(0, height)
    bitmap: Bitmap = []
    for y in range(height):
        source = rows[y] if y < len(rows) and rows[y] else []
        bitmap.append([bool(source[x]) if x < len(source) else False for x in range(width)])
    return bitmap
