"""BDF codec for bdfedit.

This module converts between BDF text and the domain model. Both directions
are pure functions: they perform no I/O and keep no state between calls.

Key functions:
- parse_bdf: BDF text to Font
- serialize_bdf: Font to canonical BDF text
- hex_row_to_bits / bits_to_hex_row: one bitmap row to and from hex
- normalize_bitmap: force a bitmap to an exact width and height
"""

from bdfedit.codec.bits import bits_to_hex_row, hex_row_to_bits, normalize_bitmap
from bdfedit.codec.parser import MAX_BITMAP_ROWS, parse_bdf
from bdfedit.codec.serializer import serialize_bdf

# Short names for callers that only need the two entry points
parse = parse_bdf
serialize = serialize_bdf

__all__ = [
    "MAX_BITMAP_ROWS",
    "bits_to_hex_row",
    "hex_row_to_bits",
    "normalize_bitmap",
    "parse",
    "parse_bdf",
    "serialize",
    "serialize_bdf",
]
