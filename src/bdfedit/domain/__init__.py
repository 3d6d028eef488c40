"""Domain models for bdfedit.

This module contains the in-memory representation of a BDF font. All models
are plain mutable dataclasses with no back-references, so an editor can
change fields in place and hand the font to the serializer at any time.

Key classes:
- BoundingBox: Pixel cell size and offset from the origin
- FontSize: Nominal point size and device resolution
- Glyph: One character's bitmap and metrics
- Font: Header metadata, properties and the ordered glyph list
"""

from bdfedit.domain.font import (
    Bitmap,
    BoundingBox,
    Font,
    FontSize,
    Glyph,
    PropertyValue,
    create_blank_glyph,
    create_empty_font,
)

__all__: list[str] = [
    # Type aliases
    "Bitmap",
    "PropertyValue",
    # Core types
    "BoundingBox",
    "FontSize",
    "Glyph",
    "Font",
    # Factories
    "create_blank_glyph",
    "create_empty_font",
]
