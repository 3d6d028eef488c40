"""Editing operations for bdfedit.

This module holds the operations an interactive editor applies to a font
in place: adding and removing glyphs, painting pixels and resizing cells.

Key classes:
- FontEditor: In-place editor bound to one Font
"""

from bdfedit.core.editor import FontEditor, new_font

__all__ = [
    "FontEditor",
    "new_font",
]
