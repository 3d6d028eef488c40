"""bdfedit - Read, edit and write BDF bitmap fonts.

bdfedit parses fonts in the Glyph Bitmap Distribution Format into a plain
in-memory model, offers in-place editing operations on glyph bitmaps and
metrics, and writes the model back as canonical BDF text.

Example:
    $ bdfedit info terminus.bdf

This prints the font header and a table of its glyphs.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
