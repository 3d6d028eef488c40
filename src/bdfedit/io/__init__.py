"""Font I/O layer for bdfedit.

This module handles reading and writing BDF files. It wraps the pure codec
with file access, encoding handling and error translation.

Key responsibilities:
- Load BDF files into domain models
- Write domain models as BDF files
- Derive export file names from font names

Key classes:
- FontReader: Load fonts from disk
- FontWriter: Save fonts to disk
"""

from bdfedit.io.reader import FontReader
from bdfedit.io.writer import FontWriter, export_filename

__all__ = [
    "FontReader",
    "FontWriter",
    "export_filename",
]
