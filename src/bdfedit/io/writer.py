"""Font writer for saving BDF files.

This module provides the FontWriter class for writing fonts to disk and
the helper that derives a download-safe file name from a font name.
"""

import re
from pathlib import Path

import structlog

from bdfedit.codec import serialize_bdf
from bdfedit.domain import Font
from bdfedit.exceptions import FontSaveError

logger = structlog.get_logger(__name__)

_UNSAFE_NAME_CHARS = re.compile(r"[^\w.-]+", re.ASCII)


def export_filename(font: Font) -> str:
    """Derive a file name for a font.

    Runs of characters other than letters, digits, ``_``, ``.`` and ``-``
    become a single underscore: "My Font 8x16" -> "My_Font_8x16.bdf".

    Args:
        font: Font to name

    Returns:
        File name with a .bdf extension
    """
    stem = _UNSAFE_NAME_CHARS.sub("_", font.name or "font") or "font"
    return f"{stem}.bdf"


class FontWriter:
    """Writes fonts as BDF text.

    Example:
        writer = FontWriter(font, Path("output.bdf"))
        writer.save()
    """

    def __init__(self, font: Font, output_path: Path) -> None:
        """Initialize the font writer.

        Args:
            font: The font to write
            output_path: Path where the font will be saved
        """
        self._font = font
        self._output_path = output_path

    def save(self) -> None:
        """Serialize the font and write it with a trailing newline.

        Raises:
            FontSaveError: If the file cannot be written
        """
        text = serialize_bdf(self._font) + "\n"
        try:
            self._output_path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise FontSaveError(str(self._output_path), str(e)) from e
        logger.debug(
            "Font saved",
            path=str(self._output_path),
            glyphs=len(self._font.glyphs),
        )

    @staticmethod
    def get_normalized_path(input_path: Path) -> Path:
        """Generate the default output path for a rewritten font.

        Converts: font.bdf -> font-normalized.bdf

        Args:
            input_path: Original font file path

        Returns:
            Path with -normalized suffix before extension
        """
        return input_path.parent / f"{input_path.stem}-normalized{input_path.suffix or '.bdf'}"
