"""Font reader for loading BDF files.

This module provides the FontReader class for loading font files
into domain models.
"""

from collections.abc import Iterator
from pathlib import Path

import structlog

from bdfedit.codec import parse_bdf
from bdfedit.domain import Font, Glyph
from bdfedit.exceptions import FontLoadError

logger = structlog.get_logger(__name__)


class FontReader:
    """Loads BDF files and exposes the parsed font.

    Example:
        reader = FontReader(Path("font.bdf"))
        reader.load()
        for glyph in reader.iter_glyphs():
            print(glyph.name)
    """

    def __init__(self, font_path: Path) -> None:
        """Initialize the font reader.

        Args:
            font_path: Path to the BDF file
        """
        self._font_path = font_path
        self._font: Font | None = None

    def load(self) -> Font:
        """Read and parse the font file.

        Bytes that are not valid UTF-8 are replaced rather than rejected.

        Returns:
            The parsed font

        Raises:
            FileNotFoundError: If font file does not exist
            FontLoadError: If the file cannot be read
            FormatError: If a bitmap row is malformed
        """
        if not self._font_path.exists():
            raise FileNotFoundError(f"Font file not found: {self._font_path}")

        try:
            text = self._font_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise FontLoadError(str(self._font_path), str(e)) from e

        self._font = parse_bdf(text)
        logger.debug(
            "Font loaded",
            path=str(self._font_path),
            glyphs=len(self._font.glyphs),
        )
        return self._font

    @property
    def font(self) -> Font:
        """Return the parsed font.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        if self._font is None:
            raise RuntimeError("Font not loaded. Call load() first.")
        return self._font

    @property
    def glyph_count(self) -> int:
        """Return the number of glyphs found in the file."""
        return len(self.font.glyphs)

    def iter_glyphs(self) -> Iterator[Glyph]:
        """Iterate over glyphs in file order.

        Raises:
            RuntimeError: If font has not been loaded yet
        """
        yield from self.font.glyphs

    def close(self) -> None:
        """Drop the parsed font."""
        self._font = None

    def __enter__(self) -> "FontReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
