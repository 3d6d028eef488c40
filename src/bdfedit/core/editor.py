"""In-place font editing.

FontEditor mutates the Font it is given. It never copies the font, so the
caller can serialize the same object at any point between edits.
"""

import structlog

from bdfedit.codec.bits import normalize_bitmap
from bdfedit.config import EditorConfig, NewFontConfig
from bdfedit.domain import Bitmap, Font, Glyph, create_blank_glyph, create_empty_font
from bdfedit.exceptions import GlyphNotFoundError

logger = structlog.get_logger(__name__)


def _fit_bitmap(glyph: Glyph) -> Bitmap:
    """Reshape a glyph's bitmap to its current bbx and return it."""
    glyph.bitmap = normalize_bitmap(glyph.bitmap, glyph.bbx.width, glyph.bbx.height)
    return glyph.bitmap


def new_font(config: NewFontConfig | None = None) -> Font:
    """Create an empty font from configured defaults.

    Args:
        config: New font defaults (default: NewFontConfig())

    Returns:
        Font holding a single blank space glyph
    """
    config = config or NewFontConfig()
    return create_empty_font(
        name=config.name,
        size=config.font_size(),
        bounding_box=config.bounding_box(),
        ascent=config.ascent,
        descent=config.descent,
    )


class FontEditor:
    """Applies editing operations to a font in place.

    Example:
        editor = FontEditor(font)
        glyph = editor.add_glyph(65, "A")
        editor.set_pixel(len(font.glyphs) - 1, 3, 4, True)
    """

    def __init__(self, font: Font, config: EditorConfig | None = None) -> None:
        """Initialize the editor.

        Args:
            font: Font to edit
            config: Editing limits (default: EditorConfig())
        """
        self._font = font
        self._config = config or EditorConfig()

    @property
    def font(self) -> Font:
        """Get the font being edited."""
        return self._font

    def glyph(self, index: int) -> Glyph:
        """Get a glyph by list position.

        Raises:
            GlyphNotFoundError: If index is outside the glyph list
        """
        if not 0 <= index < len(self._font.glyphs):
            raise GlyphNotFoundError(index)
        return self._font.glyphs[index]

    def find_by_encoding(self, encoding: int) -> Glyph | None:
        """Get the first glyph with the given encoding, or None."""
        for glyph in self._font.glyphs:
            if glyph.encoding == encoding:
                return glyph
        return None

    def find_by_name(self, name: str) -> Glyph | None:
        """Get the first glyph with the given name, or None."""
        for glyph in self._font.glyphs:
            if glyph.name == name:
                return glyph
        return None

    def add_glyph(self, encoding: int, name: str = "") -> Glyph:
        """Append a blank glyph sized to the font bounding box.

        Encodings may repeat; a duplicate is appended like any other glyph.

        Args:
            encoding: Code point of the new glyph
            name: Glyph name (default: ``uni<encoding>``)

        Returns:
            The new glyph
        """
        if self.find_by_encoding(encoding) is not None:
            logger.warning("Duplicate encoding", encoding=encoding)

        box = self._font.bounding_box
        glyph = create_blank_glyph(encoding, name, box, box.width)
        self._font.glyphs.append(glyph)
        logger.debug("Glyph added", glyph=glyph.name, encoding=encoding)
        return glyph

    def delete_glyph(self, index: int) -> Glyph:
        """Remove a glyph and return it.

        Raises:
            GlyphNotFoundError: If index is outside the glyph list
        """
        glyph = self.glyph(index)
        del self._font.glyphs[index]
        logger.debug("Glyph deleted", glyph=glyph.name, index=index)
        return glyph

    def set_pixel(self, index: int, x: int, y: int, value: bool) -> bool:
        """Set one pixel of a glyph.

        Coordinates outside the glyph cell are ignored. The bitmap is first
        reshaped to the glyph's bbx, so a cell edited in place stays writable.

        Returns:
            True if a pixel was written, False otherwise
        """
        glyph = self.glyph(index)
        if not (0 <= y < glyph.bbx.height and 0 <= x < glyph.bbx.width):
            return False
        _fit_bitmap(glyph)[y][x] = bool(value)
        return True

    def clear_glyph(self, index: int) -> None:
        """Turn every pixel of a glyph off."""
        glyph = self.glyph(index)
        for row in _fit_bitmap(glyph):
            row[:] = [False] * len(row)

    def invert_glyph(self, index: int) -> None:
        """Flip every pixel of a glyph."""
        glyph = self.glyph(index)
        for row in _fit_bitmap(glyph):
            row[:] = [not bit for bit in row]

    def resize_glyph(
        self,
        index: int,
        width: int | None = None,
        height: int | None = None,
    ) -> Glyph:
        """Change a glyph's cell size, keeping the top-left pixels.

        New columns and rows are blank; removed ones are discarded. Sizes
        are clamped to [1, max_glyph_dimension].

        Args:
            index: Glyph position
            width: New width (None keeps the current one)
            height: New height (None keeps the current one)

        Returns:
            The resized glyph
        """
        glyph = self.glyph(index)
        bbx = glyph.bbx
        new_width = bbx.width if width is None else self._config.clamp_dimension(width)
        new_height = bbx.height if height is None else self._config.clamp_dimension(height)

        glyph.bitmap = normalize_bitmap(glyph.bitmap, new_width, new_height)
        bbx.width = new_width
        bbx.height = new_height
        logger.debug("Glyph resized", glyph=glyph.name, width=new_width, height=new_height)
        return glyph

    def set_glyph_offset(
        self,
        index: int,
        xoff: int | None = None,
        yoff: int | None = None,
    ) -> None:
        """Move a glyph's cell relative to the origin, clamped to max_offset."""
        bbx = self.glyph(index).bbx
        if xoff is not None:
            bbx.xoff = self._config.clamp_offset(xoff)
        if yoff is not None:
            bbx.yoff = self._config.clamp_offset(yoff)

    def set_font_bounding_box(
        self,
        width: int | None = None,
        height: int | None = None,
        xoff: int | None = None,
        yoff: int | None = None,
    ) -> None:
        """Update the font-wide cell; existing glyphs keep their own cells."""
        box = self._font.bounding_box
        if width is not None:
            box.width = self._config.clamp_dimension(width)
        if height is not None:
            box.height = self._config.clamp_dimension(height)
        if xoff is not None:
            box.xoff = self._config.clamp_offset(xoff)
        if yoff is not None:
            box.yoff = self._config.clamp_offset(yoff)
