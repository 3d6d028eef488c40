"""Exception hierarchy for bdfedit."""


class BdfEditError(Exception):
    """Base exception for all bdfedit errors."""

    pass


class FormatError(BdfEditError, ValueError):
    """A bitmap row contains a character that is not a hex digit."""

    def __init__(self, row: str, line_number: int | None = None) -> None:
        self.row = row
        self.line_number = line_number
        location = f" on line {line_number}" if line_number is not None else ""
        super().__init__(f"Invalid hex digit in bitmap row '{row}'{location}")


class FontError(BdfEditError):
    """Errors related to font loading or saving."""

    pass


class FontLoadError(FontError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontSaveError(FontError):
    """Error saving a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save font '{path}': {reason}")


class GlyphError(BdfEditError):
    """Errors related to glyph lookup or editing."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested glyph not found in font."""

    def __init__(self, glyph: str | int) -> None:
        self.glyph = glyph
        super().__init__(f"Glyph '{glyph}' not found in font")
