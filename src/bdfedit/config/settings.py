"""Configuration settings for bdfedit."""

from pathlib import Path

from pydantic import BaseModel, Field

from bdfedit.domain import BoundingBox, FontSize


class EditorConfig(BaseModel):
    """Limits applied when editing glyph and font metrics."""

    max_glyph_dimension: int = Field(
        default=1024,
        ge=1,
        description="Largest width or height a glyph cell can be resized to",
    )
    max_offset: int = Field(
        default=512,
        ge=0,
        description="Largest absolute x/y offset of a cell",
    )

    def clamp_dimension(self, value: int) -> int:
        """Clamp a cell width or height to [1, max_glyph_dimension]."""
        return max(1, min(self.max_glyph_dimension, int(value)))

    def clamp_offset(self, value: int) -> int:
        """Clamp a cell offset to [-max_offset, max_offset]."""
        return max(-self.max_offset, min(self.max_offset, int(value)))


class NewFontConfig(BaseModel):
    """Defaults for fonts created from scratch."""

    name: str = Field(default="NewFont", description="Font name")
    point_size: int = Field(default=16, ge=1, description="Nominal point size")
    xres: int = Field(default=75, ge=1, description="Horizontal resolution (dpi)")
    yres: int = Field(default=75, ge=1, description="Vertical resolution (dpi)")
    width: int = Field(default=8, ge=1, le=1024, description="Cell width")
    height: int = Field(default=16, ge=1, le=1024, description="Cell height")
    xoff: int = Field(default=0, description="Cell x offset")
    yoff: int = Field(default=-3, description="Cell y offset (baseline position)")
    ascent: int = Field(default=12, description="FONT_ASCENT property")
    descent: int = Field(default=4, description="FONT_DESCENT property")

    def font_size(self) -> FontSize:
        """Get the configured size and resolution."""
        return FontSize(self.point_size, self.xres, self.yres)

    def bounding_box(self) -> BoundingBox:
        """Get the configured font cell."""
        return BoundingBox(self.width, self.height, self.xoff, self.yoff)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class BdfEditSettings(BaseModel):
    """Main application settings."""

    editor: EditorConfig = Field(default_factory=EditorConfig)
    new_font: NewFontConfig = Field(default_factory=NewFontConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> BdfEditSettings:
    """Get default application settings."""
    return BdfEditSettings()
