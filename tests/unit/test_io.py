"""Unit tests for the Font I/O layer.

Tests for FontReader, FontWriter and export_filename.
"""

from pathlib import Path
from unittest.mock import patch

import pytest

from bdfedit.domain import BoundingBox, Font, Glyph
from bdfedit.exceptions import FontLoadError, FontSaveError, FormatError
from bdfedit.io.reader import FontReader
from bdfedit.io.writer import FontWriter, export_filename

SIMPLE_FONT = "STARTFONT 2.1\nFONT simple\nCHARS 1\nSTARTCHAR a\nENCODING 97\nBBX 4 1 0 0\nBITMAP\n90\nENDCHAR\nENDFONT\n"


class TestFontReader:
    """Tests for FontReader class."""

    def test_init(self):
        """Test FontReader initialization."""
        path = Path("test.bdf")
        reader = FontReader(path)
        assert reader._font_path == path
        assert reader._font is None

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = FontReader(Path("nonexistent.bdf"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_font_before_load(self):
        """Test accessing font before loading raises RuntimeError."""
        reader = FontReader(Path("test.bdf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.font

    def test_glyph_count_before_load(self):
        """Test accessing glyph_count before loading raises RuntimeError."""
        reader = FontReader(Path("test.bdf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            _ = reader.glyph_count

    def test_iter_glyphs_before_load(self):
        """Test iterating glyphs before loading raises RuntimeError."""
        reader = FontReader(Path("test.bdf"))
        with pytest.raises(RuntimeError, match="Font not loaded"):
            list(reader.iter_glyphs())

    def test_load(self, tmp_path):
        """Test a file on disk is parsed."""
        path = tmp_path / "simple.bdf"
        path.write_text(SIMPLE_FONT, encoding="utf-8")

        reader = FontReader(path)
        font = reader.load()

        assert font.name == "simple"
        assert reader.font is font
        assert reader.glyph_count == 1
        assert [g.name for g in reader.iter_glyphs()] == ["a"]
        assert font.glyphs[0].bitmap == [[True, False, False, True]]

    def test_load_invalid_utf8(self, tmp_path):
        """Test undecodable bytes are replaced instead of failing."""
        path = tmp_path / "latin1.bdf"
        path.write_bytes(b"STARTFONT 2.1\nFONT caf\xe9\nENDFONT\n")

        font = FontReader(path).load()
        assert font.name == "caf�"

    def test_load_malformed_bitmap(self, tmp_path):
        """Test FormatError propagates unchanged."""
        path = tmp_path / "bad.bdf"
        path.write_text(SIMPLE_FONT.replace("\n90\n", "\nXY\n"), encoding="utf-8")

        with pytest.raises(FormatError):
            FontReader(path).load()

    def test_load_os_error(self, tmp_path):
        """Test read failures are wrapped in FontLoadError."""
        path = tmp_path / "locked.bdf"
        path.write_text(SIMPLE_FONT, encoding="utf-8")

        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            with pytest.raises(FontLoadError, match="denied"):
                FontReader(path).load()

    def test_context_manager(self, tmp_path):
        """Test FontReader as context manager."""
        path = tmp_path / "simple.bdf"
        path.write_text(SIMPLE_FONT, encoding="utf-8")

        with FontReader(path) as reader:
            assert reader.font.name == "simple"

        assert reader._font is None


class TestFontWriter:
    """Tests for FontWriter class."""

    def test_init(self):
        """Test FontWriter initialization."""
        font = Font()
        path = Path("output.bdf")
        writer = FontWriter(font, path)

        assert writer._font is font
        assert writer._output_path == path

    def test_save(self, tmp_path):
        """Test save writes the serialized font with a trailing newline."""
        font = Font(
            name="saved",
            glyphs=[Glyph(name="a", bbx=BoundingBox(4, 1), bitmap=[[True, False, False, True]])],
        )
        path = tmp_path / "out.bdf"
        FontWriter(font, path).save()

        text = path.read_text(encoding="utf-8")
        assert text.startswith("STARTFONT 2.1\nFONT saved\n")
        assert text.endswith("ENDFONT\n")
        assert "\nBITMAP\n9\nENDCHAR\n" in text

    def test_save_to_missing_directory(self, tmp_path):
        """Test write failures raise FontSaveError."""
        path = tmp_path / "missing" / "out.bdf"
        with pytest.raises(FontSaveError) as exc_info:
            FontWriter(Font(), path).save()
        assert exc_info.value.path == str(path)

    def test_get_normalized_path(self):
        """Test get_normalized_path static method."""
        test_cases = [
            (Path("font.bdf"), Path("font-normalized.bdf")),
            (Path("/path/to/Fixed-8x13.bdf"), Path("/path/to/Fixed-8x13-normalized.bdf")),
            (Path("noext"), Path("noext-normalized.bdf")),
        ]

        for input_path, expected_output in test_cases:
            assert FontWriter.get_normalized_path(input_path) == expected_output


class TestExportFilename:
    """Tests for export_filename."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("Terminus", "Terminus.bdf"),
            ("My Font 8x16", "My_Font_8x16.bdf"),
            ("a/b:c", "a_b_c.bdf"),
            ("v1.2-bold", "v1.2-bold.bdf"),
            ("  spaced  ", "_spaced_.bdf"),
            ("café", "caf_.bdf"),
            ("", "font.bdf"),
        ],
    )
    def test_names(self, name, expected):
        """Test unsafe characters are replaced with underscores."""
        assert export_filename(Font(name=name)) == expected
