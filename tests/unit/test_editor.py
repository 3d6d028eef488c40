"""Tests for in-place font editing."""

import pytest

from bdfedit.config import EditorConfig, NewFontConfig
from bdfedit.core import FontEditor, new_font
from bdfedit.domain import BoundingBox, Font, Glyph
from bdfedit.exceptions import GlyphNotFoundError

T = True
F = False


@pytest.fixture
def font() -> Font:
    """Create a font with two small glyphs."""
    return Font(
        bounding_box=BoundingBox(4, 3, 0, -1),
        glyphs=[
            Glyph(name="a", encoding=97, dwidth_x=4, bbx=BoundingBox(2, 2), bitmap=[[T, F], [F, T]]),
            Glyph(name="b", encoding=98, dwidth_x=4, bbx=BoundingBox(2, 2), bitmap=[[F, F], [T, T]]),
        ],
    )


@pytest.fixture
def editor(font: Font) -> FontEditor:
    """Create an editor bound to the sample font."""
    return FontEditor(font)


class TestLookup:
    """Tests for glyph lookup."""

    def test_glyph_by_index(self, editor, font):
        """Test glyph returns the list entry."""
        assert editor.glyph(1) is font.glyphs[1]

    @pytest.mark.parametrize("index", [-1, 2, 100])
    def test_glyph_out_of_range(self, editor, index):
        """Test out-of-range positions raise GlyphNotFoundError."""
        with pytest.raises(GlyphNotFoundError):
            editor.glyph(index)

    def test_find_by_encoding(self, editor, font):
        """Test the first glyph with an encoding is returned."""
        font.glyphs.append(Glyph(name="a2", encoding=97))
        assert editor.find_by_encoding(97).name == "a"
        assert editor.find_by_encoding(1) is None

    def test_find_by_name(self, editor):
        """Test lookup by glyph name."""
        assert editor.find_by_name("b").encoding == 98
        assert editor.find_by_name("zz") is None

    def test_editor_exposes_font(self, editor, font):
        """Test the editor works on the given font object."""
        assert editor.font is font


class TestGlyphList:
    """Tests for adding and deleting glyphs."""

    def test_add_glyph(self, editor, font):
        """Test a new glyph takes the font cell and advance."""
        glyph = editor.add_glyph(65, "A")

        assert font.glyphs[-1] is glyph
        assert glyph.bbx == BoundingBox(4, 3, 0, -1)
        assert glyph.dwidth_x == 4
        assert glyph.bitmap == [[F] * 4 for _ in range(3)]

    def test_add_glyph_default_name(self, editor):
        """Test an unnamed glyph is named after its encoding."""
        assert editor.add_glyph(66).name == "uni66"

    def test_add_duplicate_encoding(self, editor, font):
        """Test a duplicate encoding is appended, not merged."""
        editor.add_glyph(97)
        assert [g.encoding for g in font.glyphs] == [97, 98, 97]

    def test_add_glyph_box_independent(self, editor, font):
        """Test the new glyph does not share the font bounding box."""
        glyph = editor.add_glyph(65)
        glyph.bbx.width = 1
        assert font.bounding_box.width == 4

    def test_delete_glyph(self, editor, font):
        """Test a glyph is removed and returned."""
        removed = editor.delete_glyph(0)
        assert removed.name == "a"
        assert [g.name for g in font.glyphs] == ["b"]

    def test_delete_missing_glyph(self, editor):
        """Test deleting past the end raises GlyphNotFoundError."""
        with pytest.raises(GlyphNotFoundError):
            editor.delete_glyph(5)


class TestPixels:
    """Tests for pixel operations."""

    def test_set_pixel(self, editor, font):
        """Test a pixel inside the cell is written."""
        assert editor.set_pixel(0, 1, 0, True)
        assert font.glyphs[0].bitmap == [[T, T], [F, T]]

    @pytest.mark.parametrize(("x", "y"), [(-1, 0), (0, -1), (2, 0), (0, 2)])
    def test_set_pixel_out_of_range(self, editor, font, x, y):
        """Test coordinates outside the cell are ignored."""
        assert not editor.set_pixel(0, x, y, True)
        assert font.glyphs[0].bitmap == [[T, F], [F, T]]

    def test_clear_glyph(self, editor, font):
        """Test every pixel is turned off."""
        editor.clear_glyph(0)
        assert font.glyphs[0].bitmap == [[F, F], [F, F]]

    def test_invert_glyph(self, editor, font):
        """Test every pixel is flipped."""
        editor.invert_glyph(1)
        assert font.glyphs[1].bitmap == [[T, T], [F, F]]

    def test_set_pixel_after_bbx_grows(self, editor, font):
        """Test a pixel can be set in rows added by editing bbx directly."""
        font.glyphs[0].bbx.height = 4

        assert editor.set_pixel(0, 0, 3, True)
        assert font.glyphs[0].bitmap == [[T, F], [F, T], [F, F], [T, F]]

    def test_set_pixel_ragged_bitmap(self, editor, font):
        """Test a short row is padded before the write."""
        font.glyphs[0].bitmap = [[T], [F, T]]

        assert editor.set_pixel(0, 1, 0, True)
        assert font.glyphs[0].bitmap == [[T, T], [F, T]]

    def test_clear_and_invert_follow_bbx(self, editor, font):
        """Test clear and invert produce a bitmap shaped like the bbx."""
        font.glyphs[0].bbx.width = 3
        editor.clear_glyph(0)
        assert font.glyphs[0].bitmap == [[F, F, F], [F, F, F]]

        font.glyphs[1].bbx.height = 1
        editor.invert_glyph(1)
        assert font.glyphs[1].bitmap == [[T, T]]


class TestResize:
    """Tests for cell size and offset changes."""

    def test_grow(self, editor, font):
        """Test growing keeps pixels and adds blank space."""
        glyph = editor.resize_glyph(0, width=3, height=3)
        assert glyph.bbx.width == 3
        assert glyph.bbx.height == 3
        assert glyph.bitmap == [[T, F, F], [F, T, F], [F, F, F]]

    def test_shrink(self, editor):
        """Test shrinking keeps the top-left pixels."""
        glyph = editor.resize_glyph(0, width=1, height=1)
        assert glyph.bitmap == [[T]]

    def test_width_only(self, editor):
        """Test a single dimension can be changed."""
        glyph = editor.resize_glyph(1, width=3)
        assert glyph.bbx.height == 2
        assert glyph.bitmap == [[F, F, F], [T, T, F]]

    def test_clamped(self, font):
        """Test sizes are clamped to the configured limits."""
        editor = FontEditor(font, EditorConfig(max_glyph_dimension=4))
        glyph = editor.resize_glyph(0, width=0, height=50)
        assert (glyph.bbx.width, glyph.bbx.height) == (1, 4)
        assert len(glyph.bitmap) == 4
        assert all(len(row) == 1 for row in glyph.bitmap)

    def test_glyph_offset_clamped(self, font):
        """Test glyph offsets are clamped to max_offset."""
        editor = FontEditor(font, EditorConfig(max_offset=10))
        editor.set_glyph_offset(0, xoff=-50, yoff=3)
        assert (font.glyphs[0].bbx.xoff, font.glyphs[0].bbx.yoff) == (-10, 3)

    def test_font_bounding_box(self, editor, font):
        """Test the font cell is updated and clamped."""
        editor.set_font_bounding_box(width=5000, height=0, xoff=-600, yoff=2)
        assert font.bounding_box == BoundingBox(1024, 1, -512, 2)

    def test_font_bounding_box_keeps_glyphs(self, editor, font):
        """Test changing the font cell leaves glyph cells alone."""
        editor.set_font_bounding_box(width=10)
        assert font.glyphs[0].bbx.width == 2


class TestNewFont:
    """Tests for new_font."""

    def test_defaults(self):
        """Test the default template."""
        font = new_font()
        assert font.name == "NewFont"
        assert font.bounding_box == BoundingBox(8, 16, 0, -3)
        assert [g.name for g in font.glyphs] == ["space"]

    def test_configured(self):
        """Test configured values are applied."""
        config = NewFontConfig(name="Tiny", width=4, height=6, yoff=-1, ascent=5, descent=1)
        font = new_font(config)

        assert font.name == "Tiny"
        assert font.bounding_box == BoundingBox(4, 6, 0, -1)
        assert font.properties == {"FONT_ASCENT": 5, "FONT_DESCENT": 1}
        assert font.glyphs[0].bitmap == [[F] * 4 for _ in range(6)]
