"""Tests for text outlines."""

import pytest
from matplotlib.font_manager import FontProperties

from epiglyph import FontLoadError
from epiglyph.glyphs import load_font, text_outline


class TestLoadFont:
    """Tests for load_font."""

    def test_default_font(self):
        """Test None gives matplotlib's default family."""
        assert isinstance(load_font(None), FontProperties)

    def test_missing_file(self, tmp_path):
        """Test a missing font file fails at load time."""
        with pytest.raises(FontLoadError, match="not found"):
            load_font(tmp_path / "missing.ttf")

    def test_unreadable_file(self, tmp_path):
        """Test a file that is not a font fails at load time."""
        bogus = tmp_path / "bogus.ttf"
        bogus.write_bytes(b"definitely not a font")
        with pytest.raises(FontLoadError):
            load_font(bogus)


class TestTextOutline:
    """Tests for text_outline."""

    def test_letter_has_contours(self):
        """Test a letter outlines into measurable contours."""
        outline = text_outline("O", 100)
        assert outline.subpath_count >= 1
        assert outline.total_length() > 100

    def test_blank_text_is_empty(self):
        """Test whitespace outlines to nothing."""
        assert text_outline("   ", 100).total_length() == 0.0
        assert text_outline("", 100).subpath_count == 0

    def test_font_size_scales_length(self):
        """Test doubling the size roughly doubles the outline length."""
        small = text_outline("S", 100).total_length()
        large = text_outline("S", 200).total_length()
        assert large == pytest.approx(2 * small, rel=0.05)

    def test_outline_is_y_up_above_baseline(self):
        """Test an uppercase letter sits above the baseline."""
        outline = text_outline("H", 100)
        mid = outline.point_at_length(outline.total_length() / 2)
        assert mid.y >= -1.0


class TestLiteralText:
    """Tests for text that matplotlib would otherwise read as mathtext."""

    def test_dollar_pair_is_drawn_literally(self):
        """Test "$x$" outlines as three glyphs, not an italic math x."""
        literal = text_outline("$x$", 100).total_length()
        just_x = text_outline("x", 100).total_length()
        assert literal > 2 * just_x

    @pytest.mark.parametrize("text", ["5$", "cost $5^$", r"a\$b"])
    def test_dollar_text_outlines(self, text):
        """Test text with dollars never raises a math parse error."""
        assert text_outline(text, 100).total_length() > 0
