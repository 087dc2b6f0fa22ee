"""Tests for domain models to verify they work correctly."""

from pathlib import Path

import pytest

from iconsmith.domain import (
    FontAsset,
    FontDocument,
    FontFormat,
    Glyph,
    SourceIcon,
    StylesheetDocument,
)


@pytest.fixture
def icon() -> SourceIcon:
    """Create a sample source icon."""
    return SourceIcon(path=Path("svg/home.svg"), size=42, content=b"<svg/>", stem="home")


class TestSourceIcon:
    """Tests for SourceIcon class."""

    def test_filename(self, icon: SourceIcon) -> None:
        """Test filename includes the extension."""
        assert icon.filename == "home.svg"

    def test_immutable(self, icon: SourceIcon) -> None:
        """Test that source icons are immutable."""
        with pytest.raises(AttributeError):
            icon.size = 0  # type: ignore

    def test_repr_hides_content(self, icon: SourceIcon) -> None:
        """Test raw content is left out of the repr."""
        assert "content" not in repr(icon)


class TestGlyph:
    """Tests for Glyph class."""

    def test_char(self, icon: SourceIcon) -> None:
        """Test character for the code point."""
        glyph = Glyph(name="home", code_point=0xE000, source=icon)
        assert glyph.char == "\ue000"

    def test_hex_is_lowercase_unpadded(self, icon: SourceIcon) -> None:
        """Test hex formatting of code points."""
        assert Glyph(name="a", code_point=0xE00A, source=icon).hex == "e00a"
        assert Glyph(name="a", code_point=0x41, source=icon).hex == "41"

    def test_css_escape(self, icon: SourceIcon) -> None:
        """Test CSS escape of the code point."""
        glyph = Glyph(name="home", code_point=0xE001, source=icon)
        assert glyph.css_escape == "\\e001"


class TestFontFormat:
    """Tests for FontFormat enum."""

    def test_extensions(self) -> None:
        """Test file extensions."""
        assert FontFormat.WOFF2.extension == "woff2"
        assert FontFormat.TTF.extension == "ttf"

    def test_css_format_tokens(self) -> None:
        """Test @font-face format() tokens."""
        assert FontFormat.WOFF2.css_format == "woff2"
        assert FontFormat.WOFF.css_format == "woff"
        assert FontFormat.TTF.css_format == "truetype"


class TestArtifacts:
    """Tests for run artifacts."""

    def test_asset_filename(self) -> None:
        """Test asset file name is <fontName>.<ext>."""
        asset = FontAsset(font_name="icons", format=FontFormat.WOFF2, data=b"wOF2")
        assert asset.filename == "icons.woff2"

    def test_stylesheet_filename(self) -> None:
        """Test stylesheet file name is <fontName>.css."""
        sheet = StylesheetDocument(font_name="icons", text="", rule_count=0)
        assert sheet.filename == "icons.css"

    def test_document_text(self) -> None:
        """Test document decoding."""
        document = FontDocument(font_name="icons", data="<svg/>".encode(), glyph_count=0)
        assert document.text() == "<svg/>"
