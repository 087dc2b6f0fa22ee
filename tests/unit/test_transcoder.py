"""Tests for SVG font to binary font conversion."""

from io import BytesIO
from pathlib import Path

import pytest
from conftest import CIRCLE_SVG, CURVE_SVG, SQUARE_SVG
from fontTools.ttLib import TTFont

from iconsmith.core.assembler import assemble_font
from iconsmith.core.transcoder import (
    parse_svg_font,
    svg_font_to_ttf,
    transcode,
    ttf_to_woff,
    ttf_to_woff2,
)
from iconsmith.domain import FontDocument, FontFormat, Glyph, SourceIcon
from iconsmith.exceptions import TranscodeError


def make_glyph(name: str, code_point: int, svg: str = SQUARE_SVG) -> Glyph:
    """Create a glyph backed by an in-memory icon."""
    data = svg.encode("utf-8")
    icon = SourceIcon(path=Path(f"svg/{name}.svg"), size=len(data), content=data, stem=name)
    return Glyph(name=name, code_point=code_point, source=icon)


@pytest.fixture
def document() -> FontDocument:
    """An SVG font with three glyphs."""
    return assemble_font(
        [
            make_glyph("a", 0xE000),
            make_glyph("b", 0xE001, CURVE_SVG),
            make_glyph("c-1", 0xE002, CIRCLE_SVG),
        ],
        "icons",
    )


class TestParseSvgFont:
    """Tests for reading SVG fonts."""

    def test_metrics_and_glyphs(self, document: FontDocument):
        """Test family, metrics and glyph entries are read back."""
        info = parse_svg_font(document.data)
        assert info.family == "icons"
        assert info.units_per_em == 1000
        assert info.ascent == 1000
        assert info.descent == 0
        assert [g.name for g in info.glyphs] == ["a", "b", "c-1"]
        assert [g.code_points for g in info.glyphs] == [[0xE000], [0xE001], [0xE002]]
        assert [g.advance_width for g in info.glyphs] == [1000, 2000, 1000]

    def test_malformed_document(self):
        """Test malformed XML raises TranscodeError."""
        with pytest.raises(TranscodeError) as exc_info:
            parse_svg_font(b"<svg><defs>")
        assert exc_info.value.stage == "ttf"

    def test_missing_font_element(self):
        """Test documents without <font> are rejected."""
        with pytest.raises(TranscodeError, match="no <font>"):
            parse_svg_font(b'<svg xmlns="http://www.w3.org/2000/svg"/>')


class TestSvgFontToTtf:
    """Tests for the TrueType stage."""

    def test_cmap_and_glyph_order(self, document: FontDocument):
        """Test each glyph is mapped to its code point."""
        font = TTFont(BytesIO(svg_font_to_ttf(document)))
        assert font.getGlyphOrder() == [".notdef", "a", "b", "c-1"]
        assert font.getBestCmap() == {0xE000: "a", 0xE001: "b", 0xE002: "c-1"}

    def test_metrics(self, document: FontDocument):
        """Test em size, vertical metrics and advances."""
        font = TTFont(BytesIO(svg_font_to_ttf(document)))
        assert font["head"].unitsPerEm == 1000
        assert font["hhea"].ascent == 1000
        assert font["hhea"].descent == 0
        assert font["hmtx"]["a"][0] == 1000
        assert font["hmtx"]["b"][0] == 2000

    def test_outlines_are_quadratic(self, document: FontDocument):
        """Test glyphs carry TrueType outlines."""
        font = TTFont(BytesIO(svg_font_to_ttf(document)))
        glyf = font["glyf"]
        assert glyf["a"].numberOfContours == 1
        assert glyf["c-1"].numberOfContours == 1
        assert glyf[".notdef"].numberOfContours == 0

    def test_family_name(self, document: FontDocument):
        """Test the name table carries the family name."""
        font = TTFont(BytesIO(svg_font_to_ttf(document)))
        assert font["name"].getDebugName(1) == "icons"
        assert font["name"].getDebugName(6) == "icons-Regular"

    def test_duplicate_glyph_names(self):
        """Test duplicate names are made unique inside the font."""
        document = assemble_font(
            [make_glyph("a", 0xE000), make_glyph("a", 0xE001)],
            "icons",
        )
        font = TTFont(BytesIO(svg_font_to_ttf(document)))
        assert font.getGlyphOrder() == [".notdef", "a", "a.1"]
        assert font.getBestCmap() == {0xE000: "a", 0xE001: "a.1"}

    def test_deterministic(self, document: FontDocument):
        """Test identical input gives identical bytes."""
        assert svg_font_to_ttf(document) == svg_font_to_ttf(document)

    def test_accepts_raw_bytes(self, document: FontDocument):
        """Test the document may be passed as bytes."""
        assert svg_font_to_ttf(document.data) == svg_font_to_ttf(document)


class TestDeliveryFormats:
    """Tests for WOFF2 and WOFF encoding."""

    def test_woff2(self, document: FontDocument):
        """Test WOFF2 output loads with the same cmap."""
        data = ttf_to_woff2(svg_font_to_ttf(document))
        assert data[:4] == b"wOF2"
        font = TTFont(BytesIO(data))
        assert font.flavor == "woff2"
        assert font.getBestCmap()[0xE002] == "c-1"

    def test_woff(self, document: FontDocument):
        """Test WOFF output."""
        data = ttf_to_woff(svg_font_to_ttf(document))
        assert data[:4] == b"wOFF"

    def test_invalid_ttf(self):
        """Test garbage input raises TranscodeError for the stage."""
        with pytest.raises(TranscodeError) as exc_info:
            ttf_to_woff2(b"not a font")
        assert exc_info.value.stage == "woff2"


class TestTranscode:
    """Tests for transcode()."""

    def test_default_is_woff2(self, document: FontDocument):
        """Test the default delivery format."""
        (asset,) = transcode(document)
        assert asset.format is FontFormat.WOFF2
        assert asset.filename == "icons.woff2"

    def test_format_order(self, document: FontDocument):
        """Test assets follow the requested order."""
        assets = transcode(document, [FontFormat.TTF, FontFormat.WOFF2, FontFormat.WOFF])
        assert [a.format for a in assets] == [FontFormat.TTF, FontFormat.WOFF2, FontFormat.WOFF]
        assert assets[0].data == svg_font_to_ttf(document)

    def test_malformed_document(self):
        """Test failures abort without assets."""
        with pytest.raises(TranscodeError):
            transcode(FontDocument(font_name="icons", data=b"garbage", glyph_count=0))
