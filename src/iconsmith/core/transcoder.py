"""Conversion of the SVG font into binary font formats.

Two synchronous, deterministic stages:

1. SVG font document -> TrueType (cubic outlines converted to quadratic)
2. TrueType -> WOFF2 (or WOFF) delivery format

Key functions:
- parse_svg_font: Read family, metrics and glyphs from an SVG font
- svg_font_to_ttf: Build a TrueType font with fontTools' FontBuilder
- ttf_to_woff2 / ttf_to_woff: Re-encode TrueType bytes
- transcode: Produce every requested FontAsset
"""

import os
import re
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from dataclasses import dataclass, field
from io import BytesIO

from fontTools.fontBuilder import FontBuilder
from fontTools.misc.timeTools import timestampSinceEpoch
from fontTools.pens.cu2quPen import Cu2QuPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.svgLib.path import parse_path
from fontTools.ttLib import TTFont

from iconsmith.domain.font import FontAsset, FontDocument, FontFormat
from iconsmith.exceptions import TranscodeError

SVG_NS = "{http://www.w3.org/2000/svg}"

# Maximum deviation, in font units, of quadratic approximations
MAX_CURVE_ERROR = 1.0


@dataclass
class SVGFontGlyph:
    """A glyph entry read back from an SVG font."""

    name: str
    code_points: list[int]
    advance_width: int
    path_data: str


@dataclass
class SVGFontInfo:
    """Family name, metrics and glyphs of an SVG font."""

    family: str
    units_per_em: int
    ascent: int
    descent: int
    missing_advance: int = 0
    glyphs: list[SVGFontGlyph] = field(default_factory=list)


def _int_attr(element: ET.Element, name: str, default: int) -> int:
    raw = element.get(name)
    if raw is None or raw.strip() == "":
        return default
    return round(float(raw))


def parse_svg_font(data: bytes) -> SVGFontInfo:
    """Parse an SVG font document.

    Raises:
        TranscodeError: If the document is not a usable SVG font
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise TranscodeError("ttf", f"malformed SVG font: {e}") from e

    font_el = root.find(f".//{SVG_NS}font")
    if font_el is None:
        font_el = root.find(".//font")
    if font_el is None:
        raise TranscodeError("ttf", "document contains no <font> element")
    ns = SVG_NS if font_el.tag.startswith(SVG_NS) else ""

    face = font_el.find(f"{ns}font-face")
    if face is None:
        raise TranscodeError("ttf", "font has no <font-face> element")

    try:
        units_per_em = _int_attr(face, "units-per-em", 1000)
        info = SVGFontInfo(
            family=face.get("font-family") or font_el.get("id") or "icons",
            units_per_em=units_per_em,
            ascent=_int_attr(face, "ascent", units_per_em),
            descent=_int_attr(face, "descent", 0),
        )
        default_advance = _int_attr(font_el, "horiz-adv-x", units_per_em)

        missing = font_el.find(f"{ns}missing-glyph")
        if missing is not None:
            info.missing_advance = _int_attr(missing, "horiz-adv-x", 0)

        for glyph_el in font_el.findall(f"{ns}glyph"):
            unicode = glyph_el.get("unicode") or ""
            info.glyphs.append(
                SVGFontGlyph(
                    name=glyph_el.get("glyph-name") or "",
                    code_points=[ord(unicode)] if len(unicode) == 1 else [],
                    advance_width=_int_attr(glyph_el, "horiz-adv-x", default_advance),
                    path_data=glyph_el.get("d") or "",
                )
            )
    except ValueError as e:
        raise TranscodeError("ttf", f"invalid numeric attribute: {e}") from e

    return info


def _unique_glyph_name(glyph: SVGFontGlyph, taken: set[str]) -> str:
    name = glyph.name
    if not name or name == ".notdef":
        name = f"uni{glyph.code_points[0]:04X}" if glyph.code_points else "glyph"
    if name not in taken:
        return name
    counter = 1
    while f"{name}.{counter}" in taken:
        counter += 1
    return f"{name}.{counter}"


def _postscript_name(family: str) -> str:
    return re.sub(r"[^A-Za-z0-9-]", "", family)[:63] or "icons"


def build_timestamp() -> int:
    """Font timestamp used for head.created/modified.

    Honors ``SOURCE_DATE_EPOCH`` so builds are reproducible; defaults to
    the Unix epoch.
    """
    return timestampSinceEpoch(int(os.environ.get("SOURCE_DATE_EPOCH", "0")))


def draw_glyph(path_data: str) -> object:
    """Draw SVG path data into a TrueType glyph.

    Cubic segments are approximated with quadratics and contours are
    reversed to the TrueType clockwise convention.
    """
    pen = TTGlyphPen(None)
    if path_data.strip():
        parse_path(path_data, Cu2QuPen(pen, MAX_CURVE_ERROR, reverse_direction=True))
    return pen.glyph()


def svg_font_to_ttf(document: FontDocument | bytes) -> bytes:
    """Convert an SVG font document to TrueType bytes.

    Raises:
        TranscodeError: If the document is malformed or encoding fails
    """
    data = document.data if isinstance(document, FontDocument) else document
    info = parse_svg_font(data)

    try:
        fb = FontBuilder(info.units_per_em, isTTF=True)
        timestamp = build_timestamp()
        fb.setupHead(unitsPerEm=info.units_per_em, created=timestamp, modified=timestamp)

        glyph_order = [".notdef"]
        glyphs = {".notdef": draw_glyph("")}
        advances = {".notdef": info.missing_advance}
        cmap: dict[int, str] = {}

        for entry in info.glyphs:
            name = _unique_glyph_name(entry, set(glyph_order))
            glyph_order.append(name)
            glyphs[name] = draw_glyph(entry.path_data)
            advances[name] = entry.advance_width
            for code_point in entry.code_points:
                cmap.setdefault(code_point, name)

        fb.setupGlyphOrder(glyph_order)
        fb.setupCharacterMap(cmap)
        fb.setupGlyf(glyphs)

        glyph_table = fb.font["glyf"]
        metrics = {
            name: (advances[name], getattr(glyph_table[name], "xMin", 0))
            for name in glyph_order
        }
        fb.setupHorizontalMetrics(metrics)
        fb.setupHorizontalHeader(ascent=info.ascent, descent=info.descent)
        fb.setupMaxp()
        fb.setupOS2(
            sTypoAscender=info.ascent,
            sTypoDescender=info.descent,
            sTypoLineGap=0,
            usWinAscent=max(0, info.ascent),
            usWinDescent=max(0, -info.descent),
        )
        fb.setupPost()
        fb.setupNameTable(
            {
                "familyName": info.family,
                "styleName": "Regular",
                "psName": f"{_postscript_name(info.family)}-Regular",
            }
        )

        buffer = BytesIO()
        fb.save(buffer)
    except TranscodeError:
        raise
    except Exception as e:
        raise TranscodeError("ttf", str(e)) from e

    return buffer.getvalue()


def _reencode(ttf: bytes, flavor: str) -> bytes:
    try:
        font = TTFont(BytesIO(ttf), recalcTimestamp=False)
        font.flavor = flavor
        buffer = BytesIO()
        font.save(buffer)
        font.close()
    except Exception as e:
        raise TranscodeError(flavor, str(e)) from e
    return buffer.getvalue()


def ttf_to_woff2(ttf: bytes) -> bytes:
    """Compress TrueType bytes to WOFF2 (requires brotli).

    Raises:
        TranscodeError: If encoding fails
    """
    return _reencode(ttf, "woff2")


def ttf_to_woff(ttf: bytes) -> bytes:
    """Compress TrueType bytes to WOFF 1.0.

    Raises:
        TranscodeError: If encoding fails
    """
    return _reencode(ttf, "woff")


def transcode(
    document: FontDocument,
    formats: Sequence[FontFormat] = (FontFormat.WOFF2,),
) -> list[FontAsset]:
    """Convert the SVG font into every requested binary format.

    The TrueType intermediate is built once; assets are returned in the
    order of ``formats``.

    Raises:
        TranscodeError: If any stage fails
    """
    ttf = svg_font_to_ttf(document)

    assets = []
    for fmt in formats:
        if fmt is FontFormat.TTF:
            data = ttf
        elif fmt is FontFormat.WOFF:
            data = ttf_to_woff(ttf)
        else:
            data = ttf_to_woff2(ttf)
        assets.append(FontAsset(font_name=document.font_name, format=fmt, data=data))
    return assets
