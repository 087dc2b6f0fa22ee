"""Stylesheet generation.

Produces the CSS that exposes the icon font: one ``@font-face`` block, a
shared base rule for every ``<prefix>-*`` class, and one ``:before`` rule
per glyph binding its class to its code point.
"""

from collections.abc import Sequence

from iconsmith.domain.font import FontFormat, StylesheetDocument
from iconsmith.domain.icon import Glyph


def font_face_rule(
    font_name: str,
    formats: Sequence[FontFormat] = (FontFormat.WOFF2,),
) -> str:
    """Render the ``@font-face`` declaration.

    Each format contributes one ``url(...) format(...)`` source, in order.
    """
    sources = ",\n       ".join(
        f"url('{font_name}.{fmt.extension}') format('{fmt.css_format}')" for fmt in formats
    )
    return (
        "@font-face {\n"
        f"  font-family: '{font_name}';\n"
        f"  src: {sources};\n"
        "  font-weight: normal;\n"
        "  font-style: normal;\n"
        "}"
    )


def base_rule(font_name: str, prefix: str = "icon") -> str:
    """Render the rule shared by every glyph class."""
    return (
        f'[class^="{prefix}-"], [class*=" {prefix}-"] {{\n'
        f"  font-family: '{font_name}' !important;\n"
        "  speak: none;\n"
        "  font-style: normal;\n"
        "  font-weight: normal;\n"
        "  font-variant: normal;\n"
        "  text-transform: none;\n"
        "  line-height: 1;\n"
        "  -webkit-font-smoothing: antialiased;\n"
        "  -moz-osx-font-smoothing: grayscale;\n"
        "}"
    )


def glyph_rule(glyph: Glyph, prefix: str = "icon") -> str:
    """Render the ``:before`` rule of a single glyph."""
    return f'.{prefix}-{glyph.name}:before {{ content: "{glyph.css_escape}"; }}'


def render_stylesheet(
    glyphs: Sequence[Glyph],
    font_name: str,
    prefix: str = "icon",
    formats: Sequence[FontFormat] = (FontFormat.WOFF2,),
) -> StylesheetDocument:
    """Build the complete stylesheet.

    Glyph rules follow the order of ``glyphs``. Nothing is deduplicated
    or minified.

    Args:
        glyphs: Glyphs in collection order
        font_name: Font family name and file stem
        prefix: Class name prefix
        formats: Font files referenced by ``@font-face``

    Returns:
        StylesheetDocument with one rule per glyph
    """
    header = f"{font_face_rule(font_name, formats)}\n{base_rule(font_name, prefix)}"
    rules = [glyph_rule(glyph, prefix) for glyph in glyphs]
    text = f"{header}\n\n" + "\n".join(rules) + "\n"
    return StylesheetDocument(font_name=font_name, text=text, rule_count=len(rules))
