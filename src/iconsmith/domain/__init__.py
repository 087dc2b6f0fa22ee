"""Domain models for iconsmith.

This module contains the domain models representing source icons, glyphs
and the artifacts of a generation run. All models are:

- Immutable (frozen dataclasses)
- Scoped to a single run
- Independent of fonttools implementation details

Key classes:
- SourceIcon: An SVG file read from the input directory
- Glyph: A named glyph with its assigned code point
- FontDocument: The merged in-memory SVG font
- FontAsset: A binary font (TTF, WOFF or WOFF2) ready to be written
- StylesheetDocument: The generated CSS
"""

from iconsmith.domain.font import FontAsset, FontDocument, FontFormat, StylesheetDocument
from iconsmith.domain.icon import Glyph, SourceIcon

__all__: list[str] = [
    # Enums
    "FontFormat",
    # Core types
    "SourceIcon",
    "Glyph",
    "FontDocument",
    "FontAsset",
    "StylesheetDocument",
]
