"""Source icon and glyph representation.

This module defines the two per-icon domain models: the SVG file as read
from disk, and the named, addressable glyph it becomes inside the font.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class SourceIcon:
    """An SVG icon file read from the input directory.

    Attributes:
        path: Path of the icon file (identity)
        size: Raw byte size of the file
        content: Raw SVG document bytes
        stem: File name without the icon extension
    """

    path: Path
    size: int
    content: bytes = field(repr=False)
    stem: str

    @property
    def filename(self) -> str:
        """Get the file name including extension."""
        return self.path.name


@dataclass(frozen=True)
class Glyph:
    """A named, addressable glyph derived from one source icon.

    Names are CSS-class safe (``[A-Za-z0-9-]``). Code points are unique
    within a run.

    Attributes:
        name: Sanitized glyph name
        code_point: Unicode code point assigned to the glyph
        source: The icon this glyph was built from
    """

    name: str
    code_point: int
    source: SourceIcon

    @property
    def char(self) -> str:
        """Get the character for the glyph's code point."""
        return chr(self.code_point)

    @property
    def hex(self) -> str:
        """Get the code point as unpadded lowercase hex (e.g. ``e000``)."""
        return format(self.code_point, "x")

    @property
    def css_escape(self) -> str:
        """Get the CSS string escape for the code point (e.g. ``\\e000``)."""
        return "\\" + self.hex
