"""Font and stylesheet artifacts produced by a generation run."""

from dataclasses import dataclass
from enum import Enum


class FontFormat(str, Enum):
    """Binary font container formats."""

    TTF = "ttf"
    WOFF = "woff"
    WOFF2 = "woff2"

    @property
    def extension(self) -> str:
        """File extension without the leading dot."""
        return self.value

    @property
    def css_format(self) -> str:
        """Format token used in ``@font-face`` ``src`` declarations."""
        return "truetype" if self is FontFormat.TTF else self.value


@dataclass(frozen=True)
class FontDocument:
    """The merged SVG font, held in memory only.

    Attributes:
        font_name: Font family name
        data: UTF-8 encoded SVG font document
        glyph_count: Number of glyphs in the document
    """

    font_name: str
    data: bytes
    glyph_count: int

    def text(self) -> str:
        """Decode the document as text."""
        return self.data.decode("utf-8")


@dataclass(frozen=True)
class FontAsset:
    """A binary font destined for disk.

    Attributes:
        font_name: Font family name
        format: Container format of ``data``
        data: Encoded font bytes
    """

    font_name: str
    format: FontFormat
    data: bytes

    @property
    def filename(self) -> str:
        """Get the output file name (``<fontName>.<ext>``)."""
        return f"{self.font_name}.{self.format.extension}"


@dataclass(frozen=True)
class StylesheetDocument:
    """Generated CSS text.

    Attributes:
        font_name: Font family name, also the file stem
        text: Stylesheet contents
        rule_count: Number of per-glyph rules
    """

    font_name: str
    text: str
    rule_count: int

    @property
    def filename(self) -> str:
        """Get the output file name (``<fontName>.css``)."""
        return f"{self.font_name}.css"
