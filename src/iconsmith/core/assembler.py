"""Assembly of icon outlines into a single SVG font document.

The assembler mirrors a streaming font builder: glyph contributions are
written to an SVGFontStream, the stream is ended, and the finished
document is produced as a finite ordered sequence of byte chunks.
Consumers buffer the chunks and only use the document once the sequence
is exhausted.

Key components:
- SVGFontStream: Accepts glyphs and produces the document chunk by chunk
- collect_document: Buffers a stream's chunks into a FontDocument
- assemble_font: One-shot helper over a list of glyphs
"""

from collections.abc import Callable, Iterator, Sequence
from xml.sax.saxutils import escape

from iconsmith.core.naming import MAX_GLYPHS
from iconsmith.domain.font import FontDocument
from iconsmith.domain.icon import Glyph
from iconsmith.exceptions import FontAssemblyError, IconsmithError
from iconsmith.io.converter import icon_to_path_data

_ATTR_ENTITIES = {'"': "&quot;"}


def _attr(value: object) -> str:
    return escape(str(value), _ATTR_ENTITIES)


class SVGFontStream:
    """Incrementally assembles glyphs into an SVG font.

    Lifecycle: ``write()`` any number of glyphs, ``end()`` once, then
    iterate ``chunks()`` once.

    Example:
        stream = SVGFontStream("icons")
        for glyph in glyphs:
            stream.write(glyph)
        stream.end()
        document = collect_document(stream)
    """

    def __init__(
        self,
        font_name: str,
        font_height: int = 1000,
        descent: int = 0,
        normalize: bool = True,
    ) -> None:
        """Initialize the stream.

        Args:
            font_name: Font family name
            font_height: Em height every outline is scaled to
            descent: Descent below the baseline
            normalize: Scale each icon to the font height
        """
        self.font_name = font_name
        self.font_height = font_height
        self.descent = descent
        self.normalize = normalize
        self._entries: list[tuple[Glyph, str, int]] = []
        self._ended = False
        self._consumed = False

    @property
    def glyph_count(self) -> int:
        """Number of glyphs written so far."""
        return len(self._entries)

    def write(self, glyph: Glyph) -> None:
        """Add a glyph, converting its source icon to font outlines.

        Raises:
            FontAssemblyError: If the stream has ended, the glyph does not
                fit the code point window, or the icon cannot be parsed
        """
        if self._ended:
            raise FontAssemblyError("cannot write to an ended font stream")
        if len(self._entries) >= MAX_GLYPHS:
            raise FontAssemblyError(
                f"font cannot hold more than {MAX_GLYPHS} glyphs",
                source=glyph.source.path,
            )

        try:
            path_data, advance_width = icon_to_path_data(
                glyph.source.content,
                font_height=self.font_height,
                descent=self.descent,
                normalize=self.normalize,
            )
        except IconsmithError:
            raise
        except Exception as e:
            raise FontAssemblyError(f"invalid SVG: {e}", source=glyph.source.path) from e

        self._entries.append((glyph, path_data, advance_width))

    def end(self) -> None:
        """Finalize the stream; no further writes are accepted."""
        if self._ended:
            raise FontAssemblyError("font stream already ended")
        self._ended = True

    def chunks(self) -> Iterator[bytes]:
        """Produce the document as an ordered sequence of byte chunks.

        Exhaustion of the iterator is the completion signal.

        Raises:
            FontAssemblyError: If the stream has not ended or was consumed
        """
        if not self._ended:
            raise FontAssemblyError("font stream must be ended before reading")
        if self._consumed:
            raise FontAssemblyError("font stream was already consumed")
        self._consumed = True
        return self._produce()

    def _produce(self) -> Iterator[bytes]:
        ascent = self.font_height - self.descent
        default_advance = max(
            (advance for _, _, advance in self._entries), default=self.font_height
        )

        yield (
            '<?xml version="1.0" standalone="no"?>\n'
            '<svg xmlns="http://www.w3.org/2000/svg">\n'
            "<defs>\n"
            f'  <font id="{_attr(self.font_name)}" horiz-adv-x="{default_advance}">\n'
            f'    <font-face font-family="{_attr(self.font_name)}"\n'
            f'      units-per-em="{self.font_height}" ascent="{ascent}"\n'
            f'      descent="{-self.descent}" />\n'
            '    <missing-glyph horiz-adv-x="0" />\n'
        ).encode("utf-8")

        for glyph, path_data, advance_width in self._entries:
            yield (
                "    <glyph\n"
                f'      glyph-name="{_attr(glyph.name)}"\n'
                f'      unicode="&#x{glyph.code_point:X};"\n'
                f'      horiz-adv-x="{advance_width}" d="{path_data}" />\n'
            ).encode("utf-8")

        yield "  </font>\n</defs>\n</svg>\n".encode("utf-8")


def collect_document(
    stream: SVGFontStream,
    on_chunk: Callable[[int], None] | None = None,
) -> FontDocument:
    """Buffer every chunk of an ended stream into one document.

    Args:
        stream: An ended SVGFontStream
        on_chunk: Optional callback receiving each chunk's size

    Returns:
        The complete FontDocument
    """
    buffer: list[bytes] = []
    for chunk in stream.chunks():
        buffer.append(chunk)
        if on_chunk is not None:
            on_chunk(len(chunk))

    # Iterator exhausted: the document is complete
    return FontDocument(
        font_name=stream.font_name,
        data=b"".join(buffer),
        glyph_count=stream.glyph_count,
    )


def assemble_font(
    glyphs: Sequence[Glyph],
    font_name: str,
    font_height: int = 1000,
    descent: int = 0,
    normalize: bool = True,
) -> FontDocument:
    """Merge all glyphs into one SVG font document.

    Raises:
        FontAssemblyError: If any glyph fails; no partial font is produced
    """
    if len(glyphs) > MAX_GLYPHS:
        raise FontAssemblyError(
            f"{len(glyphs)} icons exceed the capacity of {MAX_GLYPHS} glyphs"
        )

    stream = SVGFontStream(
        font_name,
        font_height=font_height,
        descent=descent,
        normalize=normalize,
    )
    for glyph in glyphs:
        stream.write(glyph)
    stream.end()
    return collect_document(stream)
