"""File I/O layer for iconsmith.

This module handles reading SVG icons from disk, converting them to font
outlines, and writing the generated files.

Key responsibilities:
- Enumerate icon files in a deterministic order
- Load icons into SourceIcon models
- Convert SVG outlines to font-space path data (fonttools svgLib)
- Write fonts and stylesheets to the output directory

Key classes:
- IconReader: Collect and load icons
- OutputWriter: Save generated files
"""

from iconsmith.io.reader import IconReader, collect_svg_files, read_source_icon
from iconsmith.io.writer import OutputWriter

__all__ = [
    "IconReader",
    "OutputWriter",
    "collect_svg_files",
    "read_source_icon",
]
