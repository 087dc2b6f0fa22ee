"""Core pipeline for iconsmith.

This module contains the stages that turn a set of SVG icons into an
icon font:

- Glyph naming (sanitized names, Private Use Area code points)
- Font assembly (streamed SVG font document)
- Transcoding (SVG font -> TrueType -> WOFF2/WOFF)
- Stylesheet emission
- Input fingerprinting

Key functions:
- sanitize: Make an icon file name CSS-class safe
- assign_code_point: Map a collection index to a code point
- build_glyphs: Name every icon and assign code points
- assemble_font: Merge glyph outlines into one SVG font
- transcode: Convert the SVG font to binary formats
- render_stylesheet: Produce the CSS for a glyph set
- compute_fingerprint: Digest of an ordered {path, size} set

Key classes:
- SVGFontStream: Incremental SVG font builder
- FontGenerator: Runs the whole pipeline
"""

from iconsmith.core.assembler import SVGFontStream, assemble_font, collect_document
from iconsmith.core.fingerprint import compute_fingerprint, fingerprint_paths
from iconsmith.core.generator import FontGenerator, PipelineState
from iconsmith.core.naming import MAX_GLYPHS, assign_code_point, build_glyphs, sanitize
from iconsmith.core.stylesheet import render_stylesheet
from iconsmith.core.transcoder import svg_font_to_ttf, transcode, ttf_to_woff, ttf_to_woff2

__all__ = [
    "MAX_GLYPHS",
    # Generator classes
    "FontGenerator",
    "PipelineState",
    # Assembler
    "SVGFontStream",
    "assemble_font",
    "assign_code_point",
    "build_glyphs",
    "collect_document",
    # Fingerprint
    "compute_fingerprint",
    "fingerprint_paths",
    "render_stylesheet",
    "sanitize",
    # Transcoder
    "svg_font_to_ttf",
    "transcode",
    "ttf_to_woff",
    "ttf_to_woff2",
]
