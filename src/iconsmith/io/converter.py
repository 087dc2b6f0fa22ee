"""Converters between SVG icons and font-space outlines.

This module handles the conversion of an SVG icon document into glyph
outline data: view box detection, scaling to the em height, flipping the
y axis, and serializing the result as SVG path data.
"""

import re
from typing import Any

from fontTools.pens.boundsPen import ControlBoundsPen
from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.pens.transformPen import TransformPen
from fontTools.svgLib.path import SVGPath

ViewBox = tuple[float, float, float, float]
Transform = tuple[float, float, float, float, float, float]

_LENGTH_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(px)?\s*$")


def format_number(value: float) -> str:
    """Format a coordinate for path data, rounded to two decimals."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def parse_length(value: str | None) -> float | None:
    """Parse an SVG length attribute in user units or px.

    Percentages and other units are not resolvable and return None.
    """
    if not value:
        return None
    match = _LENGTH_RE.match(value)
    if match is None:
        return None
    return float(match.group(1))


def parse_view_box(root: Any) -> ViewBox | None:
    """Read the view box of an SVG root element.

    Falls back to the ``width``/``height`` attributes when ``viewBox`` is
    absent or invalid.

    Args:
        root: Root element of the SVG document

    Returns:
        (x, y, width, height), or None if the document declares neither
    """
    raw = root.get("viewBox")
    if raw:
        parts = re.split(r"[\s,]+", raw.strip())
        if len(parts) == 4:
            try:
                x, y, w, h = (float(p) for p in parts)
            except ValueError:
                pass
            else:
                if w > 0 and h > 0:
                    return (x, y, w, h)

    width = parse_length(root.get("width"))
    height = parse_length(root.get("height"))
    if width and height and width > 0 and height > 0:
        return (0.0, 0.0, width, height)
    return None


def outline_view_box(svg: SVGPath) -> ViewBox | None:
    """Compute a view box from the outline's control bounds."""
    pen = ControlBoundsPen(None)
    svg.draw(pen)
    if pen.bounds is None:
        return None
    x_min, y_min, x_max, y_max = pen.bounds
    width = x_max - x_min
    height = y_max - y_min
    if width <= 0 or height <= 0:
        return None
    return (x_min, y_min, width, height)


def font_space_transform(
    view_box: ViewBox,
    font_height: int,
    descent: int = 0,
    normalize: bool = True,
) -> Transform:
    """Build the affine transform from SVG user space to font units.

    The top of the view box lands on ``font_height - descent`` and the
    bottom on ``-descent``; the y axis is flipped since SVG grows down.

    Args:
        view_box: Icon view box (x, y, width, height)
        font_height: Em height in font units
        descent: Descent below the baseline
        normalize: Scale the view box height to ``font_height``

    Returns:
        Affine transform as a 6-tuple (xx, xy, yx, yy, dx, dy)
    """
    x, y, _, height = view_box
    scale = font_height / height if normalize else 1.0
    return (scale, 0.0, 0.0, -scale, -x * scale, (y + height) * scale - descent)


def icon_to_path_data(
    content: bytes,
    font_height: int,
    descent: int = 0,
    normalize: bool = True,
) -> tuple[str, int]:
    """Convert an SVG icon to font-space path data.

    Handles every shape fontTools' svgLib understands (path, rect, circle,
    ellipse, line, polyline, polygon) together with their transforms.

    Args:
        content: Raw SVG document bytes
        font_height: Em height in font units
        descent: Descent below the baseline
        normalize: Scale the icon to the font height

    Returns:
        Tuple of (path data, advance width)

    Raises:
        Exception: If the document cannot be parsed
    """
    svg = SVGPath.fromstring(content)

    view_box = parse_view_box(svg.root) or outline_view_box(svg)
    if view_box is None:
        # Nothing to draw, keep a square advance
        return "", font_height

    transform = font_space_transform(view_box, font_height, descent, normalize)
    pen = SVGPathPen(None, ntos=format_number)
    svg.draw(TransformPen(pen, transform))

    advance_width = round(view_box[2] * transform[0])
    return pen.getCommands(), max(advance_width, 0)
