"""Iconsmith - Build an icon font from a directory of SVG icons.

Iconsmith is a CLI tool that merges a directory of SVG icons into a single
WOFF2 icon font plus a stylesheet that binds one CSS class per icon to a
Private Use Area code point.

Example:
    $ iconsmith svg -o icons

This will create icons/icons.woff2 and icons/icons.css with rules such as
``.icon-home:before { content: "\\e000"; }``.
"""

__version__ = "0.1.0"
__author__ = "Iconsmith contributors"

__all__ = ["__author__", "__version__"]
