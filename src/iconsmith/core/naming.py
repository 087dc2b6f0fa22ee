"""Glyph naming and code point assignment.

Every icon becomes a glyph whose name is safe to use in a CSS class and
whose code point is drawn from the Unicode Private Use Area in collection
order.
"""

import re
from collections.abc import Iterable

from iconsmith.config.settings import MAX_GLYPHS, PRIVATE_USE_BASE, NameCollisionPolicy
from iconsmith.domain.icon import Glyph, SourceIcon
from iconsmith.exceptions import CodePointRangeError, GlyphNameCollisionError

_UNSAFE_RE = re.compile(r"[^A-Za-z0-9]")


def sanitize(basename: str) -> str:
    """Replace every character outside ``[A-Za-z0-9]`` with a hyphen.

    The transform is length preserving: no collapsing of consecutive
    hyphens and no case folding.

    Args:
        basename: Icon file name without extension

    Returns:
        Sanitized glyph name
    """
    return _UNSAFE_RE.sub("-", basename)


def assign_code_point(
    index: int,
    base: int = PRIVATE_USE_BASE,
    capacity: int = MAX_GLYPHS,
) -> int:
    """Return the code point for the icon at ``index`` in collection order.

    Raises:
        CodePointRangeError: If index is negative or beyond capacity
    """
    if index < 0 or index >= capacity:
        raise CodePointRangeError(index, capacity)
    return base + index


def _disambiguate(name: str, taken: set[str]) -> str:
    counter = 2
    candidate = f"{name}-{counter}"
    while candidate in taken:
        counter += 1
        candidate = f"{name}-{counter}"
    return candidate


def build_glyphs(
    icons: Iterable[SourceIcon],
    policy: NameCollisionPolicy = NameCollisionPolicy.SUFFIX,
    base: int = PRIVATE_USE_BASE,
) -> list[Glyph]:
    """Create one glyph per icon, preserving order.

    Args:
        icons: Source icons in collection order
        policy: Handling of icons whose sanitized names collide
        base: Code point of the first glyph

    Returns:
        Glyphs in the same order as ``icons``

    Raises:
        CodePointRangeError: If there are more icons than code points
        GlyphNameCollisionError: On a collision under the ERROR policy
    """
    glyphs: list[Glyph] = []
    owners: dict[str, SourceIcon] = {}

    for index, icon in enumerate(icons):
        code_point = assign_code_point(index, base)
        name = sanitize(icon.stem)

        if name in owners:
            if policy is NameCollisionPolicy.ERROR:
                raise GlyphNameCollisionError(name, owners[name].path, icon.path)
            if policy is NameCollisionPolicy.SUFFIX:
                name = _disambiguate(name, set(owners))

        owners.setdefault(name, icon)
        glyphs.append(Glyph(name=name, code_point=code_point, source=icon))

    return glyphs
