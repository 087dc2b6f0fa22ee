"""Content fingerprint of an input set.

The digest covers the number of icons and, for each icon in collection
order, its path and byte size. It is a cheap change signal, not a hash of
file contents.
"""

import hashlib
from collections.abc import Iterable
from pathlib import Path

from iconsmith.domain.icon import SourceIcon


def compute_fingerprint(entries: Iterable[SourceIcon | tuple[str | Path, int]]) -> str:
    """Compute the MD5 fingerprint of an ordered icon set.

    Args:
        entries: SourceIcons, or (path, size) pairs, in collection order

    Returns:
        Hexadecimal digest
    """
    pairs = [
        (str(entry.path), entry.size) if isinstance(entry, SourceIcon) else (str(entry[0]), entry[1])
        for entry in entries
    ]

    digest = hashlib.md5(usedforsecurity=False)
    digest.update(str(len(pairs)).encode("utf-8"))
    for path, size in pairs:
        digest.update(path.encode("utf-8"))
        digest.update(str(size).encode("utf-8"))
    return digest.hexdigest()


def fingerprint_paths(paths: Iterable[Path]) -> str:
    """Fingerprint files on disk using their current sizes."""
    return compute_fingerprint([(path, path.stat().st_size) for path in paths])
