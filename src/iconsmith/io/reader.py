"""Icon reader for collecting SVG files.

This module provides the IconReader class for enumerating the icon files
of an input directory and loading them into SourceIcon models.
"""

from collections.abc import Iterator
from pathlib import Path

from iconsmith.domain.icon import SourceIcon
from iconsmith.exceptions import DirectoryNotFoundError, FontAssemblyError, NoInputFilesError


def collect_svg_files(directory: Path, extension: str = ".svg") -> list[Path]:
    """List the icon files of a directory.

    Only regular files whose name ends with ``extension`` are kept. The
    result is sorted by file name so that code point assignment does not
    depend on the filesystem's listing order.

    Args:
        directory: Directory to scan
        extension: Required file name suffix (case-sensitive)

    Returns:
        Sorted list of icon file paths

    Raises:
        DirectoryNotFoundError: If the directory does not exist
        NoInputFilesError: If no icon file was found
    """
    if not directory.is_dir():
        raise DirectoryNotFoundError(directory)

    files = [
        entry
        for entry in directory.iterdir()
        if entry.name.endswith(extension) and entry.is_file()
    ]
    files.sort(key=lambda p: p.name)

    if not files:
        raise NoInputFilesError(directory, extension)

    return files


def icon_stem(filename: str, extension: str = ".svg") -> str:
    """Strip the icon extension from a file name."""
    if extension and filename.endswith(extension):
        return filename[: -len(extension)]
    return filename


def read_source_icon(path: Path, extension: str = ".svg") -> SourceIcon:
    """Read one icon file.

    Raises:
        FontAssemblyError: If the file cannot be read
    """
    try:
        content = path.read_bytes()
    except OSError as e:
        raise FontAssemblyError(f"could not read icon: {e}", source=path) from e

    return SourceIcon(
        path=path,
        size=len(content),
        content=content,
        stem=icon_stem(path.name, extension),
    )


class IconReader:
    """Collects and loads the icons of an input directory.

    Example:
        reader = IconReader(Path("svg"))
        for icon in reader.iter_icons():
            print(icon.stem, icon.size)
    """

    def __init__(self, directory: Path, extension: str = ".svg") -> None:
        """Initialize the icon reader.

        Args:
            directory: Directory holding the icons
            extension: File name suffix of icon files
        """
        self._directory = directory
        self._extension = extension
        self._paths: list[Path] | None = None

    def collect(self) -> list[Path]:
        """Enumerate icon files, caching the result.

        Raises:
            DirectoryNotFoundError: If the directory does not exist
            NoInputFilesError: If no icon file was found
        """
        if self._paths is None:
            self._paths = collect_svg_files(self._directory, self._extension)
        return list(self._paths)

    def iter_icons(self) -> Iterator[SourceIcon]:
        """Read icons in collection order.

        Yields:
            SourceIcon models
        """
        for path in self.collect():
            yield read_source_icon(path, self._extension)

    def read_all(self) -> list[SourceIcon]:
        """Read every icon in collection order."""
        return list(self.iter_icons())
