"""Output writer for generated fonts and stylesheets.

This module provides the OutputWriter class, which owns the output
directory of a run. Files are written in place, one plain write each.
"""

from pathlib import Path

from iconsmith.domain.font import FontAsset, StylesheetDocument
from iconsmith.exceptions import OutputWriteError


class OutputWriter:
    """Writes font assets and the stylesheet to the output directory.

    Example:
        writer = OutputWriter(Path("icons"))
        writer.prepare()
        writer.write_asset(asset)
        writer.write_stylesheet(stylesheet)
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the output writer.

        Args:
            output_dir: Directory receiving the generated files
        """
        self._output_dir = output_dir

    @property
    def output_dir(self) -> Path:
        """Get the output directory."""
        return self._output_dir

    def has_existing_output(self) -> bool:
        """Check whether the output directory already exists."""
        return self._output_dir.exists()

    def prepare(self) -> None:
        """Create the output directory (and parents) if missing.

        Raises:
            OutputWriteError: If the directory cannot be created
        """
        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(self._output_dir, str(e)) from e

    def _write(self, filename: str, data: bytes) -> Path:
        path = self._output_dir / filename
        try:
            path.write_bytes(data)
        except OSError as e:
            raise OutputWriteError(path, str(e)) from e
        return path

    def write_asset(self, asset: FontAsset) -> Path:
        """Write a binary font as ``<fontName>.<ext>``.

        Returns:
            Path of the written file
        """
        return self._write(asset.filename, asset.data)

    def write_stylesheet(self, stylesheet: StylesheetDocument) -> Path:
        """Write the stylesheet as ``<fontName>.css``.

        Returns:
            Path of the written file
        """
        return self._write(stylesheet.filename, stylesheet.text.encode("utf-8"))
