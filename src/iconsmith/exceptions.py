"""Exception hierarchy for Iconsmith."""

from pathlib import Path


class IconsmithError(Exception):
    """Base exception for all Iconsmith errors."""

    pass


class InputError(IconsmithError):
    """Errors related to the icon input directory."""

    pass


class DirectoryNotFoundError(InputError):
    """Input directory does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        super().__init__(f"Input directory not found: '{self.path}'")


class NoInputFilesError(InputError):
    """Input directory holds no icon files."""

    def __init__(self, path: str | Path, extension: str = ".svg") -> None:
        self.path = str(path)
        self.extension = extension
        super().__init__(f"No '{extension}' files found in '{self.path}'")


class FontAssemblyError(IconsmithError):
    """Error merging icons into the intermediate SVG font."""

    def __init__(self, reason: str, source: str | Path | None = None) -> None:
        self.reason = reason
        self.source = str(source) if source is not None else None
        if self.source is not None:
            message = f"Font assembly failed for '{self.source}': {reason}"
        else:
            message = f"Font assembly failed: {reason}"
        super().__init__(message)


class CodePointRangeError(FontAssemblyError):
    """Glyph index falls outside the reserved code point range."""

    def __init__(self, index: int, capacity: int) -> None:
        self.index = index
        self.capacity = capacity
        super().__init__(
            f"glyph index {index} exceeds the private use range ({capacity} glyphs max)"
        )


class GlyphNameCollisionError(FontAssemblyError):
    """Two icons sanitize to the same glyph name."""

    def __init__(self, name: str, first: str | Path, second: str | Path) -> None:
        self.name = name
        self.first = str(first)
        self.second = str(second)
        super().__init__(
            f"glyph name '{name}' is used by both '{self.first}' and '{self.second}'",
            source=second,
        )


class TranscodeError(IconsmithError):
    """Error converting between font container formats."""

    def __init__(self, stage: str, reason: str) -> None:
        self.stage = stage
        self.reason = reason
        super().__init__(f"Font conversion to {stage} failed: {reason}")


class OutputWriteError(IconsmithError):
    """Error writing a generated file."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to write '{self.path}': {reason}")


class UserAbortedError(IconsmithError):
    """Overwrite of existing output was declined."""

    def __init__(self, output_dir: str | Path) -> None:
        self.output_dir = str(output_dir)
        super().__init__(f"Operation cancelled: '{self.output_dir}' was left untouched")
