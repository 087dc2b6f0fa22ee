"""Configuration settings for Iconsmith."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from iconsmith.domain.font import FontFormat

# First code point of the Unicode Private Use Area
PRIVATE_USE_BASE = 0xE000

# Size of the reserved code point window starting at the base
MAX_GLYPHS = 0x2000

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


class NameCollisionPolicy(str, Enum):
    """What to do when two icons sanitize to the same glyph name."""

    SUFFIX = "suffix"
    ERROR = "error"
    ALLOW = "allow"


class FontConfig(BaseModel):
    """Configuration for the generated font.

    Outlines are normalized so that each icon's view box height maps to
    ``font_height`` units, sitting ``descent`` units below the baseline.
    """

    font_name: str = Field(
        default="icons",
        min_length=1,
        description="Font family name, also used as the output file stem",
    )
    font_height: int = Field(
        default=1000,
        ge=16,
        le=16384,
        description="Em height in font units",
    )
    descent: int = Field(
        default=0,
        ge=0,
        description="Descent below the baseline in font units",
    )
    normalize: bool = Field(
        default=True,
        description="Scale every icon to the font height",
    )
    base_code_point: int = Field(
        default=PRIVATE_USE_BASE,
        ge=0,
        description="Code point assigned to the first icon",
    )
    formats: list[FontFormat] = Field(
        default_factory=lambda: [FontFormat.WOFF2],
        min_length=1,
        description="Binary font formats to write, in stylesheet order",
    )

    @field_validator("base_code_point")
    @classmethod
    def _code_point_window(cls, value: int) -> int:
        last = value + MAX_GLYPHS - 1
        if last > _MAX_CODE_POINT:
            raise ValueError(
                f"window U+{value:04X}..U+{last:04X} extends past U+{_MAX_CODE_POINT:04X}"
            )
        if value <= _SURROGATES[-1] and last >= _SURROGATES[0]:
            raise ValueError(f"window U+{value:04X}..U+{last:04X} overlaps the surrogate range")
        return value

    @field_validator("formats")
    @classmethod
    def _unique_formats(cls, value: list[FontFormat]) -> list[FontFormat]:
        seen: list[FontFormat] = []
        for fmt in value:
            if fmt not in seen:
                seen.append(fmt)
        return seen


class StylesheetConfig(BaseModel):
    """Configuration for the generated stylesheet."""

    class_prefix: str = Field(
        default="icon",
        min_length=1,
        description="Class prefix, rules read .{prefix}-{name}:before",
    )
    collision_policy: NameCollisionPolicy = Field(
        default=NameCollisionPolicy.SUFFIX,
        description="Handling of duplicate sanitized glyph names",
    )


class PathsConfig(BaseModel):
    """Input and output locations."""

    input_dir: Path = Field(
        default=Path("svg"),
        description="Directory holding the source icons",
    )
    output_dir: Path = Field(
        default=Path("icons"),
        description="Directory receiving the font and stylesheet",
    )
    extension: str = Field(
        default=".svg",
        min_length=1,
        description="File name suffix of source icons",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str | None = Field(
        default=None,
        description="Console log level (console logging off if None)",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class IconsmithSettings(BaseModel):
    """Main application settings."""

    font: FontConfig = Field(default_factory=FontConfig)
    stylesheet: StylesheetConfig = Field(default_factory=StylesheetConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    overwrite: bool = Field(
        default=False,
        description="Replace existing output without asking",
    )


def get_default_settings() -> IconsmithSettings:
    """Get default application settings."""
    return IconsmithSettings()
