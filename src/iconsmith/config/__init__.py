"""Configuration management for iconsmith.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- FontConfig: Font metrics, naming and output formats
- StylesheetConfig: Class prefix and glyph name collision handling
- PathsConfig: Input and output directories
- LoggingConfig: Logging settings
- IconsmithSettings: Main application settings
"""

from iconsmith.config.settings import (
    MAX_GLYPHS,
    PRIVATE_USE_BASE,
    FontConfig,
    IconsmithSettings,
    LoggingConfig,
    NameCollisionPolicy,
    PathsConfig,
    StylesheetConfig,
    get_default_settings,
)

__all__ = [
    "MAX_GLYPHS",
    "PRIVATE_USE_BASE",
    "FontConfig",
    "IconsmithSettings",
    "LoggingConfig",
    "NameCollisionPolicy",
    "PathsConfig",
    "StylesheetConfig",
    "get_default_settings",
]
