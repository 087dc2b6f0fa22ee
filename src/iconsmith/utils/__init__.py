"""Utility functions for iconsmith.

This module provides logging setup and run statistics.
"""

from iconsmith.utils.logging import (
    GenerationLogger,
    GenerationStats,
    configure_logging,
)

__all__ = [
    "GenerationLogger",
    "GenerationStats",
    "configure_logging",
]
