"""Command-line interface for iconsmith.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Progress bar for glyph assembly
- Overwrite confirmation prompt (or --yes)
- Verbose/quiet output modes
- Distinct exit codes for missing input directory and missing icons
"""

from iconsmith.cli.app import cli, main

__all__ = ["cli", "main"]
