"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars and formatted messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.prompt import Confirm
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for glyph assembly.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Iconsmith[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_input_info(input_dir: str, icon_count: int, fingerprint: str) -> None:
    """Print the collected input set.

    Args:
        input_dir: Directory the icons were read from
        icon_count: Number of icon files found
        fingerprint: Input fingerprint digest
    """
    line = Text("  ")
    line.append(input_dir)
    console.print(line)
    console.print(f"  {icon_count:,} icons {SYM_DOT} fingerprint {fingerprint[:12]}")


def print_glyph_names(names: list[str], verbose: bool) -> None:
    """Print glyph names in verbose mode.

    Args:
        names: Glyph names in collection order
        verbose: Whether to show the list at all
    """
    if verbose and names:
        names_str = ", ".join(names[:20])
        if len(names) > 20:
            names_str += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(names) - 20} more)"
        console.print(f"  {names_str}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def format_file_size(size_bytes: int) -> str:
    """Format a byte count in human-readable form (e.g. "12 KB")."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def print_success(
    written: list[tuple[str, int]],
    total_time_s: float,
    glyphs: int,
    renamed: int,
) -> None:
    """Print success message with summary.

    Args:
        written: (path, size) of every written file
        total_time_s: Total generation time in seconds
        glyphs: Number of glyphs in the font
        renamed: Number of glyphs renamed to avoid collisions
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    for path, size in written:
        line = Text("  ")
        line.append(path, style="bold")
        line.append(f" ({format_file_size(size)})")
        console.print(line)

    renamed_style = "yellow" if renamed > 0 else "green"
    console.print(
        f"  {glyphs} glyphs {SYM_DOT} "
        f"[{renamed_style}]{renamed} renamed[/{renamed_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancelled(output_dir: str) -> None:
    """Print notice for a declined overwrite."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {output_dir} left untouched")


def ask_overwrite(prompt: str) -> bool:
    """Ask the user to confirm overwriting existing output.

    Closed input (EOF) counts as a refusal.
    """
    try:
        return Confirm.ask(prompt, console=console, default=False)
    except EOFError:
        console.print()
        return False
