"""CLI application entry point for iconsmith.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.progress import Progress, TaskID

from iconsmith import __version__
from iconsmith.cli.output import (
    ask_overwrite,
    console,
    create_progress,
    print_cancelled,
    print_error,
    print_glyph_names,
    print_header,
    print_input_info,
    print_step,
    print_success,
)
from iconsmith.config import (
    FontConfig,
    IconsmithSettings,
    LoggingConfig,
    NameCollisionPolicy,
    PathsConfig,
    StylesheetConfig,
)
from iconsmith.core import FontGenerator, PipelineState
from iconsmith.domain import FontFormat
from iconsmith.exceptions import (
    DirectoryNotFoundError,
    FontAssemblyError,
    IconsmithError,
    NoInputFilesError,
    OutputWriteError,
    TranscodeError,
    UserAbortedError,
)
from iconsmith.utils import GenerationStats

# Exit codes
EXIT_FAILURE = 1
EXIT_NO_INPUT_DIR = 2
EXIT_NO_INPUT_FILES = 3

STAGE_LABELS = {
    PipelineState.COLLECTING_INPUTS: "Collecting icons",
    PipelineState.ASSEMBLING_FONT: "Assembling font",
    PipelineState.TRANSCODING_FONT: "Converting font",
    PipelineState.EMITTING_STYLESHEET: "Writing stylesheet",
}

# Create the Typer app
app = typer.Typer(
    name="iconsmith",
    help="Build an icon font and stylesheet from a directory of SVG icons.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Iconsmith[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def build(
    input_dir: Annotated[
        Path,
        typer.Argument(
            help="Directory containing the SVG icons",
        ),
    ] = Path("svg"),
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "-o",
            help="Output directory for the font and stylesheet",
        ),
    ] = Path("icons"),
    name: Annotated[
        str,
        typer.Option(
            "--name",
            "-n",
            help="Font family name and output file stem",
        ),
    ] = "icons",
    prefix: Annotated[
        str,
        typer.Option(
            "--prefix",
            "-p",
            help="CSS class prefix (rules read .{prefix}-{glyph})",
        ),
    ] = "icon",
    formats: Annotated[
        list[str] | None,
        typer.Option(
            "--format",
            "-f",
            help="Font format to write (woff2|woff|ttf), repeatable",
        ),
    ] = None,
    on_collision: Annotated[
        str,
        typer.Option(
            "--on-collision",
            help="Duplicate glyph names (suffix|error|allow)",
        ),
    ] = "suffix",
    yes: Annotated[
        bool,
        typer.Option(
            "--yes",
            "-y",
            help="Overwrite existing output without asking",
        ),
    ] = False,
    fingerprint: Annotated[
        bool,
        typer.Option(
            "--fingerprint",
            help="Print the input fingerprint and exit",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Also log events to stderr at this level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Build an icon font from every SVG file in INPUT_DIR.

    Each icon becomes one glyph in the Unicode Private Use Area (U+E000
    upwards, in file name order) and one CSS rule.

    Example:
        iconsmith svg -o icons

    This will create icons/icons.woff2 and icons/icons.css.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=EXIT_FAILURE)

    try:
        font_formats = [FontFormat(fmt.lower()) for fmt in (formats or ["woff2"])]
    except ValueError:
        print_error(
            f"Invalid format in: {', '.join(formats or [])}",
            details="Valid values: woff2, woff, ttf",
        )
        raise typer.Exit(code=EXIT_FAILURE)

    try:
        policy = NameCollisionPolicy(on_collision.lower())
    except ValueError:
        print_error(
            f"Invalid collision policy: {on_collision}",
            details="Valid values: suffix, error, allow",
        )
        raise typer.Exit(code=EXIT_FAILURE)

    try:
        settings = IconsmithSettings(
            font=FontConfig(font_name=name, formats=font_formats),
            stylesheet=StylesheetConfig(class_prefix=prefix, collision_policy=policy),
            paths=PathsConfig(input_dir=input_dir, output_dir=output),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level,
            ),
            overwrite=yes,
        )
    except ValidationError as e:
        print_error("Invalid options", details=str(e))
        raise typer.Exit(code=EXIT_FAILURE)

    try:
        generator = FontGenerator(settings, quiet=quiet)

        if fingerprint:
            console.print(generator.fingerprint(input_dir))
            raise typer.Exit(code=0)

        if not quiet:
            print_header(__version__)

        stats = _run_generator(generator, input_dir, output, quiet, verbose)

        if not quiet:
            print_success(
                written=stats.written,
                total_time_s=stats.duration_seconds,
                glyphs=stats.glyph_count,
                renamed=stats.renamed_count,
            )

    except DirectoryNotFoundError as e:
        print_error(f"Input directory not found: {e.path}")
        raise typer.Exit(code=EXIT_NO_INPUT_DIR)
    except NoInputFilesError as e:
        print_error(f"No {e.extension} files found in {e.path}")
        raise typer.Exit(code=EXIT_NO_INPUT_FILES)
    except UserAbortedError as e:
        if not quiet:
            print_cancelled(e.output_dir)
        raise typer.Exit(code=0)
    except FontAssemblyError as e:
        print_error("Could not assemble font", details=str(e))
        raise typer.Exit(code=EXIT_FAILURE)
    except TranscodeError as e:
        print_error(f"Could not convert font to {e.stage}: {e.reason}")
        raise typer.Exit(code=EXIT_FAILURE)
    except OutputWriteError as e:
        print_error(f"Could not write {e.path}: {e.reason}")
        raise typer.Exit(code=EXIT_FAILURE)
    except IconsmithError as e:
        print_error(str(e))
        raise typer.Exit(code=EXIT_FAILURE)
    except KeyboardInterrupt:
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=EXIT_FAILURE)


def _run_generator(
    generator: FontGenerator,
    input_dir: Path,
    output_dir: Path,
    quiet: bool,
    verbose: bool,
) -> GenerationStats:
    """Run the generator with step and progress reporting.

    The progress bar is only started once assembly begins so that it never
    overlaps the overwrite prompt.
    """
    progress: Progress | None = None
    task_id: TaskID | None = None

    def stop_progress() -> None:
        nonlocal progress
        if progress is not None:
            progress.stop()
            progress = None

    def on_stage(state: PipelineState) -> None:
        stop_progress()
        if quiet or state not in STAGE_LABELS:
            return
        print_step(STAGE_LABELS[state])
        if state is PipelineState.ASSEMBLING_FONT:
            stats = generator.generation_logger.stats
            print_input_info(str(input_dir), stats.icon_count, stats.fingerprint or "")
            print_glyph_names(generator.last_glyph_names, verbose)

    def on_progress(done: int, total: int) -> None:
        nonlocal progress, task_id
        if quiet:
            return
        if progress is None:
            progress = create_progress()
            progress.start()
            task_id = progress.add_task(f"Assembling {total} glyphs", total=total)
        progress.update(task_id, completed=done)

    try:
        return generator.generate(
            input_dir=input_dir,
            output_dir=output_dir,
            confirm=ask_overwrite,
            progress_callback=on_progress,
            stage_callback=on_stage,
        )
    finally:
        stop_progress()


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
