"""Orchestration of the icon font generation pipeline.

This module coordinates the full workflow as a strictly sequential,
single pass state machine:

    COLLECTING_INPUTS -> ASSEMBLING_FONT -> TRANSCODING_FONT
        -> EMITTING_STYLESHEET -> DONE

Any failure moves the run to FAILED and is re-raised; nothing is retried
and no partial font is produced. Output files are only written once every
artifact has been built.

Key components:
- PipelineState: States of a generation run
- FontGenerator: Main orchestrator class
"""

import time
from collections.abc import Callable
from enum import Enum
from pathlib import Path

from iconsmith.config import IconsmithSettings
from iconsmith.core.assembler import SVGFontStream, collect_document
from iconsmith.core.fingerprint import compute_fingerprint, fingerprint_paths
from iconsmith.core.naming import build_glyphs, sanitize
from iconsmith.core.stylesheet import render_stylesheet
from iconsmith.core.transcoder import transcode
from iconsmith.exceptions import UserAbortedError
from iconsmith.io import IconReader, OutputWriter
from iconsmith.utils import GenerationLogger, GenerationStats, configure_logging

ConfirmCallback = Callable[[str], bool]
ProgressCallback = Callable[[int, int], None]
StageCallback = Callable[["PipelineState"], None]


class PipelineState(str, Enum):
    """States of a generation run."""

    IDLE = "idle"
    COLLECTING_INPUTS = "collecting_inputs"
    ASSEMBLING_FONT = "assembling_font"
    TRANSCODING_FONT = "transcoding_font"
    EMITTING_STYLESHEET = "emitting_stylesheet"
    DONE = "done"
    FAILED = "failed"
    ABORTED = "aborted"


class FontGenerator:
    """Builds an icon font and stylesheet from a directory of SVG icons.

    Manages the complete workflow:
    1. Collect icon files (sorted by name)
    2. Ask for confirmation if the output directory already exists
    3. Name glyphs and assign Private Use Area code points
    4. Assemble the SVG font document
    5. Transcode it to the configured binary formats
    6. Emit the stylesheet
    7. Write fonts and stylesheet

    Example:
        settings = IconsmithSettings()
        generator = FontGenerator(settings)
        stats = generator.generate(
            input_dir=Path("svg"),
            output_dir=Path("icons"),
            confirm=lambda prompt: True,
        )
    """

    def __init__(self, config: IconsmithSettings, quiet: bool = False) -> None:
        """Initialize the generator with configuration.

        Args:
            config: Iconsmith settings
            quiet: Suppress console logging except errors
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.generation_logger = GenerationLogger(self.logger)
        self.state = PipelineState.IDLE
        self._stage_callback: StageCallback | None = None
        self.last_glyph_names: list[str] = []

    def _enter(self, state: PipelineState, **details: object) -> None:
        self.state = state
        self.generation_logger.log_stage(state.value, **details)
        if self._stage_callback is not None:
            self._stage_callback(state)

    def fingerprint(self, input_dir: Path | None = None) -> str:
        """Fingerprint the input set without building anything.

        Raises:
            DirectoryNotFoundError: If the input directory does not exist
            NoInputFilesError: If it holds no icons
        """
        directory = input_dir or self.config.paths.input_dir
        reader = IconReader(directory, self.config.paths.extension)
        return fingerprint_paths(reader.collect())

    def generate(
        self,
        input_dir: Path | None = None,
        output_dir: Path | None = None,
        confirm: ConfirmCallback | None = None,
        progress_callback: ProgressCallback | None = None,
        stage_callback: StageCallback | None = None,
    ) -> GenerationStats:
        """Run the pipeline once over the whole input set.

        Args:
            input_dir: Icon directory (defaults to configured path)
            output_dir: Output directory (defaults to configured path)
            confirm: Asked with a prompt when output already exists;
                returning False cancels the run. Without it, existing
                output is only replaced when ``overwrite`` is set.
            progress_callback: Called with (glyphs_assembled, total)
            stage_callback: Called on every state transition

        Returns:
            GenerationStats for the run

        Raises:
            DirectoryNotFoundError: If the input directory does not exist
            NoInputFilesError: If no icon was found
            UserAbortedError: If overwriting existing output was declined
            FontAssemblyError: If any icon cannot be merged
            TranscodeError: If font conversion fails
            OutputWriteError: If a file cannot be written
        """
        input_dir = input_dir or self.config.paths.input_dir
        output_dir = output_dir or self.config.paths.output_dir
        font = self.config.font
        stylesheet_config = self.config.stylesheet
        self.generation_logger = GenerationLogger(self.logger)
        stats = self.generation_logger.stats
        stats.start_time = time.time()
        self._stage_callback = stage_callback

        try:
            self._enter(PipelineState.COLLECTING_INPUTS, input_dir=str(input_dir))
            reader = IconReader(input_dir, self.config.paths.extension)
            reader.collect()

            writer = OutputWriter(output_dir)
            if writer.has_existing_output() and not self.config.overwrite:
                prompt = f"Output directory '{output_dir}' already exists. Overwrite?"
                if confirm is None or not confirm(prompt):
                    self.state = PipelineState.ABORTED
                    self.generation_logger.log_aborted(output_dir)
                    raise UserAbortedError(output_dir)

            icons = reader.read_all()
            self.generation_logger.log_icons_collected(
                input_dir, len(icons), compute_fingerprint(icons)
            )

            glyphs = build_glyphs(
                icons,
                policy=stylesheet_config.collision_policy,
                base=font.base_code_point,
            )
            for glyph in glyphs:
                self.generation_logger.log_glyph_named(
                    glyph.source.path,
                    glyph.name,
                    glyph.code_point,
                    renamed=glyph.name != sanitize(glyph.source.stem),
                )

            self.last_glyph_names = [glyph.name for glyph in glyphs]
            self._enter(PipelineState.ASSEMBLING_FONT, glyphs=len(glyphs))
            stream = SVGFontStream(
                font.font_name,
                font_height=font.font_height,
                descent=font.descent,
                normalize=font.normalize,
            )
            for done, glyph in enumerate(glyphs, start=1):
                stream.write(glyph)
                if progress_callback is not None:
                    progress_callback(done, len(glyphs))
            stream.end()
            document = collect_document(stream)
            self.generation_logger.log_document_assembled(
                len(document.data), document.glyph_count
            )

            self._enter(
                PipelineState.TRANSCODING_FONT,
                formats=[fmt.value for fmt in font.formats],
            )
            assets = transcode(document, font.formats)

            self._enter(PipelineState.EMITTING_STYLESHEET)
            stylesheet = render_stylesheet(
                glyphs,
                font.font_name,
                prefix=stylesheet_config.class_prefix,
                formats=font.formats,
            )

            writer.prepare()
            for asset in assets:
                path = writer.write_asset(asset)
                self.generation_logger.log_file_written(path, len(asset.data))
            path = writer.write_stylesheet(stylesheet)
            self.generation_logger.log_file_written(path, len(stylesheet.text.encode("utf-8")))

            self._enter(PipelineState.DONE)
        except UserAbortedError:
            raise
        except Exception as e:
            self.generation_logger.log_failure(self.state.value, e)
            self.state = PipelineState.FAILED
            raise
        finally:
            stats.end_time = time.time()
            self._stage_callback = None

        return stats
