"""Logging utilities for Iconsmith."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_NAME = "iconsmith"


@dataclass
class GenerationStats:
    """Statistics from a generation run."""

    icon_count: int = 0
    glyph_count: int = 0
    renamed_count: int = 0
    fingerprint: str | None = None
    document_size: int = 0
    written: list[tuple[str, int]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate generation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def bytes_written(self) -> int:
        """Total size of all written files."""
        return sum(size for _, size in self.written)


def _reset_handlers(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()


def configure_logging(
    log_file: Path | None = None,
    console_level: str | None = None,
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Calling this again replaces the handlers installed by a previous call.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output (no console
            logging if None; the CLI reports through rich instead)
        file_level: Logging level for file output
        quiet: If True, suppress console logging entirely

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    _reset_handlers(root_logger)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    if console_level is not None and not quiet:
        console_handler = logging.StreamHandler()
        console_handler.set_name(_HANDLER_NAME)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("iconsmith")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class GenerationLogger:
    """Logger for tracking generation progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = GenerationStats()

    def log_stage(self, stage: str, **details: object) -> None:
        """Log entry into a pipeline stage."""
        self._logger.info("Stage started", stage=stage, **details)

    def log_icons_collected(self, directory: Path, count: int, fingerprint: str) -> None:
        """Log the collected input set."""
        self._logger.info(
            "Icons collected",
            directory=str(directory),
            count=count,
            fingerprint=fingerprint,
        )
        self._stats.icon_count = count
        self._stats.fingerprint = fingerprint

    def log_glyph_named(self, source: Path, name: str, code_point: int, renamed: bool) -> None:
        """Log a glyph's name and code point."""
        self._logger.debug(
            "Glyph named",
            source=str(source),
            glyph=name,
            code_point=f"U+{code_point:04X}",
            renamed=renamed,
        )
        self._stats.glyph_count += 1
        if renamed:
            self._stats.renamed_count += 1
            self._logger.warning("Glyph renamed to avoid collision", source=str(source), glyph=name)

    def log_document_assembled(self, size: int, glyph_count: int) -> None:
        """Log completion of the SVG font document."""
        self._logger.info("Font document assembled", bytes=size, glyphs=glyph_count)
        self._stats.document_size = size

    def log_file_written(self, path: Path, size: int) -> None:
        """Log a written output file."""
        self._logger.info("File written", path=str(path), bytes=size)
        self._stats.written.append((str(path), size))

    def log_failure(self, stage: str, error: Exception) -> None:
        """Log a terminal pipeline failure."""
        self._logger.error(
            "Generation failed",
            stage=stage,
            error=str(error),
            error_type=type(error).__name__,
        )

    def log_aborted(self, output_dir: Path) -> None:
        """Log a declined overwrite."""
        self._logger.warning("Generation cancelled by user", output_dir=str(output_dir))

    @property
    def stats(self) -> GenerationStats:
        """Get current generation statistics."""
        return self._stats
