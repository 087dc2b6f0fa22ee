"""Tests for logging utilities."""

import json
import logging
from pathlib import Path

import structlog

from iconsmith.utils import GenerationLogger, GenerationStats, configure_logging


def _own_stream_handlers() -> list[logging.Handler]:
    return [
        h
        for h in logging.getLogger().handlers
        if h.get_name() == "iconsmith" and not isinstance(h, logging.FileHandler)
    ]


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_no_file_by_default(self, tmp_path: Path, monkeypatch):
        """Test no log file is created unless requested."""
        monkeypatch.chdir(tmp_path)
        configure_logging()
        assert list(tmp_path.iterdir()) == []

    def test_file_receives_json(self, tmp_path: Path):
        """Test file logging writes JSON events."""
        log_file = tmp_path / "logs" / "run.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        logger.info("Hello", answer=42)

        lines = [line for line in log_file.read_text().splitlines() if "Hello" in line]
        assert len(lines) == 1
        event = json.loads(lines[0].split(" | ", 3)[3])
        assert event["event"] == "Hello"
        assert event["answer"] == 42

    def test_reconfigure_replaces_handlers(self, tmp_path: Path):
        """Test repeated calls do not stack handlers."""
        configure_logging(log_file=tmp_path / "a.log")
        configure_logging(log_file=tmp_path / "b.log")
        names = [h.get_name() for h in logging.getLogger().handlers]
        assert names.count("iconsmith") == 1

    def test_console_only_on_request(self):
        """Test a console handler is added only for an explicit level."""
        configure_logging()
        assert not _own_stream_handlers()

        configure_logging(console_level="INFO")
        handlers = _own_stream_handlers()
        assert len(handlers) == 1
        assert handlers[0].level == logging.INFO

        configure_logging(console_level="INFO", quiet=True)
        assert not _own_stream_handlers()


class TestGenerationLogger:
    """Tests for GenerationLogger statistics."""

    def test_tracks_stats(self):
        """Test events update the run statistics."""
        generation_logger = GenerationLogger(structlog.get_logger("test"))
        generation_logger.log_icons_collected(Path("svg"), 2, "abc")
        generation_logger.log_glyph_named(Path("svg/a.svg"), "a", 0xE000, renamed=False)
        generation_logger.log_glyph_named(Path("svg/a_.svg"), "a--2", 0xE001, renamed=True)
        generation_logger.log_file_written(Path("icons/icons.css"), 120)
        generation_logger.log_file_written(Path("icons/icons.woff2"), 800)

        stats = generation_logger.stats
        assert stats.icon_count == 2
        assert stats.glyph_count == 2
        assert stats.renamed_count == 1
        assert stats.fingerprint == "abc"
        assert stats.bytes_written == 920

    def test_duration(self):
        """Test duration needs both timestamps."""
        assert GenerationStats().duration_seconds == 0.0
        assert GenerationStats(start_time=10.0, end_time=12.5).duration_seconds == 2.5
