"""
Tests for logging setup.
"""

import logging
from pathlib import Path

from aifile.core.observability.logging_config import _parse_level, setup_logging


class TestParseLevel:
    def test_names(self):
        assert _parse_level("debug") == logging.DEBUG
        assert _parse_level("ERROR") == logging.ERROR

    def test_fallback(self):
        assert _parse_level(None) == logging.WARNING
        assert _parse_level("loud") == logging.WARNING


class TestSetupLogging:
    def test_single_console_handler(self):
        setup_logging("INFO")
        setup_logging("INFO")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.INFO

    def test_minimal_format_at_warning(self):
        setup_logging("WARNING")
        handler = logging.getLogger().handlers[0]
        assert handler.formatter._fmt == "%(message)s"

    def test_log_file(self, tmp_path: Path):
        log_file = tmp_path / "aifile.log"
        setup_logging("WARNING", log_file=str(log_file), log_file_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        logging.getLogger("aifile.test").debug("to the file only")
        for h in root.handlers:
            h.flush()
        assert "to the file only" in log_file.read_text(encoding="utf-8")
        for h in root.handlers:
            if isinstance(h, logging.FileHandler):
                h.close()
