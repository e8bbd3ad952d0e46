"""Tests for logging helpers."""

from __future__ import annotations

import io
import logging

from site_theme_engine.logging import get_logger, setup_logging


class TestLogging:
    def test_get_logger_prefixes_package(self) -> None:
        assert get_logger("registry").name == "site_theme_engine.registry"
        assert get_logger("site_theme_engine.config").name == "site_theme_engine.config"

    def test_setup_logging_writes_to_stream(self) -> None:
        stream = io.StringIO()
        setup_logging("DEBUG", format="%(name)s %(message)s", stream=stream)
        try:
            get_logger("tests").debug("hello")
            assert "site_theme_engine.tests hello" in stream.getvalue()
        finally:
            setup_logging("WARNING")

    def test_level_applies_to_package_logger(self) -> None:
        setup_logging("error")
        try:
            assert logging.getLogger("site_theme_engine").level == logging.ERROR
        finally:
            setup_logging("WARNING")

    def test_file_handler(self, tmp_path) -> None:
        log_file = tmp_path / "themes.log"
        setup_logging("INFO", file=str(log_file))
        try:
            get_logger("tests").info("to file")
        finally:
            for handler in logging.getLogger("site_theme_engine").handlers:
                handler.close()
            setup_logging("WARNING")
        assert "to file" in log_file.read_text()
