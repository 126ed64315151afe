"""
Unit Tests for Logging Setup
"""
import logging
import os
import re

import pytest

from lungstage.utils.logging import StructuredFormatter, setup_logging

LINE = re.compile(r"^\[\d{4}-\d{2}-\d{2}T[\d:.]+\+00:00\] (\w+) +\[([\w.]+)\] (.*)$")


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def _record(level=logging.INFO, msg="COPD staged"):
    return logging.LogRecord("lungstage.test", level, __file__, 1, msg, None, None)


class TestStructuredFormatter:
    """Tests for the shared line format."""

    def test_plain_line(self):
        line = StructuredFormatter().format(_record())
        match = LINE.match(line)
        assert match
        assert match.groups() == ("INFO", "lungstage.test", "COPD staged")

    def test_colour_wraps_line(self):
        line = StructuredFormatter(use_color=True).format(_record(logging.WARNING))
        assert line.startswith("\033[33m")
        assert line.endswith(StructuredFormatter.RESET)


class TestSetupLogging:
    """Tests for root logger configuration."""

    def test_unknown_level_falls_back_to_info(self, restore_root_logger):
        setup_logging("chatty")
        assert restore_root_logger.level == logging.INFO

    def test_file_uses_same_format(self, restore_root_logger, temp_output_dir):
        log_file = os.path.join(temp_output_dir, "lungstage.log")
        setup_logging("DEBUG", log_file)
        logging.getLogger("lungstage.test").warning("strict mode rejected 'sometimes'")
        for handler in restore_root_logger.handlers:
            handler.flush()

        with open(log_file) as fh:
            lines = fh.read().splitlines()
        match = LINE.match(lines[-1])
        assert match
        assert match.groups() == ("WARNING", "lungstage.test", "strict mode rejected 'sometimes'")
