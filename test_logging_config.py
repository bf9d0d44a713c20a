#!/usr/bin/env python3
"""
Tests for the logging setup helpers.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from utils.logging_config import ColoredFormatter, get_logger, set_log_level, setup_logging


def test_setup_logging_writes_log_file(tmp_path):
    log_file = tmp_path / "logs" / "subsdec.log"

    logger = setup_logging(logging.DEBUG, log_file=log_file, use_colors=False)
    get_logger("core.markup_parser").debug("Closing tag without a matching opening tag")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert logger.name == "subsdec"
    assert logger.level == logging.DEBUG
    assert "Closing tag without a matching opening tag" in log_file.read_text(encoding="utf-8")


def test_set_log_level_updates_handlers():
    logger = get_logger("subsdec.test")
    handler = logging.StreamHandler()
    logger.addHandler(handler)
    try:
        set_log_level(logger, logging.ERROR)

        assert logger.level == logging.ERROR
        assert handler.level == logging.ERROR
    finally:
        logger.removeHandler(handler)


def test_colored_formatter_leaves_record_untouched():
    record = logging.makeLogRecord({'msg': 'No subtitle data', 'levelname': 'WARNING'})

    output = ColoredFormatter('%(levelname)s %(message)s').format(record)

    assert output == f"{ColoredFormatter.COLORS['WARNING']}WARNING{ColoredFormatter.RESET} No subtitle data"
    assert record.levelname == 'WARNING'


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
