"""Tests for loguru setup."""

import sys

from loguru import logger

from wavelist.core.config import LoggingConfig
from wavelist.core.output import setup_loguru


def test_file_sink_receives_messages(tmp_path):
    log_file = tmp_path / "logs" / "wavelist.log"
    config = LoggingConfig(level="DEBUG", log_file=str(log_file), console_output=False)

    try:
        setup_loguru(config)
        logger.debug("resolved playlist")
    finally:
        # remove() flushes the enqueued file sink
        logger.remove()
        logger.add(sys.stderr)

    content = log_file.read_text(encoding="utf-8")
    assert "Loguru initialized (level=DEBUG" in content
    assert "| DEBUG    |" in content
    assert "resolved playlist" in content


def test_level_filters_file_sink(tmp_path):
    log_file = tmp_path / "wavelist.log"
    config = LoggingConfig(level="WARNING", log_file=str(log_file), console_output=False)

    try:
        setup_loguru(config)
        logger.info("hidden")
        logger.warning("shown")
    finally:
        logger.remove()
        logger.add(sys.stderr)

    content = log_file.read_text(encoding="utf-8")
    assert "hidden" not in content
    assert "shown" in content
