# File: tests/test_logger.py
import io

import pytest

from link_scout.logger import LOGGER_NAME, configure, get_logger


def test_child_loggers_reach_console_and_file(tmp_path):
    stream = io.StringIO()
    log_file = tmp_path / "scan.log"
    configure(level="DEBUG", log_file=log_file, stream=stream)

    get_logger("crawler").debug("Checking: %s", "https://ex.com/a")

    assert "LinkScout.crawler | Checking: https://ex.com/a" in stream.getvalue()
    assert "Checking: https://ex.com/a" in log_file.read_text(encoding="utf-8")


def test_reconfigure_replaces_handlers():
    stream = io.StringIO()
    configure(stream=stream)
    lg = configure(level="WARNING", stream=stream)

    get_logger().info("hidden")
    get_logger().warning("shown")

    assert len(lg.handlers) == 1
    assert lg.name == LOGGER_NAME
    assert stream.getvalue().count("shown") == 1
    assert "hidden" not in stream.getvalue()


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        configure(level="LOUD")
