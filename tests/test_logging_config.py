"""Tests for logging setup."""

import logging
from contextlib import contextmanager

from emoji_keywords.utils.logging_config import (
    ColoredFormatter,
    LocationFormatter,
    setup_logging,
)


@contextmanager
def preserved_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield root
    finally:
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)


def make_record(level=logging.INFO):
    return logging.LogRecord(
        name="emoji_keywords.test",
        level=level,
        pathname="/src/emoji_keywords/core/signature.py",
        lineno=42,
        msg="hello %s",
        args=("world",),
        exc_info=None,
    )


def test_location_formatter_adds_location():
    formatter = LocationFormatter(fmt="%(location)s %(message)s")

    assert formatter.format(make_record()) == "signature.py:42 hello world"


def test_colored_formatter_colors_level():
    formatter = ColoredFormatter(fmt="%(levelname)s|%(message)s")
    record = make_record(logging.WARNING)

    output = formatter.format(record)

    assert output.startswith("\033[33mWARNING ")
    assert output.endswith("|hello world")
    assert record.levelname == "WARNING"


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "logs" / "convert.log"

    with preserved_root_logger() as root:
        setup_logging("DEBUG", log_file=log_file, console_output=False)
        logging.getLogger("emoji_keywords.test").info("written to file")
        level = root.level

    assert level == logging.DEBUG
    assert "written to file" in log_file.read_text(encoding="utf-8")


def test_unknown_level_falls_back_to_info():
    with preserved_root_logger() as root:
        setup_logging("VERBOSE", console_output=False)
        level = root.level

    assert level == logging.INFO
