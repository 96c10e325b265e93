import io
import logging
import re

import pytest

from xml_attribute_diff.logging_config import get_logger, setup_logging


@pytest.fixture
def log_stream():
    """Provides a StringIO stream for capturing logs."""
    return io.StringIO()


def test_logger_obtainment():
    logger = get_logger("my_test_app")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "my_test_app"


def test_log_message_formatting(log_stream):
    setup_logging("INFO", stream=log_stream)
    get_logger("format_test_logger").info("A test formatting message.")

    log_pattern = r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2},\d{3} - format_test_logger - INFO - A test formatting message.\n$"
    assert re.match(log_pattern, log_stream.getvalue()) is not None


def test_level_filters_messages(log_stream):
    setup_logging("WARNING", stream=log_stream)
    logger = get_logger("level_test_logger")
    logger.info("This info message should not appear.")
    logger.warning("This warning should appear.")

    output = log_stream.getvalue()
    assert "should not appear" not in output
    assert "This warning should appear." in output


def test_level_name_is_case_insensitive(log_stream):
    setup_logging("debug", stream=log_stream)
    assert get_logger("case_test_logger").getEffectiveLevel() == logging.DEBUG


def test_unknown_level_falls_back_to_warning(log_stream):
    setup_logging("CHATTY", stream=log_stream)
    assert logging.getLogger().level == logging.WARNING


def test_repeated_setup_does_not_stack_handlers(log_stream):
    setup_logging("INFO", stream=log_stream)
    setup_logging("INFO", stream=log_stream)
    get_logger("dedup_logger").info("once")
    assert log_stream.getvalue().count("once") == 1


def test_defaults_to_stderr(capsys):
    setup_logging("ERROR")
    get_logger("stderr_logger").error("to stderr")
    captured = capsys.readouterr()
    assert "to stderr" in captured.err
    assert captured.out == ""
